# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 PageEval contributors

"""Unicode character classes used by the tokenizer and the classification cascade.

Classes follow the Unicode general category reported by :mod:`unicodedata`:
letters are ``L*``, punctuation ``P*``, numbers ``N*`` and currency symbols
``Sc``. Decimal digits (``Nd``) are what the tokenizer groups into numbers.
"""
from __future__ import annotations

import unicodedata

__all__ = [
    "is_currency",
    "is_decimal_digit",
    "is_letter",
    "is_number",
    "is_punctuation",
]


def is_letter(ch: str) -> bool:
    return unicodedata.category(ch).startswith("L")


def is_punctuation(ch: str) -> bool:
    return unicodedata.category(ch).startswith("P")


def is_number(ch: str) -> bool:
    return unicodedata.category(ch).startswith("N")


def is_decimal_digit(ch: str) -> bool:
    return unicodedata.category(ch) == "Nd"


def is_currency(ch: str) -> bool:
    return unicodedata.category(ch) == "Sc"
