# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 PageEval contributors

"""Character-class word tokenizer for free text."""
from __future__ import annotations

from typing import List

from .chars import is_decimal_digit, is_letter
from .interfaces import Tokenizer

__all__ = ["SimpleTokenizer"]

_WHITESPACE = 0
_ALPHABETIC = 1
_NUMERIC = 2
_OTHER = 3


def _char_type(ch: str) -> int:
    if ch.isspace():
        return _WHITESPACE
    if is_letter(ch):
        return _ALPHABETIC
    if is_decimal_digit(ch):
        return _NUMERIC
    return _OTHER


class SimpleTokenizer(Tokenizer):
    """Split text into runs of letters, runs of digits and runs of other symbols.

    Whitespace only separates tokens. A run of other symbols is broken
    whenever the symbol changes, so ``"####"`` stays one token while ``"?!"``
    becomes two.
    """

    def tokenize(self, text: str) -> List[str]:
        tokens: List[str] = []
        state = _WHITESPACE
        start = 0
        previous = ""
        for index, ch in enumerate(text):
            char_type = _char_type(ch)
            if state == _WHITESPACE:
                if char_type != _WHITESPACE:
                    start = index
            elif char_type != state or (char_type == _OTHER and ch != previous):
                tokens.append(text[start:index])
                start = index
            state = char_type
            previous = ch
        if state != _WHITESPACE:
            tokens.append(text[start:])
        return tokens
