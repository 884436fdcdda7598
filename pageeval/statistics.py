# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 PageEval contributors

"""Token classification cascade and page statistics.

Every non-blank token of a page is put in exactly one bucket by the first
matching rule:

1. exactly one punctuation character
2. number-like (numbers, dates, amounts of money, identifiers)
3. exactly one letter
4. a run of 4+ identical non-numeric characters (after lowercasing)
5. nothing alphabetic left after cleaning
6. fewer than 3 characters left after cleaning
7. one of four "clean" buckets keyed by the non-alpha count after cleaning

Cleaning strips at most 1 leading and at most 3 trailing punctuation
characters.
"""
from __future__ import annotations

import itertools
import re
from typing import Iterable, Iterator, Optional

from .chars import is_currency, is_letter, is_number, is_punctuation
from .config import DEFAULT_SETTINGS, EvaluatorSettings
from .models import PageStatistics, Token, TokenClass

__all__ = [
    "classify_and_count",
    "classify_token",
    "clean_token",
    "is_number_like",
    "join_line_breaks",
]

_NUMBER_SEPARATORS = ".,/%-"

# Matched against the token's character-class shape: "$" currency, "9" number,
# separators verbatim, "?" anything else.
_NUMBER_SHAPE_RE = re.compile(r"\$?[.,/\-]?9+(?:[.,/%\-]9+)*[.,/%\-]?\$?")

_CLEAN_BUCKETS = (
    TokenClass.CLEAN_ALL_ALPHA,
    TokenClass.CLEAN_ONE_NON_ALPHA,
    TokenClass.CLEAN_TWO_NON_ALPHA,
)


def _shape(ch: str) -> str:
    if ch in _NUMBER_SEPARATORS:
        return ch
    if is_currency(ch):
        return "$"
    if is_number(ch):
        return "9"
    return "?"


def is_number_like(text: str) -> bool:
    return _NUMBER_SHAPE_RE.fullmatch("".join(_shape(ch) for ch in text)) is not None


def _has_repeated_run(text: str, run_length: int) -> bool:
    for ch, run in itertools.groupby(text):
        if not is_number(ch) and sum(1 for _ in run) >= run_length:
            return True
    return False


def clean_token(text: str, settings: Optional[EvaluatorSettings] = None) -> str:
    """Strip leading and trailing punctuation, bounded per end by ``settings``."""

    settings = settings or DEFAULT_SETTINGS
    start = 0
    while start < len(text) and start < settings.max_leading_punct and is_punctuation(text[start]):
        start += 1
    end = len(text)
    while end > start and len(text) - end < settings.max_trailing_punct and is_punctuation(text[end - 1]):
        end -= 1
    return text[start:end]


def classify_token(text: str, settings: Optional[EvaluatorSettings] = None) -> TokenClass:
    """Return the bucket for a trimmed, non-empty token."""

    settings = settings or DEFAULT_SETTINGS

    if len(text) == 1 and is_punctuation(text):
        return TokenClass.PUNCTUATION
    if is_number_like(text):
        return TokenClass.NUMBER_LIKE
    if len(text) == 1 and is_letter(text):
        return TokenClass.SINGLE_LETTER
    if _has_repeated_run(text.lower(), settings.repeated_char_run):
        return TokenClass.REPEATED_CHARS

    clean = clean_token(text, settings)
    non_alpha = sum(1 for ch in clean if not is_letter(ch))
    if non_alpha == len(clean):
        return TokenClass.GARBAGE_NON_ALPHA
    if len(clean) < settings.clean_token_min_length:
        return TokenClass.TOO_SHORT_AFTER_CLEAN
    if non_alpha < len(_CLEAN_BUCKETS):
        return _CLEAN_BUCKETS[non_alpha]
    return TokenClass.CLEAN_THREE_OR_MORE_NON_ALPHA


def join_line_breaks(tokens: Iterable[Token]) -> Iterator[str]:
    """Yield trimmed token texts, merging words hyphenated across a line end.

    A token that ends its line with ``-`` absorbs the next token, which is
    then not yielded on its own.
    """

    iterator = iter(tokens)
    for token in iterator:
        text = token.text.strip()
        if token.is_last_on_line and text.endswith("-"):
            following = next(iterator, None)
            if following is not None:
                text = text[:-1] + following.text.strip()
        yield text


def classify_and_count(
    tokens: Iterable[Token], settings: Optional[EvaluatorSettings] = None
) -> PageStatistics:
    """Classify every token of a page and return the filled counters.

    Blank tokens are skipped without touching any counter. The token stream
    is consumed exactly once.
    """

    settings = settings or DEFAULT_SETTINGS
    stats = PageStatistics()
    for text in join_line_breaks(tokens):
        if not text:
            continue
        stats.increment(classify_token(text, settings))
    return stats
