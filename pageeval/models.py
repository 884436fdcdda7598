# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 PageEval contributors

"""Data models shared by the token sources and the statistics engine.

Tokens flow from a format adapter into the statistics engine, which fills a
:class:`PageStatistics` accumulator. Pydantic keeps the records explicit and
gives JSON serialisation for the CLI for free.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

SCORE_UNDEFINED = -1.0


class DocumentFormat(str, Enum):
    TXT = "txt"
    HOCR = "hocr"
    GALEXML = "galexml"


class Token(BaseModel):
    """One word-like unit of a page, in source order."""

    model_config = ConfigDict(frozen=True)

    text: str
    is_last_on_line: bool = False
    token_id: Optional[str] = None
    properties: Dict[str, str] = Field(default_factory=dict)


class TokenClass(str, Enum):
    """Terminal buckets of the classification cascade.

    Each value is the name of the :class:`PageStatistics` counter it feeds.
    """

    PUNCTUATION = "punctuation_tokens"
    NUMBER_LIKE = "number_like_tokens"
    SINGLE_LETTER = "single_letter_tokens"
    REPEATED_CHARS = "repeated_chars_tokens"
    GARBAGE_NON_ALPHA = "garbage_non_alpha_tokens"
    TOO_SHORT_AFTER_CLEAN = "too_short_after_clean_tokens"
    CLEAN_ALL_ALPHA = "clean_all_alpha_tokens"
    CLEAN_ONE_NON_ALPHA = "clean_one_non_alpha_tokens"
    CLEAN_TWO_NON_ALPHA = "clean_two_non_alpha_tokens"
    CLEAN_THREE_OR_MORE_NON_ALPHA = "clean_three_or_more_non_alpha_tokens"


class PageScores(BaseModel):
    correctable: float
    quality: float


class PageStatistics(BaseModel):
    """Per-page token counters.

    Every counted token lands in exactly one bucket, so ``total_tokens`` is
    always the sum of the other ten counters.

    * ``repeated_chars_tokens``: 4 or more identical non-numeric chars in a run
    * ``number_like_tokens``: numbers, dates, amounts of money, identifiers
    * ``punctuation_tokens``: exactly one punctuation character
    * ``single_letter_tokens``: exactly one letter
    * ``garbage_non_alpha_tokens``: nothing alphabetic left after cleaning
    * ``too_short_after_clean_tokens``: fewer than 3 chars left after cleaning
    * ``clean_*_tokens``: 3+ chars after cleaning, keyed by non-alpha count
    """

    total_tokens: int = Field(0, ge=0)
    repeated_chars_tokens: int = Field(0, ge=0)
    number_like_tokens: int = Field(0, ge=0)
    punctuation_tokens: int = Field(0, ge=0)
    single_letter_tokens: int = Field(0, ge=0)
    garbage_non_alpha_tokens: int = Field(0, ge=0)
    too_short_after_clean_tokens: int = Field(0, ge=0)
    clean_all_alpha_tokens: int = Field(0, ge=0)
    clean_one_non_alpha_tokens: int = Field(0, ge=0)
    clean_two_non_alpha_tokens: int = Field(0, ge=0)
    clean_three_or_more_non_alpha_tokens: int = Field(0, ge=0)

    def increment(self, token_class: TokenClass) -> None:
        self.total_tokens += 1
        field = token_class.value
        setattr(self, field, getattr(self, field) + 1)

    def bucket_total(self) -> int:
        return sum(getattr(self, token_class.value) for token_class in TokenClass)

    @property
    def ignored_tokens(self) -> int:
        """Tokens never considered for correction: numbers, lone punctuation, single letters."""
        return self.number_like_tokens + self.punctuation_tokens + self.single_letter_tokens

    @property
    def correctable_tokens(self) -> int:
        """Tokens matching the correctable profile (at most 2 non-alpha chars after cleaning)."""
        return (
            self.clean_all_alpha_tokens
            + self.clean_one_non_alpha_tokens
            + self.clean_two_non_alpha_tokens
        )

    @property
    def correctable_score(self) -> float:
        candidates = self.total_tokens - self.ignored_tokens - self.too_short_after_clean_tokens
        if candidates == 0:
            return SCORE_UNDEFINED
        return self.correctable_tokens / candidates

    @property
    def quality_score(self) -> float:
        if self.total_tokens == 0:
            return SCORE_UNDEFINED
        return self.correctable_tokens / self.total_tokens

    def scores(self) -> PageScores:
        return PageScores(correctable=self.correctable_score, quality=self.quality_score)


class PageInfo(BaseModel):
    """Metadata a format adapter knows about the page it parsed."""

    page_id: Optional[str] = None
    format: DocumentFormat
    ocr_engine: Optional[str] = None
    ocr_capabilities: List[str] = Field(default_factory=list)


class EvaluationResult(BaseModel):
    page: PageInfo
    statistics: PageStatistics
    scores: PageScores
