# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 PageEval contributors

"""Evaluator settings with environment overrides.

Blank or malformed environment values fall back to the defaults rather than
failing, so a stray export never breaks a batch run.
"""
from __future__ import annotations

import os

from pydantic import BaseModel, Field

__all__ = ["DEFAULT_SETTINGS", "EvaluatorSettings", "env_log_level"]

MAX_LEADING_PUNCT_TO_REMOVE = 1
MAX_TRAILING_PUNCT_TO_REMOVE = 3
CLEAN_TOKEN_LEN_THRESHOLD = 3
REPEATED_CHAR_RUN = 4


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    raw = raw.strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_log_level(default: str = "INFO") -> str:
    return (os.environ.get("PAGEEVAL_LOG_LEVEL") or default).strip().upper()


class EvaluatorSettings(BaseModel):
    """Constants of the cleaning step and the classification cascade."""

    max_leading_punct: int = Field(MAX_LEADING_PUNCT_TO_REMOVE, ge=0)
    max_trailing_punct: int = Field(MAX_TRAILING_PUNCT_TO_REMOVE, ge=0)
    clean_token_min_length: int = Field(CLEAN_TOKEN_LEN_THRESHOLD, ge=1)
    repeated_char_run: int = Field(REPEATED_CHAR_RUN, ge=2)

    @classmethod
    def from_env(cls) -> "EvaluatorSettings":
        return cls(
            max_leading_punct=max(0, _env_int("PAGEEVAL_MAX_LEADING_PUNCT", MAX_LEADING_PUNCT_TO_REMOVE)),
            max_trailing_punct=max(0, _env_int("PAGEEVAL_MAX_TRAILING_PUNCT", MAX_TRAILING_PUNCT_TO_REMOVE)),
            clean_token_min_length=max(1, _env_int("PAGEEVAL_CLEAN_MIN_LENGTH", CLEAN_TOKEN_LEN_THRESHOLD)),
            repeated_char_run=max(2, _env_int("PAGEEVAL_REPEATED_CHAR_RUN", REPEATED_CHAR_RUN)),
        )


DEFAULT_SETTINGS = EvaluatorSettings()
