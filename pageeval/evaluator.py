# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 PageEval contributors

"""Page evaluation: token source -> statistics -> scores."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .config import EvaluatorSettings
from .errors import PageParserError
from .interfaces import ParsedPage, Tokenizer
from .models import DocumentFormat, EvaluationResult
from .sources import parse_page
from .statistics import classify_and_count

__all__ = ["evaluate_file", "evaluate_page"]

logger = logging.getLogger(__name__)


def evaluate_page(page: ParsedPage, settings: Optional[EvaluatorSettings] = None) -> EvaluationResult:
    stats = classify_and_count(page.produce(), settings)
    result = EvaluationResult(page=page.info, statistics=stats, scores=stats.scores())
    logger.debug(
        "Page %s: %d tokens, correctable=%s, quality=%s",
        result.page.page_id,
        stats.total_tokens,
        result.scores.correctable,
        result.scores.quality,
    )
    return result


def evaluate_file(
    path: Union[str, Path],
    document_format: Union[DocumentFormat, str] = DocumentFormat.HOCR,
    settings: Optional[EvaluatorSettings] = None,
    tokenizer: Optional[Tokenizer] = None,
) -> EvaluationResult:
    """Read a UTF-8 page file and evaluate it.

    Undecodable bytes are replaced with U+FFFD rather than failing the page.

    Raises:
        PageParserError: the file could not be opened or parsed.
    """

    path = Path(path)
    try:
        reader = path.open("r", encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.error("Could not open page file %s", path, exc_info=True)
        raise PageParserError(f"Could not open page file {path}") from exc

    with reader:
        page = parse_page(reader, document_format, page_id=path.name, tokenizer=tokenizer)
        return evaluate_page(page, settings)
