"""PageEval: correctability and quality scores for OCR'd pages."""

from __future__ import annotations

from ._version import __version__
from .config import EvaluatorSettings
from .errors import PageParserError
from .evaluator import evaluate_file, evaluate_page
from .interfaces import ParsedPage, Tokenizer, TokenSource
from .models import (
    DocumentFormat,
    EvaluationResult,
    PageInfo,
    PageScores,
    PageStatistics,
    Token,
    TokenClass,
)
from .sources import GaleXmlPage, HocrPage, TxtPage, parse_page
from .statistics import classify_and_count, classify_token, clean_token, join_line_breaks
from .tokenizer import SimpleTokenizer

__all__ = [
    "DocumentFormat",
    "EvaluationResult",
    "EvaluatorSettings",
    "GaleXmlPage",
    "HocrPage",
    "PageInfo",
    "PageParserError",
    "PageScores",
    "PageStatistics",
    "ParsedPage",
    "SimpleTokenizer",
    "Token",
    "TokenClass",
    "TokenSource",
    "Tokenizer",
    "TxtPage",
    "__version__",
    "classify_and_count",
    "classify_token",
    "clean_token",
    "evaluate_file",
    "evaluate_page",
    "join_line_breaks",
    "parse_page",
]
