# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 PageEval contributors

"""Command-line entry: score the correctability and quality of an OCR'd page.

Quiet mode prints ``correctable,quality`` and nothing else, so the tool can be
driven from batch scripts. Any failure prints a traceback to stderr and exits
with status 1.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from ._version import __version__
from .config import EvaluatorSettings, env_log_level
from .evaluator import evaluate_file
from .models import DocumentFormat

logger = logging.getLogger("pageeval")


def _configure_logging(level: str) -> None:
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False


def _page_file(value: str) -> Path:
    path = Path(value)
    if not path.exists():
        raise argparse.ArgumentTypeError(f"{value} does not exist")
    if not path.is_file():
        raise argparse.ArgumentTypeError(f"{value} is not a file")
    return path


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        "pageeval",
        description="Compute a score that estimates the correctability of an OCR'd page",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=[fmt.value for fmt in DocumentFormat],
        default=DocumentFormat.HOCR.value,
        help="Specifies the format of the page OCR file",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Enables quiet mode - only page scores are printed, separated by a comma",
    )
    parser.add_argument("--json", action="store_true", help="Print the page statistics and scores as JSON")
    parser.add_argument("--log-level", default=None, help="Logging level (default: $PAGEEVAL_LOG_LEVEL or INFO)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("page_ocr_file", type=_page_file, help="The page OCR file")
    return parser.parse_args(list(argv) if argv is not None else None)


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    _configure_logging(args.log_level or env_log_level())
    document_format = DocumentFormat(args.format)

    machine_readable = args.quiet or args.json

    try:
        if not machine_readable:
            logger.info("Processing %s: %s", document_format.name, args.page_ocr_file)

        result = evaluate_file(args.page_ocr_file, document_format, settings=EvaluatorSettings.from_env())
        scores = result.scores

        if args.json:
            print(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2))
        elif args.quiet:
            print("%f,%f" % (scores.correctable, scores.quality))
        else:
            logger.info("Scores: correctable=%s, quality=%s", scores.correctable, scores.quality)
    except Exception:
        traceback.print_exc(file=sys.stderr)
        raise SystemExit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
