# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 PageEval contributors

"""Shared loading for the XML-based page formats."""
from __future__ import annotations

import logging
from typing import TextIO
from xml.etree import ElementTree

from bs4 import BeautifulSoup

from ..errors import PageParserError

__all__ = ["load_markup", "parse_failure"]

logger = logging.getLogger(__name__)


def parse_failure(message: str) -> PageParserError:
    logger.error(message)
    return PageParserError(message)


def load_markup(reader: TextIO, kind: str) -> BeautifulSoup:
    """Read a page document, reject it unless it is well-formed XML, and soup it.

    BeautifulSoup recovers from any markup, so a truncated file would still be
    scored from a partial page; the well-formedness check is done first with
    :mod:`xml.etree`.
    """

    try:
        markup = reader.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("%s parser error", kind, exc_info=True)
        raise PageParserError(f"Could not read {kind} page") from exc

    try:
        ElementTree.fromstring(markup)
    except ElementTree.ParseError as exc:
        logger.error("%s page is not well-formed: %s", kind, exc)
        raise PageParserError(f"Malformed {kind} page: {exc}") from exc

    return BeautifulSoup(markup, "html.parser")
