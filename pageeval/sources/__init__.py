# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 PageEval contributors

"""Format adapters turning a page file into a token stream."""
from __future__ import annotations

from typing import Optional, TextIO, Union

from ..errors import PageParserError
from ..interfaces import ParsedPage, Tokenizer
from ..models import DocumentFormat
from .galexml import GaleXmlPage
from .hocr import HocrPage
from .txt import TxtPage

__all__ = ["GaleXmlPage", "HocrPage", "TxtPage", "parse_page"]


def parse_page(
    reader: TextIO,
    document_format: Union[DocumentFormat, str],
    page_id: Optional[str] = None,
    tokenizer: Optional[Tokenizer] = None,
) -> ParsedPage:
    """Parse one page in ``document_format``.

    Raises:
        PageParserError: the page could not be read, the markup is malformed,
            or the format is not supported.
    """

    if not isinstance(document_format, DocumentFormat):
        try:
            document_format = DocumentFormat(str(document_format).lower())
        except ValueError as exc:
            raise PageParserError(f"Unsupported format: {document_format}") from exc

    if document_format == DocumentFormat.TXT:
        return TxtPage.parse(reader, page_id=page_id, tokenizer=tokenizer)
    if document_format == DocumentFormat.HOCR:
        return HocrPage.parse(reader, page_id=page_id)
    return GaleXmlPage.parse(reader, page_id=page_id)
