# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 PageEval contributors

"""hOCR pages.

Words are the ``ocrx_word`` elements of each ``ocr_line`` under the first
``ocr_page`` of the document. Only the first page of a multi-page file is
evaluated.
"""
from __future__ import annotations

from typing import Dict, Iterator, List, Optional, TextIO

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..interfaces import ParsedPage
from ..models import DocumentFormat, PageInfo, Token
from .markup import load_markup, parse_failure

__all__ = ["HocrPage", "parse_title_properties"]


def parse_title_properties(title: str) -> Dict[str, str]:
    """Split an hOCR ``title`` (``"bbox 1 2 3 4; x_wconf 93"``) into properties."""

    properties: Dict[str, str] = {}
    for prop in title.split(";"):
        name, _, value = prop.strip().partition(" ")
        if name:
            properties[name] = value
    return properties


def _meta_content(soup: BeautifulSoup, name: str) -> str:
    meta = soup.find("meta", attrs={"name": name})
    if meta is None:
        return ""
    return str(meta.get("content") or "")


class HocrPage(ParsedPage):
    def __init__(
        self,
        page_id: Optional[str],
        page_element: Tag,
        ocr_engine: Optional[str] = None,
        ocr_capabilities: Optional[List[str]] = None,
    ) -> None:
        self._page_id = page_id
        self._page_element = page_element
        self._ocr_engine = ocr_engine
        self._ocr_capabilities = list(ocr_capabilities or [])

    @classmethod
    def parse(cls, reader: TextIO, page_id: Optional[str] = None) -> "HocrPage":
        soup = load_markup(reader, "hOCR")

        page_element = soup.find(class_="ocr_page")
        if page_element is None:
            raise parse_failure("No ocr_page element found in hOCR document")

        return cls(
            page_id=page_element.get("id") or page_id,
            page_element=page_element,
            ocr_engine=_meta_content(soup, "ocr-system") or None,
            ocr_capabilities=_meta_content(soup, "ocr-capabilities").split(),
        )

    @property
    def info(self) -> PageInfo:
        return PageInfo(
            page_id=self._page_id,
            format=DocumentFormat.HOCR,
            ocr_engine=self._ocr_engine,
            ocr_capabilities=self._ocr_capabilities,
        )

    def produce(self) -> Iterator[Token]:
        for line in self._page_element.find_all(class_="ocr_line"):
            words = line.find_all(class_="ocrx_word")
            for index, word in enumerate(words):
                yield Token(
                    text=word.get_text(),
                    is_last_on_line=index == len(words) - 1,
                    token_id=word.get("id"),
                    properties=parse_title_properties(str(word.get("title") or "")),
                )
