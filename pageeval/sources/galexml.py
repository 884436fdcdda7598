# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 PageEval contributors

"""Gale XML pages.

A Gale page holds ``<wd pos="x1,y1,x2,y2">`` word elements grouped into
``<p>`` paragraphs, with no explicit line elements. Line ends are inferred
from word positions: when the next word of a paragraph does not start to the
right of the current one, the reader has wrapped to a new line.
"""
from __future__ import annotations

import itertools
from typing import Iterator, List, Optional, TextIO

from bs4.element import Tag

from ..interfaces import ParsedPage
from ..models import DocumentFormat, PageInfo, Token
from .markup import load_markup, parse_failure

__all__ = ["GaleXmlPage", "left_edge"]


def left_edge(pos: Optional[str]) -> Optional[int]:
    if not pos:
        return None
    try:
        return int(pos.split(",")[0].strip())
    except ValueError:
        return None


def _line_ends(words: List[Tag]) -> List[bool]:
    lefts = [left_edge(word.get("pos")) for word in words]
    ends = []
    for index, left in enumerate(lefts):
        if index == len(lefts) - 1:
            ends.append(True)
            continue
        following = lefts[index + 1]
        ends.append(left is not None and following is not None and following <= left)
    return ends


class GaleXmlPage(ParsedPage):
    def __init__(self, page_id: Optional[str], page_element: Tag) -> None:
        self._page_id = page_id
        self._page_element = page_element

    @classmethod
    def parse(cls, reader: TextIO, page_id: Optional[str] = None) -> "GaleXmlPage":
        # html.parser lowercases tag names: <pageID> is found as "pageid"
        soup = load_markup(reader, "Gale XML")

        page_element = soup.find(True, recursive=False)
        if page_element is None or page_element.name != "page":
            raise parse_failure("Gale XML document root is not a page element")

        page_id_element = page_element.find("pageid")
        if page_id_element is not None and page_id_element.get_text(strip=True):
            page_id = page_id_element.get_text(strip=True)

        return cls(page_id, page_element)

    @property
    def info(self) -> PageInfo:
        return PageInfo(page_id=self._page_id, format=DocumentFormat.GALEXML)

    def produce(self) -> Iterator[Token]:
        words = self._page_element.find_all("wd")
        for _, group in itertools.groupby(words, key=lambda word: id(word.find_parent("p"))):
            paragraph = list(group)
            for word, is_last in zip(paragraph, _line_ends(paragraph)):
                pos = word.get("pos")
                yield Token(
                    text=word.get_text(),
                    is_last_on_line=is_last,
                    properties={"pos": str(pos)} if pos else {},
                )
