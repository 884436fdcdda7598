# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 PageEval contributors

"""Plain-text pages."""
from __future__ import annotations

import logging
import re
from typing import Iterator, List, Optional, TextIO

from ..chars import is_letter
from ..errors import PageParserError
from ..interfaces import ParsedPage, Tokenizer
from ..models import DocumentFormat, PageInfo, Token
from ..tokenizer import SimpleTokenizer

__all__ = ["TxtPage", "merge_hyphenated_words", "normalize_lines"]

logger = logging.getLogger(__name__)

# "-" at a line end between two words; \w also admits No/Nl numerics, so the
# boundary characters are checked against is_letter before merging
_HYPHENATED_WORD_RE = re.compile(r"(\S*[^\W\d_])-\n([^\W\d_]\S*)\s*")


def normalize_lines(reader: TextIO) -> str:
    """Strip every line, drop blank ones and terminate each kept line with ``\\n``."""

    kept = []
    for line in reader:
        line = line.strip()
        if line:
            kept.append(line + "\n")
    return "".join(kept)


def merge_hyphenated_words(text: str) -> str:
    """Join words split by a hyphen at a line end when both sides are letters."""

    pieces = []
    copied = 0
    search_from = 0
    while True:
        match = _HYPHENATED_WORD_RE.search(text, search_from)
        if match is None:
            break
        head, tail = match.group(1), match.group(2)
        if is_letter(head[-1]) and is_letter(tail[0]):
            pieces.append(text[copied : match.start()])
            pieces.append(head + tail + "\n")
            copied = search_from = match.end()
        else:
            # the next word may still start a merge of its own
            search_from = match.start(2)
    pieces.append(text[copied:])
    return "".join(pieces)


class TxtPage(ParsedPage):
    """A page of free text split into tokens by a word tokenizer.

    Line structure is lost after tokenizing, so hyphenated line breaks are
    merged on the raw text and no token is marked as last on its line.
    """

    def __init__(self, page_id: Optional[str], tokens: List[str]) -> None:
        self._page_id = page_id
        self._tokens = tokens

    @classmethod
    def parse(
        cls,
        reader: TextIO,
        page_id: Optional[str] = None,
        tokenizer: Optional[Tokenizer] = None,
    ) -> "TxtPage":
        tokenizer = tokenizer or SimpleTokenizer()
        try:
            text = normalize_lines(reader)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Txt parser error", exc_info=True)
            raise PageParserError(f"Could not read text page {page_id!r}") from exc

        return cls(page_id, tokenizer.tokenize(merge_hyphenated_words(text)))

    @property
    def info(self) -> PageInfo:
        return PageInfo(page_id=self._page_id, format=DocumentFormat.TXT)

    def produce(self) -> Iterator[Token]:
        return (Token(text=token) for token in self._tokens)
