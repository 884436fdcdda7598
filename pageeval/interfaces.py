# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 PageEval contributors

"""Interfaces between the format adapters and the statistics engine."""
from __future__ import annotations

from typing import Iterator, List, Protocol

from .models import PageInfo, Token


class Tokenizer(Protocol):
    def tokenize(self, text: str) -> List[str]:
        ...


class TokenSource(Protocol):
    def produce(self) -> Iterator[Token]:
        ...


class ParsedPage(TokenSource, Protocol):
    @property
    def info(self) -> PageInfo:
        ...
