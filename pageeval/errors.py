# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 PageEval contributors

"""Exceptions raised by the page parsing layer."""
from __future__ import annotations

__all__ = ["PageParserError"]


class PageParserError(Exception):
    """A page file could not be turned into a token stream.

    Raised for I/O failures, malformed or unexpected markup and unsupported
    formats. When another exception caused the failure it is chained as
    ``__cause__``.
    """
