# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Snapshot parsing: page classification, extraction and number decoding."""

from __future__ import annotations

from plfhelper.parsing.numbers import decode_number, format_number
from plfhelper.parsing.parser import CHANGE_TOLERANCE, UNSET_INDEX, PageKind, PageParser
from plfhelper.parsing.resolver import NameResolver

__all__ = [
    "CHANGE_TOLERANCE",
    "UNSET_INDEX",
    "NameResolver",
    "PageKind",
    "PageParser",
    "decode_number",
    "format_number",
]
