# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exception hierarchy for snapshot parsing."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from plfhelper.locale.catalog import NumberFormat


class PLFHelperError(Exception):
    """Base exception for plfhelper."""

    pass


class ConfigurationError(PLFHelperError, ValueError):
    """Invalid locale, reserved index, catalog or server label."""

    pass


class NumberDecodeError(PLFHelperError, ValueError):
    """Captured numeric text is not well-formed for the locale."""

    def __init__(self, text: str, number_format: NumberFormat) -> None:
        self.text = text
        self.number_format = number_format
        super().__init__(f"{text!r} is not a valid number for {number_format.culture}")
