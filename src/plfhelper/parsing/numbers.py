# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Locale-aware decimal decoding and formatting."""

from __future__ import annotations

import re
from functools import lru_cache

from plfhelper.errors import NumberDecodeError
from plfhelper.locale.catalog import NumberFormat


@lru_cache(maxsize=16)
def _number_regex(number_format: NumberFormat) -> re.Pattern[str]:
    dec = re.escape(number_format.decimal_separator)
    grp = re.escape(number_format.group_separator)
    # Integer part is either plain digits or correctly grouped thousands.
    return re.compile(rf"(?P<int>\d{{1,3}}(?:{grp}\d{{3}})+|\d+)(?:{dec}(?P<frac>\d+))?")


def grouped_integer_pattern(number_format: NumberFormat) -> str:
    """Regex fragment for a whole number, optionally grouped in thousands."""
    grp = re.escape(number_format.group_separator)
    return rf"\d{{1,3}}(?:{grp}\d{{3}})+(?!\d)|\d+"


def decode_number(text: str, number_format: NumberFormat) -> float:
    """Decode *text* written in the locale's convention.

    ``"1.234,5"`` is 1234.5 under ``de-DE`` and not a number under ``en-GB``.

    Raises:
        NumberDecodeError: *text* is not a well-formed number for the locale.
    """
    match = _number_regex(number_format).fullmatch(text.strip())
    if not match:
        raise NumberDecodeError(text, number_format)
    integer = match.group("int").replace(number_format.group_separator, "")
    frac = match.group("frac")
    return float(f"{integer}.{frac}" if frac else integer)


def format_number(value: float, number_format: NumberFormat, decimals: int | None = None) -> str:
    """Render *value* with the locale's decimal separator and no grouping.

    Without *decimals* trailing zeros are dropped (``123.4`` -> ``"123,4"``).
    """
    if decimals is not None:
        text = f"{value:.{decimals}f}"
    else:
        text = f"{value:.10f}".rstrip("0").rstrip(".")
        if text in ("-0", ""):
            text = "0"
    return text.replace(".", number_format.decimal_separator)
