# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Compiled page patterns for one locale and product catalog."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from plfhelper.locale.catalog import LocaleConfig, NumberFormat
from plfhelper.locale.products import ProductCatalog
from plfhelper.parsing.numbers import grouped_integer_pattern

# Horizontal whitespace; a market row never spans lines.
_HS = r"[^\S\n]"
_PRICE = r"[\d.,]{3,}"


@dataclass(frozen=True)
class PagePatterns:
    market: re.Pattern[str]
    town_hall: re.Pattern[str]
    player_one_point: re.Pattern[str]
    players_by_score: str


def _name_pattern(name: str) -> str:
    return f"{_HS}+".join(re.escape(part) for part in name.split())


def product_alternation(catalog: ProductCatalog) -> str:
    """Regex for the product cell: cataloged multi-word names, else one token.

    Longer names are tried first so that "Water lily" never shadows
    "Water lily pad".
    """
    names = sorted(catalog.multi_word, key=len, reverse=True)
    if not names:
        return r"\S+"
    return "(?:" + "|".join(_name_pattern(name) for name in names) + r")|\S+"


def market_pattern(config: LocaleConfig, catalog: ProductCatalog) -> re.Pattern[str]:
    """``<qty> <product> <seller...> <price> <cur> <total> <cur> [<rest>]``, one row per line."""
    currency = re.escape(config.currency)
    return re.compile(
        rf"^{_HS}*[\d.,]+{_HS}+(?P<product>{product_alternation(catalog)}){_HS}+.+?{_HS}+"
        rf"(?P<value>{_PRICE}){_HS}+{currency}{_HS}+{_PRICE}{_HS}+{currency}(?:{_HS}+[^\n]*)?$",
        re.MULTILINE | re.IGNORECASE,
    )


@lru_cache(maxsize=16)
def town_hall_pattern(config: LocaleConfig) -> re.Pattern[str]:
    """``<players total> <N> ... <show my ranking>``, possibly across lines."""
    players = grouped_integer_pattern(config.number_format)
    return re.compile(
        rf"{re.escape(config.players_total)}\s*(?P<player>{players})(?s:.*?){re.escape(config.show_my_ranking)}"
    )


@lru_cache(maxsize=16)
def player_one_point_pattern(number_format: NumberFormat) -> re.Pattern[str]:
    """``<rank>. <name> ... 1``: a ranking line whose score is exactly one point."""
    rank = grouped_integer_pattern(number_format)
    return re.compile(rf"^{_HS}*(?P<position>{rank})\.[^\n]*{_HS}1{_HS}*$", re.MULTILINE)


@lru_cache(maxsize=32)
def build_patterns(config: LocaleConfig, catalog: ProductCatalog) -> PagePatterns:
    """Compile the page patterns once per (locale config, catalog) pair."""
    return PagePatterns(
        market=market_pattern(config, catalog),
        town_hall=town_hall_pattern(config),
        player_one_point=player_one_point_pattern(config.number_format),
        players_by_score=config.players_by_score,
    )
