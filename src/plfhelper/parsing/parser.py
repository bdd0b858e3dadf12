# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Page parser for Molehill Empire text snapshots.

A snapshot is whatever text the player copied out of the browser. The parser
works out whether it shows the market or the town hall ranking, pulls the
relevant numbers out of it and writes them into the caller's value vector.
"""

from __future__ import annotations

import math
import re
from collections.abc import MutableSequence, Sequence
from enum import StrEnum

from plfhelper.errors import ConfigurationError
from plfhelper.locale.catalog import Locale, LocaleConfig, get_locale_config, parse_locale
from plfhelper.locale.products import ProductCatalog
from plfhelper.logging import get_logger
from plfhelper.parsing.numbers import decode_number
from plfhelper.parsing.patterns import PagePatterns, build_patterns, player_one_point_pattern
from plfhelper.parsing.resolver import NameResolver

logger = get_logger(__name__)

UNSET_INDEX = -1

# Absolute difference below which a rewritten slot counts as unchanged.
CHANGE_TOLERANCE = 1e-6


class PageKind(StrEnum):
    """Recognized snapshot layouts."""

    MARKET = "market"
    TOWN_HALL = "town_hall"
    NONE = "none"


def _changed(old: float, new: float) -> bool:
    return not math.isclose(old, new, rel_tol=0.0, abs_tol=CHANGE_TOLERANCE)


def _validate_index(name: str, value: int) -> int:
    if value < 0:
        raise ConfigurationError(f"{name} has to be greater than -1, got {value}")
    return value


class PageParser:
    """Parse market and town hall snapshots into a value vector.

    One instance per locale and scraping session. Apart from the name
    resolver cache and the bound catalog it keeps no state between calls.
    Not safe for concurrent use without external locking.
    """

    def __init__(
        self,
        locale: Locale | str,
        catalog: ProductCatalog | Sequence[str] | None = None,
        *,
        players_index: int = UNSET_INDEX,
        players1_index: int = UNSET_INDEX,
        locale_config: LocaleConfig | None = None,
    ) -> None:
        self.locale = parse_locale(locale)
        if locale_config is None:
            locale_config = get_locale_config(self.locale)
        elif locale_config.locale is not self.locale:
            raise ConfigurationError(
                f"Locale config is for {locale_config.locale.value}, parser locale is {self.locale.value}"
            )
        self.config = locale_config

        self._players_index = UNSET_INDEX
        self._players1_index = UNSET_INDEX
        if players_index != UNSET_INDEX:
            self.players_index = players_index
        if players1_index != UNSET_INDEX:
            self.players1_index = players1_index

        self._catalog: ProductCatalog | None = ProductCatalog.of(catalog) if catalog is not None else None
        self.resolver = NameResolver()

    @property
    def players_index(self) -> int:
        """Value-vector slot holding the total player count."""
        return self._players_index

    @players_index.setter
    def players_index(self, value: int) -> None:
        self._players_index = _validate_index("players_index", value)

    @property
    def players1_index(self) -> int:
        """Value-vector slot holding the rank of the last player with one point."""
        return self._players1_index

    @players1_index.setter
    def players1_index(self, value: int) -> None:
        self._players1_index = _validate_index("players1_index", value)

    @property
    def ready(self) -> bool:
        return self._players_index != UNSET_INDEX and self._players1_index != UNSET_INDEX

    @property
    def catalog(self) -> ProductCatalog | None:
        return self._catalog

    def _bind_catalog(self, names: ProductCatalog | Sequence[str] | None) -> ProductCatalog:
        if names is None:
            if self._catalog is None:
                raise ConfigurationError("No product catalog bound to the parser")
            return self._catalog
        if isinstance(names, ProductCatalog):
            self._catalog = names
        elif self._catalog is None or self._catalog.names != tuple(names):
            # Same names keep the bound object so the resolver cache stays valid.
            self._catalog = ProductCatalog.of(names)
        return self._catalog

    def patterns(self, names: ProductCatalog | Sequence[str] | None = None) -> PagePatterns:
        return build_patterns(self.config, self._bind_catalog(names))

    def classify(self, text: str, names: ProductCatalog | Sequence[str] | None = None) -> PageKind:
        """Decide which page *text* shows. The market wins over the town hall."""
        patterns = self.patterns(names)
        if patterns.market.search(text):
            return PageKind.MARKET
        if patterns.players_by_score in text and patterns.town_hall.search(text):
            return PageKind.TOWN_HALL
        return PageKind.NONE

    def parse(
        self,
        text: str,
        values: MutableSequence[float],
        names: ProductCatalog | Sequence[str] | None = None,
    ) -> bool:
        """Update *values* from a snapshot.

        Args:
            text: Snapshot text, possibly surrounded by other page chrome
            values: Caller-owned value vector, modified in place
            names: Product catalog; defaults to the one bound at construction

        Returns:
            True if any slot changed by more than CHANGE_TOLERANCE

        Raises:
            NumberDecodeError: A captured number is malformed for the locale
        """
        if not self.ready:
            logger.debug("parse_skipped_unset_indices", locale=self.locale.value)
            return False

        catalog = self._bind_catalog(names)
        patterns = build_patterns(self.config, catalog)

        match = patterns.market.search(text)
        if match:
            return self.parse_market(match, values, catalog)
        if patterns.players_by_score in text:
            match = patterns.town_hall.search(text)
            if match:
                return self.parse_town_hall(match, text, values)

        logger.debug("parse_no_page_recognized", locale=self.locale.value)
        return False

    def parse_market(
        self,
        match: re.Match[str],
        values: MutableSequence[float],
        catalog: ProductCatalog | Sequence[str] | None = None,
    ) -> bool:
        catalog = self._bind_catalog(catalog)
        product = match.group("product")
        index = self.resolver.resolve(catalog, product)
        if index is None:
            logger.debug("market_soft_miss", product=product, locale=self.locale.value)
            return False

        previous = values[index]
        values[index] = decode_number(match.group("value"), self.config.number_format)
        changed = _changed(previous, values[index])
        logger.debug("market_value_updated", product=catalog[index], index=index, value=values[index], changed=changed)
        return changed

    def parse_town_hall(self, match: re.Match[str], text: str, values: MutableSequence[float]) -> bool:
        if not self.ready:
            return False

        number_format = self.config.number_format
        previous_players = values[self._players_index]
        previous_players1 = values[self._players1_index]

        values[self._players_index] = decode_number(match.group("player"), number_format)

        last = None
        for last in player_one_point_pattern(number_format).finditer(text):
            pass
        if last is not None:
            values[self._players1_index] = decode_number(last.group("position"), number_format)

        changed = _changed(previous_players, values[self._players_index]) or _changed(
            previous_players1, values[self._players1_index]
        )
        logger.debug(
            "town_hall_updated",
            players=values[self._players_index],
            players1=values[self._players1_index],
            changed=changed,
        )
        return changed

    def clone(self) -> PageParser:
        """Copy locale, catalog and reserved indices; the resolver cache starts empty."""
        return PageParser(
            self.locale,
            self._catalog,
            players_index=self._players_index,
            players1_index=self._players1_index,
            locale_config=self.config,
        )
