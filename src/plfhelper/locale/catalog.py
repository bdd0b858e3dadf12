# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Per-locale phrase tables.

One immutable ``LocaleConfig`` per ``Locale``, looked up by key. Adding a
locale means adding one entry to ``LOCALES``; nothing is indexed by position.
"""

from __future__ import annotations

import re
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from plfhelper.errors import ConfigurationError


class Locale(StrEnum):
    """Supported game editions."""

    EN = "en"
    DE = "de"
    NL = "nl"


class NumberFormat(BaseModel):
    """Decimal and grouping separators of a culture."""

    culture: str
    decimal_separator: str
    group_separator: str

    model_config = ConfigDict(frozen=True)


class LocaleConfig(BaseModel):
    """Literal phrases the game prints in one locale."""

    locale: Locale
    currency: str
    market_welcome: str
    current_offers: str
    total: str
    delete_filter: str
    players_by_score: str
    players_total: str
    show_my_ranking: str
    back: str
    forward: str
    number_format: NumberFormat

    model_config = ConfigDict(frozen=True)


LOCALES: dict[Locale, LocaleConfig] = {
    Locale.EN: LocaleConfig(
        locale=Locale.EN,
        currency="wT",
        market_welcome="Welcome to the market place!",
        current_offers="Current offers",
        total="Total",
        delete_filter="[Delete filter - show all offers]",
        players_by_score="List of all players according to score",
        players_total="Players total:",
        show_my_ranking="Show my ranking",
        back="<<< back",
        forward="forward >>>",
        number_format=NumberFormat(culture="en-GB", decimal_separator=".", group_separator=","),
    ),
    Locale.DE: LocaleConfig(
        locale=Locale.DE,
        currency="gB",
        market_welcome="Willkommen auf dem großen Marktplatz!",
        current_offers="Aktuelle Angebote",
        total="Gesamt",
        delete_filter="[Filter löschen - alle Angebote zeigen]",
        players_by_score="Liste aller Spieler nach Punktzahl",
        players_total="Spieler gesamt:",
        show_my_ranking="wo bin ich?",
        back="<<< zurück",
        forward="weiter >>>",
        number_format=NumberFormat(culture="de-DE", decimal_separator=",", group_separator="."),
    ),
    Locale.NL: LocaleConfig(
        locale=Locale.NL,
        currency="gB",
        market_welcome="Welkom op de marktplaats!",
        current_offers="Huidige aanbiedingen",
        total="Totaal",
        delete_filter="[Verwijder filter - laat alle aanbiedingen zien]",
        players_by_score="Lijst met alle spelers gesorteerd op de hoogte van de scores",
        players_total="Spelers totaal:",
        show_my_ranking="Waar ben ik?",
        back="<<< terug",
        forward="verder >>>",
        number_format=NumberFormat(culture="nl-NL", decimal_separator=",", group_separator="."),
    ),
}

# "Server EN 3" / "Server NL 1" / "Server 12" (German servers carry no prefix)
_SERVER_LABEL_RE = re.compile(r"Server\s+(?:(?P<lang>EN|NL)\s+)?(?P<server>(?(lang)\d|\d{2}))(?!\d)")


def parse_locale(value: Locale | str) -> Locale:
    """Return the ``Locale`` for an enum member or a two-letter code.

    Raises:
        ConfigurationError: The code is malformed or not a supported locale.
    """
    if isinstance(value, Locale):
        return value
    if not isinstance(value, str) or not re.fullmatch(r"[A-Za-z]{2}", value.strip()):
        raise ConfigurationError(f"Malformed locale code: {value!r}")
    try:
        return Locale(value.strip().lower())
    except ValueError as e:
        raise ConfigurationError(f"No valid locale given: {value!r}") from e


def get_locale_config(value: Locale | str) -> LocaleConfig:
    """Return the built-in phrase table for a locale."""
    return LOCALES[parse_locale(value)]


def parse_server_label(label: str) -> tuple[Locale, int]:
    """Split a spreadsheet title such as ``Server EN 3`` into locale and server number.

    Raises:
        ConfigurationError: The label does not name a game server.
    """
    match = _SERVER_LABEL_RE.search(label)
    if not match:
        raise ConfigurationError(f"Not a server label: {label!r}")
    lang = match.group("lang")
    locale = Locale(lang.lower()) if lang else Locale.DE
    return locale, int(match.group("server"))
