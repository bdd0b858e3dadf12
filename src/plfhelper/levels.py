# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Player level titles and the points needed to reach them."""

from __future__ import annotations

from bisect import bisect_right
from enum import IntEnum


class Level(IntEnum):
    SALATSCHLEUDERER = 0
    ERBSENZAEHLER = 1
    TOMATENDEALER = 2
    ZWIEBELTRETER = 3
    ERNTEHELFER = 4
    KARTOFFELSCHAELER = 5
    GRUENZEUGVERTRETER = 6
    MAULWURFJAEGER = 7
    KLEINGAERTNER = 8
    BLAUBEERBARON = 9
    VOGELSCHEUCHER = 10
    ROSENKAVALIER = 11
    GEMUESEGURU = 12
    KIRSCHKERNSPUCKER = 13
    ZAUNKOENIG = 14
    WALNUSSWAECHTER = 15
    LILIENLOBBYIST = 16
    ORCHIDEENZUECHTER = 17
    KROKUSPOKUS = 18
    UNKRAUTSCHRECK = 19
    GERBERAGERBER = 20
    WURZELIMPERATOR = 21
    SUPERIMPERATOR = 22
    SEEROSENFEE = 23
    ENGELSTROMPETER = 24
    BOHNENBARON = 25
    SUPERZWERG = 26


TITLES: dict[Level, str] = {
    Level.SALATSCHLEUDERER: "Salatschleuderer",
    Level.ERBSENZAEHLER: "Erbsenzähler",
    Level.TOMATENDEALER: "Tomatendealer",
    Level.ZWIEBELTRETER: "Zwiebeltreter",
    Level.ERNTEHELFER: "Erntehelfer",
    Level.KARTOFFELSCHAELER: "Kartoffelschäler",
    Level.GRUENZEUGVERTRETER: "Grünzeugvertreter",
    Level.MAULWURFJAEGER: "Maulwurfjäger",
    Level.KLEINGAERTNER: "Kleingärtner",
    Level.BLAUBEERBARON: "Blaubeerbaron",
    Level.VOGELSCHEUCHER: "Vogelscheucher",
    Level.ROSENKAVALIER: "Rosenkavalier",
    Level.GEMUESEGURU: "Gemüseguru",
    Level.KIRSCHKERNSPUCKER: "Kirschkernspucker",
    Level.ZAUNKOENIG: "Zaunkönig",
    Level.WALNUSSWAECHTER: "Walnusswächter",
    Level.LILIENLOBBYIST: "Lilienlobbyist",
    Level.ORCHIDEENZUECHTER: "Orchideenzüchter",
    Level.KROKUSPOKUS: "Krokuspokus",
    Level.UNKRAUTSCHRECK: "Unkrautschreck",
    Level.GERBERAGERBER: "Gerberagerber",
    Level.WURZELIMPERATOR: "Wurzelimperator",
    Level.SUPERIMPERATOR: "Superimperator",
    Level.SEEROSENFEE: "Seerosenfee",
    Level.ENGELSTROMPETER: "Engelstrompeter",
    Level.BOHNENBARON: "Bohnenbaron",
    Level.SUPERZWERG: "Superzwerg",
}

# Minimum points per level, ascending and indexed by Level.
MIN_POINTS: tuple[int, ...] = (
    0,
    300,
    1_000,
    5_000,
    15_000,
    40_000,
    100_000,
    200_000,
    350_000,
    550_000,
    800_000,
    1_500_000,
    2_500_000,
    4_500_000,
    7_500_000,
    15_000_000,
    22_000_000,
    30_000_000,
    40_000_000,
    55_000_000,
    70_000_000,
    99_999_999,
    300_000_000,
    450_000_000,
    600_000_000,
    750_000_000,
    900_000_000,
)


def level_for_points(points: int) -> Level:
    """Return the highest level whose threshold *points* has reached."""
    if points < 0:
        raise ValueError(f"points must not be negative, got {points}")
    return Level(bisect_right(MIN_POINTS, points) - 1)


def points_to_next_level(points: int) -> int | None:
    """Points still missing for the next level, None at the top level."""
    level = level_for_points(points)
    if level == Level.SUPERZWERG:
        return None
    return MIN_POINTS[level + 1] - points
