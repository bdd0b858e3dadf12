# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import pytest

from plfhelper.levels import MIN_POINTS, TITLES, Level, level_for_points, points_to_next_level


def test_tables_cover_every_level() -> None:
    assert len(MIN_POINTS) == len(Level) == len(TITLES)
    assert list(MIN_POINTS) == sorted(MIN_POINTS)


@pytest.mark.parametrize(
    ("points", "expected"),
    [
        (0, Level.SALATSCHLEUDERER),
        (299, Level.SALATSCHLEUDERER),
        (300, Level.ERBSENZAEHLER),
        (99_999_998, Level.GERBERAGERBER),
        (99_999_999, Level.WURZELIMPERATOR),
        (2_000_000_000, Level.SUPERZWERG),
    ],
)
def test_level_for_points(points: int, expected: Level) -> None:
    assert level_for_points(points) is expected


def test_negative_points_rejected() -> None:
    with pytest.raises(ValueError):
        level_for_points(-1)


def test_points_to_next_level() -> None:
    assert points_to_next_level(250) == 50
    assert points_to_next_level(900_000_000) is None
