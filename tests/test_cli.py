# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for the command line interface."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

from plfhelper.cli import cli

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def runner(tmp_path: Path) -> CliRunner:
    return CliRunner(env={"PLFHELPER_CATALOG_ROOT": str(tmp_path / "none"), "PLFHELPER_LOG_LEVEL": "WARNING"})


def test_parse_market_and_town_hall(runner: CliRunner, tmp_path: Path, catalog_dir: Path, town_hall_text: str) -> None:
    market = tmp_path / "market.txt"
    market.write_text("3 Red cabbage Gardener 123.45 wT 370.35 wT [buy]\n", encoding="utf-8")
    town_hall = tmp_path / "town_hall.txt"
    town_hall.write_text(town_hall_text, encoding="utf-8")

    result = runner.invoke(
        cli,
        ["parse", "--locale", "en", "--catalog", str(catalog_dir / "products_en.yaml"), str(market), str(town_hall)],
    )

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["changed"] == [True, True]
    assert data["values"] == [0.0, 123.45, 0.0, 4821.0, 61.0]


def test_parse_starts_from_values_file(runner: CliRunner, tmp_path: Path, catalog_dir: Path) -> None:
    snapshot = tmp_path / "market.txt"
    snapshot.write_text("1 Lettuce Seller 2.50 wT 2.50 wT\n", encoding="utf-8")
    values = tmp_path / "values.yaml"
    values.write_text("[2.5, 7]\n", encoding="utf-8")

    result = runner.invoke(
        cli,
        ["parse", "--catalog", str(catalog_dir / "products_en.yaml"), "--values", str(values), str(snapshot)],
    )

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["changed"] == [False]
    assert data["values"] == [2.5, 7.0, 0.0, 0.0, 0.0]


def test_parse_rejects_unknown_locale(runner: CliRunner, tmp_path: Path) -> None:
    snapshot = tmp_path / "market.txt"
    snapshot.write_text("", encoding="utf-8")
    result = runner.invoke(cli, ["parse", "--locale", "fr", str(snapshot)])
    assert result.exit_code == 2


def test_parse_rejects_catalog_for_other_locale(runner: CliRunner, tmp_path: Path, catalog_dir: Path) -> None:
    snapshot = tmp_path / "market.txt"
    snapshot.write_text("", encoding="utf-8")
    result = runner.invoke(cli, ["parse", "--locale", "de", "--catalog", str(catalog_dir / "products_en.yaml"), str(snapshot)])
    assert result.exit_code == 2


def test_parse_reports_malformed_number(runner: CliRunner, tmp_path: Path) -> None:
    snapshot = tmp_path / "market.txt"
    snapshot.write_text("3 Lettuce Gardener 1.2.3 wT 370.35 wT\n", encoding="utf-8")
    result = runner.invoke(cli, ["parse", "--locale", "en", str(snapshot)])
    assert result.exit_code == 1
    assert "1.2.3" in result.output


def test_locales(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["locales"])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert len(lines) == 3
    assert lines[1].startswith("de  de-DE  currency=gB")


@pytest.mark.parametrize(
    ("points", "expected"),
    [("250", "Salatschleuderer (50 points to next level)"), ("900000000", "Superzwerg")],
)
def test_level(runner: CliRunner, points: str, expected: str) -> None:
    result = runner.invoke(cli, ["level", points])
    assert result.exit_code == 0
    assert result.stdout.strip() == expected
