# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from plfhelper.locale import LOCALES, Locale, LocaleConfig, ProductCatalog
from plfhelper.parsing import PageParser

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def en_catalog() -> ProductCatalog:
    """Small English catalog with multi-word names sharing a first word."""
    return ProductCatalog(("Lettuce", "Carrots", "Red cabbage", "Red currants", "Water lily", "Tomatoes"))


@pytest.fixture
def en_values(en_catalog: ProductCatalog) -> list[float]:
    """Zeroed value vector: one slot per product plus the two reserved slots."""
    return [0.0] * (len(en_catalog) + 2)


@pytest.fixture
def en_parser(en_catalog: ProductCatalog) -> PageParser:
    return PageParser(
        Locale.EN,
        en_catalog,
        players_index=len(en_catalog),
        players1_index=len(en_catalog) + 1,
    )


@pytest.fixture
def en_with_german_numbers() -> LocaleConfig:
    """English phrasing with German decimal commas."""
    return LOCALES[Locale.EN].model_copy(update={"number_format": LOCALES[Locale.DE].number_format})


@pytest.fixture
def town_hall_text() -> str:
    return """Town hall
List of all players according to score
Players total: 4821 ... Show my ranking
55. Gardener    3
56. Digger      2
57. SomePlayer ... 1
58. Molehill    1
61. OtherPlayer ... 1
<<< back   forward >>>
"""


@pytest.fixture
def catalog_dir(tmp_path: Path) -> Path:
    """Directory holding a user catalog for the English locale."""
    root = tmp_path / "catalogs"
    root.mkdir()
    (root / "products_en.yaml").write_text(
        "locale: en\nproducts:\n  - Lettuce\n  - Red cabbage\n  - Sunflowers\n",
        encoding="utf-8",
    )
    return root
