# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from plfhelper.locale import ProductCatalog
from plfhelper.parsing import NameResolver
from plfhelper.parsing.resolver import fold_name


def test_resolves_case_insensitively(en_catalog: ProductCatalog) -> None:
    resolver = NameResolver()
    assert resolver.resolve(en_catalog, "red CABBAGE") == 2
    assert resolver.resolve(en_catalog, "Pumpkins") is None


def test_fold_name_handles_sharp_s_and_spacing() -> None:
    assert fold_name("Straße") == fold_name("STRASSE")
    assert fold_name("Water   lily") == fold_name("water lily")


def test_duplicates_resolve_to_first_entry() -> None:
    catalog = ProductCatalog(("Gerbera", "Salat", "gerbera"))
    assert NameResolver().resolve(catalog, "GERBERA") == 0


def test_repeated_query_uses_cache(en_catalog: ProductCatalog) -> None:
    resolver = NameResolver()
    assert resolver.resolve(en_catalog, "Water lily") == 4
    assert resolver.resolve(en_catalog, "Water lily") == 4
    assert resolver.scans == 1


def test_cache_holds_only_last_lookup(en_catalog: ProductCatalog) -> None:
    resolver = NameResolver()
    resolver.resolve(en_catalog, "Carrots")
    resolver.resolve(en_catalog, "Lettuce")
    resolver.resolve(en_catalog, "Carrots")
    assert resolver.scans == 3


def test_other_catalog_invalidates_cache(en_catalog: ProductCatalog) -> None:
    resolver = NameResolver()
    other = ProductCatalog(("Carrots", "Lettuce"))
    assert resolver.resolve(en_catalog, "Carrots") == 1
    assert resolver.resolve(other, "Carrots") == 0
    assert resolver.scans == 2


def test_misses_are_not_cached(en_catalog: ProductCatalog) -> None:
    resolver = NameResolver()
    resolver.resolve(en_catalog, "Pumpkins")
    resolver.resolve(en_catalog, "Pumpkins")
    assert resolver.scans == 2


def test_clear_forgets_entry(en_catalog: ProductCatalog) -> None:
    resolver = NameResolver()
    resolver.resolve(en_catalog, "Carrots")
    resolver.clear()
    resolver.resolve(en_catalog, "Carrots")
    assert resolver.scans == 2


def test_parser_reuses_cache_across_parses(en_parser, en_values: list[float]) -> None:
    text = "3 Red cabbage Gardener 123.45 wT 370.35 wT [buy]\n"
    en_parser.parse(text, en_values)
    en_parser.parse(text, en_values)
    assert en_parser.resolver.scans == 1
