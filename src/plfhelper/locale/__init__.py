# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Locale phrase tables and product catalogs."""

from __future__ import annotations

from plfhelper.locale.catalog import (
    LOCALES,
    Locale,
    LocaleConfig,
    NumberFormat,
    get_locale_config,
    parse_locale,
    parse_server_label,
)
from plfhelper.locale.products import ProductCatalog, catalog_for, default_catalog, load_catalog

__all__ = [
    "LOCALES",
    "Locale",
    "LocaleConfig",
    "NumberFormat",
    "ProductCatalog",
    "catalog_for",
    "default_catalog",
    "get_locale_config",
    "load_catalog",
    "parse_locale",
    "parse_server_label",
]
