# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""plfhelper: extract prices and ranking counters from Molehill Empire snapshots."""

from __future__ import annotations

from plfhelper.errors import ConfigurationError, NumberDecodeError, PLFHelperError
from plfhelper.locale import Locale, LocaleConfig, ProductCatalog, get_locale_config
from plfhelper.parsing import PageKind, PageParser

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Locale",
    "LocaleConfig",
    "NumberDecodeError",
    "PLFHelperError",
    "PageKind",
    "PageParser",
    "ProductCatalog",
    "get_locale_config",
]
