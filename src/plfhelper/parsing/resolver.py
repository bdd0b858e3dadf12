# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Product name resolution with a single-entry lookup cache."""

from __future__ import annotations

import unicodedata

from plfhelper.locale.products import ProductCatalog


def fold_name(name: str) -> str:
    """Case- and spacing-insensitive comparison key (``"Straße"`` == ``"STRASSE"``)."""
    return " ".join(unicodedata.normalize("NFKC", name).casefold().split())


class NameResolver:
    """Map captured product text to its catalog index.

    Remembers only the most recent successful lookup, keyed by catalog
    identity and query text. Consecutive parses of the same page re-query
    the same product, so one entry is enough. Passing a different catalog
    object invalidates the entry.
    """

    def __init__(self) -> None:
        self._catalog: ProductCatalog | None = None
        self._query: str | None = None
        self._index: int = -1
        self.scans = 0

    def resolve(self, catalog: ProductCatalog, query: str) -> int | None:
        """Return the index of the first catalog entry equal to *query*, or None."""
        if catalog is self._catalog and query == self._query:
            return self._index

        self.scans += 1
        key = fold_name(query)
        for index, name in enumerate(catalog.names):
            if fold_name(name) == key:
                self._catalog = catalog
                self._query = query
                self._index = index
                return index
        return None

    def clear(self) -> None:
        self._catalog = None
        self._query = None
        self._index = -1
