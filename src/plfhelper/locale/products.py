# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Product catalogs: the ordered product names of one locale."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

import yaml

from plfhelper.errors import ConfigurationError
from plfhelper.locale.catalog import Locale, parse_locale
from plfhelper.logging import get_logger
from plfhelper.paths import catalog_file

logger = get_logger(__name__)


@dataclass(frozen=True)
class ProductCatalog:
    """Ordered, immutable sequence of product names.

    Index positions line up with value-vector slots. Duplicates are not
    rejected; lookups resolve to the first occurrence.
    """

    names: tuple[str, ...]

    def __post_init__(self) -> None:
        if isinstance(self.names, str):
            raise ConfigurationError("Product names must be a sequence of strings, not a single string")
        names = tuple(self.names)
        if not all(isinstance(name, str) for name in names):
            raise ConfigurationError("Product names must all be strings")
        object.__setattr__(self, "names", names)

    @classmethod
    def of(cls, names: Sequence[str]) -> ProductCatalog:
        return names if isinstance(names, ProductCatalog) else cls(tuple(names))

    @property
    def multi_word(self) -> tuple[str, ...]:
        """Names that contain whitespace, in catalog order."""
        return tuple(name for name in self.names if any(ch.isspace() for ch in name))

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __getitem__(self, index: int) -> str:
        return self.names[index]


_DEFAULT_PRODUCTS: dict[Locale, tuple[str, ...]] = {
    Locale.EN: (
        "Lettuce",
        "Carrots",
        "Cucumbers",
        "Radishes",
        "Strawberries",
        "Tomatoes",
        "Onions",
        "Spinach",
        "Cauliflowers",
        "Potatoes",
        "Asparagus",
        "Zucchini",
        "Blueberries",
        "Raspberries",
        "Red currants",
        "Blackberries",
        "Mirabelles",
        "Apples",
        "Pumpkins",
        "Pears",
        "Cherries",
        "Plums",
        "Walnuts",
        "Olives",
        "Red cabbage",
        "Sunflowers",
        "Daisies",
        "Gerber daisy",
        "Cow lily",
        "Water parsnip",
        "Water violet",
        "Water soldier",
        "Water lily",
        "Water knotweed",
        "Marsh marigold",
        "Swamp lantern",
        "Angel's trumpet",
    ),
    Locale.DE: (
        "Salat",
        "Karotte",
        "Gurke",
        "Radieschen",
        "Erdbeere",
        "Tomate",
        "Zwiebel",
        "Spinat",
        "Blumenkohl",
        "Kartoffel",
        "Spargel",
        "Zucchini",
        "Heidelbeere",
        "Himbeere",
        "Johannisbeere",
        "Brombeere",
        "Mirabelle",
        "Apfel",
        "Kürbis",
        "Birne",
        "Kirsche",
        "Pflaume",
        "Walnuss",
        "Olive",
        "Rotkohl",
        "Sonnenblume",
        "Gänseblümchen",
        "Gerbera",
        "gelbe Teichrose",
        "Wasserpastinake",
        "Wasserfeder",
        "Krebsschere",
        "Seerose",
        "Wasserknöterich",
        "Sumpfdotterblume",
        "Stinktierkohl",
        "Engelstrompete",
    ),
    Locale.NL: (
        "Sla",
        "Wortels",
        "Komkommers",
        "Radijsjes",
        "Aardbeien",
        "Tomaten",
        "Uien",
        "Spinazie",
        "Bloemkool",
        "Aardappelen",
        "Asperges",
        "Courgettes",
        "Bosbessen",
        "Frambozen",
        "Rode aalbes",
        "Bramen",
        "Mirabellen",
        "Appels",
        "Pompoenen",
        "Peren",
        "Kersen",
        "Pruimen",
        "Walnoten",
        "Olijven",
        "Rode kool",
        "Zonnebloemen",
        "Madeliefjes",
        "Gerbera",
        "Koe lelie",
        "Water pastinaak",
    ),
}


def default_catalog(locale: Locale | str) -> ProductCatalog:
    """Return the bundled product catalog for a locale."""
    return ProductCatalog(names=_DEFAULT_PRODUCTS[parse_locale(locale)])


def load_catalog(path: Path | str) -> tuple[Locale, ProductCatalog]:
    """Load a catalog file of the form ``{locale: xx, products: [...]}``.

    Raises:
        ConfigurationError: The file is not valid YAML or misses a field.
    """
    path = Path(path)
    logger.info("catalog_loading", path=str(path))
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Catalog file {path} is not valid YAML: {e}") from e
    if not isinstance(data, dict) or "locale" not in data or "products" not in data:
        raise ConfigurationError(f"Catalog file {path} needs 'locale' and 'products' keys")
    locale = parse_locale(str(data["locale"]))
    products = data["products"]
    if not isinstance(products, list):
        raise ConfigurationError(f"Catalog file {path}: 'products' must be a list")
    return locale, ProductCatalog(names=tuple(products))


def catalog_for(locale: Locale | str, root: Path | None = None) -> ProductCatalog:
    """Return the user catalog under *root* if present, else the bundled one."""
    locale = parse_locale(locale)
    if root is not None:
        path = catalog_file(root, locale.value)
        if path.exists():
            file_locale, catalog = load_catalog(path)
            if file_locale is not locale:
                raise ConfigurationError(f"Catalog file {path} is for {file_locale.value}, expected {locale.value}")
            return catalog
    return default_catalog(locale)
