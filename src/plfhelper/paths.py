# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Filesystem paths for user-supplied catalog files."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_data_dir

ENV_CATALOG_ROOT = "PLFHELPER_CATALOG_ROOT"


def default_catalog_root() -> Path:
    """Get the default directory searched for ``products_<locale>.yaml`` files."""
    env_root = os.getenv(ENV_CATALOG_ROOT)
    if env_root:
        return Path(env_root)
    return Path(user_data_dir("plfhelper", "plfhelper"))


def catalog_file(root: Path, locale_code: str) -> Path:
    """Return the catalog file path for a locale under *root*."""
    return root / f"products_{locale_code.lower()}.yaml"
