# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Application settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from plfhelper.paths import default_catalog_root


class Settings(BaseSettings):
    log_level: str = "WARNING"
    locale: str = "en"
    players_index: int = -1
    players1_index: int = -1
    catalog_root: Path = Field(default_factory=default_catalog_root)

    model_config = SettingsConfigDict(
        env_prefix="PLFHELPER_",
        extra="ignore",
    )
