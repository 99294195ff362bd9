# config.py

"""Application configuration utilities.

Values are loaded from an optional ``config.json`` next to this file and may be
overridden by environment variables. The :func:`get_settings` helper merges the
two sources and caches the result.
"""

from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings merged from JSON and environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = "sqlite:///./carta.db"
    default_timezone: str = "America/Santiago"
    log_level: str = "INFO"
    scheduled_discounts_enabled: bool = True
    countdown_refresh_secs: int = 60


# Cached singleton to avoid repeated file reads
@lru_cache
def get_settings() -> Settings:
    """Return merged settings with environment variable precedence.

    ``config.json`` is optional; when present its keys seed :class:`Settings`
    and any matching environment variable replaces the JSON value.
    """

    config_path = Path(__file__).with_name("config.json")
    data = json.loads(config_path.read_text()) if config_path.exists() else {}
    env_override = {
        k.lower(): v
        for k, v in os.environ.items()
        if k.lower() in Settings.model_fields
    }
    merged = {**data, **env_override}
    return Settings(**merged)
