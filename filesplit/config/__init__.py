"""Configuration for the file split tool and service."""
from __future__ import annotations

import os
from functools import lru_cache

from filesplit.config.settings import Settings, SettingsError, build_settings, load_settings

SETTINGS_FILE_ENV = "FILESPLIT_SETTINGS_FILE"

__all__ = [
    "SETTINGS_FILE_ENV",
    "Settings",
    "SettingsError",
    "build_settings",
    "get_settings",
    "load_settings",
]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return settings from ``$FILESPLIT_SETTINGS_FILE`` if set, else the environment."""
    settings_file = os.getenv(SETTINGS_FILE_ENV)
    if settings_file:
        return load_settings(settings_file)
    return build_settings()
