"""Application settings and the optional ``settings.yaml`` loader."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import Field, TypeAdapter, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from filesplit.services.naming import DEFAULT_EXTENSION, DEFAULT_SUFFIX, JoinOrder

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class SettingsError(RuntimeError):
    """Raised when settings are missing or malformed."""


class Settings(BaseSettings):
    """Defaults for splitting and joining, overridable via ``FILESPLIT_*``."""

    model_config = SettingsConfigDict(
        env_prefix="FILESPLIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "File Split Service"
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s - %(levelname)s - %(message)s"

    default_suffix: str = DEFAULT_SUFFIX
    default_extension: str = DEFAULT_EXTENSION
    min_chunk_size: int = Field(1000, ge=1)
    output_folder: str = "output"
    output_folder_threshold: int = Field(10, ge=0)
    index_width: int = Field(0, ge=0)

    join_order: JoinOrder = JoinOrder.LEXICAL
    exclude_output_from_join: bool = True
    copy_buffer_size: int = Field(1024 * 1024, ge=1)

    work_dir: Optional[Path] = None

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)


# Top-level YAML document: a mapping with string keys.
_settings_document = TypeAdapter(Dict[str, Any])


def build_settings(**values: Any) -> Settings:
    """Construct :class:`Settings`, reporting invalid values as :class:`SettingsError`."""

    try:
        return Settings(**values)
    except ValidationError as exc:
        raise SettingsError(f"Invalid settings: {exc}") from exc


def load_settings(path: str | Path) -> Settings:
    """Load ``settings.yaml`` into a :class:`Settings` object.

    Keys are case-insensitive. Values from the file take precedence over
    ``FILESPLIT_*`` environment variables.
    """

    settings_path = Path(path)
    try:
        document = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise SettingsError(f"Settings file not found: {settings_path!s}") from exc
    except OSError as exc:  # pragma: no cover - filesystem failure
        raise SettingsError(f"Unable to read settings file: {exc}") from exc
    except yaml.YAMLError as exc:
        raise SettingsError(f"Failed to parse settings file: {exc}") from exc

    try:
        values = _settings_document.validate_python(document or {}, strict=True)
    except ValidationError as exc:
        raise SettingsError(
            f"{settings_path!s} must hold a mapping of setting names to values: {exc}"
        ) from exc

    values = {key.lower(): value for key, value in values.items()}
    unknown = sorted(set(values) - set(Settings.model_fields))
    if unknown:
        raise SettingsError(f"Unknown settings keys in {settings_path!s}: {', '.join(unknown)}")
    return build_settings(**values)
