# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""omnitypes settings.

Configuration is read from environment variables prefixed with
``OMNITYPES_`` and from a ``.env`` file found in the working directory or
any of its parents. Command line options override individual fields.

Environment variables:

    OMNITYPES_SCHEMAS_DIR=./schemas
    OMNITYPES_OUTPUT_DIR=./types
    OMNITYPES_EXPORT_FORMAT=UNIQUE_EXPORTS   # or ROOT_ONLY
    OMNITYPES_INCLUDE_DOCS=true
    OMNITYPES_LOG_LEVEL=INFO
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from omnitypes.models import EnumExportFormat

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_PATTERNS = ["**/*.json", "**/*.yaml", "**/*.yml"]


def _find_and_load_env() -> None:
    """Load the nearest .env file, searching upward from the working directory."""
    from dotenv import load_dotenv

    current = Path.cwd().resolve()
    for _ in range(10):
        env_file = current / ".env"
        if env_file.exists():
            load_dotenv(env_file, override=False)
            return
        parent = current.parent
        if parent == current:
            break
        current = parent


class Settings(BaseSettings):
    """Settings for schema discovery and declaration output."""

    model_config = SettingsConfigDict(
        env_prefix="OMNITYPES_",
        case_sensitive=False,
        extra="ignore",
    )

    schemas_dir: Path | None = Field(
        default=None,
        description="Directory searched recursively for schema documents",
    )
    output_dir: Path | None = Field(
        default=None,
        description="Directory receiving generated .d.ts files (mirrors schemas_dir)",
    )
    export_format: EnumExportFormat = Field(
        default=EnumExportFormat.UNIQUE_EXPORTS,
        description="Export every declaration, or only the document root",
    )
    include_docs: bool = Field(
        default=True,
        description="Emit JSDoc blocks from title, description and examples",
    )
    schema_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SCHEMA_PATTERNS),
        description="Glob patterns (relative to schemas_dir) selecting schema files",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level name (DEBUG, INFO, WARNING, ERROR)",
    )

    @field_validator("export_format", mode="before")
    @classmethod
    def _normalize_export_format(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the cached settings instance.

    Note:
        For test isolation, use `clear_settings_cache()` to reset the
        cache before each test that needs fresh settings.
    """
    _find_and_load_env()
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next `get_settings()` re-reads the environment."""
    get_settings.cache_clear()
