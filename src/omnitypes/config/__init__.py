"""omnitypes configuration - Pydantic Settings for environment configuration."""

from __future__ import annotations

from .settings import DEFAULT_SCHEMA_PATTERNS, Settings, clear_settings_cache, get_settings

__all__ = [
    "DEFAULT_SCHEMA_PATTERNS",
    "Settings",
    "clear_settings_cache",
    "get_settings",
]
