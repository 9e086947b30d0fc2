# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Shared fixtures for omnitypes tests."""

from __future__ import annotations

import json
import os
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from omnitypes.config import clear_settings_cache


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Strip OMNITYPES_* variables and reset the cached settings around each test."""
    for name in list(os.environ):
        if name.startswith("OMNITYPES_"):
            monkeypatch.delenv(name)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def write_schema(tmp_path: Path):
    """Write a schema document under ``tmp_path/schemas`` and return its path."""
    schemas_dir = tmp_path / "schemas"

    def _write(relative_path: str, document: Any) -> Path:
        path = schemas_dir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return path

    schemas_dir.mkdir(parents=True, exist_ok=True)
    return _write


@pytest.fixture
def user_schema() -> dict[str, Any]:
    return {
        "title": "User",
        "type": "object",
        "properties": {"id": {"type": "string"}},
        "required": ["id"],
    }
