# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Naming helpers for generated TypeScript declarations."""

from __future__ import annotations

import re

from omnitypes.generation.pointer_resolver import split_pointer

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")

# Fallback when a pointer segment has no usable characters (e.g. the root "#")
DEFAULT_ROOT_NAME = "Root"


def to_pascal_case(text: str) -> str:
    """Convert arbitrary text to PascalCase.

    Every non-alphanumeric character acts as a word separator. The first
    character of each word is upper-cased; the rest keep their case.

    Example:
        >>> to_pascal_case("user-profile")
        'UserProfile'
        >>> to_pascal_case("API response")
        'APIResponse'
    """
    words = _NON_ALPHANUMERIC.sub(" ", str(text)).split()
    return "".join(word[0].upper() + word[1:] for word in words)


def name_from_pointer(pointer: str) -> str:
    """Derive a type name from the last segment of a JSON pointer."""
    segments = split_pointer(pointer)
    name = to_pascal_case(segments[-1]) if segments else ""
    return name or DEFAULT_ROOT_NAME
