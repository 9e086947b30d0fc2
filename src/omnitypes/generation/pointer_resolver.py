# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""
JSON Pointer utilities for schema documents.

Pointers are the only identity used for schema locations. The root of a
document is the sentinel ``"#"``; children are addressed by appending
RFC 6901 escaped segments (``#/definitions/User``, ``#/properties/a~1b``).
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

ROOT_POINTER = "#"

DEFINITIONS_PREFIX = "#/definitions/"
DEFS_PREFIX = "#/$defs/"


def escape_segment(segment: str | int) -> str:
    """Escape a single pointer segment (``~`` -> ``~0``, ``/`` -> ``~1``)."""
    return str(segment).replace("~", "~0").replace("/", "~1")


def unescape_segment(segment: str) -> str:
    """Reverse :func:`escape_segment`."""
    return segment.replace("~1", "/").replace("~0", "~")


def child_pointer(pointer: str, *segments: str | int) -> str:
    """Append one or more segments to ``pointer``.

    Example:
        >>> child_pointer("#", "properties", "user")
        '#/properties/user'
    """
    suffix = "".join(f"/{escape_segment(segment)}" for segment in segments)
    return f"{pointer}{suffix}"


def is_internal_pointer(ref: str) -> bool:
    """Return True for same-document references (``#`` or ``#/...``)."""
    return isinstance(ref, str) and ref.startswith("#")


def split_pointer(pointer: str) -> list[str]:
    """Split a pointer into its unescaped segments.

    The leading ``#`` (and anything before it) is dropped, so ``"#"`` yields an
    empty list.
    """
    _, _, path = pointer.partition("#")
    if not path:
        return []
    return [unescape_segment(part) for part in path.lstrip("/").split("/")]


def resolve_pointer(root: Any, pointer: str) -> Any | None:
    """
    Resolve a JSON pointer to a fragment of ``root``.

    Args:
        root: The parsed schema document
        pointer: Pointer such as ``"#/definitions/User"``

    Returns:
        The fragment at ``pointer``, or None when any segment is missing.
    """
    if pointer == ROOT_POINTER:
        return root

    current: Any = root
    for segment in split_pointer(pointer):
        if isinstance(current, dict) and segment in current:
            current = current[segment]
        elif isinstance(current, list) and segment.isdigit() and int(segment) < len(current):
            current = current[int(segment)]
        else:
            return None
    return current


def resolve_ref(ref: str, root_schema: dict[str, Any]) -> dict[str, Any]:
    """
    Resolve a ``$ref`` string to its target schema.

    Supports the ``#/definitions/`` and ``#/$defs/`` shorthands as well as
    arbitrary pointer paths. External references are not followed.

    Returns:
        The target schema, or an empty dict when it cannot be found.
    """
    for prefix, container in ((DEFINITIONS_PREFIX, "definitions"), (DEFS_PREFIX, "$defs")):
        if ref.startswith(prefix):
            definitions = root_schema.get(container)
            key = ref[len(prefix) :]
            if isinstance(definitions, dict) and key in definitions:
                target = definitions[key]
                return target if isinstance(target, dict) else {}

    if is_internal_pointer(ref):
        target = resolve_pointer(root_schema, ref)
        return target if isinstance(target, dict) else {}

    logger.debug(f"External reference not followed: {ref}", extra={"ref": ref})
    return {}
