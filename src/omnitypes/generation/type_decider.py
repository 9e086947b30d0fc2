# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Choice between ``type`` alias and ``interface`` declarations."""

from __future__ import annotations

from typing import Any, NamedTuple

from omnitypes.generation.type_mapper import INTERSECTION_SEPARATOR

_ALIAS_ONLY_TYPES = frozenset({"string", "number", "boolean", "array"})


class DeclarationParts(NamedTuple):
    keyword: str
    separator: str


def should_use_type_alias(schema: dict[str, Any], type_definition: str) -> bool:
    """
    Decide whether a declaration must be a ``type`` alias.

    An ``interface`` can only hold a flat property set, so anything built from
    enums, constants, primitives, arrays, type arrays, combinators or
    intersections is declared as an alias. Only ``type: object`` fragments
    whose expression is an object literal become interfaces.

    Args:
        schema: The fragment being declared
        type_definition: The expression built for the fragment

    Returns:
        True for ``type``, False for ``interface``.
    """
    if "enum" in schema or "const" in schema:
        return True

    schema_type = schema.get("type")
    if isinstance(schema_type, list):
        return True
    if schema_type in _ALIAS_ONLY_TYPES:
        return True

    if any(keyword in schema for keyword in ("oneOf", "anyOf", "allOf")):
        return True

    if INTERSECTION_SEPARATOR in type_definition:
        return True

    return schema_type != "object" or not type_definition.startswith("{")


def get_declaration_parts(is_type_alias: bool) -> DeclarationParts:
    """Get the keyword and separator for a declaration."""
    if is_type_alias:
        return DeclarationParts(keyword="type", separator=" = ")
    return DeclarationParts(keyword="interface", separator=" ")
