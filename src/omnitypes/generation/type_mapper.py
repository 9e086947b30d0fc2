# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""
Type Mapper Utility for TypeScript declaration generation.

Handles mapping of JSON Schema primitive types and literal values to
TypeScript type strings. This is the only place primitive types are mapped;
both the expression builder and the reference fallback path go through it.
"""

from __future__ import annotations

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

ANY_TYPE = "any"
UNKNOWN_TYPE = "unknown"
NEVER_TYPE = "never"
ANY_ARRAY_TYPE = "any[]"
ANY_RECORD_TYPE = "Record<string, any>"

UNION_SEPARATOR = " | "
INTERSECTION_SEPARATOR = " & "


class TypeMapper:
    """
    Utility for mapping schema types to TypeScript type strings.

    Handles:
    - Basic type mapping (string -> string, integer -> number, etc.)
    - Type arrays (["string", "null"] -> string | null)
    - Literal types for const and enum values
    """

    # Basic type mappings
    BASIC_TYPE_MAPPING = {
        "string": "string",
        "number": "number",
        "integer": "number",
        "boolean": "boolean",
        "null": "null",
        "array": ANY_ARRAY_TYPE,
        "object": "object",
    }

    PRIMITIVE_TYPES = frozenset({"string", "number", "integer", "boolean", "null"})

    def map_json_type(self, json_type: Any) -> str:
        """
        Map a single JSON Schema type name to TypeScript.

        Args:
            json_type: JSON Schema type name (e.g. "integer")

        Returns:
            TypeScript type string, ``any`` for unknown names.
        """
        if not isinstance(json_type, str):
            return ANY_TYPE
        return self.BASIC_TYPE_MAPPING.get(json_type, ANY_TYPE)

    def build_type_array_union(self, json_types: list[Any]) -> str:
        """Map a type array such as ``["string", "null"]`` to a union."""
        return UNION_SEPARATOR.join(self.map_json_type(json_type) for json_type in json_types)

    def format_literal(self, value: Any) -> str:
        """
        Render a JSON value as a TypeScript literal type.

        Example:
            >>> TypeMapper().format_literal("a")
            '"a"'
            >>> TypeMapper().format_literal(True)
            'true'
        """
        return json.dumps(value, ensure_ascii=False)

    def build_const_type(self, const_value: Any) -> str:
        return self.format_literal(const_value)

    def build_enum_type(self, enum_values: list[Any]) -> str:
        """Render enum values as a union of literals, in declared order."""
        if not enum_values:
            return NEVER_TYPE
        return UNION_SEPARATOR.join(self.format_literal(value) for value in enum_values)

    def is_primitive_type(self, schema: dict[str, Any]) -> bool:
        schema_type = schema.get("type")
        return isinstance(schema_type, str) and schema_type in self.PRIMITIVE_TYPES

    def is_simple_alias(self, schema: dict[str, Any]) -> bool:
        """
        Check whether a fragment can be inlined in place of a reference.

        A simple alias has a ``type`` and none of ``properties``, ``items``
        or ``oneOf``.
        """
        return (
            bool(schema.get("type"))
            and "properties" not in schema
            and "items" not in schema
            and "oneOf" not in schema
        )
