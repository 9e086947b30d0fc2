# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""
Type Expression Builder for TypeScript declaration generation.

Turns a schema fragment into a TypeScript type expression. A fragment may
carry several facets at once (an object shape plus a combinator, for
example), so the facets are checked in a fixed priority order instead of
being treated as mutually exclusive:

1. Registered name for the fragment's own pointer
2. ``$ref``
3. Combinators (``oneOf``, ``anyOf``, ``allOf``) and object shape, combined
4. ``const``
5. ``enum``
6. ``type`` arrays
7. Single ``type`` (primitives and arrays)
"""

from __future__ import annotations

import logging
import re
from typing import Any

from omnitypes.generation.build_context import TypeBuildContext
from omnitypes.generation.reference_resolver import ReferenceResolver
from omnitypes.generation.type_mapper import (
    ANY_ARRAY_TYPE,
    ANY_RECORD_TYPE,
    ANY_TYPE,
    INTERSECTION_SEPARATOR,
    UNION_SEPARATOR,
    UNKNOWN_TYPE,
    TypeMapper,
)
from omnitypes.generation.type_name_registry import TypeNameRegistry

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def has_object_definition(schema: dict[str, Any]) -> bool:
    """Check if a schema has object properties or is ``type: object``."""
    return (
        "properties" in schema
        or _has_additional_properties(schema)
        or schema.get("type") == "object"
    )


def _has_additional_properties(schema: dict[str, Any]) -> bool:
    additional = schema.get("additionalProperties")
    return additional is True or isinstance(additional, dict)


def _needs_grouping(type_string: str) -> bool:
    return UNION_SEPARATOR in type_string or INTERSECTION_SEPARATOR in type_string


def _property_key(key: str) -> str:
    return key if _IDENTIFIER.match(key) else f'"{key}"'


class TypeExpressionBuilder:
    """
    Recursive builder for TypeScript type expressions.

    One builder serves one schema document and its registry.

    Example:
        >>> builder = TypeExpressionBuilder({})
        >>> builder.build_schema({"type": "array", "items": {"enum": ["x", "y"]}})
        '("x" | "y")[]'
    """

    def __init__(
        self,
        root_schema: dict[str, Any],
        registry: TypeNameRegistry | None = None,
        type_mapper: TypeMapper | None = None,
    ) -> None:
        self.root_schema = root_schema
        self.registry = registry
        self.type_mapper = type_mapper or TypeMapper()
        self.reference_resolver = ReferenceResolver(root_schema, registry, self.type_mapper)

    def build_schema(
        self, schema: dict[str, Any], pointer: str = "#", lookup_in_registry: bool = False
    ) -> str:
        """Build the expression for ``schema`` located at ``pointer``."""
        context = TypeBuildContext(
            schema=schema,
            pointer=pointer,
            lookup_in_registry=lookup_in_registry,
            visited=(pointer,),
        )
        return self.build(context)

    def build(self, context: TypeBuildContext) -> str:
        """
        Build a TypeScript type string from a build context.

        Args:
            context: The fragment, its pointer and the lookup settings

        Returns:
            TypeScript type expression

        Raises:
            ReferenceCycleError: If a ``$ref`` chain loops back on itself
        """
        schema = context.schema

        if context.lookup_in_registry and self.registry is not None:
            registered_name = self.registry.get(context.pointer)
            if registered_name:
                return registered_name

        ref = schema.get("$ref")
        if isinstance(ref, str):
            return self.reference_resolver.resolve(ref, context, self.build)

        combinator_type = self.build_combinator_type(context)

        object_type = None
        if has_object_definition(schema):
            if "properties" in schema or _has_additional_properties(schema):
                object_type = self.build_object_type(context)
            elif combinator_type is None:
                object_type = ANY_RECORD_TYPE

        if object_type and combinator_type:
            return f"{object_type}{INTERSECTION_SEPARATOR}({combinator_type})"
        if combinator_type:
            return combinator_type
        if object_type:
            return object_type

        if "const" in schema:
            return self.type_mapper.build_const_type(schema["const"])

        enum_values = schema.get("enum")
        if isinstance(enum_values, list):
            return self.type_mapper.build_enum_type(enum_values)

        schema_type = schema.get("type")
        if isinstance(schema_type, list):
            return self.type_mapper.build_type_array_union(schema_type)

        if schema_type == "array":
            return self.build_array_type(context)
        if self.type_mapper.is_primitive_type(schema):
            return self.type_mapper.map_json_type(schema_type)
        return ANY_TYPE

    def build_combinator_type(self, context: TypeBuildContext) -> str | None:
        """
        Build the combined expression for ``oneOf``, ``anyOf`` and ``allOf``.

        Returns:
            The combinator expression, or None when the fragment has no
            combinator or every ``allOf`` member was filtered out.
        """
        schema = context.schema
        parts: list[str] = []

        for keyword in ("oneOf", "anyOf"):
            members = schema.get(keyword)
            if isinstance(members, list):
                parts.append(self.build_union_type(context, keyword, members))

        members = schema.get("allOf")
        if isinstance(members, list):
            intersection = self.build_intersection_type(context, members)
            if intersection is not None:
                parts.append(intersection)

        if not parts:
            return None
        if len(parts) == 1:
            return parts[0]
        return INTERSECTION_SEPARATOR.join(
            f"({part})" if UNION_SEPARATOR in part else part for part in parts
        )

    def build_union_type(self, context: TypeBuildContext, keyword: str, members: list[Any]) -> str:
        """Build a union from ``oneOf``/``anyOf`` members, in declared order."""
        types = [
            self.build(context.child(member, keyword, index)) for index, member in enumerate(members)
        ]
        return UNION_SEPARATOR.join(types)

    def build_intersection_type(self, context: TypeBuildContext, members: list[Any]) -> str | None:
        """
        Build an intersection from ``allOf`` members.

        ``any`` and ``unknown`` members are dropped so they cannot swallow the
        intersection.
        """
        types = [
            self.build(context.child(member, "allOf", index)) for index, member in enumerate(members)
        ]
        meaningful_types = [t for t in types if t not in (ANY_TYPE, UNKNOWN_TYPE)]
        if not meaningful_types:
            return None
        return INTERSECTION_SEPARATOR.join(meaningful_types)

    def build_object_type(self, context: TypeBuildContext) -> str:
        """Build an object type literal from ``properties`` and ``additionalProperties``."""
        schema = context.schema
        lines: list[str] = []

        properties = schema.get("properties")
        if isinstance(properties, dict):
            required = schema.get("required")
            required_keys = set(required) if isinstance(required, list) else set()
            for key, property_schema in properties.items():
                property_type = self.build(context.child(property_schema, "properties", key))
                optional = "" if key in required_keys else "?"
                lines.append(f"  {_property_key(key)}{optional}: {property_type};")

        additional = schema.get("additionalProperties")
        if isinstance(additional, dict):
            value_type = self.build(context.child(additional, "additionalProperties"))
            lines.append(f"  [key: string]: {value_type};")
        elif additional is True:
            lines.append(f"  [key: string]: {ANY_TYPE};")

        if not lines:
            return "{}"
        return "{\n" + "\n".join(lines) + "\n}"

    def build_array_type(self, context: TypeBuildContext) -> str:
        """Build an array or tuple type from ``items``."""
        items = context.schema.get("items")

        if isinstance(items, list):
            tuple_types = [
                self.build(context.child(item, "items", index)) for index, item in enumerate(items)
            ]
            return f"[{', '.join(tuple_types)}]"

        if not isinstance(items, dict):
            return ANY_ARRAY_TYPE

        item_type = self.build(context.child(items, "items"))
        if _needs_grouping(item_type):
            return f"({item_type})[]"
        return f"{item_type}[]"
