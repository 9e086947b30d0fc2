# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""
Schema Scanner for TypeScript declaration generation.

Decides which schema locations get their own declaration and registers a
unique name for each. Scanning runs three passes over one document:

1. Traverse the document, naming declaration-worthy locations and
   collecting every ``$ref`` seen
2. Register reference targets that pass 1 did not name
3. Drop registrations that are only a same-named alias of another one
"""

from __future__ import annotations

import logging
from typing import Any

from omnitypes.generation.naming import name_from_pointer, to_pascal_case
from omnitypes.generation.pointer_resolver import (
    ROOT_POINTER,
    child_pointer,
    is_internal_pointer,
    resolve_pointer,
)
from omnitypes.generation.type_name_registry import TypeNameRegistry

logger = logging.getLogger(__name__)

# Combinator keyword -> suffix for the names of inline members
COMBINATOR_SUFFIXES = {
    "oneOf": "Option",
    "anyOf": "Option",
    "allOf": "Part",
}

DEFINITION_CONTAINERS = ("definitions", "$defs")


class SchemaScanner:
    """
    Three-pass scanner that populates a :class:`TypeNameRegistry`.

    Naming rules during traversal:
    - Titled fragments at the root or inside ``definitions``/``$defs`` are
      named after their title
    - Other fragments use the name suggested by their parent, falling back
      to their title; fragments with neither stay anonymous
    - ``$ref`` members of combinators get no suggested name, so no wrapper
      declaration is created for them
    """

    def __init__(self, schema: dict[str, Any], registry: TypeNameRegistry) -> None:
        self.schema = schema
        self.registry = registry
        # Insertion-ordered set of every $ref seen during traversal
        self.references: dict[str, None] = {}
        self.logger = logger

    def scan(self, root_pointer: str = ROOT_POINTER) -> set[str]:
        """
        Run all three passes.

        Returns:
            Every ``$ref`` string found in the document.
        """
        self.traverse(self.schema, root_pointer, "")
        self.register_missing_references()
        self.cleanup_redundant_aliases()

        logger.debug(
            f"Scanned schema: {len(self.registry)} declarations",
            extra={"declarations": len(self.registry), "references": len(self.references)},
        )
        return set(self.references)

    # Pass 1

    def traverse(self, schema: Any, pointer: str, suggested_name: str) -> None:
        """Recursively name ``schema`` and its children, collecting references."""
        if not isinstance(schema, dict):
            return

        ref = schema.get("$ref")
        if isinstance(ref, str):
            self.references.setdefault(ref)

        name = self._choose_name(schema, pointer, suggested_name)
        if name:
            self.registry.register(pointer, name)

        self._traverse_definitions(schema, pointer)
        self._traverse_properties(schema, pointer, name)
        self._traverse_items(schema, pointer, name)
        self._traverse_additional_properties(schema, pointer, name)
        self._traverse_combinators(schema, pointer, name)

    def _choose_name(self, schema: dict[str, Any], pointer: str, suggested_name: str) -> str:
        title = schema.get("title")
        title_name = to_pascal_case(title) if isinstance(title, str) else ""

        is_root_or_definition = pointer == ROOT_POINTER or any(
            f"/{container}/" in pointer for container in DEFINITION_CONTAINERS
        )
        if title_name and is_root_or_definition:
            return title_name
        return suggested_name or title_name

    def _traverse_definitions(self, schema: dict[str, Any], pointer: str) -> None:
        for container in DEFINITION_CONTAINERS:
            definitions = schema.get(container)
            if not isinstance(definitions, dict):
                continue
            for key, definition in definitions.items():
                self.traverse(
                    definition,
                    child_pointer(pointer, container, key),
                    to_pascal_case(key),
                )

    def _traverse_properties(self, schema: dict[str, Any], pointer: str, parent_name: str) -> None:
        properties = schema.get("properties")
        if not isinstance(properties, dict):
            return
        for key, property_schema in properties.items():
            self.traverse(
                property_schema,
                child_pointer(pointer, "properties", key),
                parent_name + to_pascal_case(key),
            )

    def _traverse_items(self, schema: dict[str, Any], pointer: str, parent_name: str) -> None:
        items = schema.get("items")
        if isinstance(items, list):
            for index, item in enumerate(items):
                self.traverse(
                    item,
                    child_pointer(pointer, "items", index),
                    f"{parent_name}Item{index}",
                )
        elif isinstance(items, dict):
            self.traverse(items, child_pointer(pointer, "items"), f"{parent_name}Item")

    def _traverse_additional_properties(
        self, schema: dict[str, Any], pointer: str, parent_name: str
    ) -> None:
        additional = schema.get("additionalProperties")
        if isinstance(additional, dict):
            self.traverse(
                additional,
                child_pointer(pointer, "additionalProperties"),
                f"{parent_name}Value",
            )

    def _traverse_combinators(self, schema: dict[str, Any], pointer: str, parent_name: str) -> None:
        for keyword, suffix in COMBINATOR_SUFFIXES.items():
            members = schema.get(keyword)
            if not isinstance(members, list):
                continue
            for index, member in enumerate(members):
                is_ref = isinstance(member, dict) and "$ref" in member
                member_name = "" if is_ref else f"{parent_name}{suffix}{index}"
                self.traverse(member, child_pointer(pointer, keyword, index), member_name)

    # Pass 2

    def register_missing_references(self) -> None:
        """
        Register same-document reference targets that have no name yet.

        Dangling targets are registered too, so their fallback name is made
        unique against real declarations. They produce no declaration.
        """
        for ref in self.references:
            if not is_internal_pointer(ref) or ref in self.registry:
                continue

            name = self.registry.register(ref, name_from_pointer(ref))
            if not isinstance(resolve_pointer(self.schema, ref), dict):
                logger.warning(
                    f"Unresolvable reference: {ref} -> {name}",
                    extra={"ref": ref, "name": name},
                )
                continue

            logger.debug(
                f"Registered referenced location: {ref} -> {name}",
                extra={"pointer": ref, "name": name},
            )

    # Pass 3

    def cleanup_redundant_aliases(self) -> None:
        """
        Remove registrations that only alias another, same-named registration.

        Such an alias would produce a declaration like ``type Status_1 =
        Status`` purely because of a naming coincidence. Removing it lets
        the generator resolve straight to the target.
        """
        for pointer in list(self.registry.get_all()):
            fragment = resolve_pointer(self.schema, pointer)
            if not isinstance(fragment, dict):
                continue

            target = fragment.get("$ref")
            if not is_internal_pointer(target) or target == pointer:
                continue
            if target not in self.registry:
                continue

            base_name = self.registry.get_base_name(pointer)
            if base_name and base_name == self.registry.get_base_name(target):
                self.registry.delete(pointer)
                logger.debug(
                    f"Removed redundant alias: {pointer} -> {target}",
                    extra={"pointer": pointer, "target": target, "base_name": base_name},
                )


def scan_schema(
    schema: dict[str, Any], registry: TypeNameRegistry, root_pointer: str = ROOT_POINTER
) -> set[str]:
    """Scan ``schema`` and populate ``registry``. Returns the references found."""
    return SchemaScanner(schema, registry).scan(root_pointer)
