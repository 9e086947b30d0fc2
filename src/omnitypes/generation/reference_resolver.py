# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""
Reference Resolver Utility for TypeScript declaration generation.

Handles resolution of JSON Schema ``$ref`` references to TypeScript type
expressions. Registered targets resolve to their declaration name; anything
else falls back to inline expansion or a name derived from the pointer.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from omnitypes.exceptions import ReferenceCycleError
from omnitypes.generation.build_context import TypeBuildContext
from omnitypes.generation.naming import name_from_pointer
from omnitypes.generation.pointer_resolver import is_internal_pointer, resolve_ref
from omnitypes.generation.type_mapper import TypeMapper
from omnitypes.generation.type_name_registry import TypeNameRegistry

logger = logging.getLogger(__name__)

BuildType = Callable[[TypeBuildContext], str]


@dataclass(frozen=True)
class RefInfo:
    """Structured data for reference resolution."""

    ref: str
    type_name: str
    is_internal: bool = False


class ReferenceResolver:
    """
    Utility for resolving JSON Schema ``$ref`` references.

    Handles:
    - Registered targets (resolve to the exact assigned name)
    - Simple alias targets (inlined through the expression builder)
    - Alias chains (``$ref`` to a fragment that is itself a ``$ref``)
    - Unresolvable targets (name derived from the final pointer segment)
    - Circular reference detection along the expansion chain
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
        self.logger = logger

    def parse_reference(self, ref: str) -> RefInfo:
        """Parse a reference string into structured data."""
        return RefInfo(
            ref=ref,
            type_name=name_from_pointer(ref),
            is_internal=is_internal_pointer(ref),
        )

    def resolve(self, ref: str, context: TypeBuildContext, build_type: BuildType) -> str:
        """
        Resolve a ``$ref`` to a TypeScript type expression.

        Args:
            ref: Reference string (e.g. "#/definitions/User")
            context: Context of the fragment holding the reference
            build_type: Expression builder used to inline simple targets

        Returns:
            Registered name, inlined expression, or derived name.

        Raises:
            ReferenceCycleError: If ``ref`` is already being expanded in the
                current chain and no named declaration breaks the loop.
        """
        registered_name = self.registry.get(ref) if self.registry is not None else None

        # A registered name only breaks the loop when some structure (a
        # property, item or member) sits between the expansion and the $ref.
        if ref in context.visited and (not registered_name or context.pointer in context.visited):
            raise ReferenceCycleError([*context.visited, ref])

        if registered_name:
            return registered_name

        return self._resolve_unregistered(self.parse_reference(ref), context, build_type)

    def _resolve_unregistered(
        self, ref_info: RefInfo, context: TypeBuildContext, build_type: BuildType
    ) -> str:
        target = resolve_ref(ref_info.ref, self.root_schema) if ref_info.is_internal else {}

        if not target:
            logger.debug(
                f"Unresolvable reference, using derived name: {ref_info.ref} -> {ref_info.type_name}",
                extra={"ref": ref_info.ref, "type_name": ref_info.type_name},
            )
            return ref_info.type_name

        if self.type_mapper.is_simple_alias(target) or "$ref" in target:
            return build_type(context.follow(ref_info.ref, target))

        return ref_info.type_name
