# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Shared context passed through the recursive type expression builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from omnitypes.generation.pointer_resolver import child_pointer


@dataclass(frozen=True)
class TypeBuildContext:
    """
    Context for building the type expression of one schema fragment.

    Attributes:
        schema: The fragment being processed
        pointer: Location of the fragment in the root document
        lookup_in_registry: Whether a registered name for ``pointer`` may be
            returned directly. False only for the body of the declaration
            located at ``pointer``.
        visited: Pointers already expanded along the current reference
            chain, in expansion order
    """

    schema: dict[str, Any]
    pointer: str
    lookup_in_registry: bool = True
    visited: tuple[str, ...] = ()

    def child(self, schema: Any, *segments: str | int) -> TypeBuildContext:
        """Create the context for a child fragment located under this one."""
        return TypeBuildContext(
            schema=schema if isinstance(schema, dict) else {},
            pointer=child_pointer(self.pointer, *segments),
            lookup_in_registry=True,
            visited=self.visited,
        )

    def follow(self, ref: str, schema: dict[str, Any]) -> TypeBuildContext:
        """Create the context for expanding the target of ``ref`` inline."""
        return TypeBuildContext(
            schema=schema,
            pointer=ref,
            lookup_in_registry=False,
            visited=(*self.visited, ref),
        )
