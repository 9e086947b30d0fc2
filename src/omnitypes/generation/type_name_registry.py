# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""
Type Name Registry for TypeScript declaration generation.

Maps schema pointers to unique declaration names. A registry is scoped to a
single schema document and must never be shared between documents.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistryEntry:
    """Registered name for a pointer."""

    pointer: str
    name: str
    base_name: str


class TypeNameRegistry:
    """
    Registry of unique type names keyed by JSON pointer.

    Handles:
    - Idempotent registration per pointer
    - Collision suffixing (``Status``, ``Status_1``, ``Status_2``...)
    - Base name tracking for redundant alias detection

    Suffix counters only ever grow and assigned names are never handed out
    twice, even after an entry is deleted.

    Example:
        >>> registry = TypeNameRegistry()
        >>> registry.register("#/definitions/User", "User")
        'User'
        >>> registry.register("#/properties/user", "User")
        'User_1'
    """

    def __init__(self) -> None:
        self._entries: dict[str, RegistryEntry] = {}
        self._name_counts: defaultdict[str, int] = defaultdict(int)
        self._assigned_names: set[str] = set()

    def register(self, pointer: str, name: str) -> str:
        """
        Register a type name for a pointer.

        Args:
            pointer: Location of the schema fragment (e.g. "#/definitions/User")
            name: Requested type name

        Returns:
            The unique name for ``pointer``. When the pointer is already
            registered, the existing name is returned unchanged.
        """
        existing = self._entries.get(pointer)
        if existing is not None:
            return existing.name

        unique_name = self._next_unique_name(name)
        self._entries[pointer] = RegistryEntry(pointer=pointer, name=unique_name, base_name=name)

        if unique_name != name:
            logger.debug(
                f"Name collision resolved: {name} -> {unique_name}",
                extra={"pointer": pointer, "base_name": name, "name": unique_name},
            )
        return unique_name

    def get(self, pointer: str) -> str | None:
        """Get the registered name for ``pointer``."""
        entry = self._entries.get(pointer)
        return entry.name if entry else None

    def get_base_name(self, pointer: str) -> str | None:
        """Get the name originally requested for ``pointer`` (before suffixing)."""
        entry = self._entries.get(pointer)
        return entry.base_name if entry else None

    def get_all(self) -> dict[str, str]:
        """Return a copy of all pointer -> name registrations, in registration order."""
        return {pointer: entry.name for pointer, entry in self._entries.items()}

    def delete(self, pointer: str) -> None:
        """Remove a registration. Unknown pointers are ignored."""
        if self._entries.pop(pointer, None) is not None:
            logger.debug(f"Removed registration: {pointer}", extra={"pointer": pointer})

    def __contains__(self, pointer: object) -> bool:
        return pointer in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def _next_unique_name(self, base_name: str) -> str:
        while True:
            count = self._name_counts[base_name]
            self._name_counts[base_name] = count + 1
            candidate = base_name if count == 0 else f"{base_name}_{count}"
            if candidate not in self._assigned_names:
                self._assigned_names.add(candidate)
                return candidate
