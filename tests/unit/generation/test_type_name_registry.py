# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Unit tests for omnitypes.generation.type_name_registry."""

from __future__ import annotations

import pytest

from omnitypes.generation.type_name_registry import TypeNameRegistry


@pytest.mark.unit
class TestRegister:
    """Registration assigns unique names per pointer."""

    def test_first_request_gets_base_name(self) -> None:
        registry = TypeNameRegistry()
        assert registry.register("#/definitions/User", "User") == "User"

    def test_register_is_idempotent_per_pointer(self) -> None:
        registry = TypeNameRegistry()
        registry.register("#/definitions/User", "User")

        assert registry.register("#/definitions/User", "Account") == "User"
        assert registry.get_base_name("#/definitions/User") == "User"
        assert len(registry) == 1

    def test_collisions_get_numeric_suffixes_in_order(self) -> None:
        registry = TypeNameRegistry()

        assert registry.register("#/a", "Status") == "Status"
        assert registry.register("#/b", "Status") == "Status_1"
        assert registry.register("#/c", "Status") == "Status_2"
        assert registry.get_base_name("#/c") == "Status"

    def test_requested_name_equal_to_suffixed_name_stays_unique(self) -> None:
        registry = TypeNameRegistry()
        registry.register("#/a", "Status")
        registry.register("#/b", "Status")

        assert registry.register("#/c", "Status_1") == "Status_1_1"
        assert registry.register("#/d", "Status") == "Status_2"
        assert len(set(registry.get_all().values())) == 4


@pytest.mark.unit
class TestLookupAndDelete:
    """Lookups, snapshots and deletion."""

    def test_unknown_pointer_lookups_return_none(self) -> None:
        registry = TypeNameRegistry()
        assert registry.get("#/missing") is None
        assert registry.get_base_name("#/missing") is None
        assert "#/missing" not in registry

    def test_get_all_returns_copy_in_registration_order(self) -> None:
        registry = TypeNameRegistry()
        registry.register("#/b", "B")
        registry.register("#/a", "A")

        snapshot = registry.get_all()
        snapshot["#/c"] = "C"

        assert list(registry.get_all().items()) == [("#/b", "B"), ("#/a", "A")]

    def test_delete_removes_entry(self) -> None:
        registry = TypeNameRegistry()
        registry.register("#/a", "A")
        registry.delete("#/a")

        assert registry.get("#/a") is None
        assert registry.get_all() == {}

    def test_delete_unknown_pointer_is_noop(self) -> None:
        registry = TypeNameRegistry()
        registry.delete("#/missing")
        assert len(registry) == 0

    def test_freed_suffix_is_not_reused(self) -> None:
        registry = TypeNameRegistry()
        registry.register("#/a", "Status")
        registry.register("#/b", "Status")
        registry.delete("#/b")

        assert registry.register("#/c", "Status") == "Status_2"

    def test_reregistering_deleted_pointer_gets_fresh_name(self) -> None:
        registry = TypeNameRegistry()
        registry.register("#/a", "Status")
        registry.delete("#/a")

        assert registry.register("#/a", "Status") == "Status_1"
