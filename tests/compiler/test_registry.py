# Copyright 2026 specdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the type registry and anchor identifier generator."""

import pytest

from specdoc.compiler.registry import PRIMITIVE_TYPES, IdGenerator, TypeRegistry
from specdoc.model.nodes import AliasType, PrimitiveType


class TestIdGenerator:
    def test_ids_are_zero_padded_and_sequential(self) -> None:
        ids = IdGenerator()
        assert [ids.next_id("type") for _ in range(3)] == ["type000001", "type000002", "type000003"]

    def test_prefixes_count_separately(self) -> None:
        ids = IdGenerator()
        ids.next_id("type")
        ids.next_id("type")
        assert ids.next_id("func") == "func000001"

    def test_generators_are_independent(self) -> None:
        first = IdGenerator()
        first.next_id("type")
        assert IdGenerator().next_id("type") == "type000001"


class TestTypeRegistry:
    def test_seeded_with_primitives(self) -> None:
        registry = TypeRegistry(IdGenerator())
        assert list(registry) == list(PRIMITIVE_TYPES)
        assert len(registry) == 3
        for name in ("int", "float", "string"):
            assert isinstance(registry.get(name), PrimitiveType)

    def test_primitives_take_first_ids(self) -> None:
        registry = TypeRegistry(IdGenerator())
        assert [registry.get(n).id for n in ("int", "float", "string")] == [
            "type000001",
            "type000002",
            "type000003",
        ]

    def test_primitive_description(self) -> None:
        registry = TypeRegistry(IdGenerator())
        assert registry.get("int").description == "basic integer number"

    def test_register_and_lookup_returns_same_instance(self) -> None:
        registry = TypeRegistry(IdGenerator())
        alias = AliasType("type000010", "Id")
        registry.register("Id", alias)
        assert "Id" in registry
        assert registry.get("Id") is alias

    def test_unknown_name(self) -> None:
        registry = TypeRegistry(IdGenerator())
        assert registry.get("Missing") is None
        assert "Missing" not in registry

    def test_duplicate_registration_rejected(self) -> None:
        registry = TypeRegistry(IdGenerator())
        with pytest.raises(ValueError, match="already registered"):
            registry.register("int", AliasType("type000010", "int"))
