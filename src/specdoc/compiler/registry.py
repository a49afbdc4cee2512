# Copyright 2026 specdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Per-parse type registry and anchor identifier generator."""

from collections.abc import Iterator

from specdoc.model.nodes import PrimitiveType, TypeNode

# ###############
# Public Interface
# ###############

PRIMITIVE_TYPES: dict[str, str] = {
    "int": "basic integer number",
    "float": "basic floating-point number",
    "string": "character or text string",
}


class IdGenerator:
    """Hands out anchor identifiers such as ``type000001`` or ``func000001``.

    Each prefix has its own counter. One generator belongs to one parse, so
    parses running side by side never share numbering.
    """

    def __init__(self) -> None:
        self._counters: dict[str, int] = {}

    def next_id(self, prefix: str) -> str:
        """Return the next identifier for *prefix*."""
        number = self._counters.get(prefix, 0) + 1
        self._counters[prefix] = number
        return f"{prefix}{number:06d}"


class TypeRegistry:
    """Mapping of type names to type nodes, seeded with the primitive types.

    Entries are never removed or replaced.
    """

    def __init__(self, ids: IdGenerator) -> None:
        self._types: dict[str, TypeNode] = {}
        for name, description in PRIMITIVE_TYPES.items():
            self._types[name] = PrimitiveType(ids.next_id("type"), name, description)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def get(self, name: str) -> TypeNode | None:
        """Return the type registered under *name*, or None."""
        return self._types.get(name)

    def register(self, name: str, type_node: TypeNode) -> None:
        """Add *type_node* under *name*.

        Raises:
            ValueError: If *name* is already registered.
        """
        if name in self._types:
            raise ValueError(f"Type {name!r} is already registered")
        self._types[name] = type_node
