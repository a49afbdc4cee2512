# Copyright 2026 specdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Syntax tree for parsed module specifications.

A module is a tree of nodes. Every node keeps an ordered list of children and,
for each child slot, an optional slot label (the name written after a type in
a bracketed list) plus the comments attached to that membership. Type nodes
are shared by reference: a named type used in several places is the same
instance everywhere, and its reference count says how often it was attached.
"""

from __future__ import annotations

import functools
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import ClassVar

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Member:
    """A child type together with the data describing its membership slot.

    Attributes:
        type: The member type node.
        label: Name written after the type in a bracketed list, if any.
        comments: Documentation attached to the slot (without the label).
    """

    type: TypeNode
    label: str | None = None
    comments: list[str] = field(default_factory=list)

    @property
    def membership_comments(self) -> list[str]:
        """Return the label (if any) followed by the slot comments."""
        if self.label is None:
            return list(self.comments)
        return [self.label, *self.comments]


class Node:
    """Base of every element in a parsed module tree."""

    counts_references: ClassVar[bool] = True

    def __init__(self) -> None:
        self.children: list[Node] = []
        self.slot_labels: list[str | None] = []
        self.child_comments: list[list[str]] = []
        self.comments: list[str] = []

    def attach(self, child: Node, *, label: str | None = None, comments: Iterable[str] = ()) -> None:
        """Append *child* with its slot label and membership comments.

        Attaching a type node counts as one reference to it.
        """
        self.children.append(child)
        self.slot_labels.append(label)
        self.child_comments.append(list(comments))
        if self.counts_references and isinstance(child, TypeNode):
            child.reference_count += 1

    def add_comments(self, comments: Iterable[str]) -> None:
        """Append comments to this node's own documentation."""
        self.comments.extend(comments)

    def prepend_comments(self, comments: Iterable[str]) -> None:
        """Insert comments in front of this node's own documentation."""
        self.comments[:0] = list(comments)

    def membership_comments(self, index: int) -> list[str]:
        """Return the slot label (if any) followed by the comments of slot *index*."""
        label = self.slot_labels[index]
        comments = self.child_comments[index]
        if label is None:
            return list(comments)
        return [label, *comments]

    def members(self) -> list[Member]:
        """Return every child slot as a :class:`Member`.

        A field slot is reported with the field's type.
        """
        return [self._member(i) for i in range(len(self.children))]

    def _member(self, index: int) -> Member:
        return Member(
            type=_slot_type(self.children[index]),
            label=self.slot_labels[index],
            comments=self.child_comments[index],
        )


class TypeNode(Node):
    """A type definition, named or anonymous.

    Attributes:
        id: Anchor identifier, unique within one parse.
        name: Type name, or None for an anonymous (inline) type.
        reference_count: Number of times this instance was attached as a child.
        use_count: Number of times this type appears in a function signature.
    """

    kind: ClassVar[str] = "type"

    def __init__(self, type_id: str, name: str | None = None) -> None:
        super().__init__()
        self.id = type_id
        self.name = name
        self.reference_count = 0
        self.use_count = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, name={self.name!r})"

    @property
    def is_anonymous(self) -> bool:
        return self.name is None

    @property
    def is_complex(self) -> bool:
        return not isinstance(self, PrimitiveType)

    def child_types(self) -> list[TypeNode]:
        """Return the types of all children; fields contribute their field type."""
        return [_slot_type(child) for child in self.children]

    def mark_used(self) -> None:
        """Count one appearance of this type in a function signature."""
        self.use_count += 1

    def sort_key(self) -> tuple[int, int, int, str]:
        """Ordering for type listings.

        Most used first, then least referenced, then by name. Anonymous types
        come after all named ones, ordered by identifier.
        """
        if self.name is None:
            return (1, 0, 0, self.id)
        return (0, -self.use_count, self.reference_count, self.name)


class PrimitiveType(TypeNode):
    """A built-in scalar type."""

    kind = "primitive"

    def __init__(self, type_id: str, name: str, description: str) -> None:
        super().__init__(type_id, name)
        self.description = description


class AliasType(TypeNode):
    """A named type defined as exactly another named type."""

    kind = "alias"

    @property
    def target(self) -> TypeNode:
        target = self.children[0]
        assert isinstance(target, TypeNode)
        return target


class StructureType(TypeNode):
    """A record whose children are named fields."""

    kind = "structure"

    @property
    def fields(self) -> list[FieldNode]:
        result: list[FieldNode] = []
        for child in self.children:
            assert isinstance(child, FieldNode)
            result.append(child)
        return result


class TupleType(TypeNode):
    """A fixed sequence of anonymous member types."""

    kind = "tuple"


class ListType(TypeNode):
    """A homogeneous list with one member type."""

    kind = "list"

    @property
    def element(self) -> Member:
        return self._member(0)


class MappingType(TypeNode):
    """A key/value mapping with exactly two member types."""

    kind = "mapping"

    @property
    def key(self) -> Member:
        return self._member(0)

    @property
    def value(self) -> Member:
        return self._member(1)


class FieldNode(Node):
    """A named field of a structure. Its only child is the field type."""

    def __init__(self, name: str) -> None:
        super().__init__()
        self.name = name

    def __repr__(self) -> str:
        return f"FieldNode(name={self.name!r})"

    @property
    def type(self) -> TypeNode:
        child = self.children[0]
        assert isinstance(child, TypeNode)
        return child


@functools.total_ordering
class FuncNode(Node):
    """A function declaration.

    Children are the parameter types followed by the result types;
    ``parameter_count`` marks the split. Functions compare by name.
    """

    def __init__(self, func_id: str, name: str) -> None:
        super().__init__()
        self.id = func_id
        self.name = name
        self.parameter_count = 0
        self.requires_authentication = False

    def __repr__(self) -> str:
        return f"FuncNode(id={self.id!r}, name={self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FuncNode):
            return NotImplemented
        return self.name == other.name

    def __lt__(self, other: FuncNode) -> bool:
        return self.name < other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def attach(self, child: Node, *, label: str | None = None, comments: Iterable[str] = ()) -> None:
        """Append a parameter or result type and mark it as used."""
        super().attach(child, label=label, comments=comments)
        if isinstance(child, TypeNode):
            _mark_used(child)

    @property
    def parameters(self) -> list[Member]:
        return self.members()[: self.parameter_count]

    @property
    def results(self) -> list[Member]:
        return self.members()[self.parameter_count :]


class ModuleNode(Node):
    """Root of a parsed specification: types and functions in declaration order."""

    counts_references = False

    def __init__(self, name: str) -> None:
        super().__init__()
        self.name = name

    def __repr__(self) -> str:
        return f"ModuleNode(name={self.name!r})"

    def declared_types(self) -> list[TypeNode]:
        """Return the module's named types in declaration order."""
        return [child for child in self.children if isinstance(child, TypeNode)]

    def types(self) -> list[TypeNode]:
        """Return the module's named types in listing order."""
        return sorted(self.declared_types(), key=TypeNode.sort_key)

    def functions(self) -> list[FuncNode]:
        """Return the module's functions sorted by name."""
        return sorted(child for child in self.children if isinstance(child, FuncNode))

    def type_map(self) -> dict[str, TypeNode]:
        """Return the module's named types keyed by name."""
        return {t.name: t for t in self.declared_types() if t.name is not None}


# ################
# Implementation
# ################


def _mark_used(type_node: TypeNode) -> None:
    """Mark *type_node* used; descend through anonymous types to the named ones."""
    type_node.mark_used()
    if type_node.is_anonymous:
        for child in type_node.child_types():
            _mark_used(child)


def _slot_type(child: Node) -> TypeNode:
    """Return the type held by a child slot: the child itself or a field's type."""
    if isinstance(child, FieldNode):
        return child.type
    if isinstance(child, TypeNode):
        return child
    raise TypeError(f"{child!r} does not hold a type")
