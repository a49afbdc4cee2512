# Copyright 2026 specdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Document model builder.

Walks a parsed :class:`~specdoc.model.nodes.ModuleNode` and produces the
render-agnostic :class:`~specdoc.model.document.ModuleDocument`:

- Named types are listed most-used first, then least-referenced, then by name.
- Functions are listed by name.
- Wherever a type is used, a named type becomes a link to its anchor and an
  anonymous type is expanded in place.
- The table of contents mirrors both listings.
"""

from specdoc.model.document import (
    AliasDetail,
    FieldEntry,
    FuncEntry,
    ListDetail,
    MappingDetail,
    MemberEntry,
    ModuleDocument,
    PrimitiveDetail,
    StructureDetail,
    TocEntry,
    TocSection,
    TupleDetail,
    TypeDetail,
    TypeEntry,
    TypeExpr,
    TypeRef,
)
from specdoc.model.nodes import (
    AliasType,
    FieldNode,
    FuncNode,
    ListType,
    MappingType,
    Member,
    ModuleNode,
    PrimitiveType,
    StructureType,
    TupleType,
    TypeNode,
)
from specdoc.views.comments import format_comments

# ###############
# Public Interface
# ###############

NOTES_ANCHOR = "Notes"
TYPES_ANCHOR = "Types"
FUNCTIONS_ANCHOR = "Functions"


def build_document(module: ModuleNode) -> ModuleDocument:
    """Build the documentation model for a parsed module.

    Args:
        module: A fully parsed module.

    Returns:
        A :class:`ModuleDocument` with ordered type and function entries and
        a matching table of contents. Module notes are empty when the module
        carries no comments.
    """
    notes = format_comments(module.comments) if module.comments else []
    types = [build_type_entry(t) for t in module.types()]
    functions = [build_func_entry(f) for f in module.functions()]

    toc: list[TocSection] = []
    if notes:
        toc.append(TocSection(title="Notes", anchor=NOTES_ANCHOR))
    toc.append(
        TocSection(
            title="Types",
            anchor=TYPES_ANCHOR,
            entries=[TocEntry(name=t.name, anchor_id=t.anchor_id) for t in types],
        )
    )
    toc.append(
        TocSection(
            title="Functions",
            anchor=FUNCTIONS_ANCHOR,
            entries=[TocEntry(name=f.name, anchor_id=f.anchor_id) for f in functions],
        )
    )

    return ModuleDocument(name=module.name, notes=notes, types=types, functions=functions, toc=toc)


def build_type_entry(type_node: TypeNode) -> TypeEntry:
    """Build the listing entry for a named type."""
    return TypeEntry(
        name=type_node.name if type_node.name is not None else type_node.id,
        anchor_id=type_node.id,
        detail=type_detail(type_node),
        notes=format_comments(type_node.comments),
        reference_count=type_node.reference_count,
        use_count=type_node.use_count,
    )


def build_func_entry(func: FuncNode) -> FuncEntry:
    """Build the listing entry for a function."""
    return FuncEntry(
        name=func.name,
        anchor_id=func.id,
        parameters=[_member_entry(m) for m in func.parameters],
        results=[_member_entry(m) for m in func.results],
        requires_authentication=func.requires_authentication,
        notes=format_comments(func.comments),
    )


def type_expression(type_node: TypeNode) -> TypeExpr:
    """Return how *type_node* is shown where it is used.

    Named types become links; anonymous types are expanded.
    """
    if type_node.name is None:
        return type_detail(type_node)
    return TypeRef(
        name=type_node.name,
        anchor_id=type_node.id,
        builtin=isinstance(type_node, PrimitiveType),
    )


def type_detail(type_node: TypeNode) -> TypeDetail:
    """Return the full expansion of *type_node*."""
    if isinstance(type_node, PrimitiveType):
        return PrimitiveDetail(description=type_node.description)
    if isinstance(type_node, AliasType):
        return AliasDetail(target=type_expression(type_node.target))
    if isinstance(type_node, StructureType):
        return StructureDetail(fields=[_field_entry(f) for f in type_node.fields])
    if isinstance(type_node, TupleType):
        return TupleDetail(members=[_member_entry(m) for m in type_node.members()])
    if isinstance(type_node, ListType):
        return ListDetail(element=_member_entry(type_node.element))
    # MappingType is the only remaining variant.
    assert isinstance(type_node, MappingType)
    return MappingDetail(key=_member_entry(type_node.key), value=_member_entry(type_node.value))


# ################
# Implementation
# ################


def _member_entry(member: Member) -> MemberEntry:
    return MemberEntry(
        label=member.label,
        type=type_expression(member.type),
        notes=format_comments(member.comments),
    )


def _field_entry(field: FieldNode) -> FieldEntry:
    return FieldEntry(
        name=field.name,
        type=type_expression(field.type),
        notes=format_comments(field.comments),
    )
