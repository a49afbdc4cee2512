# Copyright 2026 specdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Render-agnostic documentation model for a parsed module.

A renderer turns a :class:`ModuleDocument` into markup. Named types appear as
:class:`TypeRef` links to their anchor; anonymous types are expanded in place
as one of the detail models.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class Prose(BaseModel):
    """A paragraph of running text."""

    kind: Literal["prose"] = "prose"
    text: str


class Preformatted(BaseModel):
    """A literal block whose lines keep their relative indentation."""

    kind: Literal["preformatted"] = "preformatted"
    lines: list[str]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class NoDescription(BaseModel):
    """Placeholder for an element that has no documentation."""

    kind: Literal["none"] = "none"


# One formatted piece of documentation.
Block = Annotated[Prose | Preformatted | NoDescription, _Field(discriminator="kind")]


class TypeRef(BaseModel):
    """A link to a named type's anchor.

    ``builtin`` is set for primitive types, which have no entry of their own
    in the type listing.
    """

    kind: Literal["ref"] = "ref"
    name: str
    anchor_id: str
    builtin: bool = False


class MemberEntry(BaseModel):
    """One slot of a tuple, list, mapping or function signature."""

    label: str | None = None
    type: TypeExpr
    notes: list[Block] = _Field(default_factory=list)


class FieldEntry(BaseModel):
    """One named field of a structure."""

    name: str
    type: TypeExpr
    notes: list[Block] = _Field(default_factory=list)


class PrimitiveDetail(BaseModel):
    kind: Literal["primitive"] = "primitive"
    description: str


class AliasDetail(BaseModel):
    kind: Literal["alias"] = "alias"
    target: TypeExpr


class StructureDetail(BaseModel):
    kind: Literal["structure"] = "structure"
    fields: list[FieldEntry] = _Field(default_factory=list)


class TupleDetail(BaseModel):
    kind: Literal["tuple"] = "tuple"
    members: list[MemberEntry] = _Field(default_factory=list)


class ListDetail(BaseModel):
    kind: Literal["list"] = "list"
    element: MemberEntry


class MappingDetail(BaseModel):
    kind: Literal["mapping"] = "mapping"
    key: MemberEntry
    value: MemberEntry


# The full expansion of a type definition.
TypeDetail = Annotated[
    PrimitiveDetail | AliasDetail | StructureDetail | TupleDetail | ListDetail | MappingDetail,
    _Field(discriminator="kind"),
]

# How a type is shown where it is used: a link for named types, the
# expansion for anonymous ones.
TypeExpr = Annotated[
    TypeRef | PrimitiveDetail | AliasDetail | StructureDetail | TupleDetail | ListDetail | MappingDetail,
    _Field(discriminator="kind"),
]


class TypeEntry(BaseModel):
    """A named type in the module's type listing."""

    name: str
    anchor_id: str
    detail: TypeDetail
    notes: list[Block] = _Field(default_factory=list)
    reference_count: int = 0
    use_count: int = 0


class FuncEntry(BaseModel):
    """A function in the module's function listing."""

    name: str
    anchor_id: str
    parameters: list[MemberEntry] = _Field(default_factory=list)
    results: list[MemberEntry] = _Field(default_factory=list)
    requires_authentication: bool = False
    notes: list[Block] = _Field(default_factory=list)


class TocEntry(BaseModel):
    """A table-of-contents link from a name to its anchor."""

    name: str
    anchor_id: str


class TocSection(BaseModel):
    """A top-level table-of-contents item with its nested entries."""

    title: str
    anchor: str
    entries: list[TocEntry] = _Field(default_factory=list)


class ModuleDocument(BaseModel):
    """Documentation for one module.

    ``types`` and ``functions`` are already in display order and ``toc``
    mirrors that order.
    """

    name: str
    notes: list[Block] = _Field(default_factory=list)
    types: list[TypeEntry] = _Field(default_factory=list)
    functions: list[FuncEntry] = _Field(default_factory=list)
    toc: list[TocSection] = _Field(default_factory=list)


# Resolve forward references for models that use TypeExpr.
MemberEntry.model_rebuild()
FieldEntry.model_rebuild()
AliasDetail.model_rebuild()
StructureDetail.model_rebuild()
TupleDetail.model_rebuild()
ListDetail.model_rebuild()
MappingDetail.model_rebuild()
TypeEntry.model_rebuild()
FuncEntry.model_rebuild()
ModuleDocument.model_rebuild()
