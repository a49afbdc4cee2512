# Copyright 2026 specdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parse tree and documentation model for module specifications."""

from specdoc.model.document import (
    AliasDetail,
    Block,
    FieldEntry,
    FuncEntry,
    ListDetail,
    MappingDetail,
    MemberEntry,
    ModuleDocument,
    NoDescription,
    Preformatted,
    PrimitiveDetail,
    Prose,
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
    Node,
    PrimitiveType,
    StructureType,
    TupleType,
    TypeNode,
)

__all__ = [
    # Parse tree
    "Node",
    "Member",
    "TypeNode",
    "PrimitiveType",
    "AliasType",
    "StructureType",
    "TupleType",
    "ListType",
    "MappingType",
    "FieldNode",
    "FuncNode",
    "ModuleNode",
    # Document model
    "Block",
    "Prose",
    "Preformatted",
    "NoDescription",
    "TypeRef",
    "MemberEntry",
    "FieldEntry",
    "PrimitiveDetail",
    "AliasDetail",
    "StructureDetail",
    "TupleDetail",
    "ListDetail",
    "MappingDetail",
    "TypeDetail",
    "TypeExpr",
    "TypeEntry",
    "FuncEntry",
    "TocEntry",
    "TocSection",
    "ModuleDocument",
]
