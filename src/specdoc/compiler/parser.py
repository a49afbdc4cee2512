# Copyright 2026 specdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent parser for module specifications.

Converts a line source into a :class:`~specdoc.model.nodes.ModuleNode`. Type
names are resolved while parsing, so a type must be declared before any later
declaration uses it. The first error aborts the parse.
"""

from collections.abc import Iterable

from specdoc.compiler.registry import IdGenerator, TypeRegistry
from specdoc.compiler.scanner import SpecSyntaxError, Token
from specdoc.compiler.token_stream import TokenStream
from specdoc.model.nodes import (
    AliasType,
    FieldNode,
    FuncNode,
    ListType,
    MappingType,
    ModuleNode,
    Node,
    StructureType,
    TupleType,
    TypeNode,
)

__all__ = ["SpecSyntaxError", "parse"]

# ###############
# Public Interface
# ###############


def parse(source: str | Iterable[str]) -> ModuleNode:
    """Parse a module specification.

    Args:
        source: The full specification text, or any iterable of its lines
            (an open text file works).

    Returns:
        The root node of the parsed module.

    Raises:
        SpecSyntaxError: On the first lexical, syntactic or naming error.
    """
    lines = source.splitlines() if isinstance(source, str) else source
    return _Parser(TokenStream(lines)).parse()


# ################
# Implementation
# ################


class _Parser:
    """Recursive-descent parser over a comment-buffering token stream."""

    def __init__(self, stream: TokenStream) -> None:
        self._stream = stream
        self._ids = IdGenerator()
        self._registry = TypeRegistry(self._ids)

    def parse(self) -> ModuleNode:
        """Parse: module <Name> { definition* }"""
        token = self._stream.next_token()
        comments = self._stream.pull_comments()
        if not token.is_word("module"):
            self._stream.unexpected("'module'", token)
        name_tok = self._stream.expect_word("module name")
        comments.extend(self._stream.pull_comments())
        module = ModuleNode(name_tok.value)
        module.add_comments(comments)
        self._parse_definitions(module)
        self._parse_end(module)
        return module

    # ------------------------------------------------------------------
    # Module body
    # ------------------------------------------------------------------

    def _parse_definitions(self, module: ModuleNode) -> None:
        """Parse the braced definition list of a module."""
        self._stream.expect_delimiter("{")
        module.add_comments(self._stream.pull_comments())
        token = self._stream.next_token()
        while not token.is_delimiter("}"):
            leading = self._stream.pull_comments()
            definition = self._parse_definition(token)
            definition.prepend_comments(leading)
            module.attach(definition)
            token = self._stream.next_token()
        module.add_comments(self._stream.pull_comments())

    def _parse_end(self, module: ModuleNode) -> None:
        """Only comments may follow the closing brace of the module."""
        token = self._stream.next_token_or_none()
        if token is not None:
            self._stream.error("Unexpected text after end of module", token)
        module.add_comments(self._stream.pull_comments())

    def _parse_definition(self, token: Token) -> TypeNode | FuncNode:
        if token.is_word("typedef"):
            return self._parse_typedef()
        if token.is_word("funcdef"):
            return self._parse_funcdef()
        self._stream.unexpected("'typedef' or 'funcdef'", token)

    # ------------------------------------------------------------------
    # Type definitions
    # ------------------------------------------------------------------

    def _parse_typedef(self) -> TypeNode:
        """Parse: typedef <type> <Name> ;"""
        comments: list[str] = []
        type_node = self._parse_type(comments)
        name_tok = self._stream.expect_word("type name")
        comments.extend(self._stream.pull_comments())
        name = name_tok.value
        if name in self._registry:
            self._stream.error(f"Duplicate type name {name!r}", name_tok)
        if type_node.is_anonymous:
            type_node.name = name
            result = type_node
        else:
            result = AliasType(self._ids.next_id("type"), name)
            result.attach(type_node)
        self._registry.register(name, result)
        self._stream.expect_delimiter(";")
        comments.extend(self._stream.pull_comments())
        result.add_comments(comments)
        return result

    def _parse_type(self, comments: list[str]) -> TypeNode:
        """Parse a type whose first token has not been read yet."""
        token = self._stream.next_token()
        comments.extend(self._stream.pull_comments())
        return self._parse_type_from(token, comments)

    def _parse_type_from(self, token: Token, comments: list[str]) -> TypeNode:
        """Parse a type starting at *token*.

        Comments found inside the declaration are appended to *comments*.
        """
        if not token.is_word():
            self._stream.unexpected("a type", token)
        keyword = token.value
        if keyword == "structure":
            return self._parse_structure(comments)
        if keyword == "tuple":
            tuple_type = TupleType(self._ids.next_id("type"))
            closing = self._parse_type_list(tuple_type, "<", ">", comments)
            if not tuple_type.children:
                self._stream.error("A tuple type must have at least one member type", closing)
            return tuple_type
        if keyword == "list":
            list_type = ListType(self._ids.next_id("type"))
            closing = self._parse_type_list(list_type, "<", ">", comments)
            if len(list_type.children) != 1:
                self._stream.error("A list type must have exactly one member type", closing)
            return list_type
        if keyword == "mapping":
            mapping_type = MappingType(self._ids.next_id("type"))
            closing = self._parse_type_list(mapping_type, "<", ">", comments)
            if len(mapping_type.children) != 2:
                self._stream.error("A mapping type must have exactly two member types", closing)
            return mapping_type
        found = self._registry.get(keyword)
        if found is None:
            self._stream.error(f"Undefined type {keyword!r}", token)
        return found

    def _parse_structure(self, comments: list[str]) -> StructureType:
        """Parse: structure { (<type> <name> ;)* }"""
        structure = StructureType(self._ids.next_id("type"))
        self._stream.expect_delimiter("{")
        comments.extend(self._stream.pull_comments())
        token = self._stream.next_token()
        while not token.is_delimiter("}"):
            field_comments = self._stream.pull_comments()
            field_type = self._parse_type_from(token, field_comments)
            name_tok = self._stream.expect_word("a field name")
            field_comments.extend(self._stream.pull_comments())
            self._stream.expect_delimiter(";")
            field_comments.extend(self._stream.pull_comments())
            field = FieldNode(name_tok.value)
            field.attach(field_type)
            field.add_comments(field_comments)
            structure.attach(field)
            token = self._stream.next_token()
        comments.extend(self._stream.pull_comments())
        return structure

    def _parse_type_list(self, node: Node, opening: str, closing: str, comments: list[str]) -> Token:
        """Parse a bracketed, comma-separated list of types into *node*.

        A word following a member type is stored as that member's slot label.
        Comments from the start of a member through its delimiter, and after
        a comma up to the next member, belong to the member slot. Returns the
        closing delimiter token.
        """
        self._stream.expect_delimiter(opening)
        comments.extend(self._stream.pull_comments())
        token = self._stream.next_token()
        while not token.is_delimiter(closing):
            slot_comments = self._stream.pull_comments()
            member = self._parse_type_from(token, slot_comments)
            token = self._stream.next_token()
            label: str | None = None
            if token.is_word():
                label = token.value
                token = self._stream.next_token()
            slot_comments.extend(self._stream.pull_comments())
            if token.is_delimiter(","):
                token = self._stream.next_token()
                if token.is_delimiter(closing):
                    self._stream.unexpected("a type", token)
                # Comments between the comma and the next member document this slot.
                slot_comments.extend(self._stream.pull_comments())
            elif not token.is_delimiter(closing):
                self._stream.unexpected(f"',' or '{closing}'", token)
            node.attach(member, label=label, comments=slot_comments)
        comments.extend(self._stream.pull_comments())
        return token

    # ------------------------------------------------------------------
    # Function definitions
    # ------------------------------------------------------------------

    def _parse_funcdef(self) -> FuncNode:
        """Parse: funcdef <Name> ( params ) [returns ( results )] [authentication required] ;"""
        comments: list[str] = []
        name_tok = self._stream.expect_word("a function name")
        comments.extend(self._stream.pull_comments())
        func = FuncNode(self._ids.next_id("func"), name_tok.value)
        self._parse_type_list(func, "(", ")", comments)
        func.parameter_count = len(func.children)
        token = self._stream.next_token()
        comments.extend(self._stream.pull_comments())
        if token.is_word("returns"):
            self._parse_type_list(func, "(", ")", comments)
            token = self._stream.next_token()
            comments.extend(self._stream.pull_comments())
        if token.is_word("authentication"):
            token = self._stream.next_token()
            comments.extend(self._stream.pull_comments())
            if not token.is_word("required"):
                self._stream.unexpected("'required'", token)
            func.requires_authentication = True
            token = self._stream.next_token()
            comments.extend(self._stream.pull_comments())
        if not token.is_delimiter(";"):
            self._stream.unexpected("';'", token)
        func.add_comments(comments)
        return func
