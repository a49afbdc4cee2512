# Copyright 2026 specdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token stream used by the grammar engine.

Hides comment tokens from the grammar: they are collected into a pending list
that the grammar pulls whenever it decides which node the comments belong to.
"""

from collections.abc import Iterable
from typing import NoReturn

from specdoc.compiler.scanner import Scanner, SpecSyntaxError, Token, TokenType

# ###############
# Public Interface
# ###############


class TokenStream:
    """Content tokens of a line source plus a side-buffer of comments."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._scanner = Scanner(lines)
        self._tokens = self._scanner.tokens()
        self._pending: list[str] = []

    def next_token(self) -> Token:
        """Return the next non-comment token.

        Raises:
            SpecSyntaxError: If the input ends before another token is found.
        """
        token = self.next_token_or_none()
        if token is None:
            line, column = self._scanner.position
            raise SpecSyntaxError("Unexpected end of file", line, column)
        return token

    def next_token_or_none(self) -> Token | None:
        """Return the next non-comment token, or None at end of input."""
        for token in self._tokens:
            if token.type == TokenType.COMMENT:
                self._pending.append(token.value)
            else:
                return token
        return None

    def pull_comments(self) -> list[str]:
        """Return the comments seen since the last pull and clear the buffer."""
        comments = self._pending
        self._pending = []
        return comments

    def expect_word(self, what: str) -> Token:
        """Consume the next token, which must be a word described by *what*."""
        token = self.next_token()
        if not token.is_word():
            self.unexpected(what, token)
        return token

    def expect_delimiter(self, delimiter: str) -> Token:
        """Consume the next token, which must be *delimiter*."""
        token = self.next_token()
        if not token.is_delimiter(delimiter):
            self.unexpected(repr(delimiter), token)
        return token

    def unexpected(self, expected: str, found: Token) -> NoReturn:
        """Raise an "expected X, found Y" error at the position of *found*."""
        raise SpecSyntaxError(f"Expected {expected}, found {found.value!r}", found.line, found.column)

    def error(self, message: str, token: Token) -> NoReturn:
        """Raise a general syntax error at the position of *token*."""
        raise SpecSyntaxError(message, token.line, token.column)
