# Copyright 2026 specdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for module specification files.

Converts a line source into a lazy stream of tokens. Block comments are
reflowed into paragraphs while scanning so that later stages only ever see a
single comment token per ``/* ... */`` run.
"""

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

# ###############
# Public Interface
# ###############

TAB_WIDTH = 8

DELIMITERS = frozenset("/<>(){},;")


class TokenType(enum.Enum):
    """All token types produced by the scanner."""

    WORD = "word"
    DELIMITER = "delimiter"
    COMMENT = "comment"


@dataclass(frozen=True)
class Token:
    """A lexical token with its source location.

    Attributes:
        type: The kind of token.
        value: The raw text of the token, or the reflowed text for comments.
        line: 1-based line number where the token starts.
        column: 1-based column number (after tab expansion) where the token starts.
    """

    type: TokenType
    value: str
    line: int
    column: int

    def is_word(self, word: str | None = None) -> bool:
        """Return True if this is a word token, optionally with the given text."""
        return self.type == TokenType.WORD and (word is None or self.value == word)

    def is_delimiter(self, delimiter: str) -> bool:
        """Return True if this is the given delimiter."""
        return self.type == TokenType.DELIMITER and self.value == delimiter


class SpecSyntaxError(Exception):
    """Raised for any syntax error in a module specification.

    Covers invalid characters, unterminated comments, unexpected tokens,
    undefined or duplicate types and wrong arity. Always fatal.

    Attributes:
        message: Human-readable description without location.
        line: 1-based line number of the error.
        column: 1-based column number of the error.
    """

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.message = message
        self.line = line
        self.column = column


class Scanner:
    """Pulls lines from a line source on demand and produces tokens.

    The scanner keeps track of the current line and column so that callers can
    report errors at the point where input ran out.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self._text = ""
        self._line = 0
        self._pos = 0

    @property
    def position(self) -> tuple[int, int]:
        """Return the current 1-based (line, column)."""
        return max(self._line, 1), self._pos + 1

    def tokens(self) -> Iterator[Token]:
        """Yield tokens until the line source is exhausted."""
        while self._skip_whitespace():
            yield self._scan_token()

    # ------------------------------------------------------------------
    # Line and whitespace handling
    # ------------------------------------------------------------------

    def _next_line(self) -> bool:
        """Load the next input line; return False at end of input."""
        try:
            raw = next(self._lines)
        except StopIteration:
            return False
        self._text = raw.rstrip("\r\n").replace("\t", _TAB)
        self._line += 1
        self._pos = 0
        return True

    def _skip_whitespace(self) -> bool:
        """Advance to the next non-blank character, crossing lines as needed.

        Returns False when the input is exhausted.
        """
        while True:
            while self._pos < len(self._text) and self._text[self._pos].isspace():
                self._pos += 1
            if self._pos < len(self._text):
                return True
            if not self._next_line():
                return False

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> Token:
        """Dispatch on the current character."""
        ch = self._text[self._pos]
        line = self._line
        col = self._pos + 1

        if ch == "_" or ch.isalpha():
            return self._scan_word(line, col)
        if ch == "/":
            return self._scan_comment(line, col)
        if ch in DELIMITERS:
            self._pos += 1
            return Token(TokenType.DELIMITER, ch, line, col)
        raise SpecSyntaxError(f"Invalid delimiter {ch!r}", line, col)

    def _scan_word(self, line: int, col: int) -> Token:
        """Scan an identifier or reserved word."""
        start = self._pos
        while self._pos < len(self._text) and _is_word_char(self._text[self._pos]):
            self._pos += 1
        if self._pos < len(self._text):
            ch = self._text[self._pos]
            if not ch.isspace() and ch not in DELIMITERS:
                raise SpecSyntaxError(f"Invalid character {ch!r}", line, self._pos + 1)
        return Token(TokenType.WORD, self._text[start : self._pos], line, col)

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def _scan_comment(self, line: int, col: int) -> Token:
        """Scan a block comment and reflow its text into paragraphs."""
        if not self._text.startswith("/*", self._pos):
            raise SpecSyntaxError("Invalid use of slash", line, col)
        self._pos += 2
        comment_lines: list[tuple[int, str]] = []
        while True:
            column, text, closed = self._scan_comment_line()
            comment_lines.append((column, text))
            if closed:
                break
            if not self._next_line():
                raise SpecSyntaxError("Unterminated comment", line, col)
        return Token(TokenType.COMMENT, reflow(comment_lines), line, col)

    def _scan_comment_line(self) -> tuple[int, str, bool]:
        """Consume the comment text on the current line.

        Returns the 0-based column where the text starts, the text with
        trailing whitespace removed, and whether the terminator was found.
        """
        text = self._text
        pos = self._pos
        while pos < len(text) and text[pos].isspace():
            pos += 1
        if pos < len(text) and text[pos] == "*" and not text.startswith("*/", pos):
            pos += 1
            while pos < len(text) and text[pos].isspace():
                pos += 1
        end = text.find("*/", pos)
        if end < 0:
            self._pos = len(text)
            return pos, text[pos:].rstrip(), False
        self._pos = end + 2
        return pos, text[pos:end].rstrip(), True


def tokenize(lines: Iterable[str]) -> Iterator[Token]:
    """Tokenize a line source lazily.

    Args:
        lines: Any iterable of text lines (trailing newlines are ignored).

    Returns:
        An iterator of tokens; comments appear as COMMENT tokens.

    Raises:
        SpecSyntaxError: On invalid characters or unterminated comments, when
            the offending token is reached.
    """
    return Scanner(lines).tokens()


def reflow(lines: list[tuple[int, str]]) -> str:
    """Join raw comment lines into paragraphs.

    Each entry is ``(column, text)``. Leading and trailing blank lines are
    dropped and the first remaining line fixes the starting column. A blank
    line ends the current paragraph and leaves one empty separator line; a
    line indented past the starting column starts a new paragraph that keeps
    the extra indentation; anything else is joined to the current paragraph
    with a single space.

    The empty separator line stays in the result, so ``a``, blank, ``b``
    reflows to ``"a\\n\\nb"`` rather than ``"a\\nb"``. Without it, reflowing
    the result again would join the two paragraphs into ``"a b"``.
    """
    first = 0
    last = len(lines)
    while first < last and not lines[first][1]:
        first += 1
    while last > first and not lines[last - 1][1]:
        last -= 1
    if first == last:
        return ""

    start_col = lines[first][0]
    paragraphs: list[str] = []
    current: str | None = None
    for col, text in lines[first:last]:
        if not text:
            if current is not None:
                paragraphs.append(current)
                current = None
            if paragraphs[-1]:
                paragraphs.append("")
        elif col > start_col:
            if current is not None:
                paragraphs.append(current)
            current = " " * (col - start_col) + text
        elif current is None:
            current = text
        else:
            current = f"{current} {text}"
    if current is not None:
        paragraphs.append(current)
    return "\n".join(paragraphs)


# ################
# Implementation
# ################


_TAB = " " * TAB_WIDTH


def _is_word_char(ch: str) -> bool:
    return ch == "_" or ch.isalnum()
