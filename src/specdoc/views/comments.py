# Copyright 2026 specdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Formatting of reflowed comment text into documentation blocks."""

import textwrap
from collections.abc import Iterable

from specdoc.model.document import Block, NoDescription, Preformatted, Prose

# ###############
# Public Interface
# ###############


def format_comments(comments: Iterable[str]) -> list[Block]:
    """Convert a list of comment texts into prose and preformatted blocks.

    Each comment is split into lines as produced by the scanner's reflow.
    Lines that start with whitespace were indented in the source and form
    preformatted blocks (consecutive ones are merged); every other non-blank
    line is a prose paragraph. Blank lines only separate blocks.

    Returns:
        The blocks of all comments in order, or a single
        :class:`NoDescription` block when there is nothing to show.
    """
    blocks: list[Block] = []
    for comment in comments:
        blocks.extend(_format_comment(comment))
    if not blocks:
        return [NoDescription()]
    return blocks


# ################
# Implementation
# ################


def _format_comment(text: str) -> list[Block]:
    blocks: list[Block] = []
    literal: list[str] = []
    for line in text.split("\n"):
        if line.strip() and line[0].isspace():
            literal.append(line)
            continue
        if literal:
            blocks.append(_preformatted(literal))
            literal = []
        if line.strip():
            blocks.append(Prose(text=line.strip()))
    if literal:
        blocks.append(_preformatted(literal))
    return blocks


def _preformatted(lines: list[str]) -> Preformatted:
    """Build a literal block, removing the indentation common to all lines."""
    return Preformatted(lines=textwrap.dedent("\n".join(lines)).split("\n"))
