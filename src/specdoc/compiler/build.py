# Copyright 2026 specdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Incremental build of module documents for a set of specification files.

An artifact is reused when it already exists and is strictly newer than the
corresponding source file. Otherwise the source is parsed, its document is
built and the artifact is written to the build directory, mirroring the
source layout below the workspace root.
"""

from __future__ import annotations

import logging
from pathlib import Path

from specdoc.compiler.artifact import ARTIFACT_SUFFIX, read_artifact, write_artifact
from specdoc.compiler.parser import parse
from specdoc.compiler.scanner import SpecSyntaxError
from specdoc.model.document import ModuleDocument
from specdoc.model.nodes import ModuleNode
from specdoc.views.builder import build_document

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class CompilerError(Exception):
    """Raised when a specification file cannot be read, parsed or cached."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


def load_module(source_file: Path) -> ModuleNode:
    """Parse one specification file, reading it line by line.

    Raises:
        CompilerError: If the file cannot be read or contains a syntax error.
    """
    logger.debug("Parsing %s", source_file)
    try:
        with source_file.open(encoding="utf-8") as handle:
            return parse(handle)
    except OSError as exc:
        raise CompilerError(f"Cannot read source file '{source_file}': {exc}") from exc
    except SpecSyntaxError as exc:
        raise CompilerError(f"Syntax error in '{source_file}': {exc}") from exc


def compile_files(files: list[Path], build_dir: Path, root: Path) -> dict[str, ModuleDocument]:
    """Compile specification files into document artifacts.

    Args:
        files: Paths of the specification files to compile. Each must be
            located under *root*.
        build_dir: Root directory for artifacts.
        root: Workspace root; artifact keys are paths relative to it.

    Returns:
        A mapping from canonical keys (relative path without suffix, e.g.
        ``"specs/genome"``) to the built documents.

    Raises:
        CompilerError: On unreadable files, syntax errors, or files outside
            *root*.
    """
    compiled: dict[str, ModuleDocument] = {}
    for source_file in files:
        key = _rel_key(source_file, root)
        if key in compiled:
            continue
        compiled[key] = _compile_file(source_file, _artifact_path(key, build_dir))
    return compiled


# ################
# Implementation
# ################


def _rel_key(source_file: Path, root: Path) -> str:
    """Return the canonical key for a source file (relative path without extension)."""
    try:
        rel = source_file.resolve().relative_to(root.resolve())
    except ValueError:
        raise CompilerError(f"Source file '{source_file}' is not under the workspace root '{root}'") from None
    return str(rel.with_suffix("")).replace("\\", "/")


def _artifact_path(key: str, build_dir: Path) -> Path:
    """Return the artifact path for a canonical key.

    ``"specs/genome"`` maps to ``build_dir/specs/genome.spec.json``.
    """
    parts = key.split("/")
    artifact_dir = build_dir
    for part in parts[:-1]:
        artifact_dir = artifact_dir / part
    return artifact_dir / (parts[-1] + ARTIFACT_SUFFIX)


def _is_up_to_date(source_file: Path, artifact: Path) -> bool:
    """Return True if *artifact* exists and is strictly newer than *source_file*."""
    if not artifact.exists():
        return False
    return artifact.stat().st_mtime > source_file.stat().st_mtime


def _compile_file(source_file: Path, artifact: Path) -> ModuleDocument:
    if _is_up_to_date(source_file, artifact):
        try:
            document = read_artifact(artifact)
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable artifact %s: %s", artifact, exc)
        else:
            logger.debug("Reusing artifact %s", artifact)
            return document

    module = load_module(source_file)
    document = build_document(module)
    try:
        write_artifact(document, artifact)
    except OSError as exc:
        raise CompilerError(f"Cannot write artifact '{artifact}': {exc}") from exc
    logger.info("Wrote %s", artifact)
    return document
