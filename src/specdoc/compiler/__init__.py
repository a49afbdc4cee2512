# Copyright 2026 specdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiler pipeline for .spec files: scanning, parsing, and artifact building."""

from specdoc.compiler.artifact import ARTIFACT_SUFFIX, deserialize, read_artifact, serialize, write_artifact
from specdoc.compiler.build import CompilerError, compile_files, load_module
from specdoc.compiler.parser import parse
from specdoc.compiler.scanner import SpecSyntaxError, reflow, tokenize

__all__ = [
    "parse",
    "SpecSyntaxError",
    "tokenize",
    "reflow",
    "serialize",
    "deserialize",
    "write_artifact",
    "read_artifact",
    "ARTIFACT_SUFFIX",
    "compile_files",
    "load_module",
    "CompilerError",
]
