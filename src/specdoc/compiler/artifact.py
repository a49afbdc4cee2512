# Copyright 2026 specdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of module document artifacts.

Artifacts are stored as compact JSON files. The format is versioned so future
schema changes can be detected.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from specdoc.model.document import ModuleDocument

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"

ARTIFACT_SUFFIX = ".spec.json"


def serialize(document: ModuleDocument) -> str:
    """Serialize a ModuleDocument to a compact JSON string."""
    payload = {"v": ARTIFACT_FORMAT_VERSION, "module": document.model_dump(mode="json")}
    return json.dumps(payload, separators=(",", ":"))


def deserialize(data: str) -> ModuleDocument:
    """Deserialize a ModuleDocument from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed :class:`ModuleDocument`.

    Raises:
        ValueError: If the data is not valid JSON, the artifact format version
            is not recognised, or the payload does not match the model.
    """
    obj = json.loads(data)
    version = obj.get("v") if isinstance(obj, dict) else None
    if version != ARTIFACT_FORMAT_VERSION:
        raise ValueError(f"Unsupported artifact format version: {version!r}")
    try:
        return ModuleDocument.model_validate(obj.get("module"))
    except ValidationError as exc:
        raise ValueError(f"Invalid artifact payload: {exc}") from exc


def write_artifact(document: ModuleDocument, path: Path) -> None:
    """Write a document artifact to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(document), encoding="utf-8")


def read_artifact(path: Path) -> ModuleDocument:
    """Read and deserialize a document artifact from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))
