# Copyright 2026 specdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the specdoc workspace configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".specdoc.yaml"

DEFAULT_BUILD_DIRECTORY = ".specdoc-build"

DEFAULT_SOURCES = ["**/*.spec"]


class WorkspaceConfigError(Exception):
    """Raised when a workspace configuration file is invalid or cannot be loaded."""


@dataclass
class WorkspaceConfig:
    """The parsed configuration for a specdoc workspace.

    Attributes:
        build_directory: Relative path (from the workspace root) for document artifacts.
        sources: Glob patterns, relative to the workspace root, selecting the
            specification files of the workspace.
    """

    build_directory: str
    sources: list[str] = field(default_factory=lambda: list(DEFAULT_SOURCES))


def load_workspace_config(path: Path) -> WorkspaceConfig:
    """Load and parse a specdoc workspace configuration file.

    Args:
        path: Path to the `.specdoc.yaml` file.

    Returns:
        A WorkspaceConfig instance populated from the file.

    Raises:
        WorkspaceConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise WorkspaceConfigError(f"Workspace config file not found: {path}") from None
    except OSError as exc:
        raise WorkspaceConfigError(f"Cannot read workspace config file: {exc}") from exc

    return _parse_workspace_config(text, source_label=str(path))


def find_sources(root: Path, config: WorkspaceConfig) -> list[Path]:
    """Return the specification files of a workspace, sorted and without duplicates.

    Files inside the build directory are never returned.
    """
    build_dir = (root / config.build_directory).resolve()
    found: set[Path] = set()
    for pattern in config.sources:
        for path in root.glob(pattern):
            resolved = path.resolve()
            if path.is_file() and build_dir not in resolved.parents:
                found.add(path)
    return sorted(found)


def default_config_text() -> str:
    """Return the content written by ``specdoc init``."""
    return (
        "# specdoc workspace configuration\n"
        f"build-directory: {DEFAULT_BUILD_DIRECTORY}\n"
        "sources:\n"
        + "".join(f'  - "{pattern}"\n' for pattern in DEFAULT_SOURCES)
    )


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"build-directory", "sources"})


def _parse_workspace_config(text: str, source_label: str = "<string>") -> WorkspaceConfig:
    """Parse workspace config YAML text into a WorkspaceConfig.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        WorkspaceConfigError: If the YAML is invalid, required fields are
            missing or unknown keys are present.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise WorkspaceConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if not isinstance(data, dict):
        raise WorkspaceConfigError(f"{source_label}: workspace config must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise WorkspaceConfigError(f"{source_label}: unknown field(s): {', '.join(unknown)}")

    build_directory = _require_string(data, "build-directory", source_label)

    sources = list(DEFAULT_SOURCES)
    if "sources" in data:
        raw_sources = data["sources"]
        if not isinstance(raw_sources, list) or not all(isinstance(s, str) for s in raw_sources):
            raise WorkspaceConfigError(f"{source_label}: 'sources' must be a list of strings")
        sources = list(raw_sources)

    return WorkspaceConfig(build_directory=build_directory, sources=sources)


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a required string field from a mapping, raising WorkspaceConfigError if missing."""
    if key not in mapping:
        raise WorkspaceConfigError(f"{source_label}: missing required field '{key}'")
    value = mapping[key]
    if not isinstance(value, str):
        raise WorkspaceConfigError(f"{source_label}: '{key}' must be a string")
    return value
