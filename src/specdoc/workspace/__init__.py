# Copyright 2026 specdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Workspace configuration for specdoc."""

from specdoc.workspace.config import (
    CONFIG_FILE_NAME,
    WorkspaceConfig,
    WorkspaceConfigError,
    find_sources,
    load_workspace_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "WorkspaceConfig",
    "WorkspaceConfigError",
    "find_sources",
    "load_workspace_config",
]
