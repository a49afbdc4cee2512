# Copyright 2026 specdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Documentation generator for module specification files."""

__version__ = "0.1.0"
