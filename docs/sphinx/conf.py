# Copyright 2026 specdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for specdoc documentation."""

project = "specdoc"
author = "specdoc Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]

html_theme = "alabaster"
