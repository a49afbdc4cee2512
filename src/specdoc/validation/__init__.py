# Copyright 2026 specdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Documentation checks for parsed modules (unused types, missing descriptions)."""

from specdoc.validation.checks import (
    ValidationResult,
    ValidationWarning,
    validate,
)

__all__ = [
    "ValidationResult",
    "ValidationWarning",
    "validate",
]
