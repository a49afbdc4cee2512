# Copyright 2026 specdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Documentation checks for parsed modules.

A module that parses is always valid; these checks only point out gaps in
its documentation, such as types nobody uses or declarations without
comments.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from specdoc.model.nodes import ModuleNode, TypeNode

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ValidationWarning:
    """A documentation issue found in a parsed module.

    Attributes:
        message: Human-readable description of the warning.
    """

    message: str


@dataclass
class ValidationResult:
    """Result of running the documentation checks.

    Attributes:
        warnings: Issues found, in declaration order per check.
    """

    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        """Return True if no warnings were found."""
        return not self.warnings


def validate(module: ModuleNode) -> ValidationResult:
    """Run all documentation checks on a parsed module.

    Checks performed:

    1. **Unused types**: a typedef that no other type and no function refers to.
    2. **Undocumented types**: a typedef without any comment of its own.
    3. **Undocumented functions**: a funcdef without any comment of its own.

    Args:
        module: The parsed module to check.

    Returns:
        A :class:`ValidationResult` with the warnings found.
    """
    warnings: list[ValidationWarning] = []
    warnings.extend(_check_unused_types(module))
    warnings.extend(_check_undocumented_types(module))
    warnings.extend(_check_undocumented_functions(module))
    return ValidationResult(warnings=warnings)


# ################
# Implementation
# ################


def _type_label(type_node: TypeNode) -> str:
    return type_node.name if type_node.name is not None else type_node.id


def _check_unused_types(module: ModuleNode) -> list[ValidationWarning]:
    return [
        ValidationWarning(message=f"Type '{_type_label(t)}' is never referenced.")
        for t in module.declared_types()
        if t.reference_count == 0 and t.use_count == 0
    ]


def _check_undocumented_types(module: ModuleNode) -> list[ValidationWarning]:
    return [
        ValidationWarning(message=f"Type '{_type_label(t)}' has no description.")
        for t in module.declared_types()
        if not any(c.strip() for c in t.comments)
    ]


def _check_undocumented_functions(module: ModuleNode) -> list[ValidationWarning]:
    return [
        ValidationWarning(message=f"Function '{f.name}' has no description.")
        for f in module.functions()
        if not any(c.strip() for c in f.comments)
    ]
