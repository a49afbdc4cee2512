# Copyright 2026 specdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the specdoc documentation checks."""

from specdoc.compiler.parser import parse
from specdoc.validation.checks import ValidationResult, ValidationWarning, validate

# ###############
# Helpers
# ###############


def _messages(source: str) -> list[str]:
    return [w.message for w in validate(parse(source)).warnings]


# ###############
# Checks
# ###############


class TestValidate:
    def test_documented_and_used_module_is_clean(self) -> None:
        result = validate(parse("module M { /* An id. */ typedef int Id; /* Gets. */ funcdef get(Id id); }"))
        assert result.is_clean
        assert result == ValidationResult()

    def test_unused_type(self) -> None:
        assert "Type 'Lonely' is never referenced." in _messages("module M { typedef int Lonely; }")

    def test_type_used_only_by_another_type_is_referenced(self) -> None:
        messages = _messages("module M { typedef int Id; typedef structure { Id id; } Rec; }")
        assert "Type 'Id' is never referenced." not in messages
        assert "Type 'Rec' is never referenced." in messages

    def test_undocumented_type_and_function(self) -> None:
        messages = _messages("module M { typedef int Id; funcdef get(Id id); }")
        assert messages == ["Type 'Id' has no description.", "Function 'get' has no description."]

    def test_blank_comment_counts_as_undocumented(self) -> None:
        messages = _messages("module M { /* */ funcdef ping(); }")
        assert messages == ["Function 'ping' has no description."]

    def test_slot_comments_do_not_document_the_function(self) -> None:
        messages = _messages("module M { funcdef f(int a /* the a */); }")
        assert messages == ["Function 'f' has no description."]

    def test_warning_order_follows_checks(self) -> None:
        messages = _messages("module M { typedef int B; typedef int A; }")
        assert messages == [
            "Type 'B' is never referenced.",
            "Type 'A' is never referenced.",
            "Type 'B' has no description.",
            "Type 'A' has no description.",
        ]

    def test_warning_is_value_object(self) -> None:
        assert ValidationWarning(message="x") == ValidationWarning(message="x")
