# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Rules shared across several units."""

from __future__ import annotations

from .rule import Rule, RuleHint

required_rule = Rule(
    code="required",
    user=RuleHint(helper_text="Required", error_message="Value is required"),
)

string_rule = Rule(
    code="string",
    user=RuleHint(helper_text="Text", error_message="Value is not valid text"),
    dev=RuleHint(helper_text="string", error_message="Value is not of type string"),
)

string_not_empty_rule = Rule(
    code="string_not_empty",
    user=RuleHint(helper_text="Not empty", error_message="Value must not be empty"),
    dev=RuleHint(helper_text="not empty string", error_message="Value must not be empty"),
)

number_rule = Rule(
    code="number",
    user=RuleHint(helper_text="Number", error_message="Value is not a valid number"),
)

object_rule = Rule(
    code="object",
    user=RuleHint(
        helper_text="Must be a valid object",
        error_message="Value must be a valid object",
    ),
)

array_rule = Rule(
    code="array",
    user=RuleHint(
        helper_text="Must be a valid array",
        error_message="Value must be a valid array",
    ),
)

unexpected_field_rule = Rule(
    code="unexpected_field",
    user=RuleHint(helper_text="Known fields only", error_message="Unexpected field"),
)


__all__ = [
    "array_rule",
    "number_rule",
    "object_rule",
    "required_rule",
    "string_not_empty_rule",
    "string_rule",
    "unexpected_field_rule",
]
