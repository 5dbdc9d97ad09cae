# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""String to boolean conversion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from ..base import ValSan, ValSanOptions
from ..exceptions import ConfigurationError
from ..rules.builtin import string_rule
from ..rules.rule import Rule, RuleHint, RuleSet
from ..validation.base import ValidationResult


@dataclass(frozen=True)
class StringToBooleanValSanOptions(ValSanOptions):
    true_values: Tuple[str, ...] = ("true", "1", "yes", "on")
    false_values: Tuple[str, ...] = ("false", "0", "no", "off")

    def __post_init__(self):
        true_values = tuple(v.lower() for v in self.true_values)
        false_values = tuple(v.lower() for v in self.false_values)
        overlap = set(true_values) & set(false_values)
        if overlap:
            raise ConfigurationError(
                f"Values cannot be both true and false: {', '.join(sorted(overlap))}"
            )
        object.__setattr__(self, "true_values", true_values)
        object.__setattr__(self, "false_values", false_values)


class StringToBooleanValSan(ValSan):
    """Map ``"yes"``/``"no"``-style strings to ``True``/``False``.

    Matching is case-insensitive and ignores surrounding whitespace.
    """

    options_class = StringToBooleanValSanOptions
    type = "boolean"
    example = "true"

    def rules(self) -> RuleSet:
        return {
            "string": string_rule,
            "boolean_string": Rule(
                code="boolean",
                user=RuleHint(helper_text="True or false", error_message="Input must be true or false"),
                dev=RuleHint(
                    helper_text="Boolean string (true/false, 1/0, yes/no, on/off)",
                    error_message="Input must be a valid boolean string",
                ),
                context={
                    "true_values": list(self.options.true_values),
                    "false_values": list(self.options.false_values),
                },
            ),
        }

    async def normalize(self, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    async def validate(self, value: Any) -> ValidationResult:
        if not isinstance(value, str):
            return self.fail([string_rule])
        if value not in self.options.true_values and value not in self.options.false_values:
            return self.fail([self.rules()["boolean_string"]])
        return self.succeed()

    async def sanitize(self, value: str) -> bool:
        return value in self.options.true_values


__all__ = ["StringToBooleanValSan", "StringToBooleanValSanOptions"]
