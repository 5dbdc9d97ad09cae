# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Numeric checks and the string-to-number conversion."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Union

from ..base import ValSan, ValSanOptions
from ..exceptions import ConfigurationError
from ..rules.builtin import number_rule
from ..rules.rule import Rule, RuleHint, RuleSet
from ..validation.base import ValidationResult

Number = Union[int, float]


def is_number(value: Any) -> bool:
    """True for ints and floats that are not NaN; bools are not numbers."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def parse_number(text: str) -> Number:
    """Best-effort parse of *text*; unparseable input yields ``nan``."""

    candidate = text.strip()
    if not candidate or "_" in candidate:
        return math.nan
    try:
        return int(candidate)
    except ValueError:
        pass
    try:
        return float(candidate)
    except ValueError:
        return math.nan


class _NumberValSan(ValSan):
    type = "number"
    example = "42"

    def rules(self) -> RuleSet:
        return {"number": number_rule}

    async def validate(self, value: Any) -> ValidationResult:
        if not is_number(value):
            return self.fail([number_rule])
        return self.succeed()

    async def sanitize(self, value: Number) -> Number:
        return value


class StringToNumberValSan(_NumberValSan):
    """Convert numeric text (``"42"``, ``" -3.5 "``) to ``int`` or ``float``.

    Numbers pass through unchanged. Empty strings, bools, infinities and
    anything unparseable are rejected with the ``number`` rule.
    """

    async def normalize(self, value: Any) -> Any:
        if isinstance(value, bool):
            return math.nan
        if isinstance(value, (int, float)):
            return value
        if isinstance(value, str):
            return parse_number(value)
        return math.nan

    async def validate(self, value: Any) -> ValidationResult:
        if not is_number(value) or not math.isfinite(value):
            return self.fail([number_rule])
        return self.succeed()


class IntegerValidator(_NumberValSan):
    """Accept whole numbers; ``3.0`` counts as whole, ``3.14`` does not."""

    def _not_integer(self, actual: Any) -> Rule:
        return Rule(
            code="NUMBER_NOT_INTEGER",
            user=RuleHint(helper_text="Whole number", error_message="Number must be an integer"),
            context={"actual": actual},
        )

    def rules(self) -> RuleSet:
        return {"number": number_rule, "integer": self._not_integer(None)}

    async def validate(self, value: Any) -> ValidationResult:
        if not is_number(value):
            return self.fail([number_rule])
        if isinstance(value, float) and not value.is_integer():
            return self.fail([self._not_integer(value)])
        return self.succeed()


@dataclass(frozen=True)
class MinValidatorOptions(ValSanOptions):
    min: Number = None  # type: ignore[assignment]

    def __post_init__(self):
        if not is_number(self.min):
            raise ConfigurationError("MinValidator requires a numeric 'min'")


class MinValidator(_NumberValSan):
    options_class = MinValidatorOptions

    def rules(self) -> RuleSet:
        minimum = self.options.min
        return {
            "number": number_rule,
            "min": Rule(
                code="minimum",
                user=RuleHint(
                    helper_text=f"Minimum: {minimum}",
                    error_message=f"Number must be at least {minimum}",
                ),
                context={"min": minimum},
            ),
        }

    async def validate(self, value: Any) -> ValidationResult:
        if not is_number(value):
            return self.fail([number_rule])
        if value < self.options.min:
            return self.fail([self.rules()["min"]])
        return self.succeed()


@dataclass(frozen=True)
class MaxValidatorOptions(ValSanOptions):
    max: Number = None  # type: ignore[assignment]

    def __post_init__(self):
        if not is_number(self.max):
            raise ConfigurationError("MaxValidator requires a numeric 'max'")


class MaxValidator(_NumberValSan):
    options_class = MaxValidatorOptions

    def rules(self) -> RuleSet:
        maximum = self.options.max
        return {
            "number": number_rule,
            "max": Rule(
                code="maximum",
                user=RuleHint(
                    helper_text=f"Maximum: {maximum}",
                    error_message=f"Number must be at most {maximum}",
                ),
                context={"max": maximum},
            ),
        }

    async def validate(self, value: Any) -> ValidationResult:
        if not is_number(value):
            return self.fail([number_rule])
        if value > self.options.max:
            return self.fail([self.rules()["max"]])
        return self.succeed()


@dataclass(frozen=True)
class RangeValidatorOptions(ValSanOptions):
    min: Number = None  # type: ignore[assignment]
    max: Number = None  # type: ignore[assignment]

    def __post_init__(self):
        if not is_number(self.min) or not is_number(self.max):
            raise ConfigurationError("RangeValidator requires numeric 'min' and 'max'")
        if self.min > self.max:
            raise ConfigurationError(f"RangeValidator min ({self.min}) is greater than max ({self.max})")


class RangeValidator(_NumberValSan):
    """Inclusive ``min <= value <= max``."""

    options_class = RangeValidatorOptions

    def rules(self) -> RuleSet:
        low, high = self.options.min, self.options.max
        return {
            "number": number_rule,
            "range": Rule(
                code="number_range",
                user=RuleHint(helper_text="Range", error_message=f"Number must be between {low} and {high}"),
                dev=RuleHint(helper_text="Range", error_message=f"Number must be between {low} and {high}"),
                context={"min": low, "max": high},
            ),
        }

    async def validate(self, value: Any) -> ValidationResult:
        if not is_number(value):
            return self.fail([number_rule])
        if value < self.options.min or value > self.options.max:
            return self.fail([self.rules()["range"]])
        return self.succeed()


__all__ = [
    "IntegerValidator",
    "MaxValidator",
    "MaxValidatorOptions",
    "MinValidator",
    "MinValidatorOptions",
    "RangeValidator",
    "RangeValidatorOptions",
    "StringToNumberValSan",
    "is_number",
    "parse_number",
]
