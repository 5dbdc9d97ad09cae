# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""String checks and sanitizers."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Optional, Pattern, Union

from ..base import ValSan, ValSanOptions, build_options
from ..composed import ComposedValSan, ComposedValSanOptions
from ..exceptions import ConfigurationError
from ..rules.builtin import string_rule
from ..rules.rule import Rule, RuleHint, RuleSet
from ..validation.base import ValidationResult


def is_string(value: Any) -> bool:
    return isinstance(value, str)


class _StringValSan(ValSan):
    """Rejects non-strings with the shared ``string`` rule."""

    type = "string"

    def rules(self) -> RuleSet:
        return {"string": string_rule}

    async def validate(self, value: Any) -> ValidationResult:
        if not is_string(value):
            return self.fail([string_rule])
        return self.succeed()

    async def sanitize(self, value: str) -> str:
        return value


class TrimSanitizer(_StringValSan):
    """Strip leading and trailing whitespace."""

    example = "hello"

    async def sanitize(self, value: str) -> str:
        return value.strip()


class LowercaseSanitizer(_StringValSan):
    example = "hello"

    async def sanitize(self, value: str) -> str:
        return value.lower()


class UppercaseSanitizer(_StringValSan):
    example = "HELLO"

    async def sanitize(self, value: str) -> str:
        return value.upper()


@dataclass(frozen=True)
class MinLengthValidatorOptions(ValSanOptions):
    min_length: int = 1

    def __post_init__(self):
        if self.min_length < 0:
            raise ConfigurationError("min_length must not be negative")


class MinLengthValidator(_StringValSan):
    options_class = MinLengthValidatorOptions

    @property
    def min_length(self) -> int:
        return self.options.min_length

    def _too_short(self, actual: int) -> Rule:
        plural = "" if self.min_length == 1 else "s"
        message = f"Input must be at least {self.min_length} character{plural}"
        return Rule(
            code="STRING_TOO_SHORT",
            user=RuleHint(helper_text=f"Minimum {self.min_length} character{plural}", error_message=message),
            context={"min_length": self.min_length, "actual_length": actual},
        )

    def rules(self) -> RuleSet:
        return {"string": string_rule, "min_length": self._too_short(0)}

    async def validate(self, value: Any) -> ValidationResult:
        if not is_string(value):
            return self.fail([string_rule])
        if len(value) < self.min_length:
            return self.fail([self._too_short(len(value))])
        return self.succeed()


@dataclass(frozen=True)
class MaxLengthValidatorOptions(ValSanOptions):
    max_length: Union[int, float] = math.inf

    def __post_init__(self):
        if self.max_length < 0:
            raise ConfigurationError("max_length must not be negative")


class MaxLengthValidator(_StringValSan):
    options_class = MaxLengthValidatorOptions

    @property
    def max_length(self) -> Union[int, float]:
        return self.options.max_length

    def _too_long(self, actual: int) -> Rule:
        plural = "" if self.max_length == 1 else "s"
        message = f"Input must be at most {self.max_length} character{plural}"
        return Rule(
            code="STRING_TOO_LONG",
            user=RuleHint(helper_text=f"Maximum {self.max_length} character{plural}", error_message=message),
            context={"max_length": self.max_length, "actual_length": actual},
        )

    def rules(self) -> RuleSet:
        return {"string": string_rule, "max_length": self._too_long(0)}

    async def validate(self, value: Any) -> ValidationResult:
        if not is_string(value):
            return self.fail([string_rule])
        if len(value) > self.max_length:
            return self.fail([self._too_long(len(value))])
        return self.succeed()


@dataclass(frozen=True)
class LengthValidatorOptions(ComposedValSanOptions):
    min_length: int = 1
    max_length: Union[int, float] = math.inf

    def __post_init__(self):
        if self.min_length > self.max_length:
            raise ConfigurationError("min_length must not be greater than max_length")


class LengthValidator(ComposedValSan):
    """Minimum and maximum length as one pipeline."""

    options_class = LengthValidatorOptions
    type = "string"

    def __init__(self, options: Optional[LengthValidatorOptions] = None, **overrides: Any):
        resolved = build_options(LengthValidatorOptions, options, overrides)
        super().__init__(self._length_steps(resolved), resolved)

    @staticmethod
    def _length_steps(options: LengthValidatorOptions):
        return (
            MinLengthValidator(min_length=options.min_length),
            MaxLengthValidator(max_length=options.max_length),
        )

    def _rebuild(self, options: LengthValidatorOptions) -> "LengthValidator":
        sibling = super()._rebuild(options)
        sibling._steps = self._length_steps(options)
        return sibling


@dataclass(frozen=True)
class PatternValidatorOptions(ValSanOptions):
    pattern: Union[str, Pattern[str]] = None  # type: ignore[assignment]
    error_message: Optional[str] = None

    def __post_init__(self):
        if self.pattern is None:
            raise ConfigurationError("PatternValidator requires a 'pattern'")
        if isinstance(self.pattern, str):
            try:
                object.__setattr__(self, "pattern", re.compile(self.pattern))
            except re.error as exc:
                raise ConfigurationError(f"Invalid pattern {self.pattern!r}: {exc}") from exc


class PatternValidator(_StringValSan):
    """Require ``pattern`` to match somewhere in the string (``re.search``).

    Anchor the pattern (``^...$``) to demand a full match.
    """

    options_class = PatternValidatorOptions

    @property
    def pattern(self) -> Pattern[str]:
        return self.options.pattern

    def rules(self) -> RuleSet:
        message = self.options.error_message or "Input does not match required pattern"
        return {
            "string": string_rule,
            "pattern": Rule(
                code="STRING_PATTERN_MISMATCH",
                user=RuleHint(helper_text="Required format", error_message=message),
                context={"pattern": self.pattern.pattern},
            ),
        }

    async def validate(self, value: Any) -> ValidationResult:
        if not is_string(value):
            return self.fail([string_rule])
        if self.pattern.search(value) is None:
            return self.fail([self.rules()["pattern"]])
        return self.succeed()


@dataclass(frozen=True)
class AlphaValidatorOptions(ValSanOptions):
    allow_spaces: bool = False


class AlphaValidator(_StringValSan):
    """ASCII letters only, optionally with whitespace."""

    options_class = AlphaValidatorOptions
    example = "abc"

    _LETTERS = re.compile(r"[A-Za-z]+")
    _LETTERS_AND_SPACES = re.compile(r"[A-Za-z\s]+")

    def rules(self) -> RuleSet:
        if self.options.allow_spaces:
            helper, message = "Letters and spaces only", "Value must contain only letters and spaces"
        else:
            helper, message = "Letters only", "Value must contain only letters"
        return {
            "string": string_rule,
            "alpha": Rule(
                code="alpha",
                user=RuleHint(helper_text=helper, error_message=message),
                context={"allow_spaces": self.options.allow_spaces},
            ),
        }

    async def validate(self, value: Any) -> ValidationResult:
        if not is_string(value):
            return self.fail([string_rule])
        pattern = self._LETTERS_AND_SPACES if self.options.allow_spaces else self._LETTERS
        if not pattern.fullmatch(value):
            return self.fail([self.rules()["alpha"]])
        return self.succeed()


class AlphanumericValidator(_StringValSan):
    example = "abc123"

    _ALNUM = re.compile(r"[A-Za-z0-9]+")

    def rules(self) -> RuleSet:
        return {
            "string": string_rule,
            "alphanumeric": Rule(
                code="alphanumeric",
                user=RuleHint(
                    helper_text="Alphanumeric (letters and numbers only)",
                    error_message="Value is not alphanumeric",
                ),
            ),
        }

    async def validate(self, value: Any) -> ValidationResult:
        if not is_string(value):
            return self.fail([string_rule])
        if not self._ALNUM.fullmatch(value):
            return self.fail([self.rules()["alphanumeric"]])
        return self.succeed()


@dataclass(frozen=True)
class SlugValidatorOptions(ValSanOptions):
    auto_convert: bool = False


class SlugValidator(_StringValSan):
    """Lowercase words joined by single hyphens (``my-post-42``).

    With ``auto_convert`` the input is slugified during normalize and
    only rejected when nothing usable is left.
    """

    options_class = SlugValidatorOptions
    example = "my-post-42"

    _SLUG = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")

    def rules(self) -> RuleSet:
        return {
            "string": string_rule,
            "slug": Rule(
                code="slug",
                user=RuleHint(
                    helper_text="Lowercase letters, numbers and hyphens",
                    error_message="Value is not a valid slug",
                ),
            ),
        }

    async def normalize(self, value: Any) -> Any:
        if not self.options.auto_convert or not is_string(value):
            return value
        slug = value.strip().lower()
        slug = re.sub(r"[^a-z0-9\s-]", "", slug)
        slug = re.sub(r"[\s_-]+", "-", slug)
        return slug.strip("-")

    async def validate(self, value: Any) -> ValidationResult:
        if not is_string(value):
            return self.fail([string_rule])
        if not self._SLUG.fullmatch(value):
            return self.fail([self.rules()["slug"]])
        return self.succeed()


__all__ = [
    "AlphaValidator",
    "AlphaValidatorOptions",
    "AlphanumericValidator",
    "LengthValidator",
    "LengthValidatorOptions",
    "LowercaseSanitizer",
    "MaxLengthValidator",
    "MaxLengthValidatorOptions",
    "MinLengthValidator",
    "MinLengthValidatorOptions",
    "PatternValidator",
    "PatternValidatorOptions",
    "SlugValidator",
    "SlugValidatorOptions",
    "TrimSanitizer",
    "UppercaseSanitizer",
    "is_string",
]
