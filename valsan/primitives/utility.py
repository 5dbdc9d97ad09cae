# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Utility checks: membership in a fixed set of values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from ..base import ValSan, ValSanOptions
from ..exceptions import ConfigurationError
from ..validation.base import ValidationError, ValidationResult, validation_error


@dataclass(frozen=True)
class EnumValidatorOptions(ValSanOptions):
    allowed_values: Tuple[Any, ...] = ()

    def __post_init__(self):
        values = tuple(self.allowed_values)
        if not values:
            raise ConfigurationError("EnumValidator requires at least one allowed value")
        object.__setattr__(self, "allowed_values", values)


class EnumValidator(ValSan):
    options_class = EnumValidatorOptions

    async def validate(self, value: Any) -> ValidationResult:
        allowed = self.options.allowed_values
        if value in allowed:
            return self.succeed()
        return validation_error(
            [
                ValidationError(
                    code="ENUM_INVALID",
                    message="Value must be one of: " + ", ".join(str(v) for v in allowed),
                    context={"allowed_values": list(allowed), "received": value},
                )
            ]
        )

    async def sanitize(self, value: Any) -> Any:
        return value


__all__ = ["EnumValidator", "EnumValidatorOptions"]
