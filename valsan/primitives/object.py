# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Validation of keyed mappings against a schema of child units."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping

from ..base import RunsLikeAValSan, ValSan, ValSanOptions, is_unit, resolve
from ..exceptions import ConfigurationError
from ..rules.builtin import object_rule, unexpected_field_rule
from ..rules.rule import RuleSet
from ..runtime.concurrency import run_children
from ..validation.base import (
    SanitizeResult,
    ValidationError,
    ValidationResult,
    nest_under_key,
)

ObjectSchema = Mapping[str, RunsLikeAValSan]


@dataclass(frozen=True)
class ObjectValSanOptions(ValSanOptions):
    schema: ObjectSchema = None  # type: ignore[assignment]
    allow_additional_properties: bool = False
    concurrent: bool = False

    def __post_init__(self):
        if not isinstance(self.schema, Mapping):
            raise ConfigurationError("ObjectValSan requires a 'schema' mapping of field name to unit")
        for key, child in self.schema.items():
            if not is_unit(child):
                raise ConfigurationError(f"Schema entry '{key}' is not a unit: {child!r}")
        object.__setattr__(self, "schema", MappingProxyType(dict(self.schema)))


class ObjectValSan(ValSan):
    """Validate and sanitize a mapping field by field.

    Every schema field is run through its child unit, even after an
    earlier field failed, so one run reports every problem. Child errors
    are re-rooted under the field name, which yields dotted paths such as
    ``address.city.population`` for nested objects. Keys that are not in
    the schema are reported as ``unexpected_field`` unless
    ``allow_additional_properties`` is set, in which case they pass
    through untouched.

    The input mapping is never mutated; the sanitized data is a new dict.
    A field missing from the input is handed to its child as ``None`` so
    the child's own required gate decides; if that child is optional the
    key stays absent from the output.
    """

    options_class = ObjectValSanOptions
    type = "object"

    @property
    def schema(self) -> ObjectSchema:
        return self.options.schema

    def rules(self) -> RuleSet:
        return {
            "object": object_rule,
            "unexpected_field": unexpected_field_rule,
        }

    async def validate(self, value: Any) -> ValidationResult:
        if not isinstance(value, Mapping):
            return self.fail([object_rule])
        return self.succeed()

    async def sanitize(self, value: Mapping[str, Any]) -> Dict[str, Any]:
        return dict(value)

    async def _run(self, value: Any) -> SanitizeResult:
        normalized = await resolve(self.normalize(value))
        validation = await resolve(self.validate(normalized))
        if not validation.is_valid:
            return SanitizeResult.failed(validation.errors)

        copied = await self._sanitize_safely(normalized)
        if not copied.success:
            return copied
        output: Dict[str, Any] = copied.data

        schema = self.options.schema
        keys = list(schema)
        results = await run_children(
            [functools.partial(schema[key].run, normalized.get(key)) for key in keys],
            concurrent=self.options.concurrent,
        )

        errors: List[ValidationError] = []
        for key, result in zip(keys, results):
            if result.success:
                if key in normalized or result.data is not None:
                    output[key] = result.data
            else:
                errors.extend(nest_under_key(error, key) for error in result.errors)

        if not self.options.allow_additional_properties:
            for key in normalized:
                if key not in schema:
                    errors.append(unexpected_field_rule.to_error(field=str(key)))

        if errors:
            return SanitizeResult.failed(errors)
        return SanitizeResult.ok(output)


__all__ = ["ObjectSchema", "ObjectValSan", "ObjectValSanOptions"]
