# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Validation of sequences with one child unit per element."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any, List, Sequence

from ..base import RunsLikeAValSan, ValSan, ValSanOptions, is_unit, resolve
from ..exceptions import ConfigurationError
from ..rules.builtin import array_rule
from ..rules.rule import RuleSet
from ..runtime.concurrency import run_children
from ..validation.base import (
    SanitizeResult,
    ValidationError,
    ValidationResult,
    nest_under_index,
)


@dataclass(frozen=True)
class ArrayValSanOptions(ValSanOptions):
    schema: RunsLikeAValSan = None  # type: ignore[assignment]
    concurrent: bool = False

    def __post_init__(self):
        if not is_unit(self.schema):
            raise ConfigurationError("ArrayValSan requires a 'schema' unit applied to every element")


class ArrayValSan(ValSan):
    """Validate and sanitize every element of a list or tuple.

    Unlike a pipeline this never stops at the first bad element: errors
    of every element are collected, tagged ``[i]`` (or ``[i].<child
    path>`` for nested composites) and kept in index order. Strings,
    bytes and mappings are not arrays.
    """

    options_class = ArrayValSanOptions
    type = "array"

    @property
    def schema(self) -> RunsLikeAValSan:
        return self.options.schema

    def rules(self) -> RuleSet:
        return {"array": array_rule}

    async def validate(self, value: Any) -> ValidationResult:
        if not isinstance(value, (list, tuple)):
            return self.fail([array_rule])
        return self.succeed()

    async def sanitize(self, value: Sequence[Any]) -> List[Any]:
        return list(value)

    async def _run(self, value: Any) -> SanitizeResult:
        normalized = await resolve(self.normalize(value))
        validation = await resolve(self.validate(normalized))
        if not validation.is_valid:
            return SanitizeResult.failed(validation.errors)

        copied = await self._sanitize_safely(normalized)
        if not copied.success:
            return copied
        items: List[Any] = copied.data

        child = self.options.schema
        results = await run_children(
            [functools.partial(child.run, item) for item in items],
            concurrent=self.options.concurrent,
        )

        errors: List[ValidationError] = []
        output: List[Any] = []
        for index, result in enumerate(results):
            if result.success:
                output.append(result.data)
            else:
                errors.extend(nest_under_index(error, index) for error in result.errors)

        if errors:
            return SanitizeResult.failed(errors)
        return SanitizeResult.ok(output)


__all__ = ["ArrayValSan", "ArrayValSanOptions"]
