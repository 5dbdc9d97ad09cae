# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""The single-unit contract shared by leaves, pipelines and composites.

Every unit is run through the same lifecycle::

    required gate -> normalize -> validate -> sanitize -> SanitizeResult

``normalize``, ``validate`` and ``sanitize`` are override points. They
are declared as coroutines but subclasses may implement them as plain
functions; the lifecycle awaits whatever they return.
"""

from __future__ import annotations

import inspect
import logging
import time
from abc import ABC, abstractmethod
from copy import copy as shallow_copy
from dataclasses import dataclass, fields, replace
from typing import (
    Any,
    Generic,
    Iterable,
    Literal,
    Mapping,
    Optional,
    Protocol,
    Type,
    TypeVar,
    runtime_checkable,
)

from .exceptions import ConfigurationError
from .rules.builtin import required_rule
from .rules.rule import Rule, RuleSet
from .telemetry import get_tracer, record_run_metrics
from .validation.base import (
    SanitizeResult,
    ValidationError,
    ValidationResult,
    validation_error,
    validation_success,
)

logger = logging.getLogger(__name__)

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")

ValSanTypes = Literal["unknown", "string", "number", "boolean", "object", "array"]

SANITIZE_ERROR_CODE = "SANITIZE_ERROR"


@dataclass(frozen=True)
class ValSanOptions:
    """Options recognised by every unit."""

    is_optional: bool = False


@runtime_checkable
class RunsLikeAValSan(Protocol):
    """Anything that can be plugged into a pipeline or a composite."""

    async def run(self, value: Any) -> SanitizeResult:  # pragma: no cover
        ...


async def resolve(value: Any) -> Any:
    """Await *value* if a hook handed back an awaitable."""

    if inspect.isawaitable(value):
        return await value
    return value


def merge_options(options: ValSanOptions, overrides: Mapping[str, Any]) -> ValSanOptions:
    """Shallow-merge *overrides* into a copy of *options* (new values win)."""

    if not overrides:
        return options

    known = {f.name for f in fields(options)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ConfigurationError(
            f"Unknown option(s) for {type(options).__name__}: {', '.join(unknown)}"
        )
    return replace(options, **overrides)


def build_options(
    options_class: Type[ValSanOptions],
    options: Optional[ValSanOptions],
    overrides: Mapping[str, Any],
) -> ValSanOptions:
    if options is None:
        known = {f.name for f in fields(options_class)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown option(s) for {options_class.__name__}: {', '.join(unknown)}"
            )
        return options_class(**overrides)

    if not isinstance(options, options_class):
        raise ConfigurationError(
            f"Expected {options_class.__name__}, got {type(options).__name__}"
        )
    return merge_options(options, overrides)


class BaseValSan(Generic[TInput, TOutput], ABC):
    """Options, metadata, the required gate and instrumentation.

    Subclasses implement :meth:`_run`, which is only ever called with a
    non-``None`` value.
    """

    options_class: Type[ValSanOptions] = ValSanOptions

    type: ValSanTypes = "unknown"
    example: str = ""
    format: Optional[str] = None

    def __init__(self, options: Optional[ValSanOptions] = None, **overrides: Any):
        self.options = build_options(self.options_class, options, overrides)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.options!r})"

    def rules(self) -> RuleSet:
        """Return the named rules this unit can fail with."""

        return {}

    def check_required(self, value: Any) -> SanitizeResult:
        if self.options.is_optional:
            return SanitizeResult.ok(value)
        return SanitizeResult.failed([required_rule.to_error()])

    def copy(self, **overrides: Any) -> "BaseValSan[TInput, TOutput]":
        """Return a sibling instance whose options are merged with *overrides*."""

        return self._rebuild(merge_options(self.options, overrides))

    def _rebuild(self, options: ValSanOptions) -> "BaseValSan[TInput, TOutput]":
        # Constructor signatures of subclasses are free-form; copy the
        # instance and swap options. Override when state derives from options.
        sibling = shallow_copy(self)
        sibling.options = options
        return sibling

    async def run(self, value: TInput) -> SanitizeResult:
        unit_name = type(self).__name__
        start = time.perf_counter()

        with get_tracer(__name__).start_as_current_span(
            f"valsan.run:{unit_name}",
            attributes={"valsan.unit": unit_name},
        ) as span:
            if value is None:
                result = self.check_required(value)
                status = "skipped" if result.success else "failure"
            else:
                result = await self._run(value)
                status = "success" if result.success else "failure"
            span.set_attribute("valsan.success", result.success)

        record_run_metrics(unit_name, status, start, [error.code for error in result.errors])
        return result

    @abstractmethod
    async def _run(self, value: TInput) -> SanitizeResult:
        """Process a non-None value."""


class ValSan(BaseValSan[TInput, TOutput], ABC):
    """A unit built from the normalize / validate / sanitize hooks.

    Example::

        class UpperValSan(ValSan):
            async def validate(self, value):
                if not isinstance(value, str):
                    return self.fail([string_rule])
                return self.succeed()

            async def sanitize(self, value):
                return value.upper()
    """

    async def normalize(self, value: Any) -> Any:
        return value

    @abstractmethod
    async def validate(self, value: Any) -> ValidationResult:
        """Decide whether *value* (already normalized) is acceptable."""

    @abstractmethod
    async def sanitize(self, value: Any) -> TOutput:
        """Transform a validated value into the unit's output."""

    def fail(self, rules: Iterable[Rule]) -> ValidationResult:
        return validation_error(rule.to_error() for rule in rules)

    def succeed(self) -> ValidationResult:
        return validation_success()

    async def _run(self, value: TInput) -> SanitizeResult:
        normalized = await resolve(self.normalize(value))
        validation = await resolve(self.validate(normalized))
        if not validation.is_valid:
            return SanitizeResult.failed(validation.errors)
        return await self._sanitize_safely(normalized)

    async def _sanitize_safely(self, value: Any) -> SanitizeResult:
        try:
            data = await resolve(self.sanitize(value))
        except Exception as exc:
            logger.debug("Sanitize step of %s raised", type(self).__name__, exc_info=True)
            message = str(exc) or "Sanitization failed"
            return SanitizeResult.failed([ValidationError(code=SANITIZE_ERROR_CODE, message=message)])
        return SanitizeResult.ok(data)


def with_options(unit: BaseValSan, **overrides: Any) -> BaseValSan:
    """Return a new unit equivalent to *unit* with merged options."""

    return unit.copy(**overrides)


def is_unit(candidate: Any) -> bool:
    return callable(getattr(candidate, "run", None))


__all__ = [
    "BaseValSan",
    "RunsLikeAValSan",
    "SANITIZE_ERROR_CODE",
    "ValSan",
    "ValSanOptions",
    "ValSanTypes",
    "build_options",
    "is_unit",
    "merge_options",
    "resolve",
    "with_options",
]
