# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

# valsan/decorator.py

import functools
import inspect
import logging
from typing import Any, Callable, Mapping, Optional, Union

from .exceptions import ConfigurationError, ValidationFailedError
from .primitives.object import ObjectSchema, ObjectValSan
from .runtime.sync import call_blocking

logger = logging.getLogger(__name__)

# Sentinel object to detect if a parameter was provided by the user
_sentinel = object()


def _accepts_argument(handler: Callable) -> bool:
    try:
        signature = inspect.signature(handler)
    except (TypeError, ValueError):
        return True
    return any(
        param.kind
        in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            inspect.Parameter.VAR_POSITIONAL,
        )
        for param in signature.parameters.values()
    )


def _as_guard_unit(schema: Union[ObjectValSan, ObjectSchema]) -> ObjectValSan:
    if isinstance(schema, ObjectValSan):
        if schema.options.allow_additional_properties:
            return schema
        return schema.copy(allow_additional_properties=True)
    if isinstance(schema, Mapping):
        return ObjectValSan(schema=schema, allow_additional_properties=True)
    raise ConfigurationError(
        f"valsan_guard expects an ObjectValSan or a mapping of parameter name to unit, got {type(schema).__name__}"
    )


def valsan_guard(
    schema: Union[ObjectValSan, ObjectSchema],
    *,
    on_fail: Any = _sentinel,
    strict: Optional[bool] = None,
):
    """
    Sanitize a function's arguments before the function runs.

    Each argument named in *schema* is run through its unit and replaced
    by the sanitized value. Arguments the schema does not mention are
    passed through untouched. Works on both sync and async functions.

    :param schema: An :class:`ObjectValSan` or a mapping of parameter
                   name to unit.
    :param on_fail: Optional. What to do when an argument is rejected. If
                    not provided, :class:`ValidationFailedError` is raised.
                    A callable is invoked (with the error if it accepts an
                    argument) and its result returned; any other value is
                    returned directly.
    :param strict: Optional. For sync functions called from inside a
                   running event loop: raise instead of running the
                   checks on a worker thread. Defaults to
                   ``VALSAN_STRICT_SYNC``.

    .. code-block:: python

        from valsan import valsan_guard, ComposedValSan
        from valsan.primitives import TrimSanitizer, EmailValidator, StringToNumberValSan

        @valsan_guard({
            "email": ComposedValSan([TrimSanitizer(), EmailValidator()]),
            "limit": StringToNumberValSan(is_optional=True),
        })
        async def list_orders(email: str, limit=None): ...

        @valsan_guard({"email": EmailValidator()}, on_fail=lambda err: {"errors": err.errors})
        def lookup(email: str): ...
    """

    guard_unit = _as_guard_unit(schema)

    def decorator(func: Callable):
        target = f"{func.__module__}.{func.__qualname__}"
        signature = inspect.signature(func)
        parameters = signature.parameters
        has_var_kwargs = any(
            param.kind == inspect.Parameter.VAR_KEYWORD for param in parameters.values()
        )

        unknown = set(guard_unit.schema) - set(parameters)
        if unknown and not has_var_kwargs:
            raise ConfigurationError(
                f"valsan_guard schema for '{target}' references undefined parameter(s): {sorted(unknown)}"
            )

        async def _sanitize_arguments(args, kwargs):
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()

            candidates = {}
            for name, value in bound.arguments.items():
                if parameters[name].kind == inspect.Parameter.VAR_KEYWORD:
                    candidates.update(value)
                else:
                    candidates[name] = value

            subset = {key: candidates[key] for key in guard_unit.schema if key in candidates}
            result = await guard_unit.run(subset)
            if not result.success:
                logger.debug("Rejected %d argument error(s) for '%s'", len(result.errors), target)
                return None, ValidationFailedError(result.errors, target=target)

            sanitized = result.data
            for name in list(bound.arguments):
                if parameters[name].kind == inspect.Parameter.VAR_KEYWORD:
                    extra = dict(bound.arguments[name])
                    for key in extra:
                        if key in sanitized:
                            extra[key] = sanitized[key]
                    bound.arguments[name] = extra
                elif name in sanitized:
                    bound.arguments[name] = sanitized[name]
            return bound, None

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            """Wrapper for synchronous functions."""

            async def check():
                return await _sanitize_arguments(args, kwargs)

            bound, error = call_blocking(check, strict=strict, label=target)
            if error is not None:
                return _handle_failure_sync(error)
            return func(*bound.args, **bound.kwargs)

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            """Wrapper for asynchronous functions."""
            bound, error = await _sanitize_arguments(args, kwargs)
            if error is not None:
                return await _handle_failure(error)
            return await func(*bound.args, **bound.kwargs)

        async def _handle_failure(error: ValidationFailedError):
            """Executes the user-supplied `on_fail` handler or raises by default."""

            if on_fail is _sentinel:
                raise error

            if not callable(on_fail):
                return on_fail

            outcome = on_fail(error) if _accepts_argument(on_fail) else on_fail()
            if inspect.isawaitable(outcome):
                return await outcome
            return outcome

        def _handle_failure_sync(error: ValidationFailedError):
            if on_fail is _sentinel:
                raise error

            if not callable(on_fail):
                return on_fail

            if inspect.iscoroutinefunction(on_fail):
                handler = functools.partial(on_fail, error) if _accepts_argument(on_fail) else on_fail
                return call_blocking(handler, strict=strict, label=target)
            return on_fail(error) if _accepts_argument(on_fail) else on_fail()

        if inspect.iscoroutinefunction(func):
            wrapper = async_wrapper
        else:
            wrapper = sync_wrapper

        # Attach the schema for introspection
        wrapper.__valsan_schema__ = guard_unit
        return wrapper

    return decorator


__all__ = ["valsan_guard"]
