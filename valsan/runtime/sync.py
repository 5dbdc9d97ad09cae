# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Calling async units from synchronous code."""

from __future__ import annotations

import asyncio
import concurrent.futures as _cf
import contextvars as _ctxvars
import logging
import os
from typing import Any, Awaitable, Callable, Optional

import anyio

from ..exceptions import ValSanError
from ..validation.base import SanitizeResult

logger = logging.getLogger(__name__)

STRICT_SYNC_ENV_VAR = "VALSAN_STRICT_SYNC"


def strict_sync_default() -> bool:
    """Read ``VALSAN_STRICT_SYNC``; empty, ``0``, ``false`` and ``no`` mean off."""

    return os.getenv(STRICT_SYNC_ENV_VAR, "0").strip().lower() not in ("", "0", "false", "no")


def call_blocking(
    func: Callable[[], Awaitable[Any]],
    *,
    strict: Optional[bool] = None,
    label: str = "coroutine",
) -> Any:
    """Run the coroutine function *func* to completion and return its value.

    With no event loop running in this thread the call runs inline via
    :func:`anyio.run`. Inside a running loop it either raises (strict
    mode) or runs on a worker thread with a private loop, blocking the
    caller until the result is available.
    """

    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return anyio.run(func)

    effective_strict = strict if strict is not None else strict_sync_default()
    if effective_strict:
        raise ValSanError(
            f"Cannot run '{label}' synchronously from a running event loop "
            f"(strict mode). Await it instead, pass strict=False or unset {STRICT_SYNC_ENV_VAR}."
        )

    logger.debug("Running '%s' on a worker thread because an event loop is active", label)

    def _run_in_thread():
        return asyncio.run(func())

    # Copy contextvars so request-scoped state survives the thread hop.
    ctx = _ctxvars.copy_context()
    with _cf.ThreadPoolExecutor(max_workers=1) as executor:
        future = executor.submit(lambda: ctx.run(_run_in_thread))
        return future.result()


def run_sync(unit: Any, value: Any, *, strict: Optional[bool] = None) -> SanitizeResult:
    """Synchronous counterpart of ``await unit.run(value)``."""

    async def _run():
        return await unit.run(value)

    return call_blocking(_run, strict=strict, label=type(unit).__name__)


__all__ = [
    "STRICT_SYNC_ENV_VAR",
    "call_blocking",
    "run_sync",
    "strict_sync_default",
]
