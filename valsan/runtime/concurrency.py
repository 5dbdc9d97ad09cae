# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Running independent child units, sequentially or concurrently."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, List, Optional, Sequence

import anyio

AsyncThunk = Callable[[], Awaitable[Any]]


async def gather_in_order(funcs: Sequence[AsyncThunk]) -> List[Any]:
    """Run *funcs* concurrently and return their results in input order.

    If any of them raises, the exception of the lowest index is re-raised
    as-is (not wrapped in an exception group), which is the exception a
    sequential run would have surfaced first.
    """

    results: List[Any] = [None] * len(funcs)
    failures: List[Optional[Exception]] = [None] * len(funcs)

    async def _run_one(index: int, func: AsyncThunk) -> None:
        try:
            results[index] = await func()
        except Exception as exc:
            failures[index] = exc

    async with anyio.create_task_group() as tg:
        for index, func in enumerate(funcs):
            tg.start_soon(_run_one, index, func)

    for exc in failures:
        if exc is not None:
            raise exc

    return results


async def run_children(funcs: Sequence[AsyncThunk], *, concurrent: bool = False) -> List[Any]:
    if concurrent and len(funcs) > 1:
        return await gather_in_order(funcs)

    results: List[Any] = []
    for func in funcs:
        results.append(await func())
    return results


__all__ = ["gather_in_order", "run_children"]
