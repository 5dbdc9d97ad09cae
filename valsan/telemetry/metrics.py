# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for valsan."""

from __future__ import annotations

import time

from .runtime import meter

run_total = meter.create_counter(
    name="valsan.run.total",
    description="Counts unit runs, tagged by unit class and outcome.",
    unit="1",
)

run_error_total = meter.create_counter(
    name="valsan.run.error.total",
    description="Counts errors returned by unit runs, tagged by error code.",
    unit="1",
)

run_latency_ms = meter.create_histogram(
    name="valsan.run.latency.ms",
    description="Time taken by a single unit run, children included.",
    unit="ms",
)


def record_run_metrics(unit_name: str, status: str, start_time: float, error_codes=()) -> None:
    """Record counters and latency for one finished run."""

    duration_ms = (time.perf_counter() - start_time) * 1000.0
    run_total.add(1, {"valsan.unit": unit_name, "status": status})
    run_latency_ms.record(duration_ms, {"valsan.unit": unit_name})
    for code in error_codes:
        run_error_total.add(1, {"valsan.unit": unit_name, "code": code})


__all__ = [
    "record_run_metrics",
    "run_error_total",
    "run_latency_ms",
    "run_total",
]
