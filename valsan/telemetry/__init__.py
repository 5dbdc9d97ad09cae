"""Telemetry package - OpenTelemetry meter, tracer and run instruments."""

from .metrics import record_run_metrics, run_error_total, run_latency_ms, run_total
from .runtime import get_tracer, meter

__all__ = [
    "get_tracer",
    "meter",
    "record_run_metrics",
    "run_error_total",
    "run_latency_ms",
    "run_total",
]
