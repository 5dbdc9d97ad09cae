# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""OpenTelemetry handles used across the package.

valsan only talks to the OpenTelemetry *API*. Host applications that
install and configure an SDK get real metrics and spans; everyone else
gets the API's no-op implementations.
"""

from __future__ import annotations

from opentelemetry import metrics, trace

meter = metrics.get_meter("valsan")


def get_tracer(name: str = "valsan"):
    return trace.get_tracer(name)


__all__ = ["get_tracer", "meter"]
