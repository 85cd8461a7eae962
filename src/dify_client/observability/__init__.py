# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Observability for the Dify client.

Classes:
    DispatchMetrics: In-process request counters.
    PrometheusDispatchMetrics: Optional Prometheus metrics (requires the
        'full' extra).
    DispatchMetricsSink: Protocol accepted by the Dispatcher.

Constants:
    PROMETHEUS_AVAILABLE: Whether prometheus_client is available.
"""

from .constants import (
    ERROR_TYPE_REMOTE,
    ERROR_TYPE_TRANSPORT,
    METRIC_PREFIX,
    REQUEST_DURATION_SECONDS,
    REQUEST_FAILURES_TOTAL,
    REQUESTS_TOTAL,
)
from .metrics import (
    PROMETHEUS_AVAILABLE,
    DispatchMetrics,
    PrometheusDispatchMetrics,
    status_class,
)
from .protocols import DispatchMetricsSink

__all__ = [
    "ERROR_TYPE_REMOTE",
    "ERROR_TYPE_TRANSPORT",
    "METRIC_PREFIX",
    "PROMETHEUS_AVAILABLE",
    "REQUESTS_TOTAL",
    "REQUEST_DURATION_SECONDS",
    "REQUEST_FAILURES_TOTAL",
    "DispatchMetrics",
    "DispatchMetricsSink",
    "PrometheusDispatchMetrics",
    "status_class",
]
