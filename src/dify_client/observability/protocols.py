# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for dispatch metrics sinks."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class DispatchMetricsSink(Protocol):
    """
    Interface the Dispatcher reports to.

    Implemented by DispatchMetrics and PrometheusDispatchMetrics; any object
    with these two methods can be passed as ``metrics=``.
    """

    def record_response(
        self, kind: str, method: str, status_code: int, duration_seconds: float
    ) -> None:
        """Record a request that received a response (any status)."""
        ...

    def record_failure(self, kind: str, method: str, error_type: str) -> None:
        """Record a transport failure or a non-2xx status."""
        ...
