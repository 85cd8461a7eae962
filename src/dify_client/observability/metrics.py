# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Dispatch metrics for the Dify client.

This module provides:
1. DispatchMetrics - In-process counters for dispatched requests
2. PrometheusDispatchMetrics - Optional Prometheus metrics for observability

Neither is created implicitly. Build one and pass it to the client:

    metrics = DispatchMetrics()
    client = DifyClient(config, metrics=metrics)
    ...
    stats = metrics.get_stats()
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .constants import (
    ERROR_TYPE_REMOTE,
    ERROR_TYPE_TRANSPORT,
    REQUEST_DURATION_SECONDS,
    REQUEST_FAILURES_TOTAL,
    REQUESTS_TOTAL,
)

logger = logging.getLogger(__name__)

# Type declarations for optional prometheus_client imports
if TYPE_CHECKING:
    from prometheus_client import Counter as CounterType, Histogram as HistogramType
else:
    CounterType = object
    HistogramType = object

# Try to import prometheus_client for optional Prometheus metrics
try:
    from prometheus_client import Counter as _Counter, Histogram as _Histogram

    Counter: type[CounterType] | None = _Counter
    Histogram: type[HistogramType] | None = _Histogram
    PROMETHEUS_AVAILABLE = True
except ImportError:
    Counter = None
    Histogram = None
    PROMETHEUS_AVAILABLE = False


def status_class(status_code: int) -> str:
    """Collapse a status code into its class label, e.g. 404 -> '4xx'."""
    return f"{status_code // 100}xx"


@dataclass
class DispatchMetrics:
    """
    In-process counters for dispatched requests.

    Thread Safety:
        All updates go through a threading.Lock, so one instance can be
        shared by clients running on different threads.

    Example:
        >>> metrics = DispatchMetrics()
        >>> metrics.record_response("json", "POST", 200, 0.25)
        >>> metrics.responses_total
        1
    """

    responses_total: int = 0
    transport_failures: int = 0
    remote_failures: int = 0
    total_duration_seconds: float = 0.0

    _per_status_class: dict[str, int] = field(default_factory=dict, repr=False)
    _per_kind: dict[str, int] = field(default_factory=dict, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def record_response(
        self, kind: str, method: str, status_code: int, duration_seconds: float
    ) -> None:
        with self._lock:
            self.responses_total += 1
            self.total_duration_seconds += duration_seconds
            label = status_class(status_code)
            self._per_status_class[label] = self._per_status_class.get(label, 0) + 1
            self._per_kind[kind] = self._per_kind.get(kind, 0) + 1

    def record_failure(self, kind: str, method: str, error_type: str) -> None:
        with self._lock:
            if error_type == ERROR_TYPE_TRANSPORT:
                self.transport_failures += 1
            elif error_type == ERROR_TYPE_REMOTE:
                self.remote_failures += 1
            else:
                logger.debug(f"Ignoring unknown error type {error_type!r}")

    def get_average_duration(self) -> float:
        """Mean time to response in seconds; 0.0 if nothing was recorded."""
        if self.responses_total == 0:
            return 0.0
        return self.total_duration_seconds / self.responses_total

    def get_stats(self) -> dict[str, Any]:
        """
        Return metrics as a dictionary for JSON serialization.

        Example:
            >>> metrics = DispatchMetrics()
            >>> metrics.record_response("multipart", "POST", 201, 1.0)
            >>> metrics.get_stats()["per_kind"]
            {'multipart': 1}
        """
        with self._lock:
            return {
                "responses_total": self.responses_total,
                "transport_failures": self.transport_failures,
                "remote_failures": self.remote_failures,
                "average_duration_seconds": self.get_average_duration(),
                "per_status_class": dict(self._per_status_class),
                "per_kind": dict(self._per_kind),
            }

    def reset(self) -> None:
        """Reset all metrics to zero."""
        with self._lock:
            self.responses_total = 0
            self.transport_failures = 0
            self.remote_failures = 0
            self.total_duration_seconds = 0.0
            self._per_status_class.clear()
            self._per_kind.clear()


class PrometheusDispatchMetrics:
    """
    Optional Prometheus metrics for dispatched requests.

    Only usable if prometheus_client is available (the ``full`` extra).
    Pass a dedicated CollectorRegistry when creating more than one
    instance in a process, otherwise the default registry rejects the
    duplicate metric names.

    Metrics:
        - dify_client_requests_total{kind, method, status_class}
        - dify_client_request_failures_total{kind, method, error_type}
        - dify_client_request_duration_seconds{kind, method}
    """

    def __init__(self, registry: Any | None = None) -> None:
        """
        Initialize Prometheus dispatch metrics.

        Args:
            registry: Optional CollectorRegistry. If None, uses the default registry.

        Raises:
            ImportError: If prometheus_client is not available.
        """
        if not PROMETHEUS_AVAILABLE or Counter is None or Histogram is None:
            raise ImportError(
                "prometheus_client is not available. "
                "Install with: pip install dify-client[full]"
            )

        kwargs: dict[str, Any] = {}
        if registry is not None:
            kwargs["registry"] = registry

        self.requests_total = Counter(
            REQUESTS_TOTAL,
            "Requests that received a response",
            ["kind", "method", "status_class"],
            **kwargs,
        )
        self.request_failures_total = Counter(
            REQUEST_FAILURES_TOTAL,
            "Requests that failed at the transport or with a non-2xx status",
            ["kind", "method", "error_type"],
            **kwargs,
        )
        self.request_duration_seconds = Histogram(
            REQUEST_DURATION_SECONDS,
            "Time until response headers (and body, in blocking mode)",
            ["kind", "method"],
            buckets=[0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10, 30, 60, 120],
            **kwargs,
        )

        logger.info("Prometheus dispatch metrics initialized")

    def record_response(
        self, kind: str, method: str, status_code: int, duration_seconds: float
    ) -> None:
        self.requests_total.labels(
            kind=kind, method=method, status_class=status_class(status_code)
        ).inc()
        self.request_duration_seconds.labels(kind=kind, method=method).observe(
            duration_seconds
        )

    def record_failure(self, kind: str, method: str, error_type: str) -> None:
        self.request_failures_total.labels(
            kind=kind, method=method, error_type=error_type
        ).inc()


__all__ = [
    "PROMETHEUS_AVAILABLE",
    "DispatchMetrics",
    "PrometheusDispatchMetrics",
    "status_class",
]
