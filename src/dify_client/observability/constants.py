# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Metric name constants following Prometheus naming conventions.

All metric names use the `dify_client_` prefix.

Label Best Practices:
    To prevent label cardinality explosion, use only:
    - `kind` - Body encoding (json, multipart)
    - `method` - HTTP method (GET, POST)
    - `status_class` - Status class (2xx, 4xx, 5xx)
    - `error_type` - Failure class (transport, remote)

    NEVER use:
    - `endpoint` - Contains message IDs (unbounded!)
    - `user` - Unique per end user (unbounded!)
"""


METRIC_PREFIX = "dify_client"
"""Prefix for all Prometheus metrics in this library."""

REQUESTS_TOTAL = f"{METRIC_PREFIX}_requests_total"
"""Total requests that received a response (any status)."""

REQUEST_FAILURES_TOTAL = f"{METRIC_PREFIX}_request_failures_total"
"""Total requests that failed at the transport or with a non-2xx status."""

REQUEST_DURATION_SECONDS = f"{METRIC_PREFIX}_request_duration_seconds"
"""Time from dispatch until status and headers (plus body, in blocking mode)."""

ERROR_TYPE_TRANSPORT = "transport"
ERROR_TYPE_REMOTE = "remote"

__all__ = [
    "ERROR_TYPE_REMOTE",
    "ERROR_TYPE_TRANSPORT",
    "METRIC_PREFIX",
    "REQUESTS_TOTAL",
    "REQUEST_DURATION_SECONDS",
    "REQUEST_FAILURES_TOTAL",
]
