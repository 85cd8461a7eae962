# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request types for the dispatch layer.

RequestSpec describes what the caller asked for; PreparedRequest is the
assembled httpx request ready to hand to the Dispatcher.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx


class RequestKind(Enum):
    """Body encoding of a prepared request."""

    JSON = "json"
    MULTIPART = "multipart"


@dataclass(frozen=True)
class RequestSpec:
    """
    Caller-side description of one request.

    Constructed per call and not retained after the request is built.

    Attributes:
        method: HTTP method, e.g. ``POST``
        endpoint: Path appended to the base URL; always begins with ``/``
        json: Optional JSON body
        params: Optional flat query parameters
        file_path: Optional local file attached as a multipart part
    """

    method: str
    endpoint: str
    json: Any | None = None
    params: dict[str, Any] | None = None
    file_path: str | None = None


@dataclass(frozen=True)
class PreparedRequest:
    """A built request plus the RequestSpec it was built from, for error context."""

    request: httpx.Request
    spec: RequestSpec
    kind: RequestKind = RequestKind.JSON

    @property
    def method(self) -> str:
        return self.request.method

    @property
    def url(self) -> str:
        return str(self.request.url)

    @property
    def headers(self) -> httpx.Headers:
        return self.request.headers


__all__ = ["PreparedRequest", "RequestKind", "RequestSpec"]
