# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request construction and dispatch.

This module provides:
- Transport: Shared httpx client handle owning connection reuse and TLS
- RequestBuilder: Authenticated JSON and multipart request construction
- Dispatcher: One-exchange-per-call sending with typed failures
- read_file_chunked: Scoped, chunked file read for multipart uploads
"""

from .base import Transport
from .builder import JSON_CONTENT_TYPE, RequestBuilder, canonical_json
from .dispatcher import Dispatcher
from .files import FILE_CHUNK_SIZE, read_file_chunked

__all__ = [
    "FILE_CHUNK_SIZE",
    "JSON_CONTENT_TYPE",
    "Dispatcher",
    "RequestBuilder",
    "Transport",
    "canonical_json",
    "read_file_chunked",
]
