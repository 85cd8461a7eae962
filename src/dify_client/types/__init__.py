# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Type definitions and constants."""

from .request import PreparedRequest, RequestKind, RequestSpec
from .response_mode import ResponseMode

__all__ = [
    # Request types
    "PreparedRequest",
    "RequestKind",
    "RequestSpec",
    # Wire enums
    "ResponseMode",
]
