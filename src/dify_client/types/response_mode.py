# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Response mode sent as the ``response_mode`` field of generation payloads."""

from __future__ import annotations

from enum import Enum

from ..exceptions import MalformedRequestError


class ResponseMode(Enum):
    """How the server should deliver a generation result.

    - BLOCKING: the response body is fully buffered before it is returned.
    - STREAMING: the body is exposed as a lazily consumed sequence of
      server-sent-event chunks.
    """

    BLOCKING = "blocking"
    STREAMING = "streaming"

    def __str__(self) -> str:
        return self.value

    @property
    def is_streaming(self) -> bool:
        return self is ResponseMode.STREAMING

    @classmethod
    def parse(cls, value: ResponseMode | str) -> ResponseMode:
        """
        Parse a wire string (or pass through an existing member).

        Raises:
            MalformedRequestError: If the value is not a known mode.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise MalformedRequestError(
                f"response_mode must be 'blocking' or 'streaming', got {value!r}"
            ) from None


__all__ = ["ResponseMode"]
