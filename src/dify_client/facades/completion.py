# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Completion facade: ``POST /completion-messages``."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from typing_extensions import Self

from ..client import DifyClient
from ..payloads import build_completion_payload
from ..response import ResponseHandle
from ..types.response_mode import ResponseMode


class CompletionClient:
    """Text generation for completion applications."""

    def __init__(self, client: DifyClient) -> None:
        self._client = client

    @classmethod
    def from_api_key(
        cls, api_key: str, base_url: str | None = None, **kwargs: Any
    ) -> CompletionClient:
        return cls(DifyClient.from_api_key(api_key, base_url, **kwargs))

    @property
    def client(self) -> DifyClient:
        return self._client

    async def create_completion_message(
        self,
        inputs: Mapping[str, Any],
        response_mode: ResponseMode | str,
        user: str,
        files: list[Any] | None = None,
    ) -> ResponseHandle:
        """Request a completion; ``files`` is omitted from the body when None."""
        mode = ResponseMode.parse(response_mode)
        data = build_completion_payload(inputs, mode, user, files)
        return await self._client.send_request(
            "POST", "/completion-messages", json=data, mode=mode
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


__all__ = ["CompletionClient"]
