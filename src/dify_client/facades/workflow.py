# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Workflow facade: ``POST /workflows/run``."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from typing_extensions import Self

from ..client import DifyClient
from ..payloads import build_workflow_payload
from ..response import ResponseHandle
from ..types.response_mode import ResponseMode


class WorkflowClient:
    """Runs workflow applications."""

    def __init__(self, client: DifyClient) -> None:
        self._client = client

    @classmethod
    def from_api_key(
        cls, api_key: str, base_url: str | None = None, **kwargs: Any
    ) -> WorkflowClient:
        return cls(DifyClient.from_api_key(api_key, base_url, **kwargs))

    @property
    def client(self) -> DifyClient:
        return self._client

    async def run(
        self,
        inputs: Mapping[str, Any],
        response_mode: ResponseMode | str = ResponseMode.BLOCKING,
        user: str | None = None,
    ) -> ResponseHandle:
        """Run the workflow. ``user`` defaults to ``"abc-123"``."""
        mode = ResponseMode.parse(response_mode)
        data = build_workflow_payload(inputs, mode, user)
        return await self._client.send_request("POST", "/workflows/run", json=data, mode=mode)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


__all__ = ["WorkflowClient"]
