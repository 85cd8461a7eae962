# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Knowledge-base facade: ``POST /datasets``."""

from __future__ import annotations

from typing import Any

from typing_extensions import Self

from ..client import DifyClient
from ..payloads import build_dataset_payload
from ..response import ResponseHandle


class KnowledgeBaseClient:
    """
    Dataset management.

    Only dataset creation is exposed. ``dataset_id`` is kept for
    dataset-scoped operations but nothing reads it yet.
    """

    def __init__(self, client: DifyClient, dataset_id: str | None = None) -> None:
        self._client = client
        self.dataset_id = dataset_id

    @classmethod
    def from_api_key(
        cls,
        api_key: str,
        base_url: str | None = None,
        dataset_id: str | None = None,
        **kwargs: Any,
    ) -> KnowledgeBaseClient:
        return cls(DifyClient.from_api_key(api_key, base_url, **kwargs), dataset_id)

    @property
    def client(self) -> DifyClient:
        return self._client

    async def create_dataset(self, name: str) -> ResponseHandle:
        """Create an empty dataset."""
        return await self._client.send_request(
            "POST", "/datasets", json=build_dataset_payload(name)
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


__all__ = ["KnowledgeBaseClient"]
