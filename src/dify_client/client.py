# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Base client for the Dify API.

DifyClient wires one Transport, one RequestBuilder and one Dispatcher
together and exposes the endpoint-independent operations (feedback,
application parameters, file upload). The capability facades in
``dify_client.facades`` hold a reference to a DifyClient and delegate to
``send_request``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx
from typing_extensions import Self

from .config import ClientConfig
from .exceptions import MalformedRequestError
from .observability.protocols import DispatchMetricsSink
from .payloads import build_feedback_payload, build_user_payload
from .response import ResponseHandle
from .transport.base import Transport
from .transport.builder import RequestBuilder
from .transport.dispatcher import Dispatcher
from .transport.files import FilePath
from .types.response_mode import ResponseMode

logger = logging.getLogger(__name__)


class DifyClient:
    """
    Authenticated async client for one Dify application.

    Usage:
        async with DifyClient.from_api_key("app-...") as client:
            response = await client.get_application_parameters("u1")
            print(await response.text())

    Args:
        config: Client configuration
        http_client: Optional caller-owned httpx.AsyncClient
        transport: Optional httpx transport for the owned client (tests)
        metrics: Optional dispatch metrics sink
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        metrics: DispatchMetricsSink | None = None,
    ) -> None:
        self._transport = Transport(config, http_client=http_client, transport=transport)
        self._builder = RequestBuilder(config)
        self._dispatcher = Dispatcher(self._transport, metrics=metrics)

    @classmethod
    def from_api_key(
        cls, api_key: str, base_url: str | None = None, **kwargs: Any
    ) -> DifyClient:
        """Create a client from an api key and an optional base URL override."""
        return cls(ClientConfig.create(api_key, base_url), **kwargs)

    @classmethod
    def from_env(cls, **kwargs: Any) -> DifyClient:
        """Create a client from ``DIFY_API_KEY`` / ``DIFY_BASE_API``."""
        return cls(ClientConfig.from_env(), **kwargs)

    @property
    def config(self) -> ClientConfig:
        return self._transport.config

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def builder(self) -> RequestBuilder:
        return self._builder

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    async def send_request(
        self,
        method: str,
        endpoint: str,
        json: Any | None = None,
        params: Mapping[str, Any] | None = None,
        mode: ResponseMode = ResponseMode.BLOCKING,
    ) -> ResponseHandle:
        """Build and send a JSON request."""
        prepared = self._builder.build(method, endpoint, json, params)
        return await self._dispatcher.send(prepared, mode)

    async def send_request_with_files(
        self,
        method: str,
        endpoint: str,
        data: Any,
        file_path: FilePath,
        mode: ResponseMode = ResponseMode.BLOCKING,
    ) -> ResponseHandle:
        """Build and send a multipart request with a ``data`` field and a ``file`` part."""
        prepared = await self._builder.build_multipart(method, endpoint, data, file_path)
        return await self._dispatcher.send_multipart(prepared, mode)

    async def message_feedback(
        self, message_id: str, rating: bool, user: str
    ) -> ResponseHandle:
        """Rate a message: ``POST /messages/{message_id}/feedbacks``."""
        if not isinstance(message_id, str) or not message_id:
            raise MalformedRequestError("message_id must be a non-empty string")
        return await self.send_request(
            "POST",
            f"/messages/{message_id}/feedbacks",
            json=build_feedback_payload(rating, user),
        )

    async def get_application_parameters(self, user: str) -> ResponseHandle:
        """Fetch the application's input parameters: ``GET /parameters``."""
        return await self.send_request(
            "GET", "/parameters", params=build_user_payload(user)
        )

    async def file_upload(self, user: str, file_path: FilePath) -> ResponseHandle:
        """Upload a local file: multipart ``POST /files/upload``."""
        return await self.send_request_with_files(
            "POST", "/files/upload", build_user_payload(user), file_path
        )

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


__all__ = ["DifyClient"]
