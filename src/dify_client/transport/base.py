# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
HTTP transport shared by every request of one client.

The Transport owns a single httpx.AsyncClient (connection reuse, TLS) and
the immutable ClientConfig. It keeps no per-request state, so one instance
can serve any number of concurrent requests without locking.
"""

from __future__ import annotations

import logging

import httpx
from typing_extensions import Self

from ..config import ClientConfig

logger = logging.getLogger(__name__)


def _build_timeout(config: ClientConfig) -> httpx.Timeout:
    if config.connect_timeout is None:
        return httpx.Timeout(config.timeout)
    return httpx.Timeout(config.timeout, connect=config.connect_timeout)


class Transport:
    """
    Reusable HTTP client handle.

    Usage:
        async with Transport(ClientConfig(api_key="app-...")) as transport:
            response = await transport.execute(request, stream=True)

    Args:
        config: Client configuration (read-only for the lifetime of the transport)
        http_client: Optional pre-built httpx.AsyncClient. The caller keeps
            ownership and must close it.
        transport: Optional httpx transport for the owned client, e.g.
            ``httpx.MockTransport`` in tests
    """

    def __init__(
        self,
        config: ClientConfig,
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(
                timeout=_build_timeout(config),
                verify=config.verify,
                transport=transport,
            )
        self._client = http_client

    @classmethod
    def create(cls, api_key: str, base_url: str | None = None) -> Transport:
        """Build a transport from an api key and an optional base URL override."""
        return cls(ClientConfig.create(api_key, base_url))

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def execute(self, request: httpx.Request, stream: bool = True) -> httpx.Response:
        """
        Send one request over the shared connection pool.

        With ``stream=True`` this returns as soon as the status line and
        headers have arrived; the body is left unread on the wire.

        Raises:
            httpx.TransportError: On network-level failure. Translation into
                the library's exceptions happens in the Dispatcher.
        """
        return await self._client.send(request, stream=stream)

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug(f"Transport for {self._config.base_url} closed")

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


__all__ = ["Transport"]
