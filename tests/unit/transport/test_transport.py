"""
Unit tests for Transport.

Tests cover:
- Ownership of the underlying httpx.AsyncClient
- Timeout and TLS settings derived from ClientConfig
- execute() delegating to the client
"""

from __future__ import annotations

import httpx
import pytest

from dify_client.config import DEFAULT_BASE_URL, ClientConfig
from dify_client.transport.base import Transport


class TestOwnership:
    """Tests for ownership of the underlying httpx client."""

    @pytest.mark.asyncio
    async def test_owned_client_closed(self, config):
        """aclose() closes a client the transport created."""
        transport = Transport(config)
        assert not transport.is_closed

        await transport.aclose()

        assert transport.is_closed

    @pytest.mark.asyncio
    async def test_caller_client_left_open(self, config):
        """aclose() leaves a caller-supplied client open."""
        http_client = httpx.AsyncClient()
        try:
            transport = Transport(config, http_client=http_client)
            await transport.aclose()

            assert not http_client.is_closed
        finally:
            await http_client.aclose()

    @pytest.mark.asyncio
    async def test_context_manager(self, config):
        """Leaving the context closes the transport."""
        async with Transport(config) as transport:
            assert not transport.is_closed
        assert transport.is_closed


class TestSettings:
    """Tests for settings derived from ClientConfig."""

    @pytest.mark.asyncio
    async def test_no_timeout_by_default(self, config):
        """Without a configured timeout no timeout is applied."""
        async with Transport(config) as transport:
            timeout = transport._client.timeout
            assert timeout.connect is None
            assert timeout.read is None

    @pytest.mark.asyncio
    async def test_timeout_applied(self):
        """timeout applies to every phase when connect_timeout is unset."""
        config = ClientConfig(api_key="k", timeout=30.0)
        async with Transport(config) as transport:
            timeout = transport._client.timeout
            assert timeout.read == 30.0
            assert timeout.connect == 30.0

    @pytest.mark.asyncio
    async def test_connect_timeout_applied(self):
        """connect_timeout overrides only the connect phase."""
        config = ClientConfig(api_key="k", timeout=30.0, connect_timeout=5.0)
        async with Transport(config) as transport:
            timeout = transport._client.timeout
            assert timeout.read == 30.0
            assert timeout.connect == 5.0

    @pytest.mark.asyncio
    async def test_create(self):
        """create() uses the default base URL."""
        async with Transport.create("app-key") as transport:
            assert transport.config.api_key == "app-key"
            assert transport.config.base_url == DEFAULT_BASE_URL


class TestExecute:
    """Tests for Transport.execute()."""

    @pytest.mark.asyncio
    async def test_execute_sends_request(self, config):
        """execute() sends the request through the client."""
        seen = []

        def respond(request):
            seen.append(request)
            return httpx.Response(204)

        async with Transport(config, transport=httpx.MockTransport(respond)) as transport:
            request = httpx.Request("GET", "https://dify.test/v1/parameters")
            response = await transport.execute(request, stream=False)

        assert response.status_code == 204
        assert seen[0].url == "https://dify.test/v1/parameters"
