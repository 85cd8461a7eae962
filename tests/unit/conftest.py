"""
Shared fixtures for unit tests.

Requests are served by httpx.MockTransport, so no test touches the network.
"""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from dify_client.client import DifyClient
from dify_client.config import ClientConfig

TEST_API_KEY = "app-test-key"
TEST_BASE_URL = "https://dify.test/v1"


class RecordingHandler:
    """MockTransport handler that records every request it serves."""

    def __init__(
        self, respond: Callable[[httpx.Request], httpx.Response] | None = None
    ) -> None:
        self.requests: list[httpx.Request] = []
        self._respond = respond or (
            lambda request: httpx.Response(200, json={"result": "success"})
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self._respond(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(api_key=TEST_API_KEY, base_url=TEST_BASE_URL)


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def client(config: ClientConfig, handler: RecordingHandler) -> DifyClient:
    return DifyClient(config, transport=httpx.MockTransport(handler))


@pytest.fixture
def make_client(
    config: ClientConfig,
) -> Callable[..., tuple[DifyClient, RecordingHandler]]:
    """Factory for a client whose server answers with ``respond(request)``."""

    def _make(
        respond: Callable[[httpx.Request], httpx.Response] | None = None,
        **kwargs: object,
    ) -> tuple[DifyClient, RecordingHandler]:
        recorder = RecordingHandler(respond)
        return DifyClient(config, transport=httpx.MockTransport(recorder), **kwargs), recorder

    return _make
