"""Unit tests for CompletionClient."""

from __future__ import annotations

import json

import pytest

from dify_client.facades.completion import CompletionClient
from dify_client.types.response_mode import ResponseMode


class TestCreateCompletionMessage:
    """Tests for CompletionClient.create_completion_message()."""

    @pytest.mark.asyncio
    async def test_without_files(self, client, handler):
        """The body holds inputs, response_mode and user when files is None."""
        completion = CompletionClient(client)

        await completion.create_completion_message({"topic": "tea"}, "blocking", "u1")

        request = handler.last
        assert request.url == "https://dify.test/v1/completion-messages"
        assert json.loads(request.content) == {
            "inputs": {"topic": "tea"},
            "response_mode": "blocking",
            "user": "u1",
        }

    @pytest.mark.asyncio
    async def test_with_files(self, client, handler):
        """files is forwarded when given."""
        completion = CompletionClient(client)
        files = [{"type": "image", "transfer_method": "local_file", "upload_file_id": "f1"}]

        await completion.create_completion_message({}, ResponseMode.BLOCKING, "u1", files)

        assert json.loads(handler.last.content)["files"] == files

    @pytest.mark.asyncio
    async def test_streaming_mode(self, client):
        """A streaming completion returns a streaming handle."""
        completion = CompletionClient(client)

        response = await completion.create_completion_message({}, "streaming", "u1")

        assert response.is_streaming
        await response.aclose()
