"""Unit tests for WorkflowClient."""

from __future__ import annotations

import json

import pytest

from dify_client.facades.workflow import WorkflowClient


class TestRun:
    """Tests for WorkflowClient.run()."""

    @pytest.mark.asyncio
    async def test_default_user(self, client, handler):
        """A run without a user is sent as abc-123 in blocking mode."""
        workflow = WorkflowClient(client)

        await workflow.run({"city": "Bern"})

        request = handler.last
        assert request.url == "https://dify.test/v1/workflows/run"
        assert json.loads(request.content) == {
            "inputs": {"city": "Bern"},
            "response_mode": "blocking",
            "user": "abc-123",
        }

    @pytest.mark.asyncio
    async def test_explicit_user_and_mode(self, client, handler):
        """An explicit user and mode reach the body."""
        workflow = WorkflowClient(client)

        response = await workflow.run({}, "streaming", user="u7")
        await response.aclose()

        body = json.loads(handler.last.content)
        assert body["user"] == "u7"
        assert body["response_mode"] == "streaming"
