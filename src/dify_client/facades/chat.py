# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Chat facade: ``POST /chat-messages``."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from typing_extensions import Self

from ..client import DifyClient
from ..payloads import build_chat_payload
from ..response import ResponseHandle
from ..types.response_mode import ResponseMode

logger = logging.getLogger(__name__)


class ChatClient:
    """
    Conversational messages for chat applications.

    Usage:
        chat = ChatClient.from_api_key("app-...")
        response = await chat.create_chat_message(
            {}, "hi", "u1", ResponseMode.STREAMING
        )
        async with response:
            async for chunk in response.iter_bytes():
                ...
    """

    def __init__(self, client: DifyClient) -> None:
        self._client = client

    @classmethod
    def from_api_key(cls, api_key: str, base_url: str | None = None, **kwargs: Any) -> ChatClient:
        return cls(DifyClient.from_api_key(api_key, base_url, **kwargs))

    @property
    def client(self) -> DifyClient:
        return self._client

    async def create_chat_message(
        self,
        inputs: Mapping[str, Any],
        query: str,
        user: str,
        response_mode: ResponseMode | str = ResponseMode.BLOCKING,
        conversation_id: str | None = None,
        files: list[Any] | None = None,
    ) -> ResponseHandle:
        """
        Send a chat message.

        Args:
            inputs: Values for the application's input variables
            query: The user's message
            user: End-user identifier
            response_mode: BLOCKING buffers the answer; STREAMING yields SSE chunks
            conversation_id: Continue an existing conversation; omitted when None
            files: File descriptors (e.g. from file_upload); omitted when None
        """
        mode = ResponseMode.parse(response_mode)
        data = build_chat_payload(inputs, query, user, mode, conversation_id, files)
        logger.debug(
            f"Chat message for user {user} "
            f"(conversation: {conversation_id or 'new'}, mode: {mode.value})"
        )
        return await self._client.send_request("POST", "/chat-messages", json=data, mode=mode)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


__all__ = ["ChatClient"]
