# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Response handle returned by the Dispatcher.

A ResponseHandle wraps one completed HTTP exchange. Status and headers are
always available. The body is materialized in exactly one way, fixed by the
ResponseMode of the originating call:

- BLOCKING: the body was buffered by the Dispatcher; use read() or text()
- STREAMING: the body is still on the wire; use iter_bytes() to consume it
  lazily, chunk by chunk

Using the other strategy raises ResponseModeError.

A streaming handle holds a pooled connection until its body is exhausted
or it is closed. Close it with aclose() or ``async with handle:``. A
handle that is garbage-collected unclosed schedules the close on the
running event loop, so the connection returns to the pool either way.
"""

from __future__ import annotations

import asyncio
import logging
import weakref
from collections.abc import AsyncIterator

import httpx
from typing_extensions import Self

from .exceptions import ResponseModeError, TransportError
from .types.response_mode import ResponseMode

logger = logging.getLogger(__name__)

# Strong references to close tasks of abandoned streams until they finish
_pending_closes: set[asyncio.Task[None]] = set()


def _release_abandoned(response: httpx.Response) -> None:
    if response.is_closed:
        return
    url = response.request.url
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        logger.warning(
            f"Streaming response for {url} was dropped outside an event loop; "
            f"its connection was not released"
        )
        return
    logger.debug(f"Releasing connection of abandoned stream {url}")
    task = loop.create_task(response.aclose())
    _pending_closes.add(task)
    task.add_done_callback(_pending_closes.discard)


class StreamingBody(AsyncIterator[bytes]):
    """
    Async iterator over the raw body chunks of a streaming response.

    Chunks are passed through as received (after content decoding); no
    server-sent-event parsing happens here. The underlying response is
    closed when iteration finishes, when it fails, or on aclose().

    Usage:
        async with handle:
            async for chunk in handle.iter_bytes():
                buffer.extend(chunk)
    """

    __slots__ = ("_closed", "_inner", "_owner", "_response", "byte_count", "chunk_count")

    def __init__(self, response: httpx.Response, owner: object | None = None) -> None:
        self._response = response
        # Keeps the owning handle (and its release hook) alive while iterating
        self._owner = owner
        self._inner: AsyncIterator[bytes] = response.aiter_bytes()
        self._closed = False
        self.chunk_count = 0
        self.byte_count = 0

    async def __anext__(self) -> bytes:
        if self._closed:
            raise StopAsyncIteration
        try:
            chunk = await self._inner.__anext__()
        except StopAsyncIteration:
            logger.debug(
                f"Stream {self._response.request.url} finished: "
                f"{self.chunk_count} chunks, {self.byte_count} bytes"
            )
            await self.aclose()
            raise
        except (httpx.RequestError, httpx.StreamError) as e:
            await self.aclose()
            request = self._response.request
            raise TransportError(
                f"Stream interrupted after {self.chunk_count} chunks: "
                f"{type(e).__name__}: {e}",
                method=request.method,
                url=str(request.url),
            ) from e

        self.chunk_count += 1
        self.byte_count += len(chunk)
        return chunk

    async def aclose(self) -> None:
        """Close the underlying response. Idempotent."""
        if self._closed:
            return
        self._closed = True
        await self._response.aclose()

    def __aiter__(self) -> StreamingBody:
        return self


class ResponseHandle:
    """
    Uniform view over a buffered or streaming HTTP response.

    Args:
        response: The httpx response; buffered already in BLOCKING mode
        mode: The response mode the caller asked for
    """

    def __init__(self, response: httpx.Response, mode: ResponseMode) -> None:
        self._response = response
        self._mode = mode
        self._stream: StreamingBody | None = None
        self._release: weakref.finalize | None = None
        if mode.is_streaming:
            self._release = weakref.finalize(self, _release_abandoned, response)
            self._release.atexit = False

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    @property
    def mode(self) -> ResponseMode:
        return self._mode

    @property
    def is_streaming(self) -> bool:
        return self._mode.is_streaming

    @property
    def is_closed(self) -> bool:
        return self._response.is_closed

    @property
    def url(self) -> str:
        return str(self._response.request.url)

    def _require_mode(self, mode: ResponseMode, operation: str) -> None:
        if self._mode is not mode:
            raise ResponseModeError(
                f"{operation} is not available on a {self._mode.value} response"
            )

    async def read(self) -> bytes:
        """Return the buffered body (blocking mode only)."""
        self._require_mode(ResponseMode.BLOCKING, "read()")
        return await self._response.aread()

    async def text(self) -> str:
        """Return the buffered body decoded as text (blocking mode only)."""
        self._require_mode(ResponseMode.BLOCKING, "text()")
        await self._response.aread()
        return self._response.text

    def iter_bytes(self) -> StreamingBody:
        """
        Return the lazy chunk sequence (streaming mode only).

        The body can be iterated once; a second call raises ResponseModeError.
        """
        self._require_mode(ResponseMode.STREAMING, "iter_bytes()")
        if self._stream is not None:
            raise ResponseModeError("Streaming body has already been consumed")
        self._stream = StreamingBody(self._response, owner=self)
        return self._stream

    async def aclose(self) -> None:
        """Release the connection, abandoning any unread body."""
        if self._release is not None:
            self._release.detach()
        if self._stream is not None:
            await self._stream.aclose()
        else:
            await self._response.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return (
            f"<ResponseHandle [{self.status_code}] {self._mode.value} "
            f"{self._response.request.method} {self.url}>"
        )


__all__ = ["ResponseHandle", "StreamingBody"]
