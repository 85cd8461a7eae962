# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request dispatch for the Dify client.

The Dispatcher performs exactly one network exchange per call and turns the
result into a ResponseHandle, a TransportError or a RemoteError. It never
retries and never swallows a failure.

Key Design Decisions:
- Every request is sent with httpx streaming enabled, so the call returns
  as soon as status and headers are in. In BLOCKING mode the body is then
  buffered before returning; in STREAMING mode it is left on the wire.
- Non-2xx bodies are always read in full so that RemoteError carries them.
- Requests without an Authorization header are refused before sending.
"""

from __future__ import annotations

import logging
import time

import httpx

from ..exceptions import MalformedRequestError, RemoteError, TransportError
from ..observability.constants import ERROR_TYPE_REMOTE, ERROR_TYPE_TRANSPORT
from ..observability.protocols import DispatchMetricsSink
from ..response import ResponseHandle
from ..types.request import PreparedRequest, RequestKind
from ..types.response_mode import ResponseMode
from .base import Transport

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Sends prepared requests over a shared Transport.

    Args:
        transport: The transport to send through
        metrics: Optional sink for dispatch metrics
    """

    def __init__(
        self,
        transport: Transport,
        metrics: DispatchMetricsSink | None = None,
    ) -> None:
        self._transport = transport
        self._metrics = metrics

    @property
    def transport(self) -> Transport:
        return self._transport

    async def send(
        self,
        prepared: PreparedRequest,
        mode: ResponseMode = ResponseMode.BLOCKING,
    ) -> ResponseHandle:
        """
        Send a JSON request.

        Raises:
            MalformedRequestError: If the request is not an authenticated JSON request
            TransportError: On network-level failure or an undecodable body
            RemoteError: On a non-2xx status
        """
        self._check_kind(prepared, RequestKind.JSON)
        return await self._dispatch(prepared, mode)

    async def send_multipart(
        self,
        prepared: PreparedRequest,
        mode: ResponseMode = ResponseMode.BLOCKING,
    ) -> ResponseHandle:
        """
        Send a multipart request.

        Raises:
            MalformedRequestError: If the request is not an authenticated multipart request
            TransportError: On network-level failure or an undecodable body
            RemoteError: On a non-2xx status
        """
        self._check_kind(prepared, RequestKind.MULTIPART)
        return await self._dispatch(prepared, mode)

    def _check_kind(self, prepared: PreparedRequest, kind: RequestKind) -> None:
        if prepared.kind is not kind:
            raise MalformedRequestError(
                f"Expected a {kind.value} request, got {prepared.kind.value}",
                method=prepared.method,
                endpoint=prepared.spec.endpoint,
            )
        if "Authorization" not in prepared.headers:
            raise MalformedRequestError(
                "Refusing to send a request without authentication",
                method=prepared.method,
                endpoint=prepared.spec.endpoint,
            )

    def _record_failure(self, prepared: PreparedRequest, error_type: str) -> None:
        if self._metrics is not None:
            self._metrics.record_failure(prepared.kind.value, prepared.method, error_type)

    def _transport_error(
        self, prepared: PreparedRequest, exc: httpx.RequestError | httpx.StreamError
    ) -> TransportError:
        self._record_failure(prepared, ERROR_TYPE_TRANSPORT)
        logger.warning(
            f"Transport failure for {prepared.method} {prepared.url}: "
            f"{type(exc).__name__}: {exc}"
        )
        return TransportError(
            f"{prepared.method} {prepared.url} failed: {type(exc).__name__}: {exc}",
            method=prepared.method,
            url=prepared.url,
        )

    async def _dispatch(
        self, prepared: PreparedRequest, mode: ResponseMode
    ) -> ResponseHandle:
        logger.debug(f"Dispatching {prepared.method} {prepared.url} ({mode.value})")
        started = time.monotonic()

        try:
            response = await self._transport.execute(prepared.request, stream=True)
        except httpx.RequestError as e:
            raise self._transport_error(prepared, e) from e

        try:
            if not response.is_success or mode is ResponseMode.BLOCKING:
                await response.aread()
        except (httpx.RequestError, httpx.StreamError) as e:
            await response.aclose()
            raise self._transport_error(prepared, e) from e

        duration = time.monotonic() - started
        if self._metrics is not None:
            self._metrics.record_response(
                prepared.kind.value, prepared.method, response.status_code, duration
            )

        if not response.is_success:
            self._record_failure(prepared, ERROR_TYPE_REMOTE)
            logger.warning(
                f"{prepared.method} {prepared.url} returned HTTP {response.status_code}"
            )
            raise RemoteError(
                response.status_code,
                response.content,
                headers=response.headers,
                method=prepared.method,
                url=prepared.url,
            )

        logger.debug(
            f"{prepared.method} {prepared.url} -> {response.status_code} "
            f"in {duration:.3f}s"
        )
        return ResponseHandle(response, mode)


__all__ = ["Dispatcher"]
