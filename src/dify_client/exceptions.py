# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the Dify client library.

This module defines the exception hierarchy used throughout the library.
All exceptions inherit from DifyClientError, making it easy to catch
all client-related exceptions with a single except clause.

The hierarchy separates failures by the phase in which they happen:

- Construction time (MalformedRequestError, FileUnavailableError): raised
  before any network I/O. Not safe to retry without changing the inputs.
- Network time (TransportError): the request may never have reached the
  server. Usually safe to retry.
- Remote status (RemoteError): the server answered with a non-2xx status.
  The raw body is kept on the exception for the caller to inspect.
"""

from __future__ import annotations

from collections.abc import Mapping


class DifyClientError(Exception):
    """Base exception for all Dify client errors.

    This is the root exception class for the library. Catch this exception
    to handle any error originating from the client.

    Attributes:
        retry_safe: Whether repeating the same call unchanged may succeed.

    Example:
        try:
            response = await chat.create_chat_message({}, "hi", "u1")
        except DifyClientError as e:
            logger.error(f"Dify request failed: {e}")
    """

    retry_safe: bool = False


class ConfigurationError(DifyClientError):
    """Raised when client configuration is invalid.

    Common causes include:
    - Empty api_key or base_url
    - Negative timeout values
    - Missing DIFY_API_KEY when loading configuration from the environment

    Example:
        try:
            config = ClientConfig.from_env()
        except ConfigurationError as e:
            logger.error(f"Invalid configuration: {e}")
            raise SystemExit(1)
    """

    pass


class MalformedRequestError(DifyClientError):
    """Raised when a request cannot be assembled from the given inputs.

    This covers bad payload shapes, unsupported query parameter values,
    header values with forbidden characters and unparseable URLs. It is
    always raised synchronously, before any network I/O takes place.

    Attributes:
        method: HTTP method of the request being built, if known.
        endpoint: Endpoint path of the request being built, if known.
    """

    def __init__(
        self,
        message: str,
        method: str | None = None,
        endpoint: str | None = None,
    ):
        super().__init__(message)
        self.method = method
        self.endpoint = endpoint


class FileUnavailableError(MalformedRequestError):
    """Raised when a file for a multipart upload cannot be opened or read.

    Attributes:
        file_path: The path that could not be read.

    Example:
        try:
            await client.file_upload("u1", "/tmp/report.pdf")
        except FileUnavailableError as e:
            logger.warning(f"Skipping upload, unreadable file: {e.file_path}")
    """

    def __init__(
        self,
        message: str,
        file_path: str,
        method: str | None = None,
        endpoint: str | None = None,
    ):
        super().__init__(message, method=method, endpoint=endpoint)
        self.file_path = file_path


class TransportError(DifyClientError):
    """Raised when the network exchange itself fails.

    DNS failures, refused connections, TLS errors and timeouts all end up
    here, as do bodies that fail content decoding. The underlying httpx
    exception is available as ``__cause__``.

    Attributes:
        method: HTTP method of the failed request.
        url: Full URL of the failed request.

    Example:
        try:
            response = await client.get_application_parameters("u1")
        except TransportError as e:
            logger.warning(f"Network failure for {e.method} {e.url}, retrying later")
    """

    retry_safe = True

    def __init__(self, message: str, method: str, url: str):
        super().__init__(message)
        self.method = method
        self.url = url


class RemoteError(DifyClientError):
    """Raised when the server answers with a non-2xx status code.

    The response body is read in full and kept as raw bytes; the library
    does not interpret it.

    Attributes:
        status_code: The HTTP status code returned by the server.
        body: The raw response body.
        headers: The response headers.
        method: HTTP method of the request.
        url: Full URL of the request.

    Example:
        try:
            await chat.create_chat_message({}, "hi", "u1")
        except RemoteError as e:
            if e.status_code == 400:
                logger.error(f"Rejected payload: {e.text}")
    """

    def __init__(
        self,
        status_code: int,
        body: bytes,
        headers: Mapping[str, str] | None = None,
        method: str | None = None,
        url: str | None = None,
    ):
        super().__init__(f"{method} {url} returned HTTP {status_code}")
        self.status_code = status_code
        self.body = body
        self.headers = dict(headers) if headers is not None else {}
        self.method = method
        self.url = url

    @property
    def retry_safe(self) -> bool:  # type: ignore[override]
        """Server-side failures (5xx) may succeed on retry, client errors will not."""
        return self.status_code >= 500

    @property
    def text(self) -> str:
        """The response body decoded as UTF-8, with undecodable bytes replaced."""
        return self.body.decode("utf-8", errors="replace")


class ResponseModeError(DifyClientError):
    """Raised when a response body is materialized the wrong way.

    A blocking response is read with ``read()``/``text()``; a streaming
    response is consumed with ``iter_bytes()``. Each body is consumed once.
    """

    pass
