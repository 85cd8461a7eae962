# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request construction for the Dify API.

Two construction paths exist because multipart encoding and JSON body
encoding are mutually exclusive:

- build(): JSON body (or none) with a fixed ``application/json`` content type
- build_multipart(): a ``data`` text field plus a ``file`` part; the
  content type is derived from the multipart boundary

Both paths inject the same bearer authentication, and both raise
MalformedRequestError before any network I/O when the request cannot be
assembled.
"""

from __future__ import annotations

import json
import logging
import os
import re
from collections.abc import Mapping
from typing import Any

import httpx

from ..config import ClientConfig
from ..exceptions import MalformedRequestError
from ..types.request import PreparedRequest, RequestKind, RequestSpec
from .files import FILE_CHUNK_SIZE, FilePath, read_file_chunked

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"

# RFC 9110 token characters
_METHOD_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
_FORBIDDEN_HEADER_CHARS = frozenset("\r\n\x00")
_QUERY_LEAF_TYPES = (str, int, float, bool)


def _check_header_value(name: str, value: str, spec: RequestSpec) -> None:
    if not value.isascii() or any(c in _FORBIDDEN_HEADER_CHARS for c in value):
        raise MalformedRequestError(
            f"Invalid characters in {name} header value",
            method=spec.method,
            endpoint=spec.endpoint,
        )


def _check_query_params(params: Any, spec: RequestSpec) -> dict[str, Any]:
    if not isinstance(params, Mapping):
        raise MalformedRequestError(
            f"Query parameters must be a mapping, got {type(params).__name__}",
            method=spec.method,
            endpoint=spec.endpoint,
        )
    for key, value in params.items():
        if not isinstance(key, str):
            raise MalformedRequestError(
                f"Query parameter names must be strings, got {key!r}",
                method=spec.method,
                endpoint=spec.endpoint,
            )
        if not isinstance(value, _QUERY_LEAF_TYPES):
            raise MalformedRequestError(
                f"Query parameter {key!r} must be a string, number or bool, "
                f"got {type(value).__name__}",
                method=spec.method,
                endpoint=spec.endpoint,
            )
    return dict(params)


def canonical_json(value: Any) -> str:
    """Serialize a JSON value to its compact canonical string form."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


class RequestBuilder:
    """
    Builds authenticated requests against one base URL.

    The builder only reads the ClientConfig it was given; it holds no other
    state and can be shared across concurrent calls.

    Usage:
        builder = RequestBuilder(ClientConfig(api_key="app-..."))
        prepared = builder.build("POST", "/chat-messages", {"query": "hi"})
    """

    def __init__(self, config: ClientConfig, chunk_size: int = FILE_CHUNK_SIZE) -> None:
        self._config = config
        self._chunk_size = chunk_size

    @property
    def config(self) -> ClientConfig:
        return self._config

    def url_for(self, endpoint: str) -> str:
        """Concatenate base URL and endpoint verbatim."""
        return f"{self._config.base_url}{endpoint}"

    def _auth_headers(self, spec: RequestSpec) -> dict[str, str]:
        value = f"Bearer {self._config.api_key}"
        _check_header_value("Authorization", value, spec)
        return {"Authorization": value}

    def _check_method(self, spec: RequestSpec) -> str:
        if not isinstance(spec.method, str) or not _METHOD_RE.fullmatch(spec.method):
            raise MalformedRequestError(
                f"Invalid HTTP method {spec.method!r}",
                method=str(spec.method),
                endpoint=spec.endpoint,
            )
        return spec.method.upper()

    def build(
        self,
        method: str,
        endpoint: str,
        json_payload: Any | None = None,
        query_params: Mapping[str, Any] | None = None,
    ) -> PreparedRequest:
        """
        Build a JSON request.

        Args:
            method: HTTP method
            endpoint: Path beginning with ``/``
            json_payload: Optional JSON body, sent verbatim
            query_params: Optional flat mapping serialized as the query string

        Returns:
            The prepared request.

        Raises:
            MalformedRequestError: If the request cannot be assembled.
        """
        spec = RequestSpec(
            method=method,
            endpoint=endpoint,
            json=json_payload,
            params=dict(query_params) if isinstance(query_params, Mapping) else query_params,
        )
        method = self._check_method(spec)
        headers = self._auth_headers(spec)
        headers["Content-Type"] = JSON_CONTENT_TYPE

        params = _check_query_params(query_params, spec) if query_params is not None else None
        url = self.url_for(endpoint)

        content: bytes | None = None
        if json_payload is not None:
            try:
                content = canonical_json(json_payload).encode("utf-8")
            except (TypeError, ValueError) as e:
                raise MalformedRequestError(
                    f"JSON body is not serializable: {e}",
                    method=method,
                    endpoint=endpoint,
                ) from e

        try:
            request = httpx.Request(
                method, url, headers=headers, params=params, content=content
            )
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise MalformedRequestError(
                f"Cannot assemble {method} {url}: {type(e).__name__}: {e}",
                method=method,
                endpoint=endpoint,
            ) from e

        logger.debug(f"Built {method} {request.url} (json body: {content is not None})")
        return PreparedRequest(request=request, spec=spec, kind=RequestKind.JSON)

    async def build_multipart(
        self,
        method: str,
        endpoint: str,
        metadata_json: Any,
        file_path: FilePath,
    ) -> PreparedRequest:
        """
        Build a multipart request with a ``data`` field and a ``file`` part.

        The Content-Type header is left to httpx so that it carries the
        multipart boundary.

        Args:
            method: HTTP method
            endpoint: Path beginning with ``/``
            metadata_json: JSON value serialized into the ``data`` field
            file_path: Local file whose bytes become the ``file`` part

        Raises:
            MalformedRequestError: If the request cannot be assembled.
            FileUnavailableError: If the file cannot be opened or read.
        """
        path = os.fspath(file_path)
        spec = RequestSpec(
            method=method, endpoint=endpoint, json=metadata_json, file_path=path
        )
        method = self._check_method(spec)
        headers = self._auth_headers(spec)
        url = self.url_for(endpoint)

        try:
            data_field = canonical_json(metadata_json)
        except (TypeError, ValueError) as e:
            raise MalformedRequestError(
                f"Multipart metadata is not serializable: {e}",
                method=method,
                endpoint=endpoint,
            ) from e

        try:
            file_bytes = await read_file_chunked(path, self._chunk_size)
        except MalformedRequestError as e:
            e.method = method
            e.endpoint = endpoint
            raise

        try:
            request = httpx.Request(
                method,
                url,
                headers=headers,
                data={"data": data_field},
                files={"file": (os.path.basename(path), file_bytes)},
            )
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise MalformedRequestError(
                f"Cannot assemble {method} {url}: {type(e).__name__}: {e}",
                method=method,
                endpoint=endpoint,
            ) from e

        logger.debug(f"Built multipart {method} {request.url} with {len(file_bytes)} file bytes")
        return PreparedRequest(request=request, spec=spec, kind=RequestKind.MULTIPART)


__all__ = ["JSON_CONTENT_TYPE", "RequestBuilder", "canonical_json"]
