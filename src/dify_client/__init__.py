# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Dify Client - Async HTTP client for the Dify conversational-AI API.

This library provides a single request-dispatch layer shared by every
Dify endpoint, with capability-specific facades on top.

Key Features:
    - Bearer authentication injected on every request
    - JSON and multipart (file upload) request construction
    - Blocking (buffered) and streaming (lazy chunk) responses
    - Typed failures: construction, transport and remote-status errors
    - Optional dispatch metrics, in-process or Prometheus

Quick Start:
    >>> from dify_client import ChatClient, ResponseMode
    >>>
    >>> async with ChatClient.from_api_key("app-...") as chat:
    ...     response = await chat.create_chat_message(
    ...         {}, "hi", "u1", ResponseMode.STREAMING
    ...     )
    ...     async with response:
    ...         async for chunk in response.iter_bytes():
    ...             print(chunk.decode())

Main Exports:
    - DifyClient: Base client (feedback, parameters, file upload)
    - ChatClient, CompletionClient, WorkflowClient, KnowledgeBaseClient: Facades
    - ClientConfig: Configuration
    - ResponseHandle, ResponseMode: Response handling
    - Transport, RequestBuilder, Dispatcher: The dispatch layer itself

Note: Prometheus metrics require the 'full' extra. Install with:
    pip install dify-client[full]

Version: 1.0.0
"""

__version__ = "1.0.0"

from .client import DifyClient
from .config import DEFAULT_BASE_URL, ClientConfig
from .exceptions import (
    ConfigurationError,
    DifyClientError,
    FileUnavailableError,
    MalformedRequestError,
    RemoteError,
    ResponseModeError,
    TransportError,
)
from .facades import (
    ChatClient,
    CompletionClient,
    KnowledgeBaseClient,
    WorkflowClient,
)
from .observability import (
    DispatchMetrics,
    DispatchMetricsSink,
    PrometheusDispatchMetrics,
)
from .response import ResponseHandle, StreamingBody
from .transport import (
    Dispatcher,
    RequestBuilder,
    Transport,
    read_file_chunked,
)
from .types import PreparedRequest, RequestKind, RequestSpec, ResponseMode

__all__ = [
    # Client
    "DEFAULT_BASE_URL",
    "DifyClient",
    # Facades
    "ChatClient",
    "CompletionClient",
    "KnowledgeBaseClient",
    "WorkflowClient",
    # Config
    "ClientConfig",
    # Exceptions
    "ConfigurationError",
    "DifyClientError",
    "FileUnavailableError",
    "MalformedRequestError",
    "RemoteError",
    "ResponseModeError",
    "TransportError",
    # Observability
    "DispatchMetrics",
    "DispatchMetricsSink",
    "PrometheusDispatchMetrics",
    # Dispatch layer
    "Dispatcher",
    "PreparedRequest",
    "RequestBuilder",
    "RequestKind",
    "RequestSpec",
    "Transport",
    "read_file_chunked",
    # Responses
    "ResponseHandle",
    "ResponseMode",
    "StreamingBody",
]
