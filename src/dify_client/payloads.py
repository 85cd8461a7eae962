# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
JSON payload shaping for the Dify endpoints.

Each builder checks the shape of its inputs and raises MalformedRequestError
instead of assuming it. Optional keys are left out entirely when None.
Key order follows the order the server documents, which keeps request
bodies stable for logging and tests.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .exceptions import MalformedRequestError
from .types.response_mode import ResponseMode

DEFAULT_WORKFLOW_USER = "abc-123"


def _require_mapping(name: str, value: Any) -> dict[str, Any]:
    if not isinstance(value, Mapping):
        raise MalformedRequestError(f"{name} must be a JSON object, got {type(value).__name__}")
    return dict(value)


def _require_str(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise MalformedRequestError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _require_list(name: str, value: Any) -> list[Any]:
    if not isinstance(value, (list, tuple)):
        raise MalformedRequestError(f"{name} must be a JSON array, got {type(value).__name__}")
    return list(value)


def build_feedback_payload(rating: bool, user: str) -> dict[str, Any]:
    if not isinstance(rating, bool):
        raise MalformedRequestError(f"rating must be a bool, got {type(rating).__name__}")
    return {"rating": rating, "user": _require_str("user", user)}


def build_user_payload(user: str) -> dict[str, Any]:
    """``{"user": ...}``, used as query for /parameters and as upload metadata."""
    return {"user": _require_str("user", user)}


def build_completion_payload(
    inputs: Mapping[str, Any],
    response_mode: ResponseMode | str,
    user: str,
    files: list[Any] | None = None,
) -> dict[str, Any]:
    data: dict[str, Any] = {
        "inputs": _require_mapping("inputs", inputs),
        "response_mode": ResponseMode.parse(response_mode).value,
        "user": _require_str("user", user),
    }
    if files is not None:
        data["files"] = _require_list("files", files)
    return data


def build_chat_payload(
    inputs: Mapping[str, Any],
    query: str,
    user: str,
    response_mode: ResponseMode | str,
    conversation_id: str | None = None,
    files: list[Any] | None = None,
) -> dict[str, Any]:
    """
    Shape the body for ``POST /chat-messages``.

    Example:
        >>> build_chat_payload({}, "hi", "u1", ResponseMode.BLOCKING)
        {'inputs': {}, 'query': 'hi', 'user': 'u1', 'response_mode': 'blocking'}
    """
    data: dict[str, Any] = {
        "inputs": _require_mapping("inputs", inputs),
        "query": _require_str("query", query),
        "user": _require_str("user", user),
        "response_mode": ResponseMode.parse(response_mode).value,
    }
    if conversation_id is not None:
        data["conversation_id"] = _require_str("conversation_id", conversation_id)
    if files is not None:
        data["files"] = _require_list("files", files)
    return data


def build_workflow_payload(
    inputs: Mapping[str, Any],
    response_mode: ResponseMode | str,
    user: str | None = None,
) -> dict[str, Any]:
    return {
        "inputs": _require_mapping("inputs", inputs),
        "response_mode": ResponseMode.parse(response_mode).value,
        "user": DEFAULT_WORKFLOW_USER if user is None else _require_str("user", user),
    }


def build_dataset_payload(name: str) -> dict[str, Any]:
    return {"name": _require_str("name", name)}


__all__ = [
    "DEFAULT_WORKFLOW_USER",
    "build_chat_payload",
    "build_completion_payload",
    "build_dataset_payload",
    "build_feedback_payload",
    "build_user_payload",
    "build_workflow_payload",
]
