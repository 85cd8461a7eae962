"""Unit tests for payload shaping."""

from __future__ import annotations

import pytest

from dify_client.exceptions import MalformedRequestError
from dify_client.payloads import (
    DEFAULT_WORKFLOW_USER,
    build_chat_payload,
    build_completion_payload,
    build_dataset_payload,
    build_feedback_payload,
    build_user_payload,
    build_workflow_payload,
)
from dify_client.types.response_mode import ResponseMode


class TestChatPayload:
    """Tests for build_chat_payload()."""

    def test_minimal(self):
        """Required keys appear in wire order without optional keys."""
        data = build_chat_payload({}, "hi", "u1", ResponseMode.BLOCKING)
        assert list(data) == ["inputs", "query", "user", "response_mode"]
        assert data["response_mode"] == "blocking"

    def test_optional_keys(self):
        """conversation_id and files are added when given."""
        data = build_chat_payload(
            {"topic": "x"}, "hi", "u1", "streaming", conversation_id="c1", files=[{"id": "f"}]
        )
        assert data["conversation_id"] == "c1"
        assert data["files"] == [{"id": "f"}]
        assert data["response_mode"] == "streaming"

    @pytest.mark.parametrize(
        ("args", "match"),
        [
            ((["not", "a", "map"], "hi", "u1", "blocking"), "inputs"),
            (({}, 42, "u1", "blocking"), "query"),
            (({}, "hi", None, "blocking"), "user"),
            (({}, "hi", "u1", "fast"), "response_mode"),
        ],
    )
    def test_invalid_shapes(self, args, match):
        """Wrongly typed fields raise MalformedRequestError naming the field."""
        with pytest.raises(MalformedRequestError, match=match):
            build_chat_payload(*args)

    def test_files_must_be_list(self):
        """files must be a list."""
        with pytest.raises(MalformedRequestError, match="files"):
            build_chat_payload({}, "hi", "u1", "blocking", files={"id": "f"})


class TestCompletionPayload:
    """Tests for build_completion_payload()."""

    def test_without_files(self):
        """files is omitted when None."""
        data = build_completion_payload({"a": 1}, ResponseMode.STREAMING, "u1")
        assert data == {"inputs": {"a": 1}, "response_mode": "streaming", "user": "u1"}

    def test_with_files(self):
        """An empty files list is still sent."""
        data = build_completion_payload({}, "blocking", "u1", files=[])
        assert data["files"] == []


class TestWorkflowPayload:
    """Tests for build_workflow_payload()."""

    def test_default_user(self):
        """The user defaults to abc-123."""
        data = build_workflow_payload({}, "blocking")
        assert data["user"] == DEFAULT_WORKFLOW_USER == "abc-123"

    def test_explicit_user(self):
        """An explicit user replaces the default."""
        assert build_workflow_payload({}, "blocking", "u9")["user"] == "u9"


class TestSmallPayloads:
    """Tests for the feedback, user and dataset payloads."""

    def test_feedback(self):
        """Feedback carries rating and user."""
        assert build_feedback_payload(False, "u1") == {"rating": False, "user": "u1"}

    def test_feedback_rating_not_bool(self):
        """An integer rating is refused."""
        with pytest.raises(MalformedRequestError, match="rating"):
            build_feedback_payload(1, "u1")

    def test_user(self):
        """The user payload holds only the user."""
        assert build_user_payload("u1") == {"user": "u1"}

    def test_dataset(self):
        """The dataset payload holds the name, which must be a string."""
        assert build_dataset_payload("docs") == {"name": "docs"}
        with pytest.raises(MalformedRequestError, match="name"):
            build_dataset_payload(None)
