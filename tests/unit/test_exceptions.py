"""Unit tests for the exceptions module.

Tests all exception classes defined in dify_client.exceptions.
"""

import pytest

from dify_client.exceptions import (
    ConfigurationError,
    DifyClientError,
    FileUnavailableError,
    MalformedRequestError,
    RemoteError,
    ResponseModeError,
    TransportError,
)


class TestDifyClientError:
    """Tests for the base DifyClientError exception."""

    def test_can_be_caught_as_exception(self):
        """DifyClientError can be caught as a standard Exception."""
        with pytest.raises(Exception):  # noqa: B017
            raise DifyClientError("test error")

    def test_message_preserved(self):
        """DifyClientError preserves its message."""
        error = DifyClientError("test message")
        assert str(error) == "test message"

    def test_not_retry_safe_by_default(self):
        """The base class is not retry-safe."""
        assert DifyClientError().retry_safe is False

    @pytest.mark.parametrize(
        "error",
        [
            ConfigurationError("bad config"),
            MalformedRequestError("bad request"),
            FileUnavailableError("missing", file_path="/tmp/x"),
            TransportError("down", method="GET", url="https://x"),
            RemoteError(500, b""),
            ResponseModeError("wrong mode"),
        ],
    )
    def test_all_errors_share_the_root(self, error):
        """Every library exception derives from DifyClientError."""
        assert isinstance(error, DifyClientError)


class TestMalformedRequestError:
    """Tests for MalformedRequestError."""

    def test_stores_request_context(self):
        """MalformedRequestError stores method and endpoint."""
        error = MalformedRequestError("bad", method="POST", endpoint="/chat-messages")
        assert error.method == "POST"
        assert error.endpoint == "/chat-messages"

    def test_context_defaults_to_none(self):
        """method and endpoint default to None."""
        error = MalformedRequestError("bad")
        assert error.method is None
        assert error.endpoint is None

    def test_not_retry_safe(self):
        """Construction failures are not retry-safe."""
        assert MalformedRequestError("bad").retry_safe is False


class TestFileUnavailableError:
    """Tests for FileUnavailableError."""

    def test_is_a_construction_failure(self):
        """FileUnavailableError can be caught as MalformedRequestError."""
        with pytest.raises(MalformedRequestError):
            raise FileUnavailableError("missing", file_path="/tmp/x")

    def test_stores_file_path(self):
        """FileUnavailableError stores file_path alongside the request context."""
        error = FileUnavailableError(
            "missing", file_path="/tmp/x", method="POST", endpoint="/files/upload"
        )
        assert error.file_path == "/tmp/x"
        assert error.endpoint == "/files/upload"
        assert error.retry_safe is False


class TestTransportError:
    """Tests for TransportError."""

    def test_stores_request_context(self):
        """TransportError stores method and url."""
        error = TransportError("refused", method="GET", url="https://dify.test/v1/parameters")
        assert error.method == "GET"
        assert error.url == "https://dify.test/v1/parameters"
        assert str(error) == "refused"

    def test_retry_safe(self):
        """Network failures are retry-safe."""
        assert TransportError("refused", method="GET", url="u").retry_safe is True


class TestRemoteError:
    """Tests for RemoteError."""

    def test_stores_status_and_body(self):
        """RemoteError stores status, raw body and headers."""
        error = RemoteError(
            500,
            b'{"code": "internal_error"}',
            headers={"content-type": "application/json"},
            method="POST",
            url="https://dify.test/v1/chat-messages",
        )
        assert error.status_code == 500
        assert error.body == b'{"code": "internal_error"}'
        assert error.headers == {"content-type": "application/json"}
        assert "HTTP 500" in str(error)

    def test_text_decodes_body(self):
        """text decodes the body as UTF-8."""
        error = RemoteError(400, "überfüllt".encode())
        assert error.text == "überfüllt"

    def test_text_replaces_undecodable_bytes(self):
        """text replaces bytes that are not valid UTF-8."""
        error = RemoteError(502, b"\xff\xfebad")
        assert error.text.endswith("bad")

    def test_headers_default_to_empty(self):
        """headers default to an empty dict."""
        assert RemoteError(404, b"").headers == {}

    @pytest.mark.parametrize(
        ("status", "retry_safe"), [(400, False), (404, False), (500, True), (503, True)]
    )
    def test_retry_safe_only_for_server_errors(self, status, retry_safe):
        """Only 5xx statuses are retry-safe."""
        assert RemoteError(status, b"").retry_safe is retry_safe
