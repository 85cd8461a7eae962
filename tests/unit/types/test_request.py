"""Unit tests for request types."""

import httpx

from dify_client.types.request import PreparedRequest, RequestKind, RequestSpec


class TestRequestSpec:
    """Tests for RequestSpec."""

    def test_optional_fields_default_to_none(self):
        """json, params and file_path default to None."""
        spec = RequestSpec(method="GET", endpoint="/parameters")
        assert spec.json is None
        assert spec.params is None
        assert spec.file_path is None


class TestPreparedRequest:
    """Tests for PreparedRequest."""

    def test_exposes_request_fields(self):
        """method, url and headers come from the wrapped httpx request; kind defaults to JSON."""
        request = httpx.Request(
            "POST", "https://dify.test/v1/datasets", headers={"Authorization": "Bearer k"}
        )
        prepared = PreparedRequest(
            request=request, spec=RequestSpec(method="POST", endpoint="/datasets")
        )

        assert prepared.method == "POST"
        assert prepared.url == "https://dify.test/v1/datasets"
        assert prepared.headers["Authorization"] == "Bearer k"
        assert prepared.kind is RequestKind.JSON
