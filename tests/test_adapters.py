"""Tests for HTTP client adapters."""

import asyncio
from types import SimpleNamespace

import aiohttp
import httpx
import pytest

from log_curl_request.adapters import (
    ERROR_PREFIX,
    extract_options_shape,
    extract_request_shape,
    from_options_like,
    from_http_request,
    from_request_like,
    from_httpx_request,
    curl_event_hook,
    async_curl_event_hook,
    curl_trace_config,
)


class ExplodingRequest:
    """Request object whose fields raise when read."""

    method = "GET"

    @property
    def url(self):
        raise RuntimeError("url unavailable")

    @property
    def headers(self):
        raise RuntimeError("headers unavailable")


class TestOptionsShape:
    """Tests for "options"-shaped objects."""

    def test_all_fields(self, quiet_config):
        """Test every supported field is used."""
        options = SimpleNamespace(
            method="post",
            uri="https://api.example.com/posts",
            headers={"Content-Type": "application/json"},
            data={"title": "foo"},
            query_parameters={"draft": True},
        )

        assert from_options_like(options) == (
            'curl -X POST -H "Content-Type: application/json" '
            "--data '{\"title\":\"foo\"}' "
            '"https://api.example.com/posts?draft=true"'
        )

    def test_mapping_with_path(self, quiet_config):
        """Test mappings are read by key and path is a fallback for uri."""
        options = {
            "method": "GET",
            "path": "https://api.example.com/items",
            "queryParameters": {"page": 2},
        }

        assert from_options_like(options) == (
            'curl -X GET "https://api.example.com/items?page=2"'
        )

    def test_missing_method_defaults_to_get(self):
        """Test defaults and warnings for missing fields."""
        extracted = extract_options_shape(SimpleNamespace(uri="https://x.io"))

        assert extracted.method == "GET"
        assert extracted.url == "https://x.io"
        assert len(extracted.warnings) == 2  # method and headers

    def test_wrong_headers_type(self, quiet_config):
        """Test malformed headers are skipped."""
        options = SimpleNamespace(method="GET", uri="https://x.io", headers=42)

        assert from_options_like(options) == 'curl -X GET "https://x.io"'

    @pytest.mark.parametrize("data", [[1, 2], b"raw bytes", 3.5])
    def test_unsupported_data_skipped(self, quiet_config, data):
        """Test a body of the wrong type is dropped with a warning."""
        options = SimpleNamespace(
            method="POST", uri="https://x.io/up", headers={"A": "1"}, data=data
        )

        assert from_options_like(options) == 'curl -X POST -H "A: 1" "https://x.io/up"'
        assert any("unsupported type" in w for w in extract_options_shape(options).warnings)

    def test_failing_optional_field_warned(self, quiet_config):
        """Test optional fields that raise on read are reported."""
        class Options:
            method = "GET"
            uri = "https://x.io"
            headers = {}

            @property
            def data(self):
                raise RuntimeError("body stream closed")

        extracted = extract_options_shape(Options())

        assert extracted.warnings == ["Cannot read 'data': RuntimeError: body stream closed"]
        assert from_options_like(Options()) == 'curl -X GET "https://x.io"'

    def test_none(self):
        assert from_options_like(None) == ""


class TestRequestShape:
    """Tests for "request"-shaped objects."""

    def test_json_body_decoded(self, quiet_config):
        """Test a JSON object body is rendered compactly."""
        request = SimpleNamespace(
            method="put",
            url="https://api.example.com/items/1",
            headers={"Accept": "application/json"},
            body='{"name": "widget", "qty": 2}',
        )

        assert from_http_request(request) == (
            'curl -X PUT -H "Accept: application/json" '
            "--data '{\"name\":\"widget\",\"qty\":2}' "
            '"https://api.example.com/items/1"'
        )

    @pytest.mark.parametrize("body,expected", [
        ("hello world", "--data 'hello world'"),
        ("[1, 2]", "--data '[1, 2]'"),
        (b"a=1", "--data 'a=1'"),
    ])
    def test_other_bodies_raw(self, quiet_config, body, expected):
        """Test non-object bodies are sent verbatim."""
        request = SimpleNamespace(method="POST", url="https://x.io", headers={}, body=body)

        assert expected in from_http_request(request)

    def test_unsupported_body_skipped(self, quiet_config):
        """Test a numeric body is dropped with a warning."""
        request = SimpleNamespace(
            method="POST", url="https://x.io/up", headers={"A": "1"}, body=5
        )

        assert from_http_request(request) == 'curl -X POST -H "A: 1" "https://x.io/up"'
        assert extract_request_shape(request).warnings == ["Cannot read 'data': unsupported type int"]

    def test_unread_httpx_content_warned(self):
        """Test a body that cannot be read yet produces a warning."""
        def chunks():
            yield b"data"

        request = httpx.Request("POST", "https://x.io/upload", content=chunks())
        extracted = extract_request_shape(request)

        assert extracted.data is None
        assert len(extracted.warnings) == 1
        assert "RequestNotRead" in extracted.warnings[0]

    def test_empty_body_omitted(self, quiet_config):
        request = SimpleNamespace(method="GET", url="https://x.io", headers={}, body="")

        assert from_http_request(request) == 'curl -X GET "https://x.io"'

    def test_failing_fields_reported(self, quiet_config):
        """Test failures become an error string, never an exception."""
        result = from_http_request(ExplodingRequest())

        assert result.startswith(f"{ERROR_PREFIX} HTTP request:")
        assert "URL cannot be empty" in result

    def test_warnings_collected(self):
        """Test each unreadable field produces a warning."""
        extracted = extract_request_shape(ExplodingRequest())

        assert extracted.method == "GET"
        assert len(extracted.warnings) == 2
        assert any("url unavailable" in w for w in extracted.warnings)

    def test_invalid_url_reported(self, quiet_config):
        request = SimpleNamespace(method="GET", url="not a url", headers={})

        assert from_http_request(request).startswith(ERROR_PREFIX)

    def test_none(self):
        assert from_http_request(None) == ""


class TestFromRequestLike:
    """Tests for shape detection."""

    def test_dispatch_options(self, quiet_config):
        options = SimpleNamespace(method="GET", uri="https://x.io", query_parameters={"a": 1})

        assert from_request_like(options) == 'curl -X GET "https://x.io?a=1"'

    def test_dispatch_request(self, quiet_config):
        request = {"method": "DELETE", "url": "https://x.io/1", "headers": {"Token": "t"}}

        assert from_request_like(request, mask_sensitive=True) == (
            'curl -X DELETE -H "Token: ********" "https://x.io/1"'
        )

    def test_none(self):
        assert from_request_like(None) == ""


class TestHttpx:
    """Tests for httpx integration."""

    def test_json_request(self, quiet_config):
        """Test headers, body and query string of an httpx request."""
        request = httpx.Request(
            "POST",
            "https://api.example.com/posts?userId=1",
            headers={"Authorization": "Bearer abc"},
            json={"title": "foo"},
        )

        result = from_httpx_request(request, mask_sensitive=True)

        assert result.startswith('curl -X POST -H "Authorization: ********"')
        assert '-H "Content-Type: application/json"' in result
        assert "--data '{\"title\":\"foo\"}'" in result
        assert result.endswith('"https://api.example.com/posts?userId=1"')
        assert "Content-Length" not in result
        assert "Host" not in result

    def test_streaming_body_skipped(self, quiet_config):
        """Test an unread streaming body is left out."""
        def chunks():
            yield b"data"

        request = httpx.Request("POST", "https://x.io/upload", content=chunks())

        result = from_httpx_request(request)
        assert result.startswith("curl -X POST")
        assert "--data" not in result

    def test_none(self):
        assert from_httpx_request(None) == ""

    def test_event_hook_with_client(self, captured_logs):
        """Test the hook logs every request sent by a client."""
        transport = httpx.MockTransport(lambda request: httpx.Response(200))
        with httpx.Client(
            transport=transport,
            event_hooks={"request": [curl_event_hook()]},
        ) as client:
            client.get("https://api.example.com/items", params={"page": 3})

        assert len(captured_logs) == 1
        assert captured_logs[0].startswith("cURL command:\ncurl -X GET")
        assert captured_logs[0].endswith('"https://api.example.com/items?page=3"')

    def test_async_event_hook(self, captured_logs):
        """Test the async hook."""
        hook = async_curl_event_hook(format_output=True)
        asyncio.run(hook(httpx.Request("GET", "https://x.io/ping")))

        assert captured_logs == ['cURL command:\ncurl -X GET \\\n  "https://x.io/ping"']


class TestAiohttp:
    """Tests for aiohttp trace integration."""

    def test_trace_config_type(self):
        assert isinstance(curl_trace_config(), aiohttp.TraceConfig)

    def test_request_start_logs_command(self, captured_logs):
        """Test the request-start callback logs a command."""
        trace_config = curl_trace_config(mask_sensitive=True)
        handler = trace_config.on_request_start[0]
        params = SimpleNamespace(
            method="get",
            url="https://api.example.com/me?full=1",
            headers={"Authorization": "Bearer t"},
        )

        asyncio.run(handler(None, SimpleNamespace(), params))

        assert captured_logs == [
            'cURL command:\ncurl -X GET -H "Authorization: ********" '
            '"https://api.example.com/me?full=1"'
        ]

    def test_request_start_never_raises(self, captured_logs):
        """Test unusable parameters do not break the session."""
        handler = curl_trace_config().on_request_start[0]

        asyncio.run(handler(None, SimpleNamespace(), SimpleNamespace(method="GET")))

        assert captured_logs == []
