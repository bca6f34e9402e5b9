"""Adapters turning HTTP client request objects into cURL commands."""

from .base import (
    ERROR_PREFIX,
    ExtractedRequest,
    extract_options_shape,
    extract_request_shape,
    from_options_like,
    from_http_request,
    from_request_like,
)
from .httpx_hooks import (
    from_httpx_request,
    curl_event_hook,
    async_curl_event_hook,
)
from .aiohttp_trace import curl_trace_config

__all__ = [
    # Generic shapes
    "ERROR_PREFIX",
    "ExtractedRequest",
    "extract_options_shape",
    "extract_request_shape",
    "from_options_like",
    "from_http_request",
    "from_request_like",
    # httpx
    "from_httpx_request",
    "curl_event_hook",
    "async_curl_event_hook",
    # aiohttp
    "curl_trace_config",
]
