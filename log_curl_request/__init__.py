"""log-curl-request: turn HTTP requests into reproducible cURL commands.

Generates shell-safe cURL commands from request fields or from the request
objects of common HTTP clients, for debugging and sharing API calls.
"""

__version__ = "1.0.0"

from log_curl_request.core.builder import create
from log_curl_request.core.config import LogCurlConfig, config
from log_curl_request.core.exceptions import (
    LogCurlException,
    InvalidArgumentError,
    ConfigurationError,
)
from log_curl_request.core.models import FileField
from log_curl_request.core.options import CurlOptions
from log_curl_request.adapters import (
    from_request_like,
    from_options_like,
    from_http_request,
    from_httpx_request,
    curl_event_hook,
    async_curl_event_hook,
    curl_trace_config,
)

__all__ = [
    "__version__",
    "create",
    "LogCurlConfig",
    "config",
    "CurlOptions",
    "FileField",
    "LogCurlException",
    "InvalidArgumentError",
    "ConfigurationError",
    "from_request_like",
    "from_options_like",
    "from_http_request",
    "from_httpx_request",
    "curl_event_hook",
    "async_curl_event_hook",
    "curl_trace_config",
]
