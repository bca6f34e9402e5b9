"""httpx integration.

Attach the hook to a client to print a command for every outgoing request::

    client = httpx.Client(event_hooks={"request": [curl_event_hook()]})
"""

from typing import Optional, Any, Callable, Awaitable

import httpx

from ..core.exceptions import AdapterExtractionError
from ..core.options import CurlOptions
from .base import ExtractedRequest, ERROR_PREFIX, build_from_extracted, decode_body, logger


# Set by httpx itself; curl computes them again
EXCLUDED_HEADERS = {"host", "content-length", "transfer-encoding"}

SOURCE = "httpx request"


def extract_httpx_request(request: httpx.Request) -> ExtractedRequest:
    extracted = ExtractedRequest(method=request.method.upper(), url=str(request.url))

    encoding = request.headers.encoding
    extracted.headers = {
        key.decode(encoding): value.decode(encoding)
        for key, value in request.headers.raw
        if key.decode(encoding).lower() not in EXCLUDED_HEADERS
    }

    try:
        extracted.data = decode_body(request.content)
    except httpx.RequestNotRead:
        extracted.warn(AdapterExtractionError("content", "streaming body has not been read"))

    return extracted


def from_httpx_request(
    request: Optional[httpx.Request],
    show_debug_output: Optional[bool] = None,
    mask_sensitive: Optional[bool] = None,
    format_output: Optional[bool] = None,
    curl_options: Optional[CurlOptions] = None,
) -> str:
    """Create a cURL command from an ``httpx.Request``.

    The query string is taken from the request URL as is.
    """
    if request is None:
        return ""

    try:
        extracted = extract_httpx_request(request)
    except Exception as e:
        logger.warning("curl_generation_failed", source=SOURCE, error=str(e))
        return f"{ERROR_PREFIX} {SOURCE}: {e}"

    return build_from_extracted(
        extracted,
        SOURCE,
        show_debug_output=show_debug_output,
        mask_sensitive=mask_sensitive,
        format_output=format_output,
        curl_options=curl_options,
    )


def curl_event_hook(**kwargs: Any) -> Callable[[httpx.Request], None]:
    """Request hook for ``httpx.Client``.

    Keyword arguments are passed on to ``from_httpx_request``.
    """
    def hook(request: httpx.Request) -> None:
        from_httpx_request(request, **kwargs)

    return hook


def async_curl_event_hook(**kwargs: Any) -> Callable[[httpx.Request], Awaitable[None]]:
    """Request hook for ``httpx.AsyncClient``."""
    async def hook(request: httpx.Request) -> None:
        from_httpx_request(request, **kwargs)

    return hook
