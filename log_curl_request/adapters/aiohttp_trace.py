"""aiohttp integration.

    session = aiohttp.ClientSession(trace_configs=[curl_trace_config()])

Only the method, URL and headers are known when a request starts, so the
body is never part of these commands.
"""

from typing import Optional, Any

import aiohttp

from ..core.exceptions import AdapterExtractionError
from ..core.options import CurlOptions
from .base import ExtractedRequest, build_from_extracted, read_field, read_mapping


SOURCE = "aiohttp request"


def extract_trace_params(params: Any) -> ExtractedRequest:
    extracted = ExtractedRequest()

    try:
        extracted.method = str(read_field(params, "method")).upper()
    except AdapterExtractionError as e:
        extracted.warn(e)

    try:
        extracted.url = str(read_field(params, "url"))
    except AdapterExtractionError as e:
        extracted.warn(e)

    try:
        extracted.headers = read_mapping(params, "headers")
    except AdapterExtractionError as e:
        extracted.warn(e)

    return extracted


def curl_trace_config(
    show_debug_output: Optional[bool] = None,
    mask_sensitive: Optional[bool] = None,
    format_output: Optional[bool] = None,
    curl_options: Optional[CurlOptions] = None,
) -> aiohttp.TraceConfig:
    """Create a trace config that logs a command when each request starts."""
    trace_config = aiohttp.TraceConfig()

    async def on_request_start(session, trace_config_ctx, params) -> None:
        if params is None:
            return
        build_from_extracted(
            extract_trace_params(params),
            SOURCE,
            show_debug_output=show_debug_output,
            mask_sensitive=mask_sensitive,
            format_output=format_output,
            curl_options=curl_options,
        )

    trace_config.on_request_start.append(on_request_start)
    return trace_config
