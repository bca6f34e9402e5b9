"""Best-effort extraction of request fields from foreign objects.

Two shapes are understood:

* "options" objects (``method``, ``uri`` or ``path``, ``headers``, ``data``,
  ``query_parameters``), as produced by client libraries that describe a
  request before it is sent
* "request" objects (``method``, ``url``, ``headers``, ``body`` or
  ``content``), as produced by most HTTP clients

Every field read may fail; such failures become warnings and the command is
built from whatever could be read.
"""

import json
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, Mapping, Callable

from ..core.builder import create
from ..core.exceptions import AdapterExtractionError
from ..core.options import CurlOptions
from ..utils.logging import get_logger


logger = get_logger(__name__)

ERROR_PREFIX = "Error creating cURL from"

_MISSING = object()

NOT_PRESENT = "not present"


@dataclass
class ExtractedRequest:
    """Fields read from a foreign request object."""

    method: str = "GET"
    url: str = ""
    headers: Dict[str, Any] = field(default_factory=dict)
    data: Any = None
    parameters: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    def warn(self, error: AdapterExtractionError) -> None:
        self.warnings.append(error.message)
        logger.warning("adapter_field_unavailable", field=error.field, reason=error.reason)


def read_field(source: Any, *names: str) -> Any:
    """Read the first available field among ``names``.

    Mappings are read by key, everything else by attribute.

    Raises:
        AdapterExtractionError: if reading raises or no field exists
    """
    for name in names:
        try:
            if isinstance(source, Mapping):
                value = source.get(name, _MISSING)
            else:
                value = getattr(source, name, _MISSING)
        except Exception as e:
            raise AdapterExtractionError(name, f"{type(e).__name__}: {e}") from e

        if value is not _MISSING and value is not None:
            return value

    raise AdapterExtractionError("/".join(names), NOT_PRESENT)


def read_mapping(source: Any, *names: str) -> Dict[str, Any]:
    value = read_field(source, *names)
    try:
        return {str(k): v for k, v in dict(value).items()}
    except Exception as e:
        raise AdapterExtractionError(
            "/".join(names), f"expected a mapping, got {type(value).__name__}"
        ) from e


def decode_body(body: Any) -> Any:
    """Prefer a structured body when the payload is a JSON object."""
    if isinstance(body, (bytes, bytearray)):
        body = bytes(body).decode("utf-8", errors="replace")

    if isinstance(body, str):
        if not body:
            return None
        try:
            decoded = json.loads(body)
        except ValueError:
            return body
        return decoded if isinstance(decoded, dict) else body

    return body


def warn_unless_absent(extracted: ExtractedRequest, error: AdapterExtractionError) -> None:
    """Optional fields may be missing, but a failed read is still reported."""
    if error.reason != NOT_PRESENT:
        extracted.warn(error)


def accept_body(extracted: ExtractedRequest, body: Any) -> None:
    """Keep bodies that can be rendered, warn about the rest."""
    if body is None or isinstance(body, (Mapping, str)):
        extracted.data = body
    else:
        extracted.warn(
            AdapterExtractionError("data", f"unsupported type {type(body).__name__}")
        )


def extract_options_shape(options: Any) -> ExtractedRequest:
    """Read an "options"-shaped object. Never raises."""
    extracted = ExtractedRequest()

    try:
        extracted.method = str(read_field(options, "method")).upper()
    except AdapterExtractionError as e:
        extracted.warn(e)

    try:
        extracted.url = str(read_field(options, "uri", "path"))
    except AdapterExtractionError as e:
        extracted.warn(e)

    try:
        extracted.headers = read_mapping(options, "headers")
    except AdapterExtractionError as e:
        extracted.warn(e)

    try:
        accept_body(extracted, read_field(options, "data"))
    except AdapterExtractionError as e:
        warn_unless_absent(extracted, e)

    try:
        extracted.parameters = read_mapping(
            options, "query_parameters", "queryParameters", "params"
        )
    except AdapterExtractionError as e:
        warn_unless_absent(extracted, e)

    return extracted


def extract_request_shape(request: Any) -> ExtractedRequest:
    """Read a "request"-shaped object. Never raises."""
    extracted = ExtractedRequest()

    try:
        extracted.method = str(read_field(request, "method")).upper()
    except AdapterExtractionError as e:
        extracted.warn(e)

    try:
        extracted.url = str(read_field(request, "url"))
    except AdapterExtractionError as e:
        extracted.warn(e)

    try:
        extracted.headers = read_mapping(request, "headers")
    except AdapterExtractionError as e:
        extracted.warn(e)

    try:
        accept_body(extracted, decode_body(read_field(request, "body", "content")))
    except AdapterExtractionError as e:
        warn_unless_absent(extracted, e)

    return extracted


def is_options_shape(obj: Any) -> bool:
    names = ("uri", "path", "data", "query_parameters", "queryParameters")
    if isinstance(obj, Mapping):
        return any(name in obj for name in names) and "url" not in obj
    return any(hasattr(obj, name) for name in names) and not hasattr(obj, "url")


def build_from_extracted(
    extracted: ExtractedRequest,
    source: str,
    show_debug_output: Optional[bool] = None,
    mask_sensitive: Optional[bool] = None,
    format_output: Optional[bool] = None,
    curl_options: Optional[CurlOptions] = None,
) -> str:
    """Build a command from extracted fields, reporting failures as text."""
    try:
        return create(
            extracted.method,
            extracted.url,
            parameters=extracted.parameters,
            data=extracted.data,
            headers=extracted.headers,
            show_debug_output=show_debug_output,
            mask_sensitive=mask_sensitive,
            format_output=format_output,
            curl_options=curl_options,
        )
    except Exception as e:
        logger.warning("curl_generation_failed", source=source, error=str(e))
        return f"{ERROR_PREFIX} {source}: {e}"


def _convert(
    obj: Any,
    source: str,
    extractor: Callable[[Any], ExtractedRequest],
    **flags: Any,
) -> str:
    if obj is None:
        return ""
    try:
        extracted = extractor(obj)
    except Exception as e:
        logger.warning("curl_generation_failed", source=source, error=str(e))
        return f"{ERROR_PREFIX} {source}: {e}"
    return build_from_extracted(extracted, source, **flags)


def from_options_like(
    options: Any,
    show_debug_output: Optional[bool] = None,
    mask_sensitive: Optional[bool] = None,
    format_output: Optional[bool] = None,
    curl_options: Optional[CurlOptions] = None,
) -> str:
    """Create a cURL command from an "options"-shaped object.

    Returns an empty string for ``None`` and an error-prefixed string instead
    of raising.
    """
    return _convert(
        options,
        "request options",
        extract_options_shape,
        show_debug_output=show_debug_output,
        mask_sensitive=mask_sensitive,
        format_output=format_output,
        curl_options=curl_options,
    )


def from_http_request(
    request: Any,
    show_debug_output: Optional[bool] = None,
    mask_sensitive: Optional[bool] = None,
    format_output: Optional[bool] = None,
    curl_options: Optional[CurlOptions] = None,
) -> str:
    """Create a cURL command from a "request"-shaped object.

    A JSON object body is rendered as structured data, anything else verbatim.
    """
    return _convert(
        request,
        "HTTP request",
        extract_request_shape,
        show_debug_output=show_debug_output,
        mask_sensitive=mask_sensitive,
        format_output=format_output,
        curl_options=curl_options,
    )


def from_request_like(
    obj: Any,
    show_debug_output: Optional[bool] = None,
    mask_sensitive: Optional[bool] = None,
    format_output: Optional[bool] = None,
    curl_options: Optional[CurlOptions] = None,
) -> str:
    """Create a cURL command from any supported request object."""
    if obj is None:
        return ""

    try:
        options_shape = is_options_shape(obj)
    except Exception as e:
        return f"{ERROR_PREFIX} request: {e}"

    convert = from_options_like if options_shape else from_http_request
    return convert(
        obj,
        show_debug_output=show_debug_output,
        mask_sensitive=mask_sensitive,
        format_output=format_output,
        curl_options=curl_options,
    )
