"""cURL command rendering.

``create`` is the entry point: it validates the request, resolves unset
options against the global configuration, renders the command and hands it
to the logging sink.
"""

import json
from typing import Optional, List, Any, Mapping, Iterable

from .config import ConfigSnapshot, LogCurlConfig, config as global_config
from .exceptions import InvalidArgumentError
from .models import CurlRequest, FileField, StructuredBody, RawBody
from .options import CurlOptions, merge_options
from .validation import validate_request
from ..utils.helpers import (
    escape_shell,
    mask_value,
    normalize_header_names,
    stringify,
    encode_query,
)
from ..utils.logging import get_logger, console_sink, format_debug_message


logger = get_logger(__name__)

COMPACT_JOINER = " "
FORMATTED_JOINER = " \\\n  "


class CommandBuilder:
    """Renders a ``CurlRequest`` into a single command string.

    Tokens are always emitted in the same order: method, transport flags,
    headers, cookies, body (form fields or data) and finally the URL.
    """

    def __init__(
        self,
        mask_sensitive: bool = False,
        format_output: bool = False,
        sensitive_headers: Optional[Iterable[str]] = None,
    ):
        self.mask_sensitive = mask_sensitive
        self.format_output = format_output
        self.sensitive_headers = normalize_header_names(sensitive_headers or ())

    def build(self, request: CurlRequest) -> str:
        tokens = [f"curl -X {request.method}"]

        if request.curl_options is not None:
            tokens.extend(request.curl_options.to_args())

        tokens.extend(self._header_tokens(request.headers))

        if request.cookies:
            tokens.append(self._cookie_token(request.cookies))

        if request.form_data:
            tokens.extend(self._form_tokens(request.form_data))
        elif request.data is not None:
            tokens.append(self._data_token(request.data))

        tokens.append(self._url_token(request.url, request.parameters))

        joiner = FORMATTED_JOINER if self.format_output else COMPACT_JOINER
        return joiner.join(tokens)

    def _header_tokens(self, headers: Mapping[str, Any]) -> List[str]:
        tokens = []
        for name, value in headers.items():
            value = mask_value(name, stringify(value), self.mask_sensitive, self.sensitive_headers)
            tokens.append(f'-H "{name}: {escape_shell(value)}"')
        return tokens

    def _cookie_token(self, cookies: Mapping[str, Any]) -> str:
        pairs = "; ".join(
            f"{escape_shell(str(name))}={escape_shell(stringify(value))}"
            for name, value in cookies.items()
        )
        return f'-b "{pairs}"'

    def _form_tokens(self, form_data: Mapping[str, Any]) -> List[str]:
        tokens = []
        for name, value in form_data.items():
            name = escape_shell(str(name))
            if isinstance(value, FileField):
                tokens.append(f'-F "{name}=@{escape_shell(value.path)}"')
            else:
                tokens.append(f'-F "{name}={escape_shell(stringify(value))}"')
        return tokens

    def _data_token(self, body: Any) -> str:
        if isinstance(body, StructuredBody):
            try:
                payload = json.dumps(
                    body.data, separators=(",", ":"), ensure_ascii=False, allow_nan=False
                )
            except (TypeError, ValueError) as e:
                raise InvalidArgumentError("data", f"Failed to encode JSON data: {e}") from e
            return f"--data '{payload}'"

        if isinstance(body, RawBody):
            return f"--data '{body.text}'"

        raise InvalidArgumentError("data", "Data must be either a Map or a String")

    def _url_token(self, url: str, parameters: Mapping[str, Any]) -> str:
        if not parameters:
            return f'"{url}"'

        try:
            query = encode_query(parameters)
        except Exception as e:
            raise InvalidArgumentError(
                "parameters", f"Failed to encode query parameters: {e}"
            ) from e
        return f'"{url}?{query}"'


def emit_debug_output(command: str, settings: ConfigSnapshot) -> None:
    """Send a command to the configured sink.

    A failing custom sink never affects the generated command.
    """
    message = format_debug_message(command)
    sink = settings.logger_function or console_sink

    try:
        sink(message)
    except Exception as e:
        logger.warning("logging_sink_failed", error=str(e), error_type=type(e).__name__)


def create(
    method: str,
    url: str,
    *,
    parameters: Optional[Mapping[str, Any]] = None,
    data: Any = None,
    headers: Optional[Mapping[str, Any]] = None,
    cookies: Optional[Mapping[str, Any]] = None,
    form_data: Optional[Mapping[str, Any]] = None,
    curl_options: Optional[CurlOptions] = None,
    mask_sensitive: Optional[bool] = None,
    format_output: Optional[bool] = None,
    show_debug_output: Optional[bool] = None,
    settings: Optional[LogCurlConfig] = None,
) -> str:
    """Generate a cURL command for an HTTP request.

    Args:
        method: HTTP method, emitted as given (e.g. ``GET``)
        url: Absolute URL including the scheme
        parameters: Query parameters appended to the URL
        data: Body, a mapping (sent as JSON) or a string (sent verbatim)
        headers: Headers in the order they should appear
        cookies: Cookies sent with ``-b``
        form_data: Multipart fields; ``FileField`` or path values upload files.
            When present the body is not emitted.
        curl_options: Transport flags merged with the configured defaults
        mask_sensitive: Hide values of sensitive headers
        format_output: Use line continuations between tokens
        show_debug_output: Hand the command to the logging sink
        settings: Configuration to read defaults from, the global one if omitted

    Returns:
        The command string

    Raises:
        InvalidArgumentError: for an empty method or URL, a URL without a
            scheme, an unsupported body type, or data that cannot be encoded
    """
    validate_request(method, url)

    snapshot = (settings or global_config).snapshot()

    request = CurlRequest.from_fields(
        method,
        url,
        parameters=parameters,
        data=data,
        headers=headers,
        cookies=cookies,
        form_data=form_data,
        curl_options=merge_options(curl_options, snapshot.curl_options),
    )

    builder = CommandBuilder(
        mask_sensitive=_resolve(mask_sensitive, snapshot.mask_sensitive),
        format_output=_resolve(format_output, snapshot.format_output),
        sensitive_headers=snapshot.sensitive_headers,
    )
    command = builder.build(request)

    if _resolve(show_debug_output, snapshot.show_debug_output):
        emit_debug_output(command, snapshot)

    return command


def _resolve(value: Optional[bool], default: bool) -> bool:
    return default if value is None else value
