import os
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Mapping, Union

from .exceptions import InvalidArgumentError
from .options import CurlOptions


@dataclass(frozen=True)
class StructuredBody:
    """Body sent as JSON."""

    data: Mapping[str, Any]


@dataclass(frozen=True)
class RawBody:
    """Body sent verbatim."""

    text: str


RequestBody = Union[StructuredBody, RawBody]


@dataclass(frozen=True)
class FileField:
    """Multipart field whose content is read from a local file."""

    path: str

    def __post_init__(self):
        object.__setattr__(self, "path", os.fspath(self.path))


def coerce_body(data: Any) -> Optional[RequestBody]:
    """Turn a caller-supplied body into one of the two body variants."""
    if data is None:
        return None
    if isinstance(data, (StructuredBody, RawBody)):
        return data
    if isinstance(data, Mapping):
        return StructuredBody(data)
    if isinstance(data, str):
        return RawBody(data)

    raise InvalidArgumentError("data", "Data must be either a Map or a String")


def coerce_form_value(value: Any) -> Any:
    """Path objects in form data are treated as file uploads."""
    if isinstance(value, os.PathLike):
        return FileField(value)
    return value


@dataclass
class CurlRequest:
    """Everything needed to render one cURL command."""

    method: str
    url: str
    parameters: Dict[str, Any] = field(default_factory=dict)
    data: Optional[RequestBody] = None
    headers: Dict[str, Any] = field(default_factory=dict)
    cookies: Dict[str, Any] = field(default_factory=dict)
    form_data: Dict[str, Any] = field(default_factory=dict)
    curl_options: Optional[CurlOptions] = None

    @classmethod
    def from_fields(
        cls,
        method: str,
        url: str,
        parameters: Optional[Mapping[str, Any]] = None,
        data: Any = None,
        headers: Optional[Mapping[str, Any]] = None,
        cookies: Optional[Mapping[str, Any]] = None,
        form_data: Optional[Mapping[str, Any]] = None,
        curl_options: Optional[CurlOptions] = None,
    ) -> "CurlRequest":
        return cls(
            method=method,
            url=url,
            parameters=dict(parameters or {}),
            data=coerce_body(data),
            headers=dict(headers or {}),
            cookies=dict(cookies or {}),
            form_data={k: coerce_form_value(v) for k, v in (form_data or {}).items()},
            curl_options=curl_options,
        )
