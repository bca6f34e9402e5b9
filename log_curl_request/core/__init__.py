"""Core modules for log-curl-request."""

from .options import CurlOptions, merge_options
from .models import (
    CurlRequest,
    StructuredBody,
    RawBody,
    FileField,
    coerce_body,
)
from .config import (
    LogCurlConfig,
    ConfigSnapshot,
    config,
    load_config,
    apply_config,
    DEFAULT_SENSITIVE_HEADERS,
)
from .exceptions import (
    LogCurlException,
    InvalidArgumentError,
    AdapterExtractionError,
    ConfigurationError,
)
from .validation import validate_request
from .builder import CommandBuilder, create

__all__ = [
    # Options
    "CurlOptions",
    "merge_options",
    # Models
    "CurlRequest",
    "StructuredBody",
    "RawBody",
    "FileField",
    "coerce_body",
    # Config
    "LogCurlConfig",
    "ConfigSnapshot",
    "config",
    "load_config",
    "apply_config",
    "DEFAULT_SENSITIVE_HEADERS",
    # Exceptions
    "LogCurlException",
    "InvalidArgumentError",
    "AdapterExtractionError",
    "ConfigurationError",
    # Builder
    "validate_request",
    "CommandBuilder",
    "create",
]
