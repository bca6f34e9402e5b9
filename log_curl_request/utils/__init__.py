"""Utility modules for log-curl-request."""

from .logging import (
    setup_logging,
    get_logger,
    console,
    console_sink,
    DEBUG_BANNER,
)
from .helpers import (
    MASK,
    escape_shell,
    normalize_header_names,
    should_mask,
    mask_value,
    stringify,
    encode_query,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "console",
    "console_sink",
    "DEBUG_BANNER",
    # Command rendering
    "MASK",
    "escape_shell",
    "normalize_header_names",
    "should_mask",
    "mask_value",
    "stringify",
    "encode_query",
]
