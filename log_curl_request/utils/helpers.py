"""Helper utilities for log-curl-request.

String escaping, header masking and query-string encoding used while
rendering cURL commands.
"""

from typing import Any, Mapping, Iterable, FrozenSet
from urllib.parse import urlencode


MASK = "********"


# ============================================================================
# Shell Escaping
# ============================================================================


# Order matters: backslashes first, otherwise the escapes added for the
# other characters would be doubled.
_SHELL_ESCAPES = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("$", "\\$"),
    ("`", "\\`"),
)


def escape_shell(value: str) -> str:
    """Escape a value for use inside a double-quoted shell argument.

    Args:
        value: Raw string

    Returns:
        String in which backslash, double quote, ``$`` and backtick
        can no longer end the argument or trigger expansion
    """
    for char, replacement in _SHELL_ESCAPES:
        value = value.replace(char, replacement)
    return value


# ============================================================================
# Masking
# ============================================================================


def normalize_header_names(names: Iterable[str]) -> FrozenSet[str]:
    """Lower-case header names for case-insensitive lookups."""
    return frozenset(name.lower() for name in names)


def should_mask(header_name: str, enabled: bool, sensitive_headers: FrozenSet[str]) -> bool:
    """Check whether a header value must be hidden.

    ``sensitive_headers`` holds lower-cased names, see ``normalize_header_names``.
    """
    if not enabled:
        return False
    return header_name.lower() in sensitive_headers


def mask_value(header_name: str, value: str, enabled: bool, sensitive_headers: FrozenSet[str]) -> str:
    """Return the placeholder for sensitive headers, else the value."""
    if should_mask(header_name, enabled, sensitive_headers):
        return MASK
    return value


# ============================================================================
# Value Rendering
# ============================================================================


def stringify(value: Any) -> str:
    """Render a scalar the way it would appear in JSON."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(parameters: Mapping[str, Any]) -> str:
    """Percent-encode parameters as ``application/x-www-form-urlencoded``."""
    return urlencode([(str(key), stringify(value)) for key, value in parameters.items()])
