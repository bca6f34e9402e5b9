"""Custom exceptions for log-curl-request."""

from typing import Optional, Any, Dict, List


class LogCurlException(Exception):
    """Base exception for all log-curl-request errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ============================================================================
# Argument Errors
# ============================================================================


class InvalidArgumentError(LogCurlException, ValueError):
    """A request field cannot be turned into a cURL command."""

    def __init__(self, argument: str, message: str):
        super().__init__(message, {"argument": argument})
        self.argument = argument

    def __str__(self) -> str:
        return self.message


# ============================================================================
# Adapter Errors
# ============================================================================


class AdapterExtractionError(LogCurlException):
    """A field could not be read from a foreign request object.

    Never escapes an adapter: it is converted into a warning or an
    error-prefixed result string.
    """

    def __init__(self, field: str, reason: str):
        super().__init__(
            f"Cannot read '{field}': {reason}",
            {"field": field, "reason": reason},
        )
        self.field = field
        self.reason = reason


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(LogCurlException):
    """Invalid or missing configuration."""

    def __init__(self, errors: List[str]):
        super().__init__(
            f"Configuration invalid: {'; '.join(errors)}", {"errors": errors}
        )
        self.errors = errors
