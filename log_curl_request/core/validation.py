"""Structural checks run before a command is rendered."""

from urllib.parse import urlparse

from .exceptions import InvalidArgumentError


def validate_request(method: str, url: str) -> None:
    """Reject requests that cannot produce a meaningful command.

    Raises:
        InvalidArgumentError: empty method, empty URL, or a URL without a scheme
    """
    if not method:
        raise InvalidArgumentError("method", "Method cannot be empty")

    if not url:
        raise InvalidArgumentError("url", "URL cannot be empty")

    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise InvalidArgumentError("url", f"Invalid URL format: {url}") from e

    if not parsed.scheme:
        raise InvalidArgumentError("url", f"Invalid URL format: {url}")
