"""Pytest configuration and fixtures for log-curl-request tests."""

import pytest
from typing import Generator, List

from log_curl_request.core.config import LogCurlConfig, config
from log_curl_request.core.options import CurlOptions


@pytest.fixture(autouse=True)
def reset_config() -> Generator[LogCurlConfig, None, None]:
    """Start and finish every test with the built-in defaults."""
    config.reset()
    yield config
    config.reset()


@pytest.fixture
def captured_logs() -> List[str]:
    """Collect everything sent to the logging sink."""
    messages: List[str] = []
    config.logger_function = messages.append
    return messages


@pytest.fixture
def quiet_config() -> LogCurlConfig:
    """Global configuration with debug output disabled."""
    config.default_show_debug_output = False
    return config


@pytest.fixture
def full_options() -> CurlOptions:
    """Options with every flag set."""
    return CurlOptions(
        insecure=True,
        compressed=True,
        verbose=True,
        location=True,
        max_time=30,
        custom_options=["--http2"],
    )
