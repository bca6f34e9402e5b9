"""Process-wide configuration for log-curl-request."""

import threading
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional, Set, FrozenSet, Callable, Dict, Any, List, Union

import yaml

from .exceptions import ConfigurationError
from .options import CurlOptions
from ..utils.helpers import normalize_header_names


LoggerFunction = Callable[[str], None]

DEFAULT_SENSITIVE_HEADERS = frozenset({
    "authorization",
    "api-key",
    "apikey",
    "x-api-key",
    "token",
    "secret",
    "password",
    "access-token",
    "refresh-token",
    "session-token",
})


@dataclass(frozen=True)
class ConfigSnapshot:
    """Immutable view of the configuration taken once per command."""

    show_debug_output: bool
    mask_sensitive: bool
    format_output: bool
    curl_options: Optional[CurlOptions]
    sensitive_headers: FrozenSet[str]
    logger_function: Optional[LoggerFunction]


@dataclass
class LogCurlConfig:
    """Defaults applied to every generated command.

    Fields may be assigned directly by a single writer. Use ``update`` when
    several threads may change the configuration while commands are built;
    ``create`` reads it through ``snapshot`` exactly once per call.
    """

    # Print each generated command
    default_show_debug_output: bool = True

    # Replace sensitive header values with a placeholder
    default_mask_sensitive: bool = False

    # Split the command over several lines
    default_format_output: bool = False

    # Merged into every call's options
    default_curl_options: Optional[CurlOptions] = None

    # Compared case-insensitively
    sensitive_headers: Set[str] = field(
        default_factory=lambda: set(DEFAULT_SENSITIVE_HEADERS)
    )

    # Replaces the console output when set
    logger_function: Optional[LoggerFunction] = None

    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    @classmethod
    def instance(cls) -> "LogCurlConfig":
        """Return the process-wide configuration."""
        return config

    def reset(self) -> None:
        """Restore built-in defaults, including dropping the custom logger."""
        with self._lock:
            self.default_show_debug_output = True
            self.default_mask_sensitive = False
            self.default_format_output = False
            self.default_curl_options = None
            self.sensitive_headers = set(DEFAULT_SENSITIVE_HEADERS)
            self.logger_function = None

    def update(self, **changes: Any) -> None:
        """Assign several fields atomically."""
        known = {f.name for f in fields(self) if f.init}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise ConfigurationError([f"Unknown setting: {name}" for name in unknown])

        with self._lock:
            for name, value in changes.items():
                setattr(self, name, value)

    def snapshot(self) -> ConfigSnapshot:
        with self._lock:
            return ConfigSnapshot(
                show_debug_output=self.default_show_debug_output,
                mask_sensitive=self.default_mask_sensitive,
                format_output=self.default_format_output,
                curl_options=self.default_curl_options,
                sensitive_headers=normalize_header_names(self.sensitive_headers),
                logger_function=self.logger_function,
            )

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        for name in ("default_show_debug_output", "default_mask_sensitive", "default_format_output"):
            if not isinstance(getattr(self, name), bool):
                errors.append(f"{name} must be a boolean")

        options = self.default_curl_options
        if options is not None:
            if not isinstance(options, CurlOptions):
                errors.append("default_curl_options must be CurlOptions")
            elif options.max_time is not None and options.max_time <= 0:
                errors.append("max_time must be positive")

        if not all(isinstance(name, str) and name for name in self.sensitive_headers):
            errors.append("sensitive_headers must contain non-empty strings")

        if self.logger_function is not None and not callable(self.logger_function):
            errors.append("logger_function must be callable")

        return errors


# Global configuration instance
config = LogCurlConfig()


# ============================================================================
# File Loading
# ============================================================================


_FILE_KEYS = {
    "show_debug_output": "default_show_debug_output",
    "mask_sensitive": "default_mask_sensitive",
    "format_output": "default_format_output",
    "sensitive_headers": "sensitive_headers",
    "curl_options": "default_curl_options",
}

_OPTION_KEYS = {"insecure", "compressed", "verbose", "location", "max_time", "custom_options"}


def parse_curl_options(raw: Any, errors: List[str]) -> Optional[CurlOptions]:
    """Build ``CurlOptions`` from a plain mapping, collecting problems in ``errors``."""
    if raw is None:
        return None
    if not isinstance(raw, dict):
        errors.append("curl_options must be a mapping")
        return None

    unknown = sorted(set(raw) - _OPTION_KEYS)
    errors.extend(f"Unknown curl option: {key}" for key in unknown)

    for key in ("insecure", "compressed", "verbose", "location"):
        if key in raw and not isinstance(raw[key], bool):
            errors.append(f"curl_options.{key} must be a boolean")

    max_time = raw.get("max_time")
    if max_time is not None and (isinstance(max_time, bool) or not isinstance(max_time, int)):
        errors.append("curl_options.max_time must be an integer")

    custom = raw.get("custom_options", [])
    if not isinstance(custom, list) or not all(isinstance(o, str) for o in custom):
        errors.append("curl_options.custom_options must be a list of strings")

    if errors:
        return None

    return CurlOptions(
        insecure=raw.get("insecure", False),
        compressed=raw.get("compressed", False),
        verbose=raw.get("verbose", False),
        location=raw.get("location", False),
        max_time=max_time,
        custom_options=custom,
    )


def config_from_dict(data: Dict[str, Any]) -> LogCurlConfig:
    """Create a configuration from the mapping found in a config file."""
    if not isinstance(data, dict):
        raise ConfigurationError(["Configuration file must contain a mapping"])

    errors = [f"Unknown setting: {key}" for key in sorted(set(data) - set(_FILE_KEYS))]
    values: Dict[str, Any] = {}

    for key, attr in _FILE_KEYS.items():
        if key not in data:
            continue
        if key == "curl_options":
            values[attr] = parse_curl_options(data[key], errors)
        elif key == "sensitive_headers":
            headers = data[key]
            if not isinstance(headers, list):
                errors.append("sensitive_headers must be a list")
            else:
                values[attr] = set(headers)
        else:
            values[attr] = data[key]

    if errors:
        raise ConfigurationError(errors)

    loaded = LogCurlConfig(**values)
    errors = loaded.validate()
    if errors:
        raise ConfigurationError(errors)
    return loaded


def load_config(path: Union[str, Path]) -> LogCurlConfig:
    """Load a configuration from a YAML (or JSON) file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError([f"Cannot read {path}: {e}"]) from e
    except yaml.YAMLError as e:
        raise ConfigurationError([f"Invalid YAML in {path}: {e}"]) from e

    return config_from_dict(data or {})


def apply_config(path: Union[str, Path]) -> LogCurlConfig:
    """Load a configuration file into the global configuration."""
    loaded = load_config(path)
    config.update(
        default_show_debug_output=loaded.default_show_debug_output,
        default_mask_sensitive=loaded.default_mask_sensitive,
        default_format_output=loaded.default_format_output,
        default_curl_options=loaded.default_curl_options,
        sensitive_headers=set(loaded.sensitive_headers),
    )
    return config
