"""Transport-level cURL options and their merge rules."""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple, List, Any


@dataclass(frozen=True)
class CurlOptions:
    """cURL switches that are independent of the request itself.

    Instances are immutable; merging and ``copy_with`` always build a new
    object.
    """

    insecure: bool = False  # --insecure, skip TLS verification
    compressed: bool = False  # --compressed
    verbose: bool = False  # --verbose
    location: bool = False  # --location, follow redirects
    max_time: Optional[int] = None  # --max-time <seconds>
    custom_options: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Lists are accepted for convenience but stored as a tuple
        if not isinstance(self.custom_options, tuple):
            object.__setattr__(self, "custom_options", tuple(self.custom_options))

    def copy_with(self, **changes: Any) -> "CurlOptions":
        """Create a copy with the given fields replaced.

        Fields passed as ``None`` keep the current value.
        """
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def to_args(self) -> List[str]:
        """Return the flag tokens in emission order."""
        args = []

        if self.insecure:
            args.append("--insecure")
        if self.compressed:
            args.append("--compressed")
        if self.verbose:
            args.append("--verbose")
        if self.location:
            args.append("--location")
        if self.max_time is not None:
            args.append(f"--max-time {self.max_time}")

        # Operator-supplied flags go out verbatim
        args.extend(self.custom_options)
        return args


def merge_options(
    options: Optional[CurlOptions],
    defaults: Optional[CurlOptions],
) -> Optional[CurlOptions]:
    """Combine per-call options with the configured defaults.

    Booleans are OR-ed, ``max_time`` prefers the per-call value and custom
    options are the defaults followed by the per-call ones. When only one side
    is present it is returned as is.
    """
    if options is None:
        return defaults
    if defaults is None:
        return options

    return CurlOptions(
        insecure=options.insecure or defaults.insecure,
        compressed=options.compressed or defaults.compressed,
        verbose=options.verbose or defaults.verbose,
        location=options.location or defaults.location,
        max_time=options.max_time if options.max_time is not None else defaults.max_time,
        custom_options=defaults.custom_options + options.custom_options,
    )
