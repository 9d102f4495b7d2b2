"""Small, simple stopwatch object."""

from importlib import metadata

from simple_timer.config import TimerOptions, normalize_options
from simple_timer.errors import (
    DeprecatedOptionUsed,
    NotStarted,
    TimerError,
    UnknownFormat,
)
from simple_timer.timer import (
    Timer,
    default_format_spec,
    format_hms,
    register_renderer,
    separate_hms,
    unregister_renderer,
)
from simple_timer.utils.clock import hires_available


def get_version() -> str:
    """Return package version if available, else placeholder."""
    try:
        return metadata.version("simple-timer")
    except metadata.PackageNotFoundError:
        return "0.0.0"


__all__ = [
    "DeprecatedOptionUsed",
    "NotStarted",
    "Timer",
    "TimerError",
    "TimerOptions",
    "UnknownFormat",
    "default_format_spec",
    "format_hms",
    "get_version",
    "hires_available",
    "normalize_options",
    "register_renderer",
    "separate_hms",
    "unregister_renderer",
]
