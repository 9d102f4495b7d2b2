"""Time sources.

High resolution timestamps come from ``time.perf_counter``; coarse ones are
whole seconds since the epoch. Whether a sub-second source exists is probed
once per process and cached.
"""

from __future__ import annotations

import time
from typing import Optional, Union

Timestamp = Union[float, int]

_HIRES: Optional[bool] = None


def _probe_hires() -> bool:
    try:
        info = time.get_clock_info("perf_counter")
    except (ValueError, OSError):
        return False
    return info.resolution < 1.0


def hires_available() -> bool:
    """Return True if a sub-second clock source is usable (cached)."""

    global _HIRES
    if _HIRES is None:
        _HIRES = _probe_hires()
    return _HIRES


def clear_hires_cache() -> None:
    """Forget the cached probe result (used for tests)."""

    global _HIRES
    _HIRES = None


def now(hires: bool) -> Timestamp:
    """Return the current time from the requested source."""

    if hires:
        return time.perf_counter()
    return int(time.time())


def interval(start: Timestamp, end: Timestamp, hires: bool) -> Timestamp:
    """Seconds between two timestamps of the same source."""

    if hires:
        return float(end - start)
    return int(end) - int(start)
