"""Small stopwatch object.

A ``Timer`` records a start timestamp and, optionally, a stop timestamp.
Elapsed time is measured against "now" while the timer runs. Durations can
be split into hours/minutes/seconds and rendered in a few string forms.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from simple_timer.config import Renderer, TimerOptions, WarningSink, normalize_options
from simple_timer.errors import NotStarted, UnknownFormat
from simple_timer.utils import clock
from simple_timer.utils.logging import get_logger

logger = get_logger("timer")

Number = Union[int, float]
HMS = Tuple[int, int, Number]

BUILTIN_MODES = ("short", "human", "full")
_RENDERERS: Dict[str, Callable[["Timer"], str]] = {}


def separate_hms(seconds: Number) -> HMS:
    """Split a number of seconds into (hours, minutes, seconds)."""

    hours = int(seconds // 3600)
    seconds -= hours * 3600
    minutes = int(seconds // 60)
    seconds -= minutes * 60
    return hours, minutes, seconds


def default_format_spec(fractional: Optional[bool] = None) -> str:
    """Return a printf-style template for (hours, minutes, seconds).

    Without an argument the template follows ``hires_available()``.
    """

    if fractional is None:
        fractional = clock.hires_available()
    # width 9 with 6 decimals leaves 2 digits before the point
    return "%02d:%02d:" + ("%09.6f" if fractional else "%02d")


def format_hms(*args: Number) -> str:
    """Format ``(h, m, s)`` or a total number of seconds as ``HH:MM:SS``."""

    if len(args) == 1:
        h, m, s = separate_hms(args[0])
    elif len(args) == 3:
        h, m, s = args
    else:
        raise TypeError(
            f"format_hms() takes 1 or 3 arguments ({len(args)} given)"
        )
    return default_format_spec(int(s) != s) % (h, m, s)


def _format_total(seconds: Number) -> str:
    if isinstance(seconds, float):
        return "%f" % seconds
    return str(seconds)


def _format_plain(seconds: Number) -> str:
    if isinstance(seconds, float):
        return ("%.6f" % seconds).rstrip("0").rstrip(".")
    return str(seconds)


def register_renderer(name: str, func: Callable[["Timer"], str]) -> None:
    """Make ``func`` available as a named ``Timer.string`` mode."""

    if name in BUILTIN_MODES:
        raise ValueError(f"Cannot replace built-in string mode '{name}'.")
    if not callable(func):
        raise TypeError(f"Renderer for '{name}' must be callable.")
    _RENDERERS[name] = func


def unregister_renderer(name: str) -> None:
    _RENDERERS.pop(name, None)


class Timer:
    """Stopwatch measuring wall-clock time between start and stop (or now)."""

    def __init__(
        self,
        options: Union[Mapping[str, Any], TimerOptions, None] = None,
        *,
        warn: Optional[WarningSink] = None,
        **kwargs: Any,
    ) -> None:
        opts = normalize_options(options, warn=warn, **kwargs)
        hires = clock.hires_available() if opts.hires is None else bool(opts.hires)
        self.hires: bool = hires and clock.hires_available()
        self.hms_format: str = opts.hms or default_format_spec(self.hires)
        self.string_mode: Renderer = opts.string
        self.started: Optional[clock.Timestamp] = None
        self.stopped: Optional[clock.Timestamp] = None
        if opts.start:
            self.start()

    def now(self) -> clock.Timestamp:
        """Current time from this timer's source."""
        return clock.now(self.hires)

    def start(self) -> None:
        """(Re)start the clock, discarding any previous stop."""

        self.stopped = None
        self.started = self.now()
        logger.debug("Timer %#x started", id(self))

    restart = start

    def stop(self) -> Number:
        """Stop the clock and return the elapsed seconds.

        Stopping an already stopped timer keeps the original stop time.
        """

        if self.stopped is None:
            self.stopped = self.now()
            logger.debug("Timer %#x stopped", id(self))
        return self.elapsed()

    def elapsed(self) -> Number:
        if self.started is None:
            raise NotStarted("Timer never started!")
        end = self.stopped if self.stopped is not None else self.now()
        return clock.interval(self.started, end, self.hires)

    to_seconds = elapsed

    def hms(self, format: Optional[str] = None, as_tuple: bool = False):
        """Elapsed time as ``(h, m, s)`` or rendered with a printf template."""

        h, m, s = separate_hms(self.elapsed())
        if as_tuple:
            return h, m, s
        return (format or self.hms_format) % (h, m, s)

    def string(self, mode: Optional[Renderer] = None) -> str:
        """Render the elapsed time using ``mode`` or the configured default."""

        mode = self.string_mode if mode is None else mode
        if callable(mode):
            return mode(self)
        if isinstance(mode, str) and mode in BUILTIN_MODES:
            # read the clock once so every part agrees on a running timer
            seconds = self.elapsed()
            h, m, s = separate_hms(seconds)
            if mode == "short":
                return f"{_format_total(seconds)}s ({self.hms_format % (h, m, s)})"
            human = f"{h} hours {m} minutes {_format_plain(s)} seconds"
            if mode == "human":
                return human
            return f"{_format_total(seconds)} seconds ({human})"
        if isinstance(mode, str) and mode in _RENDERERS:
            return _RENDERERS[mode](self)
        raise UnknownFormat(f"Unknown string mode '{mode}'.")

    def __str__(self) -> str:
        return self.string()

    def __float__(self) -> float:
        return float(self.elapsed())

    def __int__(self) -> int:
        return int(self.elapsed())

    def __repr__(self) -> str:
        if self.started is None:
            state = "not started"
        elif self.stopped is None:
            state = "running"
        else:
            state = "stopped"
        return f"Timer({state}, hires={self.hires})"

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: D401
        self.stop()


register_renderer("hms", lambda timer: timer.hms())
register_renderer("elapsed", lambda timer: _format_total(timer.elapsed()))
