"""Exceptions and warnings raised by timers."""


class TimerError(Exception):
    """Base class for errors in the use of a Timer."""


class NotStarted(TimerError, RuntimeError):
    """Elapsed time was requested from a timer that never started."""


class UnknownFormat(TimerError, ValueError):
    """A string mode is neither built in, registered, nor callable."""


class DeprecatedOptionUsed(FutureWarning):
    """A legacy constructor option was supplied and remapped."""
