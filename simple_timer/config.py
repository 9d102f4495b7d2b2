"""Timer construction options."""

from __future__ import annotations

import warnings
from dataclasses import asdict, dataclass, fields
from typing import Any, Callable, Dict, Mapping, Optional, Union

from simple_timer.errors import DeprecatedOptionUsed
from simple_timer.utils.logging import get_logger

logger = get_logger("config")

# Renderer: built-in tag, registered name, or a callable taking the timer.
Renderer = Union[str, Callable[[Any], str]]
WarningSink = Callable[[str], None]


@dataclass
class TimerOptions:
    """Options accepted by ``Timer``."""

    start: bool = True
    hires: Optional[bool] = None
    hms: Optional[str] = None
    string: Renderer = "short"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the options to a plain dict."""
        return asdict(self)


def _default_sink(message: str) -> None:
    logger.warning(message)
    warnings.warn(message, DeprecatedOptionUsed, stacklevel=4)


def normalize_options(
    raw: Union[Mapping[str, Any], TimerOptions, None] = None,
    warn: Optional[WarningSink] = None,
    **overrides: Any,
) -> TimerOptions:
    """Validate raw options, remapping the legacy ``format`` key onto ``hms``."""

    if isinstance(raw, TimerOptions):
        merged: Dict[str, Any] = raw.to_dict()
    else:
        merged = dict(raw or {})
    merged.update(overrides)

    if "format" in merged:
        legacy = merged.pop("format")
        (warn or _default_sink)(
            "Timer option 'format' is deprecated; use 'hms' instead."
        )
        if merged.get("hms") is None:
            merged["hms"] = legacy

    known = {f.name for f in fields(TimerOptions)}
    unknown = sorted(set(merged) - known)
    if unknown:
        raise ValueError(f"Unknown timer option(s): {', '.join(unknown)}.")
    return TimerOptions(**merged)
