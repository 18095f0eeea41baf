"""Small helpers shared by the status elements."""

from __future__ import annotations

import math
import time


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def format_secs(secs: int) -> str:
    """Format a number of seconds as ``MM:SS``."""
    minutes = secs / 60
    seconds = (minutes - math.floor(minutes)) * 60
    return f"{math.floor(minutes):02d}:{_round_half_away(seconds):02d}"


def get_basename(path: str) -> str:
    """Return the last component of ``path``, keeping its leading separator.

    Trailing separators are kept as well. A path without any separator
    before its last component is returned unchanged.
    """
    index = path.rstrip("/").rfind("/")
    if index < 0:
        return path
    return path[index:]


def sleep_ms(ms: int) -> None:
    """Sleep for ``ms`` milliseconds; negative durations are rejected."""
    if ms < 0:
        raise ValueError(f"cannot sleep for a negative duration: {ms} ms")
    time.sleep(ms / 1000)