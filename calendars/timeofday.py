"""Time-of-day codec shared by every calendar.

A time of day is stored on the Julian Day axis as the fraction of a civil day
elapsed since local midnight.
"""

from __future__ import annotations

import math
from typing import Tuple

from .errors import DateRangeError

__all__ = ["SECONDS_PER_DAY", "encode", "decode", "validate_time"]

SECONDS_PER_DAY = 24 * 60 * 60
_LAST_SECOND = SECONDS_PER_DAY - 1


def validate_time(hour: int, minute: int, second: float) -> None:
    """Raise :class:`DateRangeError` unless the components form a valid time."""

    if not 0 <= hour <= 23:
        raise DateRangeError(f"hour must be within 0..23, got {hour}")
    if not 0 <= minute <= 59:
        raise DateRangeError(f"minute must be within 0..59, got {minute}")
    if not 0 <= second < 60:
        raise DateRangeError(f"second must be within [0, 60), got {second}")


def encode(hour: int = 0, minute: int = 0, second: float = 0.0) -> float:
    """Return the fraction of a day represented by ``hour:minute:second``."""

    return (hour * 3600 + minute * 60 + second) / SECONDS_PER_DAY


def decode(fraction: float) -> Tuple[int, int, int]:
    """Split a day fraction into ``(hour, minute, second)``.

    The fraction is rounded half up to a whole second and clamped to
    ``[0, 86399]`` so that a rounding carry never produces ``24:00:00``.
    """

    total_seconds = math.floor(fraction * SECONDS_PER_DAY + 0.5)
    total_seconds = min(max(total_seconds, 0), _LAST_SECOND)
    hour, remainder = divmod(total_seconds, 3600)
    minute, second = divmod(remainder, 60)
    return hour, minute, second
