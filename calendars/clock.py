"""Wall-clock readings for "today" style conversions."""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime
from typing import Optional, Tuple

from .errors import ClockError

LOGGER = logging.getLogger(__name__)

FIXED_NOW_ENV = "CALENDAR_FIXED_NOW"

ClockTuple = Tuple[int, int, int, int, int, float]


def _reading(moment: datetime) -> ClockTuple:
    second = moment.second + moment.microsecond / 1_000_000
    return moment.year, moment.month, moment.day, moment.hour, moment.minute, second


def _pinned_moment(value: str) -> datetime:
    try:
        moment = datetime.fromisoformat(value)
    except ValueError as exc:
        raise ClockError(f"{FIXED_NOW_ENV} is not an ISO-8601 timestamp: {value!r}") from exc
    LOGGER.info(json.dumps({"event": "clock_pinned", "value": moment.isoformat()}))
    return moment


def current_local_time(now: Optional[datetime] = None) -> ClockTuple:
    """Return the local civil time as ``(year, month, day, hour, minute, second)``.

    Parameters
    ----------
    now:
        Explicit moment to read instead of the system clock.  Aware values
        are converted to local time first.

    Returns
    -------
    tuple
        Gregorian civil fields of the reading.

    Raises
    ------
    ClockError
        If ``CALENDAR_FIXED_NOW`` is set but cannot be parsed.
    """

    if now is None:
        override = os.environ.get(FIXED_NOW_ENV)
        if override:
            # Pinned values are read literally, offset or not.
            return _reading(_pinned_moment(override.strip()))
        now = datetime.now()
    elif now.tzinfo is not None:
        now = now.astimezone()
    return _reading(now)
