"""Exception hierarchy shared by the calendar conversion engine."""

from __future__ import annotations

__all__ = [
    "CalendarError",
    "DateRangeError",
    "DurationError",
    "SearchLimitError",
    "ClockError",
]


class CalendarError(Exception):
    """Base class for every error raised by :mod:`calendars`."""


class DateRangeError(CalendarError, ValueError):
    """Raised when a month, day or time component is outside its valid range."""


class DurationError(CalendarError, TypeError):
    """Raised when a duration cannot be applied to the given value.

    A :class:`~calendars.jd.Months` duration has no fixed day count, so adding
    it to a bare Julian Day is rejected.
    """


class SearchLimitError(CalendarError, RuntimeError):
    """Raised when the Hebrew reverse search exceeds its iteration guard."""


class ClockError(CalendarError, RuntimeError):
    """Raised when the wall-clock override cannot be parsed."""
