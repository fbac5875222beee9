"""Cross-calendar conversion, tagged-duration arithmetic and "today" values."""

from __future__ import annotations

from typing import Dict, List, Sequence, Type, Union

from .base import CalendarDate, add_days, add_months, add_years
from .errors import DurationError
from .gregorian import GregorianDate
from .hebrew import HebrewDate
from .islamic import IslamicDate
from .jd import JD, Days, Duration, Months, Weeks, Years
from .julian import JulianDate

__all__ = [
    "CALENDARS",
    "calendar_names",
    "calendar_class",
    "convert",
    "convert_all",
    "from_jd",
    "shift",
    "days_between",
    "jd_from_clock",
    "today",
]

CALENDARS: Dict[str, Type[CalendarDate]] = {
    cls.calendar: cls for cls in (GregorianDate, JulianDate, IslamicDate, HebrewDate)
}

ClockReading = Sequence[Union[int, float]]


def calendar_names() -> List[str]:
    return list(CALENDARS)


def calendar_class(name: str) -> Type[CalendarDate]:
    try:
        return CALENDARS[name.lower()]
    except KeyError as exc:
        raise ValueError(f"Unsupported calendar: {name}") from exc


def from_jd(name: str, jd: Union[JD, float]) -> CalendarDate:
    return calendar_class(name).from_jd(jd)


def convert(date: CalendarDate, target: str) -> CalendarDate:
    """Express ``date`` in the ``target`` calendar by way of its Julian Day."""

    return calendar_class(target).from_jd(date.to_jd())


def convert_all(jd: Union[JD, float]) -> Dict[str, CalendarDate]:
    return {name: cls.from_jd(jd) for name, cls in CALENDARS.items()}


def _whole(amount: float, unit: str) -> int:
    if amount != int(amount):
        raise DurationError(f"Calendar dates can only be shifted by whole {unit}, got {amount}")
    return int(amount)


def shift(date: CalendarDate, duration: Duration) -> CalendarDate:
    """Apply a tagged duration using the date's own calendar rules.

    ``Months`` and ``Years`` use month/year arithmetic with end-of-month
    clamping; ``Days`` and ``Weeks`` use the day carry loop.  Fractional
    amounts raise :class:`DurationError`.
    """

    if isinstance(duration, Months):
        return add_months(date, _whole(duration.value, "months"))
    if isinstance(duration, Years):
        return add_years(date, _whole(duration.value, "years"))
    if isinstance(duration, (Days, Weeks)):
        return add_days(date, _whole(duration.to_days(), "days"))
    raise DurationError(f"Cannot shift a date by {type(duration).__name__}")


def days_between(later: CalendarDate, earlier: CalendarDate) -> float:
    """Signed day count from ``earlier`` to ``later``; calendars may differ."""

    return later.to_jd() - earlier.to_jd()


def jd_from_clock(reading: ClockReading, with_time: bool = True) -> JD:
    """Return the JD of a wall-clock ``(year, month, day, hour, minute, second)``."""

    return JD.from_clock(reading, with_time=with_time)


def today(name: str, reading: ClockReading, with_time: bool = True) -> CalendarDate:
    """Build the calendar date for a wall-clock reading.

    The reading is a Gregorian civil ``(year, month, day, hour, minute,
    second)`` tuple as returned by :func:`calendars.clock.current_local_time`.
    """

    return calendar_class(name).from_clock(reading, with_time=with_time)
