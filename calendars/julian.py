"""Julian calendar conversions.

``jd_to_julian`` returns astronomical years (1 BCE is year 0).
:meth:`JulianDate.from_jd` additionally renumbers years ``<= 0`` to the
historical count without a year zero (``year = -(year - 1)``), while
:meth:`JulianDate.to_jd` always reads the year as astronomical.  The
renumbering is therefore one-directional; round trips are exact for years
``>= 1``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple, Union

from .base import CalendarDate
from .jd import JD, split_jd
from .timeofday import decode, encode

__all__ = [
    "JULIAN_EPOCH",
    "JulianDate",
    "is_julian_leap_year",
    "julian_days_in_month",
    "julian_to_jd",
    "jd_to_julian",
]

JULIAN_EPOCH = 1721423.5  # JD of January 1, 1 CE (Julian).

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_julian_leap_year(year: int) -> bool:
    return year % 4 == 0


def julian_days_in_month(month: int, is_leap: bool) -> int:
    if month == 2 and is_leap:
        return 29
    return _MONTH_LENGTHS[month - 1]


def _julian_date_to_jd(year: int, month: int, day: int) -> float:
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - 32083.5


def _julian_date_from_jdn(jdn: int) -> Tuple[int, int, int]:
    b = jdn + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    day = b - d - math.floor(30.6001 * e)
    return year, month, day


@dataclass(frozen=True)
class JulianDate(CalendarDate):
    """A date and time in the Julian calendar."""

    calendar = "julian"

    @classmethod
    def days_in_month_of(cls, year: int, month: int) -> int:
        return julian_days_in_month(month, is_julian_leap_year(year))

    @classmethod
    def date_to_jd(cls, year: int, month: int, day: int) -> float:
        return _julian_date_to_jd(year, month, day)

    @classmethod
    def date_from_jd(cls, midnight_jd: float) -> Tuple[int, int, int]:
        return _julian_date_from_jdn(math.floor(midnight_jd + 0.5))

    @classmethod
    def from_jd(cls, jd: Union[JD, float]) -> "JulianDate":
        """Build a Julian date from ``jd`` using the no-year-zero numbering.

        The fields are validated against the astronomical year before the
        year is renumbered, so February 29 of a leap year ``<= 0`` comes back
        as February 29 of the renumbered year.
        """

        year, month, day, hour, minute, second = jd_to_julian(float(jd))
        date = cls(year, month, day, hour, minute, second)
        if year <= 0:
            # Leap status belongs to the astronomical year checked above.
            object.__setattr__(date, "year", -(year - 1))
        return date

    def is_leap_year(self) -> bool:
        return is_julian_leap_year(self.year)


def julian_to_jd(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0.0,
) -> float:
    """Return the Julian Day of a Julian calendar date and time."""

    JulianDate(year, month, day, hour, minute, second)
    return _julian_date_to_jd(year, month, day) + encode(hour, minute, second)


def jd_to_julian(jd: float) -> Tuple[int, int, int, int, int, float]:
    """Return the astronomical ``(year, month, day, hour, minute, second)`` for ``jd``."""

    midnight, fraction = split_jd(float(jd))
    year, month, day = JulianDate.date_from_jd(midnight)
    hour, minute, second = decode(fraction)
    return year, month, day, hour, minute, second
