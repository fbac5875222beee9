"""Proleptic Gregorian calendar conversions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .base import CalendarDate
from .timeofday import encode

__all__ = [
    "GREGORIAN_EPOCH",
    "GregorianDate",
    "is_gregorian_leap_year",
    "gregorian_days_in_month",
    "gregorian_to_jd",
    "jd_to_gregorian",
]

GREGORIAN_EPOCH = 1721425.5  # JD of January 1, 1 CE (proleptic Gregorian).

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_gregorian_leap_year(year: int) -> bool:
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def gregorian_days_in_month(month: int, is_leap: bool) -> int:
    if month == 2 and is_leap:
        return 29
    return _MONTH_LENGTHS[month - 1]


def _gregorian_date_to_jd(year: int, month: int, day: int) -> float:
    # January and February count as months 13 and 14 of the previous year.
    if month <= 2:
        year -= 1
        month += 12
    century = math.floor(year / 100)
    correction = 2 - century + math.floor(century / 4)
    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day
        + correction
        - 1524.5
    )


def _gregorian_date_from_jdn(jdn: int) -> Tuple[int, int, int]:
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return year, month, day


@dataclass(frozen=True)
class GregorianDate(CalendarDate):
    """A date and time in the proleptic Gregorian calendar."""

    calendar = "gregorian"

    @classmethod
    def days_in_month_of(cls, year: int, month: int) -> int:
        return gregorian_days_in_month(month, is_gregorian_leap_year(year))

    @classmethod
    def date_to_jd(cls, year: int, month: int, day: int) -> float:
        return _gregorian_date_to_jd(year, month, day)

    @classmethod
    def date_from_jd(cls, midnight_jd: float) -> Tuple[int, int, int]:
        return _gregorian_date_from_jdn(math.floor(midnight_jd + 0.5))

    def is_leap_year(self) -> bool:
        return is_gregorian_leap_year(self.year)


def gregorian_to_jd(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0.0,
) -> float:
    """Return the Julian Day of a proleptic Gregorian date and time.

    Raises
    ------
    DateRangeError
        If any component is out of range.
    """

    GregorianDate(year, month, day, hour, minute, second)
    return _gregorian_date_to_jd(year, month, day) + encode(hour, minute, second)


def jd_to_gregorian(jd: float) -> Tuple[int, int, int, int, int, float]:
    """Return ``(year, month, day, hour, minute, second)`` for ``jd``."""

    return GregorianDate.from_jd(jd).as_tuple()
