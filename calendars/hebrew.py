"""Hebrew (lunisolar) calendar conversions.

Months are numbered from Nisan (1) but the year begins at Tishri (7); a leap
year inserts a thirteenth month, Veadar.  The year start is derived from the
molad of Tishri with the postponement rules expressed as two delays:
:func:`hebrew_delay_of_week` and :func:`hebrew_delay_adjacent_year`.

There is no closed-form inverse, so :func:`locate_hebrew_date` searches
forward from an estimate, first over years and then over months.  Both loops
are bounded: the year estimate never undershoots by more than three years and
a year never has more than six months after its starting month.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, Tuple

from .base import CalendarDate
from .errors import SearchLimitError
from .timeofday import encode

__all__ = [
    "HEBREW_EPOCH",
    "HEBREW_SEARCH_GUARD",
    "HebrewMonth",
    "HebrewDate",
    "HebrewSearch",
    "is_hebrew_leap_year",
    "hebrew_months_in_year",
    "hebrew_delay_of_week",
    "hebrew_delay_adjacent_year",
    "hebrew_days_in_year",
    "hebrew_days_in_month",
    "hebrew_to_jd",
    "jd_to_hebrew",
    "locate_hebrew_date",
]

LOGGER = logging.getLogger(__name__)

HEBREW_EPOCH = 347995.5

# Upper bound on the steps either search loop may take before the input is
# treated as corrupt. Valid input needs at most 3 year steps and 6 month steps.
HEBREW_SEARCH_GUARD = 16

# Mean Hebrew year is 35975351 / 98496 days.
_YEARS_PER_DAY = 98496.0 / 35975351.0

_PARTS_PER_DAY = 25920


class HebrewMonth(IntEnum):
    NISAN = 1
    IYYAR = 2
    SIVAN = 3
    TAMMUZ = 4
    AV = 5
    ELUL = 6
    TISHRI = 7
    HESHVAN = 8
    KISLEV = 9
    TEVETH = 10
    SHEVAT = 11
    ADAR = 12
    VEADAR = 13


class HebrewSearch(NamedTuple):
    """Result of the reverse search together with the steps each loop took."""

    year: int
    month: int
    day: int
    year_steps: int
    month_steps: int


def is_hebrew_leap_year(year: int) -> bool:
    return (year * 7 + 1) % 19 < 7


def hebrew_months_in_year(year: int) -> int:
    return 13 if is_hebrew_leap_year(year) else 12


def hebrew_delay_of_week(year: int) -> int:
    """Days from the epoch to the molad of Tishri, postponed off Sun/Wed/Fri."""

    months = (235 * year - 234) // 19
    parts = 12084 + 13753 * months
    days = months * 29 + parts // _PARTS_PER_DAY
    if (3 * (days + 1)) % 7 < 3:
        days += 1
    return days


def hebrew_delay_adjacent_year(year: int) -> int:
    """Extra postponement keeping year lengths within the allowed set.

    Returns 2 when the following year would otherwise be 356 days long and 1
    when the current year would follow a 382-day year.
    """

    last = hebrew_delay_of_week(year - 1)
    present = hebrew_delay_of_week(year)
    upcoming = hebrew_delay_of_week(year + 1)

    if upcoming - present == 356:
        return 2
    if present - last == 382:
        return 1
    return 0


def _new_year_jd(year: int) -> float:
    # JD of 1 Tishri.
    return HEBREW_EPOCH + hebrew_delay_of_week(year) + hebrew_delay_adjacent_year(year) + 2


def hebrew_days_in_year(year: int) -> int:
    return int(_new_year_jd(year + 1) - _new_year_jd(year))


def _month_length(year: int, month: int, year_length: int) -> int:
    if month in (2, 4, 6, 10, 13):
        return 29
    if month == 12 and not is_hebrew_leap_year(year):
        return 29
    # Heshvan is long only in a complete year; Kislev is short only in a
    # deficient one.
    if month == 8 and year_length % 10 != 5:
        return 29
    if month == 9 and year_length % 10 == 3:
        return 29
    return 30


def hebrew_days_in_month(year: int, month: int) -> int:
    return _month_length(year, month, hebrew_days_in_year(year))


def _hebrew_date_to_jd(year: int, month: int, day: int) -> float:
    jd = HEBREW_EPOCH + hebrew_delay_of_week(year) + hebrew_delay_adjacent_year(year) + day + 1
    if month == HebrewMonth.TISHRI:
        return jd

    year_length = hebrew_days_in_year(year)
    if month < HebrewMonth.TISHRI:
        for m in range(HebrewMonth.TISHRI, hebrew_months_in_year(year) + 1):
            jd += _month_length(year, m, year_length)
        for m in range(HebrewMonth.NISAN, month):
            jd += _month_length(year, m, year_length)
    else:
        for m in range(HebrewMonth.TISHRI, month):
            jd += _month_length(year, m, year_length)
    return jd


def locate_hebrew_date(midnight_jd: float) -> HebrewSearch:
    """Find the Hebrew date of the day that starts at ``midnight_jd``.

    Raises
    ------
    SearchLimitError
        If either loop exceeds :data:`HEBREW_SEARCH_GUARD` steps.
    """

    a = midnight_jd
    year = math.floor((a - HEBREW_EPOCH) * _YEARS_PER_DAY) - 1

    year_steps = 0
    while a >= _new_year_jd(year + 1):
        year += 1
        year_steps += 1
        if year_steps > HEBREW_SEARCH_GUARD:
            raise SearchLimitError(f"Hebrew year search did not converge for JD {a}")

    month = HebrewMonth.TISHRI if a < _hebrew_date_to_jd(year, 1, 1) else HebrewMonth.NISAN
    month = int(month)
    year_length = hebrew_days_in_year(year)

    month_steps = 0
    while a > _hebrew_date_to_jd(year, month, _month_length(year, month, year_length)):
        month += 1
        month_steps += 1
        if month_steps > HEBREW_SEARCH_GUARD:
            raise SearchLimitError(f"Hebrew month search did not converge for JD {a}")

    day = int(a - _hebrew_date_to_jd(year, month, 1)) + 1

    if LOGGER.isEnabledFor(logging.DEBUG):
        LOGGER.debug(
            json.dumps(
                {
                    "event": "hebrew_search",
                    "jd": a,
                    "year_steps": year_steps,
                    "month_steps": month_steps,
                }
            )
        )
    return HebrewSearch(year, month, day, year_steps, month_steps)


@dataclass(frozen=True)
class HebrewDate(CalendarDate):
    """A date and time in the Hebrew calendar."""

    calendar = "hebrew"

    @classmethod
    def months_in_year(cls, year: int) -> int:
        return hebrew_months_in_year(year)

    @classmethod
    def days_in_month_of(cls, year: int, month: int) -> int:
        return hebrew_days_in_month(year, month)

    @classmethod
    def month_after(cls, year: int, month: int) -> Tuple[int, int]:
        # Elul closes the year; the last month of the count is followed by Nisan.
        if month == HebrewMonth.ELUL:
            return year + 1, int(HebrewMonth.TISHRI)
        if month >= hebrew_months_in_year(year):
            return year, int(HebrewMonth.NISAN)
        return year, month + 1

    @classmethod
    def month_before(cls, year: int, month: int) -> Tuple[int, int]:
        if month == HebrewMonth.TISHRI:
            return year - 1, int(HebrewMonth.ELUL)
        if month == HebrewMonth.NISAN:
            return year, hebrew_months_in_year(year)
        return year, month - 1

    @classmethod
    def offset_month(cls, year: int, month: int, n: int) -> Tuple[int, int]:
        # Work with the month's position counted from Tishri, because year
        # lengths differ (12 or 13 months).
        if month >= HebrewMonth.TISHRI:
            position = month - HebrewMonth.TISHRI
        else:
            position = month - 1 + hebrew_months_in_year(year) - 6
        position += n

        while position >= hebrew_months_in_year(year):
            position -= hebrew_months_in_year(year)
            year += 1
        while position < 0:
            year -= 1
            position += hebrew_months_in_year(year)

        tishri_run = hebrew_months_in_year(year) - 6
        if position < tishri_run:
            return year, position + HebrewMonth.TISHRI
        return year, position - tishri_run + 1

    @classmethod
    def offset_year(cls, year: int, month: int, n: int) -> Tuple[int, int]:
        year += n
        if month == HebrewMonth.VEADAR and not is_hebrew_leap_year(year):
            month = int(HebrewMonth.ADAR)
        return year, month

    @classmethod
    def date_to_jd(cls, year: int, month: int, day: int) -> float:
        return _hebrew_date_to_jd(year, month, day)

    @classmethod
    def date_from_jd(cls, midnight_jd: float) -> Tuple[int, int, int]:
        found = locate_hebrew_date(midnight_jd)
        return found.year, found.month, found.day

    def is_leap_year(self) -> bool:
        return is_hebrew_leap_year(self.year)


def hebrew_to_jd(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0.0,
) -> float:
    """Return the Julian Day of a Hebrew date and time."""

    HebrewDate(year, month, day, hour, minute, second)
    return _hebrew_date_to_jd(year, month, day) + encode(hour, minute, second)


def jd_to_hebrew(jd: float) -> Tuple[int, int, int, int, int, float]:
    """Return ``(year, month, day, hour, minute, second)`` for ``jd``."""

    return HebrewDate.from_jd(jd).as_tuple()
