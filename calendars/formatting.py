"""Human-readable rendering of calendar dates and shorthand input helpers.

Nothing here takes part in conversion; it only reads the public fields of
:class:`~calendars.base.CalendarDate` and :class:`~calendars.jd.JD`.
"""

from __future__ import annotations

import math
from typing import Dict, Tuple, Union

from .base import CalendarDate
from .errors import DateRangeError
from .jd import JD, jd_to_jdn

__all__ = [
    "CIVIL_MONTH_NAMES",
    "ISLAMIC_MONTH_NAMES",
    "HEBREW_MONTH_NAMES",
    "WEEKDAY_NAMES",
    "month_name",
    "short_month_name",
    "day_of_week",
    "weekday_name",
    "format_time",
    "format_date",
    "format_jd",
    "ce",
    "bce",
    "am",
    "pm",
]

CIVIL_MONTH_NAMES: Tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

ISLAMIC_MONTH_NAMES: Tuple[str, ...] = (
    "Muharram",
    "Safar",
    "Rabi'al-Awwal",
    "Rabi'ath-Thani",
    "Jumada l-Ula",
    "Jumada t-Tania",
    "Rajab",
    "Sha'ban",
    "Ramadan",
    "Shawwal",
    "Dhu l-Qa'da",
    "Dhu l-Hijja",
)

HEBREW_MONTH_NAMES: Tuple[str, ...] = (
    "Nisan",
    "Iyyar",
    "Sivan",
    "Tammuz",
    "Av",
    "Elul",
    "Tishri",
    "Heshvan",
    "Kislev",
    "Teveth",
    "Shevat",
    "Adar",
    "Veadar",
)

# Index 0 is Sunday.
WEEKDAY_NAMES: Tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

_MONTH_NAMES: Dict[str, Tuple[str, ...]] = {
    "gregorian": CIVIL_MONTH_NAMES,
    "julian": CIVIL_MONTH_NAMES,
    "islamic": ISLAMIC_MONTH_NAMES,
    "hebrew": HEBREW_MONTH_NAMES,
}


def month_name(calendar: str, month: int) -> str:
    try:
        names = _MONTH_NAMES[calendar]
    except KeyError as exc:
        raise ValueError(f"Unsupported calendar: {calendar}") from exc
    if not 1 <= month <= len(names):
        raise DateRangeError(f"{calendar} month must be within 1..{len(names)}, got {month}")
    return names[month - 1]


def short_month_name(calendar: str, month: int) -> str:
    return month_name(calendar, month)[:3]


def day_of_week(jd: Union[JD, float]) -> int:
    """Return the weekday of ``jd`` with 0 = Sunday."""

    return (jd_to_jdn(float(jd)) + 1) % 7


def weekday_name(jd: Union[JD, float]) -> str:
    return WEEKDAY_NAMES[day_of_week(jd)]


def format_time(hour: int, minute: int, second: float) -> str:
    """Render a 24-hour time on a 12-hour clock, e.g. ``"1:05:09 pm"``."""

    display_hour = hour % 12 or 12
    suffix = "am" if hour < 12 else "pm"
    return f"{display_hour}:{minute:02d}:{math.floor(second):02d} {suffix}"


def _year_label(date: CalendarDate) -> str:
    if date.calendar in ("gregorian", "julian"):
        if date.year > 0:
            return f"{date.year} CE"
        return f"{1 - date.year} BCE"
    if date.calendar == "islamic":
        return f"{date.year} AH"
    return str(date.year)


def format_date(date: CalendarDate) -> str:
    """Render ``date`` as ``"Saturday, January 1 2000 CE, 12:00:00 pm"``."""

    return "{weekday}, {month} {day} {year}, {time}".format(
        weekday=weekday_name(date.to_jd()),
        month=month_name(date.calendar, date.month),
        day=date.day,
        year=_year_label(date),
        time=format_time(date.hour, date.minute, date.second),
    )


def format_jd(jd: Union[JD, float]) -> str:
    return str(jd if isinstance(jd, JD) else JD(float(jd)))


# ---------------------------------------------------------------------------
# Input conventions
# ---------------------------------------------------------------------------


def ce(year: int) -> int:
    """Return the astronomical number of a Common Era year."""

    if year < 1:
        raise DateRangeError(f"CE years start at 1, got {year}")
    return year


def bce(year: int) -> int:
    """Return the astronomical number of a BCE year (1 BCE is year 0)."""

    if year < 1:
        raise DateRangeError(f"BCE years start at 1, got {year}")
    return -(year - 1)


def am(hour: int) -> int:
    """Convert a 12-hour morning hour to the 24-hour clock (12 am is 0)."""

    if not 1 <= hour <= 12:
        raise DateRangeError(f"12-hour clock hours are 1..12, got {hour}")
    return 0 if hour == 12 else hour


def pm(hour: int) -> int:
    """Convert a 12-hour afternoon hour to the 24-hour clock (12 pm is 12)."""

    if not 1 <= hour <= 12:
        raise DateRangeError(f"12-hour clock hours are 1..12, got {hour}")
    return 12 if hour == 12 else hour + 12
