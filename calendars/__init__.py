"""Calendar conversion engine for the Gregorian, Julian, Islamic and Hebrew calendars."""

from .base import CalendarDate, add_days, add_months, add_years
from .convert import (
    CALENDARS,
    calendar_class,
    calendar_names,
    convert,
    convert_all,
    days_between,
    from_jd,
    shift,
    today,
)
from .errors import (
    CalendarError,
    ClockError,
    DateRangeError,
    DurationError,
    SearchLimitError,
)
from .gregorian import GregorianDate, gregorian_to_jd, jd_to_gregorian
from .hebrew import HebrewDate, hebrew_to_jd, jd_to_hebrew
from .islamic import IslamicDate, islamic_to_jd, jd_to_islamic
from .jd import JD, Days, Months, Weeks, Years, difference
from .julian import JulianDate, jd_to_julian, julian_to_jd

__all__ = [
    "CALENDARS",
    "CalendarDate",
    "CalendarError",
    "ClockError",
    "DateRangeError",
    "DurationError",
    "SearchLimitError",
    "JD",
    "Days",
    "Weeks",
    "Months",
    "Years",
    "difference",
    "GregorianDate",
    "JulianDate",
    "IslamicDate",
    "HebrewDate",
    "gregorian_to_jd",
    "jd_to_gregorian",
    "julian_to_jd",
    "jd_to_julian",
    "islamic_to_jd",
    "jd_to_islamic",
    "hebrew_to_jd",
    "jd_to_hebrew",
    "add_days",
    "add_months",
    "add_years",
    "calendar_class",
    "calendar_names",
    "convert",
    "convert_all",
    "days_between",
    "from_jd",
    "shift",
    "today",
]
