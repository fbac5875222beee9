"""Shared calendar date value type and calendar-native arithmetic.

Every calendar module defines a frozen subclass of :class:`CalendarDate` and
supplies the calendar's month model (months per year, month lengths and the
month successor).  The arithmetic helpers at the bottom of this module work
on that model only, so the same carry and clamp rules hold for all calendars.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import ClassVar, Sequence, Tuple, TypeVar, Union

from .errors import DateRangeError
from .jd import JD, split_jd
from .timeofday import decode, encode, validate_time

__all__ = ["CalendarDate", "add_months", "add_days", "add_years"]

DateT = TypeVar("DateT", bound="CalendarDate")


@dataclass(frozen=True)
class CalendarDate(ABC):
    """A civil date and time of day in one calendar.

    Years are astronomical (year 0 exists). The class is abstract; each
    calendar module supplies a concrete subclass. Instances validate
    themselves on construction and raise :class:`DateRangeError` when a
    component is out of range for the calendar and year.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: float = 0.0

    calendar: ClassVar[str] = ""
    MONTHS_PER_YEAR: ClassVar[int] = 12

    def __post_init__(self) -> None:
        months = self.months_in_year(self.year)
        if not 1 <= self.month <= months:
            raise DateRangeError(
                f"{self.calendar} month must be within 1..{months} "
                f"for year {self.year}, got {self.month}"
            )
        length = self.days_in_month_of(self.year, self.month)
        if not 1 <= self.day <= length:
            raise DateRangeError(
                f"{self.calendar} day must be within 1..{length} "
                f"for {self.year}-{self.month}, got {self.day}"
            )
        validate_time(self.hour, self.minute, self.second)

    # -- calendar model -------------------------------------------------

    @classmethod
    def months_in_year(cls, year: int) -> int:
        return cls.MONTHS_PER_YEAR

    @classmethod
    @abstractmethod
    def days_in_month_of(cls, year: int, month: int) -> int:
        ...

    @classmethod
    def month_after(cls, year: int, month: int) -> Tuple[int, int]:
        if month >= cls.months_in_year(year):
            return year + 1, 1
        return year, month + 1

    @classmethod
    def month_before(cls, year: int, month: int) -> Tuple[int, int]:
        if month <= 1:
            return year - 1, cls.months_in_year(year - 1)
        return year, month - 1

    @classmethod
    def offset_month(cls, year: int, month: int, n: int) -> Tuple[int, int]:
        """Return the ``(year, month)`` that lies ``n`` months after the given one."""

        years, index = divmod((month - 1) + n, cls.MONTHS_PER_YEAR)
        return year + years, index + 1

    @classmethod
    def offset_year(cls, year: int, month: int, n: int) -> Tuple[int, int]:
        return year + n, month

    # -- JD conversion ----------------------------------------------------

    @classmethod
    @abstractmethod
    def date_to_jd(cls, year: int, month: int, day: int) -> float:
        """Return the JD of local midnight starting the given (unchecked) date."""

        ...

    @classmethod
    @abstractmethod
    def date_from_jd(cls, midnight_jd: float) -> Tuple[int, int, int]:
        """Return ``(year, month, day)`` for the day starting at ``midnight_jd``."""

        ...

    def to_jd(self) -> JD:
        return JD(
            self.date_to_jd(self.year, self.month, self.day)
            + encode(self.hour, self.minute, self.second)
        )

    @classmethod
    def from_jd(cls: type[DateT], jd: Union[JD, float]) -> DateT:
        midnight, fraction = split_jd(float(jd))
        year, month, day = cls.date_from_jd(midnight)
        hour, minute, second = decode(fraction)
        return cls(year, month, day, hour, minute, second)

    @classmethod
    def from_clock(
        cls: type[DateT],
        reading: Sequence[Union[int, float]],
        with_time: bool = True,
    ) -> DateT:
        """Return the date in this calendar for a Gregorian wall-clock reading."""

        return cls.from_jd(JD.from_clock(reading, with_time=with_time))

    # -- accessors --------------------------------------------------------

    def as_tuple(self) -> Tuple[int, int, int, int, int, float]:
        return (self.year, self.month, self.day, self.hour, self.minute, self.second)

    def date_only(self: DateT) -> DateT:
        return replace(self, hour=0, minute=0, second=0.0)

    @abstractmethod
    def is_leap_year(self) -> bool:
        ...


def add_months(date: DateT, n: int) -> DateT:
    """Move ``date`` by ``n`` calendar months, clamping the day to the new month.

    January 31 plus one month is the last day of February, never early March.
    """

    year, month = type(date).offset_month(date.year, date.month, n)
    day = min(date.day, type(date).days_in_month_of(year, month))
    return replace(date, year=year, month=month, day=day)


def add_days(date: DateT, n: int) -> DateT:
    """Move ``date`` by ``n`` days using an explicit day/month/year carry loop.

    Days that overflow the current month always carry into the next month;
    a negative ``n`` borrows whole months from the preceding ones.
    """

    cls = type(date)
    year, month, day = date.year, date.month, date.day + n

    length = cls.days_in_month_of(year, month)
    while day > length:
        day -= length
        year, month = cls.month_after(year, month)
        length = cls.days_in_month_of(year, month)

    while day < 1:
        year, month = cls.month_before(year, month)
        day += cls.days_in_month_of(year, month)

    return replace(date, year=year, month=month, day=day)


def add_years(date: DateT, n: int) -> DateT:
    """Move ``date`` by ``n`` years; February 29 becomes February 28 when needed."""

    year, month = type(date).offset_year(date.year, date.month, n)
    day = min(date.day, type(date).days_in_month_of(year, month))
    return replace(date, year=year, month=month, day=day)
