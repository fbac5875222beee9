"""Tabular Islamic (Hijri) calendar on a fixed 30-year intercalation cycle."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

from .base import CalendarDate
from .timeofday import encode

__all__ = [
    "ISLAMIC_EPOCH",
    "IslamicMonth",
    "IslamicDate",
    "is_islamic_leap_year",
    "islamic_days_in_month",
    "islamic_to_jd",
    "jd_to_islamic",
]

ISLAMIC_EPOCH = 1948439.5  # JD of 1 Muharram, AH 1.


class IslamicMonth(IntEnum):
    MUHARRAM = 1
    SAFAR = 2
    RABI_AL_AWWAL = 3
    RABI_ATH_THANI = 4
    JUMADA_AL_ULA = 5
    JUMADA_ATH_THANIA = 6
    RAJAB = 7
    SHABAN = 8
    RAMADAN = 9
    SHAWWAL = 10
    DHU_AL_QADAH = 11
    DHU_AL_HIJJAH = 12


def is_islamic_leap_year(year: int) -> bool:
    return (11 * year + 14) % 30 < 11


def islamic_days_in_month(month: int, is_leap: bool) -> int:
    if month == IslamicMonth.DHU_AL_QADAH:
        return 30
    if month == IslamicMonth.DHU_AL_HIJJAH:
        return 30 if is_leap else 29
    return 30 if month % 2 == 1 else 29


def _islamic_date_to_jd(year: int, month: int, day: int) -> float:
    return (
        day
        + math.ceil(29.5 * (month - 1))
        + (year - 1) * 354
        + math.floor((3 + 11 * year) / 30)
        + ISLAMIC_EPOCH
        - 1
    )


def _islamic_date_from_jd(midnight_jd: float) -> Tuple[int, int, int]:
    year = math.floor((30 * (midnight_jd - ISLAMIC_EPOCH) + 10646) / 10631)
    month = min(
        12,
        math.ceil((midnight_jd - (29 + _islamic_date_to_jd(year, 1, 1))) / 29.5) + 1,
    )
    day = int(midnight_jd - _islamic_date_to_jd(year, month, 1)) + 1
    return year, month, day


@dataclass(frozen=True)
class IslamicDate(CalendarDate):
    """A date and time in the tabular Islamic calendar."""

    calendar = "islamic"

    @classmethod
    def days_in_month_of(cls, year: int, month: int) -> int:
        return islamic_days_in_month(month, is_islamic_leap_year(year))

    @classmethod
    def date_to_jd(cls, year: int, month: int, day: int) -> float:
        return _islamic_date_to_jd(year, month, day)

    @classmethod
    def date_from_jd(cls, midnight_jd: float) -> Tuple[int, int, int]:
        return _islamic_date_from_jd(midnight_jd)

    def is_leap_year(self) -> bool:
        return is_islamic_leap_year(self.year)


def islamic_to_jd(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0.0,
) -> float:
    """Return the Julian Day of an Islamic date and time."""

    IslamicDate(year, month, day, hour, minute, second)
    return _islamic_date_to_jd(year, month, day) + encode(hour, minute, second)


def jd_to_islamic(jd: float) -> Tuple[int, int, int, int, int, float]:
    """Return ``(year, month, day, hour, minute, second)`` for ``jd``.

    The year and month come straight from closed-form estimates that are exact
    for the 30-year cycle, so no search is needed.
    """

    return IslamicDate.from_jd(jd).as_tuple()
