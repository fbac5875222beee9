from __future__ import annotations

import pytest

from calendars.errors import DateRangeError
from calendars.formatting import day_of_week
from calendars.gregorian import gregorian_to_jd
from calendars.islamic import (
    ISLAMIC_EPOCH,
    IslamicDate,
    IslamicMonth,
    is_islamic_leap_year,
    islamic_days_in_month,
    islamic_to_jd,
    jd_to_islamic,
)


def test_epoch_is_first_of_muharram_year_one() -> None:
    assert islamic_to_jd(1, 1, 1) == ISLAMIC_EPOCH == 1948439.5
    # 16 July 622 (Julian) was a Friday.
    assert day_of_week(ISLAMIC_EPOCH) == 5


def test_known_dates() -> None:
    assert islamic_to_jd(1445, 1, 1) == 2460144.5 == gregorian_to_jd(2023, 7, 19)
    assert islamic_to_jd(1444, IslamicMonth.RAMADAN, 1) == gregorian_to_jd(2023, 3, 23)
    assert jd_to_islamic(2460144.5) == (1445, 1, 1, 0, 0, 0)


def test_leap_years_of_the_thirty_year_cycle() -> None:
    leaps = [year for year in range(1, 31) if is_islamic_leap_year(year)]
    assert leaps == [2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29]
    for year in range(1, 900):
        assert is_islamic_leap_year(year) == is_islamic_leap_year(year + 30)


def test_month_lengths() -> None:
    assert islamic_days_in_month(1, False) == 30
    assert islamic_days_in_month(2, False) == 29
    assert islamic_days_in_month(IslamicMonth.DHU_AL_QADAH, False) == 30
    assert islamic_days_in_month(IslamicMonth.DHU_AL_HIJJAH, False) == 29
    assert islamic_days_in_month(IslamicMonth.DHU_AL_HIJJAH, True) == 30


def test_year_lengths_agree_with_leap_rule() -> None:
    for year in range(1, 1500):
        expected = 355 if is_islamic_leap_year(year) else 354
        assert islamic_to_jd(year + 1, 1, 1) - islamic_to_jd(year, 1, 1) == expected
        months = sum(IslamicDate.days_in_month_of(year, m) for m in range(1, 13))
        assert months == expected


def test_every_day_round_trips() -> None:
    start = islamic_to_jd(1440, 1, 1)
    end = islamic_to_jd(1447, 1, 1)
    jd = start
    previous = None
    while jd < end:
        date = IslamicDate.from_jd(jd)
        assert date.to_jd().value == jd
        if previous is not None:
            assert date != previous
        previous = date
        jd += 1.0


def test_round_trip_month_boundaries_with_time() -> None:
    for year in range(1, 1600, 13):
        for month in range(1, 13):
            last = IslamicDate.days_in_month_of(year, month)
            for day in (1, last):
                date = IslamicDate(year, month, day, 18, 45, 30)
                assert IslamicDate.from_jd(date.to_jd()) == date


def test_afternoon_stays_on_the_same_civil_day() -> None:
    date = IslamicDate.from_jd(gregorian_to_jd(2023, 7, 19, 15, 0, 0))
    assert date == IslamicDate(1445, 1, 1, 15, 0, 0)


def test_invalid_dates_raise() -> None:
    with pytest.raises(DateRangeError):
        islamic_to_jd(1444, 12, 30)
    with pytest.raises(DateRangeError):
        islamic_to_jd(1445, 2, 30)
    with pytest.raises(DateRangeError):
        IslamicDate(1445, 13, 1)
