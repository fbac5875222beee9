from __future__ import annotations

import json
import logging

import pytest

import calendars.hebrew as hebrew
from calendars.errors import DateRangeError, SearchLimitError
from calendars.formatting import day_of_week
from calendars.gregorian import gregorian_to_jd
from calendars.hebrew import (
    HEBREW_EPOCH,
    HebrewDate,
    HebrewMonth,
    hebrew_days_in_month,
    hebrew_days_in_year,
    hebrew_months_in_year,
    hebrew_to_jd,
    is_hebrew_leap_year,
    jd_to_hebrew,
    locate_hebrew_date,
)
from calendars.julian import julian_to_jd

YEAR_LENGTHS = {353, 354, 355, 383, 384, 385}


def test_first_day_of_year_one() -> None:
    assert hebrew_to_jd(1, HebrewMonth.TISHRI, 1) == julian_to_jd(-3760, 10, 7) == 347997.5
    assert HEBREW_EPOCH == 347995.5


def test_known_dates() -> None:
    assert hebrew_to_jd(5784, HebrewMonth.TISHRI, 1) == gregorian_to_jd(2023, 9, 16)
    assert hebrew_to_jd(5784, HebrewMonth.NISAN, 15) == gregorian_to_jd(2024, 4, 23)
    assert jd_to_hebrew(2460423.5) == (5784, 1, 15, 0, 0, 0)


def test_leap_years_follow_metonic_cycle() -> None:
    assert is_hebrew_leap_year(5784)
    assert not is_hebrew_leap_year(5783)
    assert not is_hebrew_leap_year(5785)
    leaps = [year for year in range(1, 20) if is_hebrew_leap_year(year)]
    assert leaps == [3, 6, 8, 11, 14, 17, 19]
    assert hebrew_months_in_year(5784) == 13
    assert hebrew_months_in_year(5783) == 12


def test_year_5784_is_deficient_leap_year() -> None:
    assert hebrew_days_in_year(5784) == 383
    assert hebrew_days_in_month(5784, HebrewMonth.HESHVAN) == 29
    assert hebrew_days_in_month(5784, HebrewMonth.KISLEV) == 29
    assert hebrew_days_in_month(5784, HebrewMonth.ADAR) == 30
    assert hebrew_days_in_month(5784, HebrewMonth.VEADAR) == 29


def test_year_lengths_and_month_sums() -> None:
    for year in range(5500, 6000):
        length = hebrew_days_in_year(year)
        assert length in YEAR_LENGTHS
        assert (length > 360) == is_hebrew_leap_year(year)
        months = sum(
            hebrew_days_in_month(year, month)
            for month in range(1, hebrew_months_in_year(year) + 1)
        )
        assert months == length


def test_new_year_never_falls_on_sunday_wednesday_or_friday() -> None:
    for year in range(5500, 6000):
        assert day_of_week(hebrew_to_jd(year, HebrewMonth.TISHRI, 1)) not in (0, 3, 5)


def test_round_trip_month_boundaries() -> None:
    for year in range(5600, 5900, 3):
        for month in range(1, hebrew_months_in_year(year) + 1):
            last = hebrew_days_in_month(year, month)
            for day in (1, last):
                date = HebrewDate(year, month, day, 7, 30, 15)
                assert HebrewDate.from_jd(date.to_jd()) == date


def test_search_step_bounds() -> None:
    start = hebrew_to_jd(5500, HebrewMonth.TISHRI, 1)
    end = hebrew_to_jd(5900, HebrewMonth.TISHRI, 1)
    jd = start
    max_year_steps = max_month_steps = 0
    while jd < end:
        found = locate_hebrew_date(jd)
        max_year_steps = max(max_year_steps, found.year_steps)
        max_month_steps = max(max_month_steps, found.month_steps)
        assert hebrew_to_jd(found.year, found.month, found.day) == jd
        jd += 7.0
    assert max_year_steps <= 3
    assert max_month_steps <= 6


def test_search_guard_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(hebrew, "HEBREW_SEARCH_GUARD", 0)
    with pytest.raises(SearchLimitError):
        locate_hebrew_date(hebrew_to_jd(5784, HebrewMonth.ELUL, 29))


def test_search_logs_step_counts(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="calendars.hebrew"):
        jd_to_hebrew(2460423.5)
    events = [json.loads(record.getMessage()) for record in caplog.records]
    assert events and events[-1]["event"] == "hebrew_search"
    assert events[-1]["month_steps"] <= 6


def test_invalid_dates_raise() -> None:
    with pytest.raises(DateRangeError):
        HebrewDate(5783, HebrewMonth.VEADAR, 1)
    with pytest.raises(DateRangeError):
        hebrew_to_jd(5784, HebrewMonth.KISLEV, 30)
    with pytest.raises(DateRangeError):
        HebrewDate(5784, 14, 1)
