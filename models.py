"""Pydantic models for API requests and responses."""

from __future__ import annotations

import math
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CalendarName(str, Enum):
    """Enumeration of supported calendars."""

    gregorian = "gregorian"
    julian = "julian"
    islamic = "islamic"
    hebrew = "hebrew"


class DurationUnit(str, Enum):
    """Units accepted by the ``/shift`` endpoint."""

    days = "days"
    weeks = "weeks"
    months = "months"
    years = "years"


class DateQueryParams(BaseModel):
    """A calendar date and time of day supplied as query parameters."""

    model_config = ConfigDict(populate_by_name=True)

    calendar: CalendarName = Field(..., description="Calendar of the supplied date")
    year: int = Field(..., description="Astronomical year (1 BCE is 0)")
    month: int = Field(..., ge=1, le=13, description="Month number within the calendar")
    day: int = Field(..., ge=1, le=31, description="Day of the month")
    hour: int = Field(0, ge=0, le=23, description="Hour of the day (24-hour clock)")
    minute: int = Field(0, ge=0, le=59, description="Minute of the hour")
    second: float = Field(0.0, ge=0.0, lt=60.0, description="Second of the minute")


class ConvertQueryParams(DateQueryParams):
    """Validated query parameters for the ``/convert`` endpoint."""

    target: Optional[CalendarName] = Field(
        None, description="Only return the date in this calendar"
    )


class ShiftQueryParams(DateQueryParams):
    """Validated query parameters for the ``/shift`` endpoint."""

    amount: int = Field(..., description="Signed number of units to move the date by")
    unit: DurationUnit = Field(DurationUnit.days, description="Unit of ``amount``")


class JdQueryParams(BaseModel):
    """Validated query parameters for the ``/jd`` endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    value: float = Field(..., alias="jd", description="Julian Day to convert")

    @field_validator("value")
    def validate_value(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("jd must be a finite number")
        return value


class TodayQueryParams(BaseModel):
    """Validated query parameters for the ``/today`` endpoint."""

    with_time: bool = Field(True, description="Keep the wall-clock time of day")


class DateModel(BaseModel):
    """A date in one calendar together with its rendered form."""

    calendar: CalendarName
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: float
    month_name: str
    formatted: str


class ConversionResponse(BaseModel):
    """A point on the Julian Day axis expressed in one or more calendars."""

    ok: bool = True
    jd: float = Field(..., description="Julian Day")
    jdn: int = Field(..., description="Julian Day Number of the civil day")
    weekday: str = Field(..., description="Name of the day of the week")
    dates: Dict[str, DateModel] = Field(..., description="Date per calendar")


class ConvertResponse(ConversionResponse):
    """Successful ``/convert`` payload."""

    source: DateModel


class ShiftResponse(BaseModel):
    """Successful ``/shift`` payload."""

    ok: bool = True
    source: DateModel
    result: DateModel
    amount: int
    unit: DurationUnit
    jd: float = Field(..., description="Julian Day of the shifted date")
    days_elapsed: float = Field(..., description="Signed days from source to result")


class TodayResponse(ConversionResponse):
    """Successful ``/today`` payload."""

    with_time: bool


class HealthResponse(BaseModel):
    """Health-check response."""

    ok: bool = True
    calendars: List[str]


class ErrorResponse(BaseModel):
    """Error payload."""

    ok: bool = False
    code: str
    error: str
