"""FastAPI application exposing calendar conversions and arithmetic."""

from __future__ import annotations

import json
import logging
import os
import time
from typing import Dict, List

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from calendars import (
    JD,
    CalendarDate,
    DateRangeError,
    Days,
    DurationError,
    Months,
    Weeks,
    Years,
    calendar_class,
    calendar_names,
    convert_all,
    shift,
)
from calendars.clock import current_local_time
from calendars.errors import ClockError
from calendars.formatting import format_date, month_name, weekday_name
from models import (
    CalendarName,
    ConversionResponse,
    ConvertQueryParams,
    ConvertResponse,
    DateModel,
    DateQueryParams,
    DurationUnit,
    ErrorResponse,
    HealthResponse,
    JdQueryParams,
    ShiftQueryParams,
    ShiftResponse,
    TodayQueryParams,
    TodayResponse,
)

logging.basicConfig(level=logging.INFO, format="%(message)s")
LOGGER = logging.getLogger("calendar-api")

APP_DESCRIPTION = (
    "Conversions between the Gregorian, Julian, Islamic and Hebrew calendars "
    "through the Julian Day"
)

DEFAULT_ALLOWED_ORIGINS = "http://localhost:3000"

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

DURATIONS = {
    DurationUnit.days: Days,
    DurationUnit.weeks: Weeks,
    DurationUnit.months: Months,
    DurationUnit.years: Years,
}


def _allowed_origins() -> List[str]:
    raw = os.environ.get("CALENDAR_API_ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


app = FastAPI(
    title="Calendar API",
    description=APP_DESCRIPTION,
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    payload = ErrorResponse(code=code, error=message)
    LOGGER.error(json.dumps({"event": "error", "code": code, "message": message}))
    return JSONResponse(status_code=status_code, content=payload.model_dump())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = ", ".join(error["msg"] for error in exc.errors())
    return _error_response(422, "validation_error", messages)


@app.exception_handler(ValidationError)
async def model_validation_exception_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    messages = ", ".join(error["msg"] for error in exc.errors())
    return _error_response(422, "validation_error", messages)


@app.exception_handler(DateRangeError)
async def date_range_exception_handler(request: Request, exc: DateRangeError) -> JSONResponse:
    return _error_response(400, "date_range", str(exc))


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    detail = exc.detail
    if isinstance(detail, dict):
        message = detail.get("error") or detail.get("message") or str(detail)
    elif isinstance(detail, list):
        message = ", ".join(str(item) for item in detail)
    else:
        message = str(detail)
    return _error_response(exc.status_code, f"http_{exc.status_code}", message)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    LOGGER.exception("Unhandled exception", exc_info=exc)
    return _error_response(500, "internal_error", "Unhandled server error")


def _date_model(date: CalendarDate) -> DateModel:
    return DateModel(
        calendar=CalendarName(date.calendar),
        year=date.year,
        month=date.month,
        day=date.day,
        hour=date.hour,
        minute=date.minute,
        second=date.second,
        month_name=month_name(date.calendar, date.month),
        formatted=format_date(date),
    )


def _dates_for(jd: JD) -> Dict[str, DateModel]:
    return {name: _date_model(date) for name, date in convert_all(jd).items()}


def _source_date(params: DateQueryParams) -> CalendarDate:
    cls = calendar_class(params.calendar.value)
    return cls(
        params.year,
        params.month,
        params.day,
        params.hour,
        params.minute,
        params.second,
    )


def _log_request(event: str, start_time: float, **fields) -> None:
    duration_ms = (time.perf_counter() - start_time) * 1000.0
    LOGGER.info(
        json.dumps({"event": event, **fields, "duration_ms": round(duration_ms, 3)})
    )


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(ok=True, calendars=calendar_names())


@app.get("/convert", response_model=ConvertResponse, responses=ERROR_RESPONSES)
def convert_endpoint(params: ConvertQueryParams = Depends()) -> ConvertResponse:
    start_time = time.perf_counter()
    source = _source_date(params)
    jd = source.to_jd()

    dates = _dates_for(jd)
    if params.target is not None:
        dates = {params.target.value: dates[params.target.value]}

    response = ConvertResponse(
        jd=jd.value,
        jdn=jd.jdn,
        weekday=weekday_name(jd),
        dates=dates,
        source=_date_model(source),
    )
    _log_request(
        "convert",
        start_time,
        calendar=params.calendar.value,
        date=[source.year, source.month, source.day],
        target=params.target.value if params.target else None,
        jd=jd.value,
    )
    return response


@app.get("/jd", response_model=ConversionResponse, responses=ERROR_RESPONSES)
def jd_endpoint(params: JdQueryParams = Depends()) -> ConversionResponse:
    start_time = time.perf_counter()
    jd = JD(params.value)
    response = ConversionResponse(
        jd=jd.value,
        jdn=jd.jdn,
        weekday=weekday_name(jd),
        dates=_dates_for(jd),
    )
    _log_request("jd", start_time, jd=jd.value)
    return response


@app.get("/shift", response_model=ShiftResponse, responses=ERROR_RESPONSES)
def shift_endpoint(params: ShiftQueryParams = Depends()) -> ShiftResponse:
    start_time = time.perf_counter()
    source = _source_date(params)
    try:
        result = shift(source, DURATIONS[params.unit](params.amount))
    except DurationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    response = ShiftResponse(
        source=_date_model(source),
        result=_date_model(result),
        amount=params.amount,
        unit=params.unit,
        jd=result.to_jd().value,
        days_elapsed=result.to_jd() - source.to_jd(),
    )
    _log_request(
        "shift",
        start_time,
        calendar=params.calendar.value,
        amount=params.amount,
        unit=params.unit.value,
    )
    return response


@app.get("/today", response_model=TodayResponse, responses=ERROR_RESPONSES)
def today_endpoint(params: TodayQueryParams = Depends()) -> TodayResponse:
    start_time = time.perf_counter()
    try:
        reading = current_local_time()
    except ClockError as exc:
        raise HTTPException(status_code=500, detail=str(exc))

    jd = JD.from_clock(reading, with_time=params.with_time)
    response = TodayResponse(
        jd=jd.value,
        jdn=jd.jdn,
        weekday=weekday_name(jd),
        dates=_dates_for(jd),
        with_time=params.with_time,
    )
    _log_request("today", start_time, with_time=params.with_time, jd=jd.value)
    return response
