from __future__ import annotations

from typing import Iterable

import pytest
from fastapi.testclient import TestClient

from calendar_api import app
from calendars.julian import julian_to_jd


@pytest.fixture(scope="module")
def api_client() -> Iterable[TestClient]:
    with TestClient(app) as client:
        yield client


def test_health_endpoint(api_client: TestClient) -> None:
    response = api_client.get("/health")
    assert response.status_code == 200
    payload = response.json()
    assert payload["ok"] is True
    assert payload["calendars"] == ["gregorian", "julian", "islamic", "hebrew"]


def test_convert_to_every_calendar(api_client: TestClient) -> None:
    response = api_client.get(
        "/convert",
        params={"calendar": "gregorian", "year": 2000, "month": 1, "day": 1, "hour": 12},
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["ok"] is True
    assert payload["jd"] == 2451545.0
    assert payload["jdn"] == 2451545
    assert payload["weekday"] == "Saturday"
    assert set(payload["dates"]) == {"gregorian", "julian", "islamic", "hebrew"}
    julian = payload["dates"]["julian"]
    assert (julian["year"], julian["month"], julian["day"], julian["hour"]) == (1999, 12, 19, 12)
    assert payload["source"]["formatted"] == "Saturday, January 1 2000 CE, 12:00:00 pm"


def test_convert_to_target_calendar(api_client: TestClient) -> None:
    response = api_client.get(
        "/convert",
        params={
            "calendar": "gregorian",
            "year": 2023,
            "month": 9,
            "day": 16,
            "target": "hebrew",
        },
    )
    assert response.status_code == 200
    dates = response.json()["dates"]
    assert list(dates) == ["hebrew"]
    assert (dates["hebrew"]["year"], dates["hebrew"]["month"], dates["hebrew"]["day"]) == (
        5784,
        7,
        1,
    )
    assert dates["hebrew"]["month_name"] == "Tishri"


def test_date_range_error(api_client: TestClient) -> None:
    response = api_client.get(
        "/convert",
        params={"calendar": "gregorian", "year": 2023, "month": 2, "day": 29},
    )
    assert response.status_code == 400
    payload = response.json()
    assert payload["ok"] is False
    assert payload["code"] == "date_range"


@pytest.mark.parametrize(
    "params",
    [
        {"calendar": "gregorian", "year": 2023, "month": 14, "day": 1},
        {"calendar": "mayan", "year": 2023, "month": 1, "day": 1},
        {"calendar": "gregorian", "year": 2023, "month": 1},
    ],
)
def test_validation_error(api_client: TestClient, params) -> None:
    response = api_client.get("/convert", params=params)
    assert response.status_code == 422
    payload = response.json()
    assert payload["code"] == "validation_error"
    assert payload["ok"] is False


def test_jd_endpoint(api_client: TestClient) -> None:
    response = api_client.get("/jd", params={"jd": 2460203.5})
    assert response.status_code == 200
    payload = response.json()
    assert payload["jdn"] == 2460204
    hebrew = payload["dates"]["hebrew"]
    assert (hebrew["year"], hebrew["month"], hebrew["day"]) == (5784, 7, 1)
    assert payload["dates"]["gregorian"]["formatted"] == (
        "Saturday, September 16 2023 CE, 12:00:00 am"
    )


def test_shift_by_months_clamps(api_client: TestClient) -> None:
    response = api_client.get(
        "/shift",
        params={
            "calendar": "gregorian",
            "year": 2024,
            "month": 1,
            "day": 31,
            "amount": 1,
            "unit": "months",
        },
    )
    assert response.status_code == 200
    payload = response.json()
    assert (payload["result"]["month"], payload["result"]["day"]) == (2, 29)
    assert payload["days_elapsed"] == 29
    assert payload["unit"] == "months"


def test_shift_backwards_by_days(api_client: TestClient) -> None:
    response = api_client.get(
        "/shift",
        params={"calendar": "gregorian", "year": 2024, "month": 3, "day": 1, "amount": -1},
    )
    assert response.status_code == 200
    payload = response.json()
    assert (payload["result"]["year"], payload["result"]["month"], payload["result"]["day"]) == (
        2024,
        2,
        29,
    )
    assert payload["days_elapsed"] == -1


def test_today_uses_pinned_clock(api_client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CALENDAR_FIXED_NOW", "2023-07-19T08:00:00")
    response = api_client.get("/today")
    assert response.status_code == 200
    payload = response.json()
    islamic = payload["dates"]["islamic"]
    assert (islamic["year"], islamic["month"], islamic["day"], islamic["hour"]) == (
        1445,
        1,
        1,
        8,
    )
    assert payload["with_time"] is True

    response = api_client.get("/today", params={"with_time": "false"})
    assert response.json()["jd"] == 2460144.5


def test_today_with_bad_clock_override(
    api_client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("CALENDAR_FIXED_NOW", "yesterday")
    response = api_client.get("/today")
    assert response.status_code == 500
    assert response.json()["code"] == "http_500"


def test_jd_endpoint_on_renumbered_leap_day(api_client: TestClient) -> None:
    response = api_client.get("/jd", params={"jd": julian_to_jd(-4, 2, 29)})
    assert response.status_code == 200
    julian = response.json()["dates"]["julian"]
    assert (julian["year"], julian["month"], julian["day"]) == (5, 2, 29)
