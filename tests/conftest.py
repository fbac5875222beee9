from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest


@pytest.fixture(autouse=True)
def real_clock(monkeypatch: pytest.MonkeyPatch) -> Iterable[None]:
    monkeypatch.delenv("CALENDAR_FIXED_NOW", raising=False)
    monkeypatch.delenv("CALENDAR_TABLE_JOBS", raising=False)
    yield
