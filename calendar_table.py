"""Print month tables of a calendar alongside the other supported calendars.

Usage::

    python calendar_table.py <calendar> [year | start-end | y1,y2,...] [--jobs N]
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from joblib import Parallel, cpu_count, delayed

from calendars import CalendarError, calendar_class, calendar_names, convert, today
from calendars.clock import current_local_time
from calendars.formatting import month_name, weekday_name

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthRow:
    month: int
    name: str
    first_jd: float
    length: int
    weekday: str
    others: Tuple[Tuple[str, str], ...]


def parse_year_arguments(arg: str) -> List[int]:
    """Parse a single year, a ``start-end`` range or a comma separated list."""

    years: List[int] = []
    parts = [p.strip() for p in arg.split(",") if p.strip()]
    if not parts:
        raise ValueError("year argument is empty")

    for part in parts:
        # A leading minus is the sign of an astronomical year, not a range.
        dash = part.find("-", 1)
        if dash > 0:
            start = int(part[:dash])
            end = int(part[dash + 1:])
            if end < start:
                raise ValueError(f"range {part} ends before it starts")
            years.extend(range(start, end + 1))
        else:
            years.append(int(part))

    # Drop duplicates, keep input order.
    seen = set()
    ordered_years: List[int] = []
    for year in years:
        if year not in seen:
            ordered_years.append(year)
            seen.add(year)

    return ordered_years


def build_year(calendar: str, year: int) -> List[MonthRow]:
    """Return one row per month of ``year`` in ``calendar``."""

    cls = calendar_class(calendar)
    others = [name for name in calendar_names() if name != cls.calendar]

    rows: List[MonthRow] = []
    for month in range(1, cls.months_in_year(year) + 1):
        first = cls(year, month, 1)
        jd = first.to_jd()
        equivalents = []
        for name in others:
            other = convert(first, name)
            equivalents.append((name, f"{other.year}-{other.month:02d}-{other.day:02d}"))
        rows.append(
            MonthRow(
                month=month,
                name=month_name(cls.calendar, month),
                first_jd=jd.value,
                length=cls.days_in_month_of(year, month),
                weekday=weekday_name(jd),
                others=tuple(equivalents),
            )
        )
    return rows


def render_year(calendar: str, year: int, rows: Sequence[MonthRow]) -> str:
    lines = [f"{calendar.capitalize()} year {year}", "-" * 72]
    for row in rows:
        others = "  ".join(f"{name}: {value}" for name, value in row.others)
        lines.append(
            f"{row.month:>2} {row.name:<16} JD {row.first_jd:>11.1f}  "
            f"{row.length:>2} days  {row.weekday:<9}  {others}"
        )
    return "\n".join(lines)


def _default_jobs() -> int:
    raw = os.environ.get("CALENDAR_TABLE_JOBS", "1")
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"CALENDAR_TABLE_JOBS must be an integer, got {raw!r}") from None


def build_tables(calendar: str, years: Sequence[int], jobs: int = 1) -> List[List[MonthRow]]:
    n_jobs = max(1, min(cpu_count() if jobs < 0 else jobs, len(years)))
    if n_jobs == 1:
        return [build_year(calendar, year) for year in years]
    return Parallel(n_jobs=n_jobs)(delayed(build_year)(calendar, year) for year in years)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print the months of a calendar year with their Julian Days"
    )
    parser.add_argument("calendar", help=f"one of: {', '.join(calendar_names())}")
    parser.add_argument(
        "years", nargs="?", default=None, help="year, start-end range or comma list"
    )
    parser.add_argument("--jobs", type=int, default=None, help="worker processes (-1 = all CPUs)")
    args = parser.parse_args(argv)

    try:
        cls = calendar_class(args.calendar)
        if args.years is None:
            years = [today(cls.calendar, current_local_time(), with_time=False).year]
        else:
            years = parse_year_arguments(args.years)
        jobs = args.jobs if args.jobs is not None else _default_jobs()
    except (ValueError, CalendarError) as exc:
        print(f"invalid arguments: {exc}")
        return 1

    start_time = time.perf_counter()
    try:
        tables = build_tables(cls.calendar, years, jobs=jobs)
    except CalendarError as exc:
        print(f"cannot build table: {exc}")
        return 1

    for idx, (year, rows) in enumerate(zip(years, tables)):
        if idx:
            print("\n" + "=" * 72 + "\n")
        print(render_year(cls.calendar, year, rows))

    LOGGER.info(
        json.dumps(
            {
                "event": "table_built",
                "calendar": cls.calendar,
                "years": len(years),
                "jobs": jobs,
                "duration_ms": round((time.perf_counter() - start_time) * 1000.0, 3),
            }
        )
    )
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    sys.exit(main())
