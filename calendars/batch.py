"""Vectorised conversion helpers over numpy arrays.

Conversions are pure, so large inputs can be split into independent chunks
and fanned out over joblib workers.
"""

from __future__ import annotations

import json
import logging
import time
from typing import List, Optional

import numpy as np
from joblib import Parallel, cpu_count, delayed

from .convert import calendar_class

__all__ = ["DATE_DTYPE", "to_jd_array", "from_jd_array"]

LOGGER = logging.getLogger(__name__)

DATE_DTYPE = np.dtype(
    [
        ("year", np.int64),
        ("month", np.int64),
        ("day", np.int64),
        ("hour", np.int64),
        ("minute", np.int64),
        ("second", np.float64),
    ]
)


def _effective_jobs(n_jobs: int, size: int) -> int:
    if n_jobs < 0:
        n_jobs = cpu_count() + 1 + n_jobs
    return max(1, min(n_jobs, size))


def _log_batch(calendar: str, direction: str, size: int, jobs: int, started: float) -> None:
    LOGGER.info(
        json.dumps(
            {
                "event": "batch_convert",
                "calendar": calendar,
                "direction": direction,
                "size": size,
                "jobs": jobs,
                "duration_ms": round((time.perf_counter() - started) * 1000, 3),
            }
        )
    )


def to_jd_array(
    calendar: str,
    years,
    months,
    days,
    hours=0,
    minutes=0,
    seconds=0.0,
) -> np.ndarray:
    """Convert calendar components to Julian Days element-wise.

    Parameters
    ----------
    calendar:
        Registered calendar name.
    years, months, days, hours, minutes, seconds:
        Array-likes broadcast against each other.

    Returns
    -------
    numpy.ndarray
        ``float64`` array of JDs with the broadcast shape.

    Raises
    ------
    DateRangeError
        If any element is not a valid date of the calendar.
    """

    started = time.perf_counter()
    cls = calendar_class(calendar)
    y, m, d, h, mi, s = np.broadcast_arrays(
        np.asarray(years, dtype=np.int64),
        np.asarray(months, dtype=np.int64),
        np.asarray(days, dtype=np.int64),
        np.asarray(hours, dtype=np.int64),
        np.asarray(minutes, dtype=np.int64),
        np.asarray(seconds, dtype=np.float64),
    )
    out = np.empty(y.shape, dtype=np.float64)
    for index in np.ndindex(y.shape):
        date = cls(
            int(y[index]),
            int(m[index]),
            int(d[index]),
            int(h[index]),
            int(mi[index]),
            float(s[index]),
        )
        out[index] = float(date.to_jd())
    _log_batch(cls.calendar, "to_jd", int(out.size), 1, started)
    return out


def _convert_chunk(calendar: str, jds: np.ndarray) -> np.ndarray:
    cls = calendar_class(calendar)
    chunk = np.empty(jds.shape[0], dtype=DATE_DTYPE)
    for i, value in enumerate(jds):
        chunk[i] = cls.from_jd(float(value)).as_tuple()
    return chunk


def from_jd_array(calendar: str, jds, n_jobs: Optional[int] = 1) -> np.ndarray:
    """Convert Julian Days to calendar dates element-wise.

    The result is a structured array with fields ``year``, ``month``,
    ``day``, ``hour``, ``minute`` and ``second`` and the shape of ``jds``.
    With ``n_jobs`` other than 1 the flattened input is split into one chunk
    per worker; ``-1`` uses every CPU.
    """

    started = time.perf_counter()
    cls = calendar_class(calendar)
    values = np.asarray(jds, dtype=np.float64)
    flat = values.ravel()

    jobs = _effective_jobs(1 if n_jobs is None else n_jobs, flat.size)
    if jobs == 1:
        result = _convert_chunk(cls.calendar, flat)
    else:
        chunks: List[np.ndarray] = Parallel(n_jobs=jobs)(
            delayed(_convert_chunk)(cls.calendar, part)
            for part in np.array_split(flat, jobs)
        )
        result = np.concatenate(chunks)

    _log_batch(cls.calendar, "from_jd", int(flat.size), jobs, started)
    return result.reshape(values.shape)
