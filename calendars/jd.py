"""The Julian Day axis every calendar converts through, and typed durations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from .errors import DateRangeError, DurationError

__all__ = [
    "EARTH_ORBITAL_PERIOD_DAYS",
    "JD",
    "Duration",
    "Days",
    "Weeks",
    "Months",
    "Years",
    "jd_to_jdn",
    "split_jd",
    "difference",
]

# Mean sidereal year used to give ``Years`` a fixed day count on the JD axis.
EARTH_ORBITAL_PERIOD_DAYS = 365.256363004


def jd_to_jdn(jd: float) -> int:
    """Return the Julian Day Number (civil day) containing ``jd``.

    This is the one rounding rule applied at every date/JD boundary: shift by
    half a day so that days start at midnight, then truncate toward negative
    infinity.
    """

    return math.floor(jd + 0.5)


def split_jd(jd: float) -> Tuple[float, float]:
    """Split ``jd`` into the JD of the preceding midnight and a day fraction."""

    jdn = jd_to_jdn(jd)
    return jdn - 0.5, (jd + 0.5) - jdn


@dataclass(frozen=True)
class Duration:
    """A tagged quantity of time. Subclasses define how it maps to days."""

    value: float

    def to_days(self) -> float:
        raise DurationError(f"{type(self).__name__} has no fixed length in days")

    def __neg__(self) -> "Duration":
        return type(self)(-self.value)


@dataclass(frozen=True)
class Days(Duration):
    def to_days(self) -> float:
        return float(self.value)


@dataclass(frozen=True)
class Weeks(Duration):
    def to_days(self) -> float:
        return self.value * 7.0


@dataclass(frozen=True)
class Months(Duration):
    """Calendar months. Only a calendar's month arithmetic can apply these."""

    value: int


@dataclass(frozen=True)
class Years(Duration):
    def to_days(self) -> float:
        return self.value * EARTH_ORBITAL_PERIOD_DAYS


@dataclass(frozen=True, order=True)
class JD:
    """A point on the continuous Julian Day axis.

    Construction is unchecked: any real number is a valid JD. Integer values
    fall on local noon; ``x.5`` values fall on local midnight.
    """

    value: float

    @property
    def jdn(self) -> int:
        return jd_to_jdn(self.value)

    @property
    def day_fraction(self) -> float:
        return split_jd(self.value)[1]

    @classmethod
    def from_clock(
        cls, reading: Sequence[Union[int, float]], with_time: bool = True
    ) -> "JD":
        """Return the JD of a Gregorian wall-clock reading.

        ``reading`` is the ``(year, month, day, hour, minute, second)`` tuple
        produced by :func:`calendars.clock.current_local_time`.  With
        ``with_time=False`` the JD of the preceding midnight is returned.
        """

        from .gregorian import GregorianDate

        if len(reading) != 6:
            raise DateRangeError(f"Clock reading must have 6 fields, got {len(reading)}")
        year, month, day, hour, minute, second = reading
        if not with_time:
            hour, minute, second = 0, 0, 0.0
        return GregorianDate(
            int(year), int(month), int(day), int(hour), int(minute), second
        ).to_jd()

    def add(self, duration: Duration) -> "JD":
        """Return a new JD shifted forward by a fixed-length ``duration``."""

        if not isinstance(duration, Duration):
            raise DurationError(f"Cannot add {type(duration).__name__} to a Julian Day")
        if isinstance(duration, Months):
            raise DurationError(
                "Months have no fixed length; apply them through a calendar date"
            )
        return JD(self.value + duration.to_days())

    def subtract(self, duration: Duration) -> "JD":
        if not isinstance(duration, Duration):
            raise DurationError(
                f"Cannot subtract {type(duration).__name__} from a Julian Day"
            )
        return self.add(-duration)

    def __add__(self, other: object) -> "JD":
        if isinstance(other, Duration):
            return self.add(other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> Union["JD", float]:
        if isinstance(other, JD):
            return self.value - other.value
        if isinstance(other, Duration):
            return self.subtract(other)
        return NotImplemented

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return f"JD {self.value}"


def difference(a: Union[JD, float], b: Union[JD, float]) -> float:
    """Return the signed number of days from ``b`` to ``a``."""

    return float(a) - float(b)
