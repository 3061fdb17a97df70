"""
Calendar time to Julian Day conversion.

All timestamps are interpreted in UTC. The Gregorian-calendar formula is
used for every date (proleptic before 1582).
"""

from __future__ import annotations

import calendar
import math
import numbers
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional, Union

from solar_orbit.core.constants import DAYS_PER_JULIAN_CENTURY, J2000_JD
from solar_orbit.core.diagnostics import LoggerLike, get_logger
from solar_orbit.core.errors import InvalidInput, OrbitError, OrbitResult


@dataclass(frozen=True)
class CalendarTimestamp:
    """
    Raw UTC calendar fields. month is 1-based (January = 1).
    """
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: float = 0.0

    def validate(self) -> None:
        for name in ("year", "month", "day", "hour", "minute"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidInput(f"{name} must be an integer. Got: {value!r}")
        if isinstance(self.second, bool) or not isinstance(self.second, numbers.Real):
            raise InvalidInput(f"second must be a real number. Got: {self.second!r}")
        if not (1 <= self.month <= 12):
            raise InvalidInput(f"Month must be in range [1, 12]. Got: {self.month}")
        days_in_month = calendar.mdays[self.month]
        if self.month == 2 and calendar.isleap(self.year):
            days_in_month += 1
        if not (1 <= self.day <= days_in_month):
            raise InvalidInput(f"Day must be in range [1, {days_in_month}]. Got: {self.day}")
        if not (0 <= self.hour <= 23):
            raise InvalidInput(f"Hour must be in range [0, 23]. Got: {self.hour}")
        if not (0 <= self.minute <= 59):
            raise InvalidInput(f"Minute must be in range [0, 59]. Got: {self.minute}")
        if not (math.isfinite(self.second) and 0.0 <= self.second < 60.0):
            raise InvalidInput(f"Second must be in range [0, 60). Got: {self.second}")


@dataclass(frozen=True)
class SpaceTime:
    """A UTC instant paired with its Julian Day."""
    date: datetime
    julian_day: float


TimestampLike = Union[datetime, date, CalendarTimestamp, str]


def _parse_iso(text: str) -> datetime:
    raw = text.strip()
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(raw)
    except ValueError as exc:
        raise InvalidInput(f"Unparseable timestamp: {text!r}") from exc


def _to_calendar(timestamp: TimestampLike) -> CalendarTimestamp:
    if isinstance(timestamp, CalendarTimestamp):
        return timestamp
    if isinstance(timestamp, str):
        timestamp = _parse_iso(timestamp)
    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is not None:
            try:
                timestamp = timestamp.astimezone(timezone.utc)
            except OverflowError as exc:
                raise InvalidInput(f"Timestamp out of range in UTC: {timestamp.isoformat()}") from exc
        second = timestamp.second + timestamp.microsecond / 1e6
        return CalendarTimestamp(timestamp.year, timestamp.month, timestamp.day,
                                 timestamp.hour, timestamp.minute, second)
    if isinstance(timestamp, date):
        return CalendarTimestamp(timestamp.year, timestamp.month, timestamp.day)
    raise InvalidInput(f"Unsupported timestamp type: {type(timestamp).__name__}")


def compute_julian_day(timestamp: TimestampLike) -> float:
    """
    Convert a UTC calendar timestamp to a Julian Day.

    Args:
        timestamp: datetime (naive values are taken as UTC), date,
            CalendarTimestamp or ISO-8601 string

    Returns:
        Julian Day (fractional part is the time of day, days start at noon)

    Raises:
        InvalidInput: unsupported or invalid timestamp, or non-finite result
    """
    ts = _to_calendar(timestamp)
    ts.validate()

    a = (14 - ts.month) // 12
    y = ts.year + 4800 - a
    m = ts.month + 12 * a - 3

    jd0 = ts.day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045

    hours = ts.hour + ts.minute / 60.0 + ts.second / 3600.0
    jd = jd0 + hours / 24.0 - 0.5

    if not math.isfinite(jd):
        raise InvalidInput(f"Julian Day is not finite for {ts}")
    return float(jd)


def try_julian_day(timestamp: TimestampLike) -> OrbitResult[float]:
    try:
        return OrbitResult.success(compute_julian_day(timestamp))
    except OrbitError as exc:
        return OrbitResult.failure(exc)


def to_julian_day(timestamp: Optional[TimestampLike], logger: Optional[LoggerLike] = None) -> float:
    """
    Fail-safe conversion: returns J2000_JD when the timestamp cannot be
    converted. The fallback looks like a valid date, so callers that need to
    tell the two apart should use try_julian_day instead.
    """
    log = get_logger(logger, __name__)
    result = try_julian_day(timestamp)  # type: ignore[arg-type]
    if not result.ok:
        log.warning("to_julian_day: %s; falling back to J2000 (%s)", result.error, J2000_JD)
        return J2000_JD
    log.debug("to_julian_day: %r -> %.6f", timestamp, result.value)
    return result.value  # type: ignore[return-value]


def centuries_since_j2000(julian_day: float) -> float:
    return (julian_day - J2000_JD) / DAYS_PER_JULIAN_CENTURY


def space_time(moment: datetime, logger: Optional[LoggerLike] = None) -> SpaceTime:
    """Pair a datetime with its (fail-safe) Julian Day."""
    return SpaceTime(date=moment, julian_day=to_julian_day(moment, logger=logger))
