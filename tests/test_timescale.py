"""
Tests for calendar to Julian Day conversion.
"""
import logging
import math
from datetime import date, datetime, timedelta, timezone

import pytest

from solar_orbit.core.constants import J2000_JD
from solar_orbit.core.errors import InvalidInput
from solar_orbit.core.timescale import (
    CalendarTimestamp,
    centuries_since_j2000,
    compute_julian_day,
    space_time,
    to_julian_day,
    try_julian_day,
)


class TestComputeJulianDay:
    def test_j2000_epoch(self):
        jd = compute_julian_day(datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc))
        assert abs(jd - 2451545.0) < 0.01
        assert jd == 2451545.0

    def test_naive_datetime_is_utc(self):
        assert compute_julian_day(datetime(2000, 1, 1, 12)) == 2451545.0

    def test_aware_datetime_converted_to_utc(self):
        plus_one = timezone(timedelta(hours=1))
        assert compute_julian_day(datetime(2000, 1, 1, 13, tzinfo=plus_one)) == 2451545.0

    def test_iso_string_with_z(self):
        assert compute_julian_day("2000-01-01T12:00:00Z") == 2451545.0

    def test_date_is_midnight(self):
        assert compute_julian_day(date(2000, 1, 1)) == 2451544.5

    def test_calendar_timestamp(self):
        assert compute_julian_day(CalendarTimestamp(2000, 1, 1, 12)) == 2451545.0

    def test_known_date(self):
        # 1987-04-10 19:21 UT
        jd = compute_julian_day(CalendarTimestamp(1987, 4, 10, 19, 21))
        assert math.isclose(jd, 2446896.30625, abs_tol=1e-6)

    def test_fractional_seconds(self):
        jd = compute_julian_day(CalendarTimestamp(2000, 1, 1, 12, 0, 30.0))
        assert math.isclose(jd, 2451545.0 + 30.0 / 86400.0, abs_tol=1e-9)

    def test_march_after_leap_day(self):
        jd_feb = compute_julian_day(CalendarTimestamp(2024, 2, 29))
        jd_mar = compute_julian_day(CalendarTimestamp(2024, 3, 1))
        assert jd_mar - jd_feb == 1.0

    @pytest.mark.parametrize("timestamp", [
        "not a date",
        None,
        12345,
        CalendarTimestamp(2021, 2, 29),
        CalendarTimestamp(2021, 13, 1),
        CalendarTimestamp(2021, 1, 1, 24),
        CalendarTimestamp(2021, 1, 1, 0, 0, float("nan")),
        CalendarTimestamp(2000, "1", 1),
        CalendarTimestamp(2000, 1.5, 1),
        CalendarTimestamp(2000, 1, 1, 0, 0, "0"),
        datetime(1, 1, 1, tzinfo=timezone(timedelta(hours=1))),
        "0001-01-01T00:00:00+01:00",
    ])
    def test_invalid_timestamps_raise(self, timestamp):
        with pytest.raises(InvalidInput):
            compute_julian_day(timestamp)


class TestFailSafeConversion:
    def test_valid_timestamp_passes_through(self):
        assert to_julian_day(datetime(2000, 1, 1, 12)) == 2451545.0

    @pytest.mark.parametrize("timestamp", [
        "invalid",
        None,
        CalendarTimestamp(2021, 2, 30),
        CalendarTimestamp(2000, "1", 1),
        CalendarTimestamp(2000, 1.5, 1),
        CalendarTimestamp(2000, 1, 1, 0, 0, "0"),
        datetime(1, 1, 1, tzinfo=timezone(timedelta(hours=1))),
        "0001-01-01T00:00:00+01:00",
    ])
    def test_invalid_timestamp_returns_j2000(self, timestamp):
        assert to_julian_day(timestamp) == 2451545.0

    def test_fallback_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING):
            to_julian_day("invalid")
        assert any("falling back to J2000" in rec.getMessage() for rec in caplog.records)

    def test_injected_logger_receives_diagnostics(self, caplog):
        port = logging.getLogger("renderer.time")
        with caplog.at_level(logging.WARNING, logger="renderer.time"):
            to_julian_day(None, logger=port)
        assert [rec.name for rec in caplog.records] == ["renderer.time"]

    def test_try_julian_day_distinguishes_failure(self):
        ok = try_julian_day("2000-01-01T12:00:00Z")
        assert ok.ok and ok.value == 2451545.0

        bad = try_julian_day("invalid")
        assert not bad.ok
        assert bad.kind == "invalid_input"
        assert bad.value_or(J2000_JD) == J2000_JD


def test_centuries_since_j2000():
    assert centuries_since_j2000(J2000_JD) == 0.0
    assert centuries_since_j2000(J2000_JD + 36525.0) == 1.0


def test_space_time_pairs_date_and_julian_day():
    moment = datetime(2000, 1, 1, 12, tzinfo=timezone.utc)
    st = space_time(moment)
    assert st.date == moment
    assert st.julian_day == 2451545.0
