# tests/test_riseset.py

import math
from datetime import date, datetime, timedelta, timezone

import pytest
from sunmoon.core.errors import InvalidArgumentError
from sunmoon.reference import riseset

DAY = date(2025, 4, 1)
START = datetime(2025, 4, 1, tzinfo=timezone.utc)


def _minutes(t: datetime) -> float:
    return (t - START).total_seconds() / 60.0


class CountingCurve:
    """Synthetic elevation: a sinusoid in minutes since 00:00, with a call counter."""

    def __init__(self, period_min: float, phase_min: float, offset: float = 0.0):
        self.period = period_min
        self.phase = phase_min
        self.offset = offset
        self.calls = 0

    def __call__(self, t: datetime) -> float:
        self.calls += 1
        return self.offset + math.sin(2.0 * math.pi * (_minutes(t) - self.phase) / self.period)


def test_one_rise_one_set():
    # rises at 06:00, sets at 18:00
    curve = CountingCurve(1440.0, 360.0)
    rs = riseset.scan_day(curve, DAY, 1)
    assert _minutes(rs.rise) == pytest.approx(360.0, abs=1.0 / 60.0)
    assert _minutes(rs.set) == pytest.approx(1080.0, abs=1.0 / 60.0)


def test_only_first_crossing_of_each_kind_is_reported():
    # twelve-hour period: rises at 03:00 and 15:00, sets at 09:00 and 21:00
    curve = CountingCurve(720.0, 180.0)
    rs = riseset.scan_day(curve, DAY, 1)
    assert _minutes(rs.rise) == pytest.approx(180.0, abs=1.0 / 60.0)
    assert _minutes(rs.set) == pytest.approx(540.0, abs=1.0 / 60.0)


def test_scan_stops_once_both_found():
    curve = CountingCurve(720.0, 180.0)
    riseset.scan_day(curve, DAY, 1)
    # the set at 09:00 is detected on the 09:01 sample
    assert curve.calls == 542


def test_no_crossing():
    below = CountingCurve(1440.0, 0.0, offset=-5.0)
    assert riseset.scan_day(below, DAY, 10) == (None, None)
    above = CountingCurve(1440.0, 0.0, offset=5.0)
    assert riseset.scan_day(above, DAY, 10) == (None, None)


def test_end_of_window_is_sampled():
    below = CountingCurve(1440.0, 0.0, offset=-5.0)
    riseset.scan_day(below, DAY, 60)
    assert below.calls == 25
    below = CountingCurve(1440.0, 0.0, offset=-5.0)
    riseset.scan_day(below, DAY, 1)
    assert below.calls == 1441


@pytest.mark.parametrize("step", [0, -3])
def test_step_clamped_to_one_minute(step):
    below = CountingCurve(1440.0, 0.0, offset=-5.0)
    riseset.scan_day(below, DAY, step)
    assert below.calls == 1441


def test_touching_zero_from_below_counts_as_rise():
    samples = {0: -1.0, 1: 0.0, 2: 1.0}

    def elevation_at(t):
        return samples[int(_minutes(t))]

    rs = riseset.scan_first_crossings(elevation_at, START, START + timedelta(minutes=2), timedelta(minutes=1))
    assert rs.rise == START + timedelta(minutes=1)
    assert rs.set is None


def test_linear_interpolation():
    samples = {0: 3.0, 10: -1.0}

    def elevation_at(t):
        return samples[int(_minutes(t))]

    rs = riseset.scan_first_crossings(elevation_at, START, START + timedelta(minutes=10), timedelta(minutes=10))
    assert rs.set == START + timedelta(minutes=7.5)
    assert rs.rise is None


def test_horizon_hour_angle():
    assert riseset.horizon_hour_angle_deg(0.0, 0.0, 0.0) == pytest.approx(90.0)
    assert riseset.horizon_hour_angle_deg(45.0, 0.0, 0.0) == pytest.approx(90.0)
    # summer days are longer than twelve hours in the north
    assert riseset.horizon_hour_angle_deg(50.0, 20.0, 0.0) > 90.0
    assert riseset.horizon_hour_angle_deg(-50.0, 20.0, 0.0) < 90.0


def test_horizon_hour_angle_none_for_circumpolar_and_never_rising():
    assert riseset.horizon_hour_angle_deg(80.0, -23.44) is None
    assert riseset.horizon_hour_angle_deg(80.0, 23.44) is None
    assert riseset.horizon_hour_angle_deg(90.0, 10.0) is None


def test_horizon_hour_angle_rejects_nan_horizon():
    with pytest.raises(InvalidArgumentError):
        riseset.horizon_hour_angle_deg(10.0, 10.0, math.nan)


def test_clock_hours_wrap_onto_same_date():
    assert riseset.clock_hours_to_utc(DAY, -1.5) == datetime(2025, 4, 1, 22, 30, tzinfo=timezone.utc)
    assert riseset.clock_hours_to_utc(DAY, 25.0) == datetime(2025, 4, 1, 1, 0, tzinfo=timezone.utc)
    assert riseset.clock_hours_to_utc(DAY, 6.25) == datetime(2025, 4, 1, 6, 15, tzinfo=timezone.utc)


def test_short_last_interval_reaches_end_of_window():
    # 7 does not divide 1440: samples at ..., 23:55, then 24:00
    def elevation_at(t):
        return -1.0 if _minutes(t) < 1438.0 else 1.0

    calls = []

    def counted(t):
        calls.append(t)
        return elevation_at(t)

    rs = riseset.scan_day(counted, DAY, 7)
    assert calls[-1] == START + timedelta(days=1)
    assert calls[-2] == START + timedelta(minutes=1435)
    assert len(calls) == 207
    assert rs.rise == START + timedelta(minutes=1437.5)
    assert rs.set is None


@pytest.mark.parametrize("step", [math.nan, math.inf, 2.5])
def test_step_must_be_finite_whole_minutes(step):
    with pytest.raises(InvalidArgumentError):
        riseset.scan_day(CountingCurve(1440.0, 0.0), DAY, step)


def test_integral_float_step_is_accepted():
    a = CountingCurve(1440.0, 360.0)
    b = CountingCurve(1440.0, 360.0)
    assert riseset.scan_day(a, DAY, 2.0) == riseset.scan_day(b, DAY, 2)
    assert a.calls == b.calls
