from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

from ..core.errors import InvalidArgumentError
from . import astro_args as aa


# ============================================================
# Calendar -> JD (Meeus, Astronomical Algorithms ch. 7)
# ============================================================

def julian_date_from_calendar(year: int, month: int, day: float) -> float:
    """
    Proleptic Gregorian calendar date with fractional day -> Julian Date.

    January and February count as months 13 and 14 of the previous year:
      A  = floor(Y/100),  B = 2 - A + floor(A/4)
      JD = floor(365.25 (Y+4716)) + floor(30.6001 (M+1)) + D + B - 1524.5
    """
    if month <= 2:
        year -= 1
        month += 12

    A = year // 100
    B = 2 - A + A // 4

    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day
        + B
        - 1524.5
    )


def julian_date(dt: datetime) -> float:
    """
    datetime -> JD (UTC).

    The calendar fields are read as UTC. Naive datetimes are accepted as UTC;
    an aware datetime must already be at offset zero (see sunmoon.core.time.to_utc).
    """
    offset = dt.utcoffset()
    if offset is not None and offset != timedelta(0):
        raise InvalidArgumentError(f"julian_date needs a UTC datetime, got offset {offset}")

    seconds = dt.second + dt.microsecond / 1e6
    day = dt.day + (dt.hour + (dt.minute + seconds / 60.0) / 60.0) / 24.0
    return julian_date_from_calendar(dt.year, dt.month, day)


_JD_UNIX_EPOCH = 2440587.5  # JD at 1970-01-01 00:00:00 UTC


def jd_to_datetime_utc(jd: float) -> datetime:
    """
    JD (UTC) -> timezone-aware datetime in UTC.
    """
    return datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(days=jd - _JD_UNIX_EPOCH)


# ============================================================
# Sidereal time
# ============================================================

def gmst_from_jd(jd: float) -> float:
    """
    Greenwich Mean Sidereal Time in degrees [0,360) (IAU 1982 polynomial).

      GMST = 280.46061837 + 360.98564736629 (JD - 2451545.0)
             + 0.000387933 T^2 - T^3 / 38710000
    """
    T = aa.T_centuries(jd)
    gmst = (
        280.46061837
        + 360.98564736629 * aa.days_since_j2000(jd)
        + 0.000387933 * T * T
        - (T * T * T) / 38710000.0
    )
    return aa.normalize_angle(gmst)


def gmst(dt: datetime) -> float:
    return gmst_from_jd(julian_date(dt))


def local_sidereal_time(dt: datetime, longitude_deg_east: float) -> float:
    """Local mean sidereal time (degrees) at a longitude, positive East."""
    return aa.normalize_angle(gmst(dt) + longitude_deg_east)
