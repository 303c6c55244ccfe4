# reference/solar.py

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from ..core.time import DateLike, TimeLike, to_utc, utc_date, utc_now, day_start_utc
from ..core.types import EclipticCoordinates, EquatorialCoordinates, GeoPosition, HorizontalCoordinates, RiseSet
from . import astro_args as aa
from . import frames
from . import riseset
from . import time_scales as ts

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolarMean:
    """Mean elements of the Sun (degrees, wrapped to [0,360))."""
    L_deg: float  # mean longitude
    g_deg: float  # mean anomaly


def solar_mean_elements(n: float) -> SolarMean:
    """
    n = JD - 2451545.0
      L = 280.460 + 0.9856474 n
      g = 357.528 + 0.9856003 n
    """
    return SolarMean(
        L_deg=aa.normalize_angle(280.460 + 0.9856474 * n),
        g_deg=aa.normalize_angle(357.528 + 0.9856003 * n),
    )


def ecliptic_longitude_deg(sm: SolarMean) -> float:
    """Equation of centre, two terms: lambda = L + 1.915 sin g + 0.020 sin 2g."""
    g = math.radians(sm.g_deg)
    return sm.L_deg + 1.915 * math.sin(g) + 0.020 * math.sin(2.0 * g)


def obliquity_deg(n: float) -> float:
    """Linear-in-days obliquity used with the solar series."""
    return 23.439 - 0.0000004 * n


def solar_equatorial(jd: float) -> EquatorialCoordinates:
    n = aa.days_since_j2000(jd)
    sm = solar_mean_elements(n)
    ecl = EclipticCoordinates(longitude=ecliptic_longitude_deg(sm), latitude=0.0)
    return frames.ecliptic_to_equatorial(ecl, obliquity_deg(n))


def equation_of_time_from_jd(jd: float) -> float:
    """
    Equation of time in minutes (apparent minus mean solar time):
      E = 4 * wrap180(L - 0.0057183 - RA)
    """
    sm = solar_mean_elements(aa.days_since_j2000(jd))
    ra_deg = solar_equatorial(jd).right_ascension_deg
    return 4.0 * aa.wrap180(sm.L_deg - 0.0057183 - ra_deg)


# ============================================================
# Public entry points
# ============================================================

def get_solar_coordinates(time: Optional[TimeLike] = None) -> EquatorialCoordinates:
    utc_time = to_utc(time) if time is not None else utc_now()
    return solar_equatorial(ts.julian_date(utc_time))


def equation_of_time_minutes(time: Optional[TimeLike] = None) -> float:
    utc_time = to_utc(time) if time is not None else utc_now()
    return equation_of_time_from_jd(ts.julian_date(utc_time))


def get_position(time: Optional[TimeLike] = None) -> GeoPosition:
    """Subsolar point (where the Sun is at the zenith) at the given instant; defaults to now."""
    utc_time = to_utc(time) if time is not None else utc_now()
    jd = ts.julian_date(utc_time)
    return frames.subpoint(solar_equatorial(jd), ts.gmst_from_jd(jd))


def get_azimuth_elevation(observer: GeoPosition, time: Optional[TimeLike] = None) -> HorizontalCoordinates:
    """Azimuth (from North, eastward) and elevation of the Sun in degrees."""
    utc_time = to_utc(time) if time is not None else utc_now()
    jd = ts.julian_date(utc_time)
    return frames.equatorial_to_horizontal(solar_equatorial(jd), observer, ts.gmst_from_jd(jd))


def get_rise_set(
    observer: GeoPosition,
    date: Optional[DateLike] = None,
    horizon_elevation: float = aa.DEFAULT_HORIZON_ELEVATION,
    *,
    equation_of_time: bool = True,
) -> RiseSet:
    """
    Sunrise and sunset (UTC) on a calendar day, closed form.

    Declination is taken at local solar noon (12h - lon/15, UTC clock) of the
    day. Rise/set are noon -+ H0/15 hours, wrapped to [0,24) on the same date,
    so for observers far from Greenwich one of them may belong to the
    neighbouring local day.

    Returns (None, None) for polar night and polar day. With
    equation_of_time=False the noon hour is the bare mean-time value.

    The declination is held at its noon value, so the Sun's elevation at the
    returned instants is within 0.1 deg of horizon_elevation at middle latitudes
    and within about 0.12 deg near +-65 deg around the equinoxes.
    """
    d = utc_date(date) if date is not None else utc_now().date()

    noon_hours = 12.0 - aa.deg_to_hours(observer.longitude)
    jd_noon = ts.julian_date(day_start_utc(d) + timedelta(hours=noon_hours))

    declination_deg = solar_equatorial(jd_noon).declination_deg
    H0 = riseset.horizon_hour_angle_deg(observer.latitude, declination_deg, horizon_elevation)
    if H0 is None:
        _log.debug("no sunrise/sunset on %s at %s", d, observer)
        return RiseSet(rise=None, set=None)

    if equation_of_time:
        noon_hours -= equation_of_time_from_jd(jd_noon) / 60.0

    half_arc = aa.deg_to_hours(H0)
    return RiseSet(
        rise=riseset.clock_hours_to_utc(d, noon_hours - half_arc),
        set=riseset.clock_hours_to_utc(d, noon_hours + half_arc),
    )


def get_rise_set_today(
    observer: GeoPosition,
    horizon_elevation: float = aa.DEFAULT_HORIZON_ELEVATION,
) -> RiseSet:
    return get_rise_set(observer, utc_now().date(), horizon_elevation)

