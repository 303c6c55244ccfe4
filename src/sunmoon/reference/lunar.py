# reference/lunar.py

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Optional, Sequence, Tuple

from ..core.time import DateLike, TimeLike, to_utc, utc_date, utc_now
from ..core.types import (
    EclipticCoordinates,
    EquatorialCoordinates,
    FundamentalArguments,
    GeoPosition,
    HorizontalCoordinates,
    RiseSet,
)
from . import astro_args as aa
from . import frames
from . import riseset
from . import time_scales as ts

_log = logging.getLogger(__name__)

Term = Tuple[int, int, int, int, float]

# (d, m, m', f, coefficient in degrees): coefficient * sin(d D + m M + m' M' + f F)
# The thirteen largest periodic terms of the lunar longitude (evection,
# variation, annual equation, reduction to the ecliptic, parallactic inequality...).
LUNAR_LON_TERMS: Tuple[Term, ...] = (
    (0, 0, 1, 0, 6.289),
    (2, 0, -1, 0, 1.274),
    (2, 0, 0, 0, 0.658),
    (0, 0, 2, 0, 0.214),
    (0, 1, 0, 0, -0.186),
    (0, 0, 0, 2, -0.114),
    (2, 0, -2, 0, 0.059),
    (2, -1, -1, 0, 0.057),
    (2, 0, 1, 0, 0.053),
    (2, -1, 0, 0, 0.046),
    (1, 0, 0, 0, 0.041),
    (1, 0, 1, 0, -0.035),
    (1, 0, -1, 0, -0.030),
)

# Eight leading terms of the lunar latitude, same layout.
LUNAR_LAT_TERMS: Tuple[Term, ...] = (
    (0, 0, 0, 1, 5.128),
    (0, 0, 1, 1, 0.280),
    (0, 0, 1, -1, 0.277),
    (2, 0, 0, -1, 0.173),
    (2, 0, -1, 1, 0.055),
    (2, 0, -1, -1, 0.046),
    (2, 0, 0, 1, 0.033),
    (0, 0, 2, 1, 0.017),
)

# Earth-Moon distance, cosine terms in km.
LUNAR_DIST_MEAN_KM = 385000.56
LUNAR_DIST_TERMS: Tuple[Term, ...] = (
    (0, 0, 1, 0, -20905.12),
    (2, 0, -1, 0, -3699.11),
    (2, 0, 0, 0, -2956.21),
    (0, 0, 2, 0, -569.92),
)


def fundamental_arguments(T: float) -> FundamentalArguments:
    """
    Lunar mean elements (degrees, each wrapped to [0,360)), T in Julian centuries:
      L  = 218.316 + 13.176396 * 36525 T
      D  = 297.8502 + 445267.1115 T - 0.0016300 T^2 + T^3/545868  - T^4/113065000
      M  = 357.5291 + 35999.0503  T - 0.0001559 T^2 - 0.00000048 T^3
      M' = 134.9634 + 477198.8675 T + 0.0087414 T^2 + T^3/69699   - T^4/14712000
      F  = 93.2720  + 483202.0175 T - 0.0036539 T^2 - T^3/3526000 + T^4/863310000
    """
    T2 = T * T
    T3 = T2 * T
    T4 = T2 * T2

    L = 218.316 + 13.176396 * aa.DAYS_PER_CENTURY * T
    D = (
        297.8502
        + 445267.1115 * T
        - 0.0016300 * T2
        + (T3 / 545868.0)
        - (T4 / 113065000.0)
    )
    M = (
        357.5291
        + 35999.0503 * T
        - 0.0001559 * T2
        - 0.00000048 * T3
    )
    Mp = (
        134.9634
        + 477198.8675 * T
        + 0.0087414 * T2
        + (T3 / 69699.0)
        - (T4 / 14712000.0)
    )
    F = (
        93.2720
        + 483202.0175 * T
        - 0.0036539 * T2
        - (T3 / 3526000.0)
        + (T4 / 863310000.0)
    )

    return FundamentalArguments(
        mean_longitude=aa.normalize_angle(L),
        mean_elongation=aa.normalize_angle(D),
        solar_mean_anomaly=aa.normalize_angle(M),
        lunar_mean_anomaly=aa.normalize_angle(Mp),
        argument_of_latitude=aa.normalize_angle(F),
    )


def _periodic_sum(args: FundamentalArguments, terms: Sequence[Term], fn=math.sin) -> float:
    D, M, Mp, F = args.D_rad, args.M_rad, args.Mp_rad, args.F_rad
    total = 0.0
    for d, m, mp, f, coef in terms:
        total += coef * fn(d * D + m * M + mp * Mp + f * F)
    return total


def ecliptic_coordinates(args: FundamentalArguments) -> EclipticCoordinates:
    """Geocentric ecliptic longitude ([0,360)) and latitude (signed) in degrees."""
    lam = aa.normalize_angle(args.mean_longitude + _periodic_sum(args, LUNAR_LON_TERMS))
    beta = _periodic_sum(args, LUNAR_LAT_TERMS)
    return EclipticCoordinates(longitude=lam, latitude=beta)


def lunar_distance_km(args: FundamentalArguments) -> float:
    return LUNAR_DIST_MEAN_KM + _periodic_sum(args, LUNAR_DIST_TERMS, fn=math.cos)


def obliquity_deg(T: float) -> float:
    """Mean obliquity with secular decrease, T in Julian centuries."""
    return 23.439291 - 0.0130042 * T - 0.00000016 * T * T + 0.000000504 * T * T * T


def equatorial_coordinates(ecliptic: EclipticCoordinates, T: float) -> EquatorialCoordinates:
    return frames.ecliptic_to_equatorial(ecliptic, obliquity_deg(T))


def lunar_equatorial(jd: float) -> EquatorialCoordinates:
    T = aa.T_centuries(jd)
    return equatorial_coordinates(ecliptic_coordinates(fundamental_arguments(T)), T)


# ============================================================
# Public entry points
# ============================================================

def get_lunar_coordinates(time: Optional[TimeLike] = None) -> EquatorialCoordinates:
    utc_time = to_utc(time) if time is not None else utc_now()
    return lunar_equatorial(ts.julian_date(utc_time))


def get_distance_km(time: Optional[TimeLike] = None) -> float:
    utc_time = to_utc(time) if time is not None else utc_now()
    T = aa.T_centuries(ts.julian_date(utc_time))
    return lunar_distance_km(fundamental_arguments(T))


def get_position(time: Optional[TimeLike] = None) -> GeoPosition:
    """Sublunar point at the given instant; defaults to now."""
    utc_time = to_utc(time) if time is not None else utc_now()
    jd = ts.julian_date(utc_time)
    return frames.subpoint(lunar_equatorial(jd), ts.gmst_from_jd(jd))


def get_azimuth_elevation(observer: GeoPosition, time: Optional[TimeLike] = None) -> HorizontalCoordinates:
    """Geocentric azimuth (from North, eastward) and elevation of the Moon in degrees."""
    utc_time = to_utc(time) if time is not None else utc_now()
    jd = ts.julian_date(utc_time)
    return frames.equatorial_to_horizontal(lunar_equatorial(jd), observer, ts.gmst_from_jd(jd))


def get_next_rise_set(
    observer: GeoPosition,
    date: Optional[DateLike] = None,
    step_minutes: int = riseset.DEFAULT_STEP_MINUTES,
) -> RiseSet:
    """
    First moonrise and first moonset between 00:00 UTC of the date and 00:00 UTC
    of the next day, found by sampling the elevation every `step_minutes`
    (a whole number of minutes, minimum 1) and interpolating linearly across
    the sign change. The window end is always sampled.

    A missing crossing is None. If the Moon rises (or sets) twice in the
    window only the first is reported; scan sub-windows to find the rest.
    """
    d = utc_date(date) if date is not None else utc_now().date()

    def elevation_at(t: datetime) -> float:
        return get_azimuth_elevation(observer, t).elevation

    rs = riseset.scan_day(elevation_at, d, step_minutes)
    if rs.rise is None or rs.set is None:
        _log.debug("moon on %s at %s: rise=%s set=%s", d, observer, rs.rise, rs.set)
    return rs


def get_next_rise_set_today(observer: GeoPosition, step_minutes: int = riseset.DEFAULT_STEP_MINUTES) -> RiseSet:
    return get_next_rise_set(observer, utc_now().date(), step_minutes)
