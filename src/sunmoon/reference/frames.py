r"""
sunmoon.reference.frames
------------------------
Coordinate-frame transformations shared by the solar and lunar models.

ecliptic (lambda, beta) -> equatorial (RA, dec) -> horizontal (azimuth, elevation)
                                               \-> geographic sub-point

Angles are carried in degrees between steps and converted to radians only
inside the trigonometry. Equatorial coordinates are the one exception: they
are stored in radians, with degree views on the record.
"""

from __future__ import annotations

import math

from ..core.types import EclipticCoordinates, EquatorialCoordinates, GeoPosition, HorizontalCoordinates
from . import astro_args as aa

# Elevations this close to +-90 deg have no meaningful azimuth.
ZENITH_TOLERANCE_DEG = 1e-5


def ecliptic_to_equatorial(ecl: EclipticCoordinates, obliquity_deg: float) -> EquatorialCoordinates:
    """
      RA  = atan2(sin(lambda) cos(eps) - tan(beta) sin(eps), cos(lambda))
      dec = asin(sin(beta) cos(eps) + cos(beta) sin(eps) sin(lambda))

    With beta = 0 this reduces to the solar form
      RA = atan2(cos(eps) sin(lambda), cos(lambda)),  dec = asin(sin(eps) sin(lambda)).
    """
    lam = math.radians(ecl.longitude)
    beta = math.radians(ecl.latitude)
    eps = math.radians(obliquity_deg)

    y = math.sin(lam) * math.cos(eps) - math.tan(beta) * math.sin(eps)
    x = math.cos(lam)
    ra = math.atan2(y, x)
    dec = math.asin(math.sin(beta) * math.cos(eps) + math.cos(beta) * math.sin(eps) * math.sin(lam))
    return EquatorialCoordinates(right_ascension=ra, declination=dec)


def subpoint(eq: EquatorialCoordinates, gmst_deg: float) -> GeoPosition:
    """
    Geographic point with the body at the zenith: latitude = declination,
    longitude = RA - GMST (the meridian where the hour angle is zero).
    """
    longitude = aa.normalize_longitude(eq.right_ascension_deg - gmst_deg)
    return GeoPosition(latitude=eq.declination_deg, longitude=longitude)


def hour_angle_deg(gmst_deg: float, longitude_deg_east: float, ra_deg: float) -> float:
    """Local hour angle in (-180,180], positive west of the meridian."""
    lst = aa.normalize_angle(gmst_deg + longitude_deg_east)
    return aa.wrap180(lst - ra_deg)


def equatorial_to_horizontal(
    eq: EquatorialCoordinates,
    observer: GeoPosition,
    gmst_deg: float,
) -> HorizontalCoordinates:
    """
      sin(h) = sin(phi) sin(dec) + cos(phi) cos(dec) cos(H)
      A      = atan2(-sin(H), tan(dec) cos(phi) - sin(phi) cos(H))

    Azimuth is measured from North through East and wrapped to [0,360).
    At the zenith (and nadir) it is undefined; 0.0 is returned there.
    """
    ha = math.radians(hour_angle_deg(gmst_deg, observer.longitude, eq.right_ascension_deg))
    dec = eq.declination
    phi = math.radians(observer.latitude)

    sin_h = math.sin(phi) * math.sin(dec) + math.cos(phi) * math.cos(dec) * math.cos(ha)
    elevation = math.degrees(math.asin(max(-1.0, min(1.0, sin_h))))

    if abs(elevation) >= 90.0 - ZENITH_TOLERANCE_DEG:
        return HorizontalCoordinates(azimuth=0.0, elevation=elevation)

    az = math.atan2(
        -math.sin(ha),
        math.tan(dec) * math.cos(phi) - math.sin(phi) * math.cos(ha),
    )
    return HorizontalCoordinates(azimuth=aa.normalize_angle(math.degrees(az)), elevation=elevation)
