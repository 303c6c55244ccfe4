from __future__ import annotations

import math

from ..core.errors import InvalidArgumentError


# ------------------------------------------------------------
# Units & constants
# ------------------------------------------------------------

DEGREES_PER_CIRCLE = 360.0
HOURS_PER_DAY = 24.0
DEGREES_PER_HOUR = DEGREES_PER_CIRCLE / HOURS_PER_DAY  # 15 deg of hour angle per hour

J2000 = 2451545.0  # JD at 2000-01-01 12:00 UTC
DAYS_PER_CENTURY = 36525.0

# Standard altitude of the Sun's upper limb at rise/set: refraction + semi-diameter.
DEFAULT_HORIZON_ELEVATION = -0.833


def require_finite(x: float, what: str = "angle") -> float:
    if not math.isfinite(x):
        raise InvalidArgumentError(f"{what} must be finite, got {x!r}")
    return x


# ------------------------------------------------------------
# Angle wrapping
# ------------------------------------------------------------

def normalize_angle(angle_deg: float) -> float:
    """Wrap degrees to [0,360). Rejects NaN and infinities."""
    require_finite(angle_deg)
    y = math.fmod(angle_deg, DEGREES_PER_CIRCLE)
    if y < 0.0:
        y += DEGREES_PER_CIRCLE
    # -1e-17 + 360.0 rounds to 360.0
    if y >= DEGREES_PER_CIRCLE:
        y = 0.0
    return y


def normalize_longitude(longitude_deg: float) -> float:
    """Wrap a longitude to [-180,180]."""
    y = normalize_angle(longitude_deg)
    if y > 180.0:
        y -= DEGREES_PER_CIRCLE
    return y


def wrap180(deg: float) -> float:
    """Re-centre an angle in degrees to (-180,180]; used for hour angles and differences."""
    return normalize_longitude(deg)


def deg_to_hours(deg: float) -> float:
    return deg / DEGREES_PER_HOUR


# ------------------------------------------------------------
# Time variable
# ------------------------------------------------------------

def days_since_j2000(jd: float) -> float:
    """n = JD - 2451545.0, the time variable of the solar series."""
    return jd - J2000


def T_centuries(jd: float) -> float:
    """Julian centuries from J2000.0, the time variable of GMST and the lunar series."""
    return (jd - J2000) / DAYS_PER_CENTURY
