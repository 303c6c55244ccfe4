"""
sunmoon.reference.riseset
-------------------------
Horizon-crossing solvers.

- horizon_hour_angle_deg: closed-form hour angle of a body at a given altitude
  (used for the Sun, whose declination barely moves within a day).
- scan_first_crossings: sample an elevation function over a window and
  interpolate the first upward and first downward zero crossing (used for the
  Moon, whose declination and hour-angle rate change too fast for a single
  closed-form evaluation).
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime, timedelta
from typing import Callable, Optional

from ..core.errors import InvalidArgumentError
from ..core.types import RiseSet
from . import astro_args as aa
from ..core.time import day_start_utc

_log = logging.getLogger(__name__)

DEFAULT_STEP_MINUTES = 1


def horizon_hour_angle_deg(
    latitude_deg: float,
    declination_deg: float,
    horizon_elevation_deg: float = aa.DEFAULT_HORIZON_ELEVATION,
) -> Optional[float]:
    """
    Hour angle H0 (degrees, [0,180]) at which a body of fixed declination
    reaches the given altitude:

      cos H0 = (sin h0 - sin(phi) sin(dec)) / (cos(phi) cos(dec))

    Returns None when |cos H0| > 1 (the body stays below or above h0 all day).
    """
    aa.require_finite(horizon_elevation_deg, "horizon elevation")
    phi = math.radians(latitude_deg)
    dec = math.radians(declination_deg)
    h0 = math.radians(horizon_elevation_deg)

    denom = math.cos(phi) * math.cos(dec)
    if denom == 0.0:
        _log.debug("hour angle undefined at latitude %.6f, declination %.6f", latitude_deg, declination_deg)
        return None
    cos_H0 = (math.sin(h0) - math.sin(phi) * math.sin(dec)) / denom

    if cos_H0 > 1.0:
        _log.debug("never reaches %.3f deg (cos H0 = %.4f): no rise", horizon_elevation_deg, cos_H0)
        return None
    if cos_H0 < -1.0:
        _log.debug("never drops to %.3f deg (cos H0 = %.4f): no set", horizon_elevation_deg, cos_H0)
        return None

    return math.degrees(math.acos(cos_H0))


def clock_hours_to_utc(d: date, hours: float) -> datetime:
    """UTC instant `hours` after 00:00 UTC of `d`, with hours wrapped to [0,24)."""
    wrapped = hours % aa.HOURS_PER_DAY
    return day_start_utc(d) + timedelta(hours=wrapped)


def _interpolate(t1: datetime, el1: float, t2: datetime, el2: float) -> datetime:
    frac = el1 / (el1 - el2)
    return t1 + (t2 - t1) * frac


def scan_first_crossings(
    elevation_at: Callable[[datetime], float],
    start: datetime,
    end: datetime,
    step: timedelta,
) -> RiseSet:
    """
    Edge-triggered horizon scan over [start, end] (both ends sampled; the last
    interval is shortened when step does not divide the window).

    A pair of adjacent samples with el1 < 0 <= el2 is a rise and one with
    el1 > 0 >= el2 is a set. Only the first of each kind is reported; the scan
    stops as soon as both are known. A second rise or set later in the window
    is not reported.
    """
    rise: Optional[datetime] = None
    set_: Optional[datetime] = None

    prev_t: Optional[datetime] = None
    prev_el = 0.0
    n_samples = 0

    t = start
    while True:
        el = elevation_at(t)
        n_samples += 1

        if prev_t is not None:
            if rise is None and prev_el < 0.0 <= el:
                rise = _interpolate(prev_t, prev_el, t, el)
            elif set_ is None and prev_el > 0.0 >= el:
                set_ = _interpolate(prev_t, prev_el, t, el)

            if rise is not None and set_ is not None:
                break

        if t >= end:
            break
        prev_t, prev_el = t, el
        t = min(t + step, end)

    _log.debug("scan %s..%s: %d samples, rise=%s set=%s", start, end, n_samples, rise, set_)
    return RiseSet(rise=rise, set=set_)


def scan_day(
    elevation_at: Callable[[datetime], float],
    d: date,
    step_minutes: int = DEFAULT_STEP_MINUTES,
) -> RiseSet:
    """scan_first_crossings over d@00:00 UTC .. d+1@00:00 UTC."""
    aa.require_finite(step_minutes, "step_minutes")
    if step_minutes != int(step_minutes):
        raise InvalidArgumentError(f"step_minutes must be a whole number, got {step_minutes!r}")
    step = max(1, int(step_minutes))
    if step != step_minutes:
        _log.debug("step_minutes=%r clamped to %d", step_minutes, step)
    start = day_start_utc(d)
    return scan_first_crossings(elevation_at, start, start + timedelta(days=1), timedelta(minutes=step))
