#ephemeris/skyfield_ref.py
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

from . import require_ephemeris
from ..core.types import GeoPosition


DEFAULT_KERNEL = "de421.bsp"


@dataclass
class SkyfieldReference:
    """
    Geocentric apparent RA/Dec and topocentric alt/az of the Sun and Moon from
    a JPL kernel, via skyfield.

    Requires optional deps:
      pip install "sunmoon[ephemeris]"
    The kernel is downloaded on first use and cached by skyfield.
    """
    ts: object
    eph: object

    @classmethod
    def load(cls, kernel: str = DEFAULT_KERNEL) -> "SkyfieldReference":
        require_ephemeris()
        from skyfield.api import load  # type: ignore

        return cls(ts=load.timescale(), eph=load(kernel))

    def _target(self, body: str):
        names = {"sun": "sun", "moon": "moon"}
        if body not in names:
            raise KeyError(f"Unknown body '{body}'. Available: {sorted(names)}")
        return self.eph[names[body]]

    def radec_deg(self, body: str, utc_time: datetime) -> Tuple[float, float]:
        """Apparent geocentric (RA, Dec) of date, degrees."""
        t = self.ts.from_datetime(utc_time)
        app = self.eph["earth"].at(t).observe(self._target(body)).apparent()
        ra, dec, _ = app.radec(epoch="date")
        return ra.hours * 15.0, dec.degrees

    def altaz_deg(self, body: str, observer: GeoPosition, utc_time: datetime) -> Tuple[float, float]:
        """Topocentric (azimuth, altitude) without refraction, degrees."""
        from skyfield.api import wgs84  # type: ignore

        t = self.ts.from_datetime(utc_time)
        site = self.eph["earth"] + wgs84.latlon(observer.latitude, observer.longitude)
        alt, az, _ = site.at(t).observe(self._target(body)).apparent().altaz()
        return az.degrees, alt.degrees


def angular_separation_deg(ra1: float, dec1: float, ra2: float, dec2: float) -> float:
    """Great-circle distance between two (RA, Dec) directions, degrees."""
    r1, d1, r2, d2 = map(math.radians, (ra1, dec1, ra2, dec2))
    c = math.sin(d1) * math.sin(d2) + math.cos(d1) * math.cos(d2) * math.cos(r1 - r2)
    return math.degrees(math.acos(max(-1.0, min(1.0, c))))
