from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import NamedTuple, Optional

from .errors import InvalidArgumentError
from ..reference.astro_args import normalize_angle


@dataclass(frozen=True)
class GeoPosition:
    """A point on the Earth's surface (degrees, longitude positive East).

    Used both for observers and for computed sub-points of the Sun and Moon.
    """
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.latitude) and math.isfinite(self.longitude)):
            raise InvalidArgumentError(f"non-finite coordinates: ({self.latitude!r}, {self.longitude!r})")
        if not -90.0 <= self.latitude <= 90.0:
            raise InvalidArgumentError(f"latitude {self.latitude} outside [-90, 90]")
        if not -180.0 <= self.longitude <= 180.0:
            raise InvalidArgumentError(f"longitude {self.longitude} outside [-180, 180]")


@dataclass(frozen=True)
class FundamentalArguments:
    """Lunar mean elements in degrees, each wrapped to [0,360)."""
    mean_longitude: float        # L
    mean_elongation: float       # D
    solar_mean_anomaly: float    # M
    lunar_mean_anomaly: float    # M'
    argument_of_latitude: float  # F

    @property
    def D_rad(self) -> float: return math.radians(self.mean_elongation)
    @property
    def M_rad(self) -> float: return math.radians(self.solar_mean_anomaly)
    @property
    def Mp_rad(self) -> float: return math.radians(self.lunar_mean_anomaly)
    @property
    def F_rad(self) -> float: return math.radians(self.argument_of_latitude)


@dataclass(frozen=True)
class EclipticCoordinates:
    longitude: float  # lambda, degrees [0,360)
    latitude: float   # beta, degrees, signed


@dataclass(frozen=True)
class EquatorialCoordinates:
    """Right ascension and declination in radians."""
    right_ascension: float
    declination: float

    @property
    def right_ascension_deg(self) -> float:
        return normalize_angle(math.degrees(self.right_ascension))

    @property
    def declination_deg(self) -> float:
        return math.degrees(self.declination)


class HorizontalCoordinates(NamedTuple):
    azimuth: float    # degrees from North, increasing East, [0,360)
    elevation: float  # degrees above the horizon


class RiseSet(NamedTuple):
    rise: Optional[datetime]
    set: Optional[datetime]
