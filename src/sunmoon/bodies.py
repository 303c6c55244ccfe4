"""
sunmoon.bodies
--------------
Adapters that expose the solar and lunar reference models through the common
BodyModel interface used by the registry.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .core.time import DateLike, TimeLike
from .core.types import GeoPosition, HorizontalCoordinates, RiseSet
from .reference import astro_args as aa
from .reference import lunar, riseset, solar


@dataclass(frozen=True)
class SolarBody:
    horizon_elevation: float = aa.DEFAULT_HORIZON_ELEVATION

    def info(self) -> Dict[str, Any]:
        return {
            "body": "sun",
            "model": "two-term equation of centre, linear obliquity",
            "rise_set": "closed form at local solar noon",
            "horizon_elevation": self.horizon_elevation,
        }

    def position(self, t: Optional[TimeLike] = None) -> GeoPosition:
        return solar.get_position(t)

    def azimuth_elevation(self, observer: GeoPosition, t: Optional[TimeLike] = None) -> HorizontalCoordinates:
        return solar.get_azimuth_elevation(observer, t)

    def rise_set(self, observer: GeoPosition, d: Optional[DateLike] = None, **options: Any) -> RiseSet:
        options.setdefault("horizon_elevation", self.horizon_elevation)
        return solar.get_rise_set(observer, d, **options)


@dataclass(frozen=True)
class LunarBody:
    step_minutes: int = riseset.DEFAULT_STEP_MINUTES

    def info(self) -> Dict[str, Any]:
        return {
            "body": "moon",
            "model": "13 longitude / 8 latitude periodic terms, cubic obliquity",
            "rise_set": "sampled scan, first crossing of each kind",
            "step_minutes": self.step_minutes,
        }

    def position(self, t: Optional[TimeLike] = None) -> GeoPosition:
        return lunar.get_position(t)

    def azimuth_elevation(self, observer: GeoPosition, t: Optional[TimeLike] = None) -> HorizontalCoordinates:
        return lunar.get_azimuth_elevation(observer, t)

    def rise_set(self, observer: GeoPosition, d: Optional[DateLike] = None, **options: Any) -> RiseSet:
        options.setdefault("step_minutes", self.step_minutes)
        return lunar.get_next_rise_set(observer, d, **options)
