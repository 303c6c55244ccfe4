from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

from .time import DateLike, TimeLike
from .types import GeoPosition, HorizontalCoordinates, RiseSet

class BodyModel(Protocol):
    def info(self) -> Dict[str, Any]: ...
    def position(self, t: Optional[TimeLike] = None) -> GeoPosition: ...
    def azimuth_elevation(self, observer: GeoPosition, t: Optional[TimeLike] = None) -> HorizontalCoordinates: ...
    def rise_set(self, observer: GeoPosition, d: Optional[DateLike] = None, **options: Any) -> RiseSet: ...

@dataclass
class BodyRegistry:
    _bodies: Dict[str, BodyModel]

    def get(self, name: str) -> BodyModel:
        if name not in self._bodies:
            raise KeyError(f"Unknown body '{name}'. Available: {sorted(self._bodies)}")
        return self._bodies[name]

    def list(self) -> List[str]:
        return sorted(self._bodies.keys())

    def register(self, name: str, body: BodyModel, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._bodies):
            raise KeyError(f"Body '{name}' already exists. Use overwrite=True to replace.")
        self._bodies[name] = body
