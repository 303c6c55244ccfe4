from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .core.engine import BodyModel, BodyRegistry
from .core.time import DateLike, TimeLike
from .core.types import GeoPosition, HorizontalCoordinates, RiseSet

_log = logging.getLogger(__name__)
_registry: Optional[BodyRegistry] = None

def set_registry(reg: BodyRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> BodyRegistry:
    if _registry is None:
        raise RuntimeError("Body registry not initialized")
    return _registry

def list_bodies() -> List[str]:
    return _reg().list()

def body_info(body: str) -> Dict[str, Any]:
    return _reg().get(body).info()

def register_body(name: str, model: BodyModel, *, overwrite: bool = False) -> None:
    _reg().register(name, model, overwrite=overwrite)
    _log.debug("registered body %r (overwrite=%s)", name, overwrite)

def position(body: str, t: Optional[TimeLike] = None) -> GeoPosition:
    """Geographic sub-point of `body` at `t` (default: now)."""
    return _reg().get(body).position(t)

def azimuth_elevation(body: str, observer: GeoPosition, t: Optional[TimeLike] = None) -> HorizontalCoordinates:
    return _reg().get(body).azimuth_elevation(observer, t)

def rise_set(body: str, observer: GeoPosition, d: Optional[DateLike] = None, **options: Any) -> RiseSet:
    """
    Rise and set instants (UTC) on a calendar day.

    Options are passed through to the body model: `horizon_elevation` and
    `equation_of_time` for the Sun, `step_minutes` for the Moon.
    """
    return _reg().get(body).rise_set(observer, d, **options)
