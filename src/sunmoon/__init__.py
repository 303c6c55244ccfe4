"""sunmoon public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_bodies,
    body_info,
    register_body,
    position,
    azimuth_elevation,
    rise_set,
)
from .core.errors import SunMoonError, InvalidArgumentError
from .core.time import Instant, InstantKind, to_utc
from .core.types import GeoPosition, HorizontalCoordinates, RiseSet
from .reference import lunar, solar

__all__ = [
    "list_bodies",
    "body_info",
    "register_body",
    "position",
    "azimuth_elevation",
    "rise_set",
    "SunMoonError",
    "InvalidArgumentError",
    "Instant",
    "InstantKind",
    "to_utc",
    "GeoPosition",
    "HorizontalCoordinates",
    "RiseSet",
    "solar",
    "lunar",
]
