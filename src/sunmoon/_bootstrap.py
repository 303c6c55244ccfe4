from __future__ import annotations
from sunmoon.core.engine import BodyRegistry
from sunmoon.bodies import LunarBody, SolarBody

def build_registry() -> BodyRegistry:
    return BodyRegistry({"sun": SolarBody(), "moon": LunarBody()})
