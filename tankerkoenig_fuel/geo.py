from __future__ import annotations

from math import atan2, cos, radians, sin, sqrt
from typing import Mapping

from .const import EARTH_RADIUS_M


def distance_km(origin: Mapping[str, float], target: Mapping[str, float]) -> float:
    """Great-circle distance between two ``{"lat", "lng"}`` points in kilometres.

    Uses the haversine formula on a spherical earth of radius 6,371 km.
    """
    d_lat = radians(target["lat"] - origin["lat"])
    d_lng = radians(target["lng"] - origin["lng"])
    a = (
        sin(d_lat / 2) ** 2
        + cos(radians(origin["lat"])) * cos(radians(target["lat"])) * sin(d_lng / 2) ** 2
    )
    c = 2 * atan2(sqrt(a), sqrt(1 - a))
    return EARTH_RADIUS_M * c / 1000
