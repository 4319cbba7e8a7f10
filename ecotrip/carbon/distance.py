"""Deterministic great-circle distance."""

from __future__ import annotations

import math

from ecotrip.domain.constants import EARTH_RADIUS_KM
from ecotrip.domain.models import Coordinate


def haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(dlon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance on a spherical Earth.

    Ranges are not checked here; coordinates are expected to come from a
    geocoder that already produced valid latitude/longitude.
    """
    return haversine(a.latitude, a.longitude, b.latitude, b.longitude)
