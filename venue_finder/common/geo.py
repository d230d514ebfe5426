"""Great-circle helpers for radius queries."""

from __future__ import annotations

import math

EARTH_RADIUS_KM = 6371.0


def to_radians(degrees: float) -> float:
    return degrees * math.pi / 180


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Kilometres between two points using the spherical law of cosines.

    The result is rounded to 2 decimals with the built-in ``round``.
    """

    lat1, lon1 = to_radians(lat1), to_radians(lon1)
    lat2, lon2 = to_radians(lat2), to_radians(lon2)
    cosine = math.sin(lat1) * math.sin(lat2) + math.cos(lat1) * math.cos(lat2) * math.cos(lon1 - lon2)
    # Float error can push identical points just past 1.0.
    cosine = min(1.0, max(-1.0, cosine))
    return round(math.acos(cosine) * EARTH_RADIUS_KM, 2)
