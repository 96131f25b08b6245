"""
services/geo.py

Great-circle distance and proximity sort for the available-places catalog.
No Streamlit imports.
"""

from __future__ import annotations
from typing import List, Sequence
import math

from state import Coordinates, Place
from utils.constants import EARTH_RADIUS_KM


def distance(a: Coordinates, b: Coordinates) -> float:
    """Haversine distance in km. Symmetric, non-negative, 0.0 for identical points."""
    if a == b:
        return 0.0
    p1 = math.radians(a.lat)
    p2 = math.radians(b.lat)
    dlat = math.radians(b.lat - a.lat)
    dlng = math.radians(b.lng - a.lng)
    s = math.sin(dlat / 2) ** 2 + math.cos(p1) * math.cos(p2) * math.sin(dlng / 2) ** 2
    c = 2 * math.atan2(math.sqrt(s), math.sqrt(1 - s))
    return EARTH_RADIUS_KM * c


def sort_places_by_distance(places: Sequence[Place], origin: Coordinates) -> List[Place]:
    """Return a new list ordered by ascending distance from origin; ties keep catalog order."""
    return sorted(places, key=lambda p: distance(origin, p.coordinates))
