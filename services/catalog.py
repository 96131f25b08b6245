"""
services/catalog.py

One-shot load of the available-places catalog, sorted by distance from the
user's location when one is available.
"""

from __future__ import annotations
from typing import Any, Awaitable, Callable, Optional

from services.geo import sort_places_by_distance
from state import Coordinates, FetchState
from utils.constants import MSG_FETCH_CATALOG

Locator = Callable[[], Awaitable[Optional[Coordinates]]]


async def load_available_places(client: Any, locate: Optional[Locator] = None) -> FetchState:
    """
    Fetch the catalog into a fresh FetchState.
    A failing or empty `locate` keeps catalog order instead of failing the load.
    """
    fs = FetchState()
    fs.start()
    try:
        places = await client.fetch_available_places()
    except Exception as e:
        fs.fail(str(e).strip() or MSG_FETCH_CATALOG)
        return fs

    origin: Optional[Coordinates] = None
    if locate is not None:
        try:
            origin = await locate()
        except Exception:
            origin = None

    fs.succeed(sort_places_by_distance(places, origin) if origin is not None else list(places))
    return fs


def fixed_locator(point: Optional[Coordinates]) -> Locator:
    """Locator that resolves to a configured point (None means location unavailable)."""
    async def _locate() -> Optional[Coordinates]:
        return point
    return _locate
