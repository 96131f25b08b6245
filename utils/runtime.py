"""
utils/runtime.py
----------------
Environment-driven settings and small runtime helpers used by the app shell and screens.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import os

from state import Coordinates
from utils.constants import DEFAULT_API_URL, DEFAULT_TIMEOUT_S


def env_flag(name: str) -> bool:
    """Return True iff the environment variable is exactly '1' (trimmed)."""
    return os.environ.get(name, "").strip() == "1"


def _env_float(name: str) -> Optional[float]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    timeout_s: float = DEFAULT_TIMEOUT_S
    session_slug: str = "dev"
    reference_point: Optional[Coordinates] = None


def load_settings() -> Settings:
    """
    Read PLACE_PICKER_* variables. Invalid numbers fall back to defaults;
    the reference point is set only when both LAT and LNG parse.
    """
    lat = _env_float("PLACE_PICKER_LAT")
    lng = _env_float("PLACE_PICKER_LNG")
    timeout = _env_float("PLACE_PICKER_TIMEOUT_S")
    return Settings(
        api_url=(os.environ.get("PLACE_PICKER_API_URL") or DEFAULT_API_URL).rstrip("/"),
        timeout_s=timeout if timeout and timeout > 0 else DEFAULT_TIMEOUT_S,
        session_slug=os.environ.get("PLACE_PICKER_SLUG") or "dev",
        reference_point=Coordinates(lat=lat, lng=lng) if lat is not None and lng is not None else None,
    )
