"""
state.py

Central data types shared by services and screens: places, coordinates,
errors, fetch lifecycle and removal phases.
Non-UI, pure types. Wire parsing lives here so services and tests agree on one shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float


@dataclass(frozen=True)
class ImageRef:
    src: str
    alt: str = ""


@dataclass(frozen=True)
class Place:
    id: str
    title: str
    image: ImageRef
    coordinates: Coordinates
    description: str = ""

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Place":
        """Parse a place from the backend payload.

        Accepts top-level "lat"/"lon" (backend format) or a nested
        "coordinates": {"lat", "lng"}. "image" may be {"src", "alt"} or a bare path.
        Raises ValueError on a missing or blank id.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"place payload must be an object, got {type(raw).__name__}")
        pid = raw.get("id")
        if not isinstance(pid, str) or not pid.strip():
            raise ValueError(f"place id must be a non-empty string, got {pid!r}")

        img = raw.get("image") or {}
        if isinstance(img, str):
            image = ImageRef(src=img, alt=str(raw.get("title", "")))
        else:
            image = ImageRef(src=str(img.get("src", "")), alt=str(img.get("alt", "")))

        coords = raw.get("coordinates")
        try:
            if isinstance(coords, dict):
                coordinates = Coordinates(lat=float(coords["lat"]), lng=float(coords["lng"]))
            else:
                coordinates = Coordinates(lat=float(raw["lat"]), lng=float(raw.get("lon", raw.get("lng"))))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"place {pid!r} has invalid coordinates") from e

        return cls(
            id=pid,
            title=str(raw.get("title", "")),
            image=image,
            coordinates=coordinates,
            description=str(raw.get("description", "")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Backend wire format."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "image": {"src": self.image.src, "alt": self.image.alt},
            "lat": self.coordinates.lat,
            "lon": self.coordinates.lng,
        }


@dataclass(frozen=True)
class SyncError:
    message: str


@dataclass
class FetchState:
    """One-shot fetch lifecycle: loading -> data | error."""
    is_loading: bool = False
    data: Optional[List[Place]] = None
    error: Optional[SyncError] = None

    def start(self) -> None:
        self.is_loading = True
        self.data = None
        self.error = None

    def succeed(self, data: List[Place]) -> None:
        self.data = list(data)
        self.is_loading = False

    def fail(self, message: str) -> None:
        self.error = SyncError(message=message)
        self.is_loading = False


class RemovalPhase(str, Enum):
    IDLE = "idle"
    PENDING_CONFIRMATION = "pending_confirmation"
    COMMITTING = "committing"


def place_ids(places: List[Place]) -> List[str]:
    return [p.id for p in places]


def dedupe_by_id(places: List[Place]) -> List[Place]:
    """Drop repeated ids, keeping the first occurrence and original order."""
    seen: set[str] = set()
    out: List[Place] = []
    for p in places:
        if p.id in seen:
            continue
        seen.add(p.id)
        out.append(p)
    return out
