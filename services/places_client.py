"""
services/places_client.py

Remote Store Client: async HTTP calls against the places backend.

    GET  /places        -> {"places": [...]}   available catalog
    GET  /user-places   -> {"places": [...]}   the user's picked places
    PUT  /user-places   <- {"places": [...]}   replace picked places wholesale

Non-2xx responses raise ServerError, transport failures raise NetworkError.
One AsyncClient per call so the client is safe to reuse across event loops
(Streamlit drives each action with its own asyncio.run).
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence

import httpx

from state import Place
from utils.constants import (
    DEFAULT_TIMEOUT_S,
    MSG_HTTP_FETCH_PLACES,
    MSG_HTTP_FETCH_USER_PLACES,
    MSG_HTTP_UPDATE_USER_PLACES,
)

HEADERS = {
    "Accept": "application/json",
    "User-Agent": "PlacePicker/0.1",
}


class RemoteStoreError(Exception):
    """Base for failures talking to the places backend. str(exc) is user-facing."""


class NetworkError(RemoteStoreError):
    pass


class ServerError(RemoteStoreError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def resolve_image_url(base_url: str, src: str) -> str:
    """Join an image path onto the backend base URL; absolute URLs pass through."""
    if not src:
        return ""
    if src.startswith(("http://", "https://", "data:")):
        return src
    return f"{base_url.rstrip('/')}/{src.lstrip('/')}"


def _parse_places(body: Any, message: str, status_code: int) -> List[Place]:
    if not isinstance(body, dict) or not isinstance(body.get("places"), list):
        raise ServerError(message, status_code)
    try:
        return [Place.from_dict(item) for item in body["places"]]
    except ValueError as e:
        raise ServerError(f"{message}: {e}", status_code) from e


class PlacesClient:
    def __init__(
        self,
        base_url: str,
        *,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        # Injected transport lets tests use httpx.MockTransport
        self._transport = transport

    def image_url(self, place: Place) -> str:
        return resolve_image_url(self.base_url, place.image.src)

    async def _request(self, method: str, path: str, message: str, json_body: Optional[Dict[str, Any]] = None) -> Any:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout_s,
                headers=HEADERS,
                transport=self._transport,
            ) as client:
                r = await client.request(method, path, json=json_body)
        except httpx.HTTPError as e:
            raise NetworkError(str(e) or message) from e

        if not r.is_success:
            raise ServerError(message, r.status_code)
        try:
            return r.json()
        except ValueError as e:
            raise ServerError(message, r.status_code) from e

    async def fetch_available_places(self) -> List[Place]:
        body = await self._request("GET", "/places", MSG_HTTP_FETCH_PLACES)
        return _parse_places(body, MSG_HTTP_FETCH_PLACES, 200)

    async def fetch_user_places(self) -> List[Place]:
        body = await self._request("GET", "/user-places", MSG_HTTP_FETCH_USER_PLACES)
        return _parse_places(body, MSG_HTTP_FETCH_USER_PLACES, 200)

    async def replace_user_places(self, places: Sequence[Place]) -> str:
        """Replace the remote list. Returns the backend's confirmation message."""
        payload = {"places": [p.to_dict() for p in places]}
        body = await self._request("PUT", "/user-places", MSG_HTTP_UPDATE_USER_PLACES, json_body=payload)
        if isinstance(body, dict):
            return str(body.get("message", ""))
        return ""
