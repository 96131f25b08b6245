# utils/app_init.py
# Centralized init helpers to keep app.py clean.

from __future__ import annotations
from typing import Optional
import streamlit as st

from services.place_sync import PlaceSyncController
from services.places_client import PlacesClient
from utils.eventlog import sync_log
from utils.runtime import Settings


def build_controller(settings: Settings, client: Optional[PlacesClient] = None) -> PlaceSyncController:
    """Controller wired to the backend client and the slug's JSONL sync log."""
    client = client or PlacesClient(settings.api_url, timeout_s=settings.timeout_s)
    slug = settings.session_slug
    return PlaceSyncController(client, sink=lambda event: sync_log(slug, event))


def init_session_state(app_version: str, settings: Settings) -> None:
    """
    Initialize only non-widget keys. One client and one controller per browser session;
    reruns reuse them.
    """
    ss = st.session_state
    ss.setdefault("app_version", app_version)
    ss.setdefault("settings", settings)
    ss.setdefault("current_page", "place_picker")
    if "places_client" not in ss:
        ss["places_client"] = PlacesClient(settings.api_url, timeout_s=settings.timeout_s)
    if "sync_controller" not in ss:
        ss["sync_controller"] = build_controller(settings, ss["places_client"])
    ss.setdefault("catalog_state", None)


def header(title: str, version: str) -> None:
    st.markdown(
        f"<div style='display:flex;justify-content:space-between;align-items:center;'>"
        f"<h4 style='margin:0;opacity:0.8;'>{title}</h4>"
        f"<span style='opacity:0.7;'>v{version}</span>"
        f"</div>",
        unsafe_allow_html=True,
    )
