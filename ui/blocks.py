# ui/blocks.py
from __future__ import annotations
from typing import Callable, Optional, Sequence
import html
import streamlit as st

from state import Place

GRID_COLUMNS = 4


def _inject_places_css():
    # Written on every run; markdown elements do not survive a rerun
    st.markdown(
        """
        <style>
          /* Uniform card height so the grid lines up */
          .place-title { font-weight: 600; min-height: 2.6em; margin: 0.25rem 0; }
          .place-fallback { opacity: 0.75; text-align: center; padding: 1rem 0; }
          .places-header { text-align: center; }
          .places-header p { opacity: 0.8; }
        </style>
        """,
        unsafe_allow_html=True,
    )


def app_header() -> None:
    _inject_places_css()
    st.markdown(
        "<div class='places-header'>"
        "<h1>PlacePicker</h1>"
        "<p>Create your personal collection of places you would like to visit or you have visited.</p>"
        "</div>",
        unsafe_allow_html=True,
    )


def error_panel(title: str, message: str) -> None:
    """Inline error shown in place of a section's content."""
    st.error(f"**{title}**\n\n{message}")


def places_grid(
    title: str,
    places: Sequence[Place],
    *,
    is_loading: bool,
    loading_text: str,
    fallback_text: str,
    action_label: str,
    key_prefix: str,
    image_url: Optional[Callable[[Place], str]] = None,
) -> Optional[Place]:
    """
    Render a titled grid of places. Returns the place whose button was clicked, or None.
    - is_loading -> loading_text
    - empty and not loading -> fallback_text
    """
    st.subheader(title)

    if is_loading:
        st.markdown(f"<p class='place-fallback'>{html.escape(loading_text)}</p>", unsafe_allow_html=True)
        return None
    if not places:
        st.markdown(f"<p class='place-fallback'>{html.escape(fallback_text)}</p>", unsafe_allow_html=True)
        return None

    chosen: Optional[Place] = None
    for start in range(0, len(places), GRID_COLUMNS):
        cols = st.columns(GRID_COLUMNS)
        for col, place in zip(cols, places[start:start + GRID_COLUMNS]):
            with col:
                url = image_url(place) if image_url else ""
                if url:
                    st.image(url)
                st.markdown(f"<div class='place-title'>{html.escape(place.title)}</div>", unsafe_allow_html=True)
                if place.description:
                    st.caption(place.description)
                if st.button(action_label, key=f"{key_prefix}_{place.id}"):
                    chosen = place
    return chosen
