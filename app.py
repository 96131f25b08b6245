# app.py
# ============================================================
# Place Picker - App Router
# Thin shell: config, init, pages list, route.
# get_pages() -> list of (key, title, module_name)
# ============================================================

from __future__ import annotations
from typing import Dict, List, Tuple
import streamlit as st

from utils.router import resolve_renderer
from utils.app_init import init_session_state, header
from utils.runtime import env_flag, load_settings

APP_VERSION = "0.1.0"
IMPORT_ONLY = env_flag("PLACE_PICKER_APP_IMPORT_ONLY")

if not IMPORT_ONLY:
    st.set_page_config(
        page_title="PlacePicker",
        page_icon="🌍",
        layout="wide",
        initial_sidebar_state="expanded",
    )


def get_pages() -> List[Tuple[str, str, str]]:
    """
    Page registry as 3-tuples: (key, human_title, module_name)
    """
    return [
        ("place_picker",  "Place Picker",  "screens.place_picker"),
        ("sync_activity", "Sync Activity", "screens.sync_activity"),
    ]


def main() -> None:
    if IMPORT_ONLY:
        # Import-only path for router tests
        return

    settings = load_settings()
    init_session_state(APP_VERSION, settings)

    pages = get_pages()
    keys_in_order = [k for (k, _, _) in pages]
    titles_in_order = [t for (_, t, _) in pages]
    module_for_key: Dict[str, str] = {k: m for (k, _, m) in pages}
    title_for_key: Dict[str, str] = {k: t for (k, t, _) in pages}

    with st.sidebar:
        st.markdown("### PlacePicker")
        st.caption(f"App version: {APP_VERSION}")
        st.divider()
        current_key = st.session_state.get("current_page", keys_in_order[0])
        default_idx = keys_in_order.index(current_key) if current_key in keys_in_order else 0
        choice_title = st.radio("Navigate", titles_in_order, index=default_idx, key="nav_radio")
        choice_key = next(k for k, t in title_for_key.items() if t == choice_title)
        st.divider()
        st.caption(f"Backend: `{settings.api_url}`")
        if settings.reference_point is not None:
            st.caption(f"Location: {settings.reference_point.lat:.4f}, {settings.reference_point.lng:.4f}")

    st.session_state["current_page"] = choice_key

    header(title_for_key[choice_key], APP_VERSION)

    renderer = resolve_renderer(module_for_key[choice_key])
    try:
        renderer()
    except Exception as e:
        st.exception(e)


if __name__ == "__main__":
    main()
