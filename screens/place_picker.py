# screens/place_picker.py
"""
Place picker screen: picked list, available catalog, confirmation and error dialogs.
Screen is thin; every state change goes through the PlaceSyncController.
"""

import asyncio
import streamlit as st

from services.catalog import fixed_locator, load_available_places
from ui.blocks import app_header, error_panel, places_grid
from ui.dialogs import confirm_removal_dialog, error_dialog

ERROR_TITLE = "An error occurred!"


def _ensure_loaded(controller, client, settings) -> None:
    if not controller.initialized:
        with st.spinner("Fetching your places..."):
            asyncio.run(controller.initialize())
    if st.session_state.get("catalog_state") is None:
        with st.spinner("Fetching place data..."):
            st.session_state["catalog_state"] = asyncio.run(
                load_available_places(client, fixed_locator(settings.reference_point))
            )


def render() -> None:
    ss = st.session_state
    controller = ss["sync_controller"]
    client = ss["places_client"]
    settings = ss["settings"]

    _ensure_loaded(controller, client, settings)

    # One dialog per run; a pending error wins over the confirmation
    if controller.error_open:
        error_dialog(ERROR_TITLE, controller.sync_error.message, on_dismiss=controller.dismiss_error)
    elif controller.confirmation_open:
        confirm_removal_dialog(
            controller.pending,
            on_confirm=lambda: asyncio.run(controller.confirm_removal()),
            on_cancel=controller.cancel_removal,
        )

    app_header()

    fetch = controller.fetch_state
    if fetch.error is not None:
        error_panel(ERROR_TITLE, fetch.error.message)
    else:
        to_remove = places_grid(
            "I'd like to visit ...",
            controller.picked,
            is_loading=fetch.is_loading,
            loading_text="Fetching your places...",
            fallback_text="Select the places you would like to visit below.",
            action_label="Remove",
            key_prefix="picked",
            image_url=client.image_url,
        )
        if to_remove is not None:
            controller.request_removal(to_remove)
            st.rerun()

    st.divider()

    catalog = ss["catalog_state"]
    if catalog.error is not None:
        error_panel(ERROR_TITLE, catalog.error.message)
        return
    if settings.reference_point is None:
        st.caption("Location unavailable; places are shown in catalog order.")
    to_pick = places_grid(
        "Available Places",
        catalog.data or [],
        is_loading=catalog.is_loading,
        loading_text="Fetching place data...",
        fallback_text="No places available.",
        action_label="Pick",
        key_prefix="available",
        image_url=client.image_url,
    )
    if to_pick is not None:
        asyncio.run(controller.pick_place(to_pick))
        st.rerun()
