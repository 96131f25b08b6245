# ui/dialogs.py
"""
Modal dialogs for the place picker.
- Visibility is decided by the caller (controller state); these only render.
- Streamlit allows one open dialog per run, so callers show at most one.
- Buttons run the callback then rerun the whole app so the main view reflects the new state.
- Closing with X / Esc / outside click runs the same callback as No / Okay via on_dismiss,
  so the controller never keeps a pending removal or error the user has closed.
"""

from __future__ import annotations
from typing import Callable
import streamlit as st

from state import Place


def confirm_removal_dialog(place: Place, on_confirm: Callable[[], None], on_cancel: Callable[[], None]) -> None:
    @st.dialog("Are you sure?", on_dismiss=on_cancel)
    def _dialog() -> None:
        st.write(f"Do you really want to remove **{place.title}**?")
        col_no, col_yes = st.columns(2)
        if col_no.button("No", key="confirm_removal_no"):
            on_cancel()
            st.rerun()
        if col_yes.button("Yes", type="primary", key="confirm_removal_yes"):
            on_confirm()
            st.rerun()

    _dialog()


def error_dialog(title: str, message: str, on_dismiss: Callable[[], None]) -> None:
    @st.dialog(title, on_dismiss=on_dismiss)
    def _dialog() -> None:
        st.write(message)
        if st.button("Okay", key="error_dialog_okay"):
            on_dismiss()
            st.rerun()

    _dialog()
