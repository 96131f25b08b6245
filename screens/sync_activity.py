# screens/sync_activity.py
import pandas as pd
import streamlit as st

from utils.eventlog import sync_log_path

COLUMNS = ["ts_utc", "event", "phase", "count", "place_id", "message"]


def transitions_frame(transitions: list[dict]) -> pd.DataFrame:
    """Newest first, fixed column order; missing fields are blank."""
    df = pd.DataFrame(transitions, columns=COLUMNS)
    return df.iloc[::-1].reset_index(drop=True).fillna("")


def render() -> None:
    st.header("Sync Activity")
    controller = st.session_state["sync_controller"]
    settings = st.session_state["settings"]

    df = transitions_frame(controller.transitions)
    if df.empty:
        st.info("No sync activity yet in this session.")
    else:
        rolled_back = int(df["event"].str.endswith("_rolled_back").sum())
        c1, c2, c3 = st.columns(3)
        c1.metric("Events", len(df))
        c2.metric("Picked places", len(controller.picked))
        c3.metric("Rollbacks", rolled_back)
        st.dataframe(df, hide_index=True)

    st.caption(f"Log file: `{sync_log_path(settings.session_slug)}`")
