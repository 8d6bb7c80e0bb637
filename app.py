"""
Badminton Session Tracker - Streamlit UI
A thin interface over the engine: it loads state from the store, calls the
engine with plain data and renders the results.
"""

from datetime import date

import streamlit as st

from config.default_params import DEFAULT_DATA_DIR
from engine.errors import StoreError
from engine.logs import get_logger
from engine.roster import fixed_roster, roster_is_locked
from engine.store import JsonStore
from components.actions import TrackerActions, init_state, show_flash
from components.sessions_tab import render_sessions_tab
from components.settings_tab import render_settings_tab
from components.players_tab import render_players_tab
from components.summary_tab import render_summary_tab

log = get_logger("app")

st.set_page_config(
    page_title="Badminton Session Tracker",
    page_icon="🏸",
    layout="wide"
)


@st.cache_resource
def get_store(data_dir=DEFAULT_DATA_DIR):
    log.info("Using data directory %s", data_dir)
    return JsonStore(data_dir)


def render_store_failure(store, error):
    st.error(f"😕 Saved data could not be loaded: {error}")
    st.caption("Stored data has no migration path. Resetting clears all players, sessions and settings.")
    if st.button("Reset stored data", type="primary"):
        try:
            store.reset()
        except StoreError as e:
            st.error(str(e))
            return
        st.rerun()


def main():
    st.title("🏸 Badminton Session Tracker")
    st.caption("Monday & Wednesday sessions, monthly cost split")

    store = get_store()
    locked = roster_is_locked()
    try:
        init_state(store, fixed_roster() if locked else None)
    except StoreError as e:
        render_store_failure(store, e)
        st.stop()

    actions = TrackerActions(store, roster_locked=locked)
    today = date.today()
    show_flash()

    left, right = st.columns([2, 1])
    with left:
        tab1, tab2 = st.tabs(["📅 Sessions", "⚙️ Monthly Settings"])
        with tab1:
            render_sessions_tab(actions, today)
        with tab2:
            render_settings_tab(actions, today)
    with right:
        render_players_tab(actions)
        st.divider()
        st.subheader("📊 Monthly Summary")
        render_summary_tab(actions, today)


if __name__ == "__main__":
    main()
