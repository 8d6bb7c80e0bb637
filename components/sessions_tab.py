"""Sessions tab: manual session entry and the session cards."""

from datetime import date

import streamlit as st

from engine.costs import session_total_cost, cost_per_player
from engine.generator import get_settings
from engine.manual import manual_session_defaults
from engine.months import month_key_for
from engine.rounding import format_vnd
from engine.roster import sort_sessions
from components.actions import flash


def render_add_session_form(actions, today: date):
    with st.expander("➕ Add New Session", expanded=False):
        c1, c2 = st.columns(2)
        with c1:
            day = st.date_input("Date", value=today, key="manual_date")
        with c2:
            is_holiday = st.checkbox("Holiday / Off", value=False, key="manual_holiday")

        month_settings = get_settings(actions.settings, month_key_for(day))
        draft, warning = manual_session_defaults(day, month_settings, actions.sessions, is_holiday)

        c1, c2 = st.columns(2)
        c1.metric("Court (computed)", format_vnd(draft.court_price))
        c2.metric("Shuttlecock (computed)", format_vnd(draft.shuttlecock_price))

        c1, c2 = st.columns(2)
        with c1:
            water = st.number_input("Water (VND)", min_value=0.0, value=float(draft.water_price),
                                    step=1000.0, key=f"manual_water_{day.isoformat()}_{is_holiday}")
        with c2:
            drink = st.number_input("Drink (VND)", min_value=0.0, value=0.0, step=1000.0, key="manual_drink")

        confirmed = True
        if warning:
            st.warning(f"⚠️ {warning}")
            confirmed = st.checkbox("Add anyway with these prices", value=False, key="manual_confirm")

        if st.button("Add Session", disabled=not confirmed, type="primary"):
            session = actions.add_manual_session(day, is_holiday, water, drink)
            if session is not None:
                flash("success", f"✅ Session added for {day.strftime('%a %d %b %Y')}")
            st.rerun()


def render_session_card(session, players, actions):
    total = session_total_cost(session)
    per_player = cost_per_player(session)
    with st.container(border=True):
        head, tail = st.columns([4, 1])
        with head:
            title = session.date.strftime('%A, %d %B %Y')
            if session.is_holiday:
                title += "  🏖️ Holiday"
            st.markdown(f"**{title}**")
            st.caption(
                f"Court {format_vnd(session.court_price)} · Shuttlecock {format_vnd(session.shuttlecock_price)} · "
                f"Water {format_vnd(session.water_price)} · Drink {format_vnd(session.drink_price)}"
            )
            line = f"Total: **{format_vnd(total)}**"
            if session.player_ids:
                line += f" · Per player: **{format_vnd(per_player)}** ({len(session.player_ids)} players)"
            st.markdown(line)
        with tail:
            st.button("🗑️ Delete", key=f"del-{session.id}", on_click=actions.delete_session, args=(session.id,))

        st.checkbox(
            "Mark as Holiday/Off",
            value=session.is_holiday,
            key=f"holiday-{session.id}-{session.is_holiday}",
            on_change=actions.set_holiday,
            args=(session.id, not session.is_holiday),
        )

        if not players:
            st.caption("Add players to check them in.")
            return
        cols = st.columns(4)
        for i, player in enumerate(players):
            checked = player.id in session.player_ids
            cols[i % 4].checkbox(
                player.name,
                value=checked,
                key=f"chk-{session.id}-{player.id}-{checked}",
                on_change=actions.toggle_player,
                args=(session.id, player.id),
            )


def render_sessions_tab(actions, today: date):
    render_add_session_form(actions, today)

    st.subheader("Recent Sessions")
    sessions = sort_sessions(actions.sessions, descending=True)
    if not sessions:
        st.info("No sessions recorded yet. Add one above or save monthly settings to generate them.")
        return
    for session in sessions:
        render_session_card(session, actions.players, actions)
