"""User actions: run the engine, persist, then publish the new state to the page."""

from datetime import date

import streamlit as st

from engine.errors import TrackerError, StoreError
from engine.generator import apply_month_settings, upsert_settings, get_settings
from engine.logs import get_logger
from engine.manual import build_manual_session
from engine.months import month_key_for
from engine import roster

log = get_logger("actions")

STATE_KEYS = ('players', 'sessions', 'settings')


def init_state(store, fixed_players=None):
    """Load persisted state once per browser session."""
    if 'sessions' in st.session_state:
        return
    players, sessions, settings = store.load_state()
    if fixed_players:
        players = fixed_players
    st.session_state['players'] = players
    st.session_state['sessions'] = sessions
    st.session_state['settings'] = settings


def flash(kind, message):
    st.session_state.setdefault('flash', []).append((kind, message))


def show_flash():
    for kind, message in st.session_state.pop('flash', []):
        getattr(st, kind)(message)


class TrackerActions:
    """Each method writes to the store first; page state changes only after the write succeeded."""

    def __init__(self, store, roster_locked=False):
        self.store = store
        self.roster_locked = roster_locked

    @property
    def players(self):
        return st.session_state['players']

    @property
    def sessions(self):
        return st.session_state['sessions']

    @property
    def settings(self):
        return st.session_state['settings']

    def _commit(self, players=None, sessions=None, settings=None):
        # Not atomic across collections; settings are written first
        if settings is not None:
            self.store.save_settings(settings)
        if players is not None:
            self.store.save_players(players)
        if sessions is not None:
            self.store.save_sessions(sessions)
        if players is not None:
            st.session_state['players'] = players
        if sessions is not None:
            st.session_state['sessions'] = sessions
        if settings is not None:
            st.session_state['settings'] = settings

    def _run(self, fn, *args):
        try:
            return fn(*args)
        except TrackerError as e:
            log.info("Action %s rejected: %s", fn.__name__, e)
            flash("error" if isinstance(e, StoreError) else "warning", str(e))
            return None

    # players
    def add_player(self, name):
        def _add(name):
            roster.ensure_roster_editable(self.roster_locked)
            self._commit(players=roster.add_player(self.players, name))
        self._run(_add, name)

    def delete_player(self, player_id):
        def _delete(player_id):
            roster.ensure_roster_editable(self.roster_locked)
            players, sessions = roster.delete_player(self.players, self.sessions, player_id)
            self._commit(players=players, sessions=sessions)
        self._run(_delete, player_id)

    # sessions
    def toggle_player(self, session_id, player_id):
        self._run(lambda: self._commit(sessions=roster.toggle_player(self.sessions, session_id, player_id)))

    def set_holiday(self, session_id, is_holiday):
        def _holiday():
            self._commit(sessions=roster.set_holiday(self.sessions, session_id, is_holiday))
        self._run(_holiday)

    def delete_session(self, session_id):
        self._run(lambda: self._commit(sessions=roster.delete_session(self.sessions, session_id)))

    def add_manual_session(self, day: date, is_holiday=False, water_price=None, drink_price=None):
        def _add():
            month_settings = get_settings(self.settings, month_key_for(day))
            session, _ = build_manual_session(
                day, month_settings, self.sessions, is_holiday, water_price, drink_price
            )
            self._commit(sessions=roster.add_session(self.sessions, session))
            return session
        return self._run(_add)

    # settings
    def save_settings_and_generate(self, month_settings):
        def _save():
            table = upsert_settings(self.settings, month_settings)
            sessions = apply_month_settings(month_settings, self.sessions)
            created = len(sessions) - len(self.sessions)
            self._commit(sessions=sessions, settings=table)
            return created
        return self._run(_save)

    def reset_all(self):
        def _reset():
            self.store.reset()
            for key in STATE_KEYS:
                st.session_state.pop(key, None)
        self._run(_reset)
