"""Test the UI action layer: store-first commits into page state"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import date

import pytest
import streamlit as st

from components.actions import TrackerActions, init_state, STATE_KEYS
from config.default_params import STORAGE_KEYS
from engine.errors import StoreError
from engine.models import MonthlySettings, Player
from engine.roster import fixed_roster
from engine.store import MemoryStore

FEB = MonthlySettings("2021-02", 2_000_000, 1_000_000, 10_000)


class FailingStore(MemoryStore):
    """Rejects writes to one collection, or to all of them"""

    def __init__(self, fail_on=None, initial=None):
        super().__init__(initial)
        self.fail_on = fail_on

    def write(self, key, records):
        if self.fail_on is None or key == self.fail_on:
            raise StoreError(f"Could not write {key}: disk full")
        super().write(key, records)


@pytest.fixture
def page_state(monkeypatch):
    state = {}
    monkeypatch.setattr(st, "session_state", state)
    return state


def make_actions(store, locked=False):
    init_state(store, fixed_roster(["Alice", "Bob"]) if locked else None)
    return TrackerActions(store, roster_locked=locked)


def snapshot(state):
    return {key: state[key] for key in STATE_KEYS}


def test_init_state_loads_once(page_state):
    store = MemoryStore()
    store.save_players([Player("a", "Alice")])
    init_state(store)
    assert page_state['players'] == [Player("a", "Alice")]

    store.save_players([])
    init_state(store)
    assert page_state['players'] == [Player("a", "Alice")]


def test_add_player_writes_store_then_page(page_state):
    store = MemoryStore()
    actions = make_actions(store)
    actions.add_player("  Alice ")

    assert [p.name for p in page_state['players']] == ["Alice"]
    assert store.load_state()[0] == page_state['players']
    assert 'flash' not in page_state


def test_failed_write_leaves_page_state_untouched(page_state):
    """A store failure is flashed as an error and nothing on the page changes"""
    store = MemoryStore()
    actions = make_actions(store)
    actions.add_player("Alice")
    actions.store = FailingStore()
    before = snapshot(page_state)

    actions.add_player("Bob")
    actions.save_settings_and_generate(FEB)

    assert snapshot(page_state) == before
    assert all(page_state[k] is before[k] for k in STATE_KEYS)
    assert [kind for kind, _ in page_state['flash']] == ["error", "error"]
    assert "disk full" in page_state['flash'][0][1]
    print("✅ No optimistic update on store failure")


def test_duplicate_player_is_flashed_as_warning(page_state):
    actions = make_actions(MemoryStore())
    actions.add_player("Alice")
    actions.add_player("alice")

    assert len(page_state['players']) == 1
    kind, message = page_state['flash'][0]
    assert kind == "warning"
    assert "alice" in message


def test_fixed_roster_rejects_edits(page_state):
    store = MemoryStore()
    actions = make_actions(store, locked=True)
    before = list(page_state['players'])

    actions.add_player("Carol")
    actions.delete_player(before[0].id)

    assert page_state['players'] == before
    assert [kind for kind, _ in page_state['flash']] == ["warning", "warning"]
    assert store.load_state()[0] == []


def test_save_settings_reports_created_sessions(page_state):
    store = MemoryStore()
    actions = make_actions(store)

    assert actions.save_settings_and_generate(FEB) == 8
    assert actions.save_settings_and_generate(FEB) == 0
    players, sessions, settings = store.load_state()
    assert sessions == page_state['sessions']
    assert settings == {"2021-02": FEB}


def test_holiday_toggle_only_sets_the_flag(page_state):
    """Deleted sessions stay deleted and other sessions keep their prices"""
    actions = make_actions(MemoryStore())
    actions.save_settings_and_generate(FEB)
    by_date = {s.date: s for s in page_state['sessions']}
    actions.delete_session(by_date[date(2021, 2, 1)].id)
    before = {s.id: s for s in page_state['sessions']}

    actions.set_holiday(by_date[date(2021, 2, 3)].id, True)

    sessions = page_state['sessions']
    assert len(sessions) == 7
    assert date(2021, 2, 1) not in {s.date for s in sessions}
    for s in sessions:
        old = before[s.id]
        assert s.is_holiday == (s.date == date(2021, 2, 3))
        assert (s.court_price, s.shuttlecock_price) == (old.court_price, old.shuttlecock_price)
    print("✅ Holiday toggle leaves the rest of the month alone")


def test_settings_written_before_sessions(page_state):
    """When the session write fails the settings are already stored"""
    store = FailingStore(fail_on=STORAGE_KEYS['sessions'])
    actions = make_actions(store)

    assert actions.save_settings_and_generate(FEB) is None
    assert page_state['sessions'] == []
    assert page_state['settings'] == {}
    _, sessions, settings = store.load_state()
    assert sessions == []
    assert settings == {"2021-02": FEB}


def test_delete_player_strips_checkins(page_state):
    store = MemoryStore()
    actions = make_actions(store)
    actions.add_player("Alice")
    actions.save_settings_and_generate(FEB)
    alice = page_state['players'][0]
    first = page_state['sessions'][0]
    actions.toggle_player(first.id, alice.id)
    assert page_state['sessions'][0].player_ids == [alice.id]

    actions.delete_player(alice.id)

    assert page_state['players'] == []
    assert all(alice.id not in s.player_ids for s in page_state['sessions'])
    assert store.load_state()[1] == page_state['sessions']


def test_add_manual_session_is_prepended(page_state):
    actions = make_actions(MemoryStore())
    actions.save_settings_and_generate(FEB)
    session = actions.add_manual_session(date(2021, 2, 6), water_price=5_000)

    assert page_state['sessions'][0] is session
    assert session.court_price == 0
    assert session.water_price == 5_000


def test_reset_all_clears_store_and_page(page_state):
    store = MemoryStore()
    actions = make_actions(store)
    actions.add_player("Alice")
    actions.reset_all()

    assert not any(k in page_state for k in STATE_KEYS)
    assert store.load_state() == ([], [], {})
