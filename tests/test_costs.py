"""Test per-session cost and monthly dues aggregation"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import date

import pytest

from engine.costs import session_total_cost, cost_per_player, sessions_in_month, monthly_player_totals, monthly_summary
from engine.models import Player, Session

ALICE = Player("a", "Alice")
BOB = Player("b", "Bob")
CHI = Player("c", "Chi")
DAN = Player("d", "Dan")
ROSTER = [ALICE, BOB, CHI, DAN]


def make(sid, day, court=0, shuttle=0, water=0, drink=0, players=(), holiday=False):
    return Session(id=sid, date=day, court_price=court, shuttlecock_price=shuttle,
                   water_price=water, drink_price=drink, player_ids=list(players), is_holiday=holiday)


def test_two_players_split_evenly():
    """20000 + 14000 + 5000 split between two players"""
    s = make("s1", date(2024, 5, 6), 20_000, 14_000, 5_000, 0, ["a", "b"])
    assert session_total_cost(s) == 39_000
    assert cost_per_player(s) == 19_500

    totals = monthly_player_totals([s], ROSTER)
    assert [(r["name"], r["totalOwed"]) for r in totals] == [("Alice", 19_500), ("Bob", 19_500)]


def test_empty_session_has_zero_per_player():
    s = make("s1", date(2024, 5, 6), 20_000, players=[])
    assert cost_per_player(s) == 0.0
    assert monthly_player_totals([s], ROSTER) == []


def test_cost_fully_distributed():
    """With everyone's sessions checked in, dues add up to session totals"""
    sessions = [
        make("s1", date(2024, 5, 1), 250_000, 146_000, 10_000, 0, ["a", "b", "c"]),
        make("s2", date(2024, 5, 6), 250_000, 105_000, 10_000, 30_000, ["a", "d"]),
        make("s3", date(2024, 5, 8), 250_000, 146_000, 10_000, 0, ["b", "c", "d"]),
    ]
    totals = monthly_player_totals(sessions, ROSTER)
    assert sum(r["totalOwed"] for r in totals) == pytest.approx(sum(session_total_cost(s) for s in sessions))


def test_sorted_descending_and_zero_omitted():
    sessions = [
        make("s1", date(2024, 5, 1), 90_000, players=["a", "b", "c"]),
        make("s2", date(2024, 5, 6), 60_000, players=["a"]),
    ]
    totals = monthly_player_totals(sessions, ROSTER)
    assert [r["id"] for r in totals] == ["a", "b", "c"]
    assert totals[0]["totalOwed"] == 90_000
    assert totals[0]["sessionsAttended"] == 2
    assert "d" not in [r["id"] for r in totals]


def test_holiday_sessions_still_count():
    """The holiday flag affects generation, not aggregation"""
    s = make("s1", date(2024, 5, 6), 40_000, players=["a", "b"], holiday=True)
    totals = monthly_player_totals([s], ROSTER)
    assert [r["totalOwed"] for r in totals] == [20_000, 20_000]


def test_unknown_player_ids_are_ignored():
    s = make("s1", date(2024, 5, 6), 30_000, players=["a", "ghost", "b"])
    totals = monthly_player_totals([s], ROSTER)
    assert [r["totalOwed"] for r in totals] == [10_000, 10_000]


def test_sessions_in_month_filters_by_calendar_month():
    sessions = [
        make("apr", date(2024, 4, 29)),
        make("may1", date(2024, 5, 1)),
        make("may31", date(2024, 5, 31)),
        make("may_last_year", date(2023, 5, 15)),
    ]
    assert [s.id for s in sessions_in_month(sessions, 2024, 4)] == ["may1", "may31"]


def test_monthly_summary_totals():
    sessions = [
        make("s1", date(2024, 5, 1), 100_000, players=["a", "b"]),
        make("s2", date(2024, 5, 6), 50_000, players=[], holiday=True),
        make("s3", date(2024, 6, 3), 70_000, players=["a"]),
    ]
    summary = monthly_summary(sessions, ROSTER, 2024, 4)
    assert summary["session_count"] == 2
    assert summary["holiday_count"] == 1
    assert summary["total_cost"] == 150_000
    assert summary["distributed"] == 100_000
    assert summary["unassigned_cost"] == 50_000
    assert [r["name"] for r in summary["players"]] == ["Alice", "Bob"]
