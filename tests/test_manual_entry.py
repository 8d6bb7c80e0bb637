"""Test default prices for manually added sessions"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import date

from engine.generator import apply_month_settings
from engine.manual import manual_session_defaults, build_manual_session
from engine.models import MonthlySettings, Session

FEB = MonthlySettings("2021-02", 2_000_000, 1_000_000, 10_000)


def test_full_month_matches_schedule():
    """With the whole month generated, defaults equal the schedule's prices"""
    sessions = apply_month_settings(FEB, [])
    draft, warning = manual_session_defaults(date(2021, 2, 8), FEB, sessions)
    assert warning == ""
    assert draft.court_price == 250_000
    assert draft.shuttlecock_price == 105_000
    assert draft.water_price == 10_000
    assert draft.drink_price == 0


def test_divisor_is_existing_sessions_only():
    """Only two Mondays exist, so the budget is spread over those two"""
    sessions = [Session(id="a", date=date(2021, 2, 1)), Session(id="b", date=date(2021, 2, 8))]
    draft, warning = manual_session_defaults(date(2021, 2, 10), FEB, sessions)
    assert warning == ""
    assert draft.court_price == 1_000_000
    assert draft.shuttlecock_price == 700_000  # 1,000,000 / 2 * 1.4


def test_holiday_and_other_month_sessions_not_counted():
    sessions = [
        Session(id="a", date=date(2021, 2, 1)),
        Session(id="b", date=date(2021, 2, 8), is_holiday=True),
        Session(id="c", date=date(2021, 3, 1)),
        Session(id="d", date=date(2021, 2, 2)),  # Tuesday
    ]
    draft, _ = manual_session_defaults(date(2021, 2, 15), FEB, sessions)
    assert draft.court_price == 2_000_000
    assert draft.shuttlecock_price == 1_000_000


def test_non_qualifying_weekday_is_zero():
    sessions = apply_month_settings(FEB, [])
    draft, warning = manual_session_defaults(date(2021, 2, 5), FEB, sessions)  # Friday
    assert warning == ""
    assert (draft.court_price, draft.shuttlecock_price, draft.water_price, draft.drink_price) == (0, 0, 0, 0)


def test_holiday_flag_is_zero():
    sessions = apply_month_settings(FEB, [])
    draft, warning = manual_session_defaults(date(2021, 2, 8), FEB, sessions, is_holiday=True)
    assert warning == ""
    assert draft.is_holiday is True
    assert draft.court_price == draft.shuttlecock_price == draft.water_price == 0


def test_missing_settings_warns_with_zero_defaults():
    """No settings: zeros and a warning for the UI to block on, not an exception"""
    draft, warning = manual_session_defaults(date(2021, 2, 8), None, [])
    assert "No monthly settings" in warning
    assert "2021-02" in warning
    assert draft.court_price == draft.shuttlecock_price == draft.water_price == 0


def test_no_existing_sessions_warns():
    draft, warning = manual_session_defaults(date(2021, 2, 8), FEB, [])
    assert warning != ""
    assert draft.court_price == 0 and draft.shuttlecock_price == 0
    assert draft.water_price == 10_000


def test_water_and_drink_overridable_court_and_shuttle_not():
    """Only water and drink accept user values"""
    sessions = apply_month_settings(FEB, [])
    session, warning = build_manual_session(
        date(2021, 2, 10), FEB, sessions, water_price="7000", drink_price=15_000,
        id_factory=lambda: "manual-1",
    )
    assert warning == ""
    assert session.id == "manual-1"
    assert session.court_price == 250_000
    assert session.shuttlecock_price == 146_000
    assert session.water_price == 7_000
    assert session.drink_price == 15_000
    assert session.player_ids == []


def test_invalid_overrides_coerced_to_zero():
    sessions = apply_month_settings(FEB, [])
    session, _ = build_manual_session(date(2021, 2, 10), FEB, sessions, water_price="", drink_price="abc")
    assert session.water_price == 0
    assert session.drink_price == 0


def test_water_defaults_when_not_overridden():
    sessions = apply_month_settings(FEB, [])
    session, _ = build_manual_session(date(2021, 2, 10), FEB, sessions)
    assert session.water_price == 10_000
    assert session.drink_price == 0
