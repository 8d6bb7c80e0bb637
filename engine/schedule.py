"""Monday/Wednesday schedule and per-session price allocation for a month"""
from collections import Counter
from typing import Dict, List, Optional

from .logs import get_logger
from .models import ScheduleWeights, SessionDraft, MonthlySettings
from .months import month_days, parse_month_key
from .rounding import round_up_to_thousand

log = get_logger("schedule")


def holiday_dates(sessions) -> set:
    return {s.date for s in sessions if s.is_holiday}

def qualifying_days(year: int, month_index: int, sessions=(), weights: Optional[ScheduleWeights] = None) -> list:
    """Mondays and Wednesdays of the month, minus days already flagged holiday"""
    weights = weights or ScheduleWeights()
    holidays = holiday_dates(sessions)
    return [d for d in month_days(year, month_index) if weights.qualifies(d) and d not in holidays]

def weekday_prices(counts: Dict[int, int], monthly_court_fee: float, monthly_shuttlecock_price: float,
                   weights: Optional[ScheduleWeights] = None) -> dict:
    """
    Per-session prices from the number of sessions per weekday.

    Court fee is split evenly; shuttlecocks are split by weekday weight. Every
    price is rounded up to the thousand on its own, so the allocated total can
    exceed the monthly fee by up to 999 per session.
    """
    w = (weights or ScheduleWeights()).as_dict()
    total_sessions = sum(counts.get(wd, 0) for wd in w)
    total_weight = sum(counts.get(wd, 0) * weight for wd, weight in w.items())

    if total_sessions == 0 or total_weight <= 0:
        log.debug("No qualifying sessions, all prices are zero")
        return {
            "total_sessions": 0,
            "total_weight": 0.0,
            "court_price": 0.0,
            "shuttlecock_base": 0.0,
            "shuttlecock_price": {wd: 0.0 for wd in w},
        }

    base = monthly_shuttlecock_price / total_weight
    return {
        "total_sessions": total_sessions,
        "total_weight": total_weight,
        "court_price": round_up_to_thousand(monthly_court_fee / total_sessions),
        "shuttlecock_base": base,
        "shuttlecock_price": {wd: round_up_to_thousand(base * weight) for wd, weight in w.items()},
    }

def calculate_schedule(year: int, month_index: int, sessions, monthly_court_fee: float,
                       monthly_shuttlecock_price: float, session_water_price: float = 0.0,
                       weights: Optional[ScheduleWeights] = None) -> dict:
    """Qualifying days, weekday prices and one draft per qualifying day, ordered by date"""
    weights = weights or ScheduleWeights()
    days = qualifying_days(year, month_index, sessions, weights)
    counts = Counter(d.weekday() for d in days)
    prices = weekday_prices(counts, monthly_court_fee, monthly_shuttlecock_price, weights)

    drafts = [
        SessionDraft(
            date=d,
            court_price=prices["court_price"],
            shuttlecock_price=prices["shuttlecock_price"][d.weekday()],
            water_price=session_water_price,
            drink_price=0.0,
            is_holiday=False,
        )
        for d in days
    ]

    allocated_court = sum(x.court_price for x in drafts)
    allocated_shuttle = sum(x.shuttlecock_price for x in drafts)
    overage = 0.0
    if drafts:
        overage = (allocated_court - monthly_court_fee) + (allocated_shuttle - monthly_shuttlecock_price)

    return {
        "days": days,
        "mondays": counts.get(0, 0),
        "wednesdays": counts.get(2, 0),
        "total_sessions": prices["total_sessions"],
        "total_weight": prices["total_weight"],
        "court_price": prices["court_price"],
        "shuttlecock_base": prices["shuttlecock_base"],
        "shuttlecock_price": prices["shuttlecock_price"],
        "allocated_court": allocated_court,
        "allocated_shuttlecock": allocated_shuttle,
        "overage": overage,
        "drafts": drafts,
    }

def generate_month_drafts(settings: Optional[MonthlySettings], sessions,
                          weights: Optional[ScheduleWeights] = None) -> List[SessionDraft]:
    if settings is None:
        return []
    year, month_index = parse_month_key(settings.month_key)
    res = calculate_schedule(
        year, month_index, sessions,
        settings.monthly_court_fee, settings.monthly_shuttlecock_price,
        settings.session_water_price, weights,
    )
    return res["drafts"]
