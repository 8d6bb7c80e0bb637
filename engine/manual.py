"""Default prices for a manually added session"""
from collections import Counter
from datetime import date
from typing import Callable, List, Optional, Tuple

from .logs import get_logger
from .models import MonthlySettings, Session, SessionDraft, ScheduleWeights, new_id
from .months import month_key_for
from .rounding import coerce_amount
from .schedule import weekday_prices

log = get_logger("manual")

NO_SETTINGS_WARNING = "No monthly settings for {month}: court, shuttlecock and water prices default to 0"
NO_BASIS_WARNING = "No Monday/Wednesday sessions exist yet in {month}: court and shuttlecock prices default to 0"


def existing_weekday_counts(day: date, sessions, weights: ScheduleWeights) -> Counter:
    """Non-holiday Monday/Wednesday sessions already in the month of `day`"""
    return Counter(
        s.date.weekday() for s in sessions
        if s.date.year == day.year and s.date.month == day.month
        and not s.is_holiday and weights.qualifies(s.date)
    )

def manual_session_defaults(day: date, settings: Optional[MonthlySettings], sessions,
                            is_holiday: bool = False,
                            weights: Optional[ScheduleWeights] = None) -> Tuple[SessionDraft, str]:
    """
    Returns (draft, warning). The warning is empty unless the defaults are zero
    because of missing data, in which case the caller should block submission
    until the user acknowledges it.
    """
    weights = weights or ScheduleWeights()
    month = month_key_for(day)
    draft = SessionDraft(date=day, is_holiday=is_holiday)

    if settings is None:
        return draft, NO_SETTINGS_WARNING.format(month=month)

    if is_holiday or not weights.qualifies(day):
        return draft, ""

    # Divisor basis is what already exists in the month, not a full-month enumeration
    counts = existing_weekday_counts(day, sessions, weights)
    prices = weekday_prices(counts, settings.monthly_court_fee, settings.monthly_shuttlecock_price, weights)
    draft.water_price = settings.session_water_price
    if prices["total_sessions"] == 0:
        return draft, NO_BASIS_WARNING.format(month=month)

    draft.court_price = prices["court_price"]
    draft.shuttlecock_price = prices["shuttlecock_price"][day.weekday()]
    return draft, ""

def build_manual_session(day: date, settings: Optional[MonthlySettings], sessions: List[Session],
                         is_holiday: bool = False, water_price=None, drink_price=None,
                         weights: Optional[ScheduleWeights] = None,
                         id_factory: Callable[[], str] = new_id) -> Tuple[Session, str]:
    """Court and shuttlecock always come from the defaults; water and drink may be overridden"""
    draft, warning = manual_session_defaults(day, settings, sessions, is_holiday, weights)
    if water_price is not None:
        draft.water_price = coerce_amount(water_price)
    draft.drink_price = coerce_amount(drink_price)
    session = Session.from_draft(draft, id_factory())
    log.info("Built manual session for %s (total %.0f)", day.isoformat(), session.total_cost)
    return session, warning
