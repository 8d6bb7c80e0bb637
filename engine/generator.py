"""Session generation from monthly settings and reconciliation with existing sessions"""
from dataclasses import replace
from typing import Callable, Dict, List, Optional

from .logs import get_logger
from .models import MonthlySettings, Session, SessionDraft, ScheduleWeights, new_id
from .schedule import generate_month_drafts

log = get_logger("generator")


def reconcile_sessions(drafts: List[SessionDraft], sessions: List[Session],
                       id_factory: Callable[[], str] = new_id) -> List[Session]:
    """
    Merge drafts into the session collection.

    A draft whose calendar day matches an existing session only updates that
    session's four prices; id, check-ins and holiday flag are kept. Other
    drafts become new sessions with no check-ins. Sessions without a matching
    draft are returned unchanged. Inputs are not mutated.
    """
    by_date = {d.date: d for d in drafts}
    matched = set()
    result = []
    for s in sessions:
        draft = by_date.get(s.date)
        if draft is None or s.date in matched:
            result.append(s)
            continue
        matched.add(s.date)
        result.append(replace(
            s,
            court_price=draft.court_price,
            shuttlecock_price=draft.shuttlecock_price,
            water_price=draft.water_price,
            drink_price=draft.drink_price,
            player_ids=list(s.player_ids),
        ))

    created = [Session.from_draft(d, id_factory()) for d in drafts if d.date not in matched]
    log.info("Reconciled %d drafts: %d updated, %d created", len(drafts), len(matched), len(created))
    return result + created

def apply_month_settings(settings: Optional[MonthlySettings], sessions: List[Session],
                         weights: Optional[ScheduleWeights] = None,
                         id_factory: Callable[[], str] = new_id) -> List[Session]:
    """Generate the month's drafts and merge them into the collection"""
    drafts = generate_month_drafts(settings, sessions, weights)
    if not drafts:
        return list(sessions)
    return reconcile_sessions(drafts, sessions, id_factory)

def upsert_settings(table: Dict[str, MonthlySettings], settings: MonthlySettings) -> Dict[str, MonthlySettings]:
    """Last write wins per month key"""
    new_table = dict(table)
    new_table[settings.month_key] = settings
    return new_table

def get_settings(table: Dict[str, MonthlySettings], key: str) -> Optional[MonthlySettings]:
    return table.get(key)
