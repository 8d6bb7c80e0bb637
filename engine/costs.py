"""Per-session cost and per-player monthly dues"""
from collections import defaultdict
from typing import List


def session_total_cost(session) -> float:
    return session.court_price + session.shuttlecock_price + session.water_price + session.drink_price

def cost_per_player(session) -> float:
    n = len(session.player_ids)
    return session_total_cost(session) / n if n > 0 else 0.0

def sessions_in_month(sessions, year: int, month_index: int) -> list:
    return [s for s in sessions if s.date.year == year and s.date.month == month_index + 1]

def monthly_player_totals(sessions, players) -> List[dict]:
    """
    Each session's total is split evenly among its checked-in players.

    Holiday sessions count like any other; sessions with nobody checked in
    contribute to nobody. Players owing nothing are left out and the rest are
    sorted by amount owed, largest first.
    """
    owed = defaultdict(float)
    attended = defaultdict(int)
    for s in sessions:
        share = cost_per_player(s)
        for pid in s.player_ids:
            owed[pid] += share
            attended[pid] += 1

    rows = [
        {"id": p.id, "name": p.name, "totalOwed": owed[p.id], "sessionsAttended": attended[p.id]}
        for p in players
        if owed.get(p.id, 0.0) > 0
    ]
    return sorted(rows, key=lambda r: (-r["totalOwed"], r["name"].lower()))

def monthly_summary(sessions, players, year: int, month_index: int) -> dict:
    """Dues for one calendar month plus month-level totals"""
    month_sessions = sessions_in_month(sessions, year, month_index)
    totals = monthly_player_totals(month_sessions, players)

    total_cost = sum(session_total_cost(s) for s in month_sessions)
    unassigned = sum(session_total_cost(s) for s in month_sessions if not s.player_ids)

    return {
        "sessions": month_sessions,
        "players": totals,
        "session_count": len(month_sessions),
        "holiday_count": sum(1 for s in month_sessions if s.is_holiday),
        "total_cost": total_cost,
        "distributed": sum(r["totalOwed"] for r in totals),
        "unassigned_cost": unassigned,
    }
