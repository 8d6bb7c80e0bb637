"""Roster and session mutations. Every function returns new collections."""
from dataclasses import replace
from typing import Callable, List, Tuple

from config.default_params import FIXED_PLAYERS
from .errors import DuplicatePlayerError, InvalidPlayerError, RosterLockedError, SessionNotFoundError
from .logs import get_logger
from .models import Player, Session, new_id

log = get_logger("roster")


def fixed_roster(names=None) -> List[Player]:
    """Code-owned player list; ids are derived from position so check-ins survive restarts"""
    names = FIXED_PLAYERS if names is None else names
    return [Player(id=f"fixed-{i + 1}", name=name) for i, name in enumerate(names)]

def roster_is_locked(names=None) -> bool:
    return bool(FIXED_PLAYERS if names is None else names)

def ensure_roster_editable(locked: bool):
    if locked:
        raise RosterLockedError("The player list is fixed in configuration")

def find_player_by_name(players, name: str):
    wanted = name.strip().lower()
    return next((p for p in players if p.name.lower() == wanted), None)

def add_player(players: List[Player], name: str, id_factory: Callable[[], str] = new_id) -> List[Player]:
    name = (name or "").strip()
    if not name:
        raise InvalidPlayerError("Player name must not be empty")
    if find_player_by_name(players, name) is not None:
        log.info("Rejected duplicate player name %r", name)
        raise DuplicatePlayerError(name)
    return list(players) + [Player(id=id_factory(), name=name)]

def strip_player(sessions: List[Session], player_id: str) -> List[Session]:
    return [
        replace(s, player_ids=[pid for pid in s.player_ids if pid != player_id])
        if player_id in s.player_ids else s
        for s in sessions
    ]

def delete_player(players: List[Player], sessions: List[Session], player_id: str) -> Tuple[List[Player], List[Session]]:
    """Remove from the roster, then strip the id from every session's check-ins"""
    remaining = [p for p in players if p.id != player_id]
    cleaned = strip_player(sessions, player_id)
    log.info("Deleted player %s", player_id)
    return remaining, cleaned

def _update_session(sessions: List[Session], session_id: str, **changes) -> List[Session]:
    if not any(s.id == session_id for s in sessions):
        raise SessionNotFoundError(session_id)
    return [replace(s, **changes) if s.id == session_id else s for s in sessions]

def get_session(sessions: List[Session], session_id: str) -> Session:
    for s in sessions:
        if s.id == session_id:
            return s
    raise SessionNotFoundError(session_id)

def set_players(sessions: List[Session], session_id: str, player_ids: List[str]) -> List[Session]:
    unique = list(dict.fromkeys(player_ids))
    return _update_session(sessions, session_id, player_ids=unique)

def toggle_player(sessions: List[Session], session_id: str, player_id: str) -> List[Session]:
    current = get_session(sessions, session_id).player_ids
    if player_id in current:
        new_ids = [pid for pid in current if pid != player_id]
    else:
        new_ids = list(current) + [player_id]
    return set_players(sessions, session_id, new_ids)

def set_holiday(sessions: List[Session], session_id: str, is_holiday: bool) -> List[Session]:
    return _update_session(sessions, session_id, is_holiday=bool(is_holiday))

def add_session(sessions: List[Session], session: Session) -> List[Session]:
    return [session] + list(sessions)

def delete_session(sessions: List[Session], session_id: str) -> List[Session]:
    if not any(s.id == session_id for s in sessions):
        raise SessionNotFoundError(session_id)
    log.info("Deleted session %s", session_id)
    return [s for s in sessions if s.id != session_id]

def sort_sessions(sessions: List[Session], descending: bool = True) -> List[Session]:
    return sorted(sessions, key=lambda s: s.date, reverse=descending)
