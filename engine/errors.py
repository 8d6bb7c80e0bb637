"""Exceptions raised by the session tracker engine and store"""


class TrackerError(Exception):
    """Base class for all tracker errors"""


class InvalidPlayerError(TrackerError, ValueError):
    """Player name is empty after trimming"""


class DuplicatePlayerError(TrackerError):
    def __init__(self, name: str):
        super().__init__(f"Player '{name}' already exists")
        self.name = name


class RosterLockedError(TrackerError):
    """Roster is code-owned and cannot be edited at runtime"""


class SessionNotFoundError(TrackerError, KeyError):
    def __init__(self, session_id: str):
        super().__init__(session_id)
        self.session_id = session_id

    def __str__(self):
        return f"No session with id {self.session_id}"


class InvalidMonthKeyError(TrackerError, ValueError):
    def __init__(self, month_key):
        super().__init__(f"Invalid month key {month_key!r}, expected YYYY-MM")
        self.month_key = month_key


class StoreError(TrackerError):
    """Persisted state could not be read or written"""
