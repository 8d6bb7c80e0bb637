"""
Persisted state: player roster, session collection and monthly settings table.

Each collection is written whole (replace-on-write); there is one writer and
the last write wins. The engine never touches a store; the app loads state
once and saves after each action.
"""
import json
import os
import tempfile
from typing import Dict, List, Tuple

from config.default_params import STORAGE_KEYS, DEFAULT_DATA_DIR
from .errors import StoreError
from .logs import get_logger
from .models import MonthlySettings, Player, Session

log = get_logger("store")

State = Tuple[List[Player], List[Session], Dict[str, MonthlySettings]]


def _decode_state(raw: dict) -> State:
    try:
        players = [Player.from_dict(d) for d in raw.get(STORAGE_KEYS['players']) or []]
        sessions = [Session.from_dict(d) for d in raw.get(STORAGE_KEYS['sessions']) or []]
        settings = {}
        for d in raw.get(STORAGE_KEYS['settings']) or []:
            ms = MonthlySettings.from_dict(d)
            settings[ms.month_key] = ms
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise StoreError(f"Stored data does not match the current format: {e}") from e
    return players, sessions, settings


class BaseStore:
    """Keyed collections of plain records"""

    def read(self, key: str):
        raise NotImplementedError

    def write(self, key: str, records: list):
        raise NotImplementedError

    def delete(self, key: str):
        raise NotImplementedError

    def load_state(self) -> State:
        raw = {key: self.read(key) for key in STORAGE_KEYS.values()}
        state = _decode_state(raw)
        log.info("Loaded %d players, %d sessions, %d monthly settings", len(state[0]), len(state[1]), len(state[2]))
        return state

    def save_players(self, players: List[Player]):
        self.write(STORAGE_KEYS['players'], [p.to_dict() for p in players])

    def save_sessions(self, sessions: List[Session]):
        self.write(STORAGE_KEYS['sessions'], [s.to_dict() for s in sessions])

    def save_settings(self, table: Dict[str, MonthlySettings]):
        self.write(STORAGE_KEYS['settings'], [table[k].to_dict() for k in sorted(table)])

    def reset(self):
        for key in STORAGE_KEYS.values():
            self.delete(key)
        log.info("Cleared all stored collections")


class MemoryStore(BaseStore):
    def __init__(self, initial: dict = None):
        self._data = {k: json.loads(json.dumps(v)) for k, v in (initial or {}).items()}

    def read(self, key: str):
        return json.loads(json.dumps(self._data.get(key, [])))

    def write(self, key: str, records: list):
        self._data[key] = json.loads(json.dumps(records))

    def delete(self, key: str):
        self._data.pop(key, None)


class JsonStore(BaseStore):
    """One JSON file per collection under data_dir"""

    def __init__(self, data_dir: str = DEFAULT_DATA_DIR):
        self.data_dir = data_dir

    def path_for(self, key: str) -> str:
        return os.path.join(self.data_dir, f"{key}.json")

    def read(self, key: str):
        path = self.path_for(key)
        if not os.path.exists(path):
            return []
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            log.error("Could not read %s: %s", path, e)
            raise StoreError(f"Could not read {path}: {e}") from e

    def write(self, key: str, records: list):
        path = self.path_for(key)
        try:
            os.makedirs(self.data_dir, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.data_dir, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(records, f, ensure_ascii=False, indent=2)
                os.replace(tmp, path)
            except BaseException:
                if os.path.exists(tmp):
                    os.remove(tmp)
                raise
        except OSError as e:
            log.error("Could not write %s: %s", path, e)
            raise StoreError(f"Could not write {path}: {e}") from e
        log.info("Saved %d records to %s", len(records), path)

    def delete(self, key: str):
        path = self.path_for(key)
        try:
            if os.path.exists(path):
                os.remove(path)
        except OSError as e:
            raise StoreError(f"Could not delete {path}: {e}") from e
