import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional

from dateutil.parser import isoparse

from config.default_params import WEEKDAY_WEIGHTS


def new_id() -> str:
    return str(uuid.uuid4())

def parse_day(value) -> date:
    """Calendar day of a date, datetime or ISO-8601 string; time of day is dropped"""
    if isinstance(value, datetime):
        # Aware timestamps (browser records) name the local calendar day
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    if isinstance(value, date):
        return value
    return isoparse(str(value)).date()

def _amount(value) -> float:
    return float(value or 0.0)


@dataclass
class ScheduleWeights:
    # Relative shuttlecock cost per weekday (date.weekday() numbering)
    monday: float = WEEKDAY_WEIGHTS[0]
    wednesday: float = WEEKDAY_WEIGHTS[2]

    def as_dict(self) -> dict:
        return {0: self.monday, 2: self.wednesday}

    def weight_for(self, day: date) -> float:
        return self.as_dict().get(day.weekday(), 0.0)

    def qualifies(self, day: date) -> bool:
        return day.weekday() in self.as_dict()


@dataclass
class Player:
    id: str
    name: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, d: dict) -> "Player":
        return cls(id=str(d["id"]), name=str(d["name"]))


@dataclass
class SessionDraft:
    """A session without identity or check-ins, as produced by the schedule calculator"""
    date: date
    court_price: float = 0.0
    shuttlecock_price: float = 0.0
    water_price: float = 0.0
    drink_price: float = 0.0
    is_holiday: bool = False


@dataclass
class Session:
    id: str
    date: date
    court_price: float = 0.0
    shuttlecock_price: float = 0.0
    water_price: float = 0.0
    drink_price: float = 0.0
    player_ids: List[str] = field(default_factory=list)
    is_holiday: bool = False

    @property
    def total_cost(self) -> float:
        return self.court_price + self.shuttlecock_price + self.water_price + self.drink_price

    @classmethod
    def from_draft(cls, draft: SessionDraft, session_id: Optional[str] = None) -> "Session":
        return cls(
            id=session_id or new_id(),
            date=draft.date,
            court_price=draft.court_price,
            shuttlecock_price=draft.shuttlecock_price,
            water_price=draft.water_price,
            drink_price=draft.drink_price,
            player_ids=[],
            is_holiday=draft.is_holiday,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "courtPrice": self.court_price,
            "shuttlecockPrice": self.shuttlecock_price,
            "waterPrice": self.water_price,
            "drinkPrice": self.drink_price,
            "playerIds": list(self.player_ids),
            "isHoliday": self.is_holiday,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Session":
        # Older records have no drinkPrice / isHoliday
        player_ids = []
        for pid in d.get("playerIds", []):
            if pid not in player_ids:
                player_ids.append(str(pid))
        return cls(
            id=str(d["id"]),
            date=parse_day(d["date"]),
            court_price=_amount(d.get("courtPrice")),
            shuttlecock_price=_amount(d.get("shuttlecockPrice")),
            water_price=_amount(d.get("waterPrice")),
            drink_price=_amount(d.get("drinkPrice")),
            player_ids=player_ids,
            is_holiday=bool(d.get("isHoliday", False)),
        )


@dataclass
class MonthlySettings:
    month_key: str  # "YYYY-MM"
    monthly_court_fee: float = 0.0
    monthly_shuttlecock_price: float = 0.0
    session_water_price: float = 0.0

    def to_dict(self) -> dict:
        return {
            "monthKey": self.month_key,
            "monthlyCourtFee": self.monthly_court_fee,
            "monthlyShuttlecockPrice": self.monthly_shuttlecock_price,
            "sessionWaterPrice": self.session_water_price,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "MonthlySettings":
        return cls(
            month_key=str(d["monthKey"]),
            monthly_court_fee=_amount(d.get("monthlyCourtFee")),
            monthly_shuttlecock_price=_amount(d.get("monthlyShuttlecockPrice")),
            session_water_price=_amount(d.get("sessionWaterPrice")),
        )
