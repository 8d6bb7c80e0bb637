"""Month keys ("YYYY-MM"), labels and the selectable month list"""
import calendar
import re
from datetime import date
from typing import List, Tuple

from dateutil.relativedelta import relativedelta

from config.default_params import MONTHS_AHEAD
from .errors import InvalidMonthKeyError

_KEY_RE = re.compile(r"^(\d{4})-(\d{2})$")


def month_key(year: int, month_index: int) -> str:
    """YYYY-MM key for a zero-based month index"""
    return f"{year:04d}-{month_index + 1:02d}"

def month_key_for(day: date) -> str:
    return month_key(day.year, day.month - 1)

def parse_month_key(key: str) -> Tuple[int, int]:
    """Returns (year, zero-based month index)"""
    m = _KEY_RE.match(str(key).strip())
    if not m:
        raise InvalidMonthKeyError(key)
    year, month = int(m.group(1)), int(m.group(2))
    if not 1 <= month <= 12:
        raise InvalidMonthKeyError(key)
    return year, month - 1

def month_label(key: str) -> str:
    """'2024-05' -> 'May 2024'"""
    year, month_index = parse_month_key(key)
    return f"{calendar.month_name[month_index + 1]} {year}"

def month_days(year: int, month_index: int) -> List[date]:
    days_in_month = calendar.monthrange(year, month_index + 1)[1]
    return [date(year, month_index + 1, d) for d in range(1, days_in_month + 1)]

def available_months(today: date, ahead: int = MONTHS_AHEAD) -> List[Tuple[str, str]]:
    """Current calendar month plus the next `ahead` months as (key, label) pairs"""
    first = today.replace(day=1)
    months = []
    for i in range(ahead + 1):
        key = month_key_for(first + relativedelta(months=i))
        months.append((key, month_label(key)))
    return months

def shift_month(key: str, offset: int) -> str:
    year, month_index = parse_month_key(key)
    return month_key_for(date(year, month_index + 1, 1) + relativedelta(months=offset))

def session_months(sessions) -> List[str]:
    """Distinct month keys that have at least one session, newest first"""
    return sorted({month_key_for(s.date) for s in sessions}, reverse=True)
