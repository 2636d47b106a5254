"""Calendar helpers for month-based planning."""
import calendar
from datetime import date
from typing import Optional

from atable.utilities.constants import WEEK_KEY_PREFIX


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def days_in_current_month(today: Optional[date] = None) -> int:
    today = today or date.today()
    return days_in_month(today.year, today.month)


def week_key(week_number: int) -> str:
    return f"{WEEK_KEY_PREFIX}{week_number}"


def week_number_from_key(key: str) -> int:
    """Inverse of week_key: 'week3' -> 3."""
    if not key.startswith(WEEK_KEY_PREFIX):
        raise ValueError(f"Not a week key: {key!r}")
    return int(key[len(WEEK_KEY_PREFIX):])
