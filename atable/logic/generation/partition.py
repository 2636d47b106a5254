"""Split the days of a month into contiguous week buckets.

Lengths differ by at most one day. When the days do not divide evenly, the
first `total_days % number_of_weeks` weeks get the extra day, so 30 days over
4 weeks gives [8, 8, 7, 7] and 31 days over 2 weeks gives [16, 15].
"""
from typing import List

from atable.domain.WeekRange import WeekRange
from atable.logic.generation.errors import InvalidInput, DayOutOfRange


def _require_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{name} must be an integer, got {value!r}")
    return value


def partition(total_days: int, number_of_weeks: int) -> List[WeekRange]:
    """Return `number_of_weeks` ranges covering days 1..total_days exactly once.

    If there are more weeks than days, the trailing weeks are empty
    (days == () and end_day == start_day - 1).
    """
    _require_int(total_days, "total_days")
    _require_int(number_of_weeks, "number_of_weeks")
    if total_days <= 0:
        raise InvalidInput(f"total_days must be positive: {total_days}")
    if number_of_weeks < 1:
        raise InvalidInput(f"number_of_weeks must be >= 1: {number_of_weeks}")

    base, extra = divmod(total_days, number_of_weeks)
    ranges = []
    current_day = 1
    for week in range(1, number_of_weeks + 1):
        length = base + 1 if week <= extra else base
        start_day = current_day
        end_day = current_day + length - 1
        ranges.append(WeekRange(week, start_day, end_day, tuple(range(start_day, end_day + 1))))
        current_day = end_day + 1
    return ranges


def find_week_for_day(day: int, ranges: List[WeekRange]) -> int:
    for week_range in ranges:
        if day in week_range:
            return week_range.week_number
    raise DayOutOfRange(f"Day {day} is not covered by any of {len(ranges)} week ranges")

