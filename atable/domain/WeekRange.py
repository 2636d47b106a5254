"""WeekRange value object: a contiguous span of month days assigned to one week bucket."""
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class WeekRange:
    week_number: int
    start_day: int
    end_day: int
    days: Tuple[int, ...] = ()

    def __len__(self) -> int:
        return len(self.days)

    def __contains__(self, day: int) -> bool:
        return self.start_day <= day <= self.end_day

    @property
    def is_empty(self) -> bool:
        return not self.days

    def to_dict(self):
        return {
            "weekNumber": self.week_number,
            "startDay": self.start_day,
            "endDay": self.end_day,
            "days": list(self.days),
        }
