"""Plan domain entity: meals per day of month ({day: {"midi": str, "soir": str}})."""
from typing import Dict, Iterable, Mapping, Optional
from atable.logic.generation.errors import InvalidInput
from atable.utilities.constants import MEAL_TYPES, LEGACY_DAY_NAMES


def empty_day() -> Dict[str, str]:
    return {meal: "" for meal in MEAL_TYPES}


class Plan:
    def __init__(self, meals: Optional[Dict[int, Dict[str, str]]] = None,
                 week_number: Optional[int] = None, enabled: bool = True):
        self.meals: Dict[int, Dict[str, str]] = {}
        for day, slots in (meals or {}).items():
            self.meals[day] = {meal: (slots.get(meal) or "") for meal in MEAL_TYPES}
        self.week_number = week_number
        self.enabled = enabled

    def __eq__(self, other) -> bool:
        if not isinstance(other, Plan):
            return NotImplemented
        return self.meals == other.meals

    def __repr__(self) -> str:
        return f"Plan(week={self.week_number}, days={self.days()}, enabled={self.enabled})"

    def __contains__(self, day: int) -> bool:
        return day in self.meals

    def __len__(self) -> int:
        return len(self.meals)

    def days(self):
        return list(self.meals.keys())

    def get(self, day: int, meal_type: str) -> str:
        return self.meals.get(day, {}).get(meal_type, "")

    def set(self, day: int, meal_type: str, value: str) -> None:
        if meal_type not in MEAL_TYPES:
            raise InvalidInput(f"Unknown meal type: {meal_type!r}")
        self.meals.setdefault(day, empty_day())[meal_type] = value

    def meal_names(self) -> Iterable[str]:
        """Every non-blank meal in the plan, in day order."""
        for slots in self.meals.values():
            for meal in MEAL_TYPES:
                if slots[meal].strip():
                    yield slots[meal]

    def copy(self):
        return Plan({day: dict(slots) for day, slots in self.meals.items()},
                    week_number=self.week_number, enabled=self.enabled)

    @staticmethod
    def empty(days: Iterable[int], week_number: Optional[int] = None):
        return Plan({day: empty_day() for day in days}, week_number=week_number)

    @staticmethod
    def from_dict(data: Mapping, week_number: Optional[int] = None, enabled: bool = True):
        '''Creates a Plan from {day: {midi, soir}}. Day keys may be ints or numeric strings.

        Weekday-name keys (lundi..dimanche) belong to the retired schema and are rejected.
        '''
        if not isinstance(data, Mapping):
            raise InvalidInput(f"Plan must be a mapping, got {type(data).__name__}")
        meals = {}
        for key, slots in data.items():
            if isinstance(key, str) and key.strip().lower() in LEGACY_DAY_NAMES:
                raise InvalidInput(f"Weekday keys are not supported, use day of month: {key!r}")
            if isinstance(key, int) and not isinstance(key, bool):
                day = key
            elif isinstance(key, str) and key.strip().isdigit():
                day = int(key.strip())
            else:
                raise InvalidInput(f"Invalid day key: {key!r}")
            if day < 1:
                raise InvalidInput(f"Day of month must be >= 1: {day}")
            if not isinstance(slots, Mapping):
                raise InvalidInput(f"Meals for day {day} must be a mapping")
            meals[day] = {meal: str(slots.get(meal) or "") for meal in MEAL_TYPES}
        return Plan(meals, week_number=week_number, enabled=enabled)

    def to_dict(self):
        return {day: dict(slots) for day, slots in self.meals.items()}
