"""Month-level planning flows built on the generation core.

These are the operations a host application calls: generate and merge every
week bucket of the month, preview without merging, and suggest a single meal.
No I/O happens here; plans and preferences are passed in and returned.
"""
import logging
from datetime import date
from typing import Dict, Iterable, Optional, Union

from pydantic import ValidationError

from atable.domain.Plan import Plan
from atable.domain.Preferences import Preferences
from atable.logic.generation.composer import Failure
from atable.logic.generation.errors import InvalidInput
from atable.logic.generation.generator import MergeMode, PlanGenerator, merge_plans, validate_ingredients
from atable.logic.generation.partition import partition, find_week_for_day
from atable.utilities.calendar_utils import days_in_current_month
from atable.utilities.validators import SingleMealRequest

logger = logging.getLogger(__name__)


class MonthResult:
    def __init__(self, weeks: Dict[str, Plan], generated: Dict[str, Plan]):
        self.weeks = weeks
        self.generated = generated

    def __repr__(self) -> str:
        return f"MonthResult(weeks={list(self.weeks)})"


def _require_ingredients(preferences: Preferences) -> None:
    if not validate_ingredients(preferences.ingredients):
        raise InvalidInput("No ingredient configured: add items to at least one category first")


def preview_month(preferences: Preferences, total_days: Optional[int] = None,
                  generator: Optional[PlanGenerator] = None) -> Dict[str, Plan]:
    """Generated week plans for the month, not merged with anything."""
    _require_ingredients(preferences)
    generator = generator or PlanGenerator()
    if total_days is None:
        total_days = days_in_current_month()
    ranges = partition(total_days, preferences.number_of_weeks)
    return generator.generate_all_weeks(preferences.ingredients, ranges)


def generate_month(preferences: Preferences, current_weeks: Optional[Dict[str, Plan]] = None,
                   mode: MergeMode = MergeMode.FILL_EMPTY, total_days: Optional[int] = None,
                   generator: Optional[PlanGenerator] = None) -> MonthResult:
    """Generate every week bucket and merge it into the user's current plans.

    A week with no current plan, or any week in REPLACE_ALL mode, takes the
    generated plan as is. Otherwise only blank slots are filled.
    Weeks of `current_weeks` outside the generated buckets are returned untouched.
    """
    generated = preview_month(preferences, total_days, generator)
    weeks = {key: plan.copy() for key, plan in (current_weeks or {}).items()}
    for key, plan in generated.items():
        existing = weeks.get(key)
        if existing is None or mode is MergeMode.REPLACE_ALL:
            merged = plan.copy()
            merged.enabled = True
        else:
            merged = merge_plans(existing, plan, MergeMode.FILL_EMPTY)
        weeks[key] = merged
    logger.info("Generated %s week(s) in %s mode", len(generated), mode.name)
    return MonthResult(weeks, generated)


def suggest_meal(preferences: Preferences, meal_type: str = "midi",
                 used_meals: Iterable[str] = (),
                 generator: Optional[PlanGenerator] = None) -> Union[str, Failure]:
    """One suggestion for a slot the user wants to regenerate, never one of `used_meals`."""
    try:
        request = SingleMealRequest(meal_type=meal_type, used_meals=list(used_meals))
    except ValidationError as e:
        raise InvalidInput(f"Invalid suggestion request: {e}") from e
    _require_ingredients(preferences)
    generator = generator or PlanGenerator()
    return generator.generate_single_meal(preferences.ingredients, request.meal_type, request.used_meals)


def current_week_number(preferences: Preferences, today: Optional[date] = None) -> int:
    """Week bucket holding today's day of the month."""
    today = today or date.today()
    ranges = partition(days_in_current_month(today), preferences.number_of_weeks)
    return find_week_for_day(today.day, ranges)
