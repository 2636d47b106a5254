"""Plan generation: fill day slots from category rotations and merge with existing plans."""
import logging
import random
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional, Set, Union

from atable.domain.Category import Category
from atable.domain.Plan import Plan
from atable.domain.WeekRange import WeekRange
from atable.logic.generation.composer import (
    Accepted, Failure, generate_with_uniqueness, normalize_meal
)
from atable.logic.generation.errors import InvalidInput
from atable.logic.generation.rotation import active_categories, build_rotations
from atable.utilities.calendar_utils import week_key
from atable.utilities.config import WEEK_MAX_ATTEMPTS, SINGLE_MAX_ATTEMPTS
from atable.utilities.constants import MEAL_TYPES, NO_SUGGESTION

logger = logging.getLogger(__name__)


class MergeMode(Enum):
    FILL_EMPTY = "fill_empty"
    REPLACE_ALL = "replace_all"

    @classmethod
    def from_replace_all(cls, replace_all: bool) -> "MergeMode":
        return cls.REPLACE_ALL if replace_all else cls.FILL_EMPTY


def coerce_ingredients(ingredients) -> Dict[str, Category]:
    """Return {name: Category}, converting plain mappings. Raises InvalidInput on bad shapes."""
    if not isinstance(ingredients, Mapping):
        raise InvalidInput(f"Ingredients must be a mapping, got {type(ingredients).__name__}")
    return {
        name: value if isinstance(value, Category) else Category.from_dict(name, value)
        for name, value in ingredients.items()
    }


def validate_ingredients(ingredients) -> bool:
    """True when at least one category has items. Callers must not generate otherwise."""
    return any(category.has_items() for category in coerce_ingredients(ingredients).values())


def merge_plans(existing: Plan, generated: Plan, mode: MergeMode) -> Plan:
    """Combine a user's plan with a generated one without mutating either.

    REPLACE_ALL: every day present in `generated` takes the generated meals.
    FILL_EMPTY: existing slots that are non-blank after trimming are kept,
    the rest come from `generated`.
    Days that only exist in `existing` are kept as they are.
    """
    merged = existing.copy()
    for day, slots in generated.meals.items():
        if mode is MergeMode.REPLACE_ALL or day not in merged:
            merged.meals[day] = dict(slots)
            continue
        current = merged.meals[day]
        for meal in MEAL_TYPES:
            if not (current.get(meal) or "").strip():
                current[meal] = slots.get(meal, "")
    return merged


class PlanGenerator:
    def __init__(self, rng: Optional[random.Random] = None,
                 week_max_attempts: int = WEEK_MAX_ATTEMPTS,
                 single_max_attempts: int = SINGLE_MAX_ATTEMPTS):
        self.rng = rng or random.Random()
        self.week_max_attempts = week_max_attempts
        self.single_max_attempts = single_max_attempts

    def generate_week(self, ingredients, days: Iterable[int], week_number: Optional[int] = None) -> Plan:
        """Fill midi then soir for each day, avoiding meals already placed during this call.

        After `week_max_attempts` collisions the last draw is kept anyway.
        Slots without any active category stay blank.
        """
        ingredients = coerce_ingredients(ingredients)
        rotations = build_rotations(ingredients, self.rng)
        categories = {meal: active_categories(ingredients, meal) for meal in MEAL_TYPES}
        already_used: Set[str] = set()
        plan = Plan(week_number=week_number)

        for day in days:
            for meal in MEAL_TYPES:
                if not categories[meal]:
                    plan.set(day, meal, "")
                    continue
                result = generate_with_uniqueness(rotations, categories[meal], already_used,
                                                  self.week_max_attempts)
                if not isinstance(result, Accepted):
                    logger.debug("Day %s %s: keeping duplicate %r after %s attempts",
                                 day, meal, result.value, self.week_max_attempts)
                plan.set(day, meal, result.value)
                if result.value:
                    already_used.add(normalize_meal(result.value))
        return plan

    def generate_all_weeks(self, ingredients, week_ranges: List[WeekRange]) -> Dict[str, Plan]:
        """One independent generate_week per range, keyed week1..weekN.

        Rotations and the used-meal set are not shared between weeks.
        """
        ingredients = coerce_ingredients(ingredients)
        return {
            week_key(week_range.week_number): self.generate_week(ingredients, week_range.days,
                                                                 week_number=week_range.week_number)
            for week_range in week_ranges
        }

    def generate_single_meal(self, ingredients, meal_type: str,
                             used_meals: Iterable[str] = ()) -> Union[str, Failure]:
        """Suggest one meal that is not in `used_meals` (compared case and whitespace insensitive).

        Unlike generate_week, a duplicate is never returned: exhaustion gives Failure.
        """
        ingredients = coerce_ingredients(ingredients)
        categories = active_categories(ingredients, meal_type)
        if not categories:
            logger.warning("No active category for %s, cannot suggest a meal", meal_type)
            return Failure(NO_SUGGESTION)
        used = {normalize_meal(meal) for meal in used_meals}
        rotations = build_rotations(ingredients, self.rng)
        result = generate_with_uniqueness(rotations, categories, used, self.single_max_attempts)
        if isinstance(result, Accepted) and result.value:
            return result.value
        logger.warning("No unused %s suggestion after %s attempts", meal_type, self.single_max_attempts)
        return Failure(NO_SUGGESTION)
