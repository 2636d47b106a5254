"""Preferences aggregate: how many week buckets to plan and the ingredient catalog."""
from typing import Dict, Mapping, Optional

from pydantic import ValidationError

from atable.domain.Category import Category
from atable.domain.Plan import Plan
from atable.logic.generation.errors import InvalidInput
from atable.utilities.calendar_utils import week_number_from_key
from atable.utilities.config import DEFAULT_WEEKS
from atable.utilities.constants import DEFAULT_CATEGORIES, MIN_WEEKS, MAX_WEEKS
from atable.utilities.validators import PreferencesInput


class Preferences:
    def __init__(self, number_of_weeks: int = DEFAULT_WEEKS,
                 ingredients: Optional[Dict[str, Category]] = None):
        self.number_of_weeks = number_of_weeks
        self.ingredients: Dict[str, Category] = dict(ingredients or {})

    def __repr__(self) -> str:
        return f"Preferences(weeks={self.number_of_weeks}, categories={list(self.ingredients)})"

    @staticmethod
    def default():
        '''Default catalog skeleton: known categories, no items yet.'''
        return Preferences(DEFAULT_WEEKS, {
            name: Category(name, dict(flags)) for name, flags in DEFAULT_CATEGORIES.items()
        })

    @staticmethod
    def from_dict(data: Mapping):
        '''Validates raw preferences (numberOfWeeks/showWeeks + ingredients) and builds the aggregate.'''
        try:
            parsed = PreferencesInput.model_validate(dict(data or {}))
        except ValidationError as e:
            raise InvalidInput(f"Invalid preferences: {e}") from e
        ingredients = {
            name: Category(name, cat.meal_enabled.model_dump(), cat.items)
            for name, cat in parsed.ingredients.items()
        }
        return Preferences(parsed.number_of_weeks, ingredients)

    def to_dict(self):
        return {
            "numberOfWeeks": self.number_of_weeks,
            "ingredients": {name: cat.to_dict() for name, cat in self.ingredients.items()},
        }

    def category(self, name: str) -> Category:
        '''Returns the named category, creating it (enabled for both meals) if missing.'''
        if not isinstance(name, str) or not name.strip():
            raise InvalidInput(f"Invalid category name: {name!r}")
        if name not in self.ingredients:
            self.ingredients[name] = Category(name, {"midi": True, "soir": True})
        return self.ingredients[name]

    def apply_number_of_weeks(self, number_of_weeks: int, weeks: Optional[Dict[str, Plan]] = None) -> None:
        '''Updates the week count and enables week plans 1..n, disabling the others.'''
        if isinstance(number_of_weeks, bool) or not isinstance(number_of_weeks, int) \
                or not MIN_WEEKS <= number_of_weeks <= MAX_WEEKS:
            raise InvalidInput(f"Number of weeks must be between {MIN_WEEKS} and {MAX_WEEKS}: {number_of_weeks!r}")
        self.number_of_weeks = number_of_weeks
        for key, plan in (weeks or {}).items():
            plan.enabled = week_number_from_key(key) <= number_of_weeks
