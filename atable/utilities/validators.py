"""
Input validation schemas using Pydantic for preferences and generation requests.
"""
from pydantic import BaseModel, Field, AliasChoices, StrictBool, field_validator
from typing import Dict, List

from atable.utilities.config import DEFAULT_WEEKS
from atable.utilities.constants import MEAL_TYPES, MIN_WEEKS, MAX_WEEKS


class MealEnabledInput(BaseModel):
    """Schema for per-meal enable flags."""
    midi: StrictBool = False
    soir: StrictBool = False


class CategoryInput(BaseModel):
    """Schema for one ingredient category."""
    meal_enabled: MealEnabledInput = Field(
        default_factory=MealEnabledInput,
        validation_alias=AliasChoices('mealEnabled', 'repas', 'meal_enabled'),
    )
    items: List[str] = Field(default_factory=list)

    @field_validator('items')
    @classmethod
    def strip_items(cls, v):
        """Trim items and drop blanks, keeping the first occurrence of duplicates."""
        cleaned = []
        for item in v:
            item = item.strip()
            if item and item not in cleaned:
                cleaned.append(item)
        return cleaned


class PreferencesInput(BaseModel):
    """Schema for user planning preferences."""
    number_of_weeks: int = Field(
        DEFAULT_WEEKS, ge=MIN_WEEKS, le=MAX_WEEKS,
        validation_alias=AliasChoices('numberOfWeeks', 'showWeeks', 'number_of_weeks'),
    )
    ingredients: Dict[str, CategoryInput] = Field(default_factory=dict)

    @field_validator('ingredients')
    @classmethod
    def validate_category_names(cls, v):
        """Category names must be non-blank."""
        for name in v:
            if not name.strip():
                raise ValueError('Category name cannot be empty')
        return v


class SingleMealRequest(BaseModel):
    """Schema for a single-slot suggestion request."""
    meal_type: str = Field('midi', validation_alias=AliasChoices('mealType', 'meal_type'))
    used_meals: List[str] = Field(default_factory=list, validation_alias=AliasChoices('usedMeals', 'used_meals'))

    @field_validator('meal_type')
    @classmethod
    def validate_meal_type(cls, v):
        if v not in MEAL_TYPES:
            raise ValueError(f'Meal type must be one of {", ".join(MEAL_TYPES)}')
        return v
