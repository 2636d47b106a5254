"""Category domain entity: named group of interchangeable ingredients with per-meal flags."""
from typing import Dict, List, Mapping, Optional
from atable.logic.generation.errors import InvalidInput
from atable.utilities.constants import MEAL_TYPES


class Category:
    def __init__(self, name: str = "", meal_enabled: Optional[Dict[str, bool]] = None,
                 items: Optional[List[str]] = None):
        self.name = name
        flags = meal_enabled or {}
        self.meal_enabled = {meal: bool(flags.get(meal, False)) for meal in MEAL_TYPES}
        self.items = items[:] if items else []

    def __str__(self) -> str:
        enabled = [meal for meal in MEAL_TYPES if self.meal_enabled[meal]]
        return f"{self.name} - {len(self.items)} items - Meals: {', '.join(enabled) or 'none'}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return (self.name, self.meal_enabled, self.items) == (other.name, other.meal_enabled, other.items)

    def is_enabled_for(self, meal_type: str) -> bool:
        return self.meal_enabled.get(meal_type, False)

    def has_items(self) -> bool:
        return len(self.items) > 0

    def add_item(self, item: str) -> bool:
        '''Adds a trimmed item unless it is already present. Returns True if the list changed.'''
        if not isinstance(item, str) or not item.strip():
            raise InvalidInput(f"Invalid item for category {self.name!r}: {item!r}")
        trimmed = item.strip()
        if trimmed in self.items:
            return False
        self.items.append(trimmed)
        return True

    def remove_item(self, item: str) -> bool:
        '''Removes every exact occurrence of the item. Returns True if something was removed.'''
        before = len(self.items)
        self.items = [i for i in self.items if i != item]
        return len(self.items) != before

    def set_meal_enabled(self, midi: bool, soir: bool) -> None:
        if not isinstance(midi, bool) or not isinstance(soir, bool):
            raise InvalidInput(f"Meal flags must be booleans for category {self.name!r}")
        self.meal_enabled = {"midi": midi, "soir": soir}

    @staticmethod
    def from_dict(name: str, data: Mapping):
        '''Creates a Category from a plain mapping. Accepts the legacy "repas" key for meal flags.'''
        if not isinstance(data, Mapping):
            raise InvalidInput(f"Category {name!r} must be a mapping, got {type(data).__name__}")
        flags = data.get("mealEnabled", data.get("repas")) or {}
        if not isinstance(flags, Mapping):
            raise InvalidInput(f"Meal flags for category {name!r} must be a mapping")
        for meal in MEAL_TYPES:
            if meal in flags and not isinstance(flags[meal], bool):
                raise InvalidInput(f"Meal flag {meal!r} must be a boolean for category {name!r}: {flags[meal]!r}")
        items = data.get("items") or []
        if not isinstance(items, list) or not all(isinstance(i, str) for i in items):
            raise InvalidInput(f"Items must be a list of strings for category {name!r}")
        return Category(name, dict(flags), items)

    def to_dict(self):
        return {
            "mealEnabled": dict(self.meal_enabled),
            "items": list(self.items),
        }
