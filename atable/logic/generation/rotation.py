"""Per-category rotations: hand out ingredients without repeating one until the whole
category has been used, then reshuffle for the next cycle.

State is held in explicit RotationState objects created per generation run.
"""
import logging
import random
from typing import Dict, List, Mapping, Optional

from atable.domain.Category import Category
from atable.logic.generation.errors import InvalidInput
from atable.utilities.constants import MEAL_TYPES

logger = logging.getLogger(__name__)


class RotationState:
    def __init__(self, shuffled_items: List[str], rng: random.Random):
        self.shuffled_items = shuffled_items
        self.cursor = 0
        self.used_this_cycle = set()
        self.cycle_count = 0
        self.last_item: Optional[str] = None
        self._rng = rng

    def __repr__(self) -> str:
        return (f"RotationState(items={len(self.shuffled_items)}, cursor={self.cursor}, "
                f"used={len(self.used_this_cycle)}, cycle={self.cycle_count})")

    @classmethod
    def initialize(cls, items: List[str], rng: Optional[random.Random] = None):
        rng = rng or random.Random()
        shuffled = list(items)
        rng.shuffle(shuffled)
        return cls(shuffled, rng)

    def get_next(self) -> Optional[str]:
        """Next ingredient of the current cycle, or None for an empty category."""
        size = len(self.shuffled_items)
        if size == 0:
            return None

        if len(self.used_this_cycle) >= size:
            self.used_this_cycle.clear()
            self._rng.shuffle(self.shuffled_items)
            self.cursor = 0
            self.cycle_count += 1
            if size > 1 and self.shuffled_items[0] == self.last_item:
                # New cycle must not open with the item that closed the previous one
                swap = self._rng.randrange(1, size)
                self.shuffled_items[0], self.shuffled_items[swap] = self.shuffled_items[swap], self.shuffled_items[0]
            logger.debug("Rotation reshuffled, starting cycle %s", self.cycle_count)

        item = self.shuffled_items[self.cursor]
        probes = 0
        # Bounded: at most one full pass over the items
        while item in self.used_this_cycle and probes < size:
            self.cursor = (self.cursor + 1) % size
            item = self.shuffled_items[self.cursor]
            probes += 1

        self.used_this_cycle.add(item)
        self.cursor = (self.cursor + 1) % size
        self.last_item = item
        return item


def build_rotations(ingredients: Mapping[str, Category],
                    rng: Optional[random.Random] = None) -> Dict[str, RotationState]:
    """Fresh rotation for every category that has items."""
    rng = rng or random.Random()
    return {
        name: RotationState.initialize(category.items, rng)
        for name, category in ingredients.items()
        if category.has_items()
    }


def active_categories(ingredients: Mapping[str, Category], meal_type: str) -> List[str]:
    """Names of categories enabled for the meal type and holding items, in mapping order."""
    if meal_type not in MEAL_TYPES:
        raise InvalidInput(f"Unknown meal type: {meal_type!r} (expected one of {', '.join(MEAL_TYPES)})")
    return [
        name for name, category in ingredients.items()
        if category.is_enabled_for(meal_type) and category.has_items()
    ]
