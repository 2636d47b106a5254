"""Meal phrase composition and the bounded-retry uniqueness check."""
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Set, Union

from atable.logic.generation.errors import InvalidInput
from atable.logic.generation.rotation import RotationState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Accepted:
    value: str


@dataclass(frozen=True)
class SoftDuplicate:
    """Every attempt collided; `value` is the last composed meal."""
    value: str


@dataclass(frozen=True)
class Failure:
    reason: str


GenerationResult = Union[Accepted, SoftDuplicate]


def normalize_meal(text: str) -> str:
    return (text or "").strip().lower()


def compose(ingredients: List[str]) -> str:
    """Join ingredients into a meal phrase.

    compose(["Riz"]) -> "Riz"
    compose(["Riz", "Poulet"]) -> "Riz avec Poulet"
    compose(["Riz", "Poulet", "Brocoli"]) -> "Riz, Poulet et Brocoli"
    """
    if not ingredients:
        return ""
    if len(ingredients) == 1:
        return ingredients[0]
    if len(ingredients) == 2:
        return f"{ingredients[0]} avec {ingredients[1]}"
    return f"{', '.join(ingredients[:-1])} et {ingredients[-1]}"


def draw_meal(rotations: Dict[str, RotationState], categories: Iterable[str]) -> str:
    """Pull one ingredient per category and compose them. Categories without a rotation are skipped."""
    picked = []
    for category in categories:
        state = rotations.get(category)
        item = state.get_next() if state else None
        if item is not None:
            picked.append(item)
    return compose(picked)


def generate_with_uniqueness(rotations: Dict[str, RotationState], categories: List[str],
                             already_used: Set[str], max_attempts: int) -> GenerationResult:
    """Draw meals until one is not in `already_used` (normalized keys).

    Returns Accepted on success, SoftDuplicate with the last draw once
    `max_attempts` draws have all collided. Callers decide whether a soft
    duplicate is acceptable.
    """
    if max_attempts < 1:
        raise InvalidInput(f"max_attempts must be >= 1: {max_attempts}")
    meal = ""
    for attempt in range(1, max_attempts + 1):
        meal = draw_meal(rotations, categories)
        if normalize_meal(meal) not in already_used:
            return Accepted(meal)
        logger.debug("Attempt %s/%s collided: %r", attempt, max_attempts, meal)
    return SoftDuplicate(meal)

