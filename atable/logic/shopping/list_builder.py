"""Shopping list built from the generated week plans.

Meals are split back into their ingredients (the inverse of `compose`) and
counted across every week. Ingredients are grouped case-insensitively; the
label kept for a group is the first spelling met.
"""
import logging
import re
from typing import Dict, List, Mapping

from atable.domain.Plan import Plan
from atable.logic.generation.errors import InvalidInput

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"\s+(?:et|avec)\s+", re.IGNORECASE)


def _normalize(name: str) -> str:
    return (name or '').strip().lower()


def parse_meal(meal: str) -> List[str]:
    """Split a composed meal into its ingredients.

    >>> parse_meal("Riz, Poulet et Brocoli")
    ['Riz', 'Poulet', 'Brocoli']
    >>> parse_meal("Pâtes avec Tomate")
    ['Pâtes', 'Tomate']
    """
    if not isinstance(meal, str) or not meal.strip():
        return []
    return [part.strip() for part in _SEPARATORS.sub(',', meal).split(',') if part.strip()]


def aggregate_ingredients(weeks: Mapping[str, Plan]) -> Dict[str, Dict[str, object]]:
    """Count every ingredient of every filled slot across all week plans.

    Returns {normalized name: {"label": str, "count": int}}. Disabled weeks are
    counted too, as their meals are still part of the month.
    """
    counts: Dict[str, Dict[str, object]] = {}
    for key, plan in weeks.items():
        if plan is None:
            continue
        if not isinstance(plan, Plan):
            raise InvalidInput(f"Week {key!r} must be a Plan, got {type(plan).__name__}")
        for meal in plan.meal_names():
            for ingredient in parse_meal(meal):
                entry = counts.setdefault(_normalize(ingredient), {"label": ingredient, "count": 0})
                entry["count"] += 1
    logger.debug("Shopping list aggregated %d ingredients over %d weeks", len(counts), len(weeks))
    return counts


def build_shopping_list(weeks: Mapping[str, Plan]) -> List[Dict[str, object]]:
    """Aggregated ingredients as a list sorted by label, ignoring case."""
    entries = aggregate_ingredients(weeks).values()
    return sorted((dict(entry) for entry in entries), key=lambda entry: _normalize(entry["label"]))
