from typing import Final

MIDI: Final[str] = "midi"
SOIR: Final[str] = "soir"
MEAL_TYPES: Final[tuple[str, ...]] = (MIDI, SOIR)

MIN_WEEKS: Final[int] = 1
MAX_WEEKS: Final[int] = 4

WEEK_KEY_PREFIX: Final[str] = "week"
NO_SUGGESTION: Final[str] = "no suggestion available"

# Legacy plan keys, no longer accepted as day identifiers
LEGACY_DAY_NAMES: Final[tuple[str, ...]] = (
    "lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche"
)

DEFAULT_CATEGORIES: Final[dict[str, dict[str, bool]]] = {
    "Féculents": {"midi": True, "soir": True},
    "Protéines": {"midi": True, "soir": False},
    "Légumes": {"midi": True, "soir": True},
}
