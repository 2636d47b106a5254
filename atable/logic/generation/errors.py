"""Errors raised by the generation core.

Only structural problems are raised. Running out of unique meals is reported
through result values (see composer.SoftDuplicate / composer.Failure).
"""


class InvalidInput(ValueError):
    """Malformed arguments: partition bounds, meal type, ingredient shape, preferences."""


class DayOutOfRange(LookupError):
    """A day is not covered by any week range. Indicates a broken partition."""
