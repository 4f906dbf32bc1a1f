"""Exception hierarchy for weighted-select.

All exceptions derive from WeightedSelectError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.

An empty selection is not an error: selectors return ``None`` when no item
can be chosen.
"""


class WeightedSelectError(Exception):
    """Base exception for all weighted-select errors."""


class InvalidWeightError(WeightedSelectError, ValueError):
    """A weight passed to ``add()`` is negative or not an integer.

    Downstream arithmetic (gcd, thresholds, credit sums) assumes
    non-negative integers, so bad weights are rejected instead of clamped.
    """


class ConfigValidationError(WeightedSelectError):
    """Configuration field validation failed.

    Raised for unknown selector or entropy source names and unknown log
    levels. Malformed weights in the configuration are rejected earlier by
    pydantic.
    """


class EntropyUnavailableError(WeightedSelectError):
    """An entropy source cannot provide bytes."""
