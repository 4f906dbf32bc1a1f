"""weighted-select: weighted item selection with three interchangeable algorithms.

Given candidates with integer weights, a selector yields one candidate per
call so that, over many calls, each candidate's frequency follows its share
of the total weight. Algorithms:

- ``random``: roulette wheel over an injected entropy source
- ``roundrobin``: LVS weighted round-robin
- ``smooth``: Nginx smooth weighted round-robin

Usage::

    from weighted_select import SmoothWeightedSelector

    selector = SmoothWeightedSelector()
    selector.add("server1", 5)
    selector.add("server2", 2)
    selector.add("server3", 3)
    backend = selector.next()
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("weighted-select")
except PackageNotFoundError:
    __version__ = "0.0.0"

from weighted_select.config import WeightedSelectConfig, validate_config
from weighted_select.exceptions import (
    ConfigValidationError,
    EntropyUnavailableError,
    InvalidWeightError,
    WeightedSelectError,
)
from weighted_select.factory import build_entropy_source, build_selector
from weighted_select.selection import (
    RandomWeightedSelector,
    RoundRobinWeightedSelector,
    SelectorRegistry,
    SmoothWeightedSelector,
    WeightedSelector,
)
from weighted_select.table import WeightedItem, WeightTable

__all__ = [
    "ConfigValidationError",
    "EntropyUnavailableError",
    "InvalidWeightError",
    "RandomWeightedSelector",
    "RoundRobinWeightedSelector",
    "SelectorRegistry",
    "SmoothWeightedSelector",
    "WeightTable",
    "WeightedItem",
    "WeightedSelectConfig",
    "WeightedSelectError",
    "WeightedSelector",
    "__version__",
    "build_entropy_source",
    "build_selector",
    "validate_config",
]
