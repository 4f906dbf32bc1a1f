"""Weighted selection subsystem for weighted-select.

Three interchangeable algorithms behind the :class:`WeightedSelector`
contract: random (roulette wheel), LVS weighted round-robin and Nginx
smooth weighted round-robin. Importing this package registers all three
with :class:`SelectorRegistry`.
"""

from weighted_select.selection.base import WeightedSelector
from weighted_select.selection.registry import SelectorRegistry
from weighted_select.selection.roulette import RandomWeightedSelector
from weighted_select.selection.roundrobin import RoundRobinWeightedSelector
from weighted_select.selection.smooth import SmoothWeightedItem, SmoothWeightedSelector

__all__ = [
    "RandomWeightedSelector",
    "RoundRobinWeightedSelector",
    "SelectorRegistry",
    "SmoothWeightedItem",
    "SmoothWeightedSelector",
    "WeightedSelector",
]
