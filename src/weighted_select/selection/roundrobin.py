"""Classic weighted round-robin selection, as scheduled by LVS.

The selector scans the table cyclically while a weight threshold steps down
from the maximum weight by the gcd of all positive weights. An entry is
returned when its weight reaches the current threshold, so heavier entries
appear at more threshold levels per cycle.

For weights ``{a: 5, b: 2, c: 3}`` one cycle yields
``a a a c a b c a b c``: 5, 2 and 3 selections over 10 calls.

See http://kb.linuxvirtualserver.org/wiki/Weighted_Round-Robin_Scheduling
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, TypeVar

from weighted_select.selection.base import WeightedSelector
from weighted_select.selection.registry import SelectorRegistry

if TYPE_CHECKING:
    from weighted_select.logging.logger import SelectionLogger

logger = logging.getLogger("weighted_select")

T = TypeVar("T")


@SelectorRegistry.register("roundrobin")
class RoundRobinWeightedSelector(WeightedSelector[T]):
    """LVS weighted round-robin selector.

    State:
        index: Last scanned position, -1 before the first call.
        current_weight: Current weight threshold, 0 before the first call.
        max_weight: Largest configured weight.
        gcd: Greatest common divisor of all positive weights.

    Both caches are updated inside ``add()``, so items may be added between
    calls without breaking the per-cycle counts. The scan position and
    threshold are kept across ``add()``: the threshold is a multiple of the
    old gcd, hence of the new one, and never exceeds the new maximum.
    """

    def __init__(self, selection_logger: SelectionLogger | None = None) -> None:
        super().__init__(selection_logger)
        self._index = -1
        self._current_weight = 0
        self._max_weight = 0
        self._gcd = 0

    @property
    def name(self) -> str:
        """Return ``'roundrobin'``."""
        return "roundrobin"

    @property
    def gcd(self) -> int:
        return self._gcd

    @property
    def max_weight(self) -> int:
        return self._max_weight

    @property
    def cycle_length(self) -> int:
        """Number of calls after which the schedule repeats (0 if nothing is selectable)."""
        if self._gcd == 0:
            return 0
        return self._table.total_weight() // self._gcd

    def add(self, value: T, weight: int) -> None:
        super().add(value, weight)
        weight = self._table[-1].weight
        if weight > 0:
            # gcd(0, w) == w, so the first positive weight seeds the cache.
            self._gcd = math.gcd(self._gcd, weight)
            self._max_weight = max(self._max_weight, weight)
            logger.debug(
                "roundrobin caches updated: max_weight=%d gcd=%d",
                self._max_weight,
                self._gcd,
            )

    def remove_all(self) -> None:
        super().remove_all()
        self._max_weight = 0
        self._gcd = 0

    def reset(self) -> None:
        self._index = -1
        self._current_weight = 0

    def _select(self) -> int | None:
        # All weights zero: nothing can ever reach the threshold.
        if self._max_weight == 0:
            return None

        size = len(self._table)
        while True:
            self._index = (self._index + 1) % size
            if self._index == 0:
                self._current_weight -= self._gcd
                if self._current_weight <= 0:
                    self._current_weight = self._max_weight
                    if self._current_weight == 0:
                        return None

            if self._table[self._index].weight >= self._current_weight:
                return self._index
