"""Smooth weighted round-robin selection, as implemented by Nginx.

On each call every entry's current weight grows by its effective weight,
the entry with the greatest current weight wins (earliest entry on ties),
and the winner pays back the sum of all effective weights. Heavier entries
are interleaved with lighter ones instead of being clustered.

For weights ``{a: 5, b: 1, c: 1}`` this yields ``a a b a c a a``.

See https://github.com/phusion/nginx/commit/27e94984486058d73157038f7950a0a36ecc6e35
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeVar, cast

from weighted_select.selection.base import WeightedSelector
from weighted_select.selection.registry import SelectorRegistry
from weighted_select.table import WeightedItem, WeightTable

T = TypeVar("T")


@dataclass(slots=True)
class SmoothWeightedItem(WeightedItem[T]):
    """Table record carrying the smooth selector's per-item state.

    Attributes:
        current_weight: Accumulated credit, starts at 0.
        effective_weight: Weight credited on every call. Starts equal to
            ``weight`` and never diverges from it here; kept separate so a
            health-aware caller could lower it without touching ``weight``.
    """

    current_weight: int = 0
    effective_weight: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.effective_weight = self.weight


@SelectorRegistry.register("smooth")
class SmoothWeightedSelector(WeightedSelector[T]):
    """Nginx smooth weighted round-robin selector.

    Over any ``total_weight()`` consecutive calls from a fresh (or reset)
    instance, each value is returned exactly as many times as its weight.
    """

    @property
    def name(self) -> str:
        """Return ``'smooth'``."""
        return "smooth"

    def _new_table(self) -> WeightTable[T]:
        return WeightTable(SmoothWeightedItem)

    def _items(self) -> list[SmoothWeightedItem[T]]:
        return cast("list[SmoothWeightedItem[T]]", list(self._table))

    def credits(self) -> list[tuple[T, int]]:
        """Return ``(value, current_weight)`` pairs in insertion order."""
        return [(item.value, item.current_weight) for item in self._items()]

    def reset(self) -> None:
        for item in self._items():
            item.current_weight = 0
            item.effective_weight = item.weight

    def _select(self) -> int | None:
        if self._table.total_weight() == 0:
            return None

        items = self._items()
        total = 0
        best = 0
        for index, item in enumerate(items):
            item.current_weight += item.effective_weight
            total += item.effective_weight
            # Strict comparison keeps the earliest entry on ties.
            if item.current_weight > items[best].current_weight:
                best = index

        items[best].current_weight -= total
        return best
