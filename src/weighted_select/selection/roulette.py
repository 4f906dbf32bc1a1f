"""Random weighted selection (roulette wheel).

Each call draws ``r`` uniformly from ``[0, total_weight)`` and returns the
first entry, in insertion order, whose cumulative weight exceeds ``r``.
Long-run frequencies follow the weights, but the schedule is not smooth:
the same value may be returned many times in a row.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from weighted_select.entropy.system import SystemEntropySource
from weighted_select.selection.base import WeightedSelector
from weighted_select.selection.registry import SelectorRegistry

if TYPE_CHECKING:
    from weighted_select.entropy.base import EntropySource
    from weighted_select.logging.logger import SelectionLogger

T = TypeVar("T")


@SelectorRegistry.register("random")
class RandomWeightedSelector(WeightedSelector[T]):
    """Roulette-wheel selector over an injected entropy source.

    No state persists between calls beyond the table itself, so ``reset()``
    is a no-op.

    Args:
        entropy_source: Source of uniform integers. Defaults to
            :class:`SystemEntropySource`; pass a
            :class:`~weighted_select.entropy.SeededEntropySource` for a
            reproducible schedule.
        selection_logger: Optional diagnostic logger.
    """

    def __init__(
        self,
        entropy_source: EntropySource | None = None,
        selection_logger: SelectionLogger | None = None,
    ) -> None:
        super().__init__(selection_logger)
        self._entropy_source = entropy_source if entropy_source is not None else SystemEntropySource()

    @property
    def name(self) -> str:
        """Return ``'random'``."""
        return "random"

    @property
    def entropy_source(self) -> EntropySource:
        return self._entropy_source

    def _select(self) -> int | None:
        total = self._table.total_weight()
        if total == 0:
            return None

        draw = self._entropy_source.random_below(total)
        cumulative = 0
        for index, item in enumerate(self._table):
            cumulative += item.weight
            if cumulative > draw:
                return index

        # cumulative ends at total, which is always > draw.
        raise AssertionError(f"draw {draw} outside [0, {total})")
