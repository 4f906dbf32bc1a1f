"""Weighted selector contract shared by every selection algorithm.

Callers hold a :class:`WeightedSelector` reference and never depend on a
concrete variant, so the algorithm can be swapped at configuration time.

Selectors are not thread-safe: ``next()`` mutates scan and credit state and
``add()`` mutates the table, so callers sharing an instance across threads
must serialize access themselves.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

from weighted_select.logging.types import SelectionRecord
from weighted_select.table import WeightTable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from weighted_select.logging.logger import SelectionLogger
    from weighted_select.table import WeightedItem

T = TypeVar("T")


class WeightedSelector(ABC, Generic[T]):
    """Abstract base class for weighted selection algorithms.

    Implementations provide ``name`` and ``_select()``; the base class owns
    the :class:`WeightTable`, the public operations and diagnostic logging.

    A selector is also an iterator: ``next(selector)`` returns the next
    value and raises ``StopIteration`` when nothing can be selected.

    Args:
        selection_logger: Optional diagnostic logger receiving one
            :class:`SelectionRecord` per successful selection.
    """

    def __init__(self, selection_logger: SelectionLogger | None = None) -> None:
        self._table: WeightTable[T] = self._new_table()
        self._selection_logger = selection_logger

    @property
    @abstractmethod
    def name(self) -> str:
        """Registered identifier of the algorithm (e.g., ``'smooth'``)."""

    @abstractmethod
    def _select(self) -> int | None:
        """Advance the algorithm by one step.

        Returns:
            Index of the chosen entry in the table, or ``None`` when no
            entry can be selected (empty table or zero total weight).
        """

    @property
    def selection_logger(self) -> SelectionLogger | None:
        return self._selection_logger

    def _new_table(self) -> WeightTable[T]:
        """Create the backing table. Stateful selectors override the record type."""
        return WeightTable()

    def add(self, value: T, weight: int) -> None:
        """Register *value* with *weight* at the end of the table.

        Args:
            value: Item returned by ``next()`` when selected.
            weight: Non-negative integer weight. 0 registers the value
                without ever selecting it.

        Raises:
            InvalidWeightError: If *weight* is negative or not an int.
        """
        self._table.add(value, weight)

    def next(self) -> T | None:
        """Return the next selected value, or ``None`` if there is none.

        ``None`` is returned only for an empty table or a zero total weight.
        """
        item = self._choose()
        return None if item is None else item.value

    def is_empty(self) -> bool:
        return self._table.is_empty()

    def total_weight(self) -> int:
        return self._table.total_weight()

    def all(self) -> list[tuple[T, int]]:
        """Return every registered ``(value, weight)`` pair in insertion order."""
        return self._table.items()

    def remove_all(self) -> None:
        """Drop every registered item and rewind the algorithm state."""
        self._table.clear()
        self.reset()

    def reset(self) -> None:
        """Rewind the algorithm to its initial state, keeping the items."""

    def _choose(self) -> WeightedItem[T] | None:
        start = time.perf_counter_ns()
        index = self._select()
        if index is None:
            return None
        item = self._table[index]
        if self._selection_logger is not None:
            self._selection_logger.log_selection(
                SelectionRecord(
                    timestamp_ns=time.time_ns(),
                    selection_us=(time.perf_counter_ns() - start) / 1_000,
                    selector=self.name,
                    value=item.value,
                    index=index,
                    weight=item.weight,
                    total_weight=self._table.total_weight(),
                    num_items=len(self._table),
                )
            )
        return item

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        item = self._choose()
        if item is None:
            raise StopIteration
        return item.value

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.all()!r})"
