"""Ordered table of weighted items shared by every selector.

Insertion order is significant: it is the scan order for round-robin
selection and the tie-break order for smooth selection.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from weighted_select.exceptions import InvalidWeightError

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")


def check_weight(weight: int) -> int:
    """Validate a weight and return it as a plain ``int``.

    Any integral type (``int``, NumPy integer scalars, objects implementing
    ``__index__``) is accepted.

    Args:
        weight: Candidate weight.

    Returns:
        The weight converted with ``operator.index()``.

    Raises:
        InvalidWeightError: If *weight* is not integral, is a ``bool``, or is negative.
    """
    # bool is an int subclass but never a meaningful weight.
    if isinstance(weight, bool):
        raise InvalidWeightError("Weight must be an int, got bool")
    try:
        value = operator.index(weight)
    except TypeError:
        raise InvalidWeightError(f"Weight must be an int, got {type(weight).__name__}") from None
    if value < 0:
        raise InvalidWeightError(f"Weight must be >= 0, got {value}")
    return value


@dataclass(slots=True)
class WeightedItem(Generic[T]):
    """A registered value and its configured weight.

    Attributes:
        value: Opaque item identity returned by selectors.
        weight: Non-negative selection weight. 0 keeps the item registered
            but never selected.
    """

    value: T
    weight: int


class WeightTable(Generic[T]):
    """Insertion-ordered sequence of :class:`WeightedItem`.

    Duplicate values are allowed and treated as distinct entries. The table
    keeps a running total so ``total_weight()`` is O(1).

    Args:
        item_type: Record class created by ``add()``. Stateful selectors pass
            a :class:`WeightedItem` subclass so per-item state lives on the
            same record as the value.
    """

    def __init__(self, item_type: type[WeightedItem[T]] = WeightedItem) -> None:
        self._item_type = item_type
        self._items: list[WeightedItem[T]] = []
        self._total = 0

    def add(self, value: T, weight: int) -> WeightedItem[T]:
        """Append *value* with *weight* and return the new entry.

        Raises:
            InvalidWeightError: If *weight* is negative or not an int.
        """
        item = self._item_type(value, check_weight(weight))
        self._items.append(item)
        self._total += item.weight
        return item

    def is_empty(self) -> bool:
        return not self._items

    def total_weight(self) -> int:
        return self._total

    def max_weight(self) -> int:
        """Largest weight in the table, 0 if empty."""
        return max((item.weight for item in self._items), default=0)

    def items(self) -> list[tuple[T, int]]:
        """Return ``(value, weight)`` pairs in insertion order."""
        return [(item.value, item.weight) for item in self._items]

    def clear(self) -> None:
        self._items.clear()
        self._total = 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[WeightedItem[T]]:
        return iter(self._items)

    def __getitem__(self, index: int) -> WeightedItem[T]:
        return self._items[index]

    def __repr__(self) -> str:
        return f"WeightTable({self.items()!r})"
