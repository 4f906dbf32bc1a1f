"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class SelectionRecord:
    """Immutable record of a single successful selection.

    Attributes:
        timestamp_ns: Wall-clock time of the selection (nanoseconds since epoch).
        selection_us: Time spent inside the algorithm (microseconds).
        selector: Registered name of the selector that made the choice.
        value: The selected value.
        index: Position of the selected entry in insertion order.
        weight: Configured weight of the selected entry.
        total_weight: Sum of all configured weights at selection time.
        num_items: Number of registered entries at selection time.
    """

    timestamp_ns: int
    selection_us: float

    selector: str
    value: Any
    index: int

    weight: int
    total_weight: int
    num_items: int
