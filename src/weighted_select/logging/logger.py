"""Diagnostic logger for per-selection events.

Uses the standard ``logging`` module with the ``"weighted_select"`` logger.
No ``print()`` statements. Supports three verbosity levels and an
in-memory diagnostic mode for post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from weighted_select.config import WeightedSelectConfig
    from weighted_select.logging.types import SelectionRecord

logger = logging.getLogger("weighted_select")


class SelectionLogger:
    """Per-selection diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per selection (selector, value, index,
        weight, total weight).

        ``"full"``: Full JSON dump of all record fields.

    Diagnostic mode stores all records in memory for post-hoc analysis via
    ``get_diagnostic_data()`` and ``get_summary_stats()``.
    """

    def __init__(self, config: WeightedSelectConfig) -> None:
        """Initialize the logger from configuration.

        Args:
            config: Configuration providing ``log_level`` and ``diagnostic_mode``.
        """
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[SelectionRecord] = []

    def log_selection(self, record: SelectionRecord) -> None:
        """Log a single selection event.

        Args:
            record: Immutable record of the selection.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "selector=%s value=%r index=%d weight=%d/%d items=%d time=%.1fus",
                record.selector,
                record.value,
                record.index,
                record.weight,
                record.total_weight,
                record.num_items,
                record.selection_us,
            )
        elif self._log_level == "full":
            logger.info("selection_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[SelectionRecord]:
        """Return all stored records (requires ``diagnostic_mode=True``).

        Returns:
            List of all SelectionRecord instances logged so far.
            Empty if diagnostic_mode is False.
        """
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute selection counts and observed ratios over stored records.

        Counts are keyed by ``repr(value)`` so unhashable values still
        aggregate.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        n = len(self._records)
        counts = Counter(repr(r.value) for r in self._records)
        times = [r.selection_us for r in self._records]
        return {
            "total_selections": n,
            "counts": dict(counts),
            "ratios": {value: count / n for value, count in counts.items()},
            "mean_selection_us": sum(times) / n,
            "max_selection_us": max(times),
        }

    def clear(self) -> None:
        """Drop all stored records."""
        self._records.clear()
