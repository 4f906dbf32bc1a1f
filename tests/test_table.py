"""Tests for WeightTable and weight validation."""

from __future__ import annotations

import numpy as np
import pytest

from weighted_select.exceptions import InvalidWeightError, WeightedSelectError
from weighted_select.table import WeightedItem, WeightTable, check_weight


class TestCheckWeight:
    """Tests for the shared weight validator."""

    @pytest.mark.parametrize("weight", [0, 1, 7, 10**12])
    def test_accepts_non_negative_ints(self, weight: int) -> None:
        assert check_weight(weight) == weight

    @pytest.mark.parametrize("weight", [np.int64(3), np.uint8(3), np.int32(3)])
    def test_accepts_numpy_integers_as_plain_int(self, weight: object) -> None:
        result = check_weight(weight)  # type: ignore[arg-type]
        assert result == 3
        assert type(result) is int

    @pytest.mark.parametrize("weight", [np.int64(-2), np.float64(3.0)])
    def test_rejects_negative_or_non_integral_numpy(self, weight: object) -> None:
        with pytest.raises(InvalidWeightError):
            check_weight(weight)  # type: ignore[arg-type]

    def test_rejects_negative(self) -> None:
        with pytest.raises(InvalidWeightError, match=">= 0"):
            check_weight(-1)

    @pytest.mark.parametrize("weight", [1.5, "3", None, True])
    def test_rejects_non_int(self, weight: object) -> None:
        with pytest.raises(InvalidWeightError, match="must be an int"):
            check_weight(weight)  # type: ignore[arg-type]

    def test_invalid_weight_is_value_error(self) -> None:
        """Callers catching ValueError or the library base both see it."""
        assert issubclass(InvalidWeightError, ValueError)
        assert issubclass(InvalidWeightError, WeightedSelectError)


class TestWeightTable:
    """Tests for the ordered item table."""

    def test_new_table_is_empty(self) -> None:
        table: WeightTable[str] = WeightTable()
        assert table.is_empty()
        assert table.total_weight() == 0
        assert table.max_weight() == 0
        assert len(table) == 0

    def test_add_appends_in_order(self) -> None:
        table: WeightTable[str] = WeightTable()
        table.add("a", 5)
        table.add("b", 2)
        table.add("c", 3)
        assert table.items() == [("a", 5), ("b", 2), ("c", 3)]
        assert [item.value for item in table] == ["a", "b", "c"]
        assert table[1] == WeightedItem("b", 2)

    def test_total_and_max_weight(self) -> None:
        table: WeightTable[str] = WeightTable()
        table.add("a", 5)
        table.add("b", 2)
        table.add("c", 0)
        assert table.total_weight() == 7
        assert table.max_weight() == 5
        assert not table.is_empty()

    def test_duplicates_are_distinct_entries(self) -> None:
        table: WeightTable[str] = WeightTable()
        table.add("a", 1)
        table.add("a", 2)
        assert len(table) == 2
        assert table.total_weight() == 3

    def test_zero_weight_entries_are_registered(self) -> None:
        table: WeightTable[str] = WeightTable()
        table.add("idle", 0)
        assert not table.is_empty()
        assert table.total_weight() == 0

    def test_rejected_weight_leaves_table_untouched(self) -> None:
        table: WeightTable[str] = WeightTable()
        table.add("a", 1)
        with pytest.raises(InvalidWeightError):
            table.add("b", -3)
        assert table.items() == [("a", 1)]
        assert table.total_weight() == 1

    def test_clear(self) -> None:
        table: WeightTable[str] = WeightTable()
        table.add("a", 4)
        table.clear()
        assert table.is_empty()
        assert table.total_weight() == 0

    def test_custom_item_type(self) -> None:
        """add() should build records of the configured type."""

        class Tagged(WeightedItem):
            pass

        table: WeightTable[str] = WeightTable(Tagged)
        item = table.add("a", 1)
        assert isinstance(item, Tagged)
        assert table[0] is item
