"""Tests for SelectionLogger and SelectionRecord."""

from __future__ import annotations

import logging

import pytest

from weighted_select.config import WeightedSelectConfig
from weighted_select.logging.logger import SelectionLogger
from weighted_select.logging.types import SelectionRecord
from weighted_select.selection.smooth import SmoothWeightedSelector


def _make_record(**overrides: object) -> SelectionRecord:
    """Create a SelectionRecord with sensible defaults, overridable."""
    defaults: dict[str, object] = {
        "timestamp_ns": 1000000000,
        "selection_us": 2.5,
        "selector": "smooth",
        "value": "server1",
        "index": 0,
        "weight": 5,
        "total_weight": 10,
        "num_items": 3,
    }
    defaults.update(overrides)
    return SelectionRecord(**defaults)  # type: ignore[arg-type]


def _logger(log_level: str = "none", diagnostic_mode: bool = False) -> SelectionLogger:
    config = WeightedSelectConfig(
        _env_file=None, log_level=log_level, diagnostic_mode=diagnostic_mode
    )
    return SelectionLogger(config)


class TestSelectionRecord:
    """Tests for SelectionRecord immutability."""

    def test_frozen(self) -> None:
        record = _make_record()
        with pytest.raises(AttributeError):
            record.index = 2  # type: ignore[misc]

    def test_slots(self) -> None:
        assert hasattr(_make_record(), "__slots__")


class TestSelectionLogger:
    """Tests for SelectionLogger output and diagnostic storage."""

    def test_log_level_none_no_output(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="weighted_select"):
            _logger("none").log_selection(_make_record())
        assert caplog.records == []

    def test_summary_one_line(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="weighted_select"):
            _logger("summary").log_selection(_make_record())
        assert len(caplog.records) == 1
        message = caplog.records[0].getMessage()
        assert "selector=smooth" in message
        assert "value='server1'" in message
        assert "weight=5/10" in message

    def test_full_json_dump(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="weighted_select"):
            _logger("full").log_selection(_make_record(value=("10.0.0.1", 80)))
        message = caplog.records[0].getMessage()
        assert message.startswith("selection_record: ")
        assert '"total_weight": 10' in message
        assert '"value": ["10.0.0.1", 80]' in message

    def test_records_not_stored_without_diagnostic_mode(self) -> None:
        logger = _logger("summary")
        logger.log_selection(_make_record())
        assert logger.get_diagnostic_data() == []
        assert logger.get_summary_stats() == {}

    def test_diagnostic_mode_stores_records(self) -> None:
        logger = _logger(diagnostic_mode=True)
        records = [_make_record(index=i) for i in range(3)]
        for record in records:
            logger.log_selection(record)
        assert logger.get_diagnostic_data() == records

    def test_summary_stats(self) -> None:
        logger = _logger(diagnostic_mode=True)
        for value, us in (("a", 1.0), ("a", 3.0), ("b", 2.0), ("a", 2.0)):
            logger.log_selection(_make_record(value=value, selection_us=us))
        stats = logger.get_summary_stats()
        assert stats["total_selections"] == 4
        assert stats["counts"] == {"'a'": 3, "'b'": 1}
        assert stats["ratios"] == {"'a'": 0.75, "'b'": 0.25}
        assert stats["mean_selection_us"] == pytest.approx(2.0)
        assert stats["max_selection_us"] == 3.0

    def test_clear(self) -> None:
        logger = _logger(diagnostic_mode=True)
        logger.log_selection(_make_record())
        logger.clear()
        assert logger.get_diagnostic_data() == []


class TestSelectorIntegration:
    """Selectors emit one record per successful selection."""

    def test_records_match_schedule(self, canonical_weights) -> None:
        logger = _logger(diagnostic_mode=True)
        selector: SmoothWeightedSelector[str] = SmoothWeightedSelector(selection_logger=logger)
        for value, weight in canonical_weights.items():
            selector.add(value, weight)
        values = [selector.next() for _ in range(10)]

        records = logger.get_diagnostic_data()
        assert [r.value for r in records] == values
        assert all(r.selector == "smooth" for r in records)
        assert all(r.total_weight == 10 and r.num_items == 3 for r in records)
        assert [r.index for r in records[:3]] == [0, 2, 1]
        assert logger.get_summary_stats()["counts"] == {"'a'": 5, "'b'": 2, "'c'": 3}

    def test_no_record_without_selection(self) -> None:
        logger = _logger(diagnostic_mode=True)
        selector: SmoothWeightedSelector[str] = SmoothWeightedSelector(selection_logger=logger)
        selector.add("idle", 0)
        assert selector.next() is None
        assert logger.get_diagnostic_data() == []
