"""Shared pytest fixtures for weighted-select tests.

Provides configuration objects, deterministic entropy sources, and the
canonical ``{a: 5, b: 2, c: 3}`` weight set used across test modules.
"""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from weighted_select.config import WeightedSelectConfig
from weighted_select.entropy.base import EntropySource
from weighted_select.entropy.seeded import SeededEntropySource

# Canonical weights: total 10, gcd 1.
CANONICAL_WEIGHTS: dict[str, int] = {"a": 5, "b": 2, "c": 3}


class ScriptedEntropySource(EntropySource):
    """Entropy source returning a fixed sequence of integers from ``random_below``.

    Records every ``upper`` bound it was asked for so tests can check the
    draw range.
    """

    def __init__(self, draws: Iterable[int]) -> None:
        self._draws = iter(draws)
        self.requested: list[int] = []

    @property
    def name(self) -> str:
        return "scripted"

    @property
    def is_available(self) -> bool:
        return True

    def get_random_bytes(self, n: int) -> bytes:
        return bytes(next(self._draws) % 256 for _ in range(n))

    def random_below(self, upper: int) -> int:
        self.requested.append(upper)
        return next(self._draws)

    def close(self) -> None:
        pass


@pytest.fixture
def canonical_weights() -> dict[str, int]:
    """Return a fresh copy of the canonical weight map."""
    return dict(CANONICAL_WEIGHTS)


@pytest.fixture
def default_config() -> WeightedSelectConfig:
    """Return a config with all default values, ignoring any .env file."""
    return WeightedSelectConfig(_env_file=None)


@pytest.fixture
def diagnostic_config() -> WeightedSelectConfig:
    """Return a config with diagnostic mode and full logging enabled."""
    return WeightedSelectConfig(_env_file=None, log_level="full", diagnostic_mode=True)


@pytest.fixture
def seeded_source() -> SeededEntropySource:
    """Return a SeededEntropySource with a fixed seed for reproducibility."""
    return SeededEntropySource(seed=42)


@pytest.fixture
def scripted_source() -> type[ScriptedEntropySource]:
    """Return the ScriptedEntropySource class for building scripted draws."""
    return ScriptedEntropySource
