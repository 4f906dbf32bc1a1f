"""Seeded pseudo-random entropy source for reproducible selection.

Backed by a NumPy ``Generator`` so that two sources built with the same seed
produce identical draws. Intended for tests, simulations and replaying a
selection schedule.
"""

from __future__ import annotations

import numpy as np

from weighted_select.entropy.base import EntropySource
from weighted_select.entropy.registry import register_entropy_source

_INT64_MAX = int(np.iinfo(np.int64).max)


@register_entropy_source("seeded")
class SeededEntropySource(EntropySource):
    """Deterministic entropy source driven by ``numpy.random.default_rng``.

    Args:
        seed: Optional RNG seed. ``None`` seeds from the OS, which makes the
            source non-reproducible.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def name(self) -> str:
        """Return ``'seeded'``."""
        return "seeded"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    @property
    def seed(self) -> int | None:
        return self._seed

    def get_random_bytes(self, n: int) -> bytes:
        """Generate *n* bytes from the seeded generator."""
        return self._rng.bytes(n)

    def random_below(self, upper: int) -> int:
        """Draw an integer in ``[0, upper)`` with ``Generator.integers``.

        Bounds past the int64 range fall back to byte-based rejection
        sampling, which still consumes the seeded generator.
        """
        if upper <= 0:
            raise ValueError(f"upper must be positive, got {upper}")
        if upper > _INT64_MAX:
            return super().random_below(upper)
        return int(self._rng.integers(0, upper))

    def reseed(self, seed: int | None = None) -> None:
        """Restart the generator, replaying the sequence for a fixed seed."""
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    def close(self) -> None:
        """No-op, nothing to release."""
