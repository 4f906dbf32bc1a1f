"""Abstract base class for all entropy sources.

The random selector draws its integers from an injected entropy source
instead of a global generator, so tests can supply deterministic sequences.
The ABC provides a default ``random_below()`` that delegates to
``get_random_bytes()`` and a concrete ``health_check()`` method. Subclasses
must implement the four abstract members: ``name``, ``is_available``,
``get_random_bytes()``, and ``close()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class EntropySource(ABC):
    """Abstract base for all entropy sources."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'system'``, ``'seeded'``)."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Whether the source can currently provide entropy."""

    @abstractmethod
    def get_random_bytes(self, n: int) -> bytes:
        """Return exactly *n* random bytes.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes of entropy.

        Raises:
            EntropyUnavailableError: If the source cannot provide bytes.
        """

    def random_below(self, upper: int) -> int:
        """Return a uniformly distributed integer in ``[0, upper)``.

        The default implementation reads just enough bytes to cover
        ``upper - 1`` and rejects draws from the incomplete top bucket, so
        the result carries no modulo bias. Subclasses may override with a
        native integer generator.

        Args:
            upper: Exclusive upper bound, must be positive.

        Returns:
            Integer in ``[0, upper)``.

        Raises:
            ValueError: If *upper* is not positive.
        """
        if upper <= 0:
            raise ValueError(f"upper must be positive, got {upper}")
        if upper == 1:
            return 0
        n_bytes = ((upper - 1).bit_length() + 7) // 8
        span = 1 << (8 * n_bytes)
        limit = span - span % upper
        while True:
            draw = int.from_bytes(self.get_random_bytes(n_bytes), "big")
            if draw < limit:
                return draw % upper

    @abstractmethod
    def close(self) -> None:
        """Release resources (connections, file handles)."""

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this source.

        Returns:
            Dictionary with at least ``'source'`` and ``'healthy'`` keys.
        """
        return {"source": self.name, "healthy": self.is_available}
