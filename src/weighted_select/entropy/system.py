"""System entropy source using ``os.urandom()``.

This is the default source for random selection. It is always available
on all platforms and needs no seeding.
"""

from __future__ import annotations

import os

from weighted_select.entropy.base import EntropySource
from weighted_select.entropy.registry import register_entropy_source
from weighted_select.exceptions import EntropyUnavailableError


@register_entropy_source("system")
class SystemEntropySource(EntropySource):
    """``os.urandom()`` wrapper, always available."""

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    def get_random_bytes(self, n: int) -> bytes:
        """Return *n* bytes from the OS CSPRNG.

        Raises:
            EntropyUnavailableError: If the OS randomness source fails.
        """
        try:
            return os.urandom(n)
        except OSError as exc:
            raise EntropyUnavailableError(f"os.urandom() failed: {exc}") from exc

    def close(self) -> None:
        """No-op, nothing to release."""
