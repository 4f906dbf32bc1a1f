"""Entropy source subsystem for weighted-select.

Re-exports the ABC, registry, and built-in source implementations::

    from weighted_select.entropy import EntropySource, EntropySourceRegistry
    from weighted_select.entropy import SeededEntropySource, SystemEntropySource
"""

from weighted_select.entropy.base import EntropySource
from weighted_select.entropy.registry import EntropySourceRegistry, register_entropy_source
from weighted_select.entropy.seeded import SeededEntropySource
from weighted_select.entropy.system import SystemEntropySource

__all__ = [
    "EntropySource",
    "EntropySourceRegistry",
    "SeededEntropySource",
    "SystemEntropySource",
    "register_entropy_source",
]
