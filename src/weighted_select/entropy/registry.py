"""Registry of entropy sources usable by the random selector.

Built-in sources register with ``@register_entropy_source``. Packages may
contribute more through the ``weighted_select.entropy_sources`` entry-point
group; those are imported the first time a name is missing and are only
accepted if they are concrete :class:`EntropySource` subclasses, since the
random selector calls ``random_below()`` on whatever the factory builds.
"""

from __future__ import annotations

import importlib.metadata
import inspect
import logging
from typing import TYPE_CHECKING, ClassVar

from weighted_select.entropy.base import EntropySource

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("weighted_select")

PLUGIN_GROUP = "weighted_select.entropy_sources"


def _check_source_class(name: str, candidate: object) -> type[EntropySource]:
    """Return *candidate* if it can serve as an entropy source class.

    Raises:
        TypeError: If *candidate* is not a concrete EntropySource subclass.
    """
    if not (isinstance(candidate, type) and issubclass(candidate, EntropySource)):
        raise TypeError(f"Entropy source {name!r} must be an EntropySource subclass, got {candidate!r}")
    if inspect.isabstract(candidate):
        missing = ", ".join(sorted(candidate.__abstractmethods__))
        raise TypeError(f"Entropy source {name!r} is abstract (missing: {missing})")
    return candidate


class EntropySourceRegistry:
    """Name -> EntropySource class mapping with lazy plugin loading.

    Registering the same name twice is an error for decorators; a plugin
    that reuses a built-in name is skipped with a warning.
    """

    _registry: ClassVar[dict[str, type[EntropySource]]] = {}
    _plugins_loaded: ClassVar[bool] = False

    @classmethod
    def register(cls, name: str) -> Callable[[type[EntropySource]], type[EntropySource]]:
        """Decorator that registers an entropy source class under *name*.

        Raises:
            ValueError: If *name* is already registered.
            TypeError: If the decorated class is not a concrete EntropySource.
        """

        def decorator(source_cls: type[EntropySource]) -> type[EntropySource]:
            if name in cls._registry:
                raise ValueError(f"Entropy source '{name}' is already registered")
            cls._registry[name] = _check_source_class(name, source_cls)
            return source_cls

        return decorator

    @classmethod
    def get(cls, name: str) -> type[EntropySource]:
        """Return the source class registered under *name*.

        Plugins are loaded once, on the first lookup that misses.

        Raises:
            KeyError: If *name* is unknown after loading plugins.
        """
        if name not in cls._registry and not cls._plugins_loaded:
            cls.load_plugins()
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown entropy source '{name}'. Available: {available}")
        return cls._registry[name]

    @classmethod
    def list_available(cls) -> list[str]:
        """Return sorted source names, including plugins."""
        if not cls._plugins_loaded:
            cls.load_plugins()
        return sorted(cls._registry)

    @classmethod
    def load_plugins(cls) -> list[str]:
        """Import entry-point sources and register the valid ones.

        A plugin that fails to import, is not a concrete EntropySource or
        collides with an existing name is logged and skipped.

        Returns:
            Names registered by this call.
        """
        cls._plugins_loaded = True
        added: list[str] = []
        for ep in importlib.metadata.entry_points(group=PLUGIN_GROUP):
            if ep.name in cls._registry:
                logger.warning("Entropy source plugin %r shadows a registered name, skipped", ep.name)
                continue
            try:
                source_cls = _check_source_class(ep.name, ep.load())
            except Exception as exc:  # one broken plugin must not hide the others
                logger.warning("Skipping entropy source plugin %r (%s): %s", ep.name, ep.value, exc)
                continue
            cls._registry[ep.name] = source_cls
            added.append(ep.name)
        if added:
            logger.debug("Loaded entropy source plugins: %s", ", ".join(added))
        return added


register_entropy_source = EntropySourceRegistry.register
