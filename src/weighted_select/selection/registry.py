"""Registry for weighted selector implementations.

Uses a decorator pattern for registration, mirroring the entropy source
registry without entry-point discovery: the three algorithms are fixed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from weighted_select.selection.base import WeightedSelector


class SelectorRegistry:
    """Registry mapping string names to WeightedSelector classes.

    Built-in selectors register via the ``@SelectorRegistry.register()``
    decorator when :mod:`weighted_select.selection` is imported.
    """

    _registry: ClassVar[dict[str, type[WeightedSelector]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[WeightedSelector]], type[WeightedSelector]]:
        """Decorator that registers a WeightedSelector class under *name*.

        Args:
            name: Identifier used in config ``selector_type``.

        Returns:
            Decorator that registers the class and returns it unchanged.

        Raises:
            ValueError: If *name* is already registered.
        """

        def decorator(klass: type[WeightedSelector]) -> type[WeightedSelector]:
            if name in cls._registry:
                raise ValueError(f"Selector '{name}' is already registered")
            cls._registry[name] = klass
            return klass

        return decorator

    @classmethod
    def get(cls, name: str) -> type[WeightedSelector]:
        """Return the selector class registered under *name*.

        Raises:
            KeyError: If *name* is not registered.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown selector '{name}'. Available: {available}")
        return cls._registry[name]

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of registered selector names."""
        return sorted(cls._registry)
