"""Build selectors from configuration.

Orchestrates the configured pieces into one ready-to-use selector::

    config -> validation -> entropy source -> selection logger -> selector -> weights

Callers that want an explicit algorithm can instantiate the selector classes
directly; the factory exists for choosing the algorithm at configuration time.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any

# Importing the subpackages registers the built-in selectors and sources.
from weighted_select.config import WeightedSelectConfig, validate_config
from weighted_select.entropy import EntropySourceRegistry
from weighted_select.exceptions import ConfigValidationError
from weighted_select.logging.logger import SelectionLogger
from weighted_select.selection import SelectorRegistry

if TYPE_CHECKING:
    from weighted_select.entropy.base import EntropySource
    from weighted_select.selection.base import WeightedSelector

logger = logging.getLogger("weighted_select")


def _accepts_parameter(cls: type, name: str) -> bool:
    """Check whether a class constructor takes a parameter called *name*.

    Args:
        cls: The class to inspect.
        name: Parameter name to look for.

    Returns:
        True if the constructor signature contains *name*.
    """
    try:
        sig = inspect.signature(cls)
    except (ValueError, TypeError):
        return False
    return name in sig.parameters


def build_entropy_source(config: WeightedSelectConfig) -> EntropySource:
    """Instantiate the entropy source named by ``config.entropy_source_type``.

    ``config.entropy_seed`` is passed only to sources whose constructor
    takes a ``seed`` argument.

    Args:
        config: Configuration specifying the source type and seed.

    Returns:
        A ready entropy source.

    Raises:
        ConfigValidationError: If the source name is not registered.
    """
    try:
        source_cls = EntropySourceRegistry.get(config.entropy_source_type)
    except KeyError as exc:
        raise ConfigValidationError(str(exc.args[0])) from exc

    if _accepts_parameter(source_cls, "seed"):
        return source_cls(seed=config.entropy_seed)  # type: ignore[call-arg]
    if config.entropy_seed is not None:
        logger.warning(
            "entropy_seed is ignored by entropy source %r",
            config.entropy_source_type,
        )
    return source_cls()


def build_selector(
    config: WeightedSelectConfig | None = None,
    entropy_source: EntropySource | None = None,
) -> WeightedSelector[Any]:
    """Create the selector described by *config* and load its weights.

    Args:
        config: Configuration to use. Loaded from the environment when
            ``None``.
        entropy_source: Overrides the configured entropy source for
            selectors that draw random numbers.

    Returns:
        A selector populated with ``config.weights`` in key order.

    Raises:
        ConfigValidationError: If the configuration is invalid or names an
            unknown selector or entropy source.
    """
    if config is None:
        config = WeightedSelectConfig()
    validate_config(config)

    try:
        selector_cls = SelectorRegistry.get(config.selector_type)
    except KeyError as exc:
        raise ConfigValidationError(str(exc.args[0])) from exc

    kwargs: dict[str, Any] = {}
    if config.log_level != "none" or config.diagnostic_mode:
        kwargs["selection_logger"] = SelectionLogger(config)
    if _accepts_parameter(selector_cls, "entropy_source"):
        kwargs["entropy_source"] = (
            entropy_source if entropy_source is not None else build_entropy_source(config)
        )

    selector: WeightedSelector[Any] = selector_cls(**kwargs)
    for value, weight in config.weights.items():
        selector.add(value, weight)

    logger.debug(
        "Built %s selector with %d items (total weight %d)",
        selector.name,
        len(selector),
        selector.total_weight(),
    )
    return selector
