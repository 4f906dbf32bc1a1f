"""Configuration system for weighted-select.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (WS_*) -> .env file -> field defaults.

The configuration only drives :func:`weighted_select.factory.build_selector`;
selectors built by hand never read it.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, StrictInt
from pydantic_settings import BaseSettings, SettingsConfigDict

from weighted_select.exceptions import ConfigValidationError

_LOG_LEVELS: frozenset[str] = frozenset({"none", "summary", "full"})

# Same inputs WeightedSelector.add() accepts: no bools, no coerced strings, no negatives.
Weight = Annotated[StrictInt, Field(ge=0)]


class WeightedSelectConfig(BaseSettings):
    """Configuration for weighted-select.

    Resolution order: init kwargs -> env vars (WS_*) -> .env file -> defaults.

    ``weights`` is a JSON object in the environment, e.g.
    ``WS_WEIGHTS='{"server1": 5, "server2": 2}'``. Its key order becomes the
    insertion order of the built selector. Weights must be non-negative JSON
    integers; ``true`` or ``"5"`` are rejected with a ``ValidationError``.
    """

    model_config = SettingsConfigDict(
        env_prefix="WS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Selection ---

    selector_type: str = Field(
        default="smooth",
        description="Selection algorithm: 'random', 'roundrobin', 'smooth'",
    )
    weights: dict[str, Weight] = Field(
        default_factory=dict,
        description="Initial items and their weights, in insertion order",
    )

    # --- Entropy (random selector only) ---

    entropy_source_type: str = Field(
        default="system",
        description="Entropy source identifier: 'system', 'seeded', or a plugin name",
    )
    entropy_seed: int | None = Field(
        default=None,
        description="Seed passed to sources that accept one (None = unseeded)",
    )

    # --- Logging ---

    log_level: str = Field(
        default="none",
        description="Per-selection logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all selection records in memory for analysis",
    )


def validate_config(config: WeightedSelectConfig) -> None:
    """Check field values that pydantic types alone cannot express.

    Selector and entropy source names are checked against their registries
    by the factory, since plugins may register them late.

    Args:
        config: Configuration to check.

    Raises:
        ConfigValidationError: If ``log_level`` is unknown.
    """
    if config.log_level not in _LOG_LEVELS:
        allowed = ", ".join(sorted(_LOG_LEVELS))
        raise ConfigValidationError(
            f"Unknown log_level {config.log_level!r} (expected one of: {allowed})"
        )