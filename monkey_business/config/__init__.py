"""Configuration layer: constants and typed config dataclasses."""

from monkey_business.config.constants import (
    BOUNDED_ROUNDS,
    FLUSH_THRESHOLD,
    INT_BITS,
    INT_MAX,
    INT_MIN,
    RELIEF_DIVISOR,
    RELIEF_ROUNDS,
    SCORED_AGENT_COUNT,
)
from monkey_business.config.types import DampeningMode, SimulationConfig, SimulationResult

__all__ = [
    "BOUNDED_ROUNDS",
    "DampeningMode",
    "FLUSH_THRESHOLD",
    "INT_BITS",
    "INT_MAX",
    "INT_MIN",
    "RELIEF_DIVISOR",
    "RELIEF_ROUNDS",
    "SCORED_AGENT_COUNT",
    "SimulationConfig",
    "SimulationResult",
]
