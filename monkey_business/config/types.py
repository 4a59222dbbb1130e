"""Configuration dataclasses for simulation runs.

Frozen dataclasses parameterise a single run; validation happens in
``__post_init__`` so an invalid config never reaches the engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from monkey_business.config.constants import BOUNDED_ROUNDS, RELIEF_DIVISOR, RELIEF_ROUNDS

__all__ = [
    "DampeningMode",
    "SimulationConfig",
    "SimulationResult",
]


class DampeningMode(Enum):
    """Rule applied to every transformed item before it is routed."""

    RELIEF = "relief"
    BOUNDED = "bounded"


@dataclass(frozen=True)
class SimulationConfig:
    """Runtime knobs for one simulation run."""

    rounds: int = RELIEF_ROUNDS
    dampening: DampeningMode = DampeningMode.RELIEF
    relief_divisor: int = RELIEF_DIVISOR
    write_round_log: bool = False
    round_log_interval: int = 1

    def __post_init__(self) -> None:
        if self.rounds < 1:
            raise ValueError("rounds must be >= 1")
        if not isinstance(self.dampening, DampeningMode):
            raise ValueError("dampening must be a DampeningMode")
        if self.relief_divisor < 1:
            raise ValueError("relief_divisor must be >= 1")
        if self.round_log_interval < 1:
            raise ValueError("round_log_interval must be >= 1")

    @classmethod
    def relief(cls, rounds: int = RELIEF_ROUNDS, **kwargs: object) -> "SimulationConfig":
        """Short run where every inspection divides the value down."""
        return cls(rounds, DampeningMode.RELIEF, **kwargs)  # type: ignore[arg-type]

    @classmethod
    def bounded(cls, rounds: int = BOUNDED_ROUNDS, **kwargs: object) -> "SimulationConfig":
        """Long run where values are reduced modulo the product of all divisors."""
        return cls(rounds, DampeningMode.BOUNDED, **kwargs)  # type: ignore[arg-type]


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of one completed run."""

    run_id: str
    dampening: DampeningMode
    rounds: int
    inspection_counts: tuple[int, ...]
    score: int
    modulus: int | None = None
