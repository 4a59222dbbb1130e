"""Value-dampening strategies applied after every item transformation."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from monkey_business.config.constants import RELIEF_DIVISOR
from monkey_business.config.types import DampeningMode
from monkey_business.domain.agent import Population
from monkey_business.domain.operation import checked_mul

logger = logging.getLogger(__name__)


def derive_modulus(population: Population) -> int:
    """Product of every agent's divisor.

    Each divisor divides the product, so reducing modulo it never changes
    any agent's divisibility test. Not reduced to the LCM.
    """
    modulus = 1
    for divisor in population.divisors():
        modulus = checked_mul(modulus, divisor)
    return modulus


@dataclass(frozen=True)
class Dampener:
    """Strategy selected once per run and applied to every transformed value."""

    mode: DampeningMode
    relief_divisor: int = RELIEF_DIVISOR
    modulus: int | None = None

    def __post_init__(self) -> None:
        if self.mode == DampeningMode.BOUNDED and (self.modulus is None or self.modulus < 1):
            raise ValueError("bounded dampening requires a positive modulus")
        if self.relief_divisor < 1:
            raise ValueError("relief_divisor must be >= 1")

    def apply(self, value: int) -> int:
        if self.mode == DampeningMode.BOUNDED:
            return value % self.modulus  # type: ignore[operator]
        return value // self.relief_divisor


def build_dampener(
    mode: DampeningMode,
    population: Population,
    relief_divisor: int = RELIEF_DIVISOR,
) -> Dampener:
    """Select the dampening strategy for a run over *population*."""
    if mode == DampeningMode.BOUNDED:
        modulus = derive_modulus(population)
        logger.debug("bounded dampening modulus=%d", modulus)
        return Dampener(mode=mode, relief_divisor=relief_divisor, modulus=modulus)
    return Dampener(mode=mode, relief_divisor=relief_divisor)
