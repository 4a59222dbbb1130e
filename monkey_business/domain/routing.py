"""Divisibility test that picks one of two destination agents."""

from __future__ import annotations

from dataclasses import dataclass

from monkey_business.config.constants import INT_MAX
from monkey_business.domain.errors import InvalidPopulationError


@dataclass(frozen=True)
class RoutingTest:
    """Send to ``pass_target`` iff the value is divisible by ``divisor``."""

    divisor: int
    pass_target: int
    fail_target: int

    def __post_init__(self) -> None:
        if self.divisor < 1:
            raise InvalidPopulationError(f"divisor must be >= 1, got {self.divisor}")
        if self.divisor > INT_MAX:
            raise InvalidPopulationError(f"divisor exceeds the 64-bit range: {self.divisor}")
        if self.pass_target < 0 or self.fail_target < 0:
            raise InvalidPopulationError("routing targets must be non-negative agent indices")

    def route(self, value: int) -> int:
        return self.pass_target if value % self.divisor == 0 else self.fail_target

    def targets(self) -> tuple[int, int]:
        return (self.pass_target, self.fail_target)
