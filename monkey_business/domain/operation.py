"""Item transformations: operands, operators, and overflow-checked arithmetic.

Both operand kinds and both operators form closed variant sets. Arithmetic
is checked against the signed 64-bit range so a value that would wrap in a
fixed-width representation aborts the run instead of silently corrupting
later divisibility tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from monkey_business.config.constants import INT_MAX, INT_MIN
from monkey_business.domain.errors import ArithmeticOverflowError


def check_range(value: int, context: str) -> int:
    """Return *value* unchanged, or raise if it is outside [INT_MIN, INT_MAX]."""
    if value < INT_MIN or value > INT_MAX:
        raise ArithmeticOverflowError(f"{context} overflowed the 64-bit range: {value}")
    return value


def checked_add(a: int, b: int) -> int:
    return check_range(a + b, f"{a} + {b}")


def checked_mul(a: int, b: int) -> int:
    return check_range(a * b, f"{a} * {b}")


@dataclass(frozen=True)
class CurrentValue:
    """Operand that evaluates to the item's current value (``old``)."""

    def eval(self, current: int) -> int:
        return current

    def __str__(self) -> str:
        return "old"


@dataclass(frozen=True)
class Constant:
    """Operand that evaluates to a fixed integer."""

    value: int

    def __post_init__(self) -> None:
        check_range(self.value, "constant operand")

    def eval(self, current: int) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


Expression: TypeAlias = CurrentValue | Constant


@dataclass(frozen=True)
class Add:
    """``lhs + rhs``, both operands evaluated against the same current value."""

    lhs: Expression
    rhs: Expression

    def apply(self, current: int) -> int:
        return checked_add(self.lhs.eval(current), self.rhs.eval(current))

    def __str__(self) -> str:
        return f"{self.lhs} + {self.rhs}"


@dataclass(frozen=True)
class Multiply:
    """``lhs * rhs``, both operands evaluated against the same current value."""

    lhs: Expression
    rhs: Expression

    def apply(self, current: int) -> int:
        return checked_mul(self.lhs.eval(current), self.rhs.eval(current))

    def __str__(self) -> str:
        return f"{self.lhs} * {self.rhs}"


Operation: TypeAlias = Add | Multiply

OPERATORS: dict[str, type[Add] | type[Multiply]] = {"+": Add, "*": Multiply}
"""Operator symbol -> operation class, as written in agent notes."""
