"""Tests for monkey_business.domain.operation module."""

from __future__ import annotations

import pytest

from monkey_business.config.constants import INT_MAX, INT_MIN
from monkey_business.domain.errors import ArithmeticOverflowError, SimulationError
from monkey_business.domain.operation import (
    Add,
    Constant,
    CurrentValue,
    Multiply,
    checked_add,
    checked_mul,
)


class TestExpression:
    def test_current_value_returns_input(self) -> None:
        assert CurrentValue().eval(79) == 79

    def test_constant_ignores_input(self) -> None:
        assert Constant(19).eval(79) == 19
        assert Constant(19).eval(-5) == 19

    def test_constant_outside_64_bit_range_rejected(self) -> None:
        assert Constant(INT_MAX).eval(0) == INT_MAX
        with pytest.raises(ArithmeticOverflowError):
            Constant(INT_MAX + 1)
        with pytest.raises(ArithmeticOverflowError):
            Constant(INT_MIN - 1)


class TestOperation:
    def test_multiply_by_constant(self) -> None:
        assert Multiply(CurrentValue(), Constant(19)).apply(79) == 1501

    def test_add_constant(self) -> None:
        assert Add(CurrentValue(), Constant(6)).apply(54) == 60

    def test_square(self) -> None:
        assert Multiply(CurrentValue(), CurrentValue()).apply(79) == 6241

    def test_double(self) -> None:
        assert Add(CurrentValue(), CurrentValue()).apply(21) == 42

    def test_constant_on_left(self) -> None:
        assert Add(Constant(3), CurrentValue()).apply(74) == 77

    def test_str_renders_notes_syntax(self) -> None:
        assert str(Multiply(CurrentValue(), Constant(19))) == "old * 19"
        assert str(Add(CurrentValue(), CurrentValue())) == "old + old"

    def test_operations_are_hashable_values(self) -> None:
        assert Add(CurrentValue(), Constant(1)) == Add(CurrentValue(), Constant(1))
        assert Add(CurrentValue(), Constant(1)) != Multiply(CurrentValue(), Constant(1))


class TestCheckedArithmetic:
    def test_values_at_bounds_pass(self) -> None:
        assert checked_add(INT_MAX - 1, 1) == INT_MAX
        assert checked_add(INT_MIN + 1, -1) == INT_MIN

    def test_add_overflow_raises(self) -> None:
        with pytest.raises(ArithmeticOverflowError):
            checked_add(INT_MAX, 1)

    def test_mul_overflow_raises(self) -> None:
        with pytest.raises(ArithmeticOverflowError):
            checked_mul(2**32, 2**31)

    def test_square_overflow_aborts_instead_of_wrapping(self) -> None:
        square = Multiply(CurrentValue(), CurrentValue())
        assert square.apply(2**31) == 2**62
        with pytest.raises(ArithmeticOverflowError):
            square.apply(2**32)

    def test_overflow_is_simulation_and_overflow_error(self) -> None:
        with pytest.raises(SimulationError):
            checked_mul(INT_MAX, 2)
        with pytest.raises(OverflowError):
            checked_mul(INT_MAX, 2)
