"""Exception hierarchy for simulation failures.

Every error aborts the whole run; none is recoverable mid-round.
"""

from __future__ import annotations


class SimulationError(Exception):
    """Base class for all failures raised by this package."""


class InvalidPopulationError(SimulationError, ValueError):
    """Agent definitions cannot form a valid population."""


class NotesParseError(InvalidPopulationError):
    """Textual agent notes are malformed."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class ArithmeticOverflowError(SimulationError, OverflowError):
    """An item value left the fixed-width integer range."""


class ScoringError(SimulationError, ValueError):
    """Final inspection counts cannot be scored."""
