"""Domain layer: operations, routing tests, agents, and the error taxonomy."""

from monkey_business.domain.agent import Agent, AgentRecord, Population
from monkey_business.domain.errors import (
    ArithmeticOverflowError,
    InvalidPopulationError,
    NotesParseError,
    ScoringError,
    SimulationError,
)
from monkey_business.domain.operation import (
    Add,
    Constant,
    CurrentValue,
    Expression,
    Multiply,
    Operation,
    checked_add,
    checked_mul,
)
from monkey_business.domain.routing import RoutingTest

__all__ = [
    "Add",
    "Agent",
    "AgentRecord",
    "ArithmeticOverflowError",
    "Constant",
    "CurrentValue",
    "Expression",
    "InvalidPopulationError",
    "Multiply",
    "NotesParseError",
    "Operation",
    "Population",
    "RoutingTest",
    "ScoringError",
    "SimulationError",
    "checked_add",
    "checked_mul",
]
