"""Round-based item-passing simulation between agents ("monkey business").

Agents hold queues of integer items, transform each inspected item with an
arithmetic operation, dampen the result, and route it to another agent by
a divisibility test. Bounded runs keep values small by reducing modulo the
product of every agent's divisor, which leaves every routing decision
unchanged.
"""

from monkey_business.config.types import DampeningMode, SimulationConfig, SimulationResult
from monkey_business.domain.agent import Agent, AgentRecord, Population
from monkey_business.io.notes import load_population, parse_notes
from monkey_business.scoring import monkey_business_score
from monkey_business.simulation.engine import run_rounds, simulate, solve

__all__ = [
    "Agent",
    "AgentRecord",
    "DampeningMode",
    "Population",
    "SimulationConfig",
    "SimulationResult",
    "load_population",
    "monkey_business_score",
    "parse_notes",
    "run_rounds",
    "simulate",
    "solve",
]
