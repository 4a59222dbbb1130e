"""Agents and the population arena they live in.

Agents refer to each other only by integer index into the population, so
the round driver can push items into any agent's queue while another
agent is being drained.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import overload

from monkey_business.domain.errors import InvalidPopulationError
from monkey_business.domain.operation import Operation, check_range
from monkey_business.domain.routing import RoutingTest


@dataclass(frozen=True)
class AgentRecord:
    """Decoded definition of one agent, before it joins a population."""

    items: tuple[int, ...]
    operation: Operation
    test: RoutingTest


@dataclass
class Agent:
    """An item queue plus the transformation and routing applied to it."""

    agent_id: int
    operation: Operation
    test: RoutingTest
    queue: deque[int] = field(default_factory=deque)
    inspection_count: int = 0

    def take_all(self) -> deque[int]:
        """Detach and return the whole queue, leaving a fresh empty one behind."""
        items, self.queue = self.queue, deque()
        return items

    def receive(self, value: int) -> None:
        self.queue.append(value)


class Population(Sequence[Agent]):
    """Fixed-size, index-stable sequence of agents."""

    def __init__(self, agents: Iterable[Agent]) -> None:
        self._agents: list[Agent] = list(agents)
        self._validate()

    @classmethod
    def from_records(cls, records: Iterable[AgentRecord]) -> Population:
        """Build a population whose agent ids follow record order."""
        agents = []
        for agent_id, record in enumerate(records):
            for item in record.items:
                check_range(item, f"starting item of agent {agent_id}")
            agents.append(
                Agent(
                    agent_id=agent_id,
                    operation=record.operation,
                    test=record.test,
                    queue=deque(record.items),
                )
            )
        return cls(agents)

    def _validate(self) -> None:
        if not self._agents:
            raise InvalidPopulationError("population must contain at least one agent")
        size = len(self._agents)
        for index, agent in enumerate(self._agents):
            if agent.agent_id != index:
                raise InvalidPopulationError(
                    f"agent at position {index} has id {agent.agent_id}"
                )
            for target in agent.test.targets():
                if not 0 <= target < size:
                    raise InvalidPopulationError(
                        f"agent {index} routes to {target}, outside 0..{size - 1}"
                    )

    @overload
    def __getitem__(self, index: int) -> Agent: ...

    @overload
    def __getitem__(self, index: slice) -> list[Agent]: ...

    def __getitem__(self, index: int | slice) -> Agent | list[Agent]:
        return self._agents[index]

    def __len__(self) -> int:
        return len(self._agents)

    def __iter__(self) -> Iterator[Agent]:
        return iter(self._agents)

    def copy(self) -> Population:
        """Independent copy with its own queues and counters."""
        return Population(
            Agent(
                agent_id=agent.agent_id,
                operation=agent.operation,
                test=agent.test,
                queue=deque(agent.queue),
                inspection_count=agent.inspection_count,
            )
            for agent in self._agents
        )

    def divisors(self) -> list[int]:
        return [agent.test.divisor for agent in self._agents]

    def inspection_counts(self) -> list[int]:
        return [agent.inspection_count for agent in self._agents]

    def total_items(self) -> int:
        return sum(len(agent.queue) for agent in self._agents)
