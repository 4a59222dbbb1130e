"""Shared fixtures: the four-agent sample population."""

from __future__ import annotations

import pytest

from monkey_business.domain.agent import AgentRecord, Population
from monkey_business.io.notes import parse_notes

SAMPLE_NOTES = """\
Monkey 0:
  Starting items: 79, 98
  Operation: new = old * 19
  Test: divisible by 23
    If true: throw to monkey 2
    If false: throw to monkey 3

Monkey 1:
  Starting items: 54, 65, 75, 74
  Operation: new = old + 6
  Test: divisible by 19
    If true: throw to monkey 2
    If false: throw to monkey 0

Monkey 2:
  Starting items: 79, 60, 97
  Operation: new = old * old
  Test: divisible by 13
    If true: throw to monkey 1
    If false: throw to monkey 3

Monkey 3:
  Starting items: 74
  Operation: new = old + 3
  Test: divisible by 17
    If true: throw to monkey 0
    If false: throw to monkey 1
"""


@pytest.fixture
def sample_notes() -> str:
    return SAMPLE_NOTES


@pytest.fixture
def sample_records() -> list[AgentRecord]:
    return parse_notes(SAMPLE_NOTES)


@pytest.fixture
def sample_population(sample_records: list[AgentRecord]) -> Population:
    return Population.from_records(sample_records)
