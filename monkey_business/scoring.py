"""Reduce final inspection counts to a single comparable score."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable

from monkey_business.config.constants import SCORED_AGENT_COUNT
from monkey_business.domain.agent import Population
from monkey_business.domain.errors import ScoringError


def top_n(values: Iterable[int], n: int) -> list[int]:
    """Return the ``n`` largest values, largest first.

    Keeps a size-limited min-heap so memory stays O(n) regardless of input
    length. Duplicates count separately (multiset semantics).
    """
    if n < 1:
        raise ValueError("n must be >= 1")
    heap: list[int] = []
    for value in values:
        if len(heap) < n:
            heapq.heappush(heap, value)
        elif heap[0] < value:
            heapq.heapreplace(heap, value)
    return sorted(heap, reverse=True)


def monkey_business_score(population: Population | Iterable[int]) -> int:
    """Product of the two largest inspection counts.

    Accepts a population or a bare iterable of inspection counts.
    """
    if isinstance(population, Population):
        counts = population.inspection_counts()
    else:
        counts = list(population)
    if len(counts) < SCORED_AGENT_COUNT:
        raise ScoringError(
            f"scoring needs at least {SCORED_AGENT_COUNT} agents, got {len(counts)}"
        )
    return math.prod(top_n(counts, SCORED_AGENT_COUNT))
