"""Round-based item-passing engine.

Agents are visited in ascending index order, each exactly once per round.
An agent takes its entire queue at the start of its turn, so items thrown
to a higher-indexed agent are inspected later in the same round while
items thrown to a lower-indexed agent (or back to itself) wait for the
next round.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from monkey_business.config.constants import FLUSH_THRESHOLD
from monkey_business.config.types import DampeningMode, SimulationConfig, SimulationResult
from monkey_business.domain.agent import AgentRecord, Population
from monkey_business.io.paths import logs_dir, round_log_path, run_summary_path
from monkey_business.io.schemas import ARTIFACT_SCHEMA_VERSION, RUN_SUMMARY_SCHEMA
from monkey_business.scoring import monkey_business_score
from monkey_business.simulation.dampening import Dampener, build_dampener
from monkey_business.simulation.persistence import flush_round_columns, new_round_columns

logger = logging.getLogger(__name__)

RoundObserver = Callable[[int, Population], None]
"""Called with (round_number, population) after each completed round."""


def run_round(population: Population, dampener: Dampener) -> None:
    """Advance every agent by one turn, in ascending index order."""
    for agent in population:
        items = agent.take_all()
        agent.inspection_count += len(items)
        for item in items:
            value = dampener.apply(agent.operation.apply(item))
            population[agent.test.route(value)].receive(value)


def run_rounds(
    population: Population,
    rounds: int,
    dampener: Dampener,
    observer: RoundObserver | None = None,
) -> Population:
    """Run *rounds* consecutive rounds, mutating *population* in place."""
    if rounds < 1:
        raise ValueError("rounds must be >= 1")
    for round_number in range(1, rounds + 1):
        run_round(population, dampener)
        if observer is not None:
            observer(round_number, population)
    return population


def _deterministic_run_id(config: SimulationConfig) -> str:
    """Build a run ID stable across runs for identical configs."""
    return f"{config.dampening.value}_r{config.rounds}"


def simulate(
    population: Population,
    config: SimulationConfig,
    out_dir: Path | None = None,
    run_id: str | None = None,
) -> SimulationResult:
    """Run one configured simulation and score it.

    *population* is mutated in place. When ``config.write_round_log`` is set,
    per-round inspection counts and queue lengths are persisted under
    ``out_dir/logs``.
    """
    run_id = run_id or _deterministic_run_id(config)
    dampener = build_dampener(config.dampening, population, config.relief_divisor)
    logger.info(
        "run %s: %d agents, %d rounds, %s dampening",
        run_id,
        len(population),
        config.rounds,
        config.dampening.value,
    )

    round_writer: pq.ParquetWriter | None = None
    round_columns = new_round_columns()
    log_path: Path | None = None
    if config.write_round_log:
        if out_dir is None:
            raise ValueError("out_dir is required when write_round_log is enabled")
        logs_dir(Path(out_dir)).mkdir(parents=True, exist_ok=True)
        log_path = round_log_path(Path(out_dir), run_id)

    def observe(round_number: int, current: Population) -> None:
        nonlocal round_writer
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "run %s round %d: counts=%s items=%d",
                run_id,
                round_number,
                current.inspection_counts(),
                current.total_items(),
            )
        if log_path is None:
            return
        if round_number % config.round_log_interval and round_number != config.rounds:
            return
        for agent in current:
            round_columns["run_id"].append(run_id)
            round_columns["round"].append(round_number)
            round_columns["agent_id"].append(agent.agent_id)
            round_columns["inspection_count"].append(agent.inspection_count)
            round_columns["queue_length"].append(len(agent.queue))
        if len(round_columns["run_id"]) >= FLUSH_THRESHOLD:
            round_writer = flush_round_columns(round_columns, log_path, round_writer)

    try:
        run_rounds(population, config.rounds, dampener, observer=observe)
        if log_path is not None:
            round_writer = flush_round_columns(round_columns, log_path, round_writer)
    finally:
        if round_writer is not None:
            round_writer.close()

    result = SimulationResult(
        run_id=run_id,
        dampening=config.dampening,
        rounds=config.rounds,
        inspection_counts=tuple(population.inspection_counts()),
        score=monkey_business_score(population),
        modulus=dampener.modulus,
    )
    if out_dir is not None:
        _write_run_summary(Path(out_dir), result, len(population))
    logger.info("run %s finished: score=%d", run_id, result.score)
    return result


def _write_run_summary(out_dir: Path, result: SimulationResult, n_agents: int) -> None:
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    row = {
        "schema_version": ARTIFACT_SCHEMA_VERSION,
        "run_id": result.run_id,
        "dampening": result.dampening.value,
        "rounds": result.rounds,
        "n_agents": n_agents,
        "modulus": result.modulus,
        "score": result.score,
    }
    pq.write_table(
        pa.Table.from_pylist([row], schema=RUN_SUMMARY_SCHEMA),
        run_summary_path(out_dir, result.run_id),
    )


def solve(
    records: Iterable[AgentRecord] | Population,
    relief_config: SimulationConfig | None = None,
    bounded_config: SimulationConfig | None = None,
    out_dir: Path | None = None,
) -> tuple[int, int]:
    """Relief-mode and bounded-mode scores, each from a fresh copy of the input."""
    base = records if isinstance(records, Population) else Population.from_records(records)
    relief_config = relief_config or SimulationConfig.relief()
    bounded_config = bounded_config or SimulationConfig.bounded()
    if relief_config.dampening != DampeningMode.RELIEF:
        raise ValueError("relief_config must use relief dampening")
    if bounded_config.dampening != DampeningMode.BOUNDED:
        raise ValueError("bounded_config must use bounded dampening")
    relief = simulate(base.copy(), relief_config, out_dir=out_dir)
    bounded = simulate(base.copy(), bounded_config, out_dir=out_dir)
    return relief.score, bounded.score
