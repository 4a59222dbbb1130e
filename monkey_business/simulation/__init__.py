"""Simulation engine: dampening strategies, round driver, and Parquet persistence."""

from monkey_business.simulation.dampening import Dampener, build_dampener, derive_modulus
from monkey_business.simulation.engine import run_round, run_rounds, simulate, solve
from monkey_business.simulation.persistence import flush_round_columns

__all__ = [
    "Dampener",
    "build_dampener",
    "derive_modulus",
    "flush_round_columns",
    "run_round",
    "run_rounds",
    "simulate",
    "solve",
]
