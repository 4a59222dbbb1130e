"""CLI entrypoint for running both dampening modes over a notes file.

Supports ``--config path/to/config.json`` for reproducible runs. CLI
arguments override config-file values; config-file values override
built-in defaults.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from monkey_business.config.constants import BOUNDED_ROUNDS, RELIEF_DIVISOR, RELIEF_ROUNDS
from monkey_business.config.types import SimulationConfig
from monkey_business.domain.errors import SimulationError
from monkey_business.io.notes import load_population
from monkey_business.simulation.engine import simulate

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
"""Accepted values for --log-level and the config-file log_level key."""

# ---------------------------------------------------------------------------
# Coercion helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        return int(raw)
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    """CLI > file > default resolution for boolean flags."""
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    """CLI > file > default resolution for integer values."""
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_optional_str(cli_val: str | None, key: str, file_cfg: dict[str, object]) -> str | None:
    """CLI > file > default resolution for optional string values; absent means None."""
    raw = _get_val(cli_val, key, file_cfg, None)
    return None if raw is None else _coerce_str(raw, key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Simulate item passing between agents and report monkey-business scores"
    )
    parser.add_argument("notes", type=Path, help="Agent notes file")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--relief-rounds", type=int, default=None)
    parser.add_argument("--bounded-rounds", type=int, default=None)
    parser.add_argument("--relief-divisor", type=int, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument("--write-round-log", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--round-log-interval", type=int, default=None)
    parser.add_argument(
        "--log-level",
        type=str,
        choices=list(LOG_LEVELS),
        default=None,
    )
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Run relief and bounded simulations over the given notes file."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")

    try:
        log_level = _coerce_str(
            _get_val(args.log_level, "log_level", file_cfg, "WARNING"), "log_level"
        )
        if log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        relief_rounds = _get_int(args.relief_rounds, "relief_rounds", file_cfg, RELIEF_ROUNDS)
        bounded_rounds = _get_int(args.bounded_rounds, "bounded_rounds", file_cfg, BOUNDED_ROUNDS)
        relief_divisor = _get_int(args.relief_divisor, "relief_divisor", file_cfg, RELIEF_DIVISOR)
        write_round_log = _get_bool(args.write_round_log, "write_round_log", file_cfg, False)
        round_log_interval = _get_int(
            args.round_log_interval, "round_log_interval", file_cfg, 1
        )
        out_dir_raw = _get_optional_str(
            None if args.out_dir is None else str(args.out_dir), "out_dir", file_cfg
        )
        shared = {
            "relief_divisor": relief_divisor,
            "write_round_log": write_round_log,
            "round_log_interval": round_log_interval,
        }
        relief_config = SimulationConfig.relief(rounds=relief_rounds, **shared)
        bounded_config = SimulationConfig.bounded(rounds=bounded_rounds, **shared)
    except ValueError as exc:
        parser.error(str(exc))

    out_dir = Path(out_dir_raw) if out_dir_raw is not None else None
    if write_round_log and out_dir is None:
        parser.error("--write-round-log requires --out-dir")

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        population = load_population(args.notes)
        relief = simulate(population.copy(), relief_config, out_dir=out_dir)
        bounded = simulate(population.copy(), bounded_config, out_dir=out_dir)
    except FileNotFoundError:
        parser.error(f"Notes file not found: {args.notes}")
    except SimulationError as exc:
        logger.error("simulation aborted: %s", exc)
        parser.exit(1, f"error: {exc}\n")

    summary = {
        "agents": len(population),
        "relief": {
            "rounds": relief.rounds,
            "inspection_counts": list(relief.inspection_counts),
            "score": relief.score,
        },
        "bounded": {
            "rounds": bounded.rounds,
            "modulus": bounded.modulus,
            "inspection_counts": list(bounded.inspection_counts),
            "score": bounded.score,
        },
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
