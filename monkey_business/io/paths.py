"""Path construction helpers for simulation output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def round_log_path(out_dir: Path, run_id: str) -> Path:
    """Return path to the per-round observation log Parquet file for *run_id*."""
    return logs_dir(out_dir) / f"round_log_{run_id}.parquet"


def run_summary_path(out_dir: Path, run_id: str) -> Path:
    """Return path to the run summary Parquet file for *run_id*."""
    return logs_dir(out_dir) / f"run_summary_{run_id}.parquet"
