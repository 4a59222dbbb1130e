"""Parquet persistence helpers for per-round observation logs."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from monkey_business.io.schemas import ROUND_LOG_SCHEMA


def new_round_columns() -> dict[str, list[int | str]]:
    """Empty column buffers matching ROUND_LOG_SCHEMA."""
    return {name: [] for name in ROUND_LOG_SCHEMA.names}


def flush_round_columns(
    round_columns: dict[str, list[int | str]],
    round_log_path: Path,
    round_writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated round rows to Parquet and clear in-memory buffers."""
    if not round_columns["run_id"]:
        return round_writer
    round_table = pa.Table.from_pydict(round_columns, schema=ROUND_LOG_SCHEMA)
    if round_writer is None:
        round_writer = pq.ParquetWriter(round_log_path, ROUND_LOG_SCHEMA)
    round_writer.write_table(round_table)
    for values in round_columns.values():
        values.clear()
    return round_writer
