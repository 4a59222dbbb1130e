"""Parquet schema definitions for simulation artifacts.

Arrow schemas used for persisting round logs and run summaries are
centralised here so that every module works against the same column
contracts.
"""

from __future__ import annotations

import pyarrow as pa

ARTIFACT_SCHEMA_VERSION = 1

ROUND_LOG_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("round", pa.int64()),
        ("agent_id", pa.int64()),
        ("inspection_count", pa.int64()),
        ("queue_length", pa.int64()),
    ]
)

RUN_SUMMARY_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("run_id", pa.string()),
        ("dampening", pa.string()),
        ("rounds", pa.int64()),
        ("n_agents", pa.int64()),
        ("modulus", pa.int64()),
        ("score", pa.int64()),
    ]
)
