"""Parquet schema definitions for run artifacts.

The per-generation statistics log is the only tabular artifact; every
writer and reader works against this column contract.
"""

from __future__ import annotations

import pyarrow as pa

RUN_SUMMARY_SCHEMA_VERSION = 1

GENERATION_LOG_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("generation", pa.int64()),
        ("resolution", pa.int64()),
        ("population", pa.int64()),
        ("births", pa.int64()),
        ("deaths", pa.int64()),
        ("density", pa.float64()),
        ("cluster_count", pa.int64()),
        ("live_pentagons", pa.int64()),
    ]
)

GENERATION_LOG_COLUMNS: tuple[str, ...] = tuple(f.name for f in GENERATION_LOG_SCHEMA)
