"""Parquet persistence helper for the generation statistics stream."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from hexlife.io.schemas import GENERATION_LOG_COLUMNS, GENERATION_LOG_SCHEMA


def empty_columns() -> dict[str, list[int | str | float]]:
    return {name: [] for name in GENERATION_LOG_COLUMNS}


def flush_generation_columns(
    columns: dict[str, list[int | str | float]],
    log_path: Path,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated generation rows to Parquet and clear in-memory buffers."""
    if not columns["run_id"]:
        return writer
    table = pa.Table.from_pydict(columns, schema=GENERATION_LOG_SCHEMA)
    if writer is None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        writer = pq.ParquetWriter(log_path, GENERATION_LOG_SCHEMA)
    writer.write_table(table)
    for values in columns.values():
        values.clear()
    return writer


def read_generation_log(log_path: Path, run_id: str | None = None) -> list[dict[str, object]]:
    """Rows of the generation log, optionally restricted to one run."""
    filters = [("run_id", "=", run_id)] if run_id is not None else None
    return pq.read_table(log_path, filters=filters).to_pylist()
