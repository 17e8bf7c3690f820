"""I/O layer: Parquet schemas, writers, and output path conventions."""

from hexlife.io.log import empty_columns, flush_generation_columns, read_generation_log
from hexlife.io.paths import (
    generation_log_path,
    logs_dir,
    population_plot_path,
    run_summary_path,
    snapshot_path,
)
from hexlife.io.schemas import (
    GENERATION_LOG_COLUMNS,
    GENERATION_LOG_SCHEMA,
    RUN_SUMMARY_SCHEMA_VERSION,
)

__all__ = [
    "GENERATION_LOG_COLUMNS",
    "GENERATION_LOG_SCHEMA",
    "RUN_SUMMARY_SCHEMA_VERSION",
    "empty_columns",
    "flush_generation_columns",
    "generation_log_path",
    "logs_dir",
    "population_plot_path",
    "read_generation_log",
    "run_summary_path",
    "snapshot_path",
]
