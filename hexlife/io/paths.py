"""Path construction helpers for run output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def generation_log_path(out_dir: Path) -> Path:
    """Return path to the per-generation statistics Parquet file."""
    return logs_dir(out_dir) / "generation_log.parquet"


def run_summary_path(out_dir: Path, run_id: str) -> Path:
    """Return path to the JSON summary of one run."""
    return out_dir / "runs" / f"{run_id}.json"


def snapshot_path(out_dir: Path, run_id: str) -> Path:
    """Return path to the final-generation snapshot figure of one run."""
    return out_dir / "figures" / f"{run_id}_snapshot.png"


def population_plot_path(out_dir: Path, run_id: str) -> Path:
    """Return path to the population time-series figure of one run."""
    return out_dir / "figures" / f"{run_id}_population.png"
