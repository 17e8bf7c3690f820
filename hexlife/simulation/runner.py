"""Headless runner: seeded simulation with per-generation statistics."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from random import Random

import pyarrow.parquet as pq

from hexlife.config.constants import FLUSH_THRESHOLD
from hexlife.config.types import RunConfig, RunResult
from hexlife.domain.grid import GridIndex
from hexlife.domain.patterns import PatternLibrary
from hexlife.domain.rules import RuleTable
from hexlife.io.log import empty_columns, flush_generation_columns, read_generation_log
from hexlife.io.paths import (
    generation_log_path,
    population_plot_path,
    run_summary_path,
    snapshot_path,
)
from hexlife.io.schemas import RUN_SUMMARY_SCHEMA_VERSION
from hexlife.metrics.spatial import cluster_count, density, live_pentagon_count
from hexlife.simulation.game import Game, TickSummary

logger = logging.getLogger(__name__)


def deterministic_run_id(config: RunConfig) -> str:
    """Build reproducible run ID stable across runs for identical settings."""
    rule = config.rule.upper().replace("/", "-")
    seed = "none" if config.game.sim_seed is None else str(config.game.sim_seed)
    return f"res{config.game.resolution}_{rule}_ss{seed}"


def prepare_game(config: RunConfig, grid: GridIndex | None = None) -> Game:
    """Build the initial generation: optional random fill, then pattern stamps."""
    game = Game(
        resolution=config.game.resolution,
        grid=grid,
        rng=Random(config.game.sim_seed),
        workers=config.game.workers,
    )
    if config.seed_field:
        game.spawn_life(config.game.spawn_probability)
    if config.pattern is not None and config.stamp_count > 0:
        library = PatternLibrary.build(game.grid, game.resolution)
        pattern = library[config.pattern]
        centers = game.rng.sample(game.active_cells, min(config.stamp_count, len(game)))
        for center in centers:
            game.stamp(pattern, center)
    return game


def _record(
    columns: dict[str, list[int | str | float]],
    run_id: str,
    game: Game,
    summary: TickSummary | None,
) -> None:
    columns["run_id"].append(run_id)
    columns["generation"].append(game.generation)
    columns["resolution"].append(game.resolution)
    columns["population"].append(game.population())
    columns["births"].append(summary.births if summary is not None else 0)
    columns["deaths"].append(summary.deaths if summary is not None else 0)
    columns["density"].append(density(game.present))
    columns["cluster_count"].append(cluster_count(game.present, game.grid))
    columns["live_pentagons"].append(live_pentagon_count(game.present, game.grid))


def run_simulation(
    config: RunConfig,
    out_dir: Path,
    run_id: str | None = None,
    grid: GridIndex | None = None,
    render: bool = False,
) -> RunResult:
    """Run ``config.steps`` generations, logging statistics to Parquet.

    The run stops early once the population reaches zero.
    """
    out_dir = Path(out_dir)
    run_id = run_id or deterministic_run_id(config)
    rules = RuleTable.from_notation(config.rule)
    game = prepare_game(config, grid=grid)
    log_path = generation_log_path(out_dir)
    logger.info(
        "run %s: %d cells, rule %s, %d steps", run_id, len(game), rules.to_notation(), config.steps
    )

    columns = empty_columns()
    writer: pq.ParquetWriter | None = None
    extinct_at: int | None = None
    try:
        _record(columns, run_id, game, None)
        for _ in range(config.steps):
            summary = game.step(rules)
            _record(columns, run_id, game, summary)
            if len(columns["run_id"]) >= FLUSH_THRESHOLD:
                writer = flush_generation_columns(columns, log_path, writer)
            if summary.population == 0:
                extinct_at = game.generation
                logger.info("run %s: extinct at generation %d", run_id, extinct_at)
                break
        writer = flush_generation_columns(columns, log_path, writer)
    finally:
        if writer is not None:
            writer.close()

    result = RunResult(
        run_id=run_id,
        resolution=game.resolution,
        cell_count=len(game),
        generations=game.generation,
        final_population=game.population(),
        extinct_at=extinct_at,
    )
    payload = {
        "run_id": run_id,
        "rule": rules.to_notation(),
        "pattern": config.pattern,
        "stamp_count": config.stamp_count,
        "result": {
            "generations": result.generations,
            "final_population": result.final_population,
            "extinct_at": result.extinct_at,
        },
        "metadata": {
            "resolution": result.resolution,
            "cell_count": result.cell_count,
            "steps": config.steps,
            "spawn_probability": config.game.spawn_probability,
            "seed_field": config.seed_field,
            "sim_seed": config.game.sim_seed,
            "workers": config.game.workers,
            "schema_version": RUN_SUMMARY_SCHEMA_VERSION,
        },
    }
    summary_path = run_summary_path(out_dir, run_id)
    summary_path.parent.mkdir(parents=True, exist_ok=True)
    summary_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2))

    if render:
        from hexlife.viz.render import render_population_timeseries, render_snapshot

        render_snapshot(game, snapshot_path(out_dir, run_id))
        render_population_timeseries(
            read_generation_log(log_path, run_id), population_plot_path(out_dir, run_id)
        )
    logger.info("run %s finished: population %d", run_id, result.final_population)
    return result
