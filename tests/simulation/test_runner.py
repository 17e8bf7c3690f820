"""Tests for hexlife.simulation.runner: headless runs and their artifacts."""

from __future__ import annotations

import json
from pathlib import Path

import matplotlib
import pyarrow.parquet as pq

from hexlife.config.types import GameConfig, RunConfig
from hexlife.io.log import read_generation_log
from hexlife.io.paths import (
    generation_log_path,
    population_plot_path,
    run_summary_path,
    snapshot_path,
)
from hexlife.io.schemas import GENERATION_LOG_SCHEMA, RUN_SUMMARY_SCHEMA_VERSION
from hexlife.simulation.runner import deterministic_run_id, prepare_game, run_simulation

matplotlib.use("Agg")


def _config(**kwargs: object) -> RunConfig:
    game = GameConfig(resolution=0, spawn_probability=0.4, sim_seed=9)
    return RunConfig(**{"steps": 4, "game": game, **kwargs})  # type: ignore[arg-type]


class TestRunId:
    def test_is_deterministic(self) -> None:
        assert deterministic_run_id(_config()) == deterministic_run_id(_config())

    def test_encodes_settings(self) -> None:
        assert deterministic_run_id(_config()) == "res0_B2-S35_ss9"

    def test_unseeded(self) -> None:
        config = RunConfig(game=GameConfig(resolution=0))
        assert deterministic_run_id(config).endswith("_ssnone")


class TestPrepareGame:
    def test_seeded_fill_is_reproducible(self) -> None:
        first = prepare_game(_config())
        second = prepare_game(_config())
        assert first.present.occupied_cells() == second.present.occupied_cells()

    def test_unseeded_field_holds_only_stamps(self) -> None:
        game = prepare_game(
            _config(seed_field=False, pattern="Single cell", stamp_count=5)
        )
        assert game.population() == 5

    def test_empty_start(self) -> None:
        assert prepare_game(_config(seed_field=False)).population() == 0


class TestRunSimulation:
    def test_writes_generation_log(self, tmp_path: Path) -> None:
        result = run_simulation(_config(), tmp_path)
        log_path = generation_log_path(tmp_path)
        table = pq.read_table(log_path)
        assert table.schema.equals(GENERATION_LOG_SCHEMA)
        rows = read_generation_log(log_path, result.run_id)
        assert [r["generation"] for r in rows] == list(range(result.generations + 1))
        assert rows[-1]["population"] == result.final_population

    def test_first_row_is_initial_generation(self, tmp_path: Path) -> None:
        result = run_simulation(_config(), tmp_path)
        first = read_generation_log(generation_log_path(tmp_path), result.run_id)[0]
        assert first["generation"] == 0
        assert first["births"] == 0 and first["deaths"] == 0
        assert first["population"] == prepare_game(_config()).population()

    def test_writes_summary_json(self, tmp_path: Path) -> None:
        result = run_simulation(_config(), tmp_path)
        payload = json.loads(run_summary_path(tmp_path, result.run_id).read_text())
        assert payload["rule"] == "B2/S35"
        assert payload["metadata"]["cell_count"] == 122
        assert payload["metadata"]["schema_version"] == RUN_SUMMARY_SCHEMA_VERSION
        assert payload["result"]["final_population"] == result.final_population

    def test_stops_at_extinction(self, tmp_path: Path) -> None:
        result = run_simulation(_config(seed_field=False, steps=10), tmp_path)
        assert result.extinct_at == 1
        assert result.generations == 1
        assert result.final_population == 0

    def test_custom_run_id(self, tmp_path: Path) -> None:
        result = run_simulation(_config(), tmp_path, run_id="custom")
        assert result.run_id == "custom"
        assert run_summary_path(tmp_path, "custom").exists()

    def test_render_writes_figures(self, tmp_path: Path) -> None:
        result = run_simulation(_config(steps=2), tmp_path, render=True)
        assert snapshot_path(tmp_path, result.run_id).exists()
        assert population_plot_path(tmp_path, result.run_id).exists()
