"""Simulation layer: the double-buffered engine, interactive session, and runner."""

from hexlife.simulation.game import (
    Game,
    TickSummary,
    count_live_neighbors,
    enumerate_cells,
    next_generation,
)
from hexlife.simulation.runner import deterministic_run_id, prepare_game, run_simulation
from hexlife.simulation.session import Button, Session

__all__ = [
    "Button",
    "Game",
    "Session",
    "TickSummary",
    "count_live_neighbors",
    "deterministic_run_id",
    "enumerate_cells",
    "next_generation",
    "prepare_game",
    "run_simulation",
]
