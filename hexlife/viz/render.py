"""Matplotlib-based figures for simulation snapshots and run statistics."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
import numpy as np

from hexlife.viz.colors import cell_color
from hexlife.viz.theme import DEFAULT_THEME, Theme

if TYPE_CHECKING:
    from hexlife.simulation.game import Game


def snapshot_arrays(game: Game, theme: Theme = DEFAULT_THEME) -> tuple[np.ndarray, np.ndarray]:
    """Return ((N, 2) lng/lat centres, (N, 4) RGBA colours) for every active cell."""
    cells = game.active_cells
    lat_lng = np.array([game.grid.to_lat_lng(cell) for cell in cells], dtype=float)
    colors = np.array(
        [cell_color(game.present.get(cell), game.is_pentagon(cell), theme) for cell in cells],
        dtype=float,
    )
    if lat_lng.size == 0:
        return np.zeros((0, 2)), np.zeros((0, 4))
    # Flat colours: the live overlay alpha is meant for blending over a globe.
    colors[:, 3] = 1.0
    return lat_lng[:, ::-1], colors


def render_snapshot(
    game: Game,
    output_path: Path,
    title: str | None = None,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Equirectangular scatter of all cell centres coloured by display colour."""
    lng_lat, colors = snapshot_arrays(game, theme)
    fig, ax = plt.subplots(figsize=(10, 5))
    marker_size = max(0.5, 4000.0 / max(len(game), 1))
    ax.scatter(lng_lat[:, 0], lng_lat[:, 1], c=colors, s=marker_size, marker="h", linewidths=0)
    ax.set_xlim(-180, 180)
    ax.set_ylim(-90, 90)
    ax.set_aspect("equal")
    ax.set_xlabel("Longitude")
    ax.set_ylabel("Latitude")
    ax.set_title(
        title
        or f"Generation {game.generation} | resolution {game.resolution} | "
        f"population {game.population()}"
    )
    fig.tight_layout()
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)


def render_population_timeseries(
    rows: list[dict[str, object]],
    output_path: Path,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Population and births/deaths per generation from generation-log rows."""
    ordered = sorted(rows, key=lambda r: int(r["generation"]))  # type: ignore[call-overload]
    generations = [int(r["generation"]) for r in ordered]  # type: ignore[call-overload]
    fig, (ax_pop, ax_flux) = plt.subplots(2, 1, figsize=(8, 6), sharex=True)
    ax_pop.plot(
        generations,
        [int(r["population"]) for r in ordered],  # type: ignore[call-overload]
        color=theme.population_color,
        linewidth=1.8,
    )
    ax_pop.set_ylabel("Population")
    ax_pop.grid(True, alpha=0.3)
    for column, label in (("births", "Births"), ("deaths", "Deaths")):
        values = [int(r[column]) for r in ordered]  # type: ignore[call-overload]
        ax_flux.plot(generations, values, label=label)
    ax_flux.set_xlabel("Generation")
    ax_flux.set_ylabel("Cells")
    ax_flux.legend()
    ax_flux.grid(True, alpha=0.3)
    fig.tight_layout()
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
