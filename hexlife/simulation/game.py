"""Double-buffered Life engine on the hex-sphere tessellation.

Transition invariant: a tick reads only ``present`` and writes only
``future``, so per-cell results do not depend on iteration order and the
pass can be split across workers freely. Neighbours missing from the field
(pentagons have five, stale or foreign cells have none) count as empty.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from random import Random

from hexlife.config.constants import (
    DEFAULT_RESOLUTION,
    DEFAULT_SPAWN_PROBABILITY,
    MAX_RESOLUTION,
    MIN_RESOLUTION,
)
from hexlife.config.types import GameConfig
from hexlife.domain.cell import CellState
from hexlife.domain.field import Field
from hexlife.domain.grid import CellId, GridIndex, H3Grid
from hexlife.domain.patterns import Pattern
from hexlife.domain.rules import Rules

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickSummary:
    """Occupancy changes produced by one tick."""

    births: int
    deaths: int
    population: int


def enumerate_cells(grid: GridIndex, resolution: int) -> tuple[CellId, ...]:
    """All cells at ``resolution``, by subdividing every root cell."""
    return tuple(
        cell for root in grid.root_cells() for cell in grid.children_at_resolution(root, resolution)
    )


def count_live_neighbors(cell: CellId, present: Field, grid: GridIndex) -> int:
    """Occupied 1-ring neighbours of ``cell``; cells absent from the field are skipped."""
    return sum(1 for n in grid.neighbors(cell, 1) if n != cell and present.is_occupied(n))


def next_generation(
    cells: Iterable[CellId], present: Field, grid: GridIndex, rules: Rules
) -> dict[CellId, CellState]:
    """Next state of each cell in ``cells``, computed from ``present`` only."""
    result: dict[CellId, CellState] = {}
    for cell in cells:
        state = present.get(cell)
        if state is None:
            continue
        live = count_live_neighbors(cell, present, grid)
        occupied = rules.table_for(state.terrain).apply(live, state.occupied)
        result[cell] = state.with_occupied(occupied)
    return result


def _chunks(cells: Sequence[CellId], n_chunks: int) -> list[Sequence[CellId]]:
    size = -(-len(cells) // n_chunks)
    return [cells[i : i + size] for i in range(0, len(cells), size)]


class Game:
    """Owns the present/future fields, the active cell set and the resolution."""

    def __init__(
        self,
        resolution: int = DEFAULT_RESOLUTION,
        grid: GridIndex | None = None,
        rng: Random | None = None,
        workers: int = 1,
    ) -> None:
        if not MIN_RESOLUTION <= resolution <= MAX_RESOLUTION:
            raise ValueError(f"resolution must be in [{MIN_RESOLUTION}, {MAX_RESOLUTION}]")
        if workers < 1:
            raise ValueError("workers must be >= 1")
        self.grid: GridIndex = grid if grid is not None else H3Grid()
        self.rng = rng if rng is not None else Random()
        self.workers = workers
        self.generation = 0
        self._build(resolution)

    @classmethod
    def from_config(cls, config: GameConfig, grid: GridIndex | None = None) -> Game:
        """Create a game from ``config`` and seed it with life."""
        game = cls(
            resolution=config.resolution,
            grid=grid,
            rng=Random(config.sim_seed),
            workers=config.workers,
        )
        game.spawn_life(config.spawn_probability)
        return game

    def _build(self, resolution: int) -> None:
        self.resolution = resolution
        self.active_cells: tuple[CellId, ...] = enumerate_cells(self.grid, resolution)
        self.present = Field.empty(self.active_cells)
        self.future = Field.empty(self.active_cells)
        self.generation = 0
        logger.debug("built %d cells at resolution %d", len(self.active_cells), resolution)

    def __len__(self) -> int:
        return len(self.active_cells)

    # ------------------------------------------------------------------
    # Whole-field operations
    # ------------------------------------------------------------------

    def spawn_life(self, probability: float = DEFAULT_SPAWN_PROBABILITY) -> None:
        """Independently make each cell occupied with ``probability``."""
        if not 0.0 <= probability <= 1.0:
            raise ValueError("probability must be in [0.0, 1.0]")
        for cell in self.active_cells:
            state = self.present.get(cell)
            if state is not None:
                state.occupied = self.rng.random() < probability
        logger.info("reseeded %d cells with p=%.3f", len(self.active_cells), probability)

    def kill_everything(self) -> None:
        """Clear occupancy everywhere; marks and terrain stay."""
        for _, state in self.present.items():
            state.remove_life()

    def remove_marks(self) -> None:
        """Unmark every cell."""
        for _, state in self.present.items():
            state.unmark()

    def population(self) -> int:
        return self.present.population()

    # ------------------------------------------------------------------
    # Point queries and edits
    # ------------------------------------------------------------------

    def get(self, cell: CellId) -> CellState | None:
        """Copy of the present state of ``cell``; None outside the tessellation."""
        state = self.present.get(cell)
        return state.copy() if state is not None else None

    def get_mut(self, cell: CellId) -> CellState | None:
        """Live present state of ``cell`` for in-place edits."""
        return self.present.get(cell)

    def _edit(self, cell: CellId, action: Callable[[CellState], None]) -> bool:
        state = self.present.get(cell)
        if state is None:
            logger.debug("%s ignored: %s not in active tessellation", action.__name__, cell)
            return False
        action(state)
        return True

    def mark(self, cell: CellId) -> bool:
        return self._edit(cell, CellState.mark)

    def unmark(self, cell: CellId) -> bool:
        return self._edit(cell, CellState.unmark)

    def add_life(self, cell: CellId) -> bool:
        return self._edit(cell, CellState.add_life)

    def toggle_life(self, cell: CellId) -> bool:
        return self._edit(cell, CellState.toggle_life)

    def toggle_mark(self, cell: CellId) -> bool:
        return self._edit(cell, CellState.toggle_mark)

    def enrich(self, cell: CellId) -> bool:
        return self._edit(cell, CellState.enrich)

    def deplete(self, cell: CellId) -> bool:
        return self._edit(cell, CellState.deplete)

    def is_pentagon(self, cell: CellId) -> bool:
        return self.grid.is_pentagon(cell)

    def stamp(self, pattern: Pattern, center: CellId) -> list[CellId]:
        """Bring ``pattern`` to life around ``center``; returns the cells set alive.

        Pattern cells outside the active field are skipped.
        """
        if center not in self.present:
            return []
        placed = [cell for cell in pattern.as_cells(center) if self.add_life(cell)]
        logger.debug("stamped %r at %s: %d cells", pattern.name, center, len(placed))
        return placed

    def cell_at(self, lat: float, lng: float) -> CellId | None:
        """Active cell containing the geographic point, if any."""
        cell = self.grid.from_lat_lng(lat, lng, self.resolution)
        return cell if cell is not None and cell in self.present else None

    def lat_lng(self, cell: CellId) -> tuple[float, float] | None:
        if cell not in self.present:
            return None
        return self.grid.to_lat_lng(cell)

    # ------------------------------------------------------------------
    # Generation lifecycle
    # ------------------------------------------------------------------

    def tick(self, rules: Rules) -> TickSummary:
        """Write the successor of ``present`` into ``future``."""
        if self.workers > 1 and len(self.active_cells) > self.workers:
            with ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="tick_") as pool:
                parts = list(
                    pool.map(
                        lambda chunk: next_generation(chunk, self.present, self.grid, rules),
                        _chunks(self.active_cells, self.workers),
                    )
                )
        else:
            parts = [next_generation(self.active_cells, self.present, self.grid, rules)]

        births = deaths = population = 0
        for part in parts:
            for cell, state in part.items():
                was_occupied = self.present.is_occupied(cell)
                if state.occupied and not was_occupied:
                    births += 1
                elif was_occupied and not state.occupied:
                    deaths += 1
                if state.occupied:
                    population += 1
                self.future.put(cell, state)
        logger.debug("tick: births=%d deaths=%d population=%d", births, deaths, population)
        return TickSummary(births=births, deaths=deaths, population=population)

    def swap_buffers(self) -> None:
        self.present, self.future = self.future, self.present

    def step(self, rules: Rules) -> TickSummary:
        """Tick, then promote the computed generation to ``present``."""
        summary = self.tick(rules)
        self.swap_buffers()
        self.generation += 1
        return summary

    def set_resolution(
        self, resolution: int, probability: float = DEFAULT_SPAWN_PROBABILITY
    ) -> bool:
        """Discard all state, rebuild at ``resolution`` and reseed.

        Unsupported resolutions are ignored and return False.
        """
        if not MIN_RESOLUTION <= resolution <= MAX_RESOLUTION:
            logger.warning("resolution %d out of range, ignored", resolution)
            return False
        logger.info("resolution %d -> %d", self.resolution, resolution)
        self._build(resolution)
        self.spawn_life(probability)
        return True

    def increase_resolution(self, probability: float = DEFAULT_SPAWN_PROBABILITY) -> bool:
        return self.set_resolution(self.resolution + 1, probability)

    def decrease_resolution(self, probability: float = DEFAULT_SPAWN_PROBABILITY) -> bool:
        return self.set_resolution(self.resolution - 1, probability)
