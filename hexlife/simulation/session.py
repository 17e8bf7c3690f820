"""Interactive session: the single owner of engine, rules and pattern library.

A front end (3D globe, notebook, test) drives the simulation only through
this object. Rules and the pattern library are held here and passed into
engine calls explicitly; nothing is process-global.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import Enum

from hexlife.config.constants import DEFAULT_SPAWN_PROBABILITY
from hexlife.config.types import GameConfig
from hexlife.domain.grid import CellId, GridIndex
from hexlife.domain.patterns import PatternLibrary
from hexlife.domain.rules import Rules, RuleTable
from hexlife.simulation.game import Game, TickSummary
from hexlife.viz.colors import cell_color
from hexlife.viz.geometry import unit_sphere_to_lat_lng
from hexlife.viz.theme import DEFAULT_THEME, RGBA, Theme

logger = logging.getLogger(__name__)


class Button(Enum):
    """Pointer button of an interactive edit."""

    PRIMARY = "primary"
    SECONDARY = "secondary"


class Session:
    """Pause state, selected pattern, rules and the engine they drive."""

    def __init__(
        self,
        game: Game,
        rules: Rules | None = None,
        spawn_probability: float = DEFAULT_SPAWN_PROBABILITY,
        theme: Theme = DEFAULT_THEME,
    ) -> None:
        self.game = game
        self.rules: Rules = rules if rules is not None else RuleTable()
        self.spawn_probability = spawn_probability
        self.theme = theme
        self.patterns = PatternLibrary.build(game.grid, game.resolution)
        self.paused = True
        self.skip_frame = False
        self.selected_pattern: str | None = None
        self.clicked: list[tuple[float, float]] = []

    @classmethod
    def from_config(
        cls, config: GameConfig, grid: GridIndex | None = None, rules: Rules | None = None
    ) -> Session:
        return cls(
            Game.from_config(config, grid=grid),
            rules=rules,
            spawn_probability=config.spawn_probability,
        )

    # ------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------

    def toggle_pause(self) -> None:
        self.paused = not self.paused

    def set_rule(self, notation: str) -> None:
        self.rules = RuleTable.from_notation(notation)

    def clear(self) -> None:
        self.game.kill_everything()

    def clear_marks(self) -> None:
        self.game.remove_marks()
        self.clicked.clear()

    def fill(self) -> None:
        self.game.spawn_life(self.spawn_probability)

    def select_pattern(self, name: str) -> bool:
        """Toggle ``name`` as the pattern stamped on primary clicks."""
        if name not in self.patterns:
            logger.warning("unknown pattern %r", name)
            return False
        self.selected_pattern = None if self.selected_pattern == name else name
        return True

    def pattern_names(self) -> list[str]:
        return self.patterns.names()

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def click(self, cell: CellId, button: Button = Button.PRIMARY) -> bool:
        """Primary marks ``cell`` and stamps the selected pattern; secondary unmarks."""
        if cell not in self.game.present:
            return False
        if button is Button.SECONDARY:
            self.game.unmark(cell)
        else:
            self.game.mark(cell)
            if self.selected_pattern is not None:
                self.game.stamp(self.patterns[self.selected_pattern], cell)
        lat_lng = self.game.lat_lng(cell)
        if lat_lng is not None:
            self.clicked.append(lat_lng)
        self.skip_frame = True
        return True

    def click_at(self, x: float, y: float, z: float, button: Button = Button.PRIMARY) -> bool:
        """Click the cell under the unit-sphere point ``(x, y, z)``."""
        lat, lng = unit_sphere_to_lat_lng(x, y, z)
        cell = self.game.cell_at(lat, lng)
        if cell is None:
            return False
        return self.click(cell, button)

    def stamp_marked(self) -> int:
        """Stamp the selected pattern around every marked cell; returns cells set alive."""
        if self.selected_pattern is None:
            return 0
        pattern = self.patterns[self.selected_pattern]
        placed = 0
        for cell in self.game.present.marked_cells():
            placed += len(self.game.stamp(pattern, cell))
        self.skip_frame = True
        return placed

    def log_marked(self) -> list[tuple[float, float]]:
        """Log and return the lat/lng of every marked cell."""
        coords = [self.game.grid.to_lat_lng(cell) for cell in self.game.present.marked_cells()]
        logger.info("marked cells: %s", coords)
        return coords

    # ------------------------------------------------------------------
    # Time and resolution
    # ------------------------------------------------------------------

    def advance(self) -> TickSummary | None:
        """Advance one frame: step unless paused or an edit asked to skip it."""
        summary = None
        if not self.paused and not self.skip_frame:
            summary = self.game.step(self.rules)
        self.skip_frame = False
        return summary

    def step_once(self) -> TickSummary:
        return self.game.step(self.rules)

    def _rebuild_patterns(self) -> None:
        self.patterns = PatternLibrary.build(self.game.grid, self.game.resolution)
        self.clicked.clear()

    def increase_resolution(self) -> bool:
        changed = self.game.increase_resolution(self.spawn_probability)
        if changed:
            self._rebuild_patterns()
        return changed

    def decrease_resolution(self) -> bool:
        changed = self.game.decrease_resolution(self.spawn_probability)
        if changed:
            self._rebuild_patterns()
        return changed

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def cell_colors(self) -> Iterator[tuple[CellId, RGBA]]:
        """Every active cell with its display colour, in enumeration order."""
        for cell in self.game.active_cells:
            state = self.game.present.get(cell)
            if state is not None:
                yield cell, cell_color(state, self.game.is_pentagon(cell), self.theme)
