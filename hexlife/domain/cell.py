"""Per-cell state record."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Terrain(Enum):
    """Tri-level terrain richness; selects the rule table for a cell."""

    POOR = 0
    USUAL = 1
    RICH = 2

    def richer(self) -> Terrain:
        return Terrain(min(self.value + 1, Terrain.RICH.value))

    def poorer(self) -> Terrain:
        return Terrain(max(self.value - 1, Terrain.POOR.value))


@dataclass
class CellState:
    """Occupancy and user annotation of one cell.

    Fields hold these records by value: the engine never lets two fields
    share an instance, so mutating one through ``Game.get_mut`` cannot leak
    into the other buffer.
    """

    occupied: bool = False
    marked: bool = False
    terrain: Terrain = Terrain.USUAL

    def copy(self) -> CellState:
        return replace(self)

    def with_occupied(self, occupied: bool) -> CellState:
        return replace(self, occupied=occupied)

    def add_life(self) -> None:
        self.occupied = True

    def remove_life(self) -> None:
        self.occupied = False

    def toggle_life(self) -> None:
        self.occupied = not self.occupied

    def mark(self) -> None:
        self.marked = True

    def unmark(self) -> None:
        self.marked = False

    def toggle_mark(self) -> None:
        self.marked = not self.marked

    def enrich(self) -> None:
        self.terrain = self.terrain.richer()

    def deplete(self) -> None:
        self.terrain = self.terrain.poorer()
