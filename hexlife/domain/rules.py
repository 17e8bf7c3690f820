"""Birth/survival rule tables for Life-like automata on a hex grid.

A rule table is read fresh on every tick, so an editor may flip entries
between ticks. Counts are live 1-ring neighbours: 0..6 on hexagons, 0..5 on
the twelve pentagons.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from hexlife.config.constants import NEIGHBOR_SLOTS
from hexlife.domain.cell import Terrain

_NOTATION_RE = re.compile(r"^B(?P<birth>[0-6]*)/S(?P<survive>[0-6]*)$", re.IGNORECASE)


def _check_count(live_neighbors: int) -> None:
    if not 0 <= live_neighbors < NEIGHBOR_SLOTS:
        raise ValueError(f"live neighbour count out of range: {live_neighbors}")


def _flags(counts: set[int] | frozenset[int]) -> list[bool]:
    return [n in counts for n in range(NEIGHBOR_SLOTS)]


@dataclass
class RuleTable:
    """Outcome per live-neighbour count for occupied and empty cells."""

    survives: list[bool] = field(default_factory=lambda: _flags({3, 5}))
    emerges: list[bool] = field(default_factory=lambda: _flags({2}))

    def __post_init__(self) -> None:
        if len(self.survives) != NEIGHBOR_SLOTS or len(self.emerges) != NEIGHBOR_SLOTS:
            raise ValueError(f"rule tables must have exactly {NEIGHBOR_SLOTS} entries")

    @classmethod
    def from_counts(cls, survive: set[int], emerge: set[int]) -> RuleTable:
        return cls(survives=_flags(survive), emerges=_flags(emerge))

    @classmethod
    def from_notation(cls, notation: str) -> RuleTable:
        """Parse ``B<digits>/S<digits>``, e.g. ``B2/S35`` (the default rule)."""
        match = _NOTATION_RE.match(notation.strip())
        if match is None:
            raise ValueError(f"invalid rule notation: {notation!r} (expected e.g. 'B2/S35')")
        return cls.from_counts(
            survive={int(c) for c in match.group("survive")},
            emerge={int(c) for c in match.group("birth")},
        )

    def to_notation(self) -> str:
        birth = "".join(str(n) for n, flag in enumerate(self.emerges) if flag)
        survive = "".join(str(n) for n, flag in enumerate(self.survives) if flag)
        return f"B{birth}/S{survive}"

    def apply(self, live_neighbors: int, occupied: bool) -> bool:
        """Next occupancy of a cell with ``live_neighbors`` live neighbours."""
        _check_count(live_neighbors)
        if occupied:
            return self.survives[live_neighbors]
        return self.emerges[live_neighbors]

    def set_survives(self, live_neighbors: int, flag: bool) -> None:
        _check_count(live_neighbors)
        self.survives[live_neighbors] = flag

    def set_emerges(self, live_neighbors: int, flag: bool) -> None:
        _check_count(live_neighbors)
        self.emerges[live_neighbors] = flag

    def table_for(self, terrain: Terrain) -> RuleTable:
        return self


@dataclass
class TerrainRules:
    """Per-terrain rule tables; cells are judged by their own terrain."""

    tables: dict[Terrain, RuleTable] = field(default_factory=dict)

    def __post_init__(self) -> None:
        missing = [t.name for t in Terrain if t not in self.tables]
        if missing:
            raise ValueError(f"missing rule tables for terrain: {', '.join(missing)}")

    @classmethod
    def default(cls) -> TerrainRules:
        return cls(
            tables={
                Terrain.POOR: RuleTable.from_counts(survive={2, 3}, emerge={5}),
                Terrain.USUAL: RuleTable(),
                Terrain.RICH: RuleTable.from_counts(survive={3, 5}, emerge={1, 2}),
            }
        )

    def table_for(self, terrain: Terrain) -> RuleTable:
        return self.tables[terrain]

    def apply(self, live_neighbors: int, occupied: bool, terrain: Terrain) -> bool:
        return self.tables[terrain].apply(live_neighbors, occupied)


Rules = RuleTable | TerrainRules
