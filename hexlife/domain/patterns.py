"""Named cell shapes that can be stamped onto any target cell.

Every pattern is captured once around a canonical anchor cell, which is
always its first cell. Stamping re-anchors the shape on a target by working
in H3 local (i, j) coordinates:

1. take the anchor's coordinates in its own frame and the target's
   coordinates in its own frame; their difference is the offset;
2. express every other pattern cell in the anchor's frame, add the offset,
   and rebuild the cell in the target's frame.

The local frame is affine only near its anchor, so this holds for small
shapes away from pentagons. Cells that cannot be rebuilt (chart seams) are
dropped from the stamp; the rest of the stamp still applies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from hexlife.config.constants import CANONICAL_ANCHOR_LATLNG
from hexlife.domain.grid import CellId, GridIndex

logger = logging.getLogger(__name__)

Offset = tuple[int, int]

# The six 1-ring neighbours of (0, 0) in H3 local IJ coordinates, in ring order
RING_OFFSETS: tuple[Offset, ...] = ((1, 0), (1, 1), (0, 1), (-1, 0), (-1, -1), (0, -1))

# Canonical shapes as IJ offsets from the anchor; (0, 0) must come first
PATTERN_SHAPES: dict[str, tuple[Offset, ...]] = {
    "Single cell": ((0, 0),),
    "Small flicker": ((0, 0), (1, 0)),
    "Bar": ((0, 0), (-1, 0), (1, 0)),
    "Trio": ((0, 0), (1, 0), (1, 1)),
    "Propeller": ((0, 0), (1, 0), (0, 1), (-1, -1)),
    "Twin flicker": ((0, 0), (1, 0), (4, 0), (5, 0)),
    "Star": ((0, 0), *RING_OFFSETS),
}


@dataclass(frozen=True)
class Pattern:
    """A fixed set of cells captured around ``cells[0]`` at one resolution."""

    name: str
    resolution: int
    cells: tuple[CellId, ...]
    grid: GridIndex = field(compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.cells:
            raise ValueError("pattern must contain at least its anchor cell")

    @property
    def anchor(self) -> CellId:
        return self.cells[0]

    @property
    def size(self) -> int:
        return len(self.cells)

    @classmethod
    def capture(
        cls,
        name: str,
        grid: GridIndex,
        anchor: CellId,
        offsets: tuple[Offset, ...],
    ) -> Pattern:
        """Build a pattern from IJ offsets around ``anchor``.

        Offsets that fall off the anchor's chart are skipped.
        """
        origin = grid.to_local_ij(anchor, anchor)
        if origin is None:
            raise ValueError(f"anchor {anchor} has no local coordinate frame")
        cells: list[CellId] = [anchor]
        for di, dj in offsets:
            if (di, dj) == (0, 0):
                continue
            cell = grid.from_local_ij(anchor, origin[0] + di, origin[1] + dj)
            if cell is None:
                logger.debug("pattern %r: offset (%d, %d) off chart", name, di, dj)
                continue
            if cell not in cells:
                cells.append(cell)
        return cls(
            name=name,
            resolution=grid.resolution_of(anchor),
            cells=tuple(cells),
            grid=grid,
        )

    def as_cells(self, center: CellId) -> list[CellId]:
        """Concrete cells of this pattern re-anchored at ``center``."""
        grid = self.grid
        if grid.resolution_of(center) != self.resolution:
            logger.warning(
                "pattern %r captured at resolution %d, cannot stamp at resolution %d",
                self.name,
                self.resolution,
                grid.resolution_of(center),
            )
            return []
        anchor_ij = grid.to_local_ij(self.anchor, self.anchor)
        center_ij = grid.to_local_ij(center, center)
        if anchor_ij is None or center_ij is None:
            return []
        di = center_ij[0] - anchor_ij[0]
        dj = center_ij[1] - anchor_ij[1]

        result: dict[CellId, None] = {center: None}
        for cell in self.cells[1:]:
            local = grid.to_local_ij(cell, self.anchor)
            target = None
            if local is not None:
                target = grid.from_local_ij(center, local[0] + di, local[1] + dj)
            if target is None:
                logger.debug(
                    "pattern %r: dropped %s when stamping at %s", self.name, cell, center
                )
                continue
            result[target] = None
        return list(result)


class PatternLibrary:
    """Registry of patterns captured at one resolution, looked up by name."""

    def __init__(self, patterns: dict[str, Pattern], resolution: int) -> None:
        self._patterns = patterns
        self.resolution = resolution

    @classmethod
    def build(
        cls,
        grid: GridIndex,
        resolution: int,
        shapes: dict[str, tuple[Offset, ...]] | None = None,
        anchor_latlng: tuple[float, float] = CANONICAL_ANCHOR_LATLNG,
    ) -> PatternLibrary:
        """Capture every shape around the canonical anchor at ``resolution``."""
        anchor = grid.from_lat_lng(anchor_latlng[0], anchor_latlng[1], resolution)
        if anchor is None:
            raise ValueError(f"no cell at {anchor_latlng} for resolution {resolution}")
        patterns = {
            name: Pattern.capture(name, grid, anchor, offsets)
            for name, offsets in (shapes if shapes is not None else PATTERN_SHAPES).items()
        }
        return cls(patterns, resolution)

    def __contains__(self, name: object) -> bool:
        return name in self._patterns

    def __len__(self) -> int:
        return len(self._patterns)

    def __getitem__(self, name: str) -> Pattern:
        return self._patterns[name]

    def get(self, name: str) -> Pattern | None:
        return self._patterns.get(name)

    def names(self) -> list[str]:
        """Pattern names for presentation: smallest footprint first, then by name."""
        return [
            p.name for p in sorted(self._patterns.values(), key=lambda p: (p.size, p.name))
        ]
