"""Hierarchical hex-sphere index used as the simulation topology.

The engine only talks to the :class:`GridIndex` protocol. :class:`H3Grid`
implements it on top of the H3 library, where a cell identifier is the
hexadecimal index string H3 produces.

Local (i, j) coordinates form an affine chart only in the neighbourhood of
their anchor; conversions that cross a pentagon distortion or certain base
cell seams fail, and :meth:`H3Grid.from_local_ij` reports that as ``None``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol, TypeAlias

import h3

CellId: TypeAlias = str
"""Opaque, hashable cell identifier produced by the grid index."""


class GridIndex(Protocol):
    """Operations the simulation core needs from the tessellation."""

    def root_cells(self) -> Sequence[CellId]: ...

    def children_at_resolution(self, cell: CellId, resolution: int) -> Sequence[CellId]: ...

    def neighbors(self, cell: CellId, radius: int = 1) -> Iterable[CellId]: ...

    def resolution_of(self, cell: CellId) -> int: ...

    def to_lat_lng(self, cell: CellId) -> tuple[float, float]: ...

    def from_lat_lng(self, lat: float, lng: float, resolution: int) -> CellId | None: ...

    def to_local_ij(self, cell: CellId, anchor: CellId) -> tuple[int, int] | None: ...

    def from_local_ij(self, anchor: CellId, i: int, j: int) -> CellId | None: ...

    def is_pentagon(self, cell: CellId) -> bool: ...


class H3Grid:
    """GridIndex backed by the H3 v4 API."""

    def root_cells(self) -> list[CellId]:
        return sorted(h3.get_res0_cells())

    def children_at_resolution(self, cell: CellId, resolution: int) -> list[CellId]:
        return list(h3.cell_to_children(cell, resolution))

    def neighbors(self, cell: CellId, radius: int = 1) -> list[CellId]:
        """Cells within ``radius`` grid steps, including ``cell`` itself."""
        return list(h3.grid_disk(cell, radius))

    def resolution_of(self, cell: CellId) -> int:
        return h3.get_resolution(cell)

    def to_lat_lng(self, cell: CellId) -> tuple[float, float]:
        lat, lng = h3.cell_to_latlng(cell)
        return lat, lng

    def from_lat_lng(self, lat: float, lng: float, resolution: int) -> CellId | None:
        try:
            return h3.latlng_to_cell(lat, lng, resolution)
        except h3.H3BaseException:
            return None

    def to_local_ij(self, cell: CellId, anchor: CellId) -> tuple[int, int] | None:
        """Coordinates of ``cell`` in the local frame anchored at ``anchor``."""
        try:
            i, j = h3.cell_to_local_ij(anchor, cell)
        except h3.H3BaseException:
            return None
        return i, j

    def from_local_ij(self, anchor: CellId, i: int, j: int) -> CellId | None:
        """Cell at ``(i, j)`` in the frame anchored at ``anchor``; None off-chart."""
        try:
            return h3.local_ij_to_cell(anchor, i, j)
        except h3.H3BaseException:
            return None

    def is_pentagon(self, cell: CellId) -> bool:
        return h3.is_pentagon(cell)

    def cell_count(self, resolution: int) -> int:
        """Number of cells tessellating the sphere at ``resolution``."""
        return h3.get_num_cells(resolution)
