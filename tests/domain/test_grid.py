"""Tests for hexlife.domain.grid.H3Grid against the H3 library."""

from __future__ import annotations

import h3
import pytest

from hexlife.config.constants import CANONICAL_ANCHOR_LATLNG, PENTAGON_COUNT
from hexlife.domain.grid import H3Grid


@pytest.fixture()
def grid() -> H3Grid:
    return H3Grid()


class TestTessellation:
    def test_root_cells(self, grid: H3Grid) -> None:
        roots = grid.root_cells()
        assert len(roots) == 122
        assert all(grid.resolution_of(cell) == 0 for cell in roots)

    def test_root_cells_are_stably_ordered(self, grid: H3Grid) -> None:
        assert grid.root_cells() == grid.root_cells()

    def test_children_cover_resolution(self, grid: H3Grid) -> None:
        cells = {c for root in grid.root_cells() for c in grid.children_at_resolution(root, 1)}
        assert len(cells) == grid.cell_count(1) == 842

    def test_twelve_pentagons_per_resolution(self, grid: H3Grid) -> None:
        assert sum(grid.is_pentagon(c) for c in grid.root_cells()) == PENTAGON_COUNT


class TestNeighbors:
    def test_hexagon_disk_has_seven_cells(self, grid: H3Grid) -> None:
        cell = grid.from_lat_lng(*CANONICAL_ANCHOR_LATLNG, 2)
        assert cell is not None
        disk = grid.neighbors(cell)
        assert len(disk) == 7
        assert cell in disk

    def test_pentagon_disk_has_six_cells(self, grid: H3Grid) -> None:
        pentagon = next(c for c in grid.root_cells() if grid.is_pentagon(c))
        assert len(grid.neighbors(pentagon)) == 6


class TestLocalCoordinates:
    def test_round_trip_near_anchor(self, grid: H3Grid) -> None:
        anchor = grid.from_lat_lng(*CANONICAL_ANCHOR_LATLNG, 3)
        assert anchor is not None
        for cell in grid.neighbors(anchor, 2):
            ij = grid.to_local_ij(cell, anchor)
            assert ij is not None
            assert grid.from_local_ij(anchor, *ij) == cell

    def test_resolution_mismatch_is_none(self, grid: H3Grid) -> None:
        anchor = grid.from_lat_lng(*CANONICAL_ANCHOR_LATLNG, 2)
        other = grid.from_lat_lng(*CANONICAL_ANCHOR_LATLNG, 1)
        assert anchor is not None and other is not None
        assert grid.to_local_ij(other, anchor) is None

    def test_library_failure_is_none(
        self, grid: H3Grid, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def _fail(*_args: object) -> str:
            raise h3.H3FailedError("off chart")

        monkeypatch.setattr(h3, "local_ij_to_cell", _fail)
        anchor = grid.from_lat_lng(*CANONICAL_ANCHOR_LATLNG, 2)
        assert anchor is not None
        assert grid.from_local_ij(anchor, 0, 0) is None


class TestGeographic:
    def test_lat_lng_round_trip(self, grid: H3Grid) -> None:
        cell = grid.from_lat_lng(*CANONICAL_ANCHOR_LATLNG, 4)
        assert cell is not None
        lat, lng = grid.to_lat_lng(cell)
        assert grid.from_lat_lng(lat, lng, 4) == cell
