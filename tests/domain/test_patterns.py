"""Tests for hexlife.domain.patterns: capture, re-anchoring, library lookup."""

from __future__ import annotations

import h3
import pytest

from hexlife.config.constants import CANONICAL_ANCHOR_LATLNG
from hexlife.domain.grid import CellId, H3Grid
from hexlife.domain.patterns import PATTERN_SHAPES, Pattern, PatternLibrary

RESOLUTION = 2


class _SeamGrid(H3Grid):
    """H3Grid that cannot rebuild a chosen set of cells from local coordinates."""

    def __init__(self, blocked: set[CellId]) -> None:
        self.blocked = blocked

    def from_local_ij(self, anchor: CellId, i: int, j: int) -> CellId | None:
        cell = super().from_local_ij(anchor, i, j)
        return None if cell in self.blocked else cell


@pytest.fixture()
def grid() -> H3Grid:
    return H3Grid()


@pytest.fixture()
def library(grid: H3Grid) -> PatternLibrary:
    return PatternLibrary.build(grid, RESOLUTION)


def _same_base_cell_target(anchor: CellId) -> CellId:
    """A hexagon two rings away that shares the anchor's base cell."""
    base = h3.get_base_cell_number(anchor)
    return next(
        cell
        for cell in sorted(h3.grid_ring(anchor, 2))
        if h3.get_base_cell_number(cell) == base and not h3.is_pentagon(cell)
    )


class TestCapture:
    def test_anchor_is_first_cell(self, library: PatternLibrary) -> None:
        anchor = h3.latlng_to_cell(*CANONICAL_ANCHOR_LATLNG, RESOLUTION)
        for name in PATTERN_SHAPES:
            assert library[name].anchor == anchor

    def test_star_is_the_one_ring_disk(self, library: PatternLibrary) -> None:
        star = library["Star"]
        assert set(star.cells) == set(h3.grid_disk(star.anchor, 1))

    def test_small_flicker_is_an_adjacent_pair(self, library: PatternLibrary) -> None:
        first, second = library["Small flicker"].cells
        assert second in h3.grid_disk(first, 1)

    def test_one_ring_shapes_fully_captured(self, library: PatternLibrary) -> None:
        for name in ("Single cell", "Small flicker", "Bar", "Trio", "Propeller", "Star"):
            assert library[name].size == len(PATTERN_SHAPES[name])

    def test_empty_pattern_rejected(self, grid: H3Grid) -> None:
        with pytest.raises(ValueError, match="anchor"):
            Pattern(name="nothing", resolution=RESOLUTION, cells=(), grid=grid)


class TestAsCells:
    def test_at_anchor_is_identity(self, library: PatternLibrary) -> None:
        for name in PATTERN_SHAPES:
            pattern = library[name]
            assert pattern.as_cells(pattern.anchor) == list(pattern.cells)

    def test_center_comes_first(self, library: PatternLibrary) -> None:
        pattern = library["Propeller"]
        target = _same_base_cell_target(pattern.anchor)
        assert pattern.as_cells(target)[0] == target

    def test_star_moves_rigidly(self, library: PatternLibrary) -> None:
        star = library["Star"]
        target = _same_base_cell_target(star.anchor)
        assert set(star.as_cells(target)) == set(h3.grid_disk(target, 1))

    def test_shape_size_preserved(self, library: PatternLibrary) -> None:
        target = _same_base_cell_target(library["Trio"].anchor)
        for name in ("Small flicker", "Bar", "Trio", "Propeller", "Star"):
            assert len(library[name].as_cells(target)) == library[name].size

    def test_star_crosses_base_cells(self, library: PatternLibrary) -> None:
        star = library["Star"]
        target = h3.latlng_to_cell(-33.87, 151.21, RESOLUTION)
        assert h3.get_base_cell_number(target) != h3.get_base_cell_number(star.anchor)
        assert not h3.is_pentagon(target)
        cells = star.as_cells(target)
        assert cells[0] == target
        assert set(cells) == set(h3.grid_disk(target, 1))

    def test_star_near_pentagon_is_partial(self, library: PatternLibrary) -> None:
        star = library["Star"]
        partial = 0
        for pentagon in h3.get_pentagons(RESOLUTION):
            for target in h3.grid_disk(pentagon, 1):
                if target == pentagon:
                    continue
                cells = star.as_cells(target)
                assert cells[0] == target
                assert len(cells) == len(set(cells))
                assert set(cells) <= set(h3.grid_disk(target, 1))
                if len(cells) < star.size:
                    partial += 1
        assert partial > 0

    def test_resolution_mismatch_yields_nothing(self, library: PatternLibrary) -> None:
        other = h3.latlng_to_cell(*CANONICAL_ANCHOR_LATLNG, RESOLUTION + 1)
        assert library["Bar"].as_cells(other) == []

    def test_seam_cells_are_dropped(self) -> None:
        anchor = h3.latlng_to_cell(*CANONICAL_ANCHOR_LATLNG, RESOLUTION)
        star = PatternLibrary.build(H3Grid(), RESOLUTION)["Star"]
        blocked = star.cells[3]
        seam_star = Pattern(
            name="Star", resolution=RESOLUTION, cells=star.cells, grid=_SeamGrid({blocked})
        )
        cells = seam_star.as_cells(anchor)
        assert len(cells) == 6
        assert blocked not in cells


class TestLibrary:
    def test_contains_every_shape(self, library: PatternLibrary) -> None:
        assert len(library) == len(PATTERN_SHAPES)
        assert all(name in library for name in PATTERN_SHAPES)

    def test_missing_name(self, library: PatternLibrary) -> None:
        assert library.get("Glider") is None
        with pytest.raises(KeyError):
            library["Glider"]

    def test_names_ordered_by_size_then_name(self, library: PatternLibrary) -> None:
        names = library.names()
        assert names[:2] == ["Single cell", "Small flicker"]
        assert names[-1] == "Star"
        assert names.index("Bar") < names.index("Trio") < names.index("Propeller")

    def test_library_remembers_resolution(self, library: PatternLibrary) -> None:
        assert library.resolution == RESOLUTION
        assert all(library[name].resolution == RESOLUTION for name in PATTERN_SHAPES)
