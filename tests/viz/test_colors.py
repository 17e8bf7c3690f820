"""Tests for hexlife.viz.colors and hexlife.viz.theme."""

from __future__ import annotations

import pytest

from hexlife.domain.cell import CellState, Terrain
from hexlife.viz.colors import cell_color, merge_colors, terrain_color, to_rgba8
from hexlife.viz.theme import DEFAULT_THEME, HIGH_CONTRAST_THEME, Theme, get_theme


class TestMergeColors:
    def test_channel_average(self) -> None:
        merged = merge_colors((0.0, 0.2, 1.0, 1.0), (1.0, 0.4, 0.0, 0.0))
        assert merged == pytest.approx((0.5, 0.3, 0.5, 0.5))

    def test_identity_on_equal_colors(self) -> None:
        color = (0.1, 0.2, 0.3, 0.4)
        assert merge_colors(color, color) == pytest.approx(color)


class TestCellColor:
    def test_empty_usual_cell_is_background(self) -> None:
        assert cell_color(CellState(), False) == pytest.approx(DEFAULT_THEME.back_color)

    def test_pentagon_background_differs(self) -> None:
        assert cell_color(CellState(), True) != cell_color(CellState(), False)

    def test_live_cell_blends_with_terrain(self) -> None:
        expected = merge_colors(DEFAULT_THEME.live_color, DEFAULT_THEME.back_color)
        assert cell_color(CellState(occupied=True), False) == pytest.approx(expected)

    def test_live_overrides_pentagon_background(self) -> None:
        state = CellState(occupied=True)
        assert cell_color(state, True) == cell_color(state, False)

    def test_mark_overlay_applied_last(self) -> None:
        state = CellState(occupied=True, marked=True, terrain=Terrain.RICH)
        base = merge_colors(DEFAULT_THEME.live_color, DEFAULT_THEME.rich_color)
        expected = merge_colors(DEFAULT_THEME.mark_color, base)
        assert cell_color(state, False) == pytest.approx(expected)

    def test_terrain_colors(self) -> None:
        assert terrain_color(Terrain.RICH) == DEFAULT_THEME.rich_color
        assert terrain_color(Terrain.POOR) == DEFAULT_THEME.poor_color
        assert terrain_color(Terrain.USUAL) == DEFAULT_THEME.back_color

    def test_theme_is_honoured(self) -> None:
        state = CellState(occupied=True)
        assert cell_color(state, False, HIGH_CONTRAST_THEME) != cell_color(state, False)


class TestRgba8:
    def test_full_and_empty_channels(self) -> None:
        assert to_rgba8((1.0, 0.0, 0.5, 1.0)) == (255, 0, 128, 255)

    def test_out_of_range_clamped(self) -> None:
        assert to_rgba8((1.7, -0.3, 0.999, 2.0)) == (255, 0, 255, 255)


class TestThemes:
    def test_lookup_case_insensitive(self) -> None:
        assert get_theme("High-Contrast") is HIGH_CONTRAST_THEME

    def test_unknown_theme(self) -> None:
        with pytest.raises(ValueError, match="Unknown theme"):
            get_theme("neon")

    def test_theme_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Theme().back_color = (0.0, 0.0, 0.0, 0.0)  # type: ignore[misc]
