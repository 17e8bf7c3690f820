"""Display colour of a cell as a pure function of its state."""

from __future__ import annotations

from hexlife.domain.cell import CellState, Terrain
from hexlife.viz.theme import DEFAULT_THEME, RGBA, Theme


def merge_colors(lhs: RGBA, rhs: RGBA) -> RGBA:
    """Channel-wise average of two RGBA colours."""
    r1, g1, b1, a1 = lhs
    r2, g2, b2, a2 = rhs
    return ((r1 + r2) / 2.0, (g1 + g2) / 2.0, (b1 + b2) / 2.0, (a1 + a2) / 2.0)


def terrain_color(terrain: Terrain, theme: Theme = DEFAULT_THEME) -> RGBA:
    if terrain is Terrain.RICH:
        return theme.rich_color
    if terrain is Terrain.POOR:
        return theme.poor_color
    return theme.back_color


def cell_color(state: CellState, is_pentagon: bool, theme: Theme = DEFAULT_THEME) -> RGBA:
    """Base colour blended with the terrain overlay, then with the mark overlay."""
    if state.occupied:
        base = theme.live_color
    elif is_pentagon:
        base = theme.pentagon_back_color
    else:
        base = theme.back_color
    color = merge_colors(base, terrain_color(state.terrain, theme))
    if state.marked:
        return merge_colors(theme.mark_color, color)
    return color


def to_rgba8(color: RGBA) -> tuple[int, int, int, int]:
    """Quantise a [0, 1] RGBA colour to 8-bit channels, clamping out-of-range values."""

    def channel(value: float) -> int:
        clamped = min(max(value, 0.0), 1.0)
        return 255 if clamped == 1.0 else int(clamped * 256.0)

    r, g, b, a = color
    return channel(r), channel(g), channel(b), channel(a)
