"""Colour presets for cell display.

Themes are frozen dataclasses that group all styling constants together.
Colours are RGBA tuples with channels in [0, 1].
"""

from __future__ import annotations

from dataclasses import dataclass

from hexlife.config.constants import (
    BACK_COLOR,
    GRASS_COLOR,
    MARK_COLOR,
    PENTAGON_BACK_COLOR,
    SCORCHED_COLOR,
    UNIT_COLOR,
)

RGBA = tuple[float, float, float, float]


@dataclass(frozen=True)
class Theme:
    """Complete collection of cell colour tokens."""

    back_color: RGBA = BACK_COLOR
    pentagon_back_color: RGBA = PENTAGON_BACK_COLOR
    live_color: RGBA = UNIT_COLOR
    rich_color: RGBA = GRASS_COLOR
    poor_color: RGBA = SCORCHED_COLOR
    mark_color: RGBA = MARK_COLOR
    population_color: str = "tab:green"


DEFAULT_THEME = Theme()

HIGH_CONTRAST_THEME = Theme(
    back_color=(0.05, 0.05, 0.05, 1.0),
    pentagon_back_color=(0.25, 0.05, 0.25, 1.0),
    live_color=(1.0, 1.0, 1.0, 1.0),
    mark_color=(1.0, 0.85, 0.0, 1.0),
    population_color="black",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "high-contrast": HIGH_CONTRAST_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
