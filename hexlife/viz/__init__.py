"""Visualization layer: themes, display colours, sphere geometry, and figures."""

from hexlife.viz.colors import cell_color, merge_colors, terrain_color, to_rgba8
from hexlife.viz.geometry import cell_centers, lat_lng_to_unit_sphere, unit_sphere_to_lat_lng
from hexlife.viz.render import render_population_timeseries, render_snapshot, snapshot_arrays
from hexlife.viz.theme import (
    DEFAULT_THEME,
    HIGH_CONTRAST_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)

__all__ = [
    "DEFAULT_THEME",
    "HIGH_CONTRAST_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "cell_centers",
    "cell_color",
    "get_theme",
    "lat_lng_to_unit_sphere",
    "merge_colors",
    "render_population_timeseries",
    "render_snapshot",
    "snapshot_arrays",
    "terrain_color",
    "to_rgba8",
    "unit_sphere_to_lat_lng",
]
