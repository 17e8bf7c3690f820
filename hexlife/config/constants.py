"""Centralized domain constants for the spherical Life simulation.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

MIN_RESOLUTION = 0
"""Coarsest tessellation level supported by the H3 index (122 cells)."""

MAX_RESOLUTION = 15
"""Finest tessellation level supported by the H3 index."""

DEFAULT_RESOLUTION = 2
"""Default tessellation level (5882 cells)."""

DEFAULT_SPAWN_PROBABILITY = 0.5
"""Default per-cell probability of life when reseeding."""

NEIGHBOR_SLOTS = 7
"""Rule table length: live-neighbor counts 0..6 inclusive."""

PENTAGON_COUNT = 12
"""Number of pentagon cells at every resolution."""

CANONICAL_ANCHOR_LATLNG: tuple[float, float] = (37.7749, -122.4194)
"""Geographic location of the canonical pattern anchor (a hexagon far from pentagons)."""

FLUSH_THRESHOLD = 4_096
"""Flush generation log rows to Parquet once this in-memory row count is reached."""

# RGBA colours, channels in [0, 1]
BACK_COLOR: tuple[float, float, float, float] = (0.204, 0.286, 0.369, 1.0)
PENTAGON_BACK_COLOR: tuple[float, float, float, float] = (0.204, 0.286, 0.309, 1.0)
UNIT_COLOR: tuple[float, float, float, float] = (0.1, 0.9, 0.1, 0.3)
GRASS_COLOR: tuple[float, float, float, float] = (0.4, 0.9, 0.1, 1.0)
SCORCHED_COLOR: tuple[float, float, float, float] = (0.9, 0.4, 0.1, 1.0)
MARK_COLOR: tuple[float, float, float, float] = (1.0, 0.0, 0.0, 0.9)
