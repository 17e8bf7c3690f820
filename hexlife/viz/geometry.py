"""Unit-sphere geometry for mesh placement and hit-testing.

Renderers place each cell at the unit-sphere point of its centre and map a
ray/sphere intersection back to geographic coordinates to find the cell
under the cursor.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from hexlife.domain.grid import CellId, GridIndex


def lat_lng_to_unit_sphere(lat: float, lng: float) -> tuple[float, float, float]:
    """Point on the unit sphere for latitude/longitude in degrees."""
    phi = math.radians(lat)
    lam = math.radians(lng)
    return (math.cos(phi) * math.cos(lam), math.cos(phi) * math.sin(lam), math.sin(phi))


def unit_sphere_to_lat_lng(x: float, y: float, z: float) -> tuple[float, float]:
    """Latitude/longitude in degrees of the direction (x, y, z); need not be normalised."""
    norm = math.sqrt(x * x + y * y + z * z)
    if norm == 0.0:
        raise ValueError("cannot project the origin onto the sphere")
    lat = math.degrees(math.asin(max(-1.0, min(1.0, z / norm))))
    lng = math.degrees(math.atan2(y, x))
    return lat, lng


def cell_centers(grid: GridIndex, cells: Sequence[CellId]) -> np.ndarray:
    """(N, 3) array of unit-sphere centres, row order matching ``cells``."""
    if not cells:
        return np.zeros((0, 3), dtype=float)
    latlng = np.radians(np.array([grid.to_lat_lng(cell) for cell in cells], dtype=float))
    lat, lng = latlng[:, 0], latlng[:, 1]
    return np.column_stack((np.cos(lat) * np.cos(lng), np.cos(lat) * np.sin(lng), np.sin(lat)))
