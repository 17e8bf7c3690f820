"""Spatial metrics over one generation: density, clusters, pentagon occupancy."""

from __future__ import annotations

import networkx as nx

from hexlife.domain.field import Field
from hexlife.domain.grid import GridIndex


def density(field: Field) -> float:
    """Fraction of cells that are occupied; NaN for an empty field."""
    if len(field) == 0:
        return float("nan")
    return field.population() / len(field)


def live_pentagon_count(field: Field, grid: GridIndex) -> int:
    return sum(1 for cell in field.occupied_cells() if grid.is_pentagon(cell))


def occupancy_graph(field: Field, grid: GridIndex) -> nx.Graph:
    """Graph of occupied cells with an edge between every adjacent occupied pair."""
    occupied = field.occupied_cells()
    g = nx.Graph()
    g.add_nodes_from(occupied)
    for cell in occupied:
        for neighbor in grid.neighbors(cell, 1):
            if neighbor != cell and neighbor in occupied:
                g.add_edge(cell, neighbor)
    return g


def cluster_count(field: Field, grid: GridIndex) -> int:
    """Number of connected groups of occupied cells."""
    return nx.number_connected_components(occupancy_graph(field, grid))


def largest_cluster_size(field: Field, grid: GridIndex) -> int:
    g = occupancy_graph(field, grid)
    if g.number_of_nodes() == 0:
        return 0
    return max(len(component) for component in nx.connected_components(g))
