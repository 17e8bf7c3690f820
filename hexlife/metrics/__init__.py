"""Metrics layer: per-generation spatial statistics."""

from hexlife.metrics.spatial import (
    cluster_count,
    density,
    largest_cluster_size,
    live_pentagon_count,
    occupancy_graph,
)

__all__ = [
    "cluster_count",
    "density",
    "largest_cluster_size",
    "live_pentagon_count",
    "occupancy_graph",
]
