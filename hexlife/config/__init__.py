"""Configuration layer: constants and typed config dataclasses."""

from hexlife.config.constants import (
    CANONICAL_ANCHOR_LATLNG,
    DEFAULT_RESOLUTION,
    DEFAULT_SPAWN_PROBABILITY,
    FLUSH_THRESHOLD,
    MAX_RESOLUTION,
    MIN_RESOLUTION,
    NEIGHBOR_SLOTS,
    PENTAGON_COUNT,
)
from hexlife.config.types import GameConfig, RunConfig, RunResult

__all__ = [
    "CANONICAL_ANCHOR_LATLNG",
    "DEFAULT_RESOLUTION",
    "DEFAULT_SPAWN_PROBABILITY",
    "FLUSH_THRESHOLD",
    "GameConfig",
    "MAX_RESOLUTION",
    "MIN_RESOLUTION",
    "NEIGHBOR_SLOTS",
    "PENTAGON_COUNT",
    "RunConfig",
    "RunResult",
]
