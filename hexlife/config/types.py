"""Configuration dataclasses for interactive sessions and headless runs.

All frozen dataclasses that parameterise a game, a session, or a batch run
live here. Validation happens eagerly in ``__post_init__``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from hexlife.config.constants import (
    DEFAULT_RESOLUTION,
    DEFAULT_SPAWN_PROBABILITY,
    MAX_RESOLUTION,
    MIN_RESOLUTION,
)

__all__ = [
    "GameConfig",
    "RunConfig",
    "RunResult",
]


# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RunResult:
    """Top-level result for one headless run."""

    run_id: str
    resolution: int
    cell_count: int
    generations: int
    final_population: int
    extinct_at: int | None


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GameConfig:
    """Engine construction parameters."""

    resolution: int = DEFAULT_RESOLUTION
    spawn_probability: float = DEFAULT_SPAWN_PROBABILITY
    sim_seed: int | None = None
    """Seed for the reseeding RNG (None = nondeterministic)."""
    workers: int = 1
    """Thread count for the transition pass (1 = serial)."""

    def __post_init__(self) -> None:
        if not MIN_RESOLUTION <= self.resolution <= MAX_RESOLUTION:
            raise ValueError(
                f"resolution must be in [{MIN_RESOLUTION}, {MAX_RESOLUTION}]"
            )
        if not 0.0 <= self.spawn_probability <= 1.0:
            raise ValueError("spawn_probability must be in [0.0, 1.0]")
        if self.workers < 1:
            raise ValueError("workers must be >= 1")


@dataclass(frozen=True)
class RunConfig:
    """Headless batch-run parameters."""

    steps: int = 100
    rule: str = "B2/S35"
    """Birth/survival rule in B/S notation."""
    pattern: str | None = None
    """Pattern stamped onto the seeded field before the first tick."""
    stamp_count: int = 0
    """Number of random cells the pattern is stamped around."""
    seed_field: bool = True
    """Randomly populate the field before stamping (False = start empty)."""
    game: GameConfig = field(default_factory=GameConfig)

    def __post_init__(self) -> None:
        from hexlife.domain.patterns import PATTERN_SHAPES
        from hexlife.domain.rules import RuleTable

        if self.steps < 1:
            raise ValueError("steps must be >= 1")
        if self.stamp_count < 0:
            raise ValueError("stamp_count must be >= 0")
        if self.stamp_count > 0 and self.pattern is None:
            raise ValueError("stamp_count requires a pattern")
        if self.pattern is not None and self.pattern not in PATTERN_SHAPES:
            valid = ", ".join(sorted(PATTERN_SHAPES))
            raise ValueError(f"unknown pattern {self.pattern!r}; available: {valid}")
        RuleTable.from_notation(self.rule)
