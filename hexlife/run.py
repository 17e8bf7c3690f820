"""CLI entrypoint for headless spherical Life runs.

Supports ``--config path/to/config.json`` for reproducibility. CLI arguments
override config-file values; config-file values override built-in defaults.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from hexlife.config.constants import (
    DEFAULT_RESOLUTION,
    DEFAULT_SPAWN_PROBABILITY,
    MAX_RESOLUTION,
    MIN_RESOLUTION,
)
from hexlife.config.types import GameConfig, RunConfig
from hexlife.domain.patterns import PATTERN_SHAPES
from hexlife.simulation.runner import run_simulation

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run Life-like automata on the H3 sphere")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument(
        "--resolution",
        type=int,
        default=None,
        help=f"Tessellation level in [{MIN_RESOLUTION}, {MAX_RESOLUTION}]",
    )
    parser.add_argument("--steps", type=int, default=None)
    parser.add_argument("--rule", type=str, default=None, help="B/S notation, e.g. B2/S35")
    parser.add_argument("--probability", type=float, default=None)
    parser.add_argument("--sim-seed", type=int, default=None)
    parser.add_argument("--pattern", type=str, default=None, choices=sorted(PATTERN_SHAPES))
    parser.add_argument("--stamp-count", type=int, default=None)
    parser.add_argument("--seed-field", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--workers", type=int, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument(
        "--render",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Write snapshot and population figures",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run one simulation and print a JSON summary."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        file_cfg = json.loads(Path(args.config).read_text())

    def _get(cli_val: object, key: str, default: object) -> object:
        if cli_val is not None:
            return cli_val
        return file_cfg.get(key, default)

    def _get_bool(cli_val: bool | None, key: str, default: bool) -> bool:
        """CLI > file > default for boolean flags."""
        if cli_val is not None:
            return cli_val
        return bool(file_cfg.get(key, default))

    sim_seed_raw = _get(args.sim_seed, "sim_seed", None)
    pattern_raw = _get(args.pattern, "pattern", None)
    resolution_raw = _get(args.resolution, "resolution", DEFAULT_RESOLUTION)
    probability_raw = _get(args.probability, "probability", DEFAULT_SPAWN_PROBABILITY)
    game_config = GameConfig(
        resolution=int(resolution_raw),  # type: ignore[call-overload]
        spawn_probability=float(probability_raw),  # type: ignore[arg-type]
        sim_seed=None if sim_seed_raw is None else int(sim_seed_raw),  # type: ignore[call-overload]
        workers=int(_get(args.workers, "workers", 1)),  # type: ignore[call-overload]
    )
    run_config = RunConfig(
        steps=int(_get(args.steps, "steps", 100)),  # type: ignore[call-overload]
        rule=str(_get(args.rule, "rule", "B2/S35")),
        pattern=None if pattern_raw is None else str(pattern_raw),
        stamp_count=int(_get(args.stamp_count, "stamp_count", 0)),  # type: ignore[call-overload]
        seed_field=_get_bool(args.seed_field, "seed_field", True),
        game=game_config,
    )
    out_dir = Path(str(_get(args.out_dir, "out_dir", "data")))
    logger.debug("resolved run config: %s", run_config)
    render = _get_bool(args.render, "render", False)
    if render:
        import matplotlib

        matplotlib.use("Agg")

    result = run_simulation(run_config, out_dir=out_dir, render=render)
    summary = {
        "run_id": result.run_id,
        "resolution": result.resolution,
        "cell_count": result.cell_count,
        "generations": result.generations,
        "final_population": result.final_population,
        "extinct_at": result.extinct_at,
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
