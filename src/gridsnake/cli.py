"""Command-line runner for the Grid Snake simulation."""

from __future__ import annotations

import argparse
import logging
import sys

import numpy as np

from gridsnake.config import SimulationConfig
from gridsnake.grid import CellType

logger = logging.getLogger(__name__)

_CELL_CHARS: dict[int, str] = {
    CellType.EMPTY: ".",
    CellType.SNAKE: "o",
    CellType.FOOD: "*",
    CellType.HEAD: "@",
}

# Flag name -> SimulationConfig field.
_CONFIG_FLAGS: dict[str, str] = {
    "grid_width": "grid_width",
    "grid_height": "grid_height",
    "move_ms": "move_interval_ms",
    "food_ms": "food_interval_ms",
    "seed": "seed",
}


def _add_config_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    parser.add_argument("--grid-width", type=int, default=None)
    parser.add_argument("--grid-height", type=int, default=None)
    parser.add_argument("--move-ms", type=int, default=None)
    parser.add_argument("--food-ms", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridsnake",
        description="Headless runner for the Grid Snake simulation core.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- run ---
    run_p = sub.add_parser("run", help="Simulate frames with random input.")
    _add_config_flags(run_p)
    run_p.add_argument("--frames", type=int, default=600)
    run_p.add_argument(
        "--frame-ms", type=float, default=1000 / 60,
        help="Simulated wall-clock time per frame.",
    )
    run_p.add_argument(
        "--input-rate", type=float, default=0.05,
        help="Probability of pressing a random direction on a frame.",
    )
    run_p.add_argument(
        "--show", action="store_true",
        help="Print the final grid as text.",
    )

    # --- config ---
    config_p = sub.add_parser("config", help="Write a config file.")
    _add_config_flags(config_p)
    config_p.add_argument("output", help="Destination JSON path.")

    return parser


def _resolve_config(args: argparse.Namespace) -> SimulationConfig:
    config = (
        SimulationConfig.load(args.config)
        if args.config else SimulationConfig()
    )
    overrides: dict = {}
    for cli_name, cfg_name in _CONFIG_FLAGS.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val
    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = SimulationConfig(**d)
    return config


def render_cells(cells: np.ndarray) -> str:
    """Render an occupancy array with the top row (highest ``y``) first."""
    return "\n".join(
        "".join(_CELL_CHARS[int(c)] for c in row) for row in cells[::-1]
    )


def _input_rng(seed: int | None) -> np.random.Generator:
    """Random input stream spawned from, but independent of, the food seed."""
    return np.random.default_rng(np.random.SeedSequence(seed).spawn(1)[0])


def _run_simulation(args: argparse.Namespace) -> int:
    from gridsnake.engine import Simulation
    from gridsnake.snake import Direction

    if args.frames < 0:
        raise ValueError("--frames must be non-negative.")
    if args.frame_ms < 0:
        raise ValueError("--frame-ms must be non-negative.")
    if not 0.0 <= args.input_rate <= 1.0:
        raise ValueError("--input-rate must be between 0 and 1.")

    config = _resolve_config(args)
    sim = Simulation(config)
    input_rng = _input_rng(config.seed)
    directions = list(Direction)
    elapsed = args.frame_ms / 1000
    logger.info(
        "Running %d frames of %.1f ms on a %dx%d grid.",
        args.frames, args.frame_ms, config.grid_width, config.grid_height,
    )

    for _ in range(args.frames):
        pressed: set[Direction] = set()
        if input_rng.random() < args.input_rate:
            pressed.add(directions[int(input_rng.integers(len(directions)))])
        sim.update(elapsed, pressed)

    state = sim.state
    print(  # noqa: T201
        f"frames={state.frame} ticks={state.tick} "
        f"games_played={state.games_played} length={len(state.snake)} "
        f"food={len(state.food)}"
    )
    if args.show:
        cells = state.grid.occupancy(state.snake.positions, state.food.positions)
        print(render_cells(cells))  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    config = _resolve_config(args)
    config.save(args.output)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``gridsnake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "run": _run_simulation,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
