import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

# Ensure local repo package is used even if another "gameoflife" is on PYTHONPATH.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gameoflife import GridView, LifeConfig, SimulationEngine, get_config, load_config

BLINKER = [
    [0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0],
    [0, 1, 1, 1, 0],
    [0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0],
]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print Game of Life generations.")
    parser.add_argument(
        "--steps",
        type=int,
        default=4,
        help="Number of generations to print",
    )
    parser.add_argument(
        "--random",
        nargs="*",
        type=int,
        metavar="N",
        default=None,
        help="Start from a random ROWS COLS grid instead of the blinker "
        "(no values: use grid.rows/grid.cols from the config)",
    )
    parser.add_argument("--config", type=str, default=None, help="Path to engine config YAML")
    parser.add_argument("--seed", type=int, default=None, help="Seed for --random")
    args = parser.parse_args(argv)
    if args.random is not None and len(args.random) not in (0, 2):
        parser.error("--random takes either no values or ROWS COLS")
    return args


def random_dimensions(requested: Sequence[int], config: LifeConfig) -> tuple[int, int]:
    """Return ROWS COLS from the command line, or the configured grid size."""
    if requested:
        rows, cols = requested
        return rows, cols
    return config.grid.rows, config.grid.cols


def render(grid: GridView) -> str:
    return "\n".join("".join("#" if cell.is_alive else "." for cell in row) for row in grid)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    config = load_config(args.config) if args.config else get_config()
    seed = args.seed if args.seed is not None else config.seed

    engine = SimulationEngine(alive_probability=config.grid.alive_probability, seed=seed)
    if args.random is not None:
        engine.initialize(*random_dimensions(args.random, config))
    else:
        engine.load(BLINKER)

    print(f"generation 0 ({engine.population} alive)")
    print(render(engine.grid))
    for _ in range(args.steps):
        grid = engine.advance_generation()
        print(f"\ngeneration {engine.generation} ({grid.population} alive)")
        print(render(grid))


if __name__ == "__main__":
    main()
