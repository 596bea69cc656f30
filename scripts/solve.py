#!/usr/bin/env python3
"""
Grid pathfinding CLI - Build a grid, run a search and print the result.

Usage:
    python scripts/solve.py --rows 15 --cols 30 --maze recursive
    python scripts/solve.py --maze random --density 0.25 --algorithm dijkstra --weights
    python scripts/solve.py --rows 5 --cols 5 --start 0,0 --end 4,4 --algorithm bfs
    python scripts/solve.py --maze recursive --skew vertical --seed 42 --steps

Algorithms:
    astar    - A* with Manhattan heuristic (default)
    dijkstra - Uniform-cost search over terrain weights
    bfs      - Breadth-first search, fewest moves

Legend:
    S start, E end, # wall, * path, o visited, 2-9 weighted cell
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gridfinder.algorithms import ALGORITHMS, get_algorithm  # noqa: E402
from gridfinder.config import (  # noqa: E402
    DEFAULT_ALGORITHM,
    DEFAULT_COLS,
    DEFAULT_MAZE_DENSITY,
    DEFAULT_ROWS,
    DEFAULT_WEIGHT_DENSITY,
    LOG_LEVEL,
    RANDOM_SEED,
)
from gridfinder.grid import Grid  # noqa: E402
from gridfinder.replay import SearchReplay  # noqa: E402


def parse_position(value: str) -> tuple[int, int]:
    """Parse "row,col" into a tuple."""
    try:
        row, col = (int(part) for part in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected ROW,COL, got {value!r}") from None
    return row, col


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run a pathfinding search on a grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument("--rows", type=int, default=DEFAULT_ROWS, help="Grid rows")
    parser.add_argument("--cols", type=int, default=DEFAULT_COLS, help="Grid columns")
    parser.add_argument(
        "--algorithm",
        type=str,
        default=DEFAULT_ALGORITHM,
        choices=list(ALGORITHMS),
        help=f"Search strategy (default: {DEFAULT_ALGORITHM})",
    )
    parser.add_argument(
        "--maze",
        type=str,
        default="none",
        choices=["none", "random", "recursive"],
        help="Maze generator to apply before searching (default: none)",
    )
    parser.add_argument(
        "--density",
        type=float,
        default=DEFAULT_MAZE_DENSITY,
        help=f"Wall density for --maze random (default: {DEFAULT_MAZE_DENSITY})",
    )
    parser.add_argument(
        "--skew",
        type=str,
        default=None,
        choices=["vertical", "horizontal"],
        help="Orientation bias for --maze recursive",
    )
    parser.add_argument(
        "--weights",
        action="store_true",
        help=f"Scatter random terrain weights (density {DEFAULT_WEIGHT_DENSITY})",
    )
    parser.add_argument("--start", type=parse_position, default=None, help="Start cell ROW,COL")
    parser.add_argument("--end", type=parse_position, default=None, help="End cell ROW,COL")
    parser.add_argument("--seed", type=int, default=RANDOM_SEED, help="Random seed")
    parser.add_argument(
        "--steps",
        action="store_true",
        help="Print the grid after every visited cell",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def build_grid(args: argparse.Namespace, rng: random.Random) -> Grid:
    """Create the grid and apply maze, weights and endpoint overrides."""
    grid = Grid(args.rows, args.cols)

    if args.maze == "random":
        grid.generate_random_maze(args.density, rng=rng)
    elif args.maze == "recursive":
        grid.generate_recursive_division_maze(args.skew, rng=rng)
    else:
        grid.set_default_start_end()

    if args.weights:
        grid.generate_random_weights(rng=rng)
    if args.start:
        grid.set_start_node(*args.start)
    if args.end:
        grid.set_end_node(*args.end)
    return grid


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        grid = build_grid(args, random.Random(args.seed))
        algorithm = get_algorithm(args.algorithm, grid)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("=" * 60)
    print(f"  Grid:      {grid.rows}x{grid.cols} ({args.maze} maze)")
    print(f"  Algorithm: {algorithm.name} - {algorithm.description}")
    print("=" * 60 + "\n")

    try:
        result = algorithm.run(visualize=True)
    except KeyboardInterrupt:
        print("\n\nSearch interrupted by user")
        return 130

    replay = SearchReplay(grid, result)
    if args.steps:
        while replay.next_step():
            print(f"Step {replay.visited_count}/{replay.total_steps}")
            print(grid.render() + "\n")
    replay.finish()

    print(grid.render())
    print()
    if result.path_found:
        print(f"Path found: {result.path_length} cells, cost {result.path_cost}")
    else:
        print("No path found")
    print(f"Visited: {result.visited_count} cells")

    return 0 if result.path_found else 1


if __name__ == "__main__":
    sys.exit(main())
