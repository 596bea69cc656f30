#!/usr/bin/env python3
"""
Compare search strategies over many generated mazes.

Usage:
    python scripts/compare.py
    python scripts/compare.py --maze random --density 0.3 --trials 50 --seed 7
    python scripts/compare.py --rows 31 --cols 51 --algorithms astar dijkstra
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gridfinder.algorithms import ALGORITHMS  # noqa: E402
from gridfinder.benchmark import MAZE_KINDS, run_trials, summarize  # noqa: E402
from gridfinder.config import DEFAULT_TRIALS, RANDOM_SEED  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Compare pathfinding strategies")
    parser.add_argument("--rows", type=int, default=21, help="Grid rows (default: 21)")
    parser.add_argument("--cols", type=int, default=41, help="Grid columns (default: 41)")
    parser.add_argument(
        "--maze",
        type=str,
        default="recursive",
        choices=list(MAZE_KINDS),
        help="Maze generator (default: recursive)",
    )
    parser.add_argument("--density", type=float, default=None, help="Wall density for random mazes")
    parser.add_argument(
        "--skew",
        type=str,
        default=None,
        choices=["vertical", "horizontal"],
        help="Orientation bias for recursive mazes",
    )
    parser.add_argument(
        "--trials",
        type=int,
        default=DEFAULT_TRIALS,
        help=f"Number of mazes (default: {DEFAULT_TRIALS})",
    )
    parser.add_argument(
        "--algorithms",
        nargs="+",
        default=list(ALGORITHMS),
        choices=list(ALGORITHMS),
        help="Strategies to compare (default: all)",
    )
    parser.add_argument("--seed", type=int, default=RANDOM_SEED, help="Random seed")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return parser.parse_args()


def run_benchmark() -> int:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    print("=" * 70)
    print("Grid Pathfinding - Strategy Comparison")
    print("=" * 70)
    print(
        f"\nTesting {len(args.algorithms)} strategies on {args.trials} "
        f"{args.maze} mazes ({args.rows}x{args.cols})...\n"
    )

    try:
        results = run_trials(
            args.rows,
            args.cols,
            maze=args.maze,
            trials=args.trials,
            seed=args.seed,
            names=args.algorithms,
            density=args.density,
            skew=args.skew,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Summary
    print("=" * 70)
    print("SUMMARY")
    print("=" * 70)

    for summary in summarize(results):
        cost = f"{summary.mean_path_cost:.1f}" if summary.mean_path_cost is not None else "-"
        print(
            f"  {summary.name:22} : {summary.success_rate:6.1%} found, "
            f"avg {summary.mean_visited:7.1f} visited, avg cost {cost:>6}, "
            f"{summary.mean_elapsed_ms:.2f}ms"
        )

    return 0


if __name__ == "__main__":
    sys.exit(run_benchmark())
