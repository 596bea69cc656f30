"""
Side-by-side comparison of search strategies.

Each strategy runs on its own clone of the same grid, so every one sees an
identical maze, start and end, and no run disturbs another.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass

import numpy as np

from gridfinder.algorithms import ALGORITHMS, get_algorithm
from gridfinder.config import DEFAULT_TRIALS, validate_dimensions
from gridfinder.grid.grid import Grid

logger = logging.getLogger(__name__)

MAZE_KINDS = ("random", "recursive")


@dataclass
class ComparisonEntry:
    """
    One strategy's run on one grid.

    Attributes:
        key: Registry key of the algorithm
        name: Display name of the algorithm
        path_found: Whether the end was reached
        visited_count: Nodes finalized during the run
        path_length: Nodes on the path (0 if not found)
        path_cost: Summed weight along the path (0 if not found)
        elapsed_ms: Wall-clock time of run() in milliseconds
    """

    key: str
    name: str
    path_found: bool
    visited_count: int
    path_length: int
    path_cost: int
    elapsed_ms: float


@dataclass
class TrialSummary:
    """Aggregate of one strategy over many trials."""

    key: str
    name: str
    trials: int
    success_rate: float
    mean_visited: float
    mean_path_cost: float | None
    mean_elapsed_ms: float


def compare_algorithms(grid: Grid, names: list[str] | None = None) -> list[ComparisonEntry]:
    """
    Run each named strategy on a fresh clone of grid.

    Args:
        grid: Grid with start/end already fixed (left untouched)
        names: Algorithm keys to run (default: all registered)

    Returns:
        One ComparisonEntry per strategy, in the order given

    Raises:
        ValueError: If a name is unknown
    """
    names = list(names) if names is not None else list(ALGORITHMS)
    entries = []
    for key in names:
        algorithm = get_algorithm(key, grid.clone())
        start_time = time.perf_counter()
        result = algorithm.run(visualize=True)
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        entries.append(
            ComparisonEntry(
                key=key,
                name=algorithm.name,
                path_found=result.path_found,
                visited_count=result.visited_count,
                path_length=result.path_length,
                path_cost=result.path_cost,
                elapsed_ms=elapsed_ms,
            )
        )
        logger.debug(
            f"{key}: found={result.path_found} visited={result.visited_count} "
            f"cost={result.path_cost} ({elapsed_ms:.2f}ms)"
        )
    return entries


def run_trials(
    rows: int,
    cols: int,
    maze: str = "recursive",
    trials: int = DEFAULT_TRIALS,
    seed: int | None = None,
    names: list[str] | None = None,
    density: float | None = None,
    skew: str | None = None,
) -> dict[str, list[ComparisonEntry]]:
    """
    Generate trials mazes and compare the strategies on each.

    Args:
        rows: Grid rows
        cols: Grid columns
        maze: "random" or "recursive"
        trials: Number of mazes to generate
        seed: Seed for reproducible mazes
        names: Algorithm keys (default: all registered)
        density: Wall density for random mazes (default from config)
        skew: Orientation skew for recursive mazes

    Returns:
        Mapping of algorithm key to its entries, one per trial

    Raises:
        ValueError: If maze kind, dimensions or algorithm names are invalid
    """
    validate_dimensions(rows, cols)
    if maze not in MAZE_KINDS:
        raise ValueError(f"Unknown maze '{maze}'. Available: {', '.join(MAZE_KINDS)}")
    names = list(names) if names is not None else list(ALGORITHMS)
    rng = random.Random(seed)

    results: dict[str, list[ComparisonEntry]] = {key: [] for key in names}
    grid = Grid(rows, cols)
    for trial in range(trials):
        if maze == "random":
            if density is None:
                grid.generate_random_maze(rng=rng)
            else:
                grid.generate_random_maze(density, rng=rng)
        else:
            grid.generate_recursive_division_maze(skew, rng=rng)

        for entry in compare_algorithms(grid, names):
            results[entry.key].append(entry)
        logger.debug(f"Trial {trial + 1}/{trials} complete")

    return results


def summarize(results: dict[str, list[ComparisonEntry]]) -> list[TrialSummary]:
    """Aggregate run_trials output per strategy."""
    summaries = []
    for key, entries in results.items():
        if not entries:
            continue
        found = np.array([e.path_found for e in entries], dtype=bool)
        visited = np.array([e.visited_count for e in entries], dtype=np.float64)
        costs = np.array([e.path_cost for e in entries], dtype=np.float64)
        elapsed = np.array([e.elapsed_ms for e in entries], dtype=np.float64)

        summaries.append(
            TrialSummary(
                key=key,
                name=entries[0].name,
                trials=len(entries),
                success_rate=float(found.mean()),
                mean_visited=float(visited.mean()),
                mean_path_cost=float(costs[found].mean()) if found.any() else None,
                mean_elapsed_ms=float(elapsed.mean()),
            )
        )
    return summaries
