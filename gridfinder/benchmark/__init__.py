"""
Benchmark module.

Provides infrastructure for comparing strategies on identical problems:
- compare_algorithms: Run strategies over clones of one grid
- run_trials: Compare strategies over many generated mazes
- summarize: Aggregate trial results per strategy
"""

from gridfinder.benchmark.runner import (
    MAZE_KINDS,
    ComparisonEntry,
    TrialSummary,
    compare_algorithms,
    run_trials,
    summarize,
)

__all__ = [
    "MAZE_KINDS",
    "ComparisonEntry",
    "TrialSummary",
    "compare_algorithms",
    "run_trials",
    "summarize",
]
