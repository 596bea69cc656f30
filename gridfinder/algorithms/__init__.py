"""
Algorithms module.

Provides the search strategies that run over a Grid:
- AStarAlgorithm: Manhattan-guided informed search
- DijkstraAlgorithm: Uniform-cost search over terrain weights
- BreadthFirstAlgorithm: Fewest-moves search ignoring weights
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridfinder.algorithms.astar import AStarAlgorithm
from gridfinder.algorithms.base import Algorithm, FrontierEntry, SearchResult, SearchStatus
from gridfinder.algorithms.bfs import BreadthFirstAlgorithm
from gridfinder.algorithms.dijkstra import DijkstraAlgorithm

if TYPE_CHECKING:
    from gridfinder.grid.grid import Grid

ALGORITHMS: dict[str, type[Algorithm]] = {
    "astar": AStarAlgorithm,
    "dijkstra": DijkstraAlgorithm,
    "bfs": BreadthFirstAlgorithm,
}

__all__ = [
    "ALGORITHMS",
    "AStarAlgorithm",
    "Algorithm",
    "BreadthFirstAlgorithm",
    "DijkstraAlgorithm",
    "FrontierEntry",
    "SearchResult",
    "SearchStatus",
    "get_algorithm",
    "list_algorithms",
]


def get_algorithm(name: str, grid: Grid) -> Algorithm:
    """
    Get an algorithm by name, bound to grid.

    Args:
        name: Algorithm identifier (astar, dijkstra, bfs)
        grid: Grid the algorithm will search

    Returns:
        Instantiated algorithm

    Raises:
        ValueError: If algorithm name is unknown
    """
    if name not in ALGORITHMS:
        available = ", ".join(ALGORITHMS.keys())
        raise ValueError(f"Unknown algorithm '{name}'. Available: {available}")
    return ALGORITHMS[name](grid)


def list_algorithms() -> list[tuple[str, str, str]]:
    """Return (key, display name, description) for every algorithm."""
    return [(key, cls.name, cls.description) for key, cls in ALGORITHMS.items()]
