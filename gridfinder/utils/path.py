"""
Path reconstruction and measurement helpers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridfinder.grid.grid import Grid
    from gridfinder.grid.node import Node

logger = logging.getLogger(__name__)


def get_shortest_path(end_node: Node | None, grid: Grid) -> list[Node]:
    """
    Follow back-links from end_node to the start and return start -> end.

    Back-links are (row, col) keys resolved through grid. The walk is capped
    at grid.cell_count steps.

    Returns:
        Nodes from start to end inclusive, or [] if end_node is missing, has
        no back-link, or the chain is broken or cyclic
    """
    if end_node is None or end_node.previous is None:
        return []

    path = []
    current = end_node
    for _ in range(grid.cell_count):
        path.append(current)
        if current.previous is None:
            path.reverse()
            return path
        current = grid.resolve(current.previous)
        if current is None:
            logger.warning("Back-link points outside the grid; discarding path")
            return []

    logger.warning(f"Back-link chain from {end_node.position} exceeds {grid.cell_count} cells")
    return []


def calculate_path_distance(path: list[Node]) -> int:
    """Total cost of a path: the weight of every node entered after the first."""
    if len(path) < 2:
        return 0
    return sum(node.weight for node in path[1:])
