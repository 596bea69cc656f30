"""
Step-by-step replay of a finished search.

A rendering layer drives SearchReplay forward and backward through the
recorded visitation order; the replay only toggles the visualization flags
(is_visited, is_current, is_path) on the grid's nodes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridfinder.algorithms.base import SearchResult
    from gridfinder.grid.grid import Grid
    from gridfinder.grid.node import Node

logger = logging.getLogger(__name__)


def clear_visualization(grid: Grid) -> None:
    for node in grid:
        node.is_visited = False
        node.is_current = False
        node.is_path = False


def apply_step(grid: Grid, visited: list[Node], current_step: int) -> None:
    """
    Show visited[0..current_step] as visited and visited[current_step] as current.

    A negative step clears the grid.
    """
    clear_visualization(grid)
    for node in visited[: max(current_step + 1, 0)]:
        node.is_visited = True
    if 0 <= current_step < len(visited):
        visited[current_step].is_current = True


class SearchReplay:
    """
    Cursor over a SearchResult's visitation order.

    current_step is -1 before the first step and len(visited) - 1 at the end.
    The path is only shown once explicitly requested or after finish().
    """

    def __init__(self, grid: Grid, result: SearchResult) -> None:
        """
        Args:
            grid: Grid whose nodes appear in result
            result: Result from a run with visualize=True
        """
        self.grid = grid
        self.result = result
        self.current_step = -1
        self.path_shown = False

    @property
    def total_steps(self) -> int:
        return len(self.result.visited)

    @property
    def visited_count(self) -> int:
        """Nodes shown as visited at the current step."""
        return self.current_step + 1

    @property
    def at_start(self) -> bool:
        return self.current_step < 0

    @property
    def at_end(self) -> bool:
        return self.current_step >= self.total_steps - 1

    @property
    def current_node(self) -> Node | None:
        if 0 <= self.current_step < self.total_steps:
            return self.result.visited[self.current_step]
        return None

    def next_step(self) -> bool:
        """Advance one node. Returns False if already at the end."""
        if self.at_end:
            return False
        self._go_to(self.current_step + 1)
        return True

    def previous_step(self) -> bool:
        """Step back one node, hiding the path. Returns False if already at the start."""
        if self.at_start:
            return False
        self._go_to(self.current_step - 1)
        return True

    def show_path(self) -> None:
        for node in self.result.path:
            node.is_path = True
        self.path_shown = True

    def finish(self) -> None:
        """Jump to the last step and reveal the path."""
        self._go_to(self.total_steps - 1)
        if self.result.path_found:
            self.show_path()

    def reset(self) -> None:
        self.current_step = -1
        self.path_shown = False
        clear_visualization(self.grid)

    def _go_to(self, step: int) -> None:
        self.current_step = step
        self.path_shown = False
        apply_step(self.grid, self.result.visited, step)
        logger.debug(f"Replay step {step + 1}/{self.total_steps}")
