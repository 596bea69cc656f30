"""
Algorithm base class and shared search driver.

Every strategy runs the same best-first relaxation loop; they differ only in
which cost field they record, what a step costs and how frontier entries are
prioritised. Concrete strategies implement those hooks.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from gridfinder.replay import apply_step
from gridfinder.utils.path import calculate_path_distance, get_shortest_path
from gridfinder.utils.priority_queue import PriorityQueue

if TYPE_CHECKING:
    from gridfinder.grid.grid import Grid
    from gridfinder.grid.node import Node, Position

logger = logging.getLogger(__name__)


class SearchStatus(Enum):
    """Lifecycle of a single run."""

    NOT_STARTED = "not_started"
    INITIALIZING = "initializing"
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class FrontierEntry:
    """
    Immutable snapshot of a node's priority at the time it was enqueued.

    A node may have several entries in the frontier; only the first one
    dequeued is acted on.
    """

    node: Node
    priority: tuple[float, ...]


@dataclass
class SearchResult:
    """
    Outcome of a run.

    Attributes:
        visited: Nodes in the order they were finalized (empty if not visualized)
        path: Nodes from start to end inclusive (empty if not found)
        path_found: Whether the end node was reached
        cancelled: Whether the run stopped on request before finishing
    """

    visited: list[Node] = field(default_factory=list)
    path: list[Node] = field(default_factory=list)
    path_found: bool = False
    cancelled: bool = False

    @property
    def visited_count(self) -> int:
        return len(self.visited)

    @property
    def path_length(self) -> int:
        """Number of nodes on the path, start and end included."""
        return len(self.path)

    @property
    def path_cost(self) -> int:
        return calculate_path_distance(self.path)


class Algorithm(ABC):
    """
    Abstract base class for grid search strategies.

    Subclasses define name/description metadata and the cost/priority hooks.
    The driver handles initialization, the frontier, lazy deletion of stale
    entries, early termination on the end node, cooperative cancellation and
    path reconstruction.
    """

    name: ClassVar[str]
    description: ClassVar[str]

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.visited_nodes_in_order: list[Node] = []
        self.path_nodes_in_order: list[Node] = []
        self.status = SearchStatus.NOT_STARTED
        self.outcome: SearchStatus | None = None
        self._finalized: set[Position] = set()
        self._frontier: PriorityQueue[FrontierEntry] | None = None
        self._should_stop = False
        self._on_visit: Callable[[Node], None] | None = None

    # -------------------------------------------------------------------------
    # Strategy hooks
    # -------------------------------------------------------------------------

    @abstractmethod
    def _cost(self, node: Node) -> float:
        """Accumulated cost currently recorded on node."""
        ...

    @abstractmethod
    def _set_cost(self, node: Node, cost: float) -> None:
        """Record an improved accumulated cost on node."""
        ...

    @abstractmethod
    def _step_cost(self, neighbor: Node) -> float:
        """Cost of stepping onto neighbor."""
        ...

    @abstractmethod
    def _priority(self, node: Node) -> tuple[float, ...]:
        """Frontier priority for node; lower sorts first."""
        ...

    def _compare(self, a: FrontierEntry, b: FrontierEntry) -> int:
        return (a.priority > b.priority) - (a.priority < b.priority)

    # -------------------------------------------------------------------------
    # Driver
    # -------------------------------------------------------------------------

    def initialize(self) -> bool:
        """
        Prepare a fresh run.

        Returns:
            False if the grid has no start or no end node
        """
        self.status = SearchStatus.INITIALIZING
        self.outcome = None
        self.visited_nodes_in_order = []
        self.path_nodes_in_order = []
        self._finalized = set()
        self._should_stop = False

        if self.grid is None or self.grid.start_node is None or self.grid.end_node is None:
            logger.warning(f"{self.name}: grid needs both a start and an end node")
            self.status = SearchStatus.TERMINATED
            return False

        self.grid.reset_path()
        start = self.grid.start_node
        self._set_cost(start, 0)
        self._frontier = PriorityQueue(self._compare)
        self._frontier.enqueue(FrontierEntry(start, self._priority(start)))
        self.status = SearchStatus.RUNNING
        return True

    def step(self) -> bool:
        """
        Run one iteration of the search loop.

        Returns:
            True while the search can continue, False once it has found the
            end node, exhausted the frontier or been asked to stop
        """
        if self.status is not SearchStatus.RUNNING or self._should_stop:
            return False
        if self._frontier.is_empty():
            self.status = SearchStatus.EXHAUSTED
            return False

        node = self._frontier.dequeue().node
        if node.position in self._finalized or node.is_wall:
            return True

        self._mark_visited(node)
        if node == self.grid.end_node:
            self.status = SearchStatus.FOUND
            return False

        self._relax_neighbors(node)
        return True

    def run(
        self,
        visualize: bool = True,
        on_visit: Callable[[Node], None] | None = None,
    ) -> SearchResult:
        """
        Run the search to completion or until stopped.

        Args:
            visualize: Return the visitation order in the result
            on_visit: Called with each node as it is finalized

        Returns:
            SearchResult; path_found is False when initialization fails,
            the frontier is exhausted or the run is cancelled
        """
        if not self.initialize():
            return SearchResult()

        logger.debug(
            f"{self.name}: searching {self.grid.start_node.position} -> "
            f"{self.grid.end_node.position}"
        )
        self._on_visit = on_visit
        try:
            while self.step():
                pass
        finally:
            self._on_visit = None

        cancelled = self.status is SearchStatus.RUNNING
        if cancelled:
            logger.info(f"{self.name}: stopped after {len(self.visited_nodes_in_order)} nodes")
            self.status = SearchStatus.EXHAUSTED

        path_found = self.status is SearchStatus.FOUND
        if path_found:
            self.path_nodes_in_order = get_shortest_path(self.grid.end_node, self.grid)

        self.outcome = self.status
        self.status = SearchStatus.TERMINATED
        logger.debug(
            f"{self.name}: {self.outcome.value}, visited {len(self.visited_nodes_in_order)}, "
            f"path length {len(self.path_nodes_in_order)}"
        )

        return SearchResult(
            visited=list(self.visited_nodes_in_order) if visualize else [],
            path=list(self.path_nodes_in_order),
            path_found=path_found,
            cancelled=cancelled,
        )

    def request_stop(self) -> None:
        """Ask a running search to stop before its next iteration."""
        self._should_stop = True

    @property
    def is_running(self) -> bool:
        return self.status is SearchStatus.RUNNING

    def get_path(self) -> list[Node]:
        return get_shortest_path(self.grid.end_node, self.grid)

    def has_node_been_visited(self, node: Node) -> bool:
        return node.position in self._finalized

    def update_step(self, current_step: int) -> None:
        """Show the first current_step + 1 visited nodes on the grid, the last as current."""
        apply_step(self.grid, self.visited_nodes_in_order, current_step)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _mark_visited(self, node: Node) -> None:
        node.is_visited = True
        self.visited_nodes_in_order.append(node)
        self._finalized.add(node.position)
        if self._on_visit is not None:
            self._on_visit(node)

    def _relax_neighbors(self, node: Node) -> None:
        base_cost = self._cost(node)
        for neighbor in self.grid.get_neighbors(node):
            if neighbor.position in self._finalized:
                continue
            tentative = base_cost + self._step_cost(neighbor)
            if tentative < self._cost(neighbor):
                neighbor.previous = node.position
                self._set_cost(neighbor, tentative)
                self._frontier.enqueue(FrontierEntry(neighbor, self._priority(neighbor)))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, status={self.status.value!r})"
