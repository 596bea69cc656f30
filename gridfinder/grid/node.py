"""
Node dataclass representing a single grid cell.

A node carries its coordinates, role flags (start/end/wall), terrain weight,
visualization flags and the scratch fields used by the search strategies.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from gridfinder.config import DEFAULT_WEIGHT

Position = tuple[int, int]


@dataclass(eq=False)
class Node:
    """
    A single cell of the grid.

    Attributes:
        row: Row index (immutable after creation)
        col: Column index (immutable after creation)
        is_start: Cell is the search origin
        is_end: Cell is the search target
        is_wall: Cell is impassable
        is_visited: Cell was finalized by the last search
        is_path: Cell lies on the reconstructed path
        is_current: Cell is the replay cursor
        is_weighted: Display hint for cells with a non-default weight
        weight: Cost of stepping onto this cell
        distance: Accumulated cost used by Dijkstra/BFS
        g_score: Accumulated cost from start used by A*
        f_score: g_score + heuristic used by A*
        h_score: Heuristic estimate recorded for inspection
        previous: Back-link as a (row, col) key into the owning grid
    """

    row: int
    col: int
    is_start: bool = False
    is_end: bool = False
    is_wall: bool = False
    is_visited: bool = False
    is_path: bool = False
    is_current: bool = False
    is_weighted: bool = False
    weight: int = DEFAULT_WEIGHT
    distance: float = field(default=math.inf)
    g_score: float = field(default=math.inf)
    f_score: float = field(default=math.inf)
    h_score: float = 0
    previous: Position | None = None

    def __setattr__(self, name: str, value) -> None:
        if name in ("row", "col") and name in self.__dict__:
            raise AttributeError(f"Node.{name} is immutable")
        super().__setattr__(name, value)

    # -------------------------------------------------------------------------
    # State management
    # -------------------------------------------------------------------------

    def reset(self) -> None:
        """Clear per-search scratch state, leaving roles and terrain alone."""
        self.is_visited = False
        self.is_path = False
        self.is_current = False
        self.distance = math.inf
        self.g_score = math.inf
        self.f_score = math.inf
        self.h_score = 0
        self.previous = None

    def reset_all(self) -> None:
        """Clear roles, walls and terrain, then scratch state."""
        self.is_start = False
        self.is_end = False
        self.is_wall = False
        self.is_weighted = False
        self.weight = DEFAULT_WEIGHT
        self.reset()

    # -------------------------------------------------------------------------
    # Utility
    # -------------------------------------------------------------------------

    @property
    def position(self) -> Position:
        return (self.row, self.col)

    @property
    def position_key(self) -> str:
        """Position as a "row-col" string."""
        return f"{self.row}-{self.col}"

    @property
    def status(self) -> str:
        """Single display status, highest-precedence role first."""
        if self.is_start:
            return "start"
        if self.is_end:
            return "end"
        if self.is_wall:
            return "wall"
        if self.is_path:
            return "path"
        if self.is_current:
            return "current"
        if self.is_visited:
            return "visited"
        return ""

    def clone(self) -> Node:
        """
        Copy this node.

        Roles, visualization flags, distance, terrain and the back-link key
        survive; A* scores are recomputed per run and are not copied.
        """
        return Node(
            row=self.row,
            col=self.col,
            is_start=self.is_start,
            is_end=self.is_end,
            is_wall=self.is_wall,
            is_visited=self.is_visited,
            is_path=self.is_path,
            is_current=self.is_current,
            is_weighted=self.is_weighted,
            weight=self.weight,
            distance=self.distance,
            previous=self.previous,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return (self.row, self.col) == (other.row, other.col)

    def __hash__(self) -> int:
        return hash((self.row, self.col))

    def __repr__(self) -> str:
        status = self.status or "open"
        return f"Node(row={self.row}, col={self.col}, status={status!r}, weight={self.weight})"
