"""
Grid model owning a row-major collection of nodes.

Provides neighbor queries, role/terrain mutation, cloning, reset helpers and
numpy/ASCII snapshots for rendering layers. Maze generation lives in
gridfinder.grid.maze; the Grid methods delegate to it.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Iterator

import numpy as np

from gridfinder.config import (
    DEFAULT_COLS,
    DEFAULT_HEAVY_WEIGHT,
    DEFAULT_MAZE_DENSITY,
    DEFAULT_ROWS,
    DEFAULT_WEIGHT,
    DEFAULT_WEIGHT_DENSITY,
    RANDOM_WEIGHT_MAX,
    RANDOM_WEIGHT_MIN,
    validate_density,
    validate_dimensions,
)
from gridfinder.grid.node import Node, Position

logger = logging.getLogger(__name__)

# Up, Right, Down, Left. Order determines exploration tie-breaking.
DIRECTIONS: tuple[Position, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))

# Cell codes used by to_array()
CELL_OPEN = 0
CELL_WALL = 1
CELL_START = 2
CELL_END = 3

# ASCII layout characters
LAYOUT_OPEN = "."
LAYOUT_WALL = "#"
LAYOUT_START = "S"
LAYOUT_END = "E"
LAYOUT_PATH = "*"
LAYOUT_VISITED = "o"


class Grid:
    """
    Rectangular grid of nodes with a single start and a single end.

    start_node/end_node always point into this grid's own node collection
    (or are None). Out-of-range coordinates passed to mutation methods are
    ignored rather than raising.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS) -> None:
        validate_dimensions(rows, cols)
        self.rows = rows
        self.cols = cols
        self.nodes: list[list[Node]] = []
        self.start_node: Node | None = None
        self.end_node: Node | None = None
        self._init_nodes()

    def _init_nodes(self) -> None:
        self.nodes = [[Node(row, col) for col in range(self.cols)] for row in range(self.rows)]

    @classmethod
    def from_layout(cls, lines: Iterable[str]) -> Grid:
        """
        Build a grid from an ASCII layout.

        Characters: 'S' start, 'E' end, '#' wall, '.' open, '2'-'9' weighted
        cell with that weight. All lines must have the same length.

        Raises:
            ValueError: If the layout is empty, ragged or has unknown characters
        """
        rows = [line.strip() for line in lines if line.strip()]
        if not rows:
            raise ValueError("Layout is empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("Layout rows must all have the same length")

        grid = cls(len(rows), width)
        for r, line in enumerate(rows):
            for c, char in enumerate(line):
                if char == LAYOUT_START:
                    grid.set_start_node(r, c)
                elif char == LAYOUT_END:
                    grid.set_end_node(r, c)
                elif char == LAYOUT_WALL:
                    grid.set_wall(r, c, True)
                elif char.isdigit() and char not in "01":
                    grid.set_weight(r, c, int(char))
                elif char != LAYOUT_OPEN:
                    raise ValueError(f"Unknown layout character {char!r} at ({r}, {c})")
        return grid

    # -------------------------------------------------------------------------
    # Sizing and access
    # -------------------------------------------------------------------------

    def resize(self, rows: int, cols: int) -> None:
        """Discard every node and rebuild at the new size. Start/end are dropped."""
        validate_dimensions(rows, cols)
        logger.debug(f"Resizing grid {self.rows}x{self.cols} -> {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._init_nodes()
        self.start_node = None
        self.end_node = None

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_node(self, row: int, col: int) -> Node | None:
        """Return the node at (row, col), or None if out of bounds."""
        if not self.in_bounds(row, col):
            return None
        return self.nodes[row][col]

    def resolve(self, position: Position | None) -> Node | None:
        """Follow a back-link key into this grid."""
        if position is None:
            return None
        return self.get_node(*position)

    def get_neighbors(self, node: Node) -> list[Node]:
        """
        Return in-bounds, non-wall orthogonal neighbors of node.

        Order is always up, right, down, left.
        """
        neighbors = []
        for d_row, d_col in DIRECTIONS:
            neighbor = self.get_node(node.row + d_row, node.col + d_col)
            if neighbor is not None and not neighbor.is_wall:
                neighbors.append(neighbor)
        return neighbors

    def __iter__(self) -> Iterator[Node]:
        for row in self.nodes:
            yield from row

    # -------------------------------------------------------------------------
    # Role mutation
    # -------------------------------------------------------------------------

    def set_start_node(self, row: int, col: int) -> None:
        """Make (row, col) the start. Clears the previous start and any end role on that cell."""
        node = self.get_node(row, col)
        if node is None:
            return
        if self.start_node is not None:
            self.start_node.is_start = False
        if node.is_end:
            node.is_end = False
            self.end_node = None
        self._clear_terrain(node)
        node.is_start = True
        self.start_node = node

    def set_end_node(self, row: int, col: int) -> None:
        """Make (row, col) the end. Clears the previous end and any start role on that cell."""
        node = self.get_node(row, col)
        if node is None:
            return
        if self.end_node is not None:
            self.end_node.is_end = False
        if node.is_start:
            node.is_start = False
            self.start_node = None
        self._clear_terrain(node)
        node.is_end = True
        self.end_node = node

    @staticmethod
    def _clear_terrain(node: Node) -> None:
        node.is_wall = False
        node.is_weighted = False
        node.weight = DEFAULT_WEIGHT

    def toggle_wall(self, row: int, col: int) -> None:
        node = self.get_node(row, col)
        if node is None or node.is_start or node.is_end:
            return
        self.set_wall(row, col, not node.is_wall)

    def set_wall(self, row: int, col: int, is_wall: bool) -> None:
        """Set the wall flag. Start/end cells and out-of-range coordinates are ignored."""
        node = self.get_node(row, col)
        if node is None or node.is_start or node.is_end:
            return
        node.is_wall = is_wall
        if is_wall:
            # A wall's weight is irrelevant; drop the terrain marker
            node.is_weighted = False
            node.weight = DEFAULT_WEIGHT

    def set_weight(self, row: int, col: int, weight: int = DEFAULT_HEAVY_WEIGHT) -> None:
        """
        Assign a terrain weight.

        A weight above the default marks the cell weighted and clears any wall.
        Without an explicit weight the cell gets DEFAULT_HEAVY_WEIGHT.
        Start/end cells and out-of-range coordinates are ignored.

        Raises:
            ValueError: If weight is not a positive integer
        """
        if not isinstance(weight, int) or weight < 1:
            raise ValueError(f"Weight must be a positive integer, got {weight!r}")
        node = self.get_node(row, col)
        if node is None or node.is_start or node.is_end:
            return
        node.weight = weight
        node.is_weighted = weight != DEFAULT_WEIGHT
        if node.is_weighted:
            node.is_wall = False

    def clear_walls(self) -> None:
        for node in self:
            node.is_wall = False

    def clear_weights(self) -> None:
        for node in self:
            node.is_weighted = False
            node.weight = DEFAULT_WEIGHT

    def set_default_start_end(self) -> None:
        """Place start in the top-left quarter and end in the bottom-right quarter."""
        self.set_start_node(self.rows // 4, self.cols // 4)
        self.set_end_node(self.rows * 3 // 4, self.cols * 3 // 4)

    def set_random_start_end(self, rng: random.Random | None = None) -> bool:
        """
        Place start and end on two distinct random non-wall cells.

        Returns:
            False if fewer than two open cells exist (roles left unchanged)
        """
        rng = rng or random.Random()
        candidates = [node.position for node in self if not node.is_wall]
        if len(candidates) < 2:
            logger.warning("Not enough open cells to place start and end")
            return False
        start, end = rng.sample(candidates, 2)
        self.set_start_node(*start)
        self.set_end_node(*end)
        return True

    # -------------------------------------------------------------------------
    # Reset and clone
    # -------------------------------------------------------------------------

    def reset_path(self) -> None:
        """Clear per-search scratch state on every node. Roles and terrain are kept."""
        for node in self:
            node.reset()

    def reset_grid(self) -> None:
        """Clear every flag and scratch field and drop start/end."""
        for node in self:
            node.reset_all()
        self.start_node = None
        self.end_node = None

    def clone(self) -> Grid:
        """Deep copy. The clone's start/end point into its own nodes."""
        cloned = Grid(self.rows, self.cols)
        cloned.nodes = [[node.clone() for node in row] for row in self.nodes]
        for node in cloned:
            if node.is_start:
                cloned.start_node = node
            if node.is_end:
                cloned.end_node = node
        return cloned

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    def generate_random_maze(
        self,
        density: float = DEFAULT_MAZE_DENSITY,
        rng: random.Random | None = None,
    ) -> None:
        from gridfinder.grid.maze import generate_random_maze

        generate_random_maze(self, density=density, rng=rng)

    def generate_recursive_division_maze(
        self,
        skew: str | None = None,
        rng: random.Random | None = None,
    ) -> None:
        from gridfinder.grid.maze import generate_recursive_division_maze

        generate_recursive_division_maze(self, skew=skew, rng=rng)

    def generate_random_weights(
        self,
        density: float = DEFAULT_WEIGHT_DENSITY,
        rng: random.Random | None = None,
    ) -> int:
        """
        Replace terrain with random weights in [RANDOM_WEIGHT_MIN, RANDOM_WEIGHT_MAX].

        Walls, start and end are skipped.

        Returns:
            Number of cells that received a weight
        """
        validate_density(density)
        rng = rng or random.Random()
        weighted = 0
        for node in self:
            if node.is_wall or node.is_start or node.is_end:
                continue
            node.is_weighted = False
            node.weight = DEFAULT_WEIGHT
            if rng.random() < density:
                node.is_weighted = True
                node.weight = rng.randint(RANDOM_WEIGHT_MIN, RANDOM_WEIGHT_MAX)
                weighted += 1
        logger.debug(f"Placed {weighted} weighted cells (density={density})")
        return weighted

    # -------------------------------------------------------------------------
    # Snapshots
    # -------------------------------------------------------------------------

    def to_array(self) -> np.ndarray:
        """Cell codes as a (rows, cols) int8 array: 0 open, 1 wall, 2 start, 3 end."""
        cells = np.full((self.rows, self.cols), CELL_OPEN, dtype=np.int8)
        cells[self.wall_mask()] = CELL_WALL
        if self.start_node is not None:
            cells[self.start_node.position] = CELL_START
        if self.end_node is not None:
            cells[self.end_node.position] = CELL_END
        return cells

    def wall_mask(self) -> np.ndarray:
        return np.array([[node.is_wall for node in row] for row in self.nodes], dtype=bool)

    def weight_matrix(self) -> np.ndarray:
        return np.array([[node.weight for node in row] for row in self.nodes], dtype=np.int32)

    def render(self) -> str:
        """ASCII view; path cells '*', visited cells 'o', weights as digits (capped at 9)."""
        lines = []
        for row in self.nodes:
            chars = []
            for node in row:
                if node.is_start:
                    chars.append(LAYOUT_START)
                elif node.is_end:
                    chars.append(LAYOUT_END)
                elif node.is_wall:
                    chars.append(LAYOUT_WALL)
                elif node.is_path:
                    chars.append(LAYOUT_PATH)
                elif node.is_weighted:
                    chars.append(str(min(node.weight, 9)))
                elif node.is_visited:
                    chars.append(LAYOUT_VISITED)
                else:
                    chars.append(LAYOUT_OPEN)
            lines.append("".join(chars))
        return "\n".join(lines)

    def __repr__(self) -> str:
        start = self.start_node.position if self.start_node else None
        end = self.end_node.position if self.end_node else None
        return f"Grid(rows={self.rows}, cols={self.cols}, start={start}, end={end})"
