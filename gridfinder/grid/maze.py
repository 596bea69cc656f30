"""
Maze generators that populate a Grid with walls, a start and an end.

- generate_random_maze: independent walls at a fixed density
- generate_recursive_division_maze: perimeter wall plus recursive chamber
  division with an optional orientation skew

Both reset the grid first and never wall the chosen start or end.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from gridfinder.config import (
    DEFAULT_MAZE_DENSITY,
    SKEW_BIAS,
    SKEW_HORIZONTAL,
    SKEW_VERTICAL,
    VALID_SKEWS,
    validate_density,
)
from gridfinder.grid.node import Position

if TYPE_CHECKING:
    from gridfinder.grid.grid import Grid

logger = logging.getLogger(__name__)


def _place_endpoints(grid: Grid, candidates: list[Position], rng: random.Random) -> bool:
    """Pick two distinct cells from candidates and assign start/end."""
    if len(candidates) < 2:
        logger.warning(f"Grid {grid.rows}x{grid.cols} is too small for distinct start and end")
        return False
    start, end = rng.sample(candidates, 2)
    grid.set_start_node(*start)
    grid.set_end_node(*end)
    return True


def generate_random_maze(
    grid: Grid,
    density: float = DEFAULT_MAZE_DENSITY,
    rng: random.Random | None = None,
) -> int:
    """
    Reset the grid, place random start/end, then wall each other cell with
    probability density.

    Start and end are not guaranteed to be connected.

    Returns:
        Number of walls placed

    Raises:
        ValueError: If density is outside [0, 1]
    """
    validate_density(density)
    rng = rng or random.Random()

    grid.reset_grid()
    if not _place_endpoints(grid, [node.position for node in grid], rng):
        return 0

    walls = 0
    for node in grid:
        if node.is_start or node.is_end:
            continue
        if rng.random() < density:
            node.is_wall = True
            walls += 1

    logger.debug(f"Random maze: {walls} walls on {grid.rows}x{grid.cols} (density={density})")
    return walls


def _choose_vertical(width: int, height: int, skew: str | None, rng: random.Random) -> bool:
    """Pick wall orientation for a chamber; square chambers honour the skew."""
    if width > height:
        return True
    if height > width:
        return False
    if skew == SKEW_VERTICAL:
        chance = SKEW_BIAS
    elif skew == SKEW_HORIZONTAL:
        chance = 1 - SKEW_BIAS
    else:
        chance = 0.5
    return rng.random() < chance


def generate_recursive_division_maze(
    grid: Grid,
    skew: str | None = None,
    rng: random.Random | None = None,
) -> int:
    """
    Reset the grid and build a recursive-division maze.

    The grid is enclosed by a perimeter wall, then the interior is split by
    wall lines with a single passage each until chambers are narrower than
    3 cells. Walls sit on even indices and passages on odd indices, so no
    later wall can seal an earlier passage. Start and end are drawn from the
    odd/odd "room" cells when the interior has at least two of them.

    Args:
        grid: Grid to populate
        skew: "vertical", "horizontal" or None; biases square chambers
        rng: Random source (fresh Random() if omitted)

    Returns:
        Number of walls placed

    Raises:
        ValueError: If skew is not a recognised value
    """
    if skew not in VALID_SKEWS:
        raise ValueError(f"Unknown skew {skew!r}. Expected one of: {VALID_SKEWS}")
    rng = rng or random.Random()

    grid.reset_grid()

    rooms = [
        (row, col)
        for row in range(1, grid.rows - 1, 2)
        for col in range(1, grid.cols - 1, 2)
    ]
    interior = [
        (row, col)
        for row in range(1, grid.rows - 1)
        for col in range(1, grid.cols - 1)
    ]
    if len(rooms) >= 2:
        candidates = rooms
    elif len(interior) >= 2:
        # Interior too narrow to divide, so any inner cell is reachable
        candidates = interior
    else:
        candidates = [node.position for node in grid]
    if not _place_endpoints(grid, candidates, rng):
        return 0

    start = grid.start_node.position
    end = grid.end_node.position

    for node in grid:
        if node.row in (0, grid.rows - 1) or node.col in (0, grid.cols - 1):
            node.is_wall = True
    # Endpoints may sit on the perimeter on very small grids
    grid.start_node.is_wall = False
    grid.end_node.is_wall = False

    # Chambers as (top, left, height, width); a work stack replaces recursion depth
    chambers = [(1, 1, grid.rows - 2, grid.cols - 2)]
    while chambers:
        top, left, height, width = chambers.pop()
        if height < 3 or width < 3:
            continue

        if _choose_vertical(width, height, skew, rng):
            wall_col = rng.randrange(left + 1, left + width - 1, 2)
            passage_row = rng.randrange(top, top + height, 2)
            for row in range(top, top + height):
                if row == passage_row or (row, wall_col) in (start, end):
                    continue
                grid.nodes[row][wall_col].is_wall = True
            chambers.append((top, left, height, wall_col - left))
            chambers.append((top, wall_col + 1, height, left + width - wall_col - 1))
        else:
            wall_row = rng.randrange(top + 1, top + height - 1, 2)
            passage_col = rng.randrange(left, left + width, 2)
            for col in range(left, left + width):
                if col == passage_col or (wall_row, col) in (start, end):
                    continue
                grid.nodes[wall_row][col].is_wall = True
            chambers.append((top, left, wall_row - top, width))
            chambers.append((wall_row + 1, left, top + height - wall_row - 1, width))

    walls = sum(1 for node in grid if node.is_wall)
    logger.debug(
        f"Recursive division maze: {walls} walls on {grid.rows}x{grid.cols} (skew={skew})"
    )
    return walls
