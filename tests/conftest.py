"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import random

import pytest

from gridfinder.grid import Grid


@pytest.fixture
def rng() -> random.Random:
    """Return a seeded random source for reproducible mazes."""
    return random.Random(1234)


@pytest.fixture
def open_grid() -> Grid:
    """Return a 5x5 grid with no walls, start (0, 0) and end (4, 4)."""
    grid = Grid(5, 5)
    grid.set_start_node(0, 0)
    grid.set_end_node(4, 4)
    return grid


@pytest.fixture
def blocked_grid() -> Grid:
    """Return a 3x3 grid whose middle row is entirely walled."""
    return Grid.from_layout(
        [
            "S..",
            "###",
            "..E",
        ]
    )


@pytest.fixture
def weighted_grid() -> Grid:
    """Return a grid where the straight route is expensive and a detour is cheap."""
    return Grid.from_layout(
        [
            "S99E",
            ".##.",
            "....",
        ]
    )
