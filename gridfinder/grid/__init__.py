"""
Grid model module.

Provides the cell and grid data model plus maze generation:
- Node: A single cell with role, terrain and search scratch fields
- Grid: Owns the nodes, neighbor queries and role mutation
- generate_random_maze / generate_recursive_division_maze: Maze generators

Usage:
    from gridfinder.grid import Grid

    grid = Grid(10, 10)
    grid.set_start_node(0, 0)
    grid.set_end_node(9, 9)
    grid.toggle_wall(4, 4)
"""

from gridfinder.grid.grid import DIRECTIONS, Grid
from gridfinder.grid.maze import generate_random_maze, generate_recursive_division_maze
from gridfinder.grid.node import Node, Position

__all__ = [
    "DIRECTIONS",
    "Grid",
    "Node",
    "Position",
    "generate_random_maze",
    "generate_recursive_division_maze",
]
