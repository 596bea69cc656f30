"""
Heuristics module.

Distance estimates used to guide informed search. All take two nodes (or
anything with row/col attributes) and return a non-negative number.

- manhattan_distance: |drow| + |dcol|, admissible and consistent on a
  4-directional grid while every cell weight is at least 1
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridfinder.grid.node import Node


def manhattan_distance(node: Node, target: Node) -> int:
    return abs(node.row - target.row) + abs(node.col - target.col)


__all__ = ["manhattan_distance"]
