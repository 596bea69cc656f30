"""
Breadth-first search.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridfinder.algorithms.base import Algorithm

if TYPE_CHECKING:
    from gridfinder.grid.node import Node


class BreadthFirstAlgorithm(Algorithm):
    """
    Unweighted search: every step costs one hop regardless of terrain.

    distance holds the hop count. Equal hop counts come out in insertion
    order, so the frontier behaves as a FIFO queue. Matches Dijkstra when
    every weight is 1.
    """

    name = "Breadth-First Search"
    description = (
        "Explores cells in rings of increasing step count. "
        "Finds the path with the fewest moves but ignores terrain weights."
    )

    def _cost(self, node: Node) -> float:
        return node.distance

    def _set_cost(self, node: Node, cost: float) -> None:
        node.distance = cost

    def _step_cost(self, neighbor: Node) -> float:
        return 1

    def _priority(self, node: Node) -> tuple[float, ...]:
        return (node.distance,)
