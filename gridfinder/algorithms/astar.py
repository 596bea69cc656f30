"""
A* search guided by the Manhattan heuristic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridfinder.algorithms.base import Algorithm
from gridfinder.heuristics import manhattan_distance

if TYPE_CHECKING:
    from gridfinder.grid.node import Node


class AStarAlgorithm(Algorithm):
    """
    Informed search ordering the frontier by f = g + h.

    Ties on f go to the lower h (the node closer to the target), then to
    insertion order, which keeps paths straight on open ground.

    Precondition: every cell weight is at least 1. Under that condition the
    Manhattan heuristic is consistent, so the first time the end node is
    dequeued its cost is optimal. It is documented, not enforced.
    """

    name = "A* Algorithm"
    description = (
        "Informed search that uses a heuristic to guide exploration. "
        "Finds the shortest path while typically exploring fewer cells than Dijkstra."
    )

    def heuristic(self, node: Node) -> int:
        return manhattan_distance(node, self.grid.end_node)

    def _cost(self, node: Node) -> float:
        return node.g_score

    def _set_cost(self, node: Node, cost: float) -> None:
        node.g_score = cost
        node.h_score = self.heuristic(node)
        node.f_score = cost + node.h_score

    def _step_cost(self, neighbor: Node) -> float:
        return neighbor.weight

    def _priority(self, node: Node) -> tuple[float, ...]:
        return (node.f_score, node.h_score)
