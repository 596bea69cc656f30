"""
Dijkstra's algorithm (uniform-cost search).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridfinder.algorithms.base import Algorithm

if TYPE_CHECKING:
    from gridfinder.grid.node import Node


class DijkstraAlgorithm(Algorithm):
    """Expands the frontier strictly by accumulated cost, with no heuristic term."""

    name = "Dijkstra's Algorithm"
    description = (
        "Weighted search that guarantees the shortest path by always visiting "
        "the cell with the smallest known distance first."
    )

    def _cost(self, node: Node) -> float:
        return node.distance

    def _set_cost(self, node: Node, cost: float) -> None:
        node.distance = cost

    def _step_cost(self, neighbor: Node) -> float:
        return neighbor.weight

    def _priority(self, node: Node) -> tuple[float, ...]:
        return (node.distance,)
