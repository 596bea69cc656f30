"""
Utility module.

- PriorityQueue: Stable comparator-ordered min-heap
- get_shortest_path: Path reconstruction from back-links
- calculate_path_distance: Weighted path cost
"""

from gridfinder.utils.path import calculate_path_distance, get_shortest_path
from gridfinder.utils.priority_queue import EmptyQueueError, PriorityQueue

__all__ = [
    "EmptyQueueError",
    "PriorityQueue",
    "calculate_path_distance",
    "get_shortest_path",
]
