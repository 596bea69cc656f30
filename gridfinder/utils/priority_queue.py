"""
Binary-heap priority queue ordered by an injected comparator.

Lower comparator result means higher priority. Ties are broken by insertion
order, so a comparator that always returns 0 yields a FIFO queue.

There is no decrease-key: callers re-enqueue an item when its priority
improves and skip stale entries when they come out (lazy deletion). The queue
accepts duplicate entries for that reason.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable
from functools import cmp_to_key
from typing import Generic, TypeVar

T = TypeVar("T")

Comparator = Callable[[T, T], float]


class EmptyQueueError(IndexError):
    """Raised when dequeuing or peeking an empty PriorityQueue."""


class PriorityQueue(Generic[T]):
    """
    Stable min-priority queue.

    Items should not change their comparator-relevant state while queued;
    enqueue an immutable snapshot instead.
    """

    def __init__(self, comparator: Comparator) -> None:
        self._key = cmp_to_key(comparator)
        self._heap: list[tuple[object, int, T]] = []
        self._counter = itertools.count()

    def enqueue(self, item: T) -> None:
        heapq.heappush(self._heap, (self._key(item), next(self._counter), item))

    def dequeue(self) -> T:
        """
        Remove and return the highest-priority item.

        Raises:
            EmptyQueueError: If the queue is empty
        """
        if not self._heap:
            raise EmptyQueueError("dequeue from an empty priority queue")
        return heapq.heappop(self._heap)[2]

    def peek(self) -> T:
        if not self._heap:
            raise EmptyQueueError("peek at an empty priority queue")
        return self._heap[0][2]

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"PriorityQueue(size={len(self._heap)})"
