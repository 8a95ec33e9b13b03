"""Min-priority queue with O(log n) decrease-key."""

from __future__ import annotations

from collections.abc import Hashable
from itertools import count

from gridpath.search.errors import DuplicateKey, Empty, NotFound


class IndexedPriorityQueue:
    """Binary min-heap over hashable keys with a key -> heap slot index.

    Each heap entry is ``[score, sequence, key]``. ``sequence`` comes from a
    monotonically increasing counter, so among equal scores the entry
    inserted (or re-keyed) first is popped first.
    """

    def __init__(self) -> None:
        self._heap: list[list] = []
        self._positions: dict[Hashable, int] = {}
        self._sequence = count()

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._positions

    def contains(self, key: Hashable) -> bool:
        return key in self._positions

    def is_empty(self) -> bool:
        return not self._heap

    def score_of(self, key: Hashable) -> float:
        try:
            return self._heap[self._positions[key]][0]
        except KeyError:
            raise NotFound(key) from None

    def push(self, key: Hashable, score: float) -> None:
        if key in self._positions:
            raise DuplicateKey(key)
        self._heap.append([score, next(self._sequence), key])
        position = len(self._heap) - 1
        self._positions[key] = position
        self._sift_up(position)

    def decrease_key(self, key: Hashable, new_score: float) -> None:
        """Re-key ``key`` as if it were removed and pushed again.

        The entry always takes a fresh sequence number, so it queues behind
        entries that already hold ``new_score``. A higher score is still
        handled correctly, it just sinks instead of rising.
        """
        try:
            position = self._positions[key]
        except KeyError:
            raise NotFound(key) from None
        entry = self._heap[position]
        entry[0] = new_score
        entry[1] = next(self._sequence)
        self._sift_up(position)
        self._sift_down(self._positions[key])

    def peek(self) -> tuple[Hashable, float]:
        if not self._heap:
            raise Empty("peek from an empty priority queue")
        score, _, key = self._heap[0]
        return key, score

    def pop_min(self) -> tuple[Hashable, float]:
        if not self._heap:
            raise Empty("pop from an empty priority queue")
        last = self._heap.pop()
        if self._heap:
            score, _, key = self._heap[0]
            self._heap[0] = last
            self._positions[last[2]] = 0
            self._sift_down(0)
        else:
            score, _, key = last
        del self._positions[key]
        return key, score

    def _less(self, i: int, j: int) -> bool:
        a, b = self._heap[i], self._heap[j]
        return (a[0], a[1]) < (b[0], b[1])

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._positions[heap[i][2]] = i
        self._positions[heap[j][2]] = j

    def _sift_up(self, position: int) -> None:
        while position > 0:
            parent = (position - 1) // 2
            if not self._less(position, parent):
                break
            self._swap(position, parent)
            position = parent

    def _sift_down(self, position: int) -> None:
        size = len(self._heap)
        while True:
            smallest = position
            for child in (2 * position + 1, 2 * position + 2):
                if child < size and self._less(child, smallest):
                    smallest = child
            if smallest == position:
                return
            self._swap(position, smallest)
            position = smallest
