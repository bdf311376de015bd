"""
Min-priority queue with decrease-key for Dijkstra.

Binary heap stored in a list, plus an item -> slot index so that an
arbitrary entry can be re-prioritised in O(log n). Priorities are integer
distances where any negative value (NO_DISTANCE) sorts after every
finite distance.
"""

from typing import Dict, Generic, Hashable, List, Optional, Tuple, TypeVar


T = TypeVar("T", bound=Hashable)


def _sort_key(priority: int, seq: int) -> Tuple[bool, int, int]:
    # Unknown distances go last; ties pop in push order.
    return (priority < 0, priority, seq)


class DistanceHeap(Generic[T]):
    """
    Binary min-heap over (item, priority) pairs supporting update().
    """

    def __init__(self) -> None:
        self._heap: List[List] = []  # [priority, seq, item]
        self._index: Dict[T, int] = {}
        self._seq = 0

    def push(self, item: T, priority: int) -> None:
        if item in self._index:
            raise ValueError(f"{item} is already queued")
        self._heap.append([priority, self._seq, item])
        self._seq += 1
        pos = len(self._heap) - 1
        self._index[item] = pos
        self._sift_up(pos)

    def pop_min(self) -> Tuple[T, int]:
        """
        Remove and return the (item, priority) pair with the smallest priority.

        Raises IndexError if the queue is empty.
        """
        if not self._heap:
            raise IndexError("pop from empty DistanceHeap")
        last = len(self._heap) - 1
        self._swap(0, last)
        priority, _, item = self._heap.pop()
        del self._index[item]
        if self._heap:
            self._sift_down(0)
        return item, priority

    def peek(self) -> Optional[Tuple[T, int]]:
        if not self._heap:
            return None
        priority, _, item = self._heap[0]
        return item, priority

    def update(self, item: T, priority: int) -> bool:
        """
        Change the priority of a queued item and restore heap order.

        Returns False, and does nothing, if item is not queued.
        """
        pos = self._index.get(item)
        if pos is None:
            return False
        self._heap[pos][0] = priority
        pos = self._sift_up(pos)
        self._sift_down(pos)
        return True

    def priority(self, item: T) -> Optional[int]:
        pos = self._index.get(item)
        if pos is None:
            return None
        return self._heap[pos][0]

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, item: object) -> bool:
        return item in self._index

    # --- Internal helpers ---------------------------------------------------

    def _less(self, i: int, j: int) -> bool:
        a, b = self._heap[i], self._heap[j]
        return _sort_key(a[0], a[1]) < _sort_key(b[0], b[1])

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._index[heap[i][2]] = i
        self._index[heap[j][2]] = j

    def _sift_up(self, pos: int) -> int:
        while pos > 0:
            parent = (pos - 1) // 2
            if not self._less(pos, parent):
                break
            self._swap(pos, parent)
            pos = parent
        return pos

    def _sift_down(self, pos: int) -> int:
        size = len(self._heap)
        while True:
            smallest = pos
            for child in (2 * pos + 1, 2 * pos + 2):
                if child < size and self._less(child, smallest):
                    smallest = child
            if smallest == pos:
                return pos
            self._swap(pos, smallest)
            pos = smallest
