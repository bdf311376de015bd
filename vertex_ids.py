"""
Vertex identifier allocation.

Each graph owns one generator, so identifiers from unrelated graphs never
interact. Allocation is the only thread-safe operation in the library.
"""

from threading import Lock
from typing import NewType, Optional


VertexID = NewType("VertexID", int)


class VertexIdGenerator:
    """
    Strictly increasing identifier source guarded by a lock.
    """

    def __init__(self, first_id: int = 0) -> None:
        self._next = first_id
        self._last: Optional[VertexID] = None
        self._lock = Lock()

    def next_id(self) -> VertexID:
        """Allocate the next identifier. Identifiers are never handed out twice."""
        with self._lock:
            issued = VertexID(self._next)
            self._next += 1
            self._last = issued
        return issued

    __call__ = next_id

    @property
    def last_id(self) -> Optional[VertexID]:
        """Most recently issued identifier, or None before the first call."""
        return self._last
