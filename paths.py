"""
Path records produced by shortest-path queries.

A Path is an immutable sequence of edges leading from an implicit source to
its destination. Extending a path returns a new Path that shares the prefix
with the old one (a predecessor chain), so append is O(1) and every path
handed to a caller stays a stable snapshot.
"""

from typing import Callable, Iterator, Optional, Tuple

from nodes import Edge, Vertex, check_weight


# Distance reported for an empty path, i.e. no route found.
NO_DISTANCE = -1


class Path:
    """
    Ordered edges from an implicit source to a destination.

    An empty Path means "unreachable": distance is NO_DISTANCE and
    destination is None.
    """

    __slots__ = ("_parent", "_edge", "_length", "_total", "_edges")

    def __init__(self) -> None:
        self._parent: Optional[Path] = None
        self._edge: Optional[Edge] = None
        self._length = 0
        self._total = 0
        self._edges: Optional[Tuple[Edge, ...]] = None

    def append(self, edge: Edge) -> "Path":
        """
        Return this path extended by edge. The receiver is left unchanged.

        Raises InvalidWeightError for a negative weight.
        """
        weight = check_weight(edge.weight)
        extended = Path()
        extended._parent = self
        extended._edge = edge
        extended._length = self._length + 1
        extended._total = self._total + weight
        return extended

    @property
    def distance(self) -> int:
        """Sum of edge weights, or NO_DISTANCE if the path is empty."""
        if self._length == 0:
            return NO_DISTANCE
        return self._total

    @property
    def destination(self) -> Optional[Vertex]:
        """Target of the last edge, or None if the path is empty."""
        if self._edge is None:
            return None
        return self._edge.target

    @property
    def edges(self) -> Tuple[Edge, ...]:
        if self._edges is None:
            collected = []
            node: Optional[Path] = self
            while node is not None and node._edge is not None:
                collected.append(node._edge)
                node = node._parent
            collected.reverse()
            self._edges = tuple(collected)
        return self._edges

    def vertices(self) -> Tuple[Vertex, ...]:
        """Edge targets in traversal order (the source is not included)."""
        return tuple(e.target for e in self.edges)

    def iterate_edges(self, visit: Callable[[Vertex, int], bool]) -> None:
        """
        Call visit(target, weight) for each edge in order. Stops as soon as
        visit returns False.
        """
        for e in self.edges:
            if not visit(e.target, e.weight):
                break

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __len__(self) -> int:
        return self._length

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._length == other._length and self.edges == other.edges

    def __hash__(self) -> int:
        return hash(self.edges)

    def __str__(self) -> str:
        return " ".join(str(e) for e in self.edges)

    def __repr__(self) -> str:
        return f"Path({self}, distance={self.distance})"
