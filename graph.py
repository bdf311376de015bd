"""
Weighted multigraph abstraction.

Vertices are Vertex handles.
Edges are directed: u -> v with a non-negative int weight. In SYMMETRIC
graphs every edge is stored together with its mirror.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, Optional, Sequence

from nodes import Edge, Payload, Vertex


class GraphType(Enum):
    """
    Directionality mode of a graph.

    DIRECTED: edge A -> B is independent of B -> A.
    SYMMETRIC: inserting or removing A -> B does the same to B -> A.
    """

    DIRECTED = "directed"
    SYMMETRIC = "symmetric"


class Graph(ABC):
    """Read-only view of a weighted multigraph over Vertex handles."""

    @property
    @abstractmethod
    def graph_type(self) -> GraphType:
        raise NotImplementedError

    @abstractmethod
    def vertices(self) -> Iterable[Vertex]:
        """Return handles for all live vertices."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, vertex: Vertex) -> Sequence[Edge]:
        """
        Outgoing edges of a vertex in insertion order.

        Parallel edges are listed individually. Empty for a vertex that is
        not in the graph.
        """
        raise NotImplementedError

    @abstractmethod
    def payload(self, vertex: Vertex) -> Optional[Payload]:
        """Payload cell of a vertex, or None if the vertex is not in the graph."""
        raise NotImplementedError

    @abstractmethod
    def __contains__(self, vertex: object) -> bool:
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError
