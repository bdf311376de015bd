"""
Vertex and edge model.

Vertex records live in a single table owned by the graph, keyed by
VertexID. Callers only ever hold Vertex handles: small immutable values
carrying the identifier and the owning graph, which is used for lookups.
"""

from dataclasses import dataclass, field
from numbers import Integral
from typing import TYPE_CHECKING, Any, List, Optional, Sequence

from graph_errors import InvalidWeightError
from vertex_ids import VertexID

if TYPE_CHECKING:
    from graph import Graph


def check_weight(weight: Any) -> int:
    """
    Return weight as an int, or raise InvalidWeightError if it is negative
    or not an integer.
    """
    if isinstance(weight, bool) or not isinstance(weight, Integral):
        raise InvalidWeightError(weight)
    if weight < 0:
        raise InvalidWeightError(weight)
    return int(weight)


@dataclass
class Payload:
    """Mutable slot for caller data attached to a vertex."""

    value: Any = None


@dataclass(frozen=True)
class Vertex:
    """
    Handle to a vertex record. Safe to copy and to use as a dict key.

    Handles of different graphs never compare equal, even with equal ids.
    """

    id: VertexID
    graph: "Graph" = field(repr=False)

    @property
    def payload(self) -> Optional[Payload]:
        """Payload cell of the vertex, or None once the vertex is removed."""
        return self.graph.payload(self)

    @property
    def alive(self) -> bool:
        return self in self.graph

    def outgoing(self) -> Sequence["Edge"]:
        return self.graph.outgoing(self)

    def __str__(self) -> str:
        return f"[{self.id}]"


@dataclass(frozen=True)
class Edge:
    """
    Directed arc to target with a non-negative integer weight.
    """

    target: Vertex
    weight: int

    def __str__(self) -> str:
        return f"->{self.weight} {self.target}"


@dataclass
class VertexRecord:
    """
    Storage for one vertex: identity, outgoing adjacency list, payload.
    """

    id: VertexID
    outgoing: List[Edge] = field(default_factory=list)
    payload: Payload = field(default_factory=Payload)

    def add_edge(self, edge: Edge) -> None:
        self.outgoing.append(edge)

    def remove_edges_to(self, target: VertexID) -> int:
        """
        Drop every outgoing edge whose target is `target`, keeping the order
        of the rest. Returns the number of edges removed.
        """
        kept = [e for e in self.outgoing if e.target.id != target]
        removed = len(self.outgoing) - len(kept)
        if removed:
            self.outgoing[:] = kept
        return removed

    def __str__(self) -> str:
        head = f"[{self.id}]"
        if not self.outgoing:
            return head
        return head + " -> " + ", ".join(str(e.target) for e in self.outgoing)
