"""
Exceptions raised by the graph library.

Missing vertices on removal and unreachable destinations are reported as
values (bool / empty Path), not through these types.
"""


class GraphError(Exception):
    """Base class for graph errors."""


class InvalidWeightError(GraphError, ValueError):
    """Edge weight is negative or not an integer."""

    def __init__(self, weight: object) -> None:
        super().__init__(f"invalid edge weight {weight!r}: must be a non-negative integer")
        self.weight = weight


class VertexNotFoundError(GraphError, KeyError):
    """Vertex is not a live member of the graph it was used with."""

    def __init__(self, vertex_id: object) -> None:
        super().__init__(vertex_id)
        self.vertex_id = vertex_id

    def __str__(self) -> str:
        return f"vertex {self.vertex_id} not found"
