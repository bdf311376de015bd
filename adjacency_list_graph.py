"""
Concrete weighted multigraph implementation.

Implements the Graph interface using an adjacency-list representation:
vertex records live in one table keyed by VertexID and each record owns its
outgoing edge list. Handles carry only the id and a reference back here.
"""

from typing import Dict, List, Optional, Sequence, Union
import logging

from algorithms import ShortestPathEngine
from dijkstra_engine import DijkstraEngine
from graph import Graph, GraphType
from graph_errors import VertexNotFoundError
from nodes import Edge, Payload, Vertex, VertexRecord, check_weight
from paths import Path
from vertex_ids import VertexID, VertexIdGenerator

logger = logging.getLogger(__name__)

# Vertices may be passed as handles or as bare identifiers.
VertexRef = Union[Vertex, int]


class AdjacencyListGraph(Graph):
    """
    Mutable weighted multigraph, DIRECTED or SYMMETRIC.

    Only vertex creation is safe to call from several threads; everything
    else must be serialised by the caller.
    """

    def __init__(
        self,
        graph_type: GraphType = GraphType.DIRECTED,
        engine: Optional[ShortestPathEngine] = None,
        first_id: int = 0,
    ) -> None:
        self._type = graph_type
        self._records: Dict[VertexID, VertexRecord] = {}
        self._generate_id = VertexIdGenerator(first_id)
        self._engine = engine if engine is not None else DijkstraEngine()

    # --- Mutation API --------------------------------------------------------

    def new_vertex(self) -> Vertex:
        """Add an isolated vertex and return its handle."""
        vid = self._generate_id()
        self._records[vid] = VertexRecord(vid)
        logger.debug("new vertex [%s]", vid)
        return Vertex(vid, self)

    def remove_vertex(self, vertex: VertexRef) -> bool:
        """
        Remove a vertex and every edge pointing at it.

        Returns False if the vertex is not in the graph. Scans every
        remaining adjacency list, so this is O(V + E).
        """
        vid = self._id_of(vertex)
        if vid is None or self._records.pop(vid, None) is None:
            return False
        stripped = sum(r.remove_edges_to(vid) for r in self._records.values())
        logger.debug("removed vertex [%s] and %d incoming edges", vid, stripped)
        return True

    def add_edge(self, src: VertexRef, dst: VertexRef, weight: int) -> None:
        """
        Add a directed edge src -> dst. SYMMETRIC graphs also get dst -> src
        with the same weight. Parallel edges accumulate.

        Raises InvalidWeightError for negative or non-integer weights and
        VertexNotFoundError if either endpoint is not in the graph; the graph
        is unchanged in both cases.
        """
        w = check_weight(weight)
        src_rec = self._require(src)
        dst_rec = self._require(dst)
        src_rec.add_edge(Edge(Vertex(dst_rec.id, self), w))
        if self._type is GraphType.SYMMETRIC:
            dst_rec.add_edge(Edge(Vertex(src_rec.id, self), w))

    def remove_edges(self, src: VertexRef, dst: VertexRef) -> int:
        """
        Remove every edge src -> dst (and dst -> src in SYMMETRIC graphs).

        Returns the number of edges removed; 0 if either endpoint is missing.
        """
        src_rec = self._lookup(src)
        dst_rec = self._lookup(dst)
        if src_rec is None or dst_rec is None:
            return 0
        removed = src_rec.remove_edges_to(dst_rec.id)
        if self._type is GraphType.SYMMETRIC:
            removed += dst_rec.remove_edges_to(src_rec.id)
        return removed

    # --- Queries ---------------------------------------------------------------

    def shortest_path(self, source: VertexRef, destination: VertexRef) -> Path:
        return self._engine.shortest_path(self, self._as_handle(source), self._as_handle(destination))

    def shortest_paths(self, source: VertexRef) -> Dict[Vertex, Path]:
        return self._engine.shortest_paths(self, self._as_handle(source))

    def shortest_path_costs(self, source: VertexRef) -> Dict[Vertex, int]:
        return self._engine.shortest_path_costs(self, self._as_handle(source))

    # --- Graph interface -------------------------------------------------------

    @property
    def graph_type(self) -> GraphType:
        return self._type

    @property
    def engine(self) -> ShortestPathEngine:
        return self._engine

    def vertices(self) -> List[Vertex]:
        return [Vertex(vid, self) for vid in self._records]

    def vertex(self, vid: int) -> Optional[Vertex]:
        """Handle for vid, or None if no such vertex exists."""
        if vid not in self._records:
            return None
        return Vertex(VertexID(vid), self)

    def outgoing(self, vertex: VertexRef) -> Sequence[Edge]:
        record = self._lookup(vertex)
        if record is None:
            return ()
        return tuple(record.outgoing)  # defensive copy

    def payload(self, vertex: VertexRef) -> Optional[Payload]:
        record = self._lookup(vertex)
        return record.payload if record is not None else None

    def edge_count(self) -> int:
        return sum(len(r.outgoing) for r in self._records.values())

    def __contains__(self, vertex: object) -> bool:
        if not isinstance(vertex, (Vertex, int)):
            return False
        return self._lookup(vertex) is not None

    def __len__(self) -> int:
        return len(self._records)

    def debug_string(self) -> str:
        """
        One line per vertex in id order: "[id] -> [id], [id], ...".

        Diagnostic only; not meant to be parsed.
        """
        return "\n".join(str(r) for r in self._records.values())

    def __str__(self) -> str:
        return self.debug_string()

    def __repr__(self) -> str:
        return (
            f"AdjacencyListGraph(type={self._type.value}, "
            f"vertices={len(self)}, edges={self.edge_count()})"
        )

    # --- Internal helpers ------------------------------------------------------

    def _id_of(self, vertex: VertexRef) -> Optional[VertexID]:
        if isinstance(vertex, Vertex):
            # Handles from another graph never resolve here
            return vertex.id if vertex.graph is self else None
        return VertexID(vertex)

    def _lookup(self, vertex: VertexRef) -> Optional[VertexRecord]:
        vid = self._id_of(vertex)
        if vid is None:
            return None
        return self._records.get(vid)

    def _require(self, vertex: VertexRef) -> VertexRecord:
        record = self._lookup(vertex)
        if record is None:
            raise VertexNotFoundError(vertex)
        return record

    def _as_handle(self, vertex: VertexRef) -> Vertex:
        if isinstance(vertex, Vertex):
            return vertex
        return Vertex(VertexID(vertex), self)


def new_graph(graph_type: GraphType = GraphType.DIRECTED) -> AdjacencyListGraph:
    """Create an empty graph of the given directionality."""
    return AdjacencyListGraph(graph_type)
