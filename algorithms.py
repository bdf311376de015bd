"""
Algorithm interfaces for shortest-path queries.

Keeps the traversal separate from graph storage. An engine implements one
traversal primitive; the query shapes callers use are built on top of it.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict

from graph import Graph
from nodes import Vertex
from paths import Path


# Called once per resolved vertex; returning False stops the traversal.
Visitor = Callable[[Vertex, Path], bool]


class ShortestPathEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def traverse(self, graph: Graph, source: Vertex, visit: Visitor) -> None:
        """
        Resolve vertices in order of increasing distance from source.

        visit(vertex, path) is called once for each resolved vertex other
        than the source, with its final shortest path. Unreachable vertices
        are never visited. Does nothing if source is not in graph.
        """
        raise NotImplementedError

    def shortest_path(self, graph: Graph, source: Vertex, destination: Vertex) -> Path:
        """
        Shortest path from source to destination.

        Returns an empty Path (distance NO_DISTANCE) if destination is
        unreachable or equal to source.
        """
        found = Path()

        def capture(v: Vertex, p: Path) -> bool:
            nonlocal found
            if v == destination:
                found = p
                return False
            return True

        self.traverse(graph, source, capture)
        return found

    def shortest_paths(self, graph: Graph, source: Vertex) -> Dict[Vertex, Path]:
        """
        Shortest paths from source to every reachable vertex.

        Returns:
            Mapping dest -> Path. The source and unreachable vertices are
            absent.
        """
        paths: Dict[Vertex, Path] = {}

        def record(v: Vertex, p: Path) -> bool:
            paths[v] = p
            return True

        self.traverse(graph, source, record)
        return paths

    def shortest_path_costs(self, graph: Graph, source: Vertex) -> Dict[Vertex, int]:
        """
        Compute only the cost map for all reachable vertices from source.

        Returns:
            Mapping dest -> path cost, with the source itself at 0.
            Empty if source is not in graph.
        """
        if source not in graph:
            return {}
        costs: Dict[Vertex, int] = {source: 0}

        def record(v: Vertex, p: Path) -> bool:
            costs[v] = p.distance
            return True

        self.traverse(graph, source, record)
        return costs
