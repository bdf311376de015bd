"""
Heap-based ShortestPathEngine implementation.

Uses DistanceHeap's decrease-key to compute single-source shortest paths
over any Graph implementation that satisfies the Graph interface.
"""

from typing import Dict
import logging

from algorithms import ShortestPathEngine, Visitor
from graph import Graph
from graph_errors import InvalidWeightError
from nodes import Vertex
from paths import NO_DISTANCE, Path
from priority_queue import DistanceHeap

logger = logging.getLogger(__name__)


class DijkstraEngine(ShortestPathEngine):
    """
    Single-source Dijkstra over an indexed binary heap.

    Every vertex is queued up front with an unknown distance and lowered in
    place as shorter paths are found. Among equally short paths the one
    relaxed first is kept.

    Complexity:
        O((V + E) log V).
    """

    def __init__(self) -> None:
        # Instrumentation counters per invocation.
        self.last_heap_pops = 0
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_resolved = 0

    def traverse(self, graph: Graph, source: Vertex, visit: Visitor) -> None:
        self.last_heap_pops = 0
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_resolved = 0

        if source not in graph:
            logger.debug("dijkstra: source %s is not in the graph", source)
            return

        best: Dict[Vertex, Path] = {source: Path()}
        pq: DistanceHeap[Vertex] = DistanceHeap()
        for v in graph.vertices():
            pq.push(v, 0 if v == source else NO_DISTANCE)

        while pq:
            u, d_u = pq.pop_min()
            self.last_heap_pops += 1

            # Everything left is unreachable
            if d_u < 0:
                break

            if u != source:
                self.last_resolved += 1
                if not visit(u, best[u]):
                    break

            for e in graph.outgoing(u):
                self.last_edges_examined += 1
                v = e.target
                if v == source:
                    continue

                d_v = pq.priority(v)
                if d_v is None:
                    # Already resolved
                    continue
                alt = d_u + e.weight
                if d_v >= 0 and alt >= d_v:
                    continue

                try:
                    path = best[u].append(e)
                except InvalidWeightError:
                    logger.warning("dijkstra: skipping edge %s%s with invalid weight", u, e)
                    continue
                best[v] = path
                pq.update(v, alt)
                self.last_relaxed += 1

        logger.debug(
            "dijkstra from %s: resolved=%d pops=%d edges=%d relaxed=%d",
            source,
            self.last_resolved,
            self.last_heap_pops,
            self.last_edges_examined,
            self.last_relaxed,
        )
