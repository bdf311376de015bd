"""
Unit tests for AdjacencyListGraph.
"""

import pytest

from adjacency_list_graph import AdjacencyListGraph, new_graph
from graph import GraphType
from graph_errors import InvalidWeightError, VertexNotFoundError
from nodes import Edge


def targets(g, v):
    return [(e.target.id, e.weight) for e in g.outgoing(v)]


def test_add_vertices_and_edges():
    g = AdjacencyListGraph()

    a = g.new_vertex()
    b = g.new_vertex()
    c = g.new_vertex()

    g.add_edge(a, b, 1)
    g.add_edge(a, c, 2)
    g.add_edge(b, c, 3)

    assert set(g.vertices()) == {a, b, c}
    assert len(g) == 3
    assert g.edge_count() == 3

    assert g.outgoing(a) == (Edge(b, 1), Edge(c, 2))
    assert g.outgoing(b) == (Edge(c, 3),)
    assert g.outgoing(c) == ()


def test_outgoing_returns_copy():
    g = AdjacencyListGraph()
    a = g.new_vertex()
    b = g.new_vertex()

    g.add_edge(a, b, 1)

    out = list(g.outgoing(a))
    out.clear()

    # internal structure must remain intact
    assert targets(g, a) == [(b.id, 1)]


def test_handles_compare_by_id_and_graph():
    g = AdjacencyListGraph()
    other = AdjacencyListGraph()
    a = g.new_vertex()
    x = other.new_vertex()

    assert g.vertex(a.id) == a
    assert hash(g.vertex(a.id)) == hash(a)
    assert a.id == x.id
    assert a != x
    assert x not in g
    assert g.vertex(99) is None


def test_payload_is_shared_between_handle_copies():
    g = AdjacencyListGraph()
    a = g.new_vertex()

    a.payload.value = {"name": "depot"}

    assert g.vertex(a.id).payload.value == {"name": "depot"}
    assert g.payload(a) is a.payload


def test_remove_vertex_cascades_incoming_edges():
    g = AdjacencyListGraph()
    a, b, c = g.new_vertex(), g.new_vertex(), g.new_vertex()
    g.add_edge(a, c, 1)
    g.add_edge(b, c, 2)
    g.add_edge(b, c, 7)
    g.add_edge(b, a, 3)
    g.add_edge(c, a, 4)

    assert g.remove_vertex(c.id)

    assert c not in g
    for v in g.vertices():
        assert all(e.target != c for e in g.outgoing(v))
    assert targets(g, b) == [(a.id, 3)]
    assert g.edge_count() == 1
    assert g.remove_vertex(c) is False


def test_removed_handle_reports_not_found():
    g = AdjacencyListGraph()
    a = g.new_vertex()
    b = g.new_vertex()
    g.add_edge(a, b, 1)
    g.remove_vertex(a)

    assert not a.alive
    assert a.payload is None
    assert a.outgoing() == ()
    assert g.remove_edges(a, b) == 0
    with pytest.raises(VertexNotFoundError):
        g.add_edge(a, b, 1)


def test_directed_edges_are_one_way():
    g = new_graph(GraphType.DIRECTED)
    a, b = g.new_vertex(), g.new_vertex()

    g.add_edge(a, b, 4)

    assert targets(g, a) == [(b.id, 4)]
    assert targets(g, b) == []

    g.add_edge(b, a, 9)
    assert g.remove_edges(a, b) == 1
    assert targets(g, a) == []
    assert targets(g, b) == [(a.id, 9)]


def test_symmetric_edges_are_mirrored():
    g = new_graph(GraphType.SYMMETRIC)
    a, b, c = g.new_vertex(), g.new_vertex(), g.new_vertex()

    g.add_edge(a, b, 4)
    g.add_edge(c, b, 2)

    assert g.graph_type is GraphType.SYMMETRIC
    assert targets(g, a) == [(b.id, 4)]
    assert targets(g, b) == [(a.id, 4), (c.id, 2)]

    assert g.remove_edges(b, a) == 2
    assert targets(g, a) == []
    assert targets(g, b) == [(c.id, 2)]


def test_parallel_edges_removed_together():
    g = AdjacencyListGraph()
    v = [g.new_vertex() for _ in range(3)]

    g.add_edge(v[0], v[2], 1)
    g.add_edge(v[0], v[2], 5)
    g.add_edge(v[0], v[1], 2)

    assert g.remove_edges(v[0], v[2]) == 2
    assert targets(g, v[0]) == [(v[1].id, 2)]

    g.add_edge(v[0], v[2], 8)
    assert targets(g, v[0]) == [(v[1].id, 2), (v[2].id, 8)]


@pytest.mark.parametrize("weight", [-1, 1.5, "3", None, True])
def test_add_edge_rejects_invalid_weights(weight):
    g = AdjacencyListGraph(GraphType.SYMMETRIC)
    a, b = g.new_vertex(), g.new_vertex()

    with pytest.raises(InvalidWeightError):
        g.add_edge(a, b, weight)

    assert g.edge_count() == 0


def test_add_edge_accepts_bare_ids():
    g = AdjacencyListGraph()
    a, b = g.new_vertex(), g.new_vertex()

    g.add_edge(a.id, b.id, 0)

    assert g.outgoing(a.id) == (Edge(b, 0),)
    with pytest.raises(VertexNotFoundError):
        g.add_edge(a.id, 42, 1)


def test_debug_string_lists_targets_per_vertex():
    g = AdjacencyListGraph()
    v = [g.new_vertex() for _ in range(3)]
    g.add_edge(v[0], v[1], 1)
    g.add_edge(v[0], v[2], 2)
    g.add_edge(v[1], v[2], 3)

    assert g.debug_string() == "[0] -> [1], [2]\n[1] -> [2]\n[2]"
    assert str(g) == g.debug_string()
    assert repr(g) == "AdjacencyListGraph(type=directed, vertices=3, edges=3)"
