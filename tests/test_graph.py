from typing import Any, cast

import pytest

from errors import InvalidArgumentError
from graph import Edge, Graph, Vertex
from helpers import triangle, v


def test_vertex_equality_follows_data():
    assert Vertex("A") == Vertex("A")
    assert hash(Vertex("A")) == hash(Vertex("A"))
    assert Vertex("A") != Vertex("B")
    with pytest.raises(AttributeError):
        cast(Any, Vertex("A")).data = "Z"


def test_undirected_builds_reciprocal_pairs():
    g = triangle()
    assert len(g) == 3
    assert len(g.edges) == 6
    assert Edge(v("A"), v("B"), 1) in g.edges
    assert Edge(v("B"), v("A"), 1) in g.edges
    assert g.is_undirected()


def test_adjacency_preserves_edge_order():
    g = Graph.directed(["A", "B", "C", "D"], [("A", "D", 1), ("A", "B", 2), ("A", "C", 3)])
    assert [n.data for n, _ in g.neighbors(v("A"))] == ["D", "B", "C"]
    assert g.neighbors(v("D")) == ()
    assert not g.is_undirected()


def test_duplicate_vertices_and_edges_collapse():
    a, b = v("A"), v("B")
    g = Graph([a, b, a], [Edge(a, b, 1), Edge(a, b, 1)])
    assert g.vertices == (a, b)
    assert g.neighbors(a) == ((b, 1),)


def test_edge_outside_vertex_set_rejected():
    with pytest.raises(InvalidArgumentError):
        Graph([v("A")], [Edge(v("A"), v("Z"), 1)])


def test_adjacency_is_read_only():
    g = triangle()
    with pytest.raises((AttributeError, TypeError)):
        cast(Any, g.neighbors(v("A"))).append((v("Z"), 1))


def test_vertex_lookup():
    g = triangle()
    assert g.vertex("B") == v("B")
    assert v("C") in g
    assert v("Z") not in g
    with pytest.raises(InvalidArgumentError):
        g.vertex("Z")


def test_from_config_undirected_by_default():
    g = Graph.from_config({"nodes": ["A", "B"], "edges": [["A", "B", 3]]})
    assert set(g.edges) == {Edge(v("A"), v("B"), 3), Edge(v("B"), v("A"), 3)}


def test_from_config_directed():
    g = Graph.from_config({"directed": True, "nodes": [1, 2], "edges": [[1, 2, 0.5]]})
    assert g.edges == (Edge(v(1), v(2), 0.5),)


@pytest.mark.parametrize(
    "section",
    [
        {"nodes": ["A"]},
        {"nodes": ["A"], "edges": [["A", "Z", 1]]},
        {"nodes": ["A", "B"], "edges": [["A", "B"]]},
        {"nodes": ["A", "B"], "edges": [["A", "B", "3"]]},
        {"nodes": ["A", "B"], "edges": [["A", "B", None]]},
    ],
)
def test_from_config_validation(section):
    with pytest.raises(ValueError):
        Graph.from_config(section)


def test_from_config_names_non_numeric_weight():
    with pytest.raises(ValueError, match=r"non-numeric weight '3'"):
        Graph.from_config({"nodes": ["A", "B"], "edges": [["A", "B", "3"]]})
