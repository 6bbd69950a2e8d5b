import math
import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

import pytest

from forestgraph.elements import GraphEdge, GraphNode


def test_node_equality_by_label():
    assert GraphNode("A") == GraphNode("A")
    assert GraphNode("A") != GraphNode("B")
    assert len({GraphNode("A"), GraphNode("A"), GraphNode(1)}) == 2


def test_node_rejects_none_label():
    with pytest.raises(TypeError):
        GraphNode(None)


def test_undirected_edge_ignores_endpoint_order():
    a, b = GraphNode("A"), GraphNode("B")
    assert GraphEdge(a, b, weight=2.0) == GraphEdge(b, a, weight=2.0)
    assert hash(GraphEdge(a, b, weight=2.0)) == hash(GraphEdge(b, a, weight=2.0))
    assert GraphEdge(a, b, weight=2.0) != GraphEdge(a, b, weight=3.0)


def test_directed_edge_keeps_endpoint_order():
    a, b = GraphNode("A"), GraphNode("B")
    assert GraphEdge(a, b, directed=True) != GraphEdge(b, a, directed=True)
    assert GraphEdge(a, b, directed=True) != GraphEdge(a, b)


def test_unweighted_edges():
    a, b = GraphNode("A"), GraphNode("B")
    edge = GraphEdge(a, b)
    assert not edge.is_weighted
    assert math.isnan(edge.weight)
    assert edge == GraphEdge(a, b)
    assert edge != GraphEdge(a, b, weight=1.0)


def test_edge_requires_nodes():
    with pytest.raises(TypeError):
        GraphEdge(GraphNode("A"), None)
    with pytest.raises(TypeError):
        GraphEdge("A", GraphNode("B"))
