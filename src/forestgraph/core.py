from __future__ import annotations

import os
from typing import Iterable

from .clustering import group_by_representative, kruskal_from_edges, seed_forest, union_endpoints
from .elements import GraphEdge, GraphNode
from .graph import Graph
from .union_find import ForestDisjointSets

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _resolve_verbose(verbose: bool | None) -> bool:
    if verbose is None:
        return os.environ.get("FORESTGRAPH_VERBOSE", "").strip().lower() in _TRUE_VALUES
    return bool(verbose)


def _check_undirected(graph: Graph) -> None:
    if graph is None:
        raise TypeError("graph must not be None")
    if graph.is_directed():
        raise ValueError("graph must be undirected")


class KruskalMSP:
    """Minimum spanning tree of an undirected graph with non-negative weights.

    The returned edge set is a minimum spanning forest when the graph is not
    connected.
    """

    def __init__(self, verbose: bool | None = None) -> None:
        self.verbose = _resolve_verbose(verbose)
        self.disjoint_sets: ForestDisjointSets[GraphNode] = ForestDisjointSets()

    def compute_msp(self, graph: Graph) -> set[GraphEdge]:
        _check_undirected(graph)
        edges = list(graph.get_edges())
        if not edges:
            return set()
        for edge in edges:
            if not edge.is_weighted:
                raise ValueError(f"edge {edge!r} has no weight")
            if edge.weight < 0:
                raise ValueError(f"edge {edge!r} has a negative weight")
        nodes = graph.get_nodes()
        seed_forest(self.disjoint_sets, nodes)
        taken = kruskal_from_edges(
            len(nodes),
            [(edge.node1, edge.node2) for edge in edges],
            [edge.weight for edge in edges],
            self.disjoint_sets,
        )
        msp = {edges[i] for i in taken}
        if self.verbose:
            print(f"[MSP] nodes={len(nodes)}, edges={len(edges)}, accepted={len(msp)}, weight={self.total_weight(msp):g}")
        return msp

    @staticmethod
    def total_weight(edges: Iterable[GraphEdge]) -> float:
        return float(sum(edge.weight for edge in edges))


class ConnectedComponentsComputer:
    def __init__(self, verbose: bool | None = None) -> None:
        self.verbose = _resolve_verbose(verbose)
        self.disjoint_sets: ForestDisjointSets[GraphNode] = ForestDisjointSets()

    def compute_connected_components(self, graph: Graph) -> frozenset[frozenset[GraphNode]]:
        _check_undirected(graph)
        nodes = graph.get_nodes()
        seed_forest(self.disjoint_sets, nodes)
        union_endpoints(
            ((edge.node1, edge.node2) for edge in graph.get_edges() if not edge.is_directed),
            self.disjoint_sets,
        )
        groups = group_by_representative(nodes, self.disjoint_sets)
        if self.verbose:
            print(f"[CC] nodes={len(nodes)}, components={len(groups)}")
        return frozenset(frozenset(members) for members in groups.values())


__all__ = ["KruskalMSP", "ConnectedComponentsComputer"]
