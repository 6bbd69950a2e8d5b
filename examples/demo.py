"""Small demonstration of Kruskal's MST and connected components."""

from __future__ import annotations

import numpy as np

from forestgraph import (
    AdjacencyMatrixUndirectedGraph,
    ConnectedComponentsComputer,
    GraphEdge,
    GraphNode,
    KruskalMSP,
)


def make_graph(seed: int = 0) -> AdjacencyMatrixUndirectedGraph:
    rng = np.random.default_rng(seed)
    graph = AdjacencyMatrixUndirectedGraph()
    nodes = [GraphNode(label) for label in "ABCDEFGH"]
    for node in nodes:
        graph.add_node(node)
    # two clusters: A-D densely connected, E-H densely connected
    for block in (nodes[:4], nodes[4:]):
        for i, u in enumerate(block):
            for v in block[i + 1 :]:
                graph.add_edge(GraphEdge(u, v, weight=float(rng.integers(1, 10))))
    return graph


def main() -> None:
    graph = make_graph()
    print(graph)

    msp = KruskalMSP(verbose=True).compute_msp(graph)
    print("Spanning forest:")
    for edge in sorted(msp, key=lambda e: (e.weight, e.node1.label, e.node2.label)):
        print(f"  {edge}")

    components = ConnectedComponentsComputer(verbose=True).compute_connected_components(graph)
    print("Components:")
    for component in components:
        print("  " + ", ".join(sorted(node.label for node in component)))


if __name__ == "__main__":
    main()
