from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Hashable, Iterator

import numpy as np

from .elements import GraphEdge, GraphNode


class Graph(ABC):
    """Contract shared by graph storages consumed by the algorithms."""

    @abstractmethod
    def node_count(self) -> int: ...

    @abstractmethod
    def edge_count(self) -> int: ...

    @abstractmethod
    def clear(self) -> None: ...

    @abstractmethod
    def is_directed(self) -> bool: ...

    @abstractmethod
    def get_nodes(self) -> set[GraphNode]: ...

    @abstractmethod
    def add_node(self, node: GraphNode) -> bool: ...

    @abstractmethod
    def remove_node(self, node: GraphNode) -> bool: ...

    @abstractmethod
    def contains_node(self, node: GraphNode) -> bool: ...

    @abstractmethod
    def get_node_of(self, label: Hashable) -> GraphNode | None: ...

    @abstractmethod
    def get_node_index_of(self, label: Hashable) -> int: ...

    @abstractmethod
    def get_node_at_index(self, index: int) -> GraphNode: ...

    @abstractmethod
    def get_adjacent_nodes_of(self, node: GraphNode) -> set[GraphNode]: ...

    @abstractmethod
    def get_predecessor_nodes_of(self, node: GraphNode) -> set[GraphNode]: ...

    @abstractmethod
    def get_edges(self) -> set[GraphEdge]: ...

    @abstractmethod
    def add_edge(self, edge: GraphEdge) -> bool: ...

    @abstractmethod
    def remove_edge(self, edge: GraphEdge) -> bool: ...

    @abstractmethod
    def contains_edge(self, edge: GraphEdge) -> bool: ...

    @abstractmethod
    def get_edges_of(self, node: GraphNode) -> set[GraphEdge]: ...

    @abstractmethod
    def get_ingoing_edges_of(self, node: GraphNode) -> set[GraphEdge]: ...

    def size(self) -> int:
        return self.node_count() + self.edge_count()

    def is_empty(self) -> bool:
        return self.node_count() == 0

    def __len__(self) -> int:
        return self.node_count()

    def __contains__(self, node: object) -> bool:
        return isinstance(node, GraphNode) and self.contains_node(node)

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self.get_nodes())


class AdjacencyMatrixUndirectedGraph(Graph):
    """Undirected graph stored as a square matrix of optional edges.

    Nodes are indexed ``0 .. node_count() - 1`` in insertion order. Removing a
    node shifts every higher index down by one, so indices obtained before a
    ``remove_node`` call must not be reused after it.
    """

    def __init__(self) -> None:
        self.clear()

    def clear(self) -> None:
        self.nodes_index: dict[GraphNode, int] = {}
        self.matrix = np.empty((0, 0), dtype=object)

    def _occupied(self) -> np.ndarray:
        n = self.matrix.shape[0]
        return np.fromiter(
            (cell is not None for cell in self.matrix.flat), dtype=bool, count=n * n
        ).reshape(n, n)

    def _index_of(self, node: GraphNode) -> int:
        if node is None:
            raise TypeError("node must not be None")
        try:
            return self.nodes_index[node]
        except KeyError:
            raise ValueError(f"node {node!r} is not in the graph") from None

    def _endpoint_indexes(self, edge: GraphEdge) -> tuple[int, int]:
        try:
            return self.nodes_index[edge.node1], self.nodes_index[edge.node2]
        except KeyError:
            raise ValueError(f"an endpoint of {edge!r} is not in the graph") from None

    def node_count(self) -> int:
        return len(self.nodes_index)

    def edge_count(self) -> int:
        occupied = self._occupied()
        return int(occupied.sum() + np.trace(occupied)) // 2

    def is_directed(self) -> bool:
        return False

    def get_nodes(self) -> set[GraphNode]:
        return set(self.nodes_index)

    def add_node(self, node: GraphNode) -> bool:
        if node is None:
            raise TypeError("node must not be None")
        if not isinstance(node, GraphNode):
            raise TypeError(f"expected a GraphNode, got {type(node).__name__}")
        if node in self.nodes_index:
            return False
        n = self.matrix.shape[0]
        grown = np.full((n + 1, n + 1), None, dtype=object)
        grown[:n, :n] = self.matrix
        self.matrix = grown
        self.nodes_index[node] = n
        return True

    def remove_node(self, node: GraphNode) -> bool:
        if node is None:
            raise TypeError("node must not be None")
        if node not in self.nodes_index:
            return False
        removed = self.nodes_index.pop(node)
        self.matrix = np.delete(np.delete(self.matrix, removed, axis=0), removed, axis=1)
        self.nodes_index = {
            other: idx - 1 if idx > removed else idx for other, idx in self.nodes_index.items()
        }
        return True

    def contains_node(self, node: GraphNode) -> bool:
        if node is None:
            raise TypeError("node must not be None")
        return node in self.nodes_index

    def get_node_of(self, label: Hashable) -> GraphNode | None:
        if label is None:
            raise TypeError("label must not be None")
        for node in self.nodes_index:
            if node.label == label:
                return node
        return None

    def get_node_index_of(self, label: Hashable) -> int:
        if label is None:
            raise TypeError("label must not be None")
        for node, idx in self.nodes_index.items():
            if node.label == label:
                return idx
        raise ValueError(f"no node with label {label!r}")

    def get_node_at_index(self, index: int) -> GraphNode:
        if not 0 <= index < len(self.nodes_index):
            raise IndexError(f"node index {index} out of range [0, {len(self.nodes_index)})")
        for node, idx in self.nodes_index.items():
            if idx == index:
                return node
        raise RuntimeError(f"index map has no node at {index}")

    def get_adjacent_nodes_of(self, node: GraphNode) -> set[GraphNode]:
        i = self._index_of(node)
        return {self.get_node_at_index(j) for j, cell in enumerate(self.matrix[i]) if cell is not None}

    def get_predecessor_nodes_of(self, node: GraphNode) -> set[GraphNode]:
        raise NotImplementedError("undirected graphs have no predecessor nodes")

    def get_edges(self) -> set[GraphEdge]:
        rows, cols = np.nonzero(np.triu(self._occupied()))
        return {self.matrix[i, j] for i, j in zip(rows.tolist(), cols.tolist())}

    def get_edges_of(self, node: GraphNode) -> set[GraphEdge]:
        i = self._index_of(node)
        return {cell for cell in self.matrix[i] if cell is not None}

    def get_ingoing_edges_of(self, node: GraphNode) -> set[GraphEdge]:
        raise NotImplementedError("undirected graphs have no ingoing edges")

    def add_edge(self, edge: GraphEdge) -> bool:
        if edge is None:
            raise TypeError("edge must not be None")
        if not isinstance(edge, GraphEdge):
            raise TypeError(f"expected a GraphEdge, got {type(edge).__name__}")
        i, j = self._endpoint_indexes(edge)
        if edge.is_directed:
            raise ValueError(f"cannot store directed edge {edge!r} in an undirected graph")
        if self.matrix[i, j] is not None:
            return False
        self.matrix[i, j] = edge
        self.matrix[j, i] = edge
        return True

    def remove_edge(self, edge: GraphEdge) -> bool:
        if edge is None:
            raise TypeError("edge must not be None")
        i = self.nodes_index.get(edge.node1)
        j = self.nodes_index.get(edge.node2)
        if i is None or j is None or self.matrix[i, j] is None:
            return False
        self.matrix[i, j] = None
        self.matrix[j, i] = None
        return True

    def contains_edge(self, edge: GraphEdge) -> bool:
        if edge is None:
            raise TypeError("edge must not be None")
        i, j = self._endpoint_indexes(edge)
        return self.matrix[i, j] is not None

    def get_edge(self, node1: GraphNode, node2: GraphNode) -> GraphEdge | None:
        return self.matrix[self._index_of(node1), self._index_of(node2)]

    def get_edge_at_node_indexes(self, i: int, j: int) -> GraphEdge | None:
        n = self.matrix.shape[0]
        if not (0 <= i < n and 0 <= j < n):
            raise IndexError(f"node indexes ({i}, {j}) out of range [0, {n})")
        return self.matrix[i, j]

    def __repr__(self) -> str:
        return f"AdjacencyMatrixUndirectedGraph(nodes={self.node_count()}, edges={self.edge_count()})"


__all__ = ["Graph", "AdjacencyMatrixUndirectedGraph"]
