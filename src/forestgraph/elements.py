"""Node and edge value types shared by the graph and the algorithms."""

from __future__ import annotations

import math
from typing import Any, Hashable


class GraphNode:
    __slots__ = ("_label",)

    def __init__(self, label: Hashable) -> None:
        if label is None:
            raise TypeError("label must not be None")
        self._label = label

    @property
    def label(self) -> Hashable:
        return self._label

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, GraphNode):
            return NotImplemented
        return self._label == other._label

    def __hash__(self) -> int:
        return hash(self._label)

    def __repr__(self) -> str:
        return f"GraphNode({self._label!r})"


class GraphEdge:
    """Edge between two nodes.

    ``weight`` defaults to NaN, which marks the edge as unweighted. Undirected
    edges compare equal regardless of endpoint order.
    """

    __slots__ = ("_node1", "_node2", "_directed", "_weight")

    def __init__(
        self,
        node1: GraphNode,
        node2: GraphNode,
        directed: bool = False,
        weight: float = math.nan,
    ) -> None:
        if not isinstance(node1, GraphNode) or not isinstance(node2, GraphNode):
            raise TypeError("edge endpoints must be GraphNode instances")
        self._node1 = node1
        self._node2 = node2
        self._directed = bool(directed)
        self._weight = float(weight)

    @property
    def node1(self) -> GraphNode:
        return self._node1

    @property
    def node2(self) -> GraphNode:
        return self._node2

    @property
    def weight(self) -> float:
        return self._weight

    @property
    def is_directed(self) -> bool:
        return self._directed

    @property
    def is_weighted(self) -> bool:
        return not math.isnan(self._weight)

    def _endpoints(self) -> tuple[GraphNode, GraphNode] | frozenset[GraphNode]:
        if self._directed:
            return (self._node1, self._node2)
        return frozenset((self._node1, self._node2))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, GraphEdge):
            return NotImplemented
        if self._directed != other._directed or self._endpoints() != other._endpoints():
            return False
        if self.is_weighted != other.is_weighted:
            return False
        return not self.is_weighted or self._weight == other._weight

    def __hash__(self) -> int:
        return hash((self._directed, self._endpoints()))

    def __repr__(self) -> str:
        arrow = "->" if self._directed else "--"
        weight = f", weight={self._weight:g}" if self.is_weighted else ""
        return f"GraphEdge({self._node1.label!r} {arrow} {self._node2.label!r}{weight})"
