"""Adjacency-matrix graphs, disjoint-set forests, Kruskal MST and connected components."""

from __future__ import annotations

from importlib import import_module
from typing import Any

_EXPORTS = {
    "GraphNode": "elements",
    "GraphEdge": "elements",
    "Graph": "graph",
    "AdjacencyMatrixUndirectedGraph": "graph",
    "ForestDisjointSets": "union_find",
    "KruskalMSP": "core",
    "ConnectedComponentsComputer": "core",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str) -> Any:  # pragma: no cover - simple lazy import shim
    if name in _EXPORTS:
        module = import_module(f"forestgraph.{_EXPORTS[name]}")
        return getattr(module, name)
    raise AttributeError(f"module 'forestgraph' has no attribute {name!r}")


def __dir__() -> list[str]:  # pragma: no cover - cosmetic helper
    return sorted(__all__)
