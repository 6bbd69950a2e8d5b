from __future__ import annotations

from collections import defaultdict
from typing import Hashable, Iterable, Sequence, TypeVar

import numpy as np

from .union_find import ForestDisjointSets

E = TypeVar("E", bound=Hashable)


def seed_forest(forest: ForestDisjointSets[E], elements: Iterable[E]) -> None:
    forest.clear()
    for e in elements:
        forest.make_set(e)


def kruskal_from_edges(
    n_nodes: int,
    endpoints: Sequence[tuple[E, E]],
    weights: Sequence[float],
    forest: ForestDisjointSets[E],
) -> list[int]:
    """Greedy Kruskal scan over a seeded forest.

    Returns the positions (into ``endpoints``) of the accepted edges, in
    acceptance order. Stops once ``n_nodes - 1`` edges are taken.
    """
    weights = np.asarray(weights, dtype=float)
    if weights.size != len(endpoints):
        raise ValueError("endpoints and weights must have the same length")
    if weights.size == 0:
        return []
    order = np.argsort(weights, kind="stable")
    limit = max(0, n_nodes - 1)
    taken: list[int] = []
    for i in order.tolist():
        if len(taken) == limit:
            break
        a, b = endpoints[i]
        ra = forest.find_set(a)
        rb = forest.find_set(b)
        if ra == rb:
            continue
        taken.append(i)
        forest.union(ra, rb)
    return taken


def union_endpoints(endpoints: Iterable[tuple[E, E]], forest: ForestDisjointSets[E]) -> None:
    for a, b in endpoints:
        forest.union(a, b)


def group_by_representative(elements: Iterable[E], forest: ForestDisjointSets[E]) -> dict[E, set[E]]:
    groups: dict[E, set[E]] = defaultdict(set)
    for e in elements:
        groups[forest.find_set(e)].add(e)
    return dict(groups)


__all__ = ["seed_forest", "kruskal_from_edges", "union_endpoints", "group_by_representative"]
