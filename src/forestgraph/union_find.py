"""Disjoint-set forest with path compression and union by rank."""

from __future__ import annotations

from typing import Generic, Hashable, Iterator, TypeVar

import numpy as np

E = TypeVar("E", bound=Hashable)


class ForestDisjointSets(Generic[E]):
    """Union-find over arbitrary hashable elements.

    Every element owns a slot in two int64 arrays: ``parent`` and ``rank``.
    A slot is the root of its tree iff ``parent[slot] == slot``; the element
    stored at the root slot is the representative of the set.
    """

    def __init__(self, initial_capacity: int = 16) -> None:
        if initial_capacity < 0:
            raise ValueError("initial_capacity must be non-negative")
        self._initial_capacity = int(initial_capacity)
        self.clear()

    def clear(self) -> None:
        self._slot: dict[E, int] = {}
        self._items: list[E] = []
        self.parent = np.empty(self._initial_capacity, dtype=np.int64)
        self.rank = np.empty(self._initial_capacity, dtype=np.int64)

    def _grow(self) -> None:
        capacity = max(1, 2 * self.parent.size)
        parent = np.empty(capacity, dtype=np.int64)
        rank = np.empty(capacity, dtype=np.int64)
        used = len(self._items)
        parent[:used] = self.parent[:used]
        rank[:used] = self.rank[:used]
        self.parent = parent
        self.rank = rank

    def _slot_of(self, e: E) -> int:
        if e is None:
            raise TypeError("element must not be None")
        try:
            return self._slot[e]
        except KeyError:
            raise ValueError(f"element {e!r} is not present") from None

    def _find_root(self, x: int) -> int:
        parent = self.parent
        root = x
        while parent[root] != root:
            root = int(parent[root])
        while parent[x] != root:
            nxt = int(parent[x])
            parent[x] = root
            x = nxt
        return root

    def is_present(self, e: E) -> bool:
        return e in self._slot

    def make_set(self, e: E) -> None:
        if e is None:
            raise TypeError("element must not be None")
        if e in self._slot:
            raise ValueError(f"element {e!r} is already present")
        x = len(self._items)
        if x == self.parent.size:
            self._grow()
        self.parent[x] = x
        self.rank[x] = 0
        self._slot[e] = x
        self._items.append(e)

    def find_set(self, e: E) -> E:
        return self._items[self._find_root(self._slot_of(e))]

    def union(self, e1: E, e2: E) -> None:
        """Merge the sets of ``e1`` and ``e2``.

        On a rank tie the root of ``e2``'s set survives and its rank grows.
        """
        a = self._slot_of(e1)
        b = self._slot_of(e2)
        ra = self._find_root(a)
        rb = self._find_root(b)
        if ra == rb:
            return
        rank = self.rank
        parent = self.parent
        if rank[ra] < rank[rb]:
            parent[ra] = rb
        elif rank[ra] > rank[rb]:
            parent[rb] = ra
        else:
            parent[ra] = rb
            rank[rb] += 1

    def connected(self, e1: E, e2: E) -> bool:
        return self._find_root(self._slot_of(e1)) == self._find_root(self._slot_of(e2))

    def get_current_representatives(self) -> set[E]:
        return {self._items[self._find_root(x)] for x in range(len(self._items))}

    def get_current_elements_of_set_containing(self, e: E) -> set[E]:
        root = self._find_root(self._slot_of(e))
        return {item for x, item in enumerate(self._items) if self._find_root(x) == root}

    def set_count(self) -> int:
        return len(self.get_current_representatives())

    def __contains__(self, e: object) -> bool:
        return e in self._slot

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[E]:
        return iter(self._items)


__all__ = ["ForestDisjointSets"]
