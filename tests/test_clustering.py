import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

import pytest

from forestgraph.clustering import group_by_representative, kruskal_from_edges, seed_forest, union_endpoints
from forestgraph.union_find import ForestDisjointSets


def test_kruskal_from_edges_picks_lightest_acyclic_edges():
    forest = ForestDisjointSets()
    seed_forest(forest, range(4))
    endpoints = [(0, 1), (1, 2), (0, 2), (2, 3)]
    weights = [1.0, 2.0, 0.5, 3.0]
    taken = kruskal_from_edges(4, endpoints, weights, forest)
    assert taken == [2, 0, 3]
    assert forest.set_count() == 1


def test_kruskal_from_edges_empty_and_mismatch():
    forest = ForestDisjointSets()
    seed_forest(forest, range(2))
    assert kruskal_from_edges(2, [], [], forest) == []
    with pytest.raises(ValueError):
        kruskal_from_edges(2, [(0, 1)], [], forest)


def test_seed_forest_clears_previous_state():
    forest = ForestDisjointSets()
    seed_forest(forest, "ab")
    forest.union("a", "b")
    seed_forest(forest, "bc")
    assert set(forest) == {"b", "c"}
    assert forest.get_current_representatives() == {"b", "c"}


def test_group_by_representative():
    forest = ForestDisjointSets()
    seed_forest(forest, range(5))
    union_endpoints([(0, 1), (3, 4), (1, 4)], forest)
    groups = group_by_representative(range(5), forest)
    assert sorted(sorted(members) for members in groups.values()) == [[0, 1, 3, 4], [2]]
