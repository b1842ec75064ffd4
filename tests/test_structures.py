import pytest

from city_connector.structures import DisjointSet


def test_union_merges_and_reports_change():
    clusters = DisjointSet(4)
    assert clusters.union(0, 1)
    assert clusters.union(2, 3)
    assert not clusters.union(1, 0)
    assert clusters.find(0) == clusters.find(1)
    assert clusters.find(1) != clusters.find(2)


def test_repeated_union_leaves_state_unchanged():
    clusters = DisjointSet(3)
    clusters.union(0, 1)
    parent, sizes = list(clusters.parent), list(clusters.sizes)
    assert not clusters.union(0, 1)
    assert clusters.parent == parent
    assert clusters.sizes == sizes


def test_smaller_class_attaches_under_larger_root():
    clusters = DisjointSet(3)
    clusters.union(0, 1)
    clusters.union(2, 1)
    assert clusters.find(2) == clusters.find(0) == 0
    assert clusters.sizes[0] == 3


def test_class_sizes_sum_to_size():
    clusters = DisjointSet(6)
    for left, right in [(0, 1), (2, 3), (1, 3), (4, 5), (0, 2)]:
        clusters.union(left, right)
    roots = {clusters.find(i) for i in range(6)}
    assert len(roots) == 2
    assert sum(clusters.sizes[root] for root in roots) == 6


def test_find_compresses_paths():
    clusters = DisjointSet(5)
    clusters.parent = [0, 0, 1, 2, 3]
    assert clusters.find(4) == 0
    assert clusters.parent[4] != 3
    assert clusters.find(4) == 0


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DisjointSet(-1)


def test_empty_set():
    assert DisjointSet(0).parent == []
