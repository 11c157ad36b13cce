import itertools

import pytest

from contestlib.doubling import DoublingOnTree
from contestlib.union_find import UnionFind


def _sample_lca_tree():
    # Parents of nodes 2..5 are 1, 1, 3, 3.
    return DoublingOnTree(5, 1, [(2, 1), (3, 1), (4, 3), (5, 3)])


@pytest.mark.parametrize(
    "u, v, expected",
    [(1, 2, 1), (1, 5, 1), (2, 3, 1), (3, 4, 3), (4, 5, 3)],
)
def test_lca_sample(u, v, expected):
    assert _sample_lca_tree().lca(u, v) == expected


def _chain(weights):
    n = len(weights) + 1
    edges = [(i, i + 1, w) for i, w in enumerate(weights, start=1)]
    return DoublingOnTree(n, 1, edges), n


WEIGHTS = [4, 1, 7, 3, 9, 2, 6, 5, 8, 10, 1]


def test_chain_lca_is_the_upper_node():
    tree, n = _chain(WEIGHTS)
    for u, v in itertools.product(range(1, n + 1), repeat=2):
        assert tree.lca(u, v) == min(u, v)


def test_chain_path_weight_and_length():
    tree, n = _chain(WEIGHTS)
    for u, v in itertools.combinations(range(1, n + 1), 2):
        assert tree.path_length(u, v) == v - u
        assert tree.path_weight(u, v) == sum(WEIGHTS[u - 1 : v - 1])
        assert tree.path_weight(v, u) == tree.path_weight(u, v)


def test_chain_max_and_min_weight():
    tree, n = _chain(WEIGHTS)
    for u, v in itertools.combinations(range(1, n + 1), 2):
        assert tree.max_weight_on_path(u, v) == max(WEIGHTS[u - 1 : v - 1])
        assert tree.min_weight_on_path(v, u) == min(WEIGHTS[u - 1 : v - 1])


def test_empty_path_gives_zero():
    tree, _ = _chain(WEIGHTS)
    assert tree.max_weight_on_path(3, 3) == 0
    assert tree.min_weight_on_path(3, 3) == 0
    assert tree.path_weight(3, 3) == 0
    assert tree.path_length(3, 3) == 0


def test_unweighted_edges_weigh_one():
    tree = _sample_lca_tree()
    for u, v in itertools.product(range(1, 6), repeat=2):
        assert tree.path_weight(u, v) == tree.path_length(u, v)


def test_branching_tree_invariants():
    edges = [
        (1, 2, 5), (1, 3, 2), (2, 4, 8), (2, 5, 1), (3, 6, 7),
        (6, 7, 3), (6, 8, 4), (8, 9, 6), (9, 10, 9),
    ]
    tree = DoublingOnTree(10, 1, edges)
    for u, v in itertools.product(range(1, 11), repeat=2):
        top = tree.lca(u, v)
        assert tree.lca(v, u) == top
        assert tree.lca(top, u) == top
        assert tree.lca(1, u) == 1
        assert tree.path_weight(u, v) == tree.path_weight(u, top) + tree.path_weight(top, v)
        assert tree.path_length(u, v) == tree.path_length(u, top) + tree.path_length(top, v)
        if u != v:
            assert tree.max_weight_on_path(u, v) == max(
                tree.max_weight_on_path(u, top), tree.max_weight_on_path(top, v)
            )
            assert tree.min_weight_on_path(u, v) <= tree.max_weight_on_path(u, v)
    for u, v, w in edges:
        assert tree.max_weight_on_path(u, v) == w
        assert tree.min_weight_on_path(u, v) == w
        assert tree.path_weight(v, u) == w


def test_mst_max_edge_worked_example():
    all_edges = [(1, 2, 2), (2, 3, 3), (1, 3, 6), (2, 4, 5), (4, 5, 9), (3, 5, 8)]
    uf = UnionFind(5)
    mst = []
    for u, v, w in sorted(all_edges, key=lambda e: e[2]):
        if uf.unite(u, v):
            mst.append((u, v, w))
    tree = DoublingOnTree(5, 1, mst)
    assert tree.max_weight_on_path(1, 3) == 3
    assert tree.max_weight_on_path(3, 4) == 5
    assert tree.max_weight_on_path(3, 5) == 8
    # Every edge left out of the tree is at least as heavy as its path's maximum.
    in_tree = {(u, v) for u, v, _ in mst}
    for u, v, w in all_edges:
        if (u, v) not in in_tree:
            assert tree.max_weight_on_path(u, v) <= w


def test_single_node_tree():
    tree = DoublingOnTree(1, 1, [])
    assert tree.lca(1, 1) == 1
    assert tree.path_length(1, 1) == 0


def test_node_out_of_range():
    tree = _sample_lca_tree()
    with pytest.raises(IndexError):
        tree.lca(0, 1)
    with pytest.raises(IndexError):
        tree.path_weight(1, 6)


def test_bad_root_and_edges():
    with pytest.raises(IndexError):
        DoublingOnTree(3, 4, [(1, 2), (2, 3)])
    with pytest.raises(IndexError):
        DoublingOnTree(3, 1, [(1, 2), (2, 7)])
    with pytest.raises(ValueError):
        DoublingOnTree(3, 1, [(1, 2, 3, 4)])