"""Tree queries on an Euler tour: subtree sums, path sums, depth and LCA."""

from __future__ import annotations

import operator
from typing import Iterable, Optional

from contestlib.segment_tree import SegmentTree
from contestlib.sparse_table import SparseTable

_SHIFT = 30
_MASK = (1 << _SHIFT) - 1
_NO_NODE = 1 << 62


def _pack(depth: int, node: int) -> int:
    if depth < 0:
        return _NO_NODE
    return (depth << _SHIFT) | node


class EulerTour:
    """Weighted tree on nodes ``1..N`` given by its ``N - 1`` edges ``(u, v, w)``.

    Node weights are set with ``set_node_weight`` before ``build``; after it
    node and edge weights are changed with the ``update_*`` methods.
    """

    def __init__(self, edges: Iterable[tuple[int, int, int]]) -> None:
        self._edges = [tuple(edge) for edge in edges]
        self._n = len(self._edges) + 1
        self._built = False
        self._root: Optional[int] = None
        self._node_weight = [0] * (self._n + 1)
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(self._n + 1)]
        for u, v, w in self._edges:
            self._check(u)
            self._check(v)
            self._adjacency[u].append((v, w))
            self._adjacency[v].append((u, w))
        self._in_time: list[int] = []
        self._out_time: list[int] = []

    def _check(self, node: int) -> None:
        if not 1 <= node <= self._n:
            raise IndexError(f"node {node} outside 1..{self._n}")

    def set_node_weight(self, node: int, weight: int) -> None:
        """Set a node weight; the tour must be built again afterwards."""
        self._check(node)
        self._node_weight[node] = weight
        self._built = False

    def node_weight(self, node: int) -> int:
        """Return the current weight of ``node``."""
        self._check(node)
        return self._node_weight[node]

    def edge_weight(self, edge_index: int) -> int:
        """Return the current weight of the edge at ``edge_index``."""
        return self._edges[edge_index][2]

    def build(self, root: int) -> None:
        """Lay out the tour from ``root``; does nothing if already built."""
        self._check(root)
        if self._built:
            return
        self._built = True
        self._root = root

        n = self._n
        size = 2 * n
        sub_node = [0] * size
        sub_edge = [0] * size
        path_node = [0] * size
        path_edge = [0] * size
        order = [_NO_NODE] * size
        self._in_time = [-1] * (n + 1)
        self._out_time = [-1] * (n + 1)

        time = -1

        def enter(node: int, depth: int, weight: int) -> None:
            nonlocal time
            time += 1
            self._in_time[node] = time
            sub_node[time] = path_node[time] = self._node_weight[node]
            sub_edge[time] = path_edge[time] = weight
            order[time] = _pack(depth, node)

        enter(root, 0, 0)
        stack = [(root, -1, 0, 0, iter(self._adjacency[root]))]
        while stack:
            node, parent, depth, weight, children = stack[-1]
            for child, child_weight in children:
                if child != parent:
                    enter(child, depth + 1, child_weight)
                    stack.append(
                        (child, node, depth + 1, child_weight, iter(self._adjacency[child]))
                    )
                    break
            else:
                stack.pop()
                self._out_time[node] = time
                time += 1
                # Negated entries cancel the subtree out of prefix sums.
                path_node[time] = -self._node_weight[node]
                path_edge[time] = -weight
                order[time] = _pack(depth - 1, parent)

        self._sub_node = SegmentTree(sub_node, operator.add, 0)
        self._sub_edge = SegmentTree(sub_edge, operator.add, 0)
        self._path_node = SegmentTree(path_node, operator.add, 0)
        self._path_edge = SegmentTree(path_edge, operator.add, 0)
        self._order = SparseTable(order, min)

    def _times(self, node: int) -> tuple[int, int]:
        self._check(node)
        if not self._built:
            raise RuntimeError("the tour must be built before querying")
        return self._in_time[node], self._out_time[node]

    def update_node_weight(self, node: int, weight: int) -> None:
        """Change the weight of ``node`` in the built tour."""
        in_time, out_time = self._times(node)
        self._node_weight[node] = weight
        self._sub_node.update(in_time, weight)
        self._path_node.update(in_time, weight)
        self._path_node.update(out_time + 1, -weight)

    def update_edge_weight(self, edge_index: int, weight: int) -> None:
        """Change the weight of the edge at ``edge_index`` in the built tour."""
        u, v, _ = self._edges[edge_index]
        in_u, out_u = self._times(u)
        in_v, out_v = self._times(v)
        self._edges[edge_index] = (u, v, weight)
        # The edge weight sits at the times of its child end.
        in_time = max(in_u, in_v)
        out_time = min(out_u, out_v)
        self._sub_edge.update(in_time, weight)
        self._path_edge.update(in_time, weight)
        self._path_edge.update(out_time + 1, -weight)

    def subtree_size(self, node: int) -> int:
        """Return the number of nodes in the subtree of ``node``."""
        in_time, out_time = self._times(node)
        return (out_time - in_time) // 2 + 1

    def subtree_query(self, node: int) -> int:
        """Sum the node weights and edge weights inside the subtree of ``node``."""
        in_time, out_time = self._times(node)
        return self._sub_node.query(in_time, out_time + 1) + self._sub_edge.query(
            in_time + 1, out_time + 1
        )

    def _root_path(self, node: int) -> int:
        _, out_time = self._times(node)
        return self._path_node.query(0, out_time + 1) + self._path_edge.query(
            1, out_time + 1
        )

    def path_query(self, node: int, other: Optional[int] = None) -> int:
        """Sum the weights on the path from the root to ``node``, or from ``node`` to ``other``."""
        if other is None:
            return self._root_path(node)
        lca = self.lca(node, other)
        lca_in, _ = self._times(lca)
        return (
            self._root_path(node)
            + self._root_path(other)
            - 2 * self._root_path(lca)
            + self._sub_node.query(lca_in, lca_in + 1)
        )

    def depth(self, node: int) -> int:
        """Return the number of edges between the root and ``node``."""
        in_time, _ = self._times(node)
        return self._order.query(in_time, in_time + 1) >> _SHIFT

    def lca(self, node_1: int, node_2: int) -> int:
        """Return the lowest common ancestor of both nodes."""
        in_1, out_1 = self._times(node_1)
        in_2, out_2 = self._times(node_2)
        packed = self._order.query(min(in_1, in_2), max(out_1, out_2) + 1)
        return packed & _MASK