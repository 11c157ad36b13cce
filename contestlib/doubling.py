"""Binary lifting on a rooted tree: LCA, path lengths and path weights."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence


class DoublingOnTree:
    """Tree on nodes ``1..n`` rooted at ``root``, answered by binary lifting.

    ``edges`` holds ``(u, v)`` pairs, which weigh 1, or ``(u, v, w)`` triples.
    The ancestor tables are built on the first query, the tables of maximum
    and minimum edge weights on the first query that needs them.
    """

    def __init__(self, n: int, root: int, edges: Iterable[Sequence[int]]) -> None:
        self._n = n
        self._check(root)
        self._root = root
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
        self._edges: list[tuple[int, int, int]] = []
        for edge in edges:
            if len(edge) == 2:
                u, v = edge
                w = 1
            elif len(edge) == 3:
                u, v, w = edge
            else:
                raise ValueError(f"an edge is (u, v) or (u, v, w), got {edge!r}")
            self._check(u)
            self._check(v)
            self._adjacency[u].append((v, w))
            self._adjacency[v].append((u, w))
            self._edges.append((u, v, w))

        self._depth: list[int] = []
        self._distance: list[int] = []
        self._ancestors: Optional[list[list[int]]] = None
        self._max_weights: Optional[list[list[int]]] = None
        self._min_weights: Optional[list[list[int]]] = None

    def _check(self, node: int) -> None:
        if not 1 <= node <= self._n:
            raise IndexError(f"node {node} outside 1..{self._n}")

    def _lifting(self) -> list[list[int]]:
        if self._ancestors is not None:
            return self._ancestors
        n = self._n
        depth = [0] * (n + 1)
        distance = [0] * (n + 1)
        # The parent of the root, and of anything unreachable, is the root.
        parent = [self._root] * (n + 1)

        stack = [(self._root, -1)]
        while stack:
            node, par = stack.pop()
            for child, weight in self._adjacency[node]:
                if child == par:
                    continue
                depth[child] = depth[node] + 1
                distance[child] = distance[node] + weight
                parent[child] = node
                stack.append((child, node))

        max_depth = max(depth[1:], default=0)
        levels = [parent]
        reach = 1
        while reach < max_depth:
            prev = levels[-1]
            levels.append([prev[prev[v]] for v in range(n + 1)])
            reach *= 2

        self._depth = depth
        self._distance = distance
        self._ancestors = levels
        return levels

    def _weight_table(self, combine: Callable[[int, int], int]) -> list[list[int]]:
        levels = self._lifting()
        parent = levels[0]
        first = [self._distance[v] - self._distance[parent[v]] for v in range(self._n + 1)]
        tables = [first]
        for k in range(1, len(levels)):
            prev = tables[-1]
            up = levels[k - 1]
            tables.append([combine(prev[v], prev[up[v]]) for v in range(self._n + 1)])
        return tables

    def lca(self, u: int, v: int) -> int:
        """Return the lowest common ancestor of ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        levels = self._lifting()
        depth = self._depth
        if depth[u] > depth[v]:
            u, v = v, u

        diff = depth[v] - depth[u]
        for k, up in enumerate(levels):
            if diff >> k & 1:
                v = up[v]
        if u == v:
            return u

        for up in reversed(levels):
            if up[u] != up[v]:
                u = up[u]
                v = up[v]
        return levels[0][u]

    def path_weight(self, u: int, v: int) -> int:
        """Return the sum of the edge weights on the path between ``u`` and ``v``."""
        top = self.lca(u, v)
        return self._distance[u] + self._distance[v] - 2 * self._distance[top]

    def path_length(self, u: int, v: int) -> int:
        """Return the number of edges on the path between ``u`` and ``v``."""
        top = self.lca(u, v)
        return self._depth[u] + self._depth[v] - 2 * self._depth[top]

    def _fold_up(
        self,
        node: int,
        top: int,
        table: list[list[int]],
        combine: Callable[[int, int], int],
        result: Optional[int],
    ) -> Optional[int]:
        levels = self._lifting()
        diff = self._depth[node] - self._depth[top]
        for k, up in enumerate(levels):
            if diff >> k & 1:
                value = table[k][node]
                result = value if result is None else combine(result, value)
                node = up[node]
        return result

    def max_weight_on_path(self, u: int, v: int) -> int:
        """Return the largest edge weight on the path, never less than 0.

        A path without edges gives 0.
        """
        if self._max_weights is None:
            self._max_weights = self._weight_table(max)
        top = self.lca(u, v)
        result = self._fold_up(u, top, self._max_weights, max, 0)
        result = self._fold_up(v, top, self._max_weights, max, result)
        assert result is not None
        return result

    def min_weight_on_path(self, u: int, v: int) -> int:
        """Return the smallest edge weight on the path; a path without edges gives 0."""
        if self._min_weights is None:
            self._min_weights = self._weight_table(min)
        top = self.lca(u, v)
        result = self._fold_up(u, top, self._min_weights, min, None)
        result = self._fold_up(v, top, self._min_weights, min, result)
        return 0 if result is None else result