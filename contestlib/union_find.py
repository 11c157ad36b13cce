"""Disjoint-set structures over nodes numbered from 1."""

from __future__ import annotations


class UnionFind:
    """Disjoint sets with union by size and path compression."""

    def __init__(self, n: int) -> None:
        self._n = n
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)

    def _check(self, node: int) -> None:
        if not 1 <= node <= self._n:
            raise IndexError(f"node {node} outside 1..{self._n}")

    def root(self, node: int) -> int:
        """Return the representative of the set holding ``node``."""
        self._check(node)
        path = []
        while self._parent[node] != node:
            path.append(node)
            node = self._parent[node]
        for inner in path:
            self._parent[inner] = node
        return node

    def unite(self, node_1: int, node_2: int) -> bool:
        """Merge the sets of both nodes; return False if already joined."""
        root_1 = self.root(node_1)
        root_2 = self.root(node_2)
        if root_1 == root_2:
            return False
        # The smaller set hangs under the larger; on a tie under node_2's root.
        if self._size[root_1] > self._size[root_2]:
            root_1, root_2 = root_2, root_1
        self._parent[root_1] = root_2
        self._size[root_2] += self._size[root_1]
        return True

    def same(self, node_1: int, node_2: int) -> bool:
        """Tell whether both nodes are in the same set."""
        return self.root(node_1) == self.root(node_2)

    def size(self, node: int) -> int:
        """Return the size of the set holding ``node``."""
        return self._size[self.root(node)]

    def groups(self) -> dict[int, list[int]]:
        """Map each representative, in ascending order, to its members."""
        result: dict[int, list[int]] = {}
        for node in range(1, self._n + 1):
            result.setdefault(self.root(node), []).append(node)
        return dict(sorted(result.items()))


class UnionFindUndo:
    """Disjoint sets with union by size whose unions can be undone."""

    def __init__(self, n: int) -> None:
        self._n = n
        # Negative entries mark roots and hold minus the set size.
        self._data = [-1] * (n + 1)
        self._history: list[tuple[int, int]] = []

    def _check(self, node: int) -> None:
        if not 1 <= node <= self._n:
            raise IndexError(f"node {node} outside 1..{self._n}")

    def root(self, node: int) -> int:
        """Return the representative of the set holding ``node``."""
        self._check(node)
        while self._data[node] >= 0:
            node = self._data[node]
        return node

    def unite(self, node_1: int, node_2: int) -> bool:
        """Merge the sets of both nodes; return False if already joined.

        Every call is recorded, so each can be reverted by one ``undo``.
        """
        root_1 = self.root(node_1)
        root_2 = self.root(node_2)
        self._history.append((root_1, self._data[root_1]))
        self._history.append((root_2, self._data[root_2]))
        if root_1 == root_2:
            return False
        if -self._data[root_1] < -self._data[root_2]:
            root_1, root_2 = root_2, root_1
        self._data[root_1] += self._data[root_2]
        self._data[root_2] = root_1
        return True

    def same(self, node_1: int, node_2: int) -> bool:
        """Tell whether both nodes are in the same set."""
        return self.root(node_1) == self.root(node_2)

    def size(self, node: int) -> int:
        """Return the size of the set holding ``node``."""
        return -self._data[self.root(node)]

    def groups(self) -> dict[int, list[int]]:
        """Map each representative, in ascending order, to its members."""
        result: dict[int, list[int]] = {}
        for node in range(1, self._n + 1):
            result.setdefault(self.root(node), []).append(node)
        return dict(sorted(result.items()))

    def undo(self) -> None:
        """Revert the most recent ``unite`` call."""
        if len(self._history) < 2:
            raise IndexError("nothing to undo")
        for _ in range(2):
            node, value = self._history.pop()
            self._data[node] = value

    def snapshot(self) -> None:
        """Forget the history; earlier unions can no longer be undone."""
        self._history.clear()

    def rollback(self) -> None:
        """Undo every union made since the last snapshot."""
        while self._history:
            self.undo()