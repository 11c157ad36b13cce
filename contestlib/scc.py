"""Strongly connected components and topological sorting."""

from __future__ import annotations

from collections import deque
from typing import Any, Sequence


def _targets(edges: Sequence[Any]) -> list[int]:
    return [edge[0] if isinstance(edge, (tuple, list)) else edge for edge in edges]


def _normalise(adjacency: Sequence[Sequence[Any]]) -> list[list[int]]:
    if not adjacency:
        raise ValueError("adjacency must hold at least the unused entry 0")
    n = len(adjacency) - 1
    graph = [[] for _ in range(n + 1)]
    for node in range(1, n + 1):
        for to in _targets(adjacency[node]):
            if not 1 <= to <= n:
                raise IndexError(f"edge target {to} outside 1..{n}")
            graph[node].append(to)
    return graph


class StronglyConnectedComponents:
    """Strongly connected components of a directed graph on nodes ``1..N``.

    ``adjacency[0]`` is unused; ``adjacency[u]`` lists the targets of the
    edges leaving ``u``, either as plain nodes or as ``(node, weight)`` pairs.
    Components are numbered from 1 in topological order of the condensed graph.
    """

    def __init__(self, adjacency: Sequence[Sequence[Any]]) -> None:
        graph = _normalise(adjacency)
        self._n = n = len(graph) - 1
        reverse: list[list[int]] = [[] for _ in range(n + 1)]
        for node in range(1, n + 1):
            for to in graph[node]:
                reverse[to].append(node)

        post_order: list[int] = []
        visited = [False] * (n + 1)
        for start in range(1, n + 1):
            if visited[start]:
                continue
            visited[start] = True
            stack = [(start, iter(graph[start]))]
            while stack:
                node, children = stack[-1]
                for child in children:
                    if not visited[child]:
                        visited[child] = True
                        stack.append((child, iter(graph[child])))
                        break
                else:
                    stack.pop()
                    post_order.append(node)

        component = [0] * (n + 1)
        successors: list[list[int]] = [[]]
        count = 0
        for start in reversed(post_order):
            if component[start]:
                continue
            count += 1
            successors.append([])
            component[start] = count
            stack = [iter(reverse[start])]
            while stack:
                for prev in stack[-1]:
                    if component[prev]:
                        if component[prev] != count:
                            successors[component[prev]].append(count)
                        continue
                    component[prev] = count
                    stack.append(iter(reverse[prev]))
                    break
                else:
                    stack.pop()

        self._component = component
        self._count = count
        # Successors are appended in ascending order, so this removes duplicates.
        self._dag = {c: list(dict.fromkeys(successors[c])) for c in range(1, count + 1)}
        groups: dict[int, list[int]] = {c: [] for c in range(1, count + 1)}
        for node in range(1, n + 1):
            groups[component[node]].append(node)
        self._groups = groups

    def count(self) -> int:
        """Return the number of components."""
        return self._count

    def dag(self) -> dict[int, list[int]]:
        """Map each component to the components its edges lead to."""
        return {c: list(targets) for c, targets in self._dag.items()}

    def component_of(self, node: int) -> int:
        """Return the number of the component holding ``node``."""
        if not 1 <= node <= self._n:
            raise IndexError(f"node {node} outside 1..{self._n}")
        return self._component[node]

    def groups(self) -> dict[int, list[int]]:
        """Map each component number to its nodes in ascending order."""
        return {c: list(nodes) for c, nodes in self._groups.items()}


class NotADagError(ValueError):
    """Raised when a graph has a cycle; ``order`` holds the nodes sorted so far."""

    def __init__(self, order: list[int]) -> None:
        super().__init__("the graph has a cycle")
        self.order = order


def topological_sort(adjacency: Sequence[Sequence[Any]]) -> list[int]:
    """Order nodes ``1..N`` so that every edge points forwards (Kahn's method).

    ``adjacency`` has the same form as for ``StronglyConnectedComponents``.
    Raises ``NotADagError`` when the graph has a cycle.
    """
    graph = _normalise(adjacency)
    n = len(graph) - 1
    in_degree = [0] * (n + 1)
    for node in range(1, n + 1):
        for to in graph[node]:
            in_degree[to] += 1

    queue = deque(node for node in range(1, n + 1) if in_degree[node] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for to in graph[node]:
            in_degree[to] -= 1
            if in_degree[to] == 0:
                queue.append(to)

    if len(order) != n:
        raise NotADagError(order)
    return order