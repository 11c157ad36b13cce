"""Link-cut tree over a forest of nodes numbered from 1."""

from __future__ import annotations

import operator
from typing import Any, Callable, Optional


class _Node:
    __slots__ = ("idx", "key", "sum", "lazy", "size", "left", "right", "parent", "rev")

    def __init__(self, idx: int, key: Any, lazy: Any) -> None:
        self.idx = idx
        self.key = key
        self.sum = key
        self.lazy = lazy
        self.size = 1
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None
        self.parent: Optional[_Node] = None
        self.rev = False

    def is_root(self) -> bool:
        p = self.parent
        return p is None or (p.left is not self and p.right is not self)


def _same(value: Any) -> Any:
    return value


class LinkCutTree:
    """Dynamic forest supporting link, cut, re-rooting and path folds.

    ``op`` folds node values along a path from its first node to its last,
    ``flip`` turns the fold of a path into the fold of the reversed path and
    ``identity`` is the value of new nodes when none is given.  ``act``,
    ``compose`` and ``lazy_identity`` describe optional lazy operators:
    ``act(value, lazy, length)`` applies a lazy operator to a fold of
    ``length`` nodes.
    """

    def __init__(
        self,
        op: Callable[[Any, Any], Any] = operator.add,
        flip: Callable[[Any], Any] = _same,
        identity: Any = 0,
        act: Optional[Callable[[Any, Any, int], Any]] = None,
        compose: Optional[Callable[[Any, Any], Any]] = None,
        lazy_identity: Any = None,
    ) -> None:
        self._op = op
        self._flip = flip
        self._identity = identity
        self._act = act
        self._compose = compose
        self._lazy_identity = lazy_identity
        self._nodes: list[_Node] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def make_node(self, value: Any = None) -> int:
        """Add an isolated node and return its number."""
        if value is None:
            value = self._identity
        idx = len(self._nodes) + 1
        self._nodes.append(_Node(idx, value, self._lazy_identity))
        return idx

    def _node(self, idx: int) -> _Node:
        if not 1 <= idx <= len(self._nodes):
            raise IndexError(f"node {idx} outside 1..{len(self._nodes)}")
        return self._nodes[idx - 1]

    # -- splay tree internals -------------------------------------------------

    def _propagate(self, t: _Node, x: Any) -> None:
        assert self._act is not None and self._compose is not None
        t.lazy = self._compose(t.lazy, x)
        t.key = self._act(t.key, x, 1)
        t.sum = self._act(t.sum, x, t.size)

    def _toggle(self, t: _Node) -> None:
        t.left, t.right = t.right, t.left
        t.sum = self._flip(t.sum)
        t.rev = not t.rev

    def _push(self, t: _Node) -> None:
        if self._act is not None and t.lazy != self._lazy_identity:
            if t.left is not None:
                self._propagate(t.left, t.lazy)
            if t.right is not None:
                self._propagate(t.right, t.lazy)
            t.lazy = self._lazy_identity
        if t.rev:
            if t.left is not None:
                self._toggle(t.left)
            if t.right is not None:
                self._toggle(t.right)
            t.rev = False

    def _update(self, t: _Node) -> None:
        t.size = 1
        t.sum = t.key
        if t.left is not None:
            t.size += t.left.size
            t.sum = self._op(t.left.sum, t.sum)
        if t.right is not None:
            t.size += t.right.size
            t.sum = self._op(t.sum, t.right.sum)

    def _attach_above(self, t: _Node, x: _Node, y: Optional[_Node]) -> None:
        t.parent = y
        if y is not None:
            if y.left is x:
                y.left = t
            if y.right is x:
                y.right = t
            self._update(y)

    def _rotate_right(self, t: _Node) -> None:
        x = t.parent
        assert x is not None
        y = x.parent
        x.left = t.right
        if x.left is not None:
            x.left.parent = x
        t.right = x
        x.parent = t
        self._update(x)
        self._update(t)
        self._attach_above(t, x, y)

    def _rotate_left(self, t: _Node) -> None:
        x = t.parent
        assert x is not None
        y = x.parent
        x.right = t.left
        if x.right is not None:
            x.right.parent = x
        t.left = x
        x.parent = t
        self._update(x)
        self._update(t)
        self._attach_above(t, x, y)

    def _splay(self, t: _Node) -> None:
        self._push(t)
        while not t.is_root():
            q = t.parent
            assert q is not None
            if q.is_root():
                self._push(q)
                self._push(t)
                if q.left is t:
                    self._rotate_right(t)
                else:
                    self._rotate_left(t)
            else:
                r = q.parent
                assert r is not None
                self._push(r)
                self._push(q)
                self._push(t)
                if r.left is q:
                    if q.left is t:
                        self._rotate_right(q)
                        self._rotate_right(t)
                    else:
                        self._rotate_left(t)
                        self._rotate_right(t)
                else:
                    if q.right is t:
                        self._rotate_left(q)
                        self._rotate_left(t)
                    else:
                        self._rotate_right(t)
                        self._rotate_left(t)

    def _expose(self, t: _Node) -> Optional[_Node]:
        last: Optional[_Node] = None
        cur: Optional[_Node] = t
        while cur is not None:
            self._splay(cur)
            cur.right = last
            self._update(cur)
            last = cur
            cur = cur.parent
        self._splay(t)
        return last

    def _evert(self, t: _Node) -> None:
        self._expose(t)
        self._toggle(t)
        self._push(t)

    def _root_of(self, x: _Node) -> _Node:
        self._expose(x)
        while x.left is not None:
            self._push(x)
            x = x.left
        return x

    def _kth(self, x: _Node, k: int) -> Optional[_Node]:
        self._expose(x)
        cur: Optional[_Node] = x
        while cur is not None:
            self._push(cur)
            if cur.right is not None and cur.right.size > k:
                cur = cur.right
            else:
                if cur.right is not None:
                    k -= cur.right.size
                if k == 0:
                    return cur
                k -= 1
                cur = cur.left
        return None

    # -- public operations ----------------------------------------------------

    def link(self, child: int, parent: int) -> None:
        """Join the tree of ``child`` under ``parent`` by an edge between them."""
        child_node = self._node(child)
        parent_node = self._node(parent)
        if self._root_of(child_node) is self._root_of(parent_node):
            raise ValueError(f"nodes {child} and {parent} are already connected")
        self._evert(child_node)
        self._expose(child_node)
        self._expose(parent_node)
        child_node.parent = parent_node
        parent_node.right = child_node
        self._update(parent_node)

    def cut(self, u: int, v: int) -> None:
        """Remove the edge between ``u`` and ``v``."""
        if u == v or not self.is_connected(u, v):
            raise ValueError(f"no edge between {u} and {v}")
        self.set_root(v)
        u_node = self._node(u)
        self._expose(u_node)
        upper = u_node.left
        if upper is None:
            raise ValueError(f"no edge between {u} and {v}")
        u_node.left = None
        upper.parent = None
        self._update(u_node)

    def set_root(self, node: int) -> None:
        """Make ``node`` the root of its tree."""
        self._evert(self._node(node))

    def get_root(self, node: int) -> int:
        """Return the root of the tree holding ``node``."""
        return self._root_of(self._node(node)).idx

    def path_to_root(self, node: int) -> list[int]:
        """Return the nodes from ``node`` up to its root, in that order."""
        start = self._node(node)
        self._expose(start)
        result: list[int] = []
        stack: list[_Node] = []
        cur: Optional[_Node] = start
        while stack or cur is not None:
            while cur is not None:
                self._push(cur)
                stack.append(cur)
                cur = cur.right
            cur = stack.pop()
            result.append(cur.idx)
            cur = cur.left
        return result

    def kth_to_root(self, node: int, k: int) -> Optional[int]:
        """Return the ``k``-th node on the way from ``node`` to its root, or None."""
        if k < 0:
            return None
        found = self._kth(self._node(node), k)
        return None if found is None else found.idx

    def kth_between(self, u: int, v: int, k: int) -> Optional[int]:
        """Return the ``k``-th node on the path from ``u`` to ``v``, or None."""
        if not self.is_connected(u, v):
            return None
        self._evert(self._node(v))
        return self.kth_to_root(u, k)

    def is_connected(self, u: int, v: int) -> bool:
        """Tell whether both nodes are in the same tree."""
        return self._root_of(self._node(u)) is self._root_of(self._node(v))

    def lca(self, u: int, v: int) -> Optional[int]:
        """Return the lowest common ancestor of both nodes, or None if apart."""
        u_node = self._node(u)
        v_node = self._node(v)
        if self._root_of(u_node) is not self._root_of(v_node):
            return None
        self._expose(u_node)
        found = self._expose(v_node)
        assert found is not None
        return found.idx

    def set_value(self, node: int, value: Any) -> None:
        """Replace the value of ``node``."""
        t = self._node(node)
        self._expose(t)
        t.key = value
        self._update(t)

    def query(self, u: int, v: Optional[int] = None) -> Any:
        """Fold the values from the root to ``u``, or from ``u`` to ``v``."""
        if v is None:
            t = self._node(u)
            self._expose(t)
            return t.sum
        if not self.is_connected(u, v):
            raise ValueError(f"nodes {u} and {v} are not connected")
        self._evert(self._node(u))
        return self.query(v)