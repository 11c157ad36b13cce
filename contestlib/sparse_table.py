"""Sparse table for idempotent range queries."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


class SparseTable(Generic[T]):
    """Static range folds in O(1) after O(N log N) preprocessing.

    ``op`` must be associative and idempotent (min, max, gcd, ...).
    """

    def __init__(self, values: Iterable[T], op: Callable[[T, T], T]) -> None:
        items = list(values)
        if not items:
            raise ValueError("a sparse table needs at least one value")
        self._n = len(items)
        self._op = op

        self._log = [0] * (self._n + 1)
        for i in range(2, self._n + 1):
            self._log[i] = self._log[i >> 1] + 1

        self._table: list[list[T]] = [items]
        for level in range(1, self._log[self._n] + 1):
            prev = self._table[-1]
            half = 1 << (level - 1)
            width = 1 << level
            self._table.append(
                [op(prev[i], prev[i + half]) for i in range(self._n - width + 1)]
            )

    def __len__(self) -> int:
        return self._n

    def query(self, start: int, stop: int) -> T:
        """Fold the elements of the half-open range ``[start, stop)``."""
        if start < 0 or stop > self._n:
            raise IndexError(f"range [{start}, {stop}) outside {self._n} elements")
        if start >= stop:
            raise ValueError(f"empty range [{start}, {stop})")
        level = self._log[stop - start]
        row = self._table[level]
        return self._op(row[start], row[stop - (1 << level)])