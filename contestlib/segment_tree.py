"""Segment tree over an associative binary operation."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


class SegmentTree(Generic[T]):
    """Point updates and range folds over a monoid in O(log N).

    ``op`` must be associative and ``unit`` its identity element.  The fold
    keeps the left-to-right order of the elements, so ``op`` need not be
    commutative.
    """

    def __init__(self, values: Iterable[T], op: Callable[[T, T], T], unit: T) -> None:
        items = list(values)
        self._n = len(items)
        self._op = op
        self._unit = unit

        size = 1
        while size < self._n:
            size *= 2
        self._size = size

        self._data: list[T] = [unit] * (2 * size)
        self._data[size : size + self._n] = items
        for i in range(size - 1, 0, -1):
            self._data[i] = op(self._data[2 * i], self._data[2 * i + 1])

    def __len__(self) -> int:
        return self._n

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} out of range for {self._n} elements")

    def get(self, index: int) -> T:
        """Return the element at ``index``."""
        self._check_index(index)
        return self._data[index + self._size]

    def update(self, index: int, value: T) -> None:
        """Replace the element at ``index`` with ``value``."""
        self._check_index(index)
        pos = index + self._size
        self._data[pos] = value
        pos //= 2
        while pos:
            self._data[pos] = self._op(self._data[2 * pos], self._data[2 * pos + 1])
            pos //= 2

    def add(self, index: int, value: T) -> None:
        """Add ``value`` to the element at ``index``."""
        self.update(index, self.get(index) + value)  # type: ignore[operator]

    def query(self, start: int, stop: int) -> T:
        """Fold the elements of the half-open range ``[start, stop)``."""
        if not 0 <= start <= stop <= self._n:
            raise IndexError(f"invalid range [{start}, {stop}) for {self._n} elements")

        left = self._unit
        right = self._unit
        lo = start + self._size
        hi = stop + self._size
        while lo < hi:
            if lo & 1:
                left = self._op(left, self._data[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                right = self._op(self._data[hi], right)
            lo //= 2
            hi //= 2
        return self._op(left, right)