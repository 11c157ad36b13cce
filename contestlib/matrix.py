"""Dense matrices with arithmetic and fast exponentiation."""

from __future__ import annotations

from typing import Any, Iterable, Sequence, Union


class Matrix:
    """A rectangular matrix of numbers stored row by row.

    ``matrix[i]`` is the mutable row ``i`` and ``matrix[i, j]`` a single
    element, both indexed from 0.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: Iterable[Sequence[Any]]) -> None:
        data = [list(row) for row in rows]
        if not data:
            raise ValueError("a matrix needs at least one row")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise ValueError("all rows of a matrix must have the same length")
        self._rows = data

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """Return a ``rows`` by ``cols`` matrix filled with zeros."""
        if rows < 1 or cols < 0:
            raise ValueError(f"invalid matrix shape ({rows}, {cols})")
        return cls([0] * cols for _ in range(rows))

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """Return the ``n`` by ``n`` identity matrix."""
        result = cls.zeros(n, n)
        for i in range(n):
            result._rows[i][i] = 1
        return result

    @property
    def shape(self) -> tuple[int, int]:
        """The pair ``(rows, columns)``."""
        return len(self._rows), len(self._rows[0])

    def __getitem__(self, index: Union[int, tuple[int, int]]) -> Any:
        if isinstance(index, tuple):
            i, j = index
            return self._rows[i][j]
        return self._rows[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r})"

    def __str__(self) -> str:
        return "".join(
            "[ " + "".join(f"{value} " for value in row) + "]\n" for row in self._rows
        )

    def _copy(self) -> Matrix:
        return Matrix(self._rows)

    def _check_same_shape(self, other: Matrix) -> None:
        if self.shape != other.shape:
            raise ValueError(f"shape mismatch: {self.shape} and {other.shape}")

    def __pos__(self) -> Matrix:
        return self._copy()

    def __neg__(self) -> Matrix:
        return Matrix([-value for value in row] for row in self._rows)

    def __iadd__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        for row, other_row in zip(self._rows, other._rows):
            for j, value in enumerate(other_row):
                row[j] += value
        return self

    def __isub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        for row, other_row in zip(self._rows, other._rows):
            for j, value in enumerate(other_row):
                row[j] -= value
        return self

    def __imatmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape[1] != other.shape[0]:
            raise ValueError(f"cannot multiply {self.shape} by {other.shape}")
        columns = list(zip(*other._rows))
        self._rows = [
            [sum(a * b for a, b in zip(row, column)) for column in columns]
            for row in self._rows
        ]
        if not columns:
            self._rows = [[] for _ in self._rows]
        return self

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self._copy()
        result += other
        return result

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self._copy()
        result -= other
        return result

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self._copy()
        result @= other
        return result

    def pow(self, n: int) -> Matrix:
        """Raise a square matrix to the power ``n >= 0`` by repeated squaring."""
        rows, cols = self.shape
        if rows != cols:
            raise ValueError(f"only square matrices have powers, got {self.shape}")
        if n < 0:
            raise ValueError("negative powers are not supported")
        result = Matrix.identity(rows)
        base = self._copy()
        while n > 0:
            if n & 1:
                result @= base
            base @= base
            n >>= 1
        return result