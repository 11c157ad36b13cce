"""Coordinate compression, run-length encoding and base conversion."""

from __future__ import annotations

from bisect import bisect_left
from itertools import groupby
from typing import Generic, Hashable, Iterable, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

_DIGIT_CHARS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class PosCompression(Generic[T]):
    """Map the distinct values of a collection onto ``0..n-1`` in sorted order."""

    def __init__(self, data: Iterable[T]) -> None:
        self._values: list[T] = sorted(set(data))

    def __len__(self) -> int:
        return len(self._values)

    def encode(self, value: T) -> int:
        """Return the rank of ``value`` among the distinct values."""
        index = bisect_left(self._values, value)
        if index == len(self._values) or self._values[index] != value:
            raise ValueError(f"value {value!r} was not registered")
        return index

    def decode(self, index: int) -> T:
        """Return the value whose rank is ``index``."""
        if not 0 <= index < len(self._values):
            raise IndexError(f"index {index} out of range for {len(self._values)} values")
        return self._values[index]


def run_length_encoding(values: Iterable[T]) -> list[tuple[T, int]]:
    """Collapse runs of equal neighbours into ``(value, count)`` pairs."""
    return [(key, sum(1 for _ in run)) for key, run in groupby(values)]


def _check_base(base: int) -> None:
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, got {base}")


class BaseConversion:
    """A non-negative integer that can be written in any base from 2 to 36."""

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"value must be non-negative, got {value}")
        self._value = value

    @classmethod
    def from_digits(cls, base: int, digits: Iterable[int]) -> BaseConversion:
        """Build from digits given most significant first."""
        _check_base(base)
        value = 0
        for digit in digits:
            if not 0 <= digit < base:
                raise ValueError(f"digit {digit} is not valid in base {base}")
            value = value * base + digit
        return cls(value)

    @classmethod
    def from_string(cls, base: int, text: str) -> BaseConversion:
        """Build from a string of the characters ``0-9`` and ``A-Z``."""
        _check_base(base)
        digits = []
        for char in text:
            index = _DIGIT_CHARS.find(char) if char else -1
            if index < 0 or len(char) != 1:
                raise ValueError(f"invalid digit character {char!r}")
            digits.append(index)
        return cls.from_digits(base, digits)

    def digits(self, base: int) -> list[int]:
        """Return the digits in ``base``, most significant first."""
        _check_base(base)
        if self._value == 0:
            return [0]
        result = []
        value = self._value
        while value > 0:
            value, digit = divmod(value, base)
            result.append(digit)
        result.reverse()
        return result

    def to_string(self, base: int) -> str:
        """Return the value written in ``base`` with upper-case letters."""
        return "".join(_DIGIT_CHARS[d] for d in self.digits(base))

    @property
    def value(self) -> int:
        """The value as a Python integer."""
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseConversion):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"BaseConversion({self._value})"