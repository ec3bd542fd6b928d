"""Segment tree over an arbitrary monoid."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Generic, TypeVar

X = TypeVar("X")


class SegmentTree(Generic[X]):
    """Point update and range fold over ``[a, b)`` in O(log N)."""

    def __init__(self, values: Sequence[X], op: Callable[[X, X], X], unit: X) -> None:
        self._op = op
        self._unit = unit
        self._n = len(values)
        size = 1
        while size < self._n:
            size *= 2
        self._size = size
        self._data: list[X] = [unit] * (2 * size)
        self._data[size : size + self._n] = list(values)
        for i in range(size - 1, 0, -1):
            self._data[i] = op(self._data[2 * i], self._data[2 * i + 1])

    def _check(self, i: int) -> None:
        if not 0 <= i < self._n:
            raise IndexError(f"index {i} out of range 0..{self._n - 1}")

    def get(self, i: int) -> X:
        """Return the i-th element (0-indexed)."""
        self._check(i)
        return self._data[i + self._size]

    def update(self, i: int, value: X) -> None:
        """Set the i-th element to ``value``."""
        self._check(i)
        index = i + self._size
        self._data[index] = value
        index //= 2
        while index:
            self._data[index] = self._op(self._data[2 * index], self._data[2 * index + 1])
            index //= 2

    def add(self, i: int, value: X) -> None:
        """Add ``value`` to the i-th element."""
        self.update(i, self.get(i) + value)

    def query(self, a: int, b: int) -> X:
        """Fold the elements with indices in ``[a, b)`` in order."""
        lo = max(a, 0) + self._size
        hi = min(b, self._size) + self._size
        left = self._unit
        right = self._unit
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