"""Sparse table for idempotent associative range folds."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class SparseTable(Generic[T]):
    """O(N log N) preprocessing, O(1) queries for min, max, gcd and the like."""

    def __init__(self, seq: Sequence[T], op: Callable[[T, T], T]) -> None:
        if not seq:
            raise ValueError("sequence must not be empty")
        self._op = op
        self._n = len(seq)
        self._table: list[list[T]] = [list(seq)]
        k = 1
        while (1 << k) <= self._n:
            prev = self._table[-1]
            half = 1 << (k - 1)
            self._table.append(
                [op(prev[i], prev[i + half]) for i in range(self._n - (1 << k) + 1)]
            )
            k += 1

    def query(self, l: int, r: int) -> T:
        """Fold the half-open range ``[l, r)``; requires ``0 <= l < r <= N``."""
        if not 0 <= l < r <= self._n:
            raise ValueError(f"invalid range [{l}, {r}) for length {self._n}")
        k = (r - l).bit_length() - 1
        row = self._table[k]
        return self._op(row[l], row[r - (1 << k)])