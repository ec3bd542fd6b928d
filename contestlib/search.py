"""Neighbour searches in sorted sequences and static range frequency."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Hashable, Sequence
from typing import Any


def find_min_greater_eq(values: Sequence[Any], value: Any) -> int | None:
    """Index of the smallest element ``>= value`` in sorted ``values``, or None."""
    index = bisect_left(values, value)
    return index if index < len(values) else None


def find_min_greater(values: Sequence[Any], value: Any) -> int | None:
    """Index of the smallest element ``> value`` in sorted ``values``, or None."""
    index = bisect_right(values, value)
    return index if index < len(values) else None


def find_max_less_eq(values: Sequence[Any], value: Any) -> int | None:
    """Index of the largest element ``<= value`` in sorted ``values``, or None."""
    index = bisect_right(values, value)
    return index - 1 if index > 0 else None


def find_max_less(values: Sequence[Any], value: Any) -> int | None:
    """Index of the largest element ``< value`` in sorted ``values``, or None."""
    index = bisect_left(values, value)
    return index - 1 if index > 0 else None


class RangeFrequency:
    """Counts occurrences of a value within an index range of a fixed sequence."""

    def __init__(self, values: Sequence[Hashable]) -> None:
        self._positions: dict[Hashable, list[int]] = {}
        for i, value in enumerate(values):
            self._positions.setdefault(value, []).append(i)

    def count(self, l: int, r: int, x: Hashable) -> int:
        """Return how many indices in ``[l, r)`` hold ``x``."""
        positions = self._positions.get(x)
        if positions is None or l >= r:
            return 0
        first = find_min_greater_eq(positions, l)
        last = find_max_less(positions, r)
        if first is None or last is None:
            return 0
        return last - first + 1