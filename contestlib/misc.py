"""Coordinate compression and run-length encoding."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable
from typing import Any


class PosCompression:
    """Maps values to their rank among the distinct values given."""

    def __init__(self, data: Iterable[Any] = ()) -> None:
        self._values = sorted(set(data))

    def encode(self, value: Any) -> int:
        """Return the number of registered values smaller than ``value``."""
        return bisect_left(self._values, value)

    def decode(self, index: int) -> Any:
        """Return the registered value whose rank is ``index``."""
        if not 0 <= index < len(self._values):
            raise IndexError(f"index {index} out of range 0..{len(self._values) - 1}")
        return self._values[index]

    def __len__(self) -> int:
        return len(self._values)


def run_length_encoding(seq: Iterable[Any]) -> list[tuple[Any, int]]:
    """Collapse runs of equal adjacent items into ``(item, count)`` pairs."""
    encoded: list[tuple[Any, int]] = []
    for item in seq:
        if encoded and encoded[-1][0] == item:
            encoded[-1] = (item, encoded[-1][1] + 1)
        else:
            encoded.append((item, 1))
    return encoded