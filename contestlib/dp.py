"""Dynamic-programming routines."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from typing import Any


def longest_increasing_subsequence(values: Sequence[Any]) -> list[Any]:
    """Return one longest strictly increasing subsequence of ``values``."""
    tail_values: list[Any] = []  # smallest last value of an increasing run of each length
    tail_indices: list[int] = []
    previous: list[int] = []

    for i, v in enumerate(values):
        pos = bisect_left(tail_values, v)
        previous.append(tail_indices[pos - 1] if pos > 0 else -1)
        if pos == len(tail_values):
            tail_values.append(v)
            tail_indices.append(i)
        else:
            tail_values[pos] = v
            tail_indices[pos] = i

    if not tail_indices:
        return []

    result = []
    i = tail_indices[-1]
    while i != -1:
        result.append(values[i])
        i = previous[i]
    result.reverse()
    return result