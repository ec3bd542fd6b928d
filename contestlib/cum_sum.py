"""One- and two-dimensional prefix sums."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import accumulate
from typing import Any


def _prefix(values: Iterable[Any]) -> list[Any]:
    return list(accumulate(values, initial=0))


def _segment(prefix: list[Any], lo: int, hi: int) -> Any:
    """Sum of positions ``lo..hi`` (inclusive), clipped to the line's extent."""
    lo = max(lo, 0)
    hi = min(hi, len(prefix) - 2)
    if lo > hi:
        return 0
    return prefix[hi + 1] - prefix[lo]


class CumSum:
    """Prefix sums of a sequence; ``self[i]`` is the sum of the first i values."""

    def __init__(self, values: Iterable[Any]) -> None:
        self._prefix = _prefix(values)

    def query(self, l: int, r: int) -> Any:
        """Return the sum of the values with indices in ``[l, r)``."""
        if not 0 <= l <= r < len(self._prefix):
            raise IndexError(f"invalid range [{l}, {r})")
        return self._prefix[r] - self._prefix[l]

    def __getitem__(self, index: int) -> Any:
        return self.query(0, index)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._prefix)

    def __len__(self) -> int:
        return len(self._prefix)

    def __str__(self) -> str:
        return " ".join(map(str, self._prefix))


Point = tuple[int, int]


class CumSum2D:
    """Rectangle sums and sums along horizontal, vertical and diagonal lines."""

    def __init__(self, grid: Sequence[Sequence[Any]]) -> None:
        if not grid:
            raise ValueError("grid must not be empty")
        height, width = len(grid), len(grid[0])
        if any(len(row) != width for row in grid):
            raise ValueError("grid rows must all have the same length")
        self._h = height
        self._w = width

        # _area[i + 1][j + 1]: sum of the rectangle with corners (0, 0) and (i, j)
        self._area = [[0] * (width + 1)]
        for row in grid:
            above = self._area[-1]
            running = _prefix(row)
            self._area.append([a + r for a, r in zip(above, running)])

        self._right = [_prefix(row) for row in grid]
        self._down = [_prefix(grid[h][w] for h in range(height)) for w in range(width)]
        # Down-right diagonals starting at (h, 0) and at (0, w).
        self._right_down_h = [
            _prefix(grid[h + d][d] for d in range(min(width, height - h)))
            for h in range(height)
        ]
        self._right_down_w = [
            _prefix(grid[d][w + d] for d in range(min(height, width - w)))
            for w in range(width)
        ]
        # Down-left diagonals starting at (0, w) and at (h, W - 1).
        self._left_down_w = [
            _prefix(grid[d][w - d] for d in range(min(w + 1, height)))
            for w in range(width)
        ]
        self._left_down_h = [
            _prefix(grid[h + d][width - 1 - d] for d in range(min(width, height - h)))
            for h in range(height)
        ]

    def query_area(self, p1: Point, p2: Point) -> Any:
        """Sum of the rectangle with corners ``p1`` and ``p2``, both inclusive."""
        (a, b), (c, d) = p1, p2
        if a > c or b > d:
            raise ValueError("p1 must be the top-left corner of the rectangle")
        if a < 0 or b < 0 or c >= self._h or d >= self._w:
            raise IndexError("rectangle lies outside the grid")
        area = self._area
        return area[c + 1][d + 1] - area[a][d + 1] - area[c + 1][b] + area[a][b]

    def query_line(self, p1: Point, p2: Point) -> Any:
        """Sum of the cells on the straight segment from ``p1`` to ``p2``, inclusive.

        The segment must be horizontal, vertical or diagonal; cells outside the
        grid contribute nothing.
        """
        (h1, w1), (h2, w2) = p1, p2
        dh, dw = h2 - h1, w2 - w1
        if dh == 0:
            return self._query_right(h1, w1, w2)
        if dw == 0:
            return self._query_down(w1, h1, h2)
        if dh + dw == 0:
            return self._query_left_down(h1, w1, w2)
        if dh == dw:
            return self._query_right_down(h1, w1, h2, w2)
        raise ValueError("points are not on a horizontal, vertical or diagonal line")

    def _query_right(self, h: int, w1: int, w2: int) -> Any:
        if not 0 <= h < self._h:
            return 0
        return _segment(self._right[h], min(w1, w2), max(w1, w2))

    def _query_down(self, w: int, h1: int, h2: int) -> Any:
        if not 0 <= w < self._w:
            return 0
        return _segment(self._down[w], min(h1, h2), max(h1, h2))

    def _query_right_down(self, h1: int, w1: int, h2: int, w2: int) -> Any:
        k = h1 - w1
        if k >= 0:
            if k >= self._h:
                return 0
            return _segment(self._right_down_h[k], min(w1, w2), max(w1, w2))
        k = -k
        if k >= self._w:
            return 0
        return _segment(self._right_down_w[k], min(h1, h2), max(h1, h2))

    def _query_left_down(self, h1: int, w1: int, w2: int) -> Any:
        k = h1 + w1
        last = self._w - 1
        if k <= last:
            if k < 0:
                return 0
            h2 = k - w2
            return _segment(self._left_down_w[k], min(h1, h2), max(h1, h2))
        k -= last
        if k >= self._h:
            return 0
        d1, d2 = last - w1, last - w2
        return _segment(self._left_down_h[k], min(d1, d2), max(d1, d2))