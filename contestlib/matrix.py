"""Dense matrices over any ring-like element type."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from contestlib.modint import ModInt


class Matrix:
    """An M x N matrix stored as a list of rows."""

    def __init__(self, rows: Iterable[Sequence[Any]]) -> None:
        self._rows = [list(row) for row in rows]
        width = len(self._rows[0]) if self._rows else 0
        if any(len(row) != width for row in self._rows):
            raise ValueError("rows must all have the same length")
        self._m = len(self._rows)
        self._n = width

    @classmethod
    def zeros(cls, m: int, n: int) -> Matrix:
        return cls([[0] * n for _ in range(m)])

    @classmethod
    def identity(cls, n: int) -> Matrix:
        return cls([[1 if i == j else 0 for j in range(n)] for i in range(n)])

    @property
    def shape(self) -> tuple[int, int]:
        return self._m, self._n

    def __getitem__(self, i: int) -> list[Any]:
        return self._rows[i]

    def __iter__(self):
        return iter(self._rows)

    def __pos__(self) -> Matrix:
        return Matrix(self._rows)

    def __neg__(self) -> Matrix:
        return Matrix([[-x for x in row] for row in self._rows])

    def _check_same_shape(self, other: Matrix) -> None:
        if self.shape != other.shape:
            raise ValueError(f"shape mismatch: {self.shape} and {other.shape}")

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(
            [[a + b for a, b in zip(r1, r2)] for r1, r2 in zip(self._rows, other._rows)]
        )

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(
            [[a - b for a, b in zip(r1, r2)] for r1, r2 in zip(self._rows, other._rows)]
        )

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._n != other._m:
            raise ValueError(f"cannot multiply {self.shape} by {other.shape}")
        columns = list(zip(*other._rows)) if other._rows else []
        if not columns:
            columns = [()] * other._n
        return Matrix(
            [[sum((a * b for a, b in zip(row, col)), 0) for col in columns] for row in self._rows]
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join(
            "[ " + "".join(f"{x} " for x in row) + "]\n" for row in self._rows
        )

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r})"

    def pow(self, n: int) -> Matrix:
        """Return ``self ** n`` by repeated squaring; ``n == 0`` gives the identity."""
        if self._m != self._n:
            raise ValueError("only square matrices can be raised to a power")
        if n < 0:
            raise ValueError("negative powers are not supported")
        sample = self._rows[0][0] if self._rows else 0
        zero = sample * 0
        one = zero + 1
        result = Matrix(
            [[one if i == j else zero for j in range(self._n)] for i in range(self._n)]
        )
        base = self
        while n > 0:
            if n & 1:
                result = result @ base
            base = base @ base
            n >>= 1
        return result

    def __pow__(self, n: int) -> Matrix:
        return self.pow(n)


def geometric_sum(a: int, x: int, m: int) -> int:
    """Return ``(1 + a + a**2 + ... + a**(x-1)) mod m`` for ``x >= 1``."""
    if x < 1:
        raise ValueError("the number of terms must be at least 1")
    step = Matrix(
        [[ModInt(a, m), ModInt(1, m)], [ModInt(0, m), ModInt(1, m)]]
    )
    c = step.pow(x - 1)
    return int(c[0][0] + c[0][1])