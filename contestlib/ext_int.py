"""64-bit integers that saturate at positive and negative infinity."""

from __future__ import annotations

from functools import total_ordering
from typing import Union

INF = (1 << 63) - 1
NINF = -(1 << 63)


def _clamp(x: int) -> int:
    return max(NINF, min(INF, x))


def _truncated_divmod(x: int, v: int) -> tuple[int, int]:
    """Quotient rounded toward zero and the matching remainder."""
    q = abs(x) // abs(v)
    if (x < 0) != (v < 0):
        q = -q
    return q, x - v * q


@total_ordering
class ExtInt:
    """A signed 64-bit integer whose extreme values act as +infinity and -infinity.

    ``INF`` is the largest and ``NINF`` the smallest 64-bit value; note that
    ``INF != -NINF``. Finite results that leave the range saturate to the
    matching infinity.
    """

    __slots__ = ("_x",)

    INF = INF
    NINF = NINF

    def __init__(self, x: Union[int, "ExtInt"] = 0) -> None:
        value = x._x if isinstance(x, ExtInt) else int(x)
        if not NINF <= value <= INF:
            raise OverflowError(f"{value} does not fit in 64 bits")
        self._x = value

    @property
    def value(self) -> int:
        return self._x

    def is_inf(self) -> bool:
        return self._x == INF

    def is_negative_inf(self) -> bool:
        return self._x == NINF

    def is_finite(self) -> bool:
        return not (self.is_inf() or self.is_negative_inf())

    def __int__(self) -> int:
        return self._x

    def __index__(self) -> int:
        return self._x

    def __repr__(self) -> str:
        if self.is_inf():
            return "ExtInt(INF)"
        if self.is_negative_inf():
            return "ExtInt(NINF)"
        return f"ExtInt({self._x})"

    def __str__(self) -> str:
        return str(self._x)

    def __pos__(self) -> ExtInt:
        return ExtInt(self._x)

    def __neg__(self) -> ExtInt:
        """Negate; the infinities swap, and ``NINF + 1`` becomes ``INF``."""
        if self.is_inf():
            return ExtInt(NINF)
        if self.is_negative_inf():
            return ExtInt(INF)
        return ExtInt(-self._x)

    def __add__(self, other: object) -> ExtInt:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        if (self.is_inf() and rhs.is_negative_inf()) or (
            self.is_negative_inf() and rhs.is_inf()
        ):
            raise ValueError("INF + NINF is undefined")
        if self.is_inf() or rhs.is_inf():
            return ExtInt(INF)
        if self.is_negative_inf() or rhs.is_negative_inf():
            return ExtInt(NINF)
        return ExtInt(_clamp(self._x + rhs._x))

    __radd__ = __add__

    def __sub__(self, other: object) -> ExtInt:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self + (-rhs)

    def __rsub__(self, other: object) -> ExtInt:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + (-self)

    def __mul__(self, other: object) -> ExtInt:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        x, v = self._x, rhs._x
        if not self.is_finite():
            if v == 0:
                raise ValueError("infinity times zero is undefined")
            return self if v > 0 else -self
        if not rhs.is_finite():
            if x == 0:
                raise ValueError("zero times infinity is undefined")
            return ExtInt(rhs) if x > 0 else -rhs
        return ExtInt(_clamp(x * v))

    __rmul__ = __mul__

    def __floordiv__(self, other: object) -> ExtInt:
        """Divide, rounding toward zero as fixed-width integers do."""
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        if not self.is_finite() and not rhs.is_finite():
            raise ValueError("infinity divided by infinity is undefined")
        if rhs._x == 0:
            raise ZeroDivisionError("division by zero")
        if not rhs.is_finite():
            return ExtInt(0)
        if not self.is_finite():
            return -self if rhs._x < 0 else ExtInt(self)
        quotient, _ = _truncated_divmod(self._x, rhs._x)
        return ExtInt(quotient)

    def __rfloordiv__(self, other: object) -> ExtInt:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs // self

    def __mod__(self, other: object) -> ExtInt:
        """Remainder whose sign follows the dividend; both sides must be finite."""
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        if not (self.is_finite() and rhs.is_finite()):
            raise ValueError("modulo requires finite operands")
        if rhs._x == 0:
            raise ZeroDivisionError("modulo by zero")
        _, remainder = _truncated_divmod(self._x, rhs._x)
        return ExtInt(remainder)

    def __rmod__(self, other: object) -> ExtInt:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs % self

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._x == rhs._x

    def __lt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._x < rhs._x

    def __hash__(self) -> int:
        return hash(self._x)


def _coerce(other: object) -> ExtInt | None:
    if isinstance(other, ExtInt):
        return other
    if isinstance(other, int) and not isinstance(other, bool):
        return ExtInt(other)
    return None