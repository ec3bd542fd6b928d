"""Integers modulo a runtime-chosen modulus."""

from __future__ import annotations

from typing import Union

DEFAULT_MOD = 998244353


class ModInt:
    """An integer reduced modulo ``mod``.

    Arithmetic with plain ints is allowed. Arithmetic between two values with
    different moduli raises ValueError. Division and ``inv`` assume a prime
    modulus.
    """

    __slots__ = ("_value", "_mod")

    def __init__(self, value: Union[int, "ModInt"] = 0, mod: int = DEFAULT_MOD) -> None:
        if mod < 1:
            raise ValueError(f"modulus must be positive, got {mod}")
        raw = value._value if isinstance(value, ModInt) else int(value)
        self._mod = mod
        self._value = raw % mod

    @classmethod
    def raw(cls, value: int, mod: int = DEFAULT_MOD) -> ModInt:
        """Build from a value already known to lie in ``[0, mod)``."""
        if not 0 <= value < mod:
            raise ValueError(f"{value} is not in [0, {mod})")
        result = cls.__new__(cls)
        result._value = value
        result._mod = mod
        return result

    @property
    def value(self) -> int:
        return self._value

    @property
    def mod(self) -> int:
        return self._mod

    def _coerce(self, other: object) -> ModInt | None:
        if isinstance(other, ModInt):
            if other._mod != self._mod:
                raise ValueError(f"moduli differ: {self._mod} and {other._mod}")
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return ModInt(other, self._mod)
        return None

    def _make(self, value: int) -> ModInt:
        return ModInt(value, self._mod)

    def pow(self, n: int) -> ModInt:
        """Return ``self ** n``; a negative ``n`` uses the inverse."""
        if self._value == 0 and n == 0:
            raise ValueError("0 ** 0 is undefined")
        if n < 0:
            return self.inv().pow(-n)
        return self._make(pow(self._value, n, self._mod))

    def __pow__(self, n: int) -> ModInt:
        return self.pow(n)

    def inv(self) -> ModInt:
        """Return the multiplicative inverse (Fermat's little theorem)."""
        if self._value == 0:
            raise ZeroDivisionError("zero has no inverse")
        return self._make(pow(self._value, self._mod - 2, self._mod))

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"ModInt({self._value}, {self._mod})"

    def __str__(self) -> str:
        return str(self._value)

    def __pos__(self) -> ModInt:
        return self._make(self._value)

    def __neg__(self) -> ModInt:
        return self._make(-self._value)

    def __add__(self, other: object) -> ModInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._make(self._value + rhs._value)

    def __radd__(self, other: object) -> ModInt:
        return self.__add__(other)

    def __sub__(self, other: object) -> ModInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._make(self._value - rhs._value)

    def __rsub__(self, other: object) -> ModInt:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return self._make(lhs._value - self._value)

    def __mul__(self, other: object) -> ModInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._make(self._value * rhs._value)

    def __rmul__(self, other: object) -> ModInt:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> ModInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self * rhs.inv()

    def __rtruediv__(self, other: object) -> ModInt:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self.inv()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ModInt):
            return self._mod == other._mod and self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)