"""Sequence with range fold, range update and range reversal (lazy randomized BST)."""

from __future__ import annotations

import operator
import random
from collections.abc import Callable, Iterator, Sequence
from typing import Any


def _identity(x: Any) -> Any:
    return x


class _Node:
    __slots__ = ("left", "right", "key", "total", "lazy", "size", "rev")

    def __init__(self, key: Any, lazy: Any) -> None:
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.key = key
        self.total = key
        self.lazy = lazy
        self.size = 1
        self.rev = False


def _size(t: _Node | None) -> int:
    return t.size if t else 0


class ReversibleList:
    """A list supporting O(log N) fold, lazy map and reversal over ranges.

    ``op`` folds values, ``mapping(value, e)`` applies an operator ``e``,
    ``composition(e1, e2)`` composes operators, and ``toggle`` transforms a
    folded value when its range is reversed. ``unit`` is the fold of an empty
    range and ``lazy_unit`` the operator that does nothing.
    """

    def __init__(
        self,
        values: Sequence[Any] = (),
        op: Callable[[Any, Any], Any] = operator.add,
        mapping: Callable[[Any, Any], Any] = operator.add,
        composition: Callable[[Any, Any], Any] = operator.add,
        toggle: Callable[[Any], Any] = _identity,
        unit: Any = 0,
        lazy_unit: Any = 0,
    ) -> None:
        self._op = op
        self._mapping = mapping
        self._composition = composition
        self._toggle_fn = toggle
        self._unit = unit
        self._lazy_unit = lazy_unit
        self._rng = random.Random(88172645463325252)
        values = list(values)
        self._root = self._build(values, 0, len(values)) if values else None

    def _build(self, values: list[Any], lo: int, hi: int) -> _Node:
        mid = (lo + hi) // 2
        node = _Node(values[mid], self._lazy_unit)
        if lo < mid:
            node.left = self._build(values, lo, mid)
        if mid + 1 < hi:
            node.right = self._build(values, mid + 1, hi)
        return self._update(node)

    def _toggle(self, t: _Node | None) -> None:
        if t is None:
            return
        t.left, t.right = t.right, t.left
        t.total = self._toggle_fn(t.total)
        t.rev = not t.rev

    def _propagate(self, t: _Node, e: Any) -> None:
        t.lazy = self._composition(t.lazy, e)
        t.key = self._mapping(t.key, e)
        t.total = self._mapping(t.total, e)

    def _push(self, t: _Node) -> None:
        if t.rev:
            self._toggle(t.left)
            self._toggle(t.right)
            t.rev = False
        if t.lazy != self._lazy_unit:
            if t.left:
                self._propagate(t.left, t.lazy)
            if t.right:
                self._propagate(t.right, t.lazy)
            t.lazy = self._lazy_unit

    def _update(self, t: _Node) -> _Node:
        self._push(t)
        t.size = 1
        t.total = t.key
        if t.left:
            t.size += t.left.size
            t.total = self._op(t.left.total, t.total)
        if t.right:
            t.size += t.right.size
            t.total = self._op(t.total, t.right.total)
        return t

    def _merge(self, l: _Node | None, r: _Node | None) -> _Node | None:
        if l is None or r is None:
            return l or r
        if self._rng.randrange(l.size + r.size) < l.size:
            self._push(l)
            l.right = self._merge(l.right, r)
            return self._update(l)
        self._push(r)
        r.left = self._merge(l, r.left)
        return self._update(r)

    def _split(self, t: _Node | None, k: int) -> tuple[_Node | None, _Node | None]:
        if t is None:
            return None, None
        self._push(t)
        if k <= _size(t.left):
            a, b = self._split(t.left, k)
            t.left = b
            return a, self._update(t)
        a, b = self._split(t.right, k - _size(t.left) - 1)
        t.right = a
        return self._update(t), b

    def _check_index(self, k: int) -> None:
        if not 0 <= k < len(self):
            raise IndexError(f"index {k} out of range 0..{len(self) - 1}")

    def _check_range(self, a: int, b: int) -> None:
        if not 0 <= a <= b <= len(self):
            raise IndexError(f"invalid range [{a}, {b}) for length {len(self)}")

    def __len__(self) -> int:
        return _size(self._root)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node:
            while node:
                self._push(node)
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __str__(self) -> str:
        return " ".join(map(str, self))

    def get(self, k: int) -> Any:
        """Return the k-th element."""
        self._check_index(k)
        return self.query(k, k + 1)

    def set(self, k: int, value: Any) -> None:
        """Replace the k-th element with ``value``."""
        self._check_index(k)
        a, b = self._split(self._root, k)
        _, c = self._split(b, 1)
        self._root = self._merge(self._merge(a, _Node(value, self._lazy_unit)), c)

    def erase(self, k: int) -> None:
        """Remove the k-th element."""
        self._check_index(k)
        a, b = self._split(self._root, k)
        _, c = self._split(b, 1)
        self._root = self._merge(a, c)

    def query(self, a: int, b: int) -> Any:
        """Fold the elements in ``[a, b)``."""
        self._check_range(a, b)
        x1, x2 = self._split(self._root, a)
        y1, y2 = self._split(x2, b - a)
        result = y1.total if y1 else self._unit
        self._root = self._merge(x1, self._merge(y1, y2))
        return result

    def reverse(self, a: int, b: int) -> None:
        """Reverse the elements in ``[a, b)``."""
        self._check_range(a, b)
        x1, x2 = self._split(self._root, a)
        y1, y2 = self._split(x2, b - a)
        self._toggle(y1)
        self._root = self._merge(x1, self._merge(y1, y2))

    def apply(self, a: int, b: int, e: Any) -> None:
        """Apply operator ``e`` to every element in ``[a, b)``."""
        self._check_range(a, b)
        x1, x2 = self._split(self._root, a)
        y1, y2 = self._split(x2, b - a)
        if y1:
            self._propagate(y1, e)
        self._root = self._merge(x1, self._merge(y1, y2))


def unfold_parentheses(s: str) -> str:
    """Resolve every ``(...)`` by reversing its content and swapping letter case.

    Nested groups are resolved from the innermost outwards, and the
    parentheses themselves are dropped from the result.
    """
    depth = 0
    open_stack: list[int] = []
    groups: list[tuple[int, int, int]] = []
    depths: list[int] = []

    for i, c in enumerate(s):
        if c == "(":
            depth += 1
            open_stack.append(i)
        elif c == ")":
            if not open_stack:
                raise ValueError(f"unmatched ')' at position {i}")
            groups.append((depth, open_stack.pop(), i))
            depth -= 1
        depths.append(depth)

    groups.sort(reverse=True)

    codes = []
    for c, d in zip(s, depths):
        if d % 2 == 1 and c.isalpha():
            c = c.swapcase()
        codes.append(ord(c))

    seq = ReversibleList(codes)
    for _, left, right in groups:
        seq.reverse(left + 1, right)

    return "".join(c for c in map(chr, seq) if c not in "()")