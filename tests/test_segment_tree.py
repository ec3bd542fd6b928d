import operator
import random

import pytest

from contestlib.segment_tree import SegmentTree


def test_range_sums_match_slices():
    values = [1, 2, 3, 4, 5]
    tree = SegmentTree(values, operator.add, 0)
    for a in range(len(values) + 1):
        for b in range(a, len(values) + 1):
            assert tree.query(a, b) == sum(values[a:b])


def test_point_add_then_sum():
    values = [1, 2, 3, 4, 5]
    tree = SegmentTree(values, operator.add, 0)
    tree.add(2, 10)
    values[2] += 10
    assert tree.get(2) == values[2]
    assert tree.query(0, 5) == sum(values)
    assert tree.query(1, 3) == sum(values[1:3])


def test_range_min_with_large_unit():
    init = (1 << 31) - 1
    tree = SegmentTree([init] * 3, min, init)
    tree.update(0, 1)
    tree.update(1, 2)
    tree.update(2, 3)
    assert tree.query(0, 3) == 1
    assert tree.query(1, 2) == 2
    assert tree.query(2, 3) == 3


def test_non_commutative_order_preserved():
    values = list("abcdefg")
    tree = SegmentTree(values, operator.add, "")
    for a in range(len(values) + 1):
        for b in range(a, len(values) + 1):
            assert tree.query(a, b) == "".join(values[a:b])


def test_random_updates():
    rng = random.Random(3)
    values = [rng.randint(-50, 50) for _ in range(13)]
    tree = SegmentTree(values, max, -(10**9))
    for _ in range(100):
        i = rng.randrange(len(values))
        values[i] = rng.randint(-50, 50)
        tree.update(i, values[i])
        a = rng.randrange(len(values))
        b = rng.randrange(a + 1, len(values) + 1)
        assert tree.query(a, b) == max(values[a:b])


def test_empty_range_returns_unit():
    tree = SegmentTree([4, 5, 6], operator.add, 0)
    assert tree.query(2, 2) == 0
    assert SegmentTree([], operator.add, 0).query(0, 0) == 0


def test_index_out_of_range():
    tree = SegmentTree([1, 2, 3], operator.add, 0)
    with pytest.raises(IndexError):
        tree.get(3)
    with pytest.raises(IndexError):
        tree.update(-1, 5)