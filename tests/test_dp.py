import random

import pytest

from contestlib.dp import longest_increasing_subsequence


def _is_subsequence(sub, seq):
    it = iter(seq)
    return all(any(x == y for y in it) for x in sub)


def test_worked_example():
    assert longest_increasing_subsequence([3, 1, 4, 1, 5, 9, 2, 6]) == [1, 4, 5, 6]


def test_already_increasing():
    values = [1, 2, 3, 4, 5]
    assert longest_increasing_subsequence(values) == values


def test_decreasing_gives_single_element():
    result = longest_increasing_subsequence([5, 4, 3, 2, 1])
    assert len(result) == 1
    assert result[0] in [5, 4, 3, 2, 1]


def test_strictly_increasing_with_duplicates():
    result = longest_increasing_subsequence([2, 2, 2])
    assert result == [2]


def test_empty():
    assert longest_increasing_subsequence([]) == []


@pytest.mark.parametrize("seed", range(5))
def test_random_invariants(seed):
    rng = random.Random(seed)
    values = [rng.randint(0, 20) for _ in range(30)]
    result = longest_increasing_subsequence(values)
    assert all(a < b for a, b in zip(result, result[1:]))
    assert _is_subsequence(result, values)
    # Appending a larger value must extend it by exactly one.
    extended = longest_increasing_subsequence(values + [max(values) + 1])
    assert len(extended) == len(result) + 1


def test_strings():
    result = longest_increasing_subsequence("banana")
    assert all(a < b for a, b in zip(result, result[1:]))
    assert _is_subsequence(result, "banana")
    assert len(result) == 2