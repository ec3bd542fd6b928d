import pytest

from contestlib.cum_sum import CumSum, CumSum2D

VALUES = [3, -1, 4, 1, -5, 9, 2, 6]

GRID = [
    [1, 2, 3, 4],
    [5, 6, 7, 8],
    [9, 10, 11, 12],
]


def _line_cells(p1, p2):
    (h1, w1), (h2, w2) = p1, p2
    steps = max(abs(h2 - h1), abs(w2 - w1))
    sh = (h2 > h1) - (h2 < h1)
    sw = (w2 > w1) - (w2 < w1)
    return [(h1 + sh * s, w1 + sw * s) for s in range(steps + 1)]


def _brute_line(grid, p1, p2):
    total = 0
    for h, w in _line_cells(p1, p2):
        if 0 <= h < len(grid) and 0 <= w < len(grid[0]):
            total += grid[h][w]
    return total


def test_query_matches_slice_sums():
    cs = CumSum(VALUES)
    for l in range(len(VALUES) + 1):
        for r in range(l, len(VALUES) + 1):
            assert cs.query(l, r) == sum(VALUES[l:r])


def test_getitem_is_prefix_query():
    cs = CumSum(VALUES)
    for i in range(len(VALUES) + 1):
        assert cs[i] == sum(VALUES[:i])


def test_iteration_yields_prefix_table():
    table = list(CumSum(VALUES))
    assert len(table) == len(VALUES) + 1
    assert table[0] == 0
    assert [b - a for a, b in zip(table, table[1:])] == VALUES


def test_str_is_space_separated():
    assert str(CumSum([2, 2])) == "0 2 4"


@pytest.mark.parametrize("l,r", [(3, 2), (-1, 2), (0, len(VALUES) + 1)])
def test_invalid_range_raises(l, r):
    with pytest.raises(IndexError):
        CumSum(VALUES).query(l, r)


def test_query_area_matches_brute_force():
    cs = CumSum2D(GRID)
    for a in range(3):
        for c in range(a, 3):
            for b in range(4):
                for d in range(b, 4):
                    expected = sum(GRID[h][w] for h in range(a, c + 1) for w in range(b, d + 1))
                    assert cs.query_area((a, b), (c, d)) == expected


def test_query_area_rejects_reversed_corners():
    with pytest.raises(ValueError):
        CumSum2D(GRID).query_area((2, 0), (0, 3))


def test_query_area_rejects_outside_grid():
    with pytest.raises(IndexError):
        CumSum2D(GRID).query_area((0, 0), (3, 3))


@pytest.mark.parametrize(
    "p1,p2",
    [
        ((1, 0), (1, 3)),
        ((1, 3), (1, 0)),
        ((0, -2), (0, 6)),
        ((0, 2), (2, 2)),
        ((-3, 1), (5, 1)),
        ((0, 0), (2, 2)),
        ((2, 3), (0, 1)),
        ((0, 1), (2, 3)),
        ((1, 0), (2, 1)),
        ((-2, -2), (5, 5)),
        ((-2, 0), (4, 6)),
        ((0, 3), (2, 1)),
        ((2, 0), (0, 2)),
        ((0, 2), (2, 0)),
        ((1, 3), (2, 2)),
        ((-1, 5), (4, 0)),
        ((2, 3), (2, 3)),
        ((5, 5), (5, 9)),
        ((7, 0), (9, 2)),
        ((9, 0), (7, 2)),
    ],
)
def test_query_line_matches_brute_force(p1, p2):
    assert CumSum2D(GRID).query_line(p1, p2) == _brute_line(GRID, p1, p2)


def test_query_line_every_diagonal_in_grid():
    cs = CumSum2D(GRID)
    for h in range(3):
        for w in range(4):
            for dh, dw in [(1, 1), (1, -1), (-1, 1), (-1, -1)]:
                for length in range(4):
                    p2 = (h + dh * length, w + dw * length)
                    assert cs.query_line((h, w), p2) == _brute_line(GRID, (h, w), p2)


def test_query_line_rejects_bent_segment():
    with pytest.raises(ValueError):
        CumSum2D(GRID).query_line((0, 0), (1, 2))


def test_empty_or_ragged_grid_raises():
    with pytest.raises(ValueError):
        CumSum2D([])
    with pytest.raises(ValueError):
        CumSum2D([[1, 2], [3]])