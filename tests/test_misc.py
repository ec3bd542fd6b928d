import pytest

from contestlib.misc import PosCompression, run_length_encoding

DATA = [50, -3, 50, 7, 1000000000, 7, 0]


def test_encode_decode_round_trip():
    comp = PosCompression(DATA)
    for value in DATA:
        assert comp.decode(comp.encode(value)) == value


def test_length_counts_distinct_values():
    assert len(PosCompression(DATA)) == len(set(DATA))


def test_codes_are_dense_and_order_preserving():
    comp = PosCompression(DATA)
    codes = sorted({comp.encode(v) for v in DATA})
    assert codes == list(range(len(comp)))
    for a in DATA:
        for b in DATA:
            assert (a < b) == (comp.encode(a) < comp.encode(b))


def test_encode_of_unregistered_value_is_insertion_rank():
    comp = PosCompression(DATA)
    assert comp.encode(8) == comp.encode(50)
    assert comp.encode(-100) == 0


@pytest.mark.parametrize("index", [-1, len(set(DATA))])
def test_decode_out_of_range_raises(index):
    with pytest.raises(IndexError):
        PosCompression(DATA).decode(index)


def test_run_length_example():
    assert run_length_encoding("ooxooo") == [("o", 2), ("x", 1), ("o", 3)]


def test_run_length_round_trip_and_invariants():
    seq = [1, 1, 2, 2, 2, 1, 3, 3, 1]
    runs = run_length_encoding(seq)
    expanded = [item for item, count in runs for _ in range(count)]
    assert expanded == seq
    assert all(a[0] != b[0] for a, b in zip(runs, runs[1:]))
    assert all(count >= 1 for _, count in runs)


def test_run_length_empty():
    assert run_length_encoding([]) == []