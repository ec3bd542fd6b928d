import pytest

from contestlib.scc import StronglyConnectedComponents

# 1 -> 2 -> 3 -> 1, 3 -> 4, 4 <-> 5, 6 alone
ADJ = [[], [2], [3], [1, 4], [5], [4], []]


def test_components_are_found():
    scc = StronglyConnectedComponents(ADJ)
    assert scc.scc_count() == 3
    assert scc.scc_of(1) == scc.scc_of(2) == scc.scc_of(3)
    assert scc.scc_of(4) == scc.scc_of(5)
    assert len({scc.scc_of(1), scc.scc_of(4), scc.scc_of(6)}) == 3


def test_groups_partition_nodes():
    scc = StronglyConnectedComponents(ADJ)
    groups = scc.scc_groups()
    assert groups[0] == []
    assert sorted(v for g in groups for v in g) == list(range(1, 7))
    assert groups[scc.scc_of(1)] == [1, 2, 3]
    assert groups[scc.scc_of(5)] == [4, 5]
    for number, group in enumerate(groups):
        assert all(scc.scc_of(v) == number for v in group)


def test_condensation_is_topologically_ordered():
    scc = StronglyConnectedComponents(ADJ)
    graph = scc.scc_graph()
    assert len(graph) == scc.scc_count() + 1
    assert graph[scc.scc_of(1)] == [scc.scc_of(4)]
    for frm, edges in enumerate(graph):
        assert all(frm < to for to in edges)
        assert edges == sorted(set(edges))


def test_every_edge_respects_order():
    scc = StronglyConnectedComponents(ADJ)
    for frm, edges in enumerate(ADJ):
        for to in edges:
            assert scc.scc_of(frm) <= scc.scc_of(to)


def test_weighted_input_gives_same_result():
    weighted = [[(to, 3) for to in edges] for edges in ADJ]
    a = StronglyConnectedComponents(ADJ)
    b = StronglyConnectedComponents(weighted)
    assert a.scc_groups() == b.scc_groups()
    assert a.scc_graph() == b.scc_graph()


def test_dag_has_singleton_components():
    adj = [[], [2, 3], [4], [4], []]
    scc = StronglyConnectedComponents(adj)
    assert scc.scc_count() == 4
    assert all(len(g) == 1 for g in scc.scc_groups()[1:])
    for frm, edges in enumerate(adj):
        for to in edges:
            assert scc.scc_of(frm) < scc.scc_of(to)


def test_parallel_edges_are_deduplicated():
    adj = [[], [2, 2, 2], []]
    scc = StronglyConnectedComponents(adj)
    assert scc.scc_graph()[scc.scc_of(1)] == [scc.scc_of(2)]


def test_invalid_node_raises():
    scc = StronglyConnectedComponents(ADJ)
    with pytest.raises(IndexError):
        scc.scc_of(0)
    with pytest.raises(IndexError):
        scc.scc_of(7)


def test_empty_adjacency_raises():
    with pytest.raises(ValueError):
        StronglyConnectedComponents([])