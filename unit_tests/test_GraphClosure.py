import pytest
from pyhybridmaze.GraphClosure import GraphClosureTracker


def test_initial_components():
    gct = GraphClosureTracker(range(5))
    assert len(gct) == 5
    for i in range(5):
        assert gct.find(i) == i
        assert gct.is_connected(i, i)


def test_empty_tracker_registers_lazily():
    gct = GraphClosureTracker()
    assert len(gct) == 0
    assert "a" not in gct
    gct.merge("a", "b")
    assert "a" in gct and "b" in gct
    assert len(gct) == 1


def test_union_merges_components():
    gct = GraphClosureTracker(range(4))
    gct.union(0, 1)
    assert gct.is_connected(0, 1)
    assert len(gct) == 3
    assert gct.find(0) == gct.find(1)


def test_merge_and_test_aliases():
    gct = GraphClosureTracker()
    gct.merge((0, 0), (1, 0))
    assert gct.test((0, 0), (1, 0))
    assert not gct.test((0, 0), (2, 0))


def test_merge_is_idempotent():
    gct = GraphClosureTracker()
    gct.merge(1, 2)
    gct.merge(2, 1)
    gct.merge(1, 2)
    assert len(gct) == 1
    assert gct[0] == {1, 2}


def test_add_fully_connected_subgraph():
    gct = GraphClosureTracker(range(6))
    gct.add_fully_connected_subgraph([1, 2, 3])
    assert gct.subgraph_is_already_connected([1, 2, 3])
    assert len(gct) == 4


def test_subgraph_is_already_connected_true_and_false():
    gct = GraphClosureTracker(range(4))
    gct.add_edge(0, 1)
    assert gct.subgraph_is_already_connected([0, 1]) is True
    assert gct.subgraph_is_already_connected([0, 2]) is False
    assert gct.subgraph_is_already_connected([]) is True


def test_long_chain_does_not_recurse():
    gct = GraphClosureTracker()
    n = 20000
    for i in range(n - 1):
        gct.union(i, i + 1)
    assert gct.is_connected(0, n - 1)
    assert len(gct) == 1


def test_components_iteration_and_indexing():
    gct = GraphClosureTracker(range(4))
    gct.union(0, 1)
    gct.union(2, 3)
    comps = list(gct)
    assert isinstance(comps[0], set)
    assert sorted(len(comp) for comp in comps) == [2, 2]
    flat = gct[0] | gct[1]
    assert flat == {0, 1, 2, 3}


def test_len_reflects_component_count():
    gct = GraphClosureTracker(range(6))
    gct.add_edge(0, 1)
    gct.add_edge(1, 2)
    gct.add_edge(3, 4)
    assert len(gct) == 3
    gct.add_edge(2, 3)
    assert len(gct) == 2
