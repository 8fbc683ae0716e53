import pytest
from pyhybridmaze.Edge import Edge, edges_from_pairs
from pyhybridmaze.EdgeIndex import EdgeIndex


def test_both_endpoints_are_indexed_in_input_order():
    edges = edges_from_pairs([(1, 2), (3, 1), (2, 3), (1, 4)])
    index = EdgeIndex(edges)
    assert list(index[1]) == [edges[0], edges[1], edges[3]]
    assert list(index[2]) == [edges[0], edges[2]]
    assert list(index[4]) == [edges[3]]
    assert index.degree(3) == 2


def test_unknown_node_has_no_edges():
    index = EdgeIndex([Edge(1, 2)])
    assert list(index[99]) == []
    assert 99 not in index
    assert index.degree(99) == 0


def test_parallel_edges_are_distinct():
    first, second = Edge("a", "b"), Edge("a", "b")
    index = EdgeIndex([first, second])
    assert len(index["a"]) == 2


def test_nodes_in_first_seen_order():
    index = EdgeIndex(edges_from_pairs([(5, 3), (3, 9)]))
    assert index.nodes == [5, 3, 9]
    assert len(index) == 3


def test_accepts_a_generator():
    index = EdgeIndex(Edge(i, i + 1) for i in range(3))
    assert len(index) == 4


def test_self_loop_is_rejected():
    with pytest.raises(ValueError):
        EdgeIndex([Edge(1, 2), Edge(2, 2)])
