import logging
import numpy as np
import pytest
from pyhybridmaze.Edge import Edge
from pyhybridmaze.HexGrid import HexGrid, hex_maze_edges


def test_nodes_are_row_major():
    grid = HexGrid(3, 2)
    assert grid.nodes == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]
    assert len(grid) == 6


def test_interior_cell_has_six_neighbours():
    grid = HexGrid(5, 5)
    assert sorted(grid.neighbours((2, 2))) == [
        (1, 1), (1, 2), (1, 3), (2, 1), (2, 3), (3, 2)
    ]
    assert sorted(grid.neighbours((2, 1))) == [
        (1, 1), (2, 0), (2, 2), (3, 0), (3, 1), (3, 2)
    ]


def test_corner_cell_neighbours():
    grid = HexGrid(3, 3)
    assert sorted(grid.neighbours((0, 0))) == [(0, 1), (1, 0)]


def test_neighbourhood_is_symmetric():
    grid = HexGrid(4, 5)
    for cell in grid.nodes:
        for other in grid.neighbours(cell):
            assert cell in grid.neighbours(other)


@pytest.mark.parametrize("width, height", [(1, 2), (2, 2), (5, 4), (7, 7)])
def test_edge_count(width, height):
    grid = HexGrid(width, height)
    edges = grid.edges()
    expected = height * (width - 1) + (height - 1) * (2 * width - 1)
    assert len(edges) == expected
    assert len(set(edges)) == expected
    assert all(isinstance(e, Edge) for e in edges)


def test_edges_ordered_by_lower_endpoint():
    edges = HexGrid(2, 2).edges()
    assert edges == [
        Edge((0, 0), (1, 0)),
        Edge((0, 0), (0, 1)),
        Edge((1, 0), (1, 1)),
        Edge((1, 0), (0, 1)),
        Edge((0, 1), (1, 1)),
    ]


def test_shuffled_edges_is_a_permutation():
    grid = HexGrid(6, 6)
    shuffled = grid.shuffled_edges(seed=0)
    assert sorted(shuffled) == sorted(grid.edges())
    assert shuffled == grid.shuffled_edges(seed=0)
    assert shuffled == grid.shuffled_edges(rng=np.random.default_rng(0))


def test_single_cell_warns(caplog):
    with caplog.at_level(logging.WARNING):
        assert HexGrid(1, 1).edges() == []
    assert "no edges" in caplog.text


def test_neighbour_centres_are_equidistant():
    grid = HexGrid(4, 4, size=2.0)
    for edge in grid.edges():
        length = np.linalg.norm(grid.center(edge.A) - grid.center(edge.B))
        assert np.isclose(length, 2.0 * np.sqrt(3))


def test_corners_lie_on_circle():
    grid = HexGrid(2, 2, size=1.5)
    corners = grid.corners((1, 1))
    assert corners.shape == (6, 2)
    assert np.allclose(np.linalg.norm(corners - grid.center((1, 1)), axis=1), 1.5)


def test_centers_and_segment_shapes():
    grid = HexGrid(3, 2)
    assert grid.centers.shape == (6, 2)
    assert grid.segment(Edge((0, 0), (1, 0))).shape == (2, 2)


def test_distance():
    grid = HexGrid(5, 5)
    assert grid.distance((2, 2), (2, 2)) == 0
    for other in grid.neighbours((2, 2)):
        assert grid.distance((2, 2), other) == 1
    assert grid.distance((0, 0), (4, 0)) == 4


def test_hex_maze_edges():
    grid, edges = hex_maze_edges(4, 3, seed=1)
    assert sorted(edges) == sorted(grid.edges())


@pytest.mark.parametrize("args", [(0, 3), (3, -1), (2.5, 2), (2, 2, 0.0)])
def test_invalid_dimensions(args):
    with pytest.raises(ValueError):
        HexGrid(*args)
