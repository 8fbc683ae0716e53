"""
Hex grid module
===============

Mazes are usually carved out of a regular grid.  :class:`HexGrid` is the
hexagonal one: ``width x height`` pointy-top cells laid out in *odd-r* offset
coordinates, i.e. every odd row is pushed half a cell to the right.  Cells are
plain ``(col, row)`` tuples, so they can be used directly as node identities
by the spanning-tree generators, and every pair of adjacent cells becomes one
:class:`~pyhybridmaze.Edge.Edge`.

The grid also knows the Cartesian geometry of its cells (centres and hexagon
corners) for rendering.
"""

import logging
import math
from typing import List, Optional, Tuple

import numpy as np

from pyhybridmaze.Edge import Edge

Cell = Tuple[int, int]

# (dcol, drow) per row parity, odd-r layout
_NEIGHBOUR_OFFSETS = (
    ((1, 0), (-1, 0), (0, -1), (-1, -1), (0, 1), (-1, 1)),
    ((1, 0), (-1, 0), (1, -1), (0, -1), (1, 1), (0, 1)),
)


class HexGrid:
    """A rectangular patch of pointy-top hexagonal cells.

    Parameters
    ----------
    width : int
        Number of columns.
    height : int
        Number of rows.
    size : float, default 1.0
        Distance from a cell centre to any of its corners.
    """

    def __init__(self, width: int, height: int, size: float = 1.0):
        if int(width) != width or width < 1:
            raise ValueError(f"width must be a positive integer, got {width}")
        if int(height) != height or height < 1:
            raise ValueError(f"height must be a positive integer, got {height}")
        if size <= 0:
            raise ValueError(f"size must be > 0, got {size}")
        self.width = int(width)
        self.height = int(height)
        self.size = float(size)

    def __len__(self) -> int:
        return self.width * self.height

    def __contains__(self, cell: Cell) -> bool:
        col, row = cell
        return 0 <= col < self.width and 0 <= row < self.height

    @property
    def nodes(self) -> List[Cell]:
        """All cells, row by row."""
        return [(col, row) for row in range(self.height) for col in range(self.width)]

    def neighbours(self, cell: Cell) -> List[Cell]:
        """Cells adjacent to ``cell`` that lie inside the grid."""
        col, row = cell
        result = []
        for dcol, drow in _NEIGHBOUR_OFFSETS[row & 1]:
            other = (col + dcol, row + drow)
            if other in self:
                result.append(other)
        return result

    def edges(self) -> List[Edge]:
        """Every pair of adjacent cells exactly once.

        Edges are ordered by their lower endpoint (row-major); the lower
        endpoint is always ``A``.
        """
        result = []
        for cell in self.nodes:
            for other in self.neighbours(cell):
                if (other[1], other[0]) > (cell[1], cell[0]):
                    result.append(Edge(cell, other))
        if not result:
            logging.warning("hex grid of a single cell has no edges")
        return result

    def shuffled_edges(
        self,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> List[Edge]:
        """Return :meth:`edges` in random order.

        Parameters
        ----------
        seed : int, optional
            Seed for a fresh numpy generator, used only when ``rng`` is None.
        rng : np.random.Generator, optional
            Generator to draw the permutation from.

        """
        if rng is None:
            rng = np.random.default_rng(seed)
        edges = self.edges()
        return [edges[i] for i in rng.permutation(len(edges))]

    def center(self, cell: Cell) -> np.ndarray:
        """Cartesian centre of ``cell``."""
        col, row = cell
        return np.array(
            [
                self.size * math.sqrt(3) * (col + 0.5 * (row & 1)),
                self.size * 1.5 * row,
            ]
        )

    @property
    def centers(self) -> np.ndarray:
        """(N, 2) array of cell centres, in the order of :attr:`nodes`."""
        return np.array([self.center(cell) for cell in self.nodes])

    def corners(self, cell: Cell) -> np.ndarray:
        """(6, 2) array with the hexagon vertices of ``cell``."""
        angles = np.radians(60.0 * np.arange(6) - 30.0)
        offsets = self.size * np.column_stack([np.cos(angles), np.sin(angles)])
        return self.center(cell) + offsets

    def segment(self, edge: Edge) -> np.ndarray:
        """(2, 2) array joining the centres of the two cells of ``edge``."""
        return np.array([self.center(edge.A), self.center(edge.B)])

    def distance(self, a: Cell, b: Cell) -> int:
        """Number of steps between two cells, ignoring walls."""
        def to_cube(cell: Cell) -> Tuple[int, int, int]:
            col, row = cell
            x = col - (row - (row & 1)) // 2
            return x, row, -x - row

        ax, ay, az = to_cube(a)
        bx, by, bz = to_cube(b)
        return max(abs(ax - bx), abs(ay - by), abs(az - bz))


def hex_maze_edges(
    width: int,
    height: int,
    seed: Optional[int] = None,
) -> Tuple[HexGrid, List[Edge]]:
    """Build a grid and its shuffled edge list in one go."""
    grid = HexGrid(width, height)
    return grid, grid.shuffled_edges(seed=seed)
