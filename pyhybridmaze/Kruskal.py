from typing import Hashable, Iterable, Optional

from pyhybridmaze.Edge import EdgeLike
from pyhybridmaze.GraphClosure import GraphClosureTracker


class KruskalPass:
    """
    Randomized Kruskal selection over an edge sequence.

    Edges are consumed once, in input order; an edge is accepted unless its
    endpoints are already in the same component. Weights play no part, so the
    randomness comes entirely from the order of the input.

    Parameters
    ----------
    edges : Iterable[EdgeLike]
        Edge sequence, read through a single forward iterator.
    sets : GraphClosureTracker, optional
        Union-find partition to use. A fresh tracker is created if None.
    """

    def __init__(
        self,
        edges: Iterable[EdgeLike],
        sets: Optional[GraphClosureTracker] = None,
    ):
        self._iterator = iter(edges)
        self.sets = GraphClosureTracker() if sets is None else sets

    def merge(self, a: Hashable, b: Hashable) -> None:
        """Union the components of ``a`` and ``b``."""
        self.sets.merge(a, b)

    def next(self) -> Optional[EdgeLike]:
        """Return the next edge that joins two components, or None when the
        input is exhausted. Cycle-forming edges are discarded."""
        for edge in self._iterator:
            if self.sets.test(edge.A, edge.B):
                continue
            self.sets.merge(edge.A, edge.B)
            return edge
        return None
