"""
Hybrid spanning tree module
===========================

Spanning trees of an undirected graph can be grown in very different ways,
and the way they are grown shows when the tree is read as a maze: a
depth-first *growing-tree* walk makes long, winding corridors with few
branches, while randomized Kruskal selection makes many short dead ends.

:class:`Hybrid` interleaves both strategies under a single ``threshold``:

* with probability ``1 - threshold`` a step first tries to extend the current
  walk (:class:`~pyhybridmaze.Tracer.Tracer`);
* otherwise, or when the walk is stuck, it takes the next acyclic edge from a
  single pass over the input (:class:`~pyhybridmaze.Kruskal.KruskalPass`) and
  restarts the walk from one of that edge's endpoints.

Both strategies share their bookkeeping (the walk's visited set and the
union-find partition), so the emitted edges always form a forest, and once
the input is exhausted they span every connected component of the graph.
"""

import logging
import numbers
from typing import Callable, Iterable, List, Optional

import numpy as np

from pyhybridmaze.Edge import EdgeLike
from pyhybridmaze.EdgeIndex import EdgeIndex
from pyhybridmaze.GraphClosure import GraphClosureTracker
from pyhybridmaze.Kruskal import KruskalPass
from pyhybridmaze.Tracer import Tracer


class Hybrid:
    """Lazily generate a random spanning forest by mixing a growing-tree walk
    with randomized Kruskal selection."""

    def __init__(
        self,
        edges: Iterable[EdgeLike],
        threshold: float = 0.5,
        rng: Optional[Callable[[], float]] = None,
        seed: Optional[int] = None,
    ):
        """Set up the generator.

        Parameters
        ----------
        edges : Iterable[EdgeLike]
            Edges of the candidate graph. Kruskal selection consumes them in
            this order, so shuffle them beforehand for a random result.
        threshold : float, default 0.5
            Probability in [0, 1] of skipping the walk on a given step.
            0 means "walk whenever possible", 1 means plain Kruskal.
        rng : Callable[[], float], optional
            Source of uniform floats in [0, 1). Called once or twice per step.
        seed : int, optional
            Seed for a numpy generator, used only when ``rng`` is None.

        """
        if isinstance(threshold, bool) or not isinstance(threshold, numbers.Real):
            raise TypeError("threshold must be a real number")
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be in [0,1], got {threshold}")
        if rng is None:
            rng = np.random.default_rng(seed).random
        elif not callable(rng):
            raise ValueError("rng must be a callable returning floats in [0,1)")

        self.threshold = float(threshold)
        self._rng = rng

        edges = list(edges)
        self.index = EdgeIndex(edges)
        self._sets = GraphClosureTracker()
        self._kruskal = KruskalPass(edges, self._sets)
        self._tracer = Tracer(self.index.edges)

        self._emitted = 0
        self._exhausted = False

    @property
    def sets(self) -> GraphClosureTracker:
        """Union-find partition shared by both strategies."""
        return self._sets

    @property
    def tracer(self) -> Tracer:
        return self._tracer

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def _next_tracer(self) -> Optional[EdgeLike]:
        if self._rng() < self.threshold:
            return None
        edge = self._tracer.next()
        if edge is not None:
            self._kruskal.merge(edge.A, edge.B)
        return edge

    def _next_kruskal(self) -> Optional[EdgeLike]:
        edge = self._kruskal.next()
        if edge is not None:
            self._tracer.visit(edge.A)
            self._tracer.visit(edge.B)
            self._tracer.reset(edge.A if self._rng() < 0.5 else edge.B)
        return edge

    def next(self) -> Optional[EdgeLike]:
        """Produce the next spanning-forest edge.

        Returns
        -------
        EdgeLike or None
            The next edge, or None once both strategies have run dry. After
            the first None every later call returns None as well.

        """
        if self._exhausted:
            return None

        edge = self._next_tracer()
        if edge is None:
            edge = self._next_kruskal()

        if edge is None:
            self._exhausted = True
            logging.debug(
                "hybrid generator exhausted after %d edges over %d nodes",
                self._emitted,
                len(self.index),
            )
            return None

        self._emitted += 1
        return edge

    def __iter__(self) -> "Hybrid":
        return self

    def __next__(self) -> EdgeLike:
        edge = self.next()
        if edge is None:
            raise StopIteration
        return edge


def hybrid_spanning_tree(
    edges: Iterable[EdgeLike],
    threshold: float = 0.5,
    rng: Optional[Callable[[], float]] = None,
    seed: Optional[int] = None,
) -> List[EdgeLike]:
    """Run a :class:`Hybrid` generator to exhaustion.

    Parameters
    ----------
    edges : Iterable[EdgeLike]
        Edges of the candidate graph, in selection order.
    threshold : float, default 0.5
        Probability of preferring Kruskal selection over the walk.
    rng : Callable[[], float], optional
        Source of uniform floats in [0, 1).
    seed : int, optional
        Seed used when ``rng`` is None.

    Returns
    -------
    List[EdgeLike]
        The spanning forest edges, in the order they were produced.

    """
    return list(Hybrid(edges, threshold=threshold, rng=rng, seed=seed))
