from typing import Callable, Hashable, Optional, Sequence, Set

from pyhybridmaze.Edge import EdgeLike, opposite


class Tracer:
    """
    Growing-tree walk that always extends the current thread.

    The walk keeps a set of visited nodes and a ``head``. Each step follows
    the first incident edge of ``head`` leading to an unvisited node and
    moves ``head`` there, which produces long, winding corridors. When every
    neighbour of ``head`` is visited the walk is stuck until :meth:`reset`
    points it somewhere else.

    Parameters
    ----------
    edges : Callable[[Hashable], Sequence[EdgeLike]]
        Lookup returning the edges incident to a node, in walk order.
    """

    def __init__(self, edges: Callable[[Hashable], Sequence[EdgeLike]]):
        self._edges = edges
        self._visited: Set[Hashable] = set()
        self._head: Optional[Hashable] = None

    @property
    def head(self) -> Optional[Hashable]:
        return self._head

    def is_visited(self, node: Hashable) -> bool:
        return node in self._visited

    def __len__(self) -> int:
        return len(self._visited)

    def visit(self, node: Hashable, reset_head: bool = False) -> bool:
        """Mark ``node`` visited.

        Parameters
        ----------
        node : Hashable
            Node to add to the visited set.
        reset_head : bool, default False
            Move ``head`` to ``node`` if it was newly visited.

        Returns
        -------
        bool
            True if the node had not been visited before.

        """
        if node in self._visited:
            return False
        self._visited.add(node)
        if reset_head:
            self._head = node
        return True

    def next(self) -> Optional[EdgeLike]:
        """Extend the walk by one edge.

        Returns
        -------
        EdgeLike or None
            The edge from the old head to the newly visited node, or None if
            there is no head or every neighbour of it is already visited.

        """
        current = self._head
        if current is None:
            return None
        for edge in self._edges(current):
            if self.visit(opposite(current, edge), reset_head=True):
                return edge
        return None

    def reset(self, node: Hashable) -> None:
        """Restart the walk from ``node``."""
        self._head = node
