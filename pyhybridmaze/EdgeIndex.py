from collections import defaultdict
from typing import Dict, Hashable, Iterable, List, Sequence, Tuple

from pyhybridmaze.Edge import EdgeLike, validate_edge


class EdgeIndex:
    """
    Map each node to the edges incident to it.

    Built once from the full edge sequence. Both endpoints of every edge are
    linked, and each node's list keeps the order in which its edges were first
    seen, which decides the order in which a walk tries neighbours.

    Parameters
    ----------
    edges : Iterable[EdgeLike]
        The edges of the graph. Every edge is validated on the way in.
    """

    def __init__(self, edges: Iterable[EdgeLike]):
        incident: Dict[Hashable, List[EdgeLike]] = defaultdict(list)
        for edge in edges:
            validate_edge(edge)
            incident[edge.A].append(edge)
            incident[edge.B].append(edge)
        self._incident: Dict[Hashable, Tuple[EdgeLike, ...]] = {
            node: tuple(linked) for node, linked in incident.items()
        }

    def __getitem__(self, node: Hashable) -> Sequence[EdgeLike]:
        """Edges incident to ``node``; empty for a node that has none."""
        return self._incident.get(node, ())

    edges = __getitem__

    def __contains__(self, node: Hashable) -> bool:
        return node in self._incident

    def __len__(self) -> int:
        return len(self._incident)

    @property
    def nodes(self) -> List[Hashable]:
        """Every node that appears as an endpoint, in first-seen order."""
        return list(self._incident)

    def degree(self, node: Hashable) -> int:
        return len(self[node])
