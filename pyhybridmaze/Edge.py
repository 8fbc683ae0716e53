"""
Edge module
===========

Edges are the only thing the spanning-tree generators know about a graph.
Any object exposing two node endpoints as attributes ``A`` and ``B`` satisfies
the :class:`EdgeLike` contract; nodes only need to be hashable and comparable
for equality.  :class:`Edge` is the plain immutable value type used by the
grid producers in this package, but callers may pass their own edge objects
(carrying weights, wall ids, ...) and will get the very same objects back.
"""

from typing import Any, Hashable, Iterable, List, NamedTuple, Protocol, Tuple


class EdgeLike(Protocol):
    """Anything with two node endpoints ``A`` and ``B``."""

    A: Any
    B: Any


class Edge(NamedTuple):
    """An undirected edge between two distinct nodes."""

    A: Hashable
    B: Hashable


def validate_edge(edge: Any) -> None:
    """Check that ``edge`` honours the edge contract.

    Parameters
    ----------
    edge : Any
        Object to check.

    Raises
    ------
    TypeError
        If the object does not expose ``A`` and ``B``.
    ValueError
        If both endpoints are the same node (self-loop).

    """
    if not (hasattr(edge, "A") and hasattr(edge, "B")):
        raise TypeError(f"edge must expose endpoints A and B, got {edge!r}")
    if edge.A == edge.B:
        raise ValueError(f"self-loop edges are not allowed: {edge!r}")


def opposite(node: Hashable, edge: EdgeLike) -> Hashable:
    """Return the endpoint of ``edge`` that is not ``node``.

    Parameters
    ----------
    node : Hashable
        One endpoint of the edge.
    edge : EdgeLike
        The edge to traverse.

    Returns
    -------
    Hashable
        The other endpoint.

    Raises
    ------
    ValueError
        If ``node`` is not an endpoint of ``edge``.

    """
    if node == edge.A:
        return edge.B
    if node == edge.B:
        return edge.A
    raise ValueError(f"{node!r} is not an endpoint of {edge!r}")


def edges_from_pairs(pairs: Iterable[Tuple[Hashable, Hashable]]) -> List[Edge]:
    """Wrap ``(a, b)`` pairs as :class:`Edge` values, keeping their order."""
    return [Edge(a, b) for a, b in pairs]
