from collections import Counter
from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple

import numpy as np
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import connected_components

from pyhybridmaze.Edge import EdgeLike


def _edge_graph(
    edges: Iterable[EdgeLike],
    nodes: Optional[Iterable[Hashable]] = None,
) -> Tuple[List[Hashable], coo_matrix, int]:
    """Index the nodes of ``edges`` (plus any extra ``nodes``) and build a
    sparse adjacency matrix.

    Returns
    -------
    Tuple[List[Hashable], coo_matrix, int]
        The node list, the adjacency matrix and the number of edges.
    """
    position: Dict[Hashable, int] = {}
    if nodes is not None:
        for node in nodes:
            position.setdefault(node, len(position))

    rows, cols = [], []
    for edge in edges:
        rows.append(position.setdefault(edge.A, len(position)))
        cols.append(position.setdefault(edge.B, len(position)))

    n = len(position)
    graph = coo_matrix(
        (np.ones(len(rows), dtype=np.int8), (rows, cols)), shape=(n, n)
    )
    return list(position), graph, len(rows)


def count_components(
    edges: Iterable[EdgeLike],
    nodes: Optional[Iterable[Hashable]] = None,
) -> int:
    """Number of connected components spanned by ``edges`` and ``nodes``."""
    node_list, graph, _ = _edge_graph(edges, nodes)
    if not node_list:
        return 0
    n_components, _ = connected_components(graph, directed=False)
    return int(n_components)


def is_forest(edges: Iterable[EdgeLike]) -> bool:
    """Check that an edge set has no cycles.

    A graph with ``n`` nodes and ``c`` components is acyclic exactly when it
    has ``n - c`` edges. Parallel edges and self-loops count as cycles.

    Parameters
    ----------
    edges : Iterable[EdgeLike]
        The edges to check.

    Returns
    -------
    bool
        True if the edges form a forest.
    """
    node_list, graph, m = _edge_graph(edges)
    if not node_list:
        return True
    n_components, _ = connected_components(graph, directed=False)
    return m == len(node_list) - n_components


def is_spanning_tree(edges: Iterable[EdgeLike], nodes: Iterable[Hashable]) -> bool:
    """Check that ``edges`` form a single tree covering every node in ``nodes``."""
    edges = list(edges)
    nodes = list(nodes)
    if not is_forest(edges):
        return False
    return count_components(edges, nodes) == 1 and len(edges) == len(set(nodes)) - 1


def maze_statistics(edges: Iterable[EdgeLike]) -> Dict[str, Any]:
    """Summarise the texture of a maze given as its passage edges.

    Dead ends are cells with a single passage, junctions are cells with three
    or more. Walk-heavy mazes have few of both.

    Parameters
    ----------
    edges : Iterable[EdgeLike]
        Passages of the maze.

    Returns
    -------
    Dict[str, Any]
        ``nodes``, ``edges``, ``components``, ``dead_ends``, ``junctions``,
        ``dead_end_ratio`` and ``is_forest``.
    """
    edges = list(edges)
    degree: Counter = Counter()
    for edge in edges:
        degree[edge.A] += 1
        degree[edge.B] += 1

    n = len(degree)
    dead_ends = sum(1 for d in degree.values() if d == 1)
    return {
        "nodes": n,
        "edges": len(edges),
        "components": count_components(edges),
        "dead_ends": dead_ends,
        "junctions": sum(1 for d in degree.values() if d >= 3),
        "dead_end_ratio": dead_ends / n if n else 0.0,
        "is_forest": is_forest(edges),
    }
