from pyhybridmaze.Edge import Edge, EdgeLike, opposite, validate_edge, edges_from_pairs
from pyhybridmaze.GraphClosure import GraphClosureTracker
from pyhybridmaze.EdgeIndex import EdgeIndex
from pyhybridmaze.Tracer import Tracer
from pyhybridmaze.Kruskal import KruskalPass
from pyhybridmaze.Hybrid import Hybrid, hybrid_spanning_tree
from pyhybridmaze.HexGrid import HexGrid, hex_maze_edges
from pyhybridmaze.analysis import (
    count_components,
    is_forest,
    is_spanning_tree,
    maze_statistics
)
from pyhybridmaze.plotting import (
    plot_hex_cells,
    plot_maze,
    plot_maze_plotly
)

__all__ = [
    "Edge",
    "EdgeLike",
    "opposite",
    "validate_edge",
    "edges_from_pairs",
    "GraphClosureTracker",
    "EdgeIndex",
    "Tracer",
    "KruskalPass",
    "Hybrid",
    "hybrid_spanning_tree",
    "HexGrid",
    "hex_maze_edges",
    "count_components",
    "is_forest",
    "is_spanning_tree",
    "maze_statistics",
    "plot_hex_cells",
    "plot_maze",
    "plot_maze_plotly",
]
