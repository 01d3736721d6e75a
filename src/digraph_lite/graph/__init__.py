"""Directed graph container, traversal cursors and shortest paths."""

from digraph_lite.graph.adjacency import (
    UNIT_WEIGHT,
    UNREACHABLE,
    Graph,
    InvalidNodeError,
)
from digraph_lite.graph.enumerators import EdgeCursor, NodeCursor
from digraph_lite.graph.frontier import (
    Frontier,
    QueueFrontier,
    Search,
    StackFrontier,
)
from digraph_lite.graph.shortest_path import (
    NEGATIVE_CYCLE,
    Path,
    StalePathError,
    bellman_ford,
    bfs_distance,
    shortest_paths,
)
from digraph_lite.graph.traversal import SearchCursor

__all__ = [
    "EdgeCursor",
    "Frontier",
    "Graph",
    "InvalidNodeError",
    "NEGATIVE_CYCLE",
    "NodeCursor",
    "Path",
    "QueueFrontier",
    "Search",
    "SearchCursor",
    "StackFrontier",
    "StalePathError",
    "UNIT_WEIGHT",
    "UNREACHABLE",
    "bellman_ford",
    "bfs_distance",
    "shortest_paths",
]
