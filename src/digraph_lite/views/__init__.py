"""Narrow views over Graph for hierarchies and undirected relations."""

from digraph_lite.views.tree import Tree, TreeStructureError
from digraph_lite.views.undirected import UndirectedGraph

__all__ = [
    "Tree",
    "TreeStructureError",
    "UndirectedGraph",
]
