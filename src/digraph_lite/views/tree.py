"""Rooted-tree view over a Graph.

Edges point from parent to child:

    append(parent, child)  ->  graph.edge(parent, child)
    children(node)         ->  graph.successors(node)
    parent(node)           ->  graph.predecessors(node)[0], if any

The view wraps a Graph instead of subclassing it, so callers cannot
reach Graph.edge() and give a node a second parent.  A node has at
most one parent and appending never closes a cycle.  Several parentless
nodes may coexist (a forest); roots() lists them.
"""
from __future__ import annotations

import logging
from typing import Generic, TypeVar

from digraph_lite.graph.adjacency import Graph, InvalidNodeError
from digraph_lite.graph.frontier import Frontier, Search
from digraph_lite.graph.traversal import SearchCursor

T = TypeVar("T")

log = logging.getLogger(__name__)


class TreeStructureError(ValueError):
    """Raised when an append would break the one-parent, acyclic shape."""


class Tree(Generic[T]):
    __slots__ = ("_graph",)

    def __init__(self) -> None:
        self._graph: Graph[T] = Graph()

    @property
    def graph(self) -> Graph[T]:
        """Underlying graph, for read-only queries such as shortest paths."""
        return self._graph

    # ---- mutation --------------------------------------------------------

    def insert(self, value: T) -> int:
        """Add a detached node and return its id."""
        return self._graph.insert(value)

    def append(self, parent: int, child: int) -> None:
        """Attach *child* (and its subtree) under *parent*."""
        if parent == child:
            raise TreeStructureError(f"Node {child} cannot be its own parent")
        if self._graph.in_degree(child):
            raise TreeStructureError(
                f"Node {child} already has parent {self.parent(child)}"
            )
        if child in self._graph.reverse_search(parent):
            raise TreeStructureError(
                f"Node {child} is an ancestor of {parent}; appending would form a cycle"
            )
        self._graph.edge(parent, child)

    def add_child(self, parent: int, value: T) -> int:
        """Insert *value* as a new child of *parent* and return its id."""
        if not self._graph.is_valid(parent):
            raise InvalidNodeError(parent)
        child = self._graph.insert(value)
        self._graph.edge(parent, child)
        return child

    def erase(self, node: int) -> None:
        """Remove *node* together with its whole subtree."""
        if not self._graph.is_valid(node):
            return
        doomed = list(self._graph.search(node))
        log.debug("Erasing subtree of node %d (%d nodes)", node, len(doomed))
        self._graph.erase(doomed)

    # ---- queries ---------------------------------------------------------

    def parent(self, node: int) -> int | None:
        preds = self._graph.predecessors(node)
        return preds[0] if preds else None

    def children(self, node: int) -> tuple[int, ...]:
        return self._graph.successors(node)

    def is_leaf(self, node: int) -> bool:
        return self._graph.out_degree(node) == 0

    def roots(self) -> list[int]:
        return [n for n in self._graph.nodes() if self._graph.in_degree(n) == 0]

    def depth(self, node: int) -> int:
        """Number of edges between *node* and its root."""
        d = 0
        cur = self.parent(node)
        while cur is not None:
            d += 1
            cur = self.parent(cur)
        return d

    def walk(self, root: int, search: Search | Frontier | None = None) -> SearchCursor:
        """Lazy walk over the subtree under *root*."""
        return self._graph.search(root, search)

    def order(self) -> int:
        return self._graph.order()

    def size(self) -> int:
        """Number of parent-child edges.

        Equals order() - 1 for a single connected tree; a forest has one
        fewer edge per extra root.
        """
        return self._graph.size()

    # ---- dunder ----------------------------------------------------------

    def __getitem__(self, node: int) -> T:
        return self._graph[node]

    def __setitem__(self, node: int, value: T) -> None:
        self._graph[node] = value

    def __contains__(self, node: object) -> bool:
        return node in self._graph

    def __len__(self) -> int:
        return self.order()

    def __repr__(self) -> str:
        return f"Tree(nodes={self.order()}, roots={len(self.roots())})"
