"""Lazy, pull-based graph walks.

SearchCursor takes one step per advance() instead of materialising the
whole traversal up front, so callers can stop early, skip subtrees
with prune(), or start over with rewind().  The frontier discipline is
injected: a stack gives depth-first order, a queue breadth-first.

Expansion is deferred.  A node's neighbours are pushed onto the
frontier when the cursor moves *off* that node (or when peek() needs
to look past it).  That is what lets prune() drop the current node's
subtree:

    cursor = graph.search(root)
    for node in cursor:
        if skip(node):
            cursor.prune()

A node reached by several edges is pushed more than once but emitted
only once; visited entries are discarded when they surface.

A cursor reads the graph's live adjacency.  Mutating the graph while a
cursor is alive is the caller's responsibility.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from digraph_lite.graph.adjacency import UNREACHABLE, InvalidNodeError, Weight
from digraph_lite.graph.frontier import Frontier, Search

if TYPE_CHECKING:
    from digraph_lite.graph.adjacency import Graph
    from digraph_lite.graph.shortest_path import Path


class SearchCursor:
    """Step-at-a-time walk from *root*.

    Args:
        graph: graph to walk
        root: live id the walk starts on
        search: Search.DFS (default), Search.BFS, or a Frontier instance
        reverse: follow incoming edges instead of outgoing ones
    """

    __slots__ = (
        "_graph", "_root", "_frontier", "_reverse",
        "_visited", "_current", "_pending", "_pruned",
    )

    def __init__(
        self,
        graph: Graph,
        root: int,
        search: Search | Frontier | None = None,
        reverse: bool = False,
    ) -> None:
        if not graph.is_valid(root):
            raise InvalidNodeError(root)
        if search is None:
            search = Search.DFS
        self._graph = graph
        self._root = root
        self._frontier = search.frontier() if isinstance(search, Search) else search
        self._reverse = reverse
        self._visited: set[int] = set()
        self._current: int | None = None
        self._pending = False
        self._pruned = False
        self.rewind()

    # ---- stepping --------------------------------------------------------

    @property
    def current(self) -> int | None:
        """Node the cursor is on, or None once the walk is exhausted."""
        return self._current

    @property
    def root(self) -> int:
        return self._root

    @property
    def at_end(self) -> bool:
        return self._current is None

    @property
    def visited(self) -> frozenset[int]:
        return frozenset(self._visited)

    def advance(self) -> int | None:
        """Move to the next unvisited node and return it (None at end)."""
        self._expand()
        self._discard_visited()
        if not self._frontier:
            self._current = None
            return None
        self._visit(self._frontier.pop())
        return self._current

    def peek(self) -> int | None:
        """The node advance() would move to, without moving.

        Peeking expands the current node, so a prune() issued after
        peek() is ignored.
        """
        self._expand()
        self._discard_visited()
        return self._frontier.peek()

    def prune(self) -> None:
        """Do not expand the current node's neighbours.

        One-shot: applies to the next advance() only.  Ignored once the
        current node has been expanded by peek().
        """
        if self._pending:
            self._pruned = True

    def rewind(self) -> None:
        """Restart the walk at the root with nothing visited."""
        self._frontier.clear()
        self._visited.clear()
        self._pruned = False
        self._visit(self._root)

    def _visit(self, node: int) -> None:
        self._current = node
        self._visited.add(node)
        self._pending = True

    def _expand(self) -> None:
        if not self._pending:
            return
        self._pending = False
        if self._pruned:
            self._pruned = False
            return
        node = self._current
        if node is None:
            return
        neighbours = (
            self._graph.predecessors(node) if self._reverse
            else self._graph.successors(node)
        )
        for nxt in neighbours:
            if nxt not in self._visited:
                self._frontier.push(nxt)

    def _discard_visited(self) -> None:
        while self._frontier and self._frontier.peek() in self._visited:
            self._frontier.pop()

    # ---- path queries ----------------------------------------------------

    def shortest_paths(self) -> Path | None:
        """Shortest-path snapshot rooted at the current node (None at end)."""
        if self._current is None:
            return None
        return self._graph.shortest_paths(self._current)

    def path_to(self, other: SearchCursor) -> list[int]:
        """Shortest route from this cursor's node to *other*'s node.

        Empty when either cursor is exhausted, the target is unreachable,
        or the target lies downstream of a negative cycle.
        """
        if other.current is None:
            return []
        paths = self.shortest_paths()
        if paths is None:
            return []
        return paths.path_to(other.current)

    def distance_to(self, other: SearchCursor) -> Weight:
        """Shortest distance from this cursor's node to *other*'s node.

        UNREACHABLE when either cursor is exhausted.
        """
        if other.current is None:
            return UNREACHABLE
        paths = self.shortest_paths()
        if paths is None:
            return UNREACHABLE
        return paths.distance_to(other.current)

    # ---- dunder ----------------------------------------------------------

    def __iter__(self) -> Iterator[int]:
        while self._current is not None:
            yield self._current
            self.advance()

    def __repr__(self) -> str:
        kind = type(self._frontier).__name__
        return (
            f"SearchCursor(root={self._root}, current={self._current}, "
            f"frontier={kind}, reverse={self._reverse})"
        )
