"""Tombstone-aware cursors over live nodes and live edges.

Storage keeps tombstoned slots around until insert() recycles them,
so plain ``range(graph.capacity)`` would hand out dead ids.  The
cursors here skip them.  Both hold ``current`` = None once exhausted.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from digraph_lite.graph.adjacency import Graph


class NodeCursor:
    """Bidirectional cursor over live ids in ``[0, capacity)``.

    Starts on the first live id at or after *start*.  Stepping past
    the last live id, or before the first, leaves ``current`` at None.
    """

    __slots__ = ("_graph", "_current", "_started")

    def __init__(self, graph: Graph, start: int = 0) -> None:
        self._graph = graph
        self._current: int | None = self._settle(start, 1)
        self._started = False

    @property
    def current(self) -> int | None:
        return self._current

    def advance(self) -> int | None:
        return self.advance_by(1)

    def retreat(self) -> int | None:
        return self.retreat_by(1)

    def advance_by(self, n: int) -> int | None:
        """Move *n* slots forward, then forward again to a live id."""
        if self._current is not None:
            self._current = self._settle(self._current + n, 1)
        return self._current

    def retreat_by(self, n: int) -> int | None:
        """Move *n* slots back, then back again to a live id."""
        if self._current is not None:
            self._current = self._settle(self._current - n, -1)
        return self._current

    def _settle(self, node: int, step: int) -> int | None:
        cap = self._graph.capacity
        while 0 <= node < cap:
            if self._graph.is_valid(node):
                return node
            node += step
        return None

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if self._started:
            self.advance()
        self._started = True
        if self._current is None:
            raise StopIteration
        return self._current

    def __repr__(self) -> str:
        return f"NodeCursor(current={self._current})"


class EdgeCursor:
    """Cursor over every (src, dst) edge, grouped by source id.

    Walks live sources through a NodeCursor and, for each one, its
    out-list in adjacency order.  Sources with no out-edges are
    skipped.  Multi-edges are reported once per instance.
    """

    __slots__ = ("_graph", "_nodes", "_out", "_idx", "_current")

    def __init__(self, graph: Graph) -> None:
        self._graph = graph
        self._nodes = NodeCursor(graph)
        self._out: tuple[int, ...] = ()
        self._idx = 0
        self._current: tuple[int, int] | None = None

    @property
    def current(self) -> tuple[int, int] | None:
        return self._current

    def advance(self) -> tuple[int, int] | None:
        if self._current is not None and self._idx < len(self._out):
            self._current = (self._current[0], self._out[self._idx])
            self._idx += 1
            return self._current

        while True:
            src = self._nodes.current
            if src is None:
                self._out = ()
                self._current = None
                return None
            self._nodes.advance()
            out = self._graph.successors(src)
            if out:
                break

        self._out = out
        self._current = (src, out[0])
        self._idx = 1
        return self._current

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return self

    def __next__(self) -> tuple[int, int]:
        edge = self.advance()
        if edge is None:
            raise StopIteration
        return edge

    def __repr__(self) -> str:
        return f"EdgeCursor(current={self._current})"
