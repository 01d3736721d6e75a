"""Generic directed graph over dense, recyclable integer ids.

Every node lives in a numbered slot.  Slots hold the user value, the
forward adjacency list (successors), the reverse adjacency list
(predecessors), and forward/reverse weight maps.  The reverse
structures mirror the forward ones so in-degree queries and reverse
traversals never need a full scan.

Deleting a node does not shrink storage.  The slot is cleared and its
id is tombstoned on a min-heap free list; the next insert() hands back
the smallest tombstoned id.  This keeps ids dense and stable: an id
held by the caller keeps naming the same node until that node is
erased.

Layout for a graph with edges 0 -> 1 (w=1) and 0 -> 2 (w=4):

    _fwd  = [[1, 2], [], []]
    _rev  = [[], [0], [0]]
    _wfwd = [{1: 1, 2: 4}, {}, {}]
    _wrev = [{}, {0: 1}, {0: 4}]

Adjacency lists may hold the same (u, v) pair more than once.  The
weight maps keep a single weight per pair; the last edge() call wins.
"""
from __future__ import annotations

import heapq
import logging
import math
from typing import TYPE_CHECKING, Generic, Iterable, TypeVar

if TYPE_CHECKING:
    from digraph_lite.graph.enumerators import EdgeCursor, NodeCursor
    from digraph_lite.graph.frontier import Frontier, Search
    from digraph_lite.graph.shortest_path import Path
    from digraph_lite.graph.traversal import SearchCursor

T = TypeVar("T")

Weight = float
UNIT_WEIGHT: Weight = 1
UNREACHABLE: Weight = math.inf

log = logging.getLogger(__name__)


class InvalidNodeError(ValueError):
    """Raised when an id is out of range or names a tombstoned slot."""

    def __init__(self, node: int, reason: str = "is not a live node") -> None:
        self.node = node
        super().__init__(f"Node {node!r} {reason}")


class Graph(Generic[T]):
    """Directed graph with id recycling and optional edge weights.

    The graph flips to "weighted" the first time an edge is added with
    a weight other than 1, and never flips back.  Shortest-path queries
    use BFS levels on unweighted graphs and Bellman-Ford on weighted
    ones.

    Every structural mutation bumps ``generation``.  Path snapshots
    remember the generation they were built at.
    """

    __slots__ = (
        "_values", "_fwd", "_rev", "_wfwd", "_wrev",
        "_live", "_free", "_weighted", "_generation",
    )

    def __init__(self) -> None:
        self._values: list[T | None] = []
        self._fwd: list[list[int]] = []
        self._rev: list[list[int]] = []
        self._wfwd: list[dict[int, Weight]] = []
        self._wrev: list[dict[int, Weight]] = []
        self._live: list[bool] = []
        self._free: list[int] = []
        self._weighted = False
        self._generation = 0

    # ---- mutation --------------------------------------------------------

    def insert(self, value: T) -> int:
        """Store *value* in a slot and return its id.

        Recycles the smallest tombstoned id if there is one, otherwise
        appends a new slot.
        """
        self._generation += 1
        if self._free:
            node = heapq.heappop(self._free)
            self._values[node] = value
            self._live[node] = True
            log.debug("Recycled node id %d", node)
            return node

        self._values.append(value)
        self._fwd.append([])
        self._rev.append([])
        self._wfwd.append({})
        self._wrev.append({})
        self._live.append(True)
        return len(self._values) - 1

    def erase(self, nodes: int | Iterable[int], child: int | None = None) -> None:
        """Erase one node, a batch of nodes, or (with *child*) one edge.

        ``erase(u)`` and ``erase({u, v, w})`` tombstone the given ids and
        drop every adjacency and weight reference to them.  The batch
        form rescans all adjacency once instead of once per id.

        ``erase(u, v)`` removes a single u -> v edge instance.

        Dead ids and missing edges are ignored.
        """
        if child is not None:
            if not isinstance(nodes, int):
                raise TypeError("erase(u, v) takes two node ids")
            self.erase_edge(nodes, child)
            return
        if isinstance(nodes, int):
            self._erase_one(nodes)
        else:
            self._erase_many(nodes)

    def _erase_one(self, node: int) -> None:
        self._check_range(node)
        if not self._live[node]:
            return
        # drop forward edges from this node
        for dst in set(self._fwd[node]):
            self._rev[dst] = [src for src in self._rev[dst] if src != node]
            self._wrev[dst].pop(node, None)
        # drop reverse edges into this node
        for src in set(self._rev[node]):
            self._fwd[src] = [dst for dst in self._fwd[src] if dst != node]
            self._wfwd[src].pop(node, None)
        self._tombstone(node)
        self._generation += 1

    def _erase_many(self, nodes: Iterable[int]) -> None:
        doomed: set[int] = set()
        for node in nodes:
            self._check_range(node)
            if self._live[node]:
                doomed.add(node)
        if not doomed:
            return

        for node in doomed:
            self._tombstone(node)

        for u in range(len(self._values)):
            if not self._live[u]:
                continue
            fwd = self._fwd[u]
            if fwd and not doomed.isdisjoint(fwd):
                self._fwd[u] = [v for v in fwd if v not in doomed]
            rev = self._rev[u]
            if rev and not doomed.isdisjoint(rev):
                self._rev[u] = [v for v in rev if v not in doomed]
            for gone in doomed.intersection(self._wfwd[u]):
                del self._wfwd[u][gone]
            for gone in doomed.intersection(self._wrev[u]):
                del self._wrev[u][gone]

        self._generation += 1
        log.debug("Erased %d node(s) in one pass", len(doomed))

    def _tombstone(self, node: int) -> None:
        self._values[node] = None
        self._fwd[node] = []
        self._rev[node] = []
        self._wfwd[node] = {}
        self._wrev[node] = {}
        self._live[node] = False
        heapq.heappush(self._free, node)

    def erase_edge(self, src: int, dst: int) -> None:
        """Remove one occurrence of edge src -> dst.

        The stored weight for the pair is dropped once no instance of
        the edge is left.  Missing edges are ignored.
        """
        self._check_range(src)
        self._check_range(dst)
        try:
            self._fwd[src].remove(dst)
            self._rev[dst].remove(src)
        except ValueError:
            return
        if dst not in self._fwd[src]:
            self._wfwd[src].pop(dst, None)
            self._wrev[dst].pop(src, None)
        self._generation += 1

    def edge(self, src: int, dst: int, weight: Weight = UNIT_WEIGHT) -> None:
        """Add a directed edge src -> dst with *weight*.

        Duplicate edges are kept in the adjacency lists; the weight of
        the pair is overwritten.
        """
        self._require(src)
        self._require(dst)
        self._fwd[src].append(dst)
        self._rev[dst].append(src)
        self._wfwd[src][dst] = weight
        self._wrev[dst][src] = weight
        if weight != UNIT_WEIGHT and not self._weighted:
            log.debug("Graph became weighted at edge %d -> %d (w=%r)", src, dst, weight)
            self._weighted = True
        self._generation += 1

    # ---- queries ---------------------------------------------------------

    def weight(self, src: int, dst: int) -> Weight:
        """Weight of src -> dst, or UNREACHABLE if there is no such edge."""
        if not 0 <= src < len(self._wfwd):
            return UNREACHABLE
        return self._wfwd[src].get(dst, UNREACHABLE)

    def successors(self, node: int) -> tuple[int, ...]:
        """Out-neighbours in insertion order (the node's out-list)."""
        self._check_range(node)
        return tuple(self._fwd[node])

    def predecessors(self, node: int) -> tuple[int, ...]:
        """In-neighbours in insertion order (the node's in-list)."""
        self._check_range(node)
        return tuple(self._rev[node])

    def has_edge(self, src: int, dst: int) -> bool:
        return 0 <= src < len(self._fwd) and dst in self._fwd[src]

    def in_degree(self, node: int) -> int:
        self._check_range(node)
        return len(self._rev[node])

    def out_degree(self, node: int) -> int:
        self._check_range(node)
        return len(self._fwd[node])

    def degree(self, node: int) -> int:
        return self.in_degree(node) + self.out_degree(node)

    def is_valid(self, node: int) -> bool:
        """True if *node* is in range and not tombstoned."""
        return 0 <= node < len(self._live) and self._live[node]

    def is_weighted(self) -> bool:
        return self._weighted

    def order(self) -> int:
        """Number of live nodes."""
        return len(self._values) - len(self._free)

    def size(self) -> int:
        """Number of directed edges, counted from the out-lists."""
        return sum(len(dsts) for dsts in self._fwd)

    def empty(self) -> bool:
        return self.order() == 0

    @property
    def capacity(self) -> int:
        """Number of physical slots, live or tombstoned."""
        return len(self._values)

    @property
    def generation(self) -> int:
        return self._generation

    # ---- enumeration and search -----------------------------------------

    def nodes(self) -> NodeCursor:
        """Cursor over live ids in ascending order."""
        from digraph_lite.graph.enumerators import NodeCursor

        return NodeCursor(self)

    def edges(self) -> EdgeCursor:
        """Cursor over (src, dst) pairs, grouped by source id."""
        from digraph_lite.graph.enumerators import EdgeCursor

        return EdgeCursor(self)

    def search(
        self, root: int, search: Search | Frontier | None = None
    ) -> SearchCursor:
        """Lazy walk from *root* along outgoing edges (depth-first by default)."""
        from digraph_lite.graph.traversal import SearchCursor

        return SearchCursor(self, root, search)

    def reverse_search(
        self, root: int, search: Search | Frontier | None = None
    ) -> SearchCursor:
        """Lazy walk from *root* along incoming edges."""
        from digraph_lite.graph.traversal import SearchCursor

        return SearchCursor(self, root, search, reverse=True)

    def shortest_paths(self, root: int) -> Path:
        """Single-source shortest paths from *root*."""
        from digraph_lite.graph.shortest_path import shortest_paths

        return shortest_paths(self, root)

    # ---- helpers ---------------------------------------------------------

    def _check_range(self, node: int) -> None:
        if not 0 <= node < len(self._values):
            raise InvalidNodeError(node, "is out of range")

    def _require(self, node: int) -> None:
        self._check_range(node)
        if not self._live[node]:
            raise InvalidNodeError(node)

    # ---- dunder ----------------------------------------------------------

    def __getitem__(self, node: int) -> T:
        self._require(node)
        return self._values[node]  # type: ignore[return-value]

    def __setitem__(self, node: int, value: T) -> None:
        self._require(node)
        self._values[node] = value

    def __contains__(self, node: object) -> bool:
        return isinstance(node, int) and self.is_valid(node)

    def __len__(self) -> int:
        return self.order()

    def __iter__(self) -> NodeCursor:
        return self.nodes()

    def __repr__(self) -> str:
        return (
            f"Graph(nodes={self.order()}, edges={self.size()}, "
            f"weighted={self._weighted})"
        )
