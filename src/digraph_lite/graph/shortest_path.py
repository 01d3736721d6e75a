"""Single-source shortest paths.

Two algorithms, chosen by the graph's weighted flag:

  Unweighted -- BFS levels.  One breadth-first pass from the root; the
  first time a node is reached it gets level = parent level + 1 and
  records the parent as its predecessor.  O(V + E).

  Weighted -- Bellman-Ford.  Every distance starts at UNREACHABLE
  except the root (0).  Relax every edge (u, v):

      if dist[u] + w(u, v) < dist[v]:
          dist[v] = dist[u] + w(u, v); pred[v] = u

  V - 1 times (stopping early once a pass changes nothing).  If one
  more pass can still relax an edge, a negative cycle is reachable
  from the root.  Every node reachable from the head of such an edge
  has no well-defined shortest path; those nodes are recorded as
  affected and every other node keeps its normal answer.  O(V * E).

The result is a Path: a snapshot of predecessors and distances at the
moment of computation.  It remembers the graph generation it was
built at and refuses to answer once the graph has changed.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from digraph_lite.graph.adjacency import UNREACHABLE, InvalidNodeError, Weight
from digraph_lite.graph.frontier import Search
from digraph_lite.graph.traversal import SearchCursor

if TYPE_CHECKING:
    from digraph_lite.graph.adjacency import Graph

NEGATIVE_CYCLE: Weight = -math.inf

log = logging.getLogger(__name__)


class StalePathError(RuntimeError):
    """Raised when a Path is queried after its graph was mutated."""

    def __init__(self, computed_at: int, current: int) -> None:
        self.computed_at = computed_at
        self.current = current
        super().__init__(
            f"Path computed at graph generation {computed_at} "
            f"but the graph is now at generation {current}"
        )


@dataclass(slots=True)
class Path:
    """Distance/predecessor snapshot rooted at *root*.

    ``predecessors`` and ``distances`` are indexed by node id and sized
    to the graph's capacity at computation time.  ``affected`` holds the
    nodes downstream of a reachable negative cycle: for them path_to()
    returns [] and distance_to() returns NEGATIVE_CYCLE.
    """
    root: int
    predecessors: list[int | None]
    distances: list[Weight]
    affected: frozenset[int] = frozenset()
    generation: int = 0
    graph: Graph | None = field(default=None, repr=False, compare=False)

    @property
    def negative_cycle(self) -> bool:
        return bool(self.affected)

    def distance_to(self, node: int) -> Weight:
        """Distance from the root to *node*, UNREACHABLE if never reached."""
        self._check_fresh()
        if node in self.affected:
            return NEGATIVE_CYCLE
        if not 0 <= node < len(self.distances):
            return UNREACHABLE
        return self.distances[node]

    def reachable(self, node: int) -> bool:
        """True if the root reaches *node*, negative cycle or not."""
        self._check_fresh()
        return 0 <= node < len(self.distances) and self.distances[node] != UNREACHABLE

    def path_to(self, node: int) -> list[int]:
        """Nodes on the shortest route root -> ... -> node.

        Returns [root] for the root itself and [] when *node* is
        unreachable or lies downstream of a negative cycle.
        """
        self._check_fresh()
        if node in self.affected or not self.reachable(node):
            return []

        path = [node]
        seen = {node}
        cur = node
        while cur != self.root:
            prev = self.predecessors[cur]
            if prev is None or prev in seen:
                # broken predecessor chain
                return []
            path.append(prev)
            seen.add(prev)
            cur = prev
        path.reverse()
        return path

    def _check_fresh(self) -> None:
        if self.graph is not None and self.graph.generation != self.generation:
            raise StalePathError(self.generation, self.graph.generation)


def shortest_paths(graph: Graph, root: int) -> Path:
    """Shortest paths from *root*, Bellman-Ford if the graph is weighted."""
    if graph.is_weighted():
        return bellman_ford(graph, root)
    return bfs_distance(graph, root)


def bfs_distance(graph: Graph, root: int) -> Path:
    """Hop counts from *root* using one breadth-first pass."""
    if not graph.is_valid(root):
        raise InvalidNodeError(root)
    log.debug("BFS distances from node %d", root)

    cap = graph.capacity
    level: list[Weight] = [UNREACHABLE] * cap
    pred: list[int | None] = [None] * cap
    level[root] = 0

    for node in SearchCursor(graph, root, Search.BFS):
        for child in graph.successors(node):
            if level[child] == UNREACHABLE:
                level[child] = level[node] + 1
                pred[child] = node

    return Path(
        root=root,
        predecessors=pred,
        distances=level,
        generation=graph.generation,
        graph=graph,
    )


def bellman_ford(graph: Graph, root: int) -> Path:
    """Weighted distances from *root*; flags reachable negative cycles."""
    if not graph.is_valid(root):
        raise InvalidNodeError(root)
    log.debug("Bellman-Ford distances from node %d", root)

    cap = graph.capacity
    dist: list[Weight] = [UNREACHABLE] * cap
    pred: list[int | None] = [None] * cap
    dist[root] = 0

    edges = [(u, v, graph.weight(u, v)) for u, v in graph.edges()]

    for _ in range(graph.order() - 1):
        changed = False
        for u, v, w in edges:
            du = dist[u]
            if du == UNREACHABLE:
                continue
            if du + w < dist[v]:
                dist[v] = du + w
                pred[v] = u
                changed = True
        if not changed:
            break

    affected: set[int] = set()
    for u, v, w in edges:
        if v in affected or dist[u] == UNREACHABLE or dist[u] + w >= dist[v]:
            continue
        cursor = SearchCursor(graph, v, Search.BFS)
        for node in cursor:
            if node in affected:
                # already marked along with everything below it
                cursor.prune()
            affected.add(node)
    if affected:
        log.warning(
            "Negative cycle reachable from node %d affects %d node(s)",
            root, len(affected),
        )

    return Path(
        root=root,
        predecessors=pred,
        distances=dist,
        affected=frozenset(affected),
        generation=graph.generation,
        graph=graph,
    )
