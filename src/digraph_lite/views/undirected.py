"""Undirected view over a Graph.

Each undirected edge {u, v} is stored as the two directed edges u -> v
and v -> u with the same weight, so the forward list of a node already
holds all of its neighbours.  A self loop is stored once.
"""
from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

from digraph_lite.graph.adjacency import UNIT_WEIGHT, Graph, Weight
from digraph_lite.graph.frontier import Frontier, Search
from digraph_lite.graph.shortest_path import Path
from digraph_lite.graph.traversal import SearchCursor

T = TypeVar("T")


class UndirectedGraph(Generic[T]):
    __slots__ = ("_graph",)

    def __init__(self) -> None:
        self._graph: Graph[T] = Graph()

    @property
    def graph(self) -> Graph[T]:
        return self._graph

    # ---- mutation --------------------------------------------------------

    def insert(self, value: T) -> int:
        return self._graph.insert(value)

    def edge(self, u: int, v: int, weight: Weight = UNIT_WEIGHT) -> None:
        """Connect *u* and *v* in both directions."""
        self._graph.edge(u, v, weight)
        if u != v:
            self._graph.edge(v, u, weight)

    def erase(self, nodes: int | Iterable[int], other: int | None = None) -> None:
        """Erase node(s), or with *other* one undirected edge."""
        if other is None:
            self._graph.erase(nodes)
            return
        if not isinstance(nodes, int):
            raise TypeError("erase(u, v) takes two node ids")
        self._graph.erase_edge(nodes, other)
        if nodes != other:
            self._graph.erase_edge(other, nodes)

    # ---- queries ---------------------------------------------------------

    def neighbors(self, node: int) -> tuple[int, ...]:
        return self._graph.successors(node)

    def degree(self, node: int) -> int:
        return self._graph.out_degree(node)

    def has_edge(self, u: int, v: int) -> bool:
        return self._graph.has_edge(u, v)

    def weight(self, u: int, v: int) -> Weight:
        return self._graph.weight(u, v)

    def is_weighted(self) -> bool:
        return self._graph.is_weighted()

    def order(self) -> int:
        return self._graph.order()

    def size(self) -> int:
        """Number of undirected edges, each counted once."""
        return sum(1 for _ in self.edges())

    def nodes(self) -> Iterator[int]:
        return self._graph.nodes()

    def edges(self) -> Iterator[tuple[int, int]]:
        """Each undirected edge once, as (low id, high id)."""
        for u, v in self._graph.edges():
            if u <= v:
                yield u, v

    def search(self, root: int, search: Search | Frontier | None = None) -> SearchCursor:
        return self._graph.search(root, search)

    def shortest_paths(self, root: int) -> Path:
        return self._graph.shortest_paths(root)

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
        return f"UndirectedGraph(nodes={self.order()}, edges={self.size()})"
