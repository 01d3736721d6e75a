"""Tests for the tombstone-aware node and edge cursors."""
from __future__ import annotations

import random

from digraph_lite.graph.adjacency import Graph
from digraph_lite.graph.enumerators import EdgeCursor, NodeCursor


class TestNodeCursor:
    def test_iterates_live_ids(self, linear_graph: Graph[str]) -> None:
        assert list(linear_graph.nodes()) == [0, 1, 2, 3]

    def test_skips_tombstones(self, linear_graph: Graph[str]) -> None:
        linear_graph.erase({0, 2})
        assert list(linear_graph.nodes()) == [1, 3]

    def test_empty_graph_starts_at_end(self, empty_graph: Graph[str]) -> None:
        assert NodeCursor(empty_graph).current is None

    def test_advance_past_last_is_none(self, linear_graph: Graph[str]) -> None:
        cur = NodeCursor(linear_graph, start=3)
        assert cur.current == 3
        assert cur.advance() is None
        assert cur.advance() is None

    def test_retreat(self, linear_graph: Graph[str]) -> None:
        linear_graph.erase(2)
        cur = NodeCursor(linear_graph, start=3)
        assert cur.retreat() == 1
        assert cur.retreat() == 0
        assert cur.retreat() is None

    def test_start_lands_on_next_live(self, linear_graph: Graph[str]) -> None:
        linear_graph.erase(1)
        assert NodeCursor(linear_graph, start=1).current == 2

    def test_advance_by(self, linear_graph: Graph[str]) -> None:
        linear_graph.erase(2)
        cur = NodeCursor(linear_graph)
        assert cur.advance_by(2) == 3
        cur = NodeCursor(linear_graph, start=3)
        assert cur.retreat_by(2) == 1


class TestEdgeCursor:
    def test_edges_in_source_then_adjacency_order(self, diamond_graph: Graph[str]) -> None:
        assert list(diamond_graph.edges()) == [(0, 1), (0, 2), (1, 3), (2, 3)]

    def test_skips_nodes_without_out_edges(self, empty_graph: Graph[str]) -> None:
        ids = [empty_graph.insert(v) for v in "abcde"]
        empty_graph.edge(ids[3], ids[0])
        empty_graph.edge(ids[1], ids[4])
        assert list(empty_graph.edges()) == [(1, 4), (3, 0)]

    def test_multi_edges_reported_per_instance(self, empty_graph: Graph[str]) -> None:
        a = empty_graph.insert("a")
        b = empty_graph.insert("b")
        empty_graph.edge(a, b)
        empty_graph.edge(a, b)
        assert list(empty_graph.edges()) == [(a, b), (a, b)]

    def test_current_tracks_position(self, linear_graph: Graph[str]) -> None:
        cur = EdgeCursor(linear_graph)
        assert cur.current is None
        assert cur.advance() == (0, 1)
        assert cur.current == (0, 1)
        cur.advance()
        cur.advance()
        assert cur.advance() is None
        assert cur.current is None

    def test_no_edges(self, empty_graph: Graph[str]) -> None:
        empty_graph.insert("lonely")
        assert list(empty_graph.edges()) == []

    def test_count_matches_out_degree_sum(self) -> None:
        rng = random.Random(42)
        g: Graph[int] = Graph()
        for i in range(40):
            g.insert(i)
        for _ in range(200):
            g.edge(rng.randrange(40), rng.randrange(40))
        g.erase(set(rng.sample(range(40), 8)))
        edges = list(g.edges())
        assert len(edges) == sum(g.out_degree(n) for n in g.nodes())
        assert len(edges) == g.size()
