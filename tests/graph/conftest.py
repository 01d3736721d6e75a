"""Shared fixtures for graph container tests."""
from __future__ import annotations

import pytest

from digraph_lite.graph.adjacency import Graph


@pytest.fixture
def empty_graph() -> Graph[str]:
    return Graph()


@pytest.fixture
def linear_graph() -> Graph[str]:
    """A -> B -> C -> D  (ids 0..3)"""
    g: Graph[str] = Graph()
    ids = [g.insert(name) for name in "ABCD"]
    for src, dst in zip(ids, ids[1:]):
        g.edge(src, dst)
    return g


@pytest.fixture
def diamond_graph() -> Graph[str]:
    """
    A -> B -> D
    A -> C -> D
    """
    g: Graph[str] = Graph()
    a, b, c, d = (g.insert(name) for name in "ABCD")
    for src, dst in [(a, b), (a, c), (b, d), (c, d)]:
        g.edge(src, dst)
    return g


@pytest.fixture
def weighted_graph() -> Graph[str]:
    """
    A -1-> B -1-> C -1-> D
    A -----4----> C
    """
    g: Graph[str] = Graph()
    a, b, c, d = (g.insert(name) for name in "ABCD")
    g.edge(a, b, 1)
    g.edge(b, c, 1)
    g.edge(a, c, 4)
    g.edge(c, d, 1)
    return g

