"""Shared fixtures for the Tree and UndirectedGraph views."""
from __future__ import annotations

import pytest

from digraph_lite.views.tree import Tree
from digraph_lite.views.undirected import UndirectedGraph


@pytest.fixture
def small_tree() -> Tree[str]:
    """
    root(0)
      +-- a(1)
      |     +-- c(3)
      |     +-- d(4)
      +-- b(2)
    """
    t: Tree[str] = Tree()
    root = t.insert("root")
    a = t.add_child(root, "a")
    b = t.add_child(root, "b")
    t.add_child(a, "c")
    t.add_child(a, "d")
    assert (root, a, b) == (0, 1, 2)
    return t


@pytest.fixture
def triangle() -> UndirectedGraph[str]:
    """x(0) -- y(1) -- z(2) -- x(0), weights 1, 2, 5"""
    g: UndirectedGraph[str] = UndirectedGraph()
    x, y, z = (g.insert(v) for v in "xyz")
    g.edge(x, y, 1)
    g.edge(y, z, 2)
    g.edge(z, x, 5)
    return g
