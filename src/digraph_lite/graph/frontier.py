"""Frontier disciplines for SearchCursor.

A frontier is the pending-visit collection of a graph walk.  The
cursor's stepping algorithm is the same for every walk; only the pop
order differs:

    StackFrontier  -- last in, first out  -> depth-first order
    QueueFrontier  -- first in, first out -> breadth-first order

Pick one with the Search enum, or hand SearchCursor any object that
implements the Frontier interface (e.g. a priority frontier).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from enum import Enum


class Frontier(ABC):
    """Interface every frontier discipline implements."""

    @abstractmethod
    def push(self, node: int) -> None:
        ...

    @abstractmethod
    def pop(self) -> int:
        """Remove and return the next node.  IndexError when empty."""
        ...

    @abstractmethod
    def peek(self) -> int | None:
        """Next node without removing it, or None when empty."""
        ...

    @abstractmethod
    def clear(self) -> None:
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...

    def __bool__(self) -> bool:
        return len(self) > 0


class StackFrontier(Frontier):
    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, node: int) -> None:
        self._items.append(node)

    def pop(self) -> int:
        return self._items.pop()

    def peek(self) -> int | None:
        return self._items[-1] if self._items else None

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class QueueFrontier(Frontier):
    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def push(self, node: int) -> None:
        self._items.append(node)

    def pop(self) -> int:
        return self._items.popleft()

    def peek(self) -> int | None:
        return self._items[0] if self._items else None

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class Search(Enum):
    """Built-in traversal strategies."""
    DFS = "dfs"
    BFS = "bfs"

    def frontier(self) -> Frontier:
        if self is Search.DFS:
            return StackFrontier()
        return QueueFrontier()
