"""Depth-first algorithms on graphs stored as adjacency lists.

A graph with ``n`` vertices is a sequence of ``n`` neighbour sequences;
vertices are the integers ``0 .. n-1``.
"""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence
from enum import Enum, auto


class _Mark(Enum):
    NEW = auto()
    ACTIVE = auto()
    DONE = auto()


def add_undirected_edge(adj: Sequence[MutableSequence[int]], u: int, v: int) -> None:
    """Record an edge between ``u`` and ``v`` in both directions."""
    adj[u].append(v)
    adj[v].append(u)


def is_bipartite(adj: Sequence[Sequence[int]]) -> bool:
    """Return whether the vertices can be split into two sides with no edge
    inside either side."""
    color: list[int | None] = [None] * len(adj)
    for start in range(len(adj)):
        if color[start] is not None:
            continue
        color[start] = 1
        stack = [start]
        while stack:
            node = stack.pop()
            for neighbour in adj[node]:
                if color[neighbour] is None:
                    color[neighbour] = 1 - color[node]
                    stack.append(neighbour)
                elif color[neighbour] == color[node]:
                    return False
    return True


def has_cycle(adj: Sequence[Sequence[int]]) -> bool:
    """Return whether the directed graph contains a cycle."""
    marks = [_Mark.NEW] * len(adj)
    for root in range(len(adj)):
        if marks[root] is not _Mark.NEW:
            continue
        marks[root] = _Mark.ACTIVE
        stack: list[tuple[int, Iterator[int]]] = [(root, iter(adj[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if marks[neighbour] is _Mark.ACTIVE:
                    return True
                if marks[neighbour] is _Mark.NEW:
                    marks[neighbour] = _Mark.ACTIVE
                    stack.append((neighbour, iter(adj[neighbour])))
                    break
            else:
                marks[node] = _Mark.DONE
                stack.pop()
    return False


def topological_sort(adj: Sequence[Sequence[int]]) -> list[int]:
    """Return the vertices so that every edge points from earlier to later.

    Vertices are finished in depth-first order starting from vertex 0 and
    listed in reverse finishing order. Cycles are not detected.
    """
    visited = [False] * len(adj)
    finished: list[int] = []
    for root in range(len(adj)):
        if visited[root]:
            continue
        visited[root] = True
        stack: list[tuple[int, Iterator[int]]] = [(root, iter(adj[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(adj[neighbour])))
                    break
            else:
                finished.append(node)
                stack.pop()
    finished.reverse()
    return finished