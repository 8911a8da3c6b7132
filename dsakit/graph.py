"""Undirected graph with depth-first traversal."""

from __future__ import annotations

from collections.abc import Hashable


class Graph:
    """An undirected graph stored as adjacency lists."""

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[Hashable]] = {}

    def add_edge(self, u: Hashable, v: Hashable) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._adjacency.setdefault(u, []).append(v)
        self._adjacency.setdefault(v, []).append(u)

    def dfs(self, start: Hashable) -> list[Hashable]:
        """Return vertices in the order an explicit-stack DFS pops them.

        A vertex is marked visited when pushed; neighbours are pushed in
        insertion order, so the last-added neighbour is explored first.
        """
        visited = {start}
        stack = [start]
        order: list[Hashable] = []
        while stack:
            node = stack.pop()
            order.append(node)
            for neighbour in self._adjacency.get(node, ()):
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append(neighbour)
        return order