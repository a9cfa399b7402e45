"""Lowest common ancestor queries on a tree by binary lifting."""

from __future__ import annotations

from collections.abc import Iterable


class LCA:
    """Answers lowest-common-ancestor queries on a tree rooted at node 0.

    The tree is given by its edges over nodes ``0 .. len(edges)``.
    """

    def __init__(self, edges: Iterable[tuple[int, int]]) -> None:
        edges = list(edges)
        size = len(edges) + 1
        adjacency: list[list[int]] = [[] for _ in range(size)]
        for a, b in edges:
            if not (0 <= a < size and 0 <= b < size):
                raise ValueError(f"edge ({a}, {b}) names a node outside 0..{size - 1}")
            adjacency[a].append(b)
            adjacency[b].append(a)

        max_log = 1
        span = 1
        while span < size:
            span *= 2
            max_log += 1

        parent = [-1] * size
        height = [0] * size
        visited = [False] * size
        visited[0] = True
        stack = [0]
        while stack:
            node = stack.pop()
            for nxt in adjacency[node]:
                if not visited[nxt]:
                    visited[nxt] = True
                    parent[nxt] = node
                    height[nxt] = height[node] + 1
                    stack.append(nxt)
        if not all(visited):
            raise ValueError("edges do not describe a tree")

        levels = [parent]
        for _ in range(max_log):
            prev = levels[-1]
            levels.append([prev[p] if p != -1 else -1 for p in prev])

        self._size = size
        self._parent = parent
        self._height = height
        self._levels = levels

    def query(self, a: int, b: int) -> int:
        """Return the lowest common ancestor of nodes ``a`` and ``b``."""
        for node in (a, b):
            if not 0 <= node < self._size:
                raise IndexError(f"node {node} is not in the tree")
        height = self._height
        if height[a] < height[b]:
            a, b = b, a
        for level in reversed(self._levels):
            up = level[a]
            if up != -1 and height[up] >= height[b]:
                a = up
        if a == b:
            return a
        for level in reversed(self._levels):
            if level[a] != -1 and level[a] != level[b]:
                a, b = level[a], level[b]
        return self._parent[a]