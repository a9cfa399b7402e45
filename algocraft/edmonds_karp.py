"""Edmonds-Karp maximum flow."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Mapping


class EdmondsKarp:
    """Maximum flow over a capacity graph ``{u: {v: capacity, ...}, ...}``.

    ``residual`` is the residual network as a square matrix whose rows and
    columns follow ``vertices``; ``index`` maps a vertex to its row.
    """

    def __init__(self, graph: Mapping[Hashable, Mapping[Hashable, int]]) -> None:
        order = dict.fromkeys(graph)
        for adjacent in graph.values():
            for v in adjacent:
                order.setdefault(v)
        self.vertices: list[Hashable] = list(order)
        self.index: dict[Hashable, int] = {v: i for i, v in enumerate(self.vertices)}
        size = len(self.vertices)
        self.residual: list[list[int]] = [[0] * size for _ in range(size)]
        for u, adjacent in graph.items():
            for v, capacity in adjacent.items():
                self.residual[self.index[u]][self.index[v]] = capacity

    def run(self, src: Hashable, sink: Hashable) -> int:
        """Push flow along shortest augmenting paths and return the flow added."""
        s = self.index[src]
        t = self.index[sink]
        maxflow = 0
        while (pre := self._find_path(s, t)) is not None:
            edges = []
            node = t
            while node != s:
                edges.append((pre[node], node))
                node = pre[node]
            delta = min(self.residual[a][b] for a, b in edges)
            for a, b in edges:
                self.residual[a][b] -= delta
                self.residual[b][a] += delta
            maxflow += delta
        return maxflow

    def _find_path(self, s: int, t: int) -> dict[int, int] | None:
        pre = {s: s}
        queue = deque([s])
        while queue:
            p = queue.popleft()
            for i, capacity in enumerate(self.residual[p]):
                if capacity > 0 and i not in pre:
                    pre[i] = p
                    if i == t:
                        return pre
                    queue.append(i)
        return None