"""Bellman-Ford single-source shortest paths with negative cycle detection."""

from __future__ import annotations

import math
from collections.abc import Hashable, Mapping


def _vertices(graph: Mapping[Hashable, Mapping[Hashable, float]]) -> list[Hashable]:
    seen = dict.fromkeys(graph)
    for adjacent in graph.values():
        for v in adjacent:
            seen.setdefault(v)
    return list(seen)


class BellmanFord:
    """Shortest paths over a graph given as ``{u: {v: weight, ...}, ...}``.

    After :meth:`run`, ``distances`` holds the distance to every vertex
    (``math.inf`` where unreachable) and ``has_negative_cycle`` tells whether
    a negative-weight cycle was found.
    """

    def __init__(self, graph: Mapping[Hashable, Mapping[Hashable, float]]) -> None:
        self._graph = {u: dict(adjacent) for u, adjacent in graph.items()}
        self._vertices = _vertices(self._graph)
        self.distances: dict[Hashable, float] = {}
        self.has_negative_cycle = False

    def run(self, source: Hashable) -> dict[Hashable, Hashable | None]:
        """Return the predecessor of every vertex on its shortest path from ``source``."""
        if source not in self._vertices:
            raise KeyError(source)

        dist: dict[Hashable, float] = {v: math.inf for v in self._vertices}
        dist[source] = 0
        previous: dict[Hashable, Hashable | None] = {v: None for v in self._vertices}
        self.has_negative_cycle = False

        for _ in range(len(self._vertices) - 1):
            for u, adjacent in self._graph.items():
                dist_u = dist[u]
                for v, weight in adjacent.items():
                    if dist_u + weight < dist[v]:
                        dist[v] = dist_u + weight
                        previous[v] = u

        self.distances = dist
        self.has_negative_cycle = any(
            dist[u] + weight < dist[v]
            for u, adjacent in self._graph.items()
            for v, weight in adjacent.items()
        )
        return previous