"""Strongly connected components by two depth-first searches."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping


def _dfs(
    adjacency: Mapping[Hashable, list[Hashable]],
    start: Hashable,
    visited: set[Hashable],
    finished: list[Hashable],
) -> list[Hashable]:
    visited.add(start)
    discovered = [start]
    stack = [(start, iter(adjacency[start]))]
    while stack:
        node, neighbours = stack[-1]
        for nxt in neighbours:
            if nxt not in visited:
                visited.add(nxt)
                discovered.append(nxt)
                stack.append((nxt, iter(adjacency[nxt])))
                break
        else:
            stack.pop()
            finished.append(node)
    return discovered


def strongly_connected_components(
    graph: Mapping[Hashable, Iterable[Hashable]],
) -> list[list[Hashable]]:
    """Return the strongly connected components of a directed graph.

    ``graph`` maps each vertex to its successors (a weight mapping works too).
    Components come in decreasing order of finishing time from the first
    search; within a component, vertices are in discovery order.
    """
    order = dict.fromkeys(graph)
    for successors in graph.values():
        for v in successors:
            order.setdefault(v)
    adjacency = {v: list(graph.get(v, ())) for v in order}

    finished: list[Hashable] = []
    visited: set[Hashable] = set()
    for v in adjacency:
        if v not in visited:
            _dfs(adjacency, v, visited, finished)

    transpose: dict[Hashable, list[Hashable]] = {v: [] for v in adjacency}
    for u, successors in adjacency.items():
        for v in successors:
            transpose[v].append(u)

    components = []
    visited = set()
    unused: list[Hashable] = []
    for v in reversed(finished):
        if v not in visited:
            components.append(_dfs(transpose, v, visited, unused))
    return components