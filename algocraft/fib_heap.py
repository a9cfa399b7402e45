"""A Fibonacci heap: a min-heap with cheap insert, union and decrease-key."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class FibNode:
    """A heap entry; keep it to decrease its key later."""

    key: Any
    value: Any
    parent: FibNode | None = field(default=None, repr=False)
    mark: bool = False
    children: list[FibNode] = field(default_factory=list, repr=False)

    @property
    def degree(self) -> int:
        return len(self.children)


class FibHeap:
    """Min-ordered Fibonacci heap of (key, value) entries."""

    def __init__(self) -> None:
        self._roots: list[FibNode] = []
        self._min: FibNode | None = None
        self._n = 0

    def __len__(self) -> int:
        return self._n

    def insert(self, key: Any, value: Any) -> FibNode:
        """Add an entry and return its node."""
        node = FibNode(key, value)
        self._roots.append(node)
        if self._min is None or node.key < self._min.key:
            self._min = node
        self._n += 1
        return node

    @classmethod
    def union(cls, h1: FibHeap, h2: FibHeap) -> FibHeap:
        """Return a heap holding the entries of both; ``h1`` and ``h2`` are emptied."""
        heap = cls()
        heap._roots = h1._roots + h2._roots
        heap._min = h1._min
        if h1._min is None or (h2._min is not None and h2._min.key < h1._min.key):
            heap._min = h2._min
        heap._n = h1._n + h2._n
        for old in (h1, h2):
            old._roots = []
            old._min = None
            old._n = 0
        return heap

    def extract_min(self) -> FibNode | None:
        """Remove and return the node with the smallest key, or None if empty."""
        z = self._min
        if z is None:
            return None
        for child in z.children:
            child.parent = None
            self._roots.append(child)
        z.children = []
        self._roots.remove(z)
        self._n -= 1
        if self._roots:
            self._consolidate()
        else:
            self._min = None
        return z

    def decrease_key(self, node: FibNode, key: Any) -> None:
        """Lower ``node``'s key to ``key``; a larger key is ignored."""
        if key > node.key:
            return
        node.key = key
        parent = node.parent
        if parent is not None and node.key < parent.key:
            self._cut(node, parent)
            self._cascading_cut(parent)
        if self._min is not None and node.key < self._min.key:
            self._min = node

    def _cut(self, x: FibNode, y: FibNode) -> None:
        y.children.remove(x)
        self._roots.append(x)
        x.parent = None
        x.mark = False

    def _cascading_cut(self, y: FibNode) -> None:
        z = y.parent
        while z is not None:
            if not y.mark:
                y.mark = True
                return
            self._cut(y, z)
            y, z = z, z.parent

    def _consolidate(self) -> None:
        by_degree: dict[int, FibNode] = {}
        for w in self._roots:
            x = w
            d = x.degree
            while d in by_degree:
                y = by_degree.pop(d)
                if x.key > y.key:
                    x, y = y, x
                self._link(y, x)
                d += 1
            by_degree[d] = x
        self._roots = list(by_degree.values())
        self._min = min(self._roots, key=lambda node: node.key)

    @staticmethod
    def _link(y: FibNode, x: FibNode) -> None:
        y.parent = x
        x.children.append(y)
        y.mark = False