"""A skip list mapping ordered keys to values."""

from __future__ import annotations

import random
from typing import Any

MAX_LEVEL = 6


class _SkipNode:
    __slots__ = ("key", "value", "forward")

    def __init__(self, level: int, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.forward: list[_SkipNode | None] = [None] * (level + 1)


class SkipList:
    """An ordered map with up to ``MAX_LEVEL + 1`` express lanes.

    Inserting a key that is already present keeps the existing value.
    """

    MAX_LEVEL = MAX_LEVEL

    def __init__(self) -> None:
        self._header = _SkipNode(MAX_LEVEL, None, None)
        self._level = 0

    def _find_update(self, key: Any) -> tuple[list[_SkipNode], _SkipNode | None]:
        update: list[_SkipNode] = [self._header] * (MAX_LEVEL + 1)
        x = self._header
        for i in range(self._level, -1, -1):
            nxt = x.forward[i]
            while nxt is not None and nxt.key < key:
                x = nxt
                nxt = x.forward[i]
            update[i] = x
        return update, x.forward[0]

    def _lookup(self, key: Any) -> _SkipNode | None:
        x = self._header
        for i in range(self._level, -1, -1):
            nxt = x.forward[i]
            while nxt is not None and nxt.key < key:
                x = nxt
                nxt = x.forward[i]
        candidate = x.forward[0]
        if candidate is not None and candidate.key == key:
            return candidate
        return None

    def __getitem__(self, key: Any) -> Any:
        node = self._lookup(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __contains__(self, key: Any) -> bool:
        return self._lookup(key) is not None

    @staticmethod
    def _random_level() -> int:
        level = 0
        while random.random() < 0.5 and level < MAX_LEVEL:
            level += 1
        return level

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key`` with ``value`` unless the key is already present."""
        update, x = self._find_update(key)
        if x is not None and x.key == key:
            return
        level = self._random_level()
        if level > self._level:
            for i in range(self._level + 1, level + 1):
                update[i] = self._header
            self._level = level
        node = _SkipNode(level, key, value)
        for i in range(level + 1):
            node.forward[i] = update[i].forward[i]
            update[i].forward[i] = node

    def delete_key(self, key: Any) -> None:
        """Remove ``key``; an absent key is ignored."""
        update, x = self._find_update(key)
        if x is None or x.key != key:
            return
        for i in range(self._level + 1):
            if update[i].forward[i] is not x:
                break
            update[i].forward[i] = x.forward[i]
        while self._level > 0 and self._header.forward[self._level] is None:
            self._level -= 1

    def levels(self) -> list[list[tuple[Any, Any]]]:
        """Return the (key, value) pairs of every lane, top lane first."""
        result = []
        for i in range(self._level, -1, -1):
            lane = []
            x = self._header.forward[i]
            while x is not None:
                lane.append((x.key, x.value))
                x = x.forward[i]
            result.append(lane)
        return result