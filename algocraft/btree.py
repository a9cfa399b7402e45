"""A disk-resident B-tree of 32-bit integer keys stored in 4 KiB blocks.

Each node occupies one block of the backing file. The root always lives at
offset 0; other nodes are appended to the end of the file as they are created.
Blocks of nodes merged away are marked free and left in place.
"""

from __future__ import annotations

import os
import struct
from bisect import bisect_left, bisect_right
from dataclasses import dataclass, field
from types import TracebackType

BLOCK_SIZE = 4096
T = 255
MAX_KEYS = 2 * T - 1

LEAF = 0x0001
ONDISK = 0x0002
MARKFREE = 0x0004

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

# n, flag, offset, padding, key[509], c[510]
_LAYOUT = struct.Struct(f"<HHI12s{MAX_KEYS}i{MAX_KEYS + 1}i")
_PADDING = b"\xcc" * 12


@dataclass(frozen=True)
class SearchResult:
    """Location of a key: the block offset and the index within that block.

    A key that is absent is reported as offset 0 and index -1.
    """

    offset: int
    index: int

    @property
    def found(self) -> bool:
        return self.index >= 0


@dataclass
class _Node:
    keys: list[int] = field(default_factory=list)
    children: list[int] = field(default_factory=list)
    leaf: bool = True
    offset: int = 0
    on_disk: bool = False
    free: bool = False

    @property
    def flag(self) -> int:
        flag = 0
        if self.leaf:
            flag |= LEAF
        if self.on_disk:
            flag |= ONDISK
        if self.free:
            flag |= MARKFREE
        return flag


class BTree:
    """A B-tree of minimum degree 255 kept in the file at ``path``."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        try:
            self._file = open(path, "r+b")
        except FileNotFoundError:
            self._file = open(path, "w+b")
        size = self._file.seek(0, os.SEEK_END)
        if size == 0:
            self._write(_Node(leaf=True))
        elif size < BLOCK_SIZE:
            self._file.close()
            raise ValueError(f"{os.fspath(path)!r} is not a B-tree file")

    # -- public operations -------------------------------------------------

    def search(self, key: int) -> SearchResult:
        """Locate ``key`` and return where it is stored."""
        node = self._read(0)
        while True:
            i = bisect_left(node.keys, key)
            if i < len(node.keys) and node.keys[i] == key:
                return SearchResult(node.offset, i)
            if node.leaf:
                return SearchResult(0, -1)
            node = self._read(node.children[i])

    def insert(self, key: int) -> None:
        """Insert ``key``; duplicate keys are kept."""
        if not _INT32_MIN <= key <= _INT32_MAX:
            raise ValueError(f"key {key} does not fit in 32 bits")
        root = self._read(0)
        if len(root.keys) == MAX_KEYS:
            # move the old root to the end of the file, new root takes offset 0
            root.on_disk = False
            self._write(root)
            new_root = _Node(leaf=False, offset=0, on_disk=True, children=[root.offset])
            self._split_child(new_root, 0, root)
            self._insert_nonfull(new_root, key)
        else:
            self._insert_nonfull(root, key)

    def delete(self, key: int) -> None:
        """Remove one occurrence of ``key``; absent keys are ignored."""
        self._delete(self._read(0), key)

    def close(self) -> None:
        """Close the backing file."""
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> BTree:
        return self

    def __exit__(
        self,
        *args: type[BaseException] | BaseException | TracebackType | None,
    ) -> None:
        self.close()

    # -- insertion ---------------------------------------------------------

    def _insert_nonfull(self, x: _Node, key: int) -> None:
        while not x.leaf:
            i = bisect_right(x.keys, key)
            child = self._read(x.children[i])
            if len(child.keys) == MAX_KEYS:
                self._split_child(x, i, child)
                if key > x.keys[i]:
                    i += 1
                child = self._read(x.children[i])
            x = child
        x.keys.insert(bisect_right(x.keys, key), key)
        self._write(x)

    def _split_child(self, x: _Node, i: int, y: _Node) -> None:
        z = _Node(leaf=y.leaf, keys=y.keys[T:])
        if not y.leaf:
            z.children = y.children[T:]
            y.children = y.children[:T]
        median = y.keys[T - 1]
        y.keys = y.keys[: T - 1]
        self._write(y)
        self._write(z)
        x.children.insert(i + 1, z.offset)
        x.keys.insert(i, median)
        self._write(x)

    # -- deletion ----------------------------------------------------------

    def _delete(self, x: _Node, key: int) -> None:
        while x.keys:
            keys = x.keys
            i = bisect_left(keys, key)
            if i < len(keys) and keys[i] == key:
                if x.leaf:
                    del keys[i]
                    self._write(x)
                    return
                y = self._read(x.children[i])
                if len(y.keys) >= T:
                    pred = self._last_key(y)
                    keys[i] = pred
                    self._write(x)
                    x, key = y, pred
                    continue
                z = self._read(x.children[i + 1])
                if len(z.keys) >= T:
                    succ = self._first_key(z)
                    keys[i] = succ
                    self._write(x)
                    x, key = z, succ
                    continue
                x = self._merge(x, i, y, z)
                continue
            if x.leaf:
                return
            x = self._fill(x, i)

    def _fill(self, x: _Node, i: int) -> _Node:
        """Return child ``i`` of ``x`` after making sure it holds at least T keys."""
        child = self._read(x.children[i])
        if len(child.keys) >= T:
            return child

        left = None
        if i > 0:
            left = self._read(x.children[i - 1])
            if len(left.keys) >= T:
                child.keys.insert(0, x.keys[i - 1])
                x.keys[i - 1] = left.keys.pop()
                if not child.leaf:
                    child.children.insert(0, left.children.pop())
                self._write(child)
                self._write(left)
                self._write(x)
                return child

        if i < len(x.keys):
            right = self._read(x.children[i + 1])
            if len(right.keys) >= T:
                child.keys.append(x.keys[i])
                x.keys[i] = right.keys.pop(0)
                if not child.leaf:
                    child.children.append(right.children.pop(0))
                self._write(child)
                self._write(right)
                self._write(x)
                return child
            return self._merge(x, i, child, right)

        assert left is not None
        return self._merge(x, i - 1, left, child)

    def _merge(self, x: _Node, i: int, y: _Node, z: _Node) -> _Node:
        """Merge key ``i`` of ``x`` and child ``z`` into child ``y``."""
        y.keys.append(x.keys.pop(i))
        y.keys.extend(z.keys)
        y.children.extend(z.children)
        x.children.pop(i + 1)

        z.keys = []
        z.children = []
        z.free = True
        self._write(z)

        if x.offset == 0 and not x.keys:
            # the root became empty: the merged node takes its place
            y.free = True
            self._write(y)
            y.free = False
            y.offset = 0
            self._write(y)
        else:
            self._write(x)
            self._write(y)
        return y

    def _last_key(self, node: _Node) -> int:
        while not node.leaf:
            node = self._read(node.children[-1])
        return node.keys[-1]

    def _first_key(self, node: _Node) -> int:
        while not node.leaf:
            node = self._read(node.children[0])
        return node.keys[0]

    # -- block I/O ---------------------------------------------------------

    def _read(self, offset: int) -> _Node:
        self._file.seek(offset)
        data = self._file.read(BLOCK_SIZE)
        if len(data) != BLOCK_SIZE:
            raise ValueError(f"truncated block at offset {offset}")
        fields = _LAYOUT.unpack(data)
        n, flag = fields[0], fields[1]
        keys = fields[4 : 4 + MAX_KEYS]
        children = fields[4 + MAX_KEYS :]
        leaf = bool(flag & LEAF)
        return _Node(
            keys=list(keys[:n]),
            children=[] if leaf else list(children[: n + 1]),
            leaf=leaf,
            offset=offset,
            on_disk=True,
            free=bool(flag & MARKFREE),
        )

    def _write(self, node: _Node) -> None:
        if node.on_disk:
            self._file.seek(node.offset)
        else:
            node.offset = self._file.seek(0, os.SEEK_END)
        node.on_disk = True
        keys = node.keys + [0] * (MAX_KEYS - len(node.keys))
        children = node.children + [0] * (MAX_KEYS + 1 - len(node.children))
        self._file.write(
            _LAYOUT.pack(len(node.keys), node.flag, node.offset, _PADDING, *keys, *children)
        )