"""Huffman coding over 8-bit symbols."""

from __future__ import annotations

import heapq
import itertools
from collections import Counter
from dataclasses import dataclass


@dataclass(eq=False)
class _HuffNode:
    symbol: int = 0
    left: _HuffNode | None = None
    right: _HuffNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _as_bytes(data: str | bytes | bytearray) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _symbol_value(symbol: int | str | bytes) -> int:
    if isinstance(symbol, int):
        return symbol
    raw = _as_bytes(symbol)
    if len(raw) != 1:
        raise ValueError(f"symbol {symbol!r} is not a single byte")
    return raw[0]


class HuffTree:
    """A Huffman code built from the byte frequencies of a sample.

    The sample is either representative text or the text to compress itself.
    Strings are taken as their UTF-8 bytes.
    """

    def __init__(self, sample: str | bytes | bytearray) -> None:
        data = _as_bytes(sample)
        self.freqs: list[int] = [0] * 256
        for symbol, count in Counter(data).items():
            self.freqs[symbol] = count
        self._root = self._build_tree()
        self._codes = self._build_codes(self._root)

    def _build_tree(self) -> _HuffNode:
        tie = itertools.count()
        queue = [
            (freq, next(tie), _HuffNode(symbol=symbol))
            for symbol, freq in enumerate(self.freqs)
            if freq
        ]
        if not queue:
            raise ValueError("cannot build a Huffman tree from an empty sample")
        heapq.heapify(queue)
        while len(queue) > 1:
            prio1, _, node1 = heapq.heappop(queue)
            prio2, _, node2 = heapq.heappop(queue)
            merged = _HuffNode(left=node1, right=node2)
            heapq.heappush(queue, (prio1 + prio2, next(tie), merged))
        return queue[0][2]

    @staticmethod
    def _build_codes(root: _HuffNode) -> dict[int, str]:
        codes: dict[int, str] = {}
        stack: list[tuple[_HuffNode, str]] = [(root, "")]
        while stack:
            node, code = stack.pop()
            if node.is_leaf:
                codes[node.symbol] = code
            if node.right is not None:
                stack.append((node.right, code + "1"))
            if node.left is not None:
                stack.append((node.left, code + "0"))
        return codes

    def code_for(self, symbol: int | str | bytes) -> str:
        """Return the code of ``symbol`` as a string of '0' and '1'."""
        return self._codes[_symbol_value(symbol)]

    def encode(self, msg: str | bytes | bytearray) -> tuple[bytes, int]:
        """Encode ``msg``; return the packed bits (MSB first) and the bit count."""
        bits = "".join(self._codes[symbol] for symbol in _as_bytes(msg))
        length = len(bits)
        if not length:
            return b"", 0
        padded = bits.ljust((length + 7) // 8 * 8, "0")
        return int(padded, 2).to_bytes(len(padded) // 8, "big"), length

    def decode(self, codes: bytes | bytearray, length: int) -> bytes:
        """Decode the first ``length`` bits of ``codes`` back into bytes."""
        if length < 0 or length > len(codes) * 8:
            raise ValueError(f"bit length {length} does not fit in {len(codes)} bytes")
        root = self._root
        if root.is_leaf:
            if length:
                raise ValueError("a single-symbol code carries no bits")
            return bytes([root.symbol])

        out = bytearray()
        node: _HuffNode | None = root
        for cursor in range(length):
            assert node is not None
            if node.is_leaf:
                out.append(node.symbol)
                node = root
            bit = (codes[cursor // 8] >> (7 - cursor % 8)) & 1
            node = node.right if bit else node.left
            if node is None:
                raise ValueError("bit stream does not follow the code tree")
        if node is not None and node.is_leaf:
            out.append(node.symbol)
        return bytes(out)