"""The MD5 message digest."""

from __future__ import annotations

import struct

_MASK = 0xFFFFFFFF
_BLOCK = 64

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_K = (
    # round 1
    3614090360, 3905402710, 606105819, 3250441966,
    4118548399, 1200080426, 2821735955, 4249261313,
    1770035416, 2336552879, 4294925233, 2304563134,
    1804603682, 4254626195, 2792965006, 1236535329,
    # round 2
    4129170786, 3225465664, 643717713, 3921069994,
    3593408605, 38016083, 3634488961, 3889429448,
    568446438, 3275163606, 4107603335, 1163531501,
    2850285829, 4243563512, 1735328473, 2368359562,
    # round 3
    4294588738, 2272392833, 1839030562, 4259657740,
    2763975236, 1272893353, 4139469664, 3200236656,
    681279174, 3936430074, 3572445317, 76029189,
    3654602809, 3873151461, 530742520, 3299628645,
    # round 4
    4096336452, 1126891415, 2878612391, 4237533241,
    1700485571, 2399980690, 4293915773, 2240044497,
    1873313359, 4264355552, 2734768916, 1309151649,
    4149444226, 3174756917, 718787259, 3951481745,
)

_SHIFTS = (
    (7, 12, 17, 22) * 4
    + (5, 9, 14, 20) * 4
    + (4, 11, 16, 23) * 4
    + (6, 10, 15, 21) * 4
)

_WORDS = struct.Struct("<16I")


def _rotate_left(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK


def _compress(state: tuple[int, int, int, int], block: bytes) -> tuple[int, int, int, int]:
    words = _WORDS.unpack(block)
    a, b, c, d = state
    for i in range(64):
        if i < 16:
            f = (b & c) | (~b & d)
            g = i
        elif i < 32:
            f = (b & d) | (c & ~d)
            g = (5 * i + 1) % 16
        elif i < 48:
            f = b ^ c ^ d
            g = (3 * i + 5) % 16
        else:
            f = c ^ (b | ~d)
            g = (7 * i) % 16
        f = (a + f + _K[i] + words[g]) & _MASK
        a, d, c, b = d, c, b, (b + _rotate_left(f, _SHIFTS[i])) & _MASK
    return (
        (state[0] + a) & _MASK,
        (state[1] + b) & _MASK,
        (state[2] + c) & _MASK,
        (state[3] + d) & _MASK,
    )


class MD5:
    """An incremental MD5 hash; feed data with :meth:`update`."""

    digest_size = 16
    block_size = _BLOCK

    def __init__(self, data: bytes | bytearray | memoryview = b"") -> None:
        self._state = _INITIAL_STATE
        self._buffer = b""
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes | bytearray | memoryview) -> None:
        """Append ``data`` to the message."""
        raw = memoryview(data).tobytes()
        self._length += len(raw)
        buffer = self._buffer + raw
        full = len(buffer) - len(buffer) % _BLOCK
        state = self._state
        for start in range(0, full, _BLOCK):
            state = _compress(state, buffer[start : start + _BLOCK])
        self._state = state
        self._buffer = buffer[full:]

    def digest(self) -> bytes:
        """Return the 16-byte digest of the data so far."""
        bit_length = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        used = len(self._buffer)
        pad_len = 56 - used if used < 56 else 120 - used
        tail = self._buffer + b"\x80" + b"\x00" * (pad_len - 1) + struct.pack("<Q", bit_length)
        state = self._state
        for start in range(0, len(tail), _BLOCK):
            state = _compress(state, tail[start : start + _BLOCK])
        return struct.pack("<4I", *state)

    def hexdigest(self) -> str:
        """Return the digest as 32 lower-case hexadecimal digits."""
        return self.digest().hex()