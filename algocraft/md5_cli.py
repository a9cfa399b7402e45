"""Command line MD5 tool: digest strings, files, or standard input."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Sequence
from functools import partial

from algocraft.md5 import MD5

TEST_BLOCK_SIZE = 1000
TEST_BLOCKS = 10000
TEST_BYTES = TEST_BLOCK_SIZE * TEST_BLOCKS

_SUITE = (
    "",
    "a",
    "abc",
    "message digest",
    "abcdefghijklmnopqrstuvwxyz",
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
    "1234567890" * 8,
)


def digest_string(text: str) -> str:
    """Return the hex digest of ``text`` encoded as UTF-8."""
    return MD5(text.encode("utf-8")).hexdigest()


def digest_file(path: str | os.PathLike[str]) -> str:
    """Return the hex digest of the file at ``path``; raises OSError if unreadable."""
    h = MD5()
    with open(path, "rb") as f:
        for chunk in iter(partial(f.read, 1024), b""):
            h.update(chunk)
    return h.hexdigest()


def _print_string(text: str) -> None:
    print(f'{digest_string(text)} "{text}"\n')


def _print_file(path: str) -> None:
    try:
        digest = digest_file(path)
    except OSError:
        print(f"{path} can't be opened.")
        return
    print(f"{digest} {path}")


def _filter_stdin() -> None:
    h = MD5()
    stream = sys.stdin.buffer
    for chunk in iter(partial(stream.read, 4096), b""):
        h.update(chunk)
    print(h.hexdigest())


def _time_trial() -> None:
    data = bytes(i & 0xFF for i in range(TEST_BLOCK_SIZE))
    print(f"MD5 time trial. Processing {TEST_BYTES} characters...")
    start = time.perf_counter()
    h = MD5()
    for _ in range(TEST_BLOCKS):
        h.update(data)
    digest = h.hexdigest()
    elapsed = max(time.perf_counter() - start, 1e-9)
    print(f"{digest} is digest of test input.")
    print(f"Seconds to process test input: {int(elapsed)}")
    print(f"Characters processed per second: {int(TEST_BYTES / elapsed)}")


def _test_suite() -> None:
    print("MD5 test suite results:\n")
    for text in _SUITE:
        _print_string(text)
    _print_file("foo")


def main(argv: Sequence[str] | None = None) -> int:
    """Digest each argument: ``-sSTRING``, ``-t``, ``-x`` or a file name.

    With no arguments the digest of standard input is printed.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        _filter_stdin()
        return 0
    for arg in args:
        if arg.startswith("-s"):
            _print_string(arg[2:])
        elif arg == "-t":
            _time_trial()
        elif arg == "-x":
            _test_suite()
        else:
            _print_file(arg)
    return 0


if __name__ == "__main__":
    sys.exit(main())