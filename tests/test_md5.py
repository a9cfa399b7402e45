import hashlib

import pytest

from algocraft.md5 import MD5

SUITE = [
    b"",
    b"a",
    b"abc",
    b"message digest",
    b"abcdefghijklmnopqrstuvwxyz",
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
    b"1234567890" * 8,
]


@pytest.mark.parametrize("message", SUITE)
def test_suite_matches_reference(message):
    assert MD5(message).hexdigest() == hashlib.md5(message).hexdigest()


def test_empty_digest_value():
    assert MD5().hexdigest() == "d41d8cd98f00b204e9800998ecf8427e"


@pytest.mark.parametrize("size", [55, 56, 57, 63, 64, 65, 119, 120, 128, 1000])
def test_padding_boundaries(size):
    data = bytes(i & 0xFF for i in range(size))
    assert MD5(data).digest() == hashlib.md5(data).digest()


def test_incremental_update_equals_one_shot():
    data = bytes(range(256)) * 5
    h = MD5()
    for start in range(0, len(data), 37):
        h.update(data[start : start + 37])
    assert h.digest() == MD5(data).digest()


def test_digest_does_not_finish_the_hash():
    h = MD5(b"abc")
    first = h.hexdigest()
    assert h.hexdigest() == first
    h.update(b"def")
    assert h.hexdigest() == MD5(b"abcdef").hexdigest()


def test_digest_length():
    assert len(MD5(b"xyz").digest()) == MD5.digest_size


def test_accepts_bytearray_and_memoryview():
    expected = MD5(b"hello").digest()
    assert MD5(bytearray(b"hello")).digest() == expected
    assert MD5(memoryview(b"hello")).digest() == expected


def test_rejects_text():
    with pytest.raises(TypeError):
        MD5().update("text")