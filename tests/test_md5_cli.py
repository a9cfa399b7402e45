import hashlib
import io
import sys

import pytest

from algocraft.md5_cli import digest_file, digest_string, main


def test_digest_string_matches_reference():
    assert digest_string("message digest") == hashlib.md5(b"message digest").hexdigest()


def test_digest_string_uses_utf8():
    assert digest_string("é") == hashlib.md5("é".encode("utf-8")).hexdigest()


def test_digest_file(tmp_path):
    data = bytes(range(256)) * 10
    path = tmp_path / "data.bin"
    path.write_bytes(data)
    assert digest_file(path) == hashlib.md5(data).hexdigest()


def test_digest_file_missing_raises(tmp_path):
    with pytest.raises(OSError):
        digest_file(tmp_path / "missing")


def test_main_string_argument(capsys):
    assert main(["-sabc"]) == 0
    out = capsys.readouterr().out
    assert out == f'{hashlib.md5(b"abc").hexdigest()} "abc"\n\n'


def test_main_file_argument(tmp_path, capsys):
    path = tmp_path / "f.txt"
    path.write_bytes(b"content")
    main([str(path)])
    assert capsys.readouterr().out == f"{hashlib.md5(b'content').hexdigest()} {path}\n"


def test_main_missing_file(tmp_path, capsys):
    missing = str(tmp_path / "nope")
    assert main([missing]) == 0
    assert capsys.readouterr().out == f"{missing} can't be opened.\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"hello world")))
    assert main([]) == 0
    assert capsys.readouterr().out == hashlib.md5(b"hello world").hexdigest() + "\n"


def test_main_suite(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "foo").write_bytes(b"abc")
    main(["-x"])
    out = capsys.readouterr().out
    assert out.startswith("MD5 test suite results:\n\n")
    assert f'{hashlib.md5(b"").hexdigest()} ""\n' in out
    assert f'{hashlib.md5(b"message digest").hexdigest()} "message digest"\n' in out
    assert out.rstrip("\n").endswith(f"{hashlib.md5(b'abc').hexdigest()} foo")