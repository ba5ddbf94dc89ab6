import errno
import os

import pytest

from tlpifileio.nonblock import (
    BUFFER_SIZE,
    ReadResult,
    main,
    read_empty_pipe,
    read_file_nonblocking,
    read_nonblocking,
)


def test_empty_pipe_would_block():
    result = read_empty_pipe()
    assert result.would_block
    assert result.data == b""


def test_pipe_with_data():
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"ping")
        result = read_nonblocking(read_fd)
        assert os.get_blocking(read_fd) is False
    finally:
        os.close(read_fd)
        os.close(write_fd)
    assert result == ReadResult(b"ping", None)
    assert not result.would_block


def test_read_result_flags():
    assert ReadResult(errnum=errno.EAGAIN).would_block
    assert not ReadResult(errnum=errno.EIO).would_block


def test_read_file(tmp_path):
    path = tmp_path / "test.txt"
    path.write_bytes(b"hello")
    assert read_file_nonblocking(path).data == b"hello"


def test_read_file_limited_to_buffer(tmp_path):
    path = tmp_path / "big.txt"
    path.write_bytes(b"z" * (BUFFER_SIZE + 50))
    assert len(read_file_nonblocking(path).data) == BUFFER_SIZE


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file_nonblocking(tmp_path / "absent.txt")


def test_main_reads_file(tmp_path, monkeypatch, capsys):
    (tmp_path / "test.txt").write_bytes(b"hello")
    monkeypatch.chdir(tmp_path)
    assert main() == 0
    assert capsys.readouterr().out == "Read 5 bytes: hello\n"


def test_main_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    assert capsys.readouterr().err == f"open: {os.strerror(errno.ENOENT)}\n"