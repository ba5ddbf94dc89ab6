"""Demonstrations of non-blocking reads on pipes and regular files."""

import errno
import os
import sys
from dataclasses import dataclass
from typing import Optional

BUFFER_SIZE = 100
DEFAULT_PATH = "test.txt"


@dataclass(frozen=True)
class ReadResult:
    """Outcome of one read: the bytes read, or the errno that stopped it."""

    data: bytes = b""
    errnum: Optional[int] = None

    @property
    def would_block(self):
        return self.errnum in (errno.EAGAIN, errno.EWOULDBLOCK)


def read_nonblocking(fd, size=BUFFER_SIZE):
    """Put ``fd`` into non-blocking mode and read up to ``size`` bytes."""
    os.set_blocking(fd, False)
    try:
        return ReadResult(os.read(fd, size))
    except OSError as exc:
        return ReadResult(b"", exc.errno)


def read_empty_pipe():
    """Read from a fresh, empty pipe without blocking."""
    read_fd, write_fd = os.pipe()
    try:
        return read_nonblocking(read_fd)
    finally:
        os.close(read_fd)
        os.close(write_fd)


def read_file_nonblocking(path=DEFAULT_PATH):
    """Open ``path`` non-blocking and read from it; OSError if it cannot be opened."""
    fd = os.open(path, os.O_RDONLY | os.O_NONBLOCK)
    try:
        return read_nonblocking(fd)
    finally:
        os.close(fd)


def _perror(label, errnum):
    sys.stderr.write(f"{label}: {os.strerror(errnum)}\n")


def _report(result):
    if result.errnum is not None:
        _perror("read", result.errnum)
        if result.would_block:
            print("read() returned EAGAIN (non-blocking)")
    else:
        text = result.data.decode("utf-8", errors="replace")
        print(f"Read {len(result.data)} bytes: {text}")


def main(argv=None):
    """Read ``test.txt`` in the current directory without blocking."""
    try:
        result = read_file_nonblocking(DEFAULT_PATH)
    except OSError as exc:
        _perror("open", exc.errno or 0)
        return 1
    _report(result)
    return 0