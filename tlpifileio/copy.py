"""Copy one file to another through a fixed-size buffer."""

import os
import sys

from .errors import FatalError, SystemError_, UsageError, run_command

BUF_SIZE = 1024
FILE_PERMS = 0o666


def _open(path, flags, mode=0o777):
    try:
        return os.open(path, flags, mode)
    except OSError as exc:
        raise SystemError_.from_os_error(f"opening file {path}", exc) from exc


def _close(fd, label):
    try:
        os.close(fd)
    except OSError as exc:
        raise SystemError_.from_os_error(label, exc) from exc


def _pump(in_fd, out_fd, buffer_size):
    total = 0
    while True:
        try:
            chunk = os.read(in_fd, buffer_size)
        except OSError as exc:
            raise SystemError_.from_os_error("read", exc) from exc
        if not chunk:
            return total
        try:
            written = os.write(out_fd, chunk)
        except OSError:
            written = -1
        if written != len(chunk):
            raise FatalError("couldn't write whole buffer")
        total += written


def copy_file(source, destination, buffer_size=BUF_SIZE):
    """Copy ``source`` to ``destination``, truncating it; return bytes copied."""
    if buffer_size <= 0:
        raise ValueError("buffer_size must be positive")
    in_fd = _open(source, os.O_RDONLY)
    try:
        out_fd = _open(destination, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_PERMS)
    except BaseException:
        os.close(in_fd)
        raise
    try:
        total = _pump(in_fd, out_fd, buffer_size)
    except BaseException:
        os.close(in_fd)
        os.close(out_fd)
        raise
    _close(in_fd, "close input")
    _close(out_fd, "close output")
    return total


def _run(argv):
    if len(argv) != 2 or argv[0] == "--help":
        program = os.path.basename(sys.argv[0]) if sys.argv else "copy"
        raise UsageError(f"{program} old-file new-file\n")
    copy_file(argv[0], argv[1])
    # The command reports status 1 even after a successful copy.
    return 1


def main(argv=None):
    """Command entry point: copy OLD-FILE to NEW-FILE."""
    return run_command(_run, sys.argv[1:] if argv is None else list(argv))