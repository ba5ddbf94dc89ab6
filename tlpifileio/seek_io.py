"""Apply read, write and seek operations to a file from the command line."""

import enum
import errno
import os
import sys
from dataclasses import dataclass
from typing import Union

from .errors import CommandLineError, SystemError_, UsageError, run_command
from .numparse import NumberFlag, get_long

FILE_PERMS = 0o666


class OperationKind(enum.Enum):
    READ_TEXT = "r"
    READ_HEX = "R"
    WRITE = "w"
    SEEK = "s"


@dataclass(frozen=True)
class Operation:
    """One command: a read length, a seek offset or bytes to write."""

    kind: OperationKind
    arg: str
    value: Union[int, bytes]


def parse_operation(arg):
    """Parse an argument such as ``r100``, ``R0x10``, ``s5`` or ``whello``."""
    try:
        kind = OperationKind(arg[:1])
    except ValueError:
        raise CommandLineError(f"Argument must start with [rRws]: {arg}\n") from None
    if kind is OperationKind.WRITE:
        return Operation(kind, arg, os.fsencode(arg[1:]))
    return Operation(kind, arg, get_long(arg[1:], NumberFlag.ANY_BASE, arg))


def _is_printable(byte):
    return 0x20 <= byte <= 0x7E


def format_bytes(data, kind):
    """Render bytes as text (``?`` for unprintable) or as hex values."""
    if kind is OperationKind.READ_TEXT:
        return "".join(chr(b) if _is_printable(b) else "?" for b in data)
    if kind is OperationKind.READ_HEX:
        # Bytes are treated as signed characters, so high bytes sign-extend.
        return "".join(f"{b if b < 0x80 else b + 0xFFFFFF00:02x} " for b in data)
    raise ValueError(f"not a read operation: {kind}")


def _read(fd, length):
    if length < 0:
        raise SystemError_("malloc", errno.ENOMEM)
    try:
        return os.read(fd, length)
    except (MemoryError, OverflowError):
        raise SystemError_("malloc", errno.ENOMEM) from None
    except OSError:
        return b""


def run_operations(fd, operations):
    """Perform operations on ``fd`` in order, yielding each one's output."""
    for op in operations:
        if op.kind in (OperationKind.READ_TEXT, OperationKind.READ_HEX):
            yield format_bytes(_read(fd, op.value), op.kind)
        elif op.kind is OperationKind.WRITE:
            try:
                written = os.write(fd, op.value)
            except OSError as exc:
                raise SystemError_.from_os_error("write", exc) from exc
            yield f"{op.arg}: Wrote {written} bytes\n"
        else:
            try:
                os.lseek(fd, op.value, os.SEEK_SET)
            except (OSError, OverflowError) as exc:
                raise SystemError_("lseek", getattr(exc, "errno", None) or errno.EINVAL) from exc
            yield f"{op.arg}: seeks succeeded\n"


def _run(argv):
    if len(argv) < 2 or argv[0] == "--help":
        program = os.path.basename(sys.argv[0]) if sys.argv else "seek_io"
        raise UsageError(f"{program} file {{r<Length>|R<Length>|s<Offset>|w<Str>}}...")
    try:
        fd = os.open(argv[0], os.O_RDWR | os.O_CREAT, FILE_PERMS)
    except OSError as exc:
        raise SystemError_.from_os_error("open", exc) from exc
    try:
        for arg in argv[1:]:
            for text in run_operations(fd, [parse_operation(arg)]):
                sys.stdout.write(text)
    finally:
        os.close(fd)
    sys.stdout.flush()
    return 0


def main(argv=None):
    """Command entry point: FILE followed by operations."""
    return run_command(_run, sys.argv[1:] if argv is None else list(argv))