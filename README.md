# tlpifileio

Small command-line tools and helpers that work directly on operating-system
file descriptors. They copy a file in fixed-size chunks, run a sequence of
read, write and seek operations on one open file, and show how a
non-blocking read behaves.

Requires Python 3.10 or later on a POSIX system.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Commands

### tlpi-copy

```
tlpi-copy old-file new-file
```

Copies `old-file` to `new-file` through a 1024-byte buffer. The destination
is created if needed and truncated if it exists. New files get read and write
permission for everyone, narrowed by your umask. If you give the wrong number
of arguments, or pass `--help`, it prints a usage line to standard error.

The command exits with status 1 even after a successful copy. Check for the
destination file or for error output to see whether the copy worked.

### tlpi-seek-io

```
tlpi-seek-io file {r<length>|R<length>|s<offset>|w<string>}...
```

Opens `file` for reading and writing and creates it if needed. It then runs
each operation in order on that one descriptor:

| Operation    | Effect                                                          |
|--------------|-----------------------------------------------------------------|
| `r<length>`  | read up to `length` bytes and print them as text, with `?` for unprintable bytes |
| `R<length>`  | read up to `length` bytes and print each byte as hex followed by a space |
| `s<offset>`  | seek to absolute `offset` and print `<arg>: seeks succeeded`    |
| `w<string>`  | write `string` at the current offset and print `<arg>: Wrote N bytes` |

Lengths and offsets use C integer notation. A number starting with `0x` is
hexadecimal and one starting with a leading `0` is octal. For example:

```
tlpi-seek-io notes.bin s100000 whello-world
tlpi-seek-io notes.bin s100000 r11 s100000 R11
```

Seeking past the end and then writing leaves a hole in the file.

These are the error cases:

- An operation that does not start with `r`, `R`, `s` or `w` is reported as
  `Command-line usage error: ...`.
- A length or offset that is not a valid number is reported as
  `getLong error (in <arg>): <reason>`, followed by the offending text. In
  this case the exit status is 0.
- Fewer than two arguments, or `--help`, prints a usage line.

### tlpi-nonblock

```
tlpi-nonblock
```

Opens `test.txt` in the current directory with the non-blocking flag and
reads up to 100 bytes from it. It then prints how many bytes came back and
what they were. A read that would block is reported as such. If the file
cannot be opened, it prints `open: <reason>` and exits with status 1.

## Error reports

Failed system calls are reported on standard error with the symbolic error
name and its description. The command then exits with status 1. For example:

```
ERROR& [ENOENT No such file or directory] opening file missing.txt
```

If the environment variable `EF_DUMPCORE` is set to a non-empty value, these
errors abort the process instead, so that it produces a core dump.

## Using the library

The same pieces are available from Python:

```python
from tlpifileio.copy import copy_file
from tlpifileio.numparse import parse_c_integer
from tlpifileio.seek_io import parse_operation, run_operations

copy_file("input.txt", "output.txt", 1024)   # returns the number of bytes copied
parse_c_integer("0x1f", 0)      # (31, ""): value and unparsed rest; base 0 picks the base from the prefix
parse_operation("s100000")      # an Operation seeking to offset 100000
```

The library is split across these modules:

- `tlpifileio.seek_io`: `run_operations(fd, operations)` yields the output
  text of each operation in turn. `format_bytes(data, kind)` renders bytes
  for an `OperationKind.READ_TEXT` or `OperationKind.READ_HEX` read.
- `tlpifileio.numparse`: `get_long` and `get_int` check numbers from the
  command line against `NumberFlag` rules such as `NONNEG`, `GT_0` and
  `ANY_BASE`. They raise `NumberError` when a rule does not hold.
- `tlpifileio.nonblock`: `read_nonblocking(fd, size)`, `read_empty_pipe()`
  and `read_file_nonblocking(path)` return a `ReadResult`. It holds either
  the bytes read or the errno that stopped the read, and has a
  `would_block` property.
- `tlpifileio.errors`: provides `ProgramError` and its subclasses
  `UsageError`, `CommandLineError`, `FatalError` and `SystemError_`. It also
  provides `error_name`, `format_error_message`, and `run_command`, which
  turns these errors into messages and exit statuses at the command
  boundary.