"""Error reporting shared by the command-line programs."""

import errno as _errno
import os
import sys

_UNKNOWN_NAME = "?UNKNOWN?"


def error_name(errnum):
    """Return the symbolic name of an errno value, such as ``EPERM``."""
    if errnum > 0:
        return _errno.errorcode.get(errnum, _UNKNOWN_NAME)
    return _UNKNOWN_NAME


def format_error_message(message, errnum=None):
    """Build the standard diagnostic line, with errno details when given."""
    if errnum is None:
        detail = ":"
    else:
        detail = f" [{error_name(errnum)} {os.strerror(errnum)}]"
    return f"ERROR&{detail} {message}\n"


class ProgramError(Exception):
    """An error that ends a command with a message on standard error."""

    exit_status = 1
    flush_stdout = True
    may_dump_core = False

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def render(self):
        """Return the text written to standard error."""
        return self.message


class UsageError(ProgramError):
    """Wrong command-line usage; prints a usage line."""

    def render(self):
        return f"Usage: {self.message}"


class CommandLineError(ProgramError):
    """A malformed command-line argument."""

    def render(self):
        return f"Command-line usage error: {self.message}"


class FatalError(ProgramError):
    """A general error that does not carry an errno value."""

    may_dump_core = True

    def render(self):
        return format_error_message(self.message)


class SystemError_(ProgramError):
    """A failed system call, reported with its errno value."""

    may_dump_core = True

    def __init__(self, message, errnum):
        super().__init__(message)
        self.errnum = errnum

    @classmethod
    def from_os_error(cls, message, exc):
        return cls(message, exc.errno or 0)

    def render(self):
        return format_error_message(self.message, self.errnum)


def run_command(func, argv):
    """Run ``func(argv)``, reporting a ProgramError and returning an exit status."""
    try:
        return func(argv)
    except ProgramError as exc:
        if exc.flush_stdout:
            sys.stdout.flush()
        sys.stderr.write(exc.render())
        sys.stderr.flush()
        if exc.may_dump_core and os.environ.get("EF_DUMPCORE"):
            os.abort()
        return exc.exit_status