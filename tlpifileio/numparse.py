"""Strict parsing of integer command-line arguments."""

import enum
import string

from .errors import ProgramError

_DIGITS = string.digits + string.ascii_lowercase
_WHITESPACE = " \t\n\v\f\r"
_LONG_MIN, _LONG_MAX = -(2**63), 2**63 - 1
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


class NumberFlag(enum.IntFlag):
    """Flags controlling how an argument is parsed."""

    NONNEG = 0o1
    GT_0 = 0o2
    ANY_BASE = 0o100
    BASE_8 = 0o200
    BASE_16 = 0o300


class NumberError(ProgramError):
    """An argument that is not an acceptable number."""

    exit_status = 0
    flush_stdout = False

    def __init__(self, function, message, arg=None, name=None):
        super().__init__(message)
        self.function = function
        self.arg = arg
        self.name = name

    def render(self):
        text = f"{self.function} error"
        if self.name is not None:
            text += f" (in {self.name})"
        text += f": {self.message}\n"
        if self.arg:
            text += f"      offending text: {self.arg}\n"
        return text


def _digit_value(char):
    if not char.isascii():
        return 99
    index = _DIGITS.find(char.lower())
    return index if index >= 0 else 99


def parse_c_integer(text, base):
    """Parse a leading integer as strtol does; return (value, unparsed rest).

    Base 0 picks the base from a ``0x`` or ``0`` prefix. When no digits are
    found the value is 0 and the whole text is returned as the rest.
    """
    if base != 0 and not 2 <= base <= 36:
        raise ValueError(f"invalid base: {base}")
    pos = len(text) - len(text.lstrip(_WHITESPACE))
    sign = 1
    if text[pos:pos + 1] in ("+", "-"):
        sign = -1 if text[pos] == "-" else 1
        pos += 1
    has_hex_prefix = (
        text[pos:pos + 2].lower() == "0x" and _digit_value(text[pos + 2:pos + 3] or "z") < 16
    )
    if base in (0, 16) and has_hex_prefix:
        pos += 2
        base = 16
    elif base == 0:
        base = 8 if text[pos:pos + 1] == "0" else 10
    start = pos
    while pos < len(text) and _digit_value(text[pos]) < base:
        pos += 1
    if pos == start:
        return 0, text
    return sign * int(text[start:pos], base), text[pos:]


def _base_for(flags):
    if flags & NumberFlag.ANY_BASE:
        return 0
    if flags & NumberFlag.BASE_8:
        return 8
    if flags & NumberFlag.BASE_16:
        return 16
    return 10


def _get_num(function, arg, flags, name):
    if not arg:
        raise NumberError(function, "null or empty string", arg, name)
    value, rest = parse_c_integer(arg, _base_for(flags))
    if not _LONG_MIN <= value <= _LONG_MAX:
        raise NumberError(function, "strtol failed", arg, name)
    if rest:
        raise NumberError(function, "nonnumeric characters", arg, name)
    if flags & NumberFlag.NONNEG and value < 0:
        raise NumberError(function, "negative value not allowed", arg, name)
    if flags & NumberFlag.GT_0 and value <= 0:
        raise NumberError(function, "value must be > 0", arg, name)
    return value


def get_long(arg, flags=0, name=None):
    """Parse ``arg`` as a 64-bit signed integer under ``flags``."""
    return _get_num("getLong", arg, flags, name)


def get_int(arg, flags=0, name=None):
    """Parse ``arg`` as a 32-bit signed integer under ``flags``."""
    value = _get_num("getInt", arg, flags, name)
    if not _INT_MIN <= value <= _INT_MAX:
        raise NumberError("getInt", "integer out of range", arg, name)
    return value