import pytest

from tlpifileio.numparse import (
    NumberError,
    NumberFlag,
    get_int,
    get_long,
    parse_c_integer,
)


def test_combined_flags():
    assert get_long("0x10", NumberFlag.ANY_BASE | NumberFlag.GT_0) == 16
    with pytest.raises(NumberError) as info:
        get_long("-0x10", NumberFlag.ANY_BASE | NumberFlag.NONNEG)
    assert info.value.message == "negative value not allowed"


def test_decimal_default():
    assert get_long("123") == 123
    assert get_long("010") == 10
    assert get_long("-7") == -7


def test_any_base_prefixes():
    assert get_long("0x1f", NumberFlag.ANY_BASE) == int("1f", 16)
    assert get_long("010", NumberFlag.ANY_BASE) == int("10", 8)
    assert get_long("42", NumberFlag.ANY_BASE) == 42


def test_octal_flag():
    assert get_long("17", NumberFlag.BASE_8) == int("17", 8)


def test_base16_flag_overlaps_any_base():
    assert get_long("0x10", NumberFlag.BASE_16) == 16
    with pytest.raises(NumberError) as info:
        get_long("ff", NumberFlag.BASE_16)
    assert info.value.message == "nonnumeric characters"


@pytest.mark.parametrize("arg", ["", None])
def test_empty_argument(arg):
    with pytest.raises(NumberError) as info:
        get_long(arg)
    assert info.value.message == "null or empty string"


def test_trailing_garbage():
    with pytest.raises(NumberError) as info:
        get_long("12a", name="r12a")
    assert info.value.message == "nonnumeric characters"
    assert info.value.name == "r12a"


def test_sign_constraints():
    with pytest.raises(NumberError) as info:
        get_long("-5", NumberFlag.NONNEG)
    assert info.value.message == "negative value not allowed"
    with pytest.raises(NumberError) as info:
        get_long("0", NumberFlag.GT_0)
    assert info.value.message == "value must be > 0"
    assert get_long("0", NumberFlag.NONNEG) == 0


def test_long_range():
    top = 2**63 - 1
    assert get_long(str(top)) == top
    with pytest.raises(NumberError) as info:
        get_long(str(top + 1))
    assert info.value.message == "strtol failed"


def test_int_range():
    top = 2**31 - 1
    assert get_int(str(top)) == top
    with pytest.raises(NumberError) as info:
        get_int(str(top + 1))
    assert info.value.function == "getInt"


def test_parse_c_integer_partial():
    assert parse_c_integer(" -42xyz", 10) == (-42, "xyz")
    assert parse_c_integer("0x", 0) == (0, "x")
    assert parse_c_integer("abc", 10) == (0, "abc")


def test_parse_c_integer_bad_base():
    with pytest.raises(ValueError):
        parse_c_integer("1", 1)


def test_render_and_status():
    err = NumberError("getLong", "nonnumeric characters", "12a", "r12a")
    assert err.render() == (
        "getLong error (in r12a): nonnumeric characters\n"
        "      offending text: 12a\n"
    )
    assert err.exit_status == 0
    assert NumberError("getLong", "null or empty string").render() == (
        "getLong error: null or empty string\n"
    )