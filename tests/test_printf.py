import pytest

from minitalk.printf import FormatError, format_base, format_string, printf


def test_format_base_zero_uses_first_digit():
    assert format_base(0, "0123456789abcdef") == "0"


@pytest.mark.parametrize("number", [1, 5, 255, 4096, 2**64 - 1])
def test_format_base_matches_builtin(number):
    assert format_base(number, "01") == format(number, "b")
    assert format_base(number, "0123456789abcdef") == format(number, "x")
    assert format_base(number, "0123456789") == str(number)


@pytest.mark.parametrize("base", ["", "0", "0+1", "01-", "011", "0\t1", "0\x7f"])
def test_format_base_rejects_invalid_bases(base):
    with pytest.raises(ValueError):
        format_base(10, base)


def test_format_base_rejects_negative():
    with pytest.raises(ValueError):
        format_base(-1, "01")


def test_plain_text_and_percent():
    assert format_string("100%% done") == "100% done"


def test_decimal_extremes():
    assert format_string("%d", -2147483648) == "-2147483648"
    assert format_string("%i", 2147483647) == "2147483647"


def test_decimal_wraps_to_int32():
    assert format_string("%d", 2**31) == str(-(2**31))


@pytest.mark.parametrize("number", [0, 7, -1, 4294967295])
def test_unsigned_and_hex(number):
    unsigned = number & 0xFFFFFFFF
    assert format_string("%u", number) == str(unsigned)
    assert format_string("%x", number) == format(unsigned, "x")
    assert format_string("%X", number) == format(unsigned, "X")


def test_null_string():
    assert format_string("[%s]", None) == "[(null)]"


def test_string_and_char():
    assert format_string("%s-%c%c", "abc", "x", ord("y")) == "abc-xy"


@pytest.mark.parametrize("address", [0, 1, 0xDEADBEEF, 2**64 - 1])
def test_pointer(address):
    assert format_string("%p", address) == "0x" + format(address, "x")


def test_null_pointer():
    assert format_string("%p", None) == "0x0"


def test_server_pid_line():
    assert format_string("Server PID: %d\n", 4242) == "Server PID: 4242\n"


@pytest.mark.parametrize("fmt", ["%q", "abc%", "%"])
def test_bad_specifier_raises(fmt):
    with pytest.raises(FormatError):
        format_string(fmt, 1)


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        format_string("%d %d", 1)


def test_printf_writes_and_counts(capsys):
    count = printf("%s=%d\n", "pid", 42)
    out = capsys.readouterr().out
    assert out == "pid=42\n"
    assert count == len(out)


def test_printf_writes_prefix_before_error(capsys):
    with pytest.raises(FormatError):
        printf("ok %z")
    assert capsys.readouterr().out == "ok "