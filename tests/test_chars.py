import string

import pytest

from minitalk.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("code", range(256))
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", range(256))
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", range(256))
def test_is_alnum_is_alpha_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


def test_string_arguments_are_accepted():
    assert is_alpha("q") is True
    assert is_digit("7") is True
    assert is_alnum("!") is False


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


@pytest.mark.parametrize("lower, upper", zip(string.ascii_lowercase, string.ascii_uppercase))
def test_case_conversion_round_trip(lower, upper):
    assert to_upper(lower) == upper
    assert to_lower(upper) == lower
    assert to_lower(ord(upper)) == ord(lower)
    assert to_upper(ord(lower)) == ord(upper)


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " ")
def test_case_conversion_leaves_other_characters(ch):
    assert to_lower(ch) == ch
    assert to_upper(ch) == ch


@pytest.mark.parametrize("number", [0, 7, -7, 42, -42, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(number):
    assert atoi(itoa(number)) == number


@pytest.mark.parametrize("number", [0, 12, -345, 2147483647])
def test_atoi_skips_whitespace_and_stops_at_non_digit(number):
    assert atoi(" \t\n\r\v\f" + itoa(number) + "abc123") == number


def test_atoi_plus_sign():
    assert atoi("+" + itoa(99)) == atoi(itoa(99))


def test_atoi_double_sign_gives_zero():
    assert atoi("--5") == 0
    assert atoi("abc") == 0


def test_atoi_wraps_like_a_32_bit_int():
    assert atoi("2147483648") == -2147483648


def test_itoa_matches_str():
    for number in (-2147483648, -1, 0, 1, 2147483647):
        assert itoa(number) == str(number)