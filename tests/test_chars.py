import string

import pytest

from fdlines.chars import (
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


@pytest.mark.parametrize("n", [0, 7, -7, 42, -42, 2147483647, -2147483648, 100000])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_int_min_matches_source_constant():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")


@pytest.mark.parametrize("prefix", [" ", "\n", "\t", "\v", "\f", "\r", " \t\r\n"])
def test_atoi_skips_leading_whitespace(prefix):
    assert atoi(prefix + "123") == atoi("123")


def test_atoi_stops_at_non_digit():
    assert atoi("123abc456") == atoi("123")


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("-") == 0


def test_atoi_only_one_sign():
    assert atoi("--5") == 0
    assert atoi("+-5") == 0


def test_atoi_sign_handling():
    assert atoi("-99") == -atoi("99")
    assert atoi("+99") == atoi("99")


def test_atoi_whitespace_after_sign_not_skipped():
    assert atoi("- 5") == 0


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(c):
    assert is_alpha(c) and is_alnum(c) and not is_digit(c)


@pytest.mark.parametrize("c", list(string.digits))
def test_digits_are_digit_and_alnum(c):
    assert is_digit(c) and is_alnum(c) and not is_alpha(c)


@pytest.mark.parametrize("c", ["@", "[", "`", "{", "/", ":", " "])
def test_boundary_punctuation_is_not_alnum(c):
    assert not is_alnum(c)


def test_classification_accepts_code_points():
    assert is_alpha(ord("q")) == is_alpha("q")
    assert is_digit(ord("5")) == is_digit("5")


def test_is_ascii_range():
    assert all(is_ascii(i) for i in range(128))
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_is_print_range():
    printable = [i for i in range(256) if is_print(i)]
    assert printable == list(range(32, 127))


def test_case_mapping_round_trip():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(lower) == upper
        assert to_lower(upper) == lower


def test_case_mapping_leaves_others_unchanged():
    for c in string.digits + string.punctuation + " ":
        assert to_upper(c) == c
        assert to_lower(c) == c


def test_case_mapping_on_ints_returns_ints():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")