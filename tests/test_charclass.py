import string

import pytest

from minishell.charclass import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(ch):
    assert is_alpha(ch) is True
    assert is_alnum(ch) is True
    assert is_digit(ch) is False


@pytest.mark.parametrize("ch", list(string.digits))
def test_digits(ch):
    assert is_digit(ch) is True
    assert is_alnum(ch) is True
    assert is_alpha(ch) is False


@pytest.mark.parametrize("ch", list(string.punctuation + " \t\n"))
def test_punctuation_and_space_are_not_alnum(ch):
    assert is_alnum(ch) is False
    assert is_alpha(ch) is False


def test_non_ascii_letter_is_not_alpha():
    assert is_alpha("é") is False
    assert is_alnum("é") is False


def test_integer_codes_are_accepted():
    assert is_alpha(ord("q")) is True
    assert is_digit(ord("7")) is True


def test_ascii_range_boundaries():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_print_range_boundaries():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


@pytest.mark.parametrize("ch", list(string.printable))
def test_print_agrees_with_visible_characters(ch):
    expected = ch.isprintable() and ord(ch) < 127
    assert is_print(ch) is expected


@pytest.mark.parametrize("ch", list(string.ascii_lowercase))
def test_to_upper_lowercase(ch):
    assert to_upper(ch) == ch.upper()
    assert to_lower(to_upper(ch)) == ch


@pytest.mark.parametrize("ch", list(string.ascii_uppercase))
def test_to_lower_uppercase(ch):
    assert to_lower(ch) == ch.lower()
    assert to_upper(to_lower(ch)) == ch


@pytest.mark.parametrize("ch", list(string.digits + string.punctuation + "é"))
def test_case_conversion_leaves_others_alone(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_case_conversion_keeps_integer_kind():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_non_character_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)