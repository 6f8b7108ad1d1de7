import string

import pytest

from soraka.stringx import (
    camel_to_snake,
    first_lower,
    first_upper,
    generate_password24,
    slices_equal,
    snake_to_big_camel,
)


def test_generate_password24_shape():
    pw = generate_password24()
    assert len(pw) == 24
    assert set(pw) <= set(string.hexdigits.lower())


def test_generate_password24_is_random():
    assert len({generate_password24() for _ in range(20)}) == 20


@pytest.mark.parametrize("s", ["abc", "Hello", "x", "already"])
def test_first_upper(s):
    result = first_upper(s)
    assert result[0] == s[0].upper()
    assert result[1:] == s[1:]


@pytest.mark.parametrize("s", ["ABC", "Hello", "X", "lower"])
def test_first_lower(s):
    result = first_lower(s)
    assert result[0] == s[0].lower()
    assert result[1:] == s[1:]


def test_first_case_empty():
    assert first_upper("") == ""
    assert first_lower("") == ""


@pytest.mark.parametrize(
    "snake, camel",
    [("xx_yy", "XxYy"), ("xx_y_y", "XxYY")],
)
def test_snake_to_big_camel_documented(snake, camel):
    assert snake_to_big_camel(snake) == camel


@pytest.mark.parametrize(
    "camel, snake",
    [("XxYy", "xx_yy"), ("XxYY", "xx_y_y"), ("xxYy", "xx_yy")],
)
def test_camel_to_snake_documented(camel, snake):
    assert camel_to_snake(camel) == snake


@pytest.mark.parametrize("snake", ["xx_yy", "base_user", "a_b_c"])
def test_snake_camel_round_trip(snake):
    assert camel_to_snake(snake_to_big_camel(snake)) == snake


def test_camel_to_snake_is_lower_case():
    result = camel_to_snake("BaseUserRole")
    assert result == result.lower()
    assert result.replace("_", "") == "baseuserrole"


def test_slices_equal_ignores_order():
    first = ["apple", "banana", "cherry"]
    second = ["cherry", "banana", "apple"]
    assert slices_equal(first, second) is True


def test_slices_equal_different_lengths():
    assert slices_equal(["apple"], ["apple", "apple"]) is False


def test_slices_equal_different_content():
    assert slices_equal(["apple", "banana"], ["apple", "cherry"]) is False


def test_slices_equal_does_not_reorder_inputs():
    first = ["cherry", "apple"]
    assert slices_equal(first, ["apple", "cherry"]) is True
    assert first == ["cherry", "apple"]