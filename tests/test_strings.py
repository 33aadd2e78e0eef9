import pytest

from algonotes.strings import (
    repeated_string_match,
    repeated_substring_pattern,
    rotate_string,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("abab", True),
        ("aba", False),
        ("abcabcabcabc", True),
        ("a", False),
        ("", False),
        ("abac", False),
    ],
)
def test_repeated_substring_pattern(text, expected):
    assert repeated_substring_pattern(text) is expected


def test_repeated_substring_pattern_single_char_repeat():
    assert repeated_substring_pattern("zzzz") is True


@pytest.mark.parametrize(
    ("s", "goal", "expected"),
    [
        ("aa", "a", False),
        ("abcde", "cdeab", True),
        ("abcde", "abcde", True),
        ("abcde", "abced", False),
        ("abcde", "cedab", False),
        ("a", "aa", False),
        ("", "", True),
        ("a", "", False),
        ("", "a", False),
    ],
)
def test_rotate_string(s, goal, expected):
    assert rotate_string(s, goal) is expected


def test_rotate_string_every_rotation_is_accepted():
    s = "rotation"
    for shift in range(len(s)):
        assert rotate_string(s, s[shift:] + s[:shift]) is True


def test_repeated_string_match_result_contains_b():
    a, b = "xyz", "zxyzxyzx"
    count = repeated_string_match(a, b)
    assert b in a * count
    assert b not in a * (count - 1)


def test_repeated_string_match_empty_a_raises():
    with pytest.raises(ValueError):
        repeated_string_match("", "a")