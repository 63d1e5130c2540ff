import pytest

from katas.strings import (
    is_alphanumeric_palindrome,
    is_valid_brackets,
    letter_combinations,
    longest_common_prefix,
    zigzag_convert,
)


@pytest.mark.parametrize(
    ("text", "rows", "expected"),
    [
        ("PAYPALISHIRING", 3, "PAHNAPLSIIGYIR"),
        ("PAYPALISHIRING", 4, "PINALSIGYAHRPI"),
        ("A", 1, "A"),
        ("ABCD", 2, "ACBD"),
        ("AB", 5, "AB"),
        ("", 3, ""),
    ],
)
def test_zigzag_convert(text, rows, expected):
    assert zigzag_convert(text, rows) == expected


def test_zigzag_keeps_all_characters():
    text = "THEQUICKBROWNFOX"
    for rows in range(1, 8):
        assert sorted(zigzag_convert(text, rows)) == sorted(text)


def test_zigzag_rejects_zero_rows():
    with pytest.raises(ValueError):
        zigzag_convert("ABC", 0)


@pytest.mark.parametrize(
    ("strs", "expected"),
    [
        (["flower", "flow", "flight"], "fl"),
        (["dog", "racecar", "car"], ""),
        ([], ""),
        (["alone"], "alone"),
        (["same", "same"], "same"),
        (["abc", ""], ""),
    ],
)
def test_longest_common_prefix(strs, expected):
    assert longest_common_prefix(strs) == expected


def test_letter_combinations_two_digits():
    expected = ["ad", "ae", "af", "bd", "be", "bf", "cd", "ce", "cf"]
    assert sorted(letter_combinations("23")) == sorted(expected)


def test_letter_combinations_empty():
    assert letter_combinations("") == []


def test_letter_combinations_single_digit():
    assert sorted(letter_combinations("2")) == ["a", "b", "c"]


def test_letter_combinations_count_and_order():
    result = letter_combinations("79")
    assert len(result) == 16
    assert result[0] == "pw"
    assert result[-1] == "sz"


def test_letter_combinations_digit_without_letters():
    assert letter_combinations("21") == []


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("()", True),
        ("()[]{}", True),
        ("(]", False),
        ("([])", True),
        ("", True),
        ("(", False),
        (")", False),
        ("(a)", False),
        ("([)]", False),
    ],
)
def test_is_valid_brackets(text, expected):
    assert is_valid_brackets(text) is expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("A man, a plan, a canal: Panama", True),
        ("race a car", False),
        (" ", True),
        ("0P", False),
        ("Ab1bA", True),
    ],
)
def test_is_alphanumeric_palindrome(text, expected):
    assert is_alphanumeric_palindrome(text) is expected