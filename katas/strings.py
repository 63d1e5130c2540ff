"""String puzzles: zigzag layout, prefixes, keypad words, brackets, palindromes."""

from __future__ import annotations

from itertools import chain, cycle, product

_KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}
_CLOSING = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_CLOSING.values())


def zigzag_convert(s: str, num_rows: int) -> str:
    """Write s in a zigzag over num_rows rows and read it back row by row."""
    if num_rows < 1:
        raise ValueError(f"num_rows must be at least 1, got {num_rows}")
    if num_rows == 1:
        return s
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    pattern = chain(range(num_rows), range(num_rows - 2, 0, -1))
    for row, char in zip(cycle(pattern), s):
        rows[row].append(char)
    return "".join(chain.from_iterable(rows))


def longest_common_prefix(strs: list[str]) -> str:
    """The longest string that starts every string in strs; '' for no strings."""
    prefix: list[str] = []
    for chars in zip(*strs):
        first = chars[0]
        if any(char != first for char in chars):
            break
        prefix.append(first)
    return "".join(prefix)


def letter_combinations(digits: str) -> list[str]:
    """Every word a phone keypad can spell from digits, in keypad order.

    Digits without letters (such as 0 and 1) yield no combinations.
    """
    if not digits:
        return []
    letters = (_KEYPAD.get(digit, "") for digit in digits)
    return ["".join(combination) for combination in product(*letters)]


def is_valid_brackets(s: str) -> bool:
    """True if s holds only brackets that open and close in proper order."""
    stack: list[str] = []
    for char in s:
        if char in _OPENING:
            stack.append(char)
        elif char in _CLOSING:
            if not stack or stack.pop() != _CLOSING[char]:
                return False
        else:
            return False
    return not stack


def is_alphanumeric_palindrome(s: str) -> bool:
    """True if the ASCII letters and digits of s read the same both ways, ignoring case."""
    kept = [char.lower() for char in s if char.isascii() and char.isalnum()]
    return kept == kept[::-1]