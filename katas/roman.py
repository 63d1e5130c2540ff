"""Conversion between integers and Roman numerals."""

from __future__ import annotations

_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_SUBTRACTIVE = {"IV": 4, "IX": 9, "XL": 40, "XC": 90, "CD": 400, "CM": 900}
_PLACES = ((100, "C", "D", "M"), (10, "X", "L", "C"), (1, "I", "V", "X"))


def _digit(digit: int, one: str, five: str, ten: str) -> str:
    if digit == 4:
        return one + five
    if digit == 9:
        return one + ten
    return five * (digit >= 5) + one * (digit % 5)


def int_to_roman(num: int) -> str:
    """Write num as a Roman numeral; thousands repeat 'M' without limit."""
    if num <= 0:
        return ""
    thousands, rest = divmod(num, 1000)
    parts = ["M" * thousands]
    for divisor, one, five, ten in _PLACES:
        digit, rest = divmod(rest, divisor)
        parts.append(_digit(digit, one, five, ten))
    return "".join(parts)


def roman_to_int(s: str) -> int:
    """Read a Roman numeral; characters that are not numerals are ignored."""
    total = 0
    position = 0
    while position < len(s):
        pair = s[position:position + 2]
        if pair in _SUBTRACTIVE:
            total += _SUBTRACTIVE[pair]
            position += 2
        else:
            total += _VALUES.get(s[position], 0)
            position += 1
    return total