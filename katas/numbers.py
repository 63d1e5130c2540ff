"""Integer and bit puzzles with 32-bit integer semantics."""

from __future__ import annotations

import math
from itertools import zip_longest

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)
_DIGITS = "0123456789"


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of x; 0 if the result leaves the int32 range."""
    negative = x < 0
    reversed_value = int(str(abs(x))[::-1])
    if reversed_value > INT32_MAX:
        return 0
    return -reversed_value if negative else reversed_value


def atoi(s: str) -> int:
    """Parse a leading integer the way C's atoi does, clamped to int32."""
    text = s.lstrip(" ")
    positive = True
    if text[:1] == "-":
        positive = False
        text = text[1:]
    elif text[:1] == "+":
        text = text[1:]
    value = 0
    for char in text:
        if char not in _DIGITS:
            break
        value = value * 10 + int(char)
        if value > INT32_MAX:
            return INT32_MAX if positive else INT32_MIN
    return value if positive else -value


def is_palindrome_number(x: int) -> bool:
    """True if the decimal digits of x read the same both ways."""
    if x < 0:
        return False
    reversed_value = 0
    remaining = x
    while remaining:
        remaining, digit = divmod(remaining, 10)
        reversed_value = reversed_value * 10 + digit
    # The comparison is made on 32-bit unsigned values.
    return (reversed_value & 0xFFFFFFFF) == (x & 0xFFFFFFFF)


def add_binary(a: str, b: str) -> str:
    """Add two binary strings, keeping the width of the longer one."""
    for char in a + b:
        if char not in "01":
            raise ValueError(f"not a binary digit: {char!r}")
    result: list[str] = []
    carry = 0
    for bit_a, bit_b in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry, bit = divmod(int(bit_a) + int(bit_b) + carry, 2)
        result.append(str(bit))
    if carry:
        result.append("1")
    return "".join(reversed(result))


def integer_sqrt(x: int) -> int:
    """Floor of the square root of x; values up to 1 are returned unchanged."""
    if x <= 1:
        return x
    return math.isqrt(x)


def reverse_bits(n: int) -> int:
    """Reverse the order of the 32 bits of an unsigned integer."""
    if not 0 <= n <= 0xFFFFFFFF:
        raise ValueError(f"not an unsigned 32-bit value: {n}")
    return int(f"{n:032b}"[::-1], 2)