"""Classic recursion exercises: powers, factorials, searches and digit words."""

from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import pairwise

DIGIT_WORDS = ("zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def power(base: int, exponent: int) -> int:
    """``base`` raised to ``exponent`` by repeated multiplication."""
    _require_non_negative("exponent", exponent)
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def fast_power(base: int, exponent: int) -> int:
    """``base`` raised to ``exponent`` by repeated squaring."""
    _require_non_negative("exponent", exponent)
    if exponent == 0:
        return 1
    if exponent == 1:
        return base
    half = fast_power(base, exponent // 2)
    if exponent % 2 == 0:
        return half * half
    return base * half * half


def factorial(n: int) -> int:
    """n! for a non-negative ``n``."""
    _require_non_negative("n", n)
    return math.prod(range(1, n + 1))


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1."""
    _require_non_negative("n", n)
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def power_of_two(n: int) -> int:
    """2 raised to ``n``."""
    return power(2, n)


def is_sorted(values: Sequence[int]) -> bool:
    """True if no item is greater than the item after it."""
    return all(before <= after for before, after in pairwise(values))


def linear_search(values: Sequence[int], key: int) -> bool:
    """True if ``key`` occurs in ``values``."""
    return any(value == key for value in values)


def recursive_sum(values: Sequence[int]) -> int:
    """Sum of all values."""
    return sum(values)


def binary_search_recursive(values: Sequence[int], key: int) -> int:
    """Index of ``key`` in an ascending sequence, or -1 if it is absent."""

    def search(start: int, end: int) -> int:
        if start > end:
            return -1
        mid = start + (end - start) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            return search(mid + 1, end)
        return search(start, mid - 1)

    return search(0, len(values) - 1)


def is_palindrome(text: str) -> bool:
    """True if ``text`` reads the same forwards and backwards, exactly."""
    return text == text[::-1]


def say_digits(n: int) -> list[str]:
    """English words for the decimal digits of ``n``, most significant first.

    Zero has no digits to say and gives an empty list.
    """
    _require_non_negative("n", n)
    if n == 0:
        return []
    return [DIGIT_WORDS[int(digit)] for digit in str(n)]


def reversed_chars(text: str) -> list[str]:
    """Characters before the first NUL character, last one first."""
    return list(reversed(text.partition("\0")[0]))