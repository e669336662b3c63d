"""Digit and divisor helpers on integers."""

from __future__ import annotations

import math

__all__ = [
    "is_palindrome",
    "is_perfect_square",
    "num_divisors",
    "all_divisors",
    "sum_of_all_divisors",
]


def is_palindrome(n: int) -> bool:
    """Return whether the decimal digits of ``n`` read the same both ways."""
    if n < 0:
        raise ValueError(f"n : {n} must not be negative")
    digits = str(n)
    return digits == digits[::-1]


def is_perfect_square(n: int) -> bool:
    """Return whether ``n`` is a perfect square (0 counts as one)."""
    root = math.isqrt(n)
    return root * root == n


def num_divisors(n: int) -> int:
    """Return how many divisors ``n`` has, including 1 and ``n``; 0 for 0."""
    if n == 0:
        return 0
    root = math.isqrt(n)
    count = 2 * sum(1 for i in range(1, root + 1) if n % i == 0)
    if root * root == n:
        count -= 1
    return count


def all_divisors(n: int) -> list[int]:
    """Return every divisor of ``n`` in ascending order; empty for 0."""
    if n == 0:
        return []
    divisors: set[int] = set()
    for i in range(1, math.isqrt(n) + 1):
        if n % i == 0:
            divisors.update((i, n // i))
    return sorted(divisors)


def sum_of_all_divisors(n: int) -> int:
    """Return the sum of every divisor of ``n``; 0 for 0."""
    return sum(all_divisors(n))