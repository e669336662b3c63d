"""Collatz sequences, decimal expansions of unit fractions and number spirals."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = [
    "collatz_sequence",
    "collatz_sequence_length",
    "decimal_expansion",
    "create_spiral_matrix",
]


def _collatz(n: int) -> Iterator[int]:
    if n < 0:
        raise ValueError(f"n : {n} must not be negative")
    if n == 0:
        return
    while n != 1:
        yield n
        n = n // 2 if n % 2 == 0 else 3 * n + 1
    yield 1


def collatz_sequence(n: int) -> list[int]:
    """Return the Collatz sequence starting at ``n`` and ending at 1; empty for 0."""
    return list(_collatz(n))


def collatz_sequence_length(n: int) -> int:
    """Return the number of terms in the Collatz sequence of ``n``; 0 for 0."""
    return sum(1 for _ in _collatz(n))


def decimal_expansion(n: int) -> tuple[list[int], bool, int]:
    """Long-divide ``1 / n`` for ``n >= 2``.

    Returns the digits after the decimal point up to the point where the
    expansion ends or first repeats, whether it repeats, and the length of
    the repeating cycle (0 when it terminates).
    """
    if n < 2:
        raise ValueError("Input must be greater than or equal to 2")

    digits: list[int] = []
    seen: dict[int, int] = {}
    remainder = 1
    while remainder:
        if remainder in seen:
            return digits, True, len(digits) - seen[remainder]
        seen[remainder] = len(digits)
        remainder *= 10
        digits.append(remainder // n)
        remainder %= n
    return digits, False, 0


def create_spiral_matrix(n: int) -> list[list[int]]:
    """Build an ``n`` by ``n`` spiral with 1 at the centre and ``n * n`` top right.

    Numbers grow clockwise outwards from the centre. ``n`` must be odd.
    """
    if n % 2 == 0:
        raise ValueError("Cannot create spiral matrix where side length is even number")
    if n < 1:
        raise ValueError(f"n : {n} must be positive")

    matrix = [[0] * n for _ in range(n)]
    fill = iter(range(n * n, 0, -1))
    left, right, top, bottom = 0, n - 1, 0, n - 1

    while left <= right and top <= bottom:
        for i in range(right, left - 1, -1):
            matrix[top][i] = next(fill)
        top += 1
        for i in range(top, bottom + 1):
            matrix[i][left] = next(fill)
        left += 1
        for i in range(left, right + 1):
            matrix[bottom][i] = next(fill)
        bottom -= 1
        for i in range(bottom, top - 1, -1):
            matrix[i][right] = next(fill)
        right -= 1

    return matrix