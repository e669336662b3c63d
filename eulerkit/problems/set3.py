"""Solutions to problems 16 to 20."""

from __future__ import annotations

import datetime
from collections.abc import Sequence

from eulerkit.bigdigits import (
    get_power_of_a_number,
    multiply_two_numbers_as_vec,
    u128_to_vecu8,
)

__all__ = [
    "PYRAMID_15",
    "problem_16",
    "problem_17",
    "problem_18",
    "problem_19",
    "problem_20",
]

PYRAMID_15: tuple[tuple[int, ...], ...] = (
    (75,),
    (95, 64),
    (17, 47, 82),
    (18, 35, 87, 10),
    (20, 4, 82, 47, 65),
    (19, 1, 23, 75, 3, 34),
    (88, 2, 77, 73, 7, 63, 67),
    (99, 65, 4, 28, 6, 16, 70, 92),
    (41, 41, 26, 56, 83, 40, 80, 70, 33),
    (41, 48, 72, 33, 47, 32, 37, 16, 94, 29),
    (53, 71, 44, 65, 25, 43, 91, 52, 97, 51, 14),
    (70, 11, 33, 28, 77, 73, 17, 78, 39, 68, 17, 57),
    (91, 71, 52, 38, 17, 14, 91, 43, 58, 50, 27, 29, 48),
    (63, 66, 4, 68, 89, 53, 67, 30, 73, 16, 69, 87, 40, 31),
    (4, 62, 98, 27, 23, 9, 70, 98, 73, 93, 38, 53, 60, 4, 23),
)

_ONES = (
    "",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)

_TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")


def problem_16(power: int = 1000, base: int = 2) -> int:
    """Sum of the decimal digits of ``base ** power``."""
    digits = get_power_of_a_number(u128_to_vecu8(base), u128_to_vecu8(power))
    return sum(digits)


def _number_words(n: int) -> str:
    """British English words for ``1 <= n <= 1000`` with spaces and hyphens removed."""
    if n == 1000:
        return "onethousand"
    hundreds, rest = divmod(n, 100)
    parts = []
    if hundreds:
        parts.append(_ONES[hundreds] + "hundred")
        if rest:
            parts.append("and")
    if rest < 20:
        parts.append(_ONES[rest])
    else:
        tens, ones = divmod(rest, 10)
        parts.append(_TENS[tens] + _ONES[ones])
    return "".join(parts)


def problem_17() -> int:
    """Number of letters used to write out every number from 1 to 1000."""
    return sum(len(_number_words(n)) for n in range(1, 1001))


def problem_18(pyramid: Sequence[Sequence[int]] = PYRAMID_15) -> int:
    """Largest total on a path from the top of ``pyramid`` to its bottom row."""
    if not pyramid:
        raise ValueError("pyramid must have at least one row")
    for depth, row in enumerate(pyramid):
        if len(row) != depth + 1:
            raise ValueError(f"row {depth} must hold {depth + 1} numbers, got {len(row)}")
    best = list(pyramid[-1])
    for row in reversed(pyramid[:-1]):
        best = [value + max(left, right) for value, left, right in zip(row, best, best[1:])]
    return best[0]


def problem_19() -> int:
    """Number of months from 1901 to 2000 that began on a Sunday."""
    return sum(
        1
        for year in range(1901, 2001)
        for month in range(1, 13)
        if datetime.date(year, month, 1).weekday() == 6
    )


def problem_20(num: int = 100) -> int:
    """Sum of the decimal digits of ``num!``."""
    if num < 0:
        raise ValueError(f"num : {num} must not be negative")
    product = [1]
    for factor in range(1, num + 1):
        product = multiply_two_numbers_as_vec(u128_to_vecu8(factor), product)
    return sum(product)