"""Arithmetic on numbers held as lists of decimal digits, most significant first."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "u128_to_vecu8",
    "multiply_two_numbers_as_vec",
    "add_two_numbers_as_vec",
    "get_power_of_a_number",
]


def _to_int(digits: Sequence[int]) -> int:
    value = 0
    for digit in digits:
        if not 0 <= digit <= 9:
            raise ValueError(f"{digit} is not a decimal digit")
        value = value * 10 + digit
    return value


def _to_digits(value: int) -> list[int]:
    return [int(ch) for ch in str(value)]


def u128_to_vecu8(u: int) -> list[int]:
    """Return the decimal digits of a non-negative integer; ``[0]`` for 0."""
    if u < 0:
        raise ValueError(f"u : {u} must not be negative")
    return _to_digits(u)


def multiply_two_numbers_as_vec(num1: Sequence[int], num2: Sequence[int]) -> list[int]:
    """Multiply two digit lists.

    ``[0]`` as either factor gives ``[0]``; ``[1]`` as either factor gives the
    other factor unchanged.
    """
    if list(num1) == [0] or list(num2) == [0]:
        return [0]
    if list(num1) == [1]:
        return list(num2)
    if list(num2) == [1]:
        return list(num1)
    return _to_digits(_to_int(num1) * _to_int(num2))


def add_two_numbers_as_vec(num1: Sequence[int], num2: Sequence[int]) -> list[int]:
    """Add two non-negative digit lists; ``[0]`` as either gives the other unchanged."""
    if list(num1) == [0]:
        return list(num2)
    if list(num2) == [0]:
        return list(num1)
    return _to_digits(_to_int(num1) + _to_int(num2))


def get_power_of_a_number(base: Sequence[int], power: Sequence[int]) -> list[int]:
    """Raise the digit list ``base`` to the digit list ``power``.

    A base of ``[0]`` gives ``[0]``, a base of ``[1]`` or a power of ``[0]``
    gives ``[1]``, and a power of ``[1]`` gives ``base`` unchanged.
    """
    if list(base) == [0]:
        return [0]
    if list(base) == [1]:
        return [1]
    if list(power) == [0]:
        return [1]
    if list(power) == [1]:
        return list(base)
    return _to_digits(_to_int(base) ** _to_int(power))