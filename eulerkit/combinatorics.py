"""Factorials, combinations and permutations as prime-factor maps."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping

from eulerkit.primes import sieve_of_eratosthenes

__all__ = [
    "factorial",
    "factorial_as_u128",
    "combinations",
    "permutations",
    "construct_number_from_prime_factor_hashmap",
]

U128_MAX = (1 << 128) - 1

# 34! is the largest factorial that fits in an unsigned 128-bit integer.
_MAX_FACTORIAL_ARG = 34


def _require_non_negative(n: int, name: str = "n") -> None:
    if n < 0:
        raise ValueError(f"{name} : {n} must not be negative")


def _legendre_exponent(n: int, prime: int) -> int:
    exponent = 0
    power = prime
    while power <= n:
        exponent += n // power
        power *= prime
    return exponent


def factorial(n: int) -> dict[int, int]:
    """Map each prime factor of ``n!`` to its multiplicity.

    Returns an empty map for 0 and 1, since ``0! = 1! = 1``.
    """
    _require_non_negative(n)
    return {prime: _legendre_exponent(n, prime) for prime in sieve_of_eratosthenes(n)}


def factorial_as_u128(n: int) -> int:
    """Return ``n!`` for ``0 <= n <= 34``, the range that fits in 128 bits."""
    _require_non_negative(n)
    if n > _MAX_FACTORIAL_ARG:
        raise OverflowError(f"{n}! is larger than u128 limit : {U128_MAX}.")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def _divide(numerator: Mapping[int, int], *denominators: Mapping[int, int]) -> dict[int, int]:
    remaining = Counter(numerator)
    for denominator in denominators:
        remaining.subtract(denominator)
    return {prime: count for prime, count in remaining.items() if count != 0}


def combinations(n: int, r: int) -> dict[int, int]:
    """Prime factorisation of ``n! / (r! * (n - r)!)``; empty when it equals 1."""
    _require_non_negative(n)
    _require_non_negative(r, "r")
    if r > n:
        raise ValueError(f"r : {r} cannot be greater than n : {n} in combinations")
    return _divide(factorial(n), factorial(n - r), factorial(r))


def permutations(n: int, r: int) -> dict[int, int]:
    """Prime factorisation of ``n! / (n - r)!``; empty when it equals 1."""
    _require_non_negative(n)
    _require_non_negative(r, "r")
    if r > n:
        raise ValueError(f"r : {r} cannot be greater than n : {n} in permutation")
    return _divide(factorial(n), factorial(n - r))


def construct_number_from_prime_factor_hashmap(factors: Mapping[int, int]) -> int:
    """Multiply out a prime-factor map; an empty map gives 1.

    Raises ``OverflowError`` if the product exceeds the 128-bit unsigned range.
    """
    result = 1
    for prime, count in factors.items():
        result *= prime**count
        if result > U128_MAX:
            raise OverflowError(f"Overflow occured while converting : {dict(factors)}")
    return result