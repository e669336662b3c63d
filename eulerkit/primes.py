"""Prime generation, primality testing and prime factorisation."""

from __future__ import annotations

import math

__all__ = [
    "int_sqrt",
    "is_prime",
    "sieve_of_eratosthenes",
    "primes_upto_n_without_sieve",
    "first_n_primes",
    "nth_prime",
    "prime_factors_of_n_with_sieve_as_hashmap",
    "prime_factors_of_n_without_sieve_as_hashmap",
    "prime_factors_of_n_with_sieve_as_vec",
    "prime_factors_of_n_without_sieve_as_vec",
]


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"n : {n} must not be negative")


def int_sqrt(n: int) -> int:
    """Return the floored square root of ``n``."""
    _require_non_negative(n)
    return math.isqrt(n)


def is_prime(n: int) -> bool:
    """Return whether ``n`` is prime. ``n`` must be positive."""
    if n <= 0:
        raise ValueError("n cannot be 0.")
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    return all(n % i for i in range(3, int_sqrt(n) + 1, 2))


def sieve_of_eratosthenes(n: int) -> list[int]:
    """Return the primes up to and including ``n`` using a sieve."""
    if n < 2:
        return []
    marks = bytearray([1]) * (n + 1)
    marks[0] = marks[1] = 0
    for i in range(2, int_sqrt(n) + 1):
        if marks[i]:
            marks[i * i :: i] = bytes(len(range(i * i, n + 1, i)))
    return [i for i, flag in enumerate(marks) if flag]


def _is_coprime_to(candidate: int, primes: list[int]) -> bool:
    limit = int_sqrt(candidate)
    for prime in primes:
        if prime > limit:
            return True
        if candidate % prime == 0:
            return False
    return True


def primes_upto_n_without_sieve(n: int) -> list[int]:
    """Return the primes up to and including ``n`` by trial division."""
    if n < 2:
        return []
    primes = [2]
    for candidate in range(3, n + 1, 2):
        if _is_coprime_to(candidate, primes):
            primes.append(candidate)
    return primes


def first_n_primes(n: int) -> list[int]:
    """Return the first ``n`` primes."""
    _require_non_negative(n)
    if n == 0:
        return []
    primes = [2]
    candidate = 3
    while len(primes) < n:
        if _is_coprime_to(candidate, primes):
            primes.append(candidate)
        candidate += 2
    return primes


def nth_prime(n: int) -> int:
    """Return the ``n``-th prime, counting from 1."""
    if n <= 0:
        raise ValueError("n CANNOT be 0")
    return first_n_primes(n)[-1]


def _factorise(n: int, primes: list[int]) -> dict[int, int]:
    factors: dict[int, int] = {}
    for prime in primes:
        if n <= 1:
            break
        while n % prime == 0:
            factors[prime] = factors.get(prime, 0) + 1
            n //= prime
    return factors


def prime_factors_of_n_with_sieve_as_hashmap(n: int) -> dict[int, int]:
    """Map each prime factor of ``n`` to its multiplicity, using a sieve."""
    return _factorise(n, sieve_of_eratosthenes(n))


def prime_factors_of_n_without_sieve_as_hashmap(n: int) -> dict[int, int]:
    """Map each prime factor of ``n`` to its multiplicity, by trial division."""
    return _factorise(n, primes_upto_n_without_sieve(n))


def prime_factors_of_n_with_sieve_as_vec(n: int) -> list[int]:
    """Return the distinct prime factors of ``n`` in ascending order, using a sieve."""
    if n <= 1:
        return []
    return [p for p in sieve_of_eratosthenes(n) if n % p == 0]


def prime_factors_of_n_without_sieve_as_vec(n: int) -> list[int]:
    """Return the distinct prime factors of ``n`` in ascending order, by trial division."""
    return [p for p in primes_upto_n_without_sieve(n) if n % p == 0]