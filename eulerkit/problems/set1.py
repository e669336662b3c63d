"""Solutions to problems 1 to 10."""

from __future__ import annotations

import math
from collections.abc import Iterable

from eulerkit.arith import is_palindrome
from eulerkit.primes import (
    int_sqrt,
    is_prime,
    nth_prime,
    prime_factors_of_n_with_sieve_as_hashmap,
    sieve_of_eratosthenes,
)

__all__ = [
    "DIGITS_1000",
    "problem_1",
    "problem_2",
    "problem_3",
    "problem_3_sieve",
    "problem_4",
    "problem_5",
    "problem_6",
    "problem_7",
    "problem_8",
    "problem_9",
    "problem_10",
]

DIGITS_1000 = "7316717653133062491922511967442657474235534919493496983520312774506326239578318016984801869478851843858615607891129494954595017379583319528532088055111254069874715852386305071569329096329522744304355766896648950445244523161731856403098711121722383113622298934233803081353362766142828064444866452387493035890729629049156044077239071381051585930796086670172427121883998797908792274921901699720888093776657273330010533678812202354218097512545405947522435258490771167055601360483958644670632441572215539753697817977846174064955149290862569321978468622482839722413756570560574902614079729686524145351004748216637048440319989000889524345065854122758866688116427171479924442928230863465674813919123162824586178664583591245665294765456828489128831426076900422421902267105562632111110937054421750694165896040807198403850962455444362981230987879927244284909188845801561660979191338754992005240636899125607176060588611646710940507754100225698315520005593572972571636269561882670428252483600823257530420752963450"


def problem_1(limit: int = 1000, multiples_of: Iterable[int] = (3, 5)) -> int:
    """Sum the numbers below ``limit`` that are multiples of any of ``multiples_of``."""
    divisors = tuple(multiples_of)
    return sum(i for i in range(limit) if any(i % d == 0 for d in divisors))


def problem_2(limit: int = 4_000_000) -> int:
    """Sum the even Fibonacci terms, checking the bound before each new term."""
    a, b = 1, 2
    c = a + b
    total = b
    while c <= limit:
        c = a + b
        if c % 2 == 0:
            total += c
        a, b = b, c
    return total


def problem_3(number: int = 600851475143) -> int | None:
    """Largest prime factor of ``number`` not above its square root, by counting down.

    Returns ``None`` when no factor greater than 2 is found.
    """
    candidate = int_sqrt(number)
    while candidate > 2:
        if number % candidate == 0 and is_prime(candidate):
            return candidate
        candidate -= 1
    return None


def problem_3_sieve(number: int = 600851475143) -> int | None:
    """Largest prime factor of ``number`` not above its square root, using a sieve.

    Returns ``None`` when there is none.
    """
    return next(
        (p for p in reversed(sieve_of_eratosthenes(int_sqrt(number))) if number % p == 0),
        None,
    )


def problem_4(n_digit: int = 3) -> int:
    """Largest palindrome that is a product of two ``n_digit``-digit numbers."""
    if n_digit < 1:
        raise ValueError(f"n_digit : {n_digit} must be at least 1")
    numbers = range(10 ** (n_digit - 1), 10**n_digit)
    return max(
        (a * b for a in numbers for b in numbers if is_palindrome(a * b)),
        default=0,
    )


def problem_5(limit: int = 20) -> int:
    """Smallest number divisible by every number from 1 to ``limit``."""
    exponents: dict[int, int] = {}
    for i in range(2, limit + 1):
        for prime, count in prime_factors_of_n_with_sieve_as_hashmap(i).items():
            exponents[prime] = max(count, exponents.get(prime, 0))
    return math.prod(prime**count for prime, count in exponents.items())


def problem_6(n: int = 100) -> int:
    """Square of the sum minus the sum of the squares of 1 to ``n``."""
    return ((n * (n + 1)) // 2) ** 2 - (n * (n + 1) * (2 * n + 1)) // 6


def problem_7(n: int = 10001) -> int:
    """The ``n``-th prime."""
    return nth_prime(n)


def problem_8(digits: str = DIGITS_1000, size: int = 13) -> int:
    """Largest product of ``size`` adjacent digits in ``digits``."""
    values = [int(ch) for ch in digits]
    if size < 1 or size > len(values):
        raise ValueError(f"size : {size} does not fit in {len(values)} digits")
    return max(math.prod(values[i : i + size]) for i in range(len(values) - size + 1))


def problem_9(n: int = 1000) -> int | None:
    """Product ``a * b * c`` of the Pythagorean triplet from Euclid's formula with perimeter ``n``.

    Returns ``None`` when no such triplet is generated.
    """
    bound = int_sqrt(n) + 1
    for k in range(1, bound + 1):
        for m in range(k + 1, bound + 1):
            a = m * m - k * k
            b = 2 * m * k
            c = m * m + k * k
            if a + b + c == n:
                return a * b * c
    return None


def problem_10(limit: int = 2_000_000) -> int:
    """Sum of the primes below ``limit``."""
    return sum(sieve_of_eratosthenes(limit - 1))