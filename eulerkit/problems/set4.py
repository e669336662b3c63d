"""Solutions to problems 21 to 31."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from eulerkit.arith import sum_of_all_divisors
from eulerkit.combinatorics import factorial_as_u128
from eulerkit.primes import is_prime, prime_factors_of_n_with_sieve_as_hashmap
from eulerkit.sequences import create_spiral_matrix, decimal_expansion

__all__ = [
    "problem_21",
    "name_scores_total",
    "problem_22",
    "problem_23",
    "problem_24",
    "problem_25",
    "problem_26",
    "count_consecutive_primes",
    "problem_27",
    "problem_28",
    "problem_29",
    "digit_power_sum",
    "problem_30",
    "problem_31",
]

DEFAULT_NAMES_PATH = Path("files") / "0022_names.txt"
UK_COINS = (1, 2, 5, 10, 20, 50, 100, 200)


def problem_21(num: int = 10000) -> int:
    """Sum of the amicable numbers whose pair lies entirely within 1 to ``num``."""
    proper = {n: sum_of_all_divisors(n) - n for n in range(1, num + 1)}
    return sum(
        n1 + n2
        for n1, n2 in proper.items()
        if n1 < n2 <= num and proper[n2] == n1
    )


def name_scores_total(names: Iterable[str]) -> int:
    """Sum over the sorted names of position times alphabetical value."""
    return sum(
        position * sum(ord(ch) - ord("A") + 1 for ch in name)
        for position, name in enumerate(sorted(names), start=1)
    )


def problem_22(path: str | Path = DEFAULT_NAMES_PATH) -> int:
    """Total name score of a file of quoted, comma-separated names."""
    content = Path(path).read_text()
    return name_scores_total(content.strip().strip('"').split('","'))


def problem_23(limit: int = 28123) -> int:
    """Sum of the numbers up to ``limit`` that are not a sum of two abundant numbers."""
    abundant = [n for n in range(2, limit + 1) if sum_of_all_divisors(n) - n > n]
    expressible = bytearray(limit + 1)
    for i, first in enumerate(abundant):
        for second in abundant[i:]:
            total = first + second
            if total > limit:
                break
            expressible[total] = 1
    return sum(n for n in range(1, limit + 1) if not expressible[n])


def problem_24(digit: int = 9, position: int = 1_000_000) -> str:
    """The ``position``-th (1-based) lexicographic permutation of the digits 0 to ``digit``."""
    if not 0 <= digit <= 9:
        raise ValueError(f"digit : {digit} must be between 0 and 9")
    if position < 1:
        raise ValueError(f"position : {position} must be at least 1")
    available = list(range(digit + 1))
    remaining = position - 1
    chosen = []
    for k in range(digit, -1, -1):
        index, remaining = divmod(remaining, factorial_as_u128(k))
        if index >= len(available):
            raise ValueError(
                f"position : {position} exceeds the number of permutations"
            )
        chosen.append(available.pop(index))
    return "".join(map(str, chosen))


def problem_25(num_digits: int = 1000) -> int:
    """Index of the first Fibonacci term (after the second) with ``num_digits`` digits."""
    older, newer = 1, 1
    index = 2
    while True:
        term = older + newer
        index += 1
        if len(str(term)) >= num_digits:
            return index
        older, newer = newer, term


def problem_26(limit: int = 1000) -> tuple[int, int]:
    """The ``d`` in 2 to ``limit`` whose ``1/d`` has the longest recurring cycle, and that length."""
    best_num, best_len = 2, 0
    for num in range(2, limit + 1):
        cycle = decimal_expansion(num)[2]
        if cycle > best_len:
            best_num, best_len = num, cycle
    return best_num, best_len


def count_consecutive_primes(a: int, b: int) -> int:
    """Number of consecutive ``n`` from 0 for which ``n*n + a*n + b`` is prime."""
    n = 0
    while True:
        if n == b:
            break
        if n > 1 and a % n == 0 and b % n == 0:
            break
        if n == 0 and b < 0:
            break
        value = n * n + a * n + b
        if value <= 1 or not is_prime(value):
            break
        n += 1
    return n


def problem_27(bound: int = 1000) -> tuple[int, int, int]:
    """Best ``(count, a, b)`` over ``|a|, |b| <= bound``; the first maximum wins."""
    best = (0, 0, 0)
    for a in range(-bound, bound + 1):
        for b in range(-bound, bound + 1):
            count = count_consecutive_primes(a, b)
            if count > best[0]:
                best = (count, a, b)
    return best


def problem_28(side_length: int = 1001) -> int:
    """Sum of both diagonals of a number spiral, counting the centre once."""
    matrix = create_spiral_matrix(side_length)
    return sum(row[i] + row[side_length - 1 - i] for i, row in enumerate(matrix)) - 1


def problem_29(limit: int = 100) -> int:
    """Number of distinct values of ``a ** b`` for ``2 <= a, b <= limit``."""
    seen: set[frozenset[tuple[int, int]]] = set()
    for base in range(2, limit + 1):
        factors = prime_factors_of_n_with_sieve_as_hashmap(base)
        for power in range(2, limit + 1):
            seen.add(frozenset((p, e * power) for p, e in factors.items()))
    return len(seen)


def digit_power_sum(num: int) -> int:
    """Sum of the fifth powers of the decimal digits of ``num``."""
    if num < 0:
        raise ValueError(f"num : {num} must not be negative")
    return sum(int(ch) ** 5 for ch in str(num))


def problem_30(upper_limit: int = 6 * 9**5) -> int:
    """Sum of the numbers from 2 to ``upper_limit`` equal to their digit fifth-power sum."""
    return sum(n for n in range(2, upper_limit + 1) if digit_power_sum(n) == n)


def problem_31(target: int = 200, coins: Iterable[int] = UK_COINS) -> int:
    """Number of ways to make ``target`` from any number of the given coins."""
    coins = tuple(coins)
    if target == 0:
        return 1
    if not coins:
        return 0
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    ways = [1] + [0] * target
    for coin in coins:
        for amount in range(coin, target + 1):
            ways[amount] += ways[amount - coin]
    return ways[target]