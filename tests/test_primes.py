import pytest

from eulerkit.primes import (
    first_n_primes,
    int_sqrt,
    is_prime,
    nth_prime,
    prime_factors_of_n_with_sieve_as_hashmap,
    prime_factors_of_n_with_sieve_as_vec,
    prime_factors_of_n_without_sieve_as_hashmap,
    prime_factors_of_n_without_sieve_as_vec,
    primes_upto_n_without_sieve,
    sieve_of_eratosthenes,
)

U16_MAX = 2**16 - 1
U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, 0),
        (1, 1),
        (2, 1),
        (3, 1),
        (4, 2),
        (8, 2),
        (9, 3),
        (30, 5),
        (U128_MAX, U64_MAX),
        (U128_MAX - 1, U64_MAX),
        (340282366920938463389587631136930004996, 18446744073709551614),
        (U64_MAX + 1, U32_MAX + 1),
        (U32_MAX + 1, U16_MAX + 1),
    ],
)
def test_int_sqrt(value, expected):
    assert int_sqrt(value) == expected


def test_int_sqrt_negative():
    with pytest.raises(ValueError):
        int_sqrt(-1)


@pytest.mark.parametrize("value, expected", [(1, False), (2, True), (5, True), (8, False)])
def test_is_prime(value, expected):
    assert is_prime(value) is expected


def test_is_prime_zero_raises():
    with pytest.raises(ValueError):
        is_prime(0)


def test_is_prime_agrees_with_sieve():
    primes = set(sieve_of_eratosthenes(500))
    assert [n for n in range(1, 501) if is_prime(n)] == sorted(primes)


@pytest.mark.parametrize(
    "value, expected",
    [(0, []), (1, []), (3, [2, 3]), (10, [2, 3, 5, 7]), (11, [2, 3, 5, 7, 11])],
)
def test_sieve_of_eratosthenes(value, expected):
    assert sieve_of_eratosthenes(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, []),
        (1, []),
        (2, [2]),
        (12, [2, 3, 5, 7, 11]),
        (17, [2, 3, 5, 7, 11, 13, 17]),
    ],
)
def test_primes_upto_n_without_sieve(value, expected):
    assert primes_upto_n_without_sieve(value) == expected


@pytest.mark.parametrize("value", [23, 89, 1000])
def test_sieve_and_trial_division_agree(value):
    assert sieve_of_eratosthenes(value) == primes_upto_n_without_sieve(value)


@pytest.mark.parametrize(
    "value, expected",
    [(0, []), (1, [2]), (2, [2, 3]), (5, [2, 3, 5, 7, 11])],
)
def test_first_n_primes(value, expected):
    assert first_n_primes(value) == expected


@pytest.mark.parametrize("value, expected", [(1, 2), (2, 3), (4, 7), (888, 6907)])
def test_nth_prime(value, expected):
    assert nth_prime(value) == expected


def test_nth_prime_zero_raises():
    with pytest.raises(ValueError):
        nth_prime(0)


FACTOR_CASES = [
    (60, {2: 2, 3: 1, 5: 1}),
    (0, {}),
    (1, {}),
    (2, {2: 1}),
    (30030, {2: 1, 3: 1, 5: 1, 7: 1, 11: 1, 13: 1}),
]


@pytest.mark.parametrize("value, expected", FACTOR_CASES)
def test_prime_factors_with_sieve_as_hashmap(value, expected):
    assert prime_factors_of_n_with_sieve_as_hashmap(value) == expected


@pytest.mark.parametrize("value, expected", FACTOR_CASES)
def test_prime_factors_without_sieve_as_hashmap(value, expected):
    assert prime_factors_of_n_without_sieve_as_hashmap(value) == expected


@pytest.mark.parametrize("value", range(2, 200))
def test_factor_map_reconstructs_number(value):
    product = 1
    for prime, count in prime_factors_of_n_with_sieve_as_hashmap(value).items():
        product *= prime**count
    assert product == value


@pytest.mark.parametrize(
    "value, expected",
    [(0, []), (1, []), (7, [7]), (6, [2, 3]), (10, [2, 5]), (60, [2, 3, 5])],
)
def test_prime_factors_with_sieve_as_vec(value, expected):
    assert prime_factors_of_n_with_sieve_as_vec(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(1, []), (7, [7]), (10, [2, 5]), (60, [2, 3, 5])],
)
def test_prime_factors_without_sieve_as_vec(value, expected):
    assert prime_factors_of_n_without_sieve_as_vec(value) == expected