# eulerkit

Number-theory helpers and worked solutions to Project Euler problems 1 to 10
and 16 to 31.

## Install

```
pip install .
```

## Helpers

```python
from eulerkit.primes import sieve_of_eratosthenes, nth_prime, int_sqrt
from eulerkit.arith import all_divisors, is_palindrome
from eulerkit.combinatorics import combinations, construct_number_from_prime_factor_hashmap
from eulerkit.bigdigits import get_power_of_a_number
from eulerkit.sequences import collatz_sequence, decimal_expansion
from eulerkit.grids import max_prod_in_grid

sieve_of_eratosthenes(10)          # [2, 3, 5, 7]
nth_prime(4)                       # 7
int_sqrt(8)                        # 2
all_divisors(100)                  # [1, 2, 4, 5, 10, 20, 25, 50, 100]
is_palindrome(10000001)            # True
construct_number_from_prime_factor_hashmap(combinations(13, 3))  # 286
get_power_of_a_number([1, 1], [3]) # [1, 3, 3, 1]
collatz_sequence(2)                # [2, 1]
max_prod_in_grid([[1, 1, 1], [1, 1, 3], [1, 1, 3]], 2)  # 9
```

Modules:

- `eulerkit.primes`: integer square roots, primality, sieves and prime factorisation.
- `eulerkit.arith`: divisors, palindromes and perfect squares.
- `eulerkit.combinatorics`: factorials, combinations and permutations as prime-factor maps.
- `eulerkit.bigdigits`: arithmetic on numbers held as lists of decimal digits.
- `eulerkit.grids`: largest product or sum of adjacent numbers in a grid.
- `eulerkit.sequences`: Collatz sequences, decimal expansions of `1/n` and spiral matrices.
- `eulerkit.timing`: `time_solutions`, which calls functions in turn, prints how
  long each took and returns their results.

## Problem solutions

Each solution is a function that returns its answer; its defaults are the
problem's own inputs.

- `eulerkit.problems.set1`: `problem_1` to `problem_10` (and `problem_3_sieve`).
- `eulerkit.problems.set3`: `problem_16` to `problem_20`.
- `eulerkit.problems.set4`: `problem_21` to `problem_31`, plus the helpers
  `name_scores_total`, `count_consecutive_primes` and `digit_power_sum`.

```python
from eulerkit.problems.set1 import problem_1, problem_6
from eulerkit.timing import time_solutions

problem_1()                        # 233168
time_solutions(problem_1, (problem_6, 10))
# prints a separator line and "<name> took <duration>" for each call,
# and returns [233168, 2640]
```

`problem_22` reads its names from `files/0022_names.txt` relative to the
current directory unless another path is given.

## What is not included

- There is no command-line program; the solutions are called from Python.
- Problems 11 to 15 have no solution functions. The grid helper for problem 11
  (`eulerkit.grids.max_prod_in_grid`), Collatz lengths and combinations are
  available as helpers.

## Tests

```
pip install .[test]
pytest
```