"""Maximum products and sums of adjacent runs in a rectangular grid."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence

__all__ = ["max_prod_in_grid", "max_sum_in_grid"]


def _runs(grid: Sequence[Sequence[int]], n_adjacent: int) -> Iterator[list[int]]:
    """Yield every run of ``n_adjacent`` cells in the four scanned orientations."""
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one row and one column")
    n_rows = len(grid)
    n_cols = len(grid[0])
    if n_adjacent < 1:
        raise ValueError(f"n_adjacent : {n_adjacent} must be at least 1")
    if n_adjacent > n_rows or n_adjacent > n_cols:
        raise ValueError(
            f"n_adjacent : {n_adjacent} does not fit in a {n_rows}x{n_cols} grid"
        )

    steps = range(n_adjacent)

    # horizontal
    for row in grid:
        for j in range(n_cols - n_adjacent + 1):
            yield list(row[j : j + n_adjacent])

    # vertical
    for i in range(n_rows - n_adjacent + 1):
        for j in range(n_cols):
            yield [grid[i + k][j] for k in steps]

    # diagonal running down and to the right
    for i in range(n_rows - n_adjacent + 1):
        for j in range(n_cols - n_adjacent + 1):
            yield [grid[i + k][j + k] for k in steps]

    # diagonal running down and to the left; starting columns run from
    # n_adjacent - 1 up to, but not including, n_cols - n_adjacent + 1
    for i in range(n_rows - n_adjacent + 1):
        for j in range(n_adjacent - 1, n_cols - n_adjacent + 1):
            yield [grid[i + k][j - k] for k in steps]


def max_prod_in_grid(grid: Sequence[Sequence[int]], n_adjacent: int) -> int:
    """Return the largest product of ``n_adjacent`` adjacent cells.

    Runs are taken horizontally, vertically and along both diagonals.
    """
    return max((math.prod(run) for run in _runs(grid, n_adjacent)), default=0)


def max_sum_in_grid(grid: Sequence[Sequence[int]], n_adjacent: int) -> int:
    """Return the largest sum of ``n_adjacent`` adjacent cells.

    Runs are taken horizontally, vertically and along both diagonals.
    """
    return max((sum(run) for run in _runs(grid, n_adjacent)), default=0)