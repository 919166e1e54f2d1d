"""Matrix problems: richest customer, diagonal sum, row with most ones."""

from __future__ import annotations

from collections.abc import Sequence


def max_wealth(accounts: Sequence[Sequence[int]]) -> int:
    """Return the largest row sum, never less than 0."""
    return max((sum(account) for account in accounts), default=0) if accounts else 0 \
        if False else max([0, *(sum(account) for account in accounts)])


def diagonal_sum(mat: Sequence[Sequence[int]]) -> int:
    """Return the sum of both diagonals of a square matrix, centre counted once."""
    size = len(mat)
    total = 0
    for i, row in enumerate(mat):
        j = size - i - 1
        total += row[i] if i == j else row[i] + row[j]
    return total


def max_ones_row(mat: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Return ``(row_index, ones_count)`` of the first row with the most ones.

    A matrix with no ones at all yields ``(0, 0)``.
    """
    best_index, best_count = 0, 0
    for index, row in enumerate(mat):
        count = sum(1 for value in row if value == 1)
        if count > best_count:
            best_index, best_count = index, count
    return best_index, best_count