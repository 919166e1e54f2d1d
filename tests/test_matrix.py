import pytest

from dsakit.matrix import diagonal_sum, max_ones_row, max_wealth


def test_max_wealth_example():
    assert max_wealth([[1, 2, 3], [2, 3, 4]]) == 9


def test_max_wealth_matches_largest_row_sum():
    accounts = [[10, 1], [3, 3, 3, 3], [7]]
    assert max_wealth(accounts) == max(sum(a) for a in accounts)


def test_diagonal_sum_example():
    assert diagonal_sum([[5, 3, 9], [4, 7, 1], [8, 6, 2]]) == 31


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_diagonal_sum_of_ones_counts_distinct_cells(n):
    mat = [[1] * n for _ in range(n)]
    expected = 2 * n - (n % 2)
    assert diagonal_sum(mat) == expected


@pytest.mark.parametrize("n", [2, 4, 6])
def test_diagonal_sum_identity_even(n):
    mat = [[1 if i == j else 0 for j in range(n)] for i in range(n)]
    assert diagonal_sum(mat) == n


def test_max_ones_row_example_prefers_first_on_tie():
    assert max_ones_row([[1, 0, 1], [0, 0, 1], [1, 1, 0]]) == (0, 2)


def test_max_ones_row_no_ones():
    assert max_ones_row([[0, 0], [0, 0]]) == (0, 0)


def test_max_ones_row_full_last_row():
    mat = [[0, 1, 0], [1, 0, 0], [1, 1, 1]]
    assert max_ones_row(mat) == (2, len(mat[2]))