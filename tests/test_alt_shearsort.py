import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from gridsortlab.alt_shearsort import (
    alternative_shearsort,
    alternative_shearsort_parallel,
)
from gridsortlab.shearsort import shearsort


def _square(sizes):
    return sizes.flatmap(
        lambda n: st.lists(
            st.lists(st.integers(0, 99), min_size=n, max_size=n),
            min_size=n,
            max_size=n,
        )
    )


square_matrices = _square(st.integers(min_value=0, max_value=6))
power_of_two_matrices = _square(st.sampled_from([1, 2, 4, 8]))


def _flatten(matrix):
    return sorted(value for row in matrix for value in row)


def test_rejects_non_square():
    with pytest.raises(ValueError):
        alternative_shearsort([[1, 2, 3], [4, 5, 6]])


def test_parallel_rejects_bad_workers():
    with pytest.raises(ValueError):
        alternative_shearsort_parallel([[1]], workers=-1)


def test_empty_matrix():
    matrix = []
    alternative_shearsort(matrix)
    assert matrix == []


def test_row_objects_are_kept():
    matrix = [[5, 4], [3, 2]]
    first_row = matrix[0]
    alternative_shearsort(matrix)
    assert matrix[0] is first_row
    assert _flatten(matrix) == [2, 3, 4, 5]


@settings(max_examples=50, deadline=None)
@given(square_matrices)
def test_keeps_values_and_sorts_columns(matrix):
    original = _flatten(matrix)
    alternative_shearsort(matrix)
    assert _flatten(matrix) == original
    for column in zip(*matrix):
        assert list(column) == sorted(column)


@settings(max_examples=50, deadline=None)
@given(power_of_two_matrices)
def test_agrees_with_shearsort_on_power_of_two_sizes(matrix):
    expected = [list(row) for row in matrix]
    shearsort(expected)
    alternative_shearsort(matrix)
    assert matrix == expected


@settings(max_examples=50, deadline=None)
@given(square_matrices, st.integers(min_value=1, max_value=4))
def test_parallel_matches_sequential(matrix, workers):
    expected = [list(row) for row in matrix]
    alternative_shearsort(expected)
    alternative_shearsort_parallel(matrix, workers=workers)
    assert matrix == expected