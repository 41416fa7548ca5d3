import pytest
from hypothesis import given
from hypothesis import strategies as st

from gridsortlab.mergesort import merge, merge_sort


def test_merge_interleaves_sorted_inputs():
    assert merge([1, 3, 5], [2, 4]) == [1, 2, 3, 4, 5]


def test_merge_with_empty_side():
    assert merge([], [1, 2]) == [1, 2]
    assert merge([7, 8], []) == [7, 8]
    assert merge([], []) == []


def test_merge_prefers_left_on_ties():
    a, b = [1.0], [1]
    result = merge(a, b)
    assert result == [1, 1]
    assert isinstance(result[0], float)
    assert isinstance(result[1], int)


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_merge_matches_sorted_concatenation(left, right):
    assert merge(sorted(left), sorted(right)) == sorted(left + right)


@given(st.lists(st.integers(min_value=-1000, max_value=1000)))
def test_merge_sort_matches_builtin(values):
    assert merge_sort(values) == sorted(values)


def test_merge_sort_does_not_mutate_input():
    data = [5, 1, 4, 2, 3]
    snapshot = list(data)
    result = merge_sort(data)
    assert data == snapshot
    assert result == sorted(snapshot)


@pytest.mark.parametrize("values", [[], [42], (3, 1, 2), [2, 2, 1, 1]])
def test_merge_sort_small_inputs(values):
    assert merge_sort(values) == sorted(values)