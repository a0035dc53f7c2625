import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.sorting import bubble_sort, merge_sort, quick_sort

SOURCE_EXAMPLES = [
    [5, 4, 3, 2, 1],
    [2, 9, 13, 4, 5],
    [10, 9, 8, 7, 6, 5, 4, 3, 2, 1],
]


@given(values=st.lists(st.integers(-1000, 1000), max_size=200))
def test_bubble_sort_matches_builtin_sorted(values):
    assert bubble_sort(values) == sorted(values)


@given(values=st.lists(st.integers(-1000, 1000), max_size=200))
def test_merge_sort_matches_builtin_sorted(values):
    assert merge_sort(values) == sorted(values)


@given(values=st.lists(st.integers(-1000, 1000), max_size=200))
def test_quick_sort_matches_builtin_sorted(values):
    assert quick_sort(values) == sorted(values)


@given(values=st.lists(st.integers(0, 3), max_size=100))
def test_bubble_sort_many_duplicates(values):
    assert bubble_sort(values) == sorted(values)


@given(values=st.lists(st.integers(0, 3), max_size=100))
def test_merge_sort_many_duplicates(values):
    assert merge_sort(values) == sorted(values)


@given(values=st.lists(st.integers(0, 3), max_size=100))
def test_quick_sort_many_duplicates(values):
    assert quick_sort(values) == sorted(values)


def test_bubble_sort_empty_and_single():
    assert bubble_sort([]) == []
    assert bubble_sort([42]) == [42]


def test_merge_sort_empty_and_single():
    assert merge_sort([]) == []
    assert merge_sort([42]) == [42]


def test_quick_sort_empty_and_single():
    assert quick_sort([]) == []
    assert quick_sort([42]) == [42]


@pytest.mark.parametrize("values", SOURCE_EXAMPLES)
def test_bubble_sort_source_examples(values):
    assert bubble_sort(values) == sorted(values)


@pytest.mark.parametrize("values", SOURCE_EXAMPLES)
def test_merge_sort_source_examples(values):
    assert merge_sort(values) == sorted(values)


@pytest.mark.parametrize("values", SOURCE_EXAMPLES)
def test_quick_sort_source_examples(values):
    assert quick_sort(values) == sorted(values)


def test_bubble_sort_input_left_untouched():
    values = [3, 1, 2]
    assert bubble_sort(values) == [1, 2, 3]
    assert values == [3, 1, 2]


def test_merge_sort_input_left_untouched():
    values = [3, 1, 2]
    assert merge_sort(values) == [1, 2, 3]
    assert values == [3, 1, 2]


def test_quick_sort_input_left_untouched():
    values = [3, 1, 2]
    assert quick_sort(values) == [1, 2, 3]
    assert values == [3, 1, 2]


def test_bubble_sort_accepts_any_iterable():
    assert bubble_sort(iter((4, 1, 3))) == [1, 3, 4]


def test_merge_sort_accepts_any_iterable():
    assert merge_sort(iter((4, 1, 3))) == [1, 3, 4]


def test_quick_sort_accepts_any_iterable():
    assert quick_sort(iter((4, 1, 3))) == [1, 3, 4]


def test_quick_sort_large_sorted_input():
    values = list(range(5000))
    assert quick_sort(reversed(values)) == values