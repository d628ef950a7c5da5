import pytest
from hypothesis import given
from hypothesis import strategies as st

from algosearch.binary import search


def test_empty_array():
    assert search([], 0) is None


@pytest.mark.parametrize(
    "value, expected",
    [
        (1, 0),
        (4, 3),
        (8, 7),
        (100, None),
        (-1, None),
    ],
)
def test_search_cases(value, expected):
    xs = [1, 2, 3, 4, 5, 6, 7, 8]
    assert search(xs, value) == expected


def test_search_strings():
    words = ["apple", "banana", "cherry", "date"]
    assert search(words, "cherry") == 2
    assert search(words, "fig") is None


def test_single_element():
    assert search([5], 5) == 0
    assert search([5], 4) is None
    assert search([5], 6) is None


@given(st.sets(st.integers(-1000, 1000)), st.integers(-1100, 1100))
def test_matches_membership(values, target):
    arr = sorted(values)
    result = search(arr, target)
    if target in values:
        assert result is not None
        assert arr[result] == target
    else:
        assert result is None


@given(st.lists(st.integers(-50, 50), min_size=1))
def test_found_index_holds_value(values):
    arr = sorted(values)
    for v in values:
        idx = search(arr, v)
        assert idx is not None
        assert arr[idx] == v