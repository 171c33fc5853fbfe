import random

import pytest

from algokit.sorting import merge_sort, quick_sort


def _random_lists():
    rng = random.Random(1234)
    return [
        [rng.randint(-50, 50) for _ in range(length)]
        for length in (0, 1, 2, 3, 7, 16, 33, 100)
    ]


@pytest.mark.parametrize("values", _random_lists())
def test_merge_sort_matches_builtin_sorted(values):
    assert merge_sort(values) == sorted(values)


@pytest.mark.parametrize("values", _random_lists())
def test_quick_sort_matches_builtin_sorted(values):
    assert quick_sort(values) == sorted(values)


def test_duplicates_and_negatives():
    values = [3, -1, 3, 0, -1, 3, 2]
    expected = [-1, -1, 0, 2, 3, 3, 3]
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected


def test_input_is_not_mutated():
    values = [5, 4, 3, 2, 1]
    snapshot = list(values)
    assert merge_sort(values) == [1, 2, 3, 4, 5]
    assert values == snapshot
    assert quick_sort(values) == [1, 2, 3, 4, 5]
    assert values == snapshot


def test_accepts_any_iterable():
    expected = ["apple", "fig", "pear"]
    assert merge_sort(iter(("pear", "apple", "fig"))) == expected
    assert quick_sort(iter(("pear", "apple", "fig"))) == expected


def test_already_sorted_large_input():
    values = list(range(5000))
    assert merge_sort(values) == values
    assert merge_sort(reversed(values)) == values
    assert quick_sort(values) == values
    assert quick_sort(reversed(values)) == values


def test_idempotent():
    values = _random_lists()[-1]
    merged = merge_sort(values)
    assert merge_sort(merged) == merged
    quick = quick_sort(values)
    assert quick_sort(quick) == quick
    assert merged == quick