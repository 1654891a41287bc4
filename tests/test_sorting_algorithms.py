from collections.abc import Callable
from itertools import permutations
from random import Random

import pytest

from comparison_sorts import InvalidBoundsError, bubble_sort, quick_sort, quick_sort_all, selection_sort
from comparison_sorts.sorting_algorithms.impl.lomuto_quick_sort import lomuto_partition


def _quick_sort(arr: list) -> None:
    quick_sort(arr, 0, len(arr) - 1)


def _bubble_sort_early_exit(arr: list) -> None:
    bubble_sort(arr, early_exit=True)


SORTS: list[Callable[[list], None]] = [selection_sort, bubble_sort, _bubble_sort_early_exit, _quick_sort]


def test_selection_sort_scenario():
    arr = [64, 25, 12, 22, 11]
    assert selection_sort(arr) is None
    assert arr == [11, 12, 22, 25, 64]


def test_bubble_sort_scenario():
    arr = [64, 34, 25, 12, 22, 11, 90]
    bubble_sort(arr)
    assert arr == [11, 12, 22, 25, 34, 64, 90]


def test_quick_sort_scenario():
    arr = [64, 34, 25, 12, 22, 11, 90]
    quick_sort(arr, 0, 6)
    assert arr == [11, 12, 22, 25, 34, 64, 90]


@pytest.mark.parametrize("sort", SORTS)
@pytest.mark.parametrize(
    "arr,expected",
    [
        ([], []),
        ([7], [7]),
        ([5, 5, 5, 5], [5, 5, 5, 5]),
        ([5, 4, 3, 2, 1], [1, 2, 3, 4, 5]),
        ([1, 2, 3, 4, 5], [1, 2, 3, 4, 5]),
        ([2, 1], [1, 2]),
        ([3, -1, 0, -1, 3, 2], [-1, -1, 0, 2, 3, 3]),
        ([2.5, 1, 1.5], [1, 1.5, 2.5]),
        (["pear", "apple", "fig"], ["apple", "fig", "pear"]),
    ],
)
def test_sorts_known_inputs(sort, arr, expected):
    sort(arr)
    assert arr == expected


@pytest.mark.parametrize("sort", SORTS)
@pytest.mark.parametrize("N", range(7))
def test_sorts_every_permutation(sort, N):
    for perm in permutations(range(N)):
        arr = list(perm)
        sort(arr)
        assert arr == list(range(N)), perm


@pytest.mark.parametrize("sort", SORTS)
def test_sorts_random_inputs_with_duplicates(sort):
    rng = Random(0)
    for n in range(1, 60, 7):
        arr = [rng.randint(0, n // 2) for _ in range(n)]
        expected = sorted(arr)
        sort(arr)
        assert arr == expected


@pytest.mark.parametrize("sort", SORTS)
def test_sorting_twice_changes_nothing(sort):
    arr = [9, 3, 7, 3, 1, 8]
    sort(arr)
    once = list(arr)
    sort(arr)
    assert arr == once


@pytest.mark.parametrize("sort", SORTS)
def test_incomparable_elements_raise(sort):
    with pytest.raises(TypeError):
        sort([1, "a", 2])


def test_quick_sort_only_touches_range():
    arr = [9, 8, 7, 6, 5, 4, 3]
    quick_sort(arr, 2, 5)
    assert arr == [9, 8, 4, 5, 6, 7, 3]


@pytest.mark.parametrize("low,high", [(0, 0), (3, 3), (4, 2), (10, 1), (0, -1)])
def test_quick_sort_empty_range_is_noop(low, high):
    arr = [3, 1, 2]
    quick_sort(arr, low, high)
    assert arr == [3, 1, 2]


@pytest.mark.parametrize("low,high", [(-1, 2), (0, 3), (1, 10), (-5, -1)])
def test_quick_sort_rejects_bounds_outside_sequence(low, high):
    arr = [3, 1, 2]
    with pytest.raises(InvalidBoundsError):
        quick_sort(arr, low, high)
    assert arr == [3, 1, 2]


def test_invalid_bounds_error_is_index_error():
    with pytest.raises(IndexError, match=r"\[0, 5\].*length 2"):
        quick_sort([2, 1], 0, 5)


def test_quick_sort_sorted_input_does_not_recurse_deeply():
    arr = list(range(2000))
    quick_sort_all(arr)
    assert arr == list(range(2000))
    arr.reverse()
    quick_sort_all(arr)
    assert arr == list(range(2000))


def test_lomuto_partition_puts_pivot_in_place():
    arr = [7, 2, 9, 4, 4, 1, 4]
    p = lomuto_partition(arr, 0, len(arr) - 1)
    assert arr[p] == 4
    assert all(x <= 4 for x in arr[:p])
    assert all(x > 4 for x in arr[p + 1 :])
    assert p == 4


def test_selection_sort_keeps_leftmost_minimum():
    class Item:
        def __init__(self, key: int, tag: str) -> None:
            self.key = key
            self.tag = tag

        def __gt__(self, other: "Item") -> bool:
            return self.key > other.key

    arr = [Item(2, "x"), Item(1, "first"), Item(1, "second")]
    selection_sort(arr)
    assert [x.tag for x in arr] == ["first", "second", "x"]
