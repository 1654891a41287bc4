import pytest

from comparison_sorts import get_algorithm
from comparison_sorts.operation_count import InvalidSortingAlgorithmError, OperationCount, SwapCountingList, count_operations
from comparison_sorts.sorting_algorithms.SortingAlgorithm import SortingAlgorithm


@pytest.mark.parametrize(
    "name,values,expected",
    [
        ("selection sort", [5, 4, 3, 2, 1], OperationCount(10, 2)),
        ("selection sort", [1, 2, 3, 4, 5], OperationCount(10, 0)),
        ("bubble sort", [5, 4, 3, 2, 1], OperationCount(10, 10)),
        ("bubble sort", [1, 2, 3, 4, 5], OperationCount(10, 0)),
        ("bubble sort (early exit)", [1, 2, 3, 4, 5], OperationCount(4, 0)),
        ("bubble sort (early exit)", [2, 1, 3, 4, 5], OperationCount(7, 1)),
        ("Lomuto quick sort", [1, 2, 3, 4, 5], OperationCount(10, 14)),
        ("Lomuto quick sort", [], OperationCount(0, 0)),
        ("Lomuto quick sort", [42], OperationCount(0, 0)),
    ],
)
def test_count_operations(name, values, expected):
    assert count_operations(get_algorithm(name), values) == expected


def test_count_operations_leaves_input_alone():
    values = [3, 1, 2]
    count_operations(get_algorithm("bubble sort"), values)
    assert values == [3, 1, 2]


@pytest.mark.parametrize("n", range(1, 9))
def test_selection_sort_swaps_at_most_n_minus_one(n):
    values = list(range(n))[::-1]
    cnt = count_operations(get_algorithm("selection sort"), values)
    assert cnt.comparisons == n * (n - 1) // 2
    assert cnt.swaps <= n - 1


def test_count_operations_rejects_unsorted_output():
    noop = SortingAlgorithm("no-op", lambda arr: None, 8)
    with pytest.raises(InvalidSortingAlgorithmError, match="no-op"):
        count_operations(noop, [2, 1])


def test_swap_counting_list():
    arr = SwapCountingList([1, 2, 3])
    assert arr.swaps == 0
    arr[0], arr[2] = arr[2], arr[0]
    assert arr == [3, 2, 1]
    assert arr.writes == 2
    assert arr.swaps == 1
