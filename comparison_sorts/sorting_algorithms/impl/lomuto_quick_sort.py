from collections.abc import MutableSequence

from ..SortingAlgorithm import SortingAlgorithm


class InvalidBoundsError(IndexError):
    def __init__(self, low: int, high: int, length: int) -> None:
        super().__init__(f"Quick sort range [{low}, {high}] is outside a sequence of length {length}")


def lomuto_partition(L: MutableSequence, lo: int, hi: int) -> int:
    pivot = L[hi]
    i = lo - 1
    for j in range(lo, hi):
        if L[j] <= pivot:
            i += 1
            L[i], L[j] = L[j], L[i]
    L[i + 1], L[hi] = L[hi], L[i + 1]
    return i + 1


def quick_sort(arr: MutableSequence, low: int, high: int) -> None:
    """Sort ``arr[low : high + 1]`` in place.

    Only the smaller side of each partition is handled recursively, the larger
    one is looped over, so the stack stays O(log n) deep on sorted input too.
    """
    if low >= high:
        return
    if low < 0 or high >= len(arr):
        raise InvalidBoundsError(low, high, len(arr))
    while low < high:
        p = lomuto_partition(arr, low, high)
        if p - low < high - p:
            quick_sort(arr, low, p - 1)
            low = p + 1
        else:
            quick_sort(arr, p + 1, high)
            high = p - 1


def quick_sort_all(arr: MutableSequence) -> None:
    quick_sort(arr, 0, len(arr) - 1)


algorithm = SortingAlgorithm("Lomuto quick sort", quick_sort_all, 9)
