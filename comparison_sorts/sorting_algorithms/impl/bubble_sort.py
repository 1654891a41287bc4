from collections.abc import MutableSequence

from ..SortingAlgorithm import SortingAlgorithm


def bubble_sort(arr: MutableSequence, early_exit: bool = False) -> None:
    for i in range(len(arr) - 2, -1, -1):
        swapped = False
        for j in range(i + 1):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
        if early_exit and not swapped:
            break


algorithm = SortingAlgorithm("bubble sort", bubble_sort, 8)
