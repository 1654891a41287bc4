from .sorting_algorithms.impl.bubble_sort import bubble_sort
from .sorting_algorithms.impl.lomuto_quick_sort import InvalidBoundsError, quick_sort, quick_sort_all
from .sorting_algorithms.impl.selection_sort import selection_sort
from .sorting_algorithms.sorting_algorithms import UnknownAlgorithmError, get_algorithm, sorting_algorithms
