from functools import partial

from ..SortingAlgorithm import SortingAlgorithm
from .bubble_sort import bubble_sort

algorithm = SortingAlgorithm("bubble sort (early exit)", partial(bubble_sort, early_exit=True), 8)
