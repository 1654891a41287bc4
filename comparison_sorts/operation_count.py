from collections.abc import Callable, Iterable, Sequence
from typing import Any, NamedTuple, Optional

from .sorting_algorithms.SortingAlgorithm import SortingAlgorithm


class IdxVal(NamedTuple):
    idx: int
    val: Any


class OperationCount(NamedTuple):
    comparisons: int
    swaps: int


class InvalidSortingAlgorithmError(Exception):
    def __init__(self, name: str, val_array: Sequence[Any]) -> None:
        super().__init__(f"Invalid sorting algorithm `{name}`: input {list(val_array)} was not sorted")


# copy from functools.cmp_to_key
# since member "obj" is not present in the documentation, it is not guaranteed to be exist in the future
# fmt: off
def cmp_to_key(mycmp):
    """Convert a cmp= function into a key= function"""
    class K(object):
        __slots__ = ['obj']
        def __init__(self, obj):
            self.obj = obj
        def __lt__(self, other):
            return mycmp(self.obj, other.obj) < 0
        def __gt__(self, other):
            return mycmp(self.obj, other.obj) > 0
        def __eq__(self, other):
            return mycmp(self.obj, other.obj) == 0
        def __le__(self, other):
            return mycmp(self.obj, other.obj) <= 0
        def __ge__(self, other):
            return mycmp(self.obj, other.obj) >= 0
        __hash__ = None
    return K
# fmt: on


def compare_values(x: Any, y: Any) -> int:
    return 1 if x > y else -1 if x < y else 0


class SwapCountingList(list):
    "Every swap is two item assignments"

    def __init__(self, iterable: Iterable = ()) -> None:
        super().__init__(iterable)
        self.writes = 0

    def __setitem__(self, index, value) -> None:
        self.writes += 1
        super().__setitem__(index, value)

    @property
    def swaps(self) -> int:
        return self.writes // 2


def count_operations(algorithm: SortingAlgorithm, values: Iterable[Any]) -> OperationCount:
    """Run ``algorithm`` on a copy of ``values`` and count what it does.

    Repeated queries of the same pair in a row (e.g. ``a < b`` followed by
    ``a > b``) count as a single comparison.
    """

    def cmp(x: IdxVal, y: IdxVal) -> int:
        if x.idx == y.idx:
            return 0
        if x.idx > y.idx:
            return -cmp(y, x)
        nonlocal comparisons, last_cmp
        if (cur_cmp := (x.idx, y.idx)) != last_cmp:
            last_cmp = cur_cmp
            comparisons += 1
        return compare_values(x.val, y.val)

    key: Callable[[IdxVal], Any] = cmp_to_key(cmp)
    values = list(values)
    comparisons = 0
    last_cmp: Optional[tuple[int, int]] = None
    arr = SwapCountingList(key(IdxVal(i, x)) for i, x in enumerate(values))
    algorithm.func(arr)
    if not algorithm.validator([x.obj.val for x in arr]):
        raise InvalidSortingAlgorithmError(algorithm.name, values)
    return OperationCount(comparisons, arr.swaps)
