from collections.abc import Callable, Generator, Iterable, MutableSequence, Sequence
from itertools import pairwise, permutations
from math import factorial
from random import Random
from typing import Any, NamedTuple

_default_rng = Random()


def _sampler(N: int, rng: Random = _default_rng) -> Generator[list[int], None, None]:
    arr = list(range(N))
    while True:
        rng.shuffle(arr)
        yield arr[:]


def is_sorted(arr: Iterable[Any]) -> bool:
    return all(x <= y for x, y in pairwise(arr))


class SortingAlgorithm(NamedTuple):
    name: str
    func: Callable[[MutableSequence], None]
    max_N: int
    generator: Callable[[int], Iterable[Sequence[int]]] = lambda n: permutations(range(n))
    input_total: Callable[[int], int] = factorial
    sampler: Callable[[int, Random], Generator[Sequence[int], None, None]] = _sampler
    validator: Callable[[Sequence[Any]], bool] = is_sorted
