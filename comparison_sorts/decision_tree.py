from collections.abc import Callable, Sequence
from random import Random
from time import thread_time
from typing import Any, NamedTuple, Optional

from .Config import *
from .DecisionTreeNode import DecisionTreeNode
from .operation_count import IdxVal, InvalidSortingAlgorithmError, cmp_to_key, compare_values
from .sorting_algorithms.SortingAlgorithm import SortingAlgorithm

Node = DecisionTreeNode[tuple[int, ...]]


class NonDeterministicError(Exception):
    def __init__(self, msg: str) -> None:
        super().__init__("Non-deterministic sorting algorithm: " + msg)


class Step(NamedTuple):
    "Arrangement of original indices when a comparison is made, `cmp_xy` is None once sorted"
    idx_array: tuple[int, ...]
    cmp_xy: Optional[tuple[int, int]]
    is_less: bool = False


def trace_run(algorithm: SortingAlgorithm, val_array: Sequence[Any]) -> list[Step]:
    steps: list[Step] = []

    def snapshot() -> tuple[int, ...]:
        return tuple(key.obj.idx for key in keys)

    def cmp(x: IdxVal, y: IdxVal) -> int:
        if x.idx == y.idx:
            return 0
        if x.idx > y.idx:
            return -cmp(y, x)
        cmp_xy, is_less = (x.idx, y.idx), x.val < y.val
        # the same question asked twice in a row is one decision
        if not steps or steps[-1][1:] != (cmp_xy, is_less):
            steps.append(Step(snapshot(), cmp_xy, is_less))
        return compare_values(x.val, y.val)

    key = cmp_to_key(cmp)
    keys = [key(IdxVal(i, x)) for i, x in enumerate(val_array)]
    algorithm.func(keys)
    if not algorithm.validator([x.obj.val for x in keys]):
        raise InvalidSortingAlgorithmError(algorithm.name, val_array)
    steps.append(Step(snapshot(), None))
    return steps


def _merge_path(nodes: list[Node], steps: list[Step], val_array: tuple) -> bool:
    "Walk `steps` down from the root, growing the tree as needed. True if the run ended on a new leaf."
    node = nodes[0]
    is_new_node = node.idx_array is None
    for step in steps:
        if node.idx_array is None:
            node.idx_array = step.idx_array
        elif node.idx_array != step.idx_array:
            raise NonDeterministicError("the new index array is not the same as the previous one at this node")
        if len(node.val_arrays) < ACTUALS_MAX_LENGTH:
            node.val_arrays.append(val_array)

        if step.cmp_xy is None:
            if not node.is_leaf:
                raise NonDeterministicError("should have stopped at a leaf node")
            return is_new_node

        if node.cmp_xy is None:
            if not is_new_node:
                raise NonDeterministicError("should have continued past a leaf node")
            node.cmp_xy = step.cmp_xy
        elif node.cmp_xy != step.cmp_xy:
            raise NonDeterministicError(f"the new comparison({step.cmp_xy}) is not the same as the previous one({node.cmp_xy}) at this node")

        child = node.left if step.is_less else node.right
        is_new_node = child is None
        if is_new_node:
            child = DecisionTreeNode(node, step.is_less)
            if step.is_less:
                node.left = child
            else:
                node.right = child
            nodes.append(child)
        node = child
    raise NonDeterministicError("the run did not end with a sorted arrangement")


def decision_tree(algorithm: SortingAlgorithm, N: int, callback: Optional[Callable[[int, int], None]] = None) -> tuple[list[Node], list[int], int]:
    """Merge the comparisons made on every input of size ``N`` into one binary tree.

    Internal nodes hold the pair of original indices compared there, the left
    child follows ``x < y`` and the right child ``x > y``. Above
    ``algorithm.max_N`` the inputs are sampled for ``MAX_SAMPLE_TIME_MS`` of
    thread time instead of enumerated.

    Returns the nodes in breadth-first order, the number of comparisons made
    for each input and the number of leaves.
    """
    do_sample = N > algorithm.max_N
    if do_sample:
        inputs = algorithm.sampler(N, Random(SAMPLE_SEED))
        total = MAX_SAMPLE_TIME_MS
    else:
        inputs = algorithm.generator(N)
        total = algorithm.input_total(N)

    def report(i: int) -> None:
        if callback is not None:
            callback(min(i, total), total)

    nodes: list[Node] = [DecisionTreeNode()]
    operation_cnts: list[int] = []
    leaf_cnt = 0
    start_time = thread_time()
    report(0)
    for I, val_array in enumerate(inputs, 1):
        val_array = tuple(val_array)
        steps = trace_run(algorithm, val_array)
        operation_cnts.append(len(steps) - 1)
        if _merge_path(nodes, steps, val_array):
            leaf_cnt += 1
        if not do_sample:
            report(I)
            continue
        elapsed_ms = int((thread_time() - start_time) * 1000)
        report(elapsed_ms)
        if elapsed_ms >= MAX_SAMPLE_TIME_MS:
            break

    nodes.sort(key=lambda x: x.id)
    for i, node in enumerate(nodes):
        node.id = i
    return nodes, operation_cnts, leaf_cnt


if __name__ == "__main__":
    from .sorting_algorithms.sorting_algorithms import sorting_algorithms

    N = 3
    for algorithm in sorting_algorithms:
        nodes, operation_cnts, leaf_cnt = decision_tree(algorithm, N)
        print(f"`{algorithm.name}` with {N} elements: {len(nodes)} nodes, {leaf_cnt} leaves, at most {max(operation_cnts)} comparisons")
