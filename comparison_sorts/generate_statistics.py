from decimal import Decimal
from itertools import product
from math import log2, nan
from multiprocessing import Pool
from pathlib import Path
from random import Random
from time import thread_time
from typing import NamedTuple, Optional

import numpy as np
import pandas as pd
import plotly.express as px
from tqdm import tqdm

from .Config import *
from .operation_count import count_operations
from .sorting_algorithms.sorting_algorithms import sorting_algorithms
from .sorting_algorithms.SortingAlgorithm import SortingAlgorithm

COLUMNS = ["name", "N", "input", "lower bound", "best", "worst", "avg", "avg swaps", "ratio"]


class OperationStats(NamedTuple):
    best: int
    worst: int
    avg: float
    avg_swaps: float


def to_displayable_int(x: int) -> str:
    return str(x) if x < 1e9 else f"{Decimal(x):.2e}"


def get_operation_stats(algorithm: SortingAlgorithm, N: int) -> OperationStats:
    do_sample = N > algorithm.max_N
    comparisons: list[int] = []
    swaps: list[int] = []
    start_time = thread_time()
    inputs = algorithm.sampler(N, Random(SAMPLE_SEED)) if do_sample else algorithm.generator(N)
    for val_array in inputs:
        cnt = count_operations(algorithm, val_array)
        comparisons.append(cnt.comparisons)
        swaps.append(cnt.swaps)
        if do_sample and int((thread_time() - start_time) * 1000) > MAX_SAMPLE_TIME_MS:
            break
    cmp_cnts = np.asarray(comparisons)
    return OperationStats(int(cmp_cnts.min()), int(cmp_cnts.max()), float(cmp_cnts.mean()), float(np.mean(swaps)))


def _work(args: tuple[int, int]) -> str:
    algorithm_idx, N = args
    algorithm = sorting_algorithms[algorithm_idx]
    stats = get_operation_stats(algorithm, N)
    input_total = algorithm.input_total(N)
    lower_bound = log2(input_total)
    ratio = nan if lower_bound == 0 else stats.avg / lower_bound
    return ",".join(map(str, (algorithm.name, N, to_displayable_int(input_total), lower_bound, stats.best, stats.worst, stats.avg, stats.avg_swaps, ratio)))


def generate_statistics(Ns: Optional[list[int]] = None, result_path: Path = RESULT_DIR, processes: Optional[int] = None) -> None:
    if Ns is None:
        Ns = STATISTICS_NS
    tasks = list(product(range(len(sorting_algorithms)), Ns))
    result_path.parent.mkdir(parents=True, exist_ok=True)
    print(f"init: {len(tasks)} tasks for {len(sorting_algorithms)} sorting algorithms")
    with Pool(processes) as pool, open(result_path, "w") as f:
        f.write(",".join(COLUMNS) + "\n")
        for result in tqdm(pool.imap_unordered(_work, tasks), total=len(tasks)):
            f.write(result + "\n")
            f.flush()
    print(f"fin:  statistics written to {result_path}")


def sort_result(result_path: Path = RESULT_DIR) -> pd.DataFrame:
    df = pd.read_csv(result_path)
    df = df.sort_values(["name", "N"])
    df.to_csv(result_path, index=False)
    for name, group in df.groupby("name"):
        group.drop(columns=["name"]).to_csv(result_path.parent / f"{name}.csv", index=False)
    return df


def plot_statistics(result_path: Path = RESULT_DIR, plot_path: Path = PLOT_PATH) -> None:
    df = pd.read_csv(result_path).sort_values(["name", "N"])
    fig = px.line(
        df,
        x="N",
        y="avg",
        color="name",
        markers=True,
        log_x=True,
        log_y=True,
        hover_data=["best", "worst", "avg swaps", "ratio"],
        labels={"avg": "average comparisons"},
        title="Average comparisons per input size",
    )
    plot_path.parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(plot_path)


if __name__ == "__main__":
    generate_statistics()
    sort_result()
    plot_statistics()
