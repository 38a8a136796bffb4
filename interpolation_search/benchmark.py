from collections.abc import Sequence

import numpy as np
from tabulate import tabulate

from interpolation_search.data_loader import generate_sorted_array, pick_target
from interpolation_search.searches import search_interpolation
from interpolation_search.utils import ns_to_us, time_call

# Configuration
DEFAULT_INPUT_SIZES = (10, 100, 1000, 10000, 100000)
EXAMPLE_ARRAY = [10, 20, 30, 40, 50]
EXAMPLE_TARGET = 40

HEADERS = ["Input Size", "Target", "Found At", "Probes", "Microseconds", "Nanoseconds"]


def benchmark_size(size: int, num_runs: int = 1, rng: np.random.Generator | None = None) -> dict:
    """
    Times interpolation search on `num_runs` freshly generated arrays of the given size,
    each searched once for a target known to be present.

    With a single run the row carries that run's target and found index.
    With several runs it carries the mean time and mean probe count instead,
    and `target`/`index` are None.
    """
    times, probes_per_run = [], []
    target = index = None

    for _ in range(num_runs):
        data = generate_sorted_array(size, rng)
        target = pick_target(data, rng)

        (index, probes), elapsed_ns = time_call(search_interpolation, data, target)
        times.append(elapsed_ns)
        probes_per_run.append(probes)

    if num_runs > 1:
        target = index = None
        nanoseconds = int(round(np.mean(times)))
        probes = float(np.mean(probes_per_run))
    else:
        nanoseconds = times[0]
        probes = probes_per_run[0]

    return {
        'size': size,
        'target': target,
        'index': index,
        'probes': probes,
        'microseconds': ns_to_us(nanoseconds),
        'nanoseconds': nanoseconds,
    }


def run_benchmark(input_sizes: Sequence[int] = DEFAULT_INPUT_SIZES, num_runs: int = 1,
                  rng: np.random.Generator | None = None) -> list[dict]:
    """
    Runs the benchmark for every input size, in order.
    Returns one result row per size.
    """
    if num_runs < 1:
        raise ValueError(f"num_runs must be at least 1, got {num_runs}")
    for size in input_sizes:
        if size < 1:
            raise ValueError(f"input sizes must be positive, got {size}")

    return [benchmark_size(size, num_runs, rng) for size in input_sizes]


def format_results(results: list[dict]) -> str:
    """
    Renders benchmark rows as a grid table.
    Missing targets and indices (averaged rows) are shown as '-'.
    """
    table_data = []
    for row in results:
        table_data.append([row['size'], row['target'], row['index'], row['probes'],
                           row['microseconds'], row['nanoseconds']])
    # Only the averaged probe counts are floats
    return tabulate(table_data, headers=HEADERS, tablefmt="grid", missingval="-", floatfmt=".2f")


def format_example(data: list[int], target: int, index: int) -> str:
    """Describes a single search: the array, the target and where it was found."""
    return (f"Array = {data}\n"
            f"Target = {target}\n"
            f"Element found at index: {index}")
