import argparse
from collections.abc import Sequence

import numpy as np

from interpolation_search.searches import interpolation_search
from interpolation_search.benchmark import (
    DEFAULT_INPUT_SIZES,
    EXAMPLE_ARRAY,
    EXAMPLE_TARGET,
    format_example,
    format_results,
    run_benchmark,
)


def positive_int(value: str) -> int:
    """Argparse type for input sizes and run counts: an integer of at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def run_example():
    """Searches the fixed example array and prints where the target was found."""
    index = interpolation_search(EXAMPLE_ARRAY, EXAMPLE_TARGET)
    print("\n\nExample test:\n")
    print(format_example(EXAMPLE_ARRAY, EXAMPLE_TARGET, index))
    print()


def run_performance_analysis(input_sizes: Sequence[int], num_runs: int, seed: int | None):
    """
    Generates a random sorted array for each input size, times one interpolation
    search per array and prints the results table.
    """
    rng = np.random.default_rng(seed)

    print("Performance Analysis:")
    if num_runs > 1:
        print(f"Averaged over {num_runs} random queries per input size.")
    results = run_benchmark(input_sizes, num_runs=num_runs, rng=rng)
    print(format_results(results))


def main(argv=None):
    """
    Parses the command line, runs the example search and then the performance analysis.
    """
    parser = argparse.ArgumentParser(description="Demonstrate interpolation search and time it on random sorted arrays.")
    parser.add_argument("--sizes", type=positive_int, nargs="+", default=DEFAULT_INPUT_SIZES,
                        help="Input sizes to benchmark (default: %(default)s).")
    parser.add_argument("--runs", type=positive_int, default=1,
                        help="Number of random queries to average over for each input size.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the random generator. Unseeded runs draw fresh entropy.")
    args = parser.parse_args(argv)

    run_example()
    run_performance_analysis(args.sizes, args.runs, args.seed)


if __name__ == "__main__":
    main()
