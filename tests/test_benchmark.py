"""Tests for the benchmark harness, table formatting and timing helpers."""

import numpy as np
import pytest

from interpolation_search.benchmark import (
    DEFAULT_INPUT_SIZES,
    EXAMPLE_ARRAY,
    EXAMPLE_TARGET,
    HEADERS,
    benchmark_size,
    format_example,
    format_results,
    run_benchmark,
)
from interpolation_search.data_loader import generate_sorted_array
from interpolation_search.searches import NOT_FOUND
from interpolation_search.utils import ns_to_us, time_call


def test_default_sizes():
    assert DEFAULT_INPUT_SIZES == (10, 100, 1000, 10000, 100000)


def test_one_row_per_size_in_order():
    sizes = [10, 100, 1000]
    results = run_benchmark(sizes, rng=np.random.default_rng(3))
    assert [row['size'] for row in results] == sizes


def test_target_is_found():
    for row in run_benchmark([10, 50, 500], rng=np.random.default_rng(11)):
        assert row['index'] != NOT_FOUND
        assert 0 <= row['index'] < row['size']
        assert 1 <= row['target'] <= row['size'] * 10
        assert row['probes'] >= 1


def test_found_index_points_at_target():
    rng = np.random.default_rng(5)
    row = benchmark_size(200, rng=rng)
    # Regenerate the same array from an identically seeded generator
    replay = np.random.default_rng(5)
    data = generate_sorted_array(200, replay)
    assert data[row['index']] == row['target']


def test_microseconds_match_nanoseconds():
    for row in run_benchmark([10, 1000], rng=np.random.default_rng(2)):
        assert row['nanoseconds'] >= 0
        assert row['microseconds'] == row['nanoseconds'] // 1000


def test_averaged_rows():
    results = run_benchmark([10, 100], num_runs=4, rng=np.random.default_rng(8))
    for row in results:
        assert row['target'] is None
        assert row['index'] is None
        assert isinstance(row['probes'], float)
        assert row['probes'] >= 1.0


@pytest.mark.parametrize("sizes", [[0], [10, -5]])
def test_non_positive_sizes_rejected(sizes):
    with pytest.raises(ValueError):
        run_benchmark(sizes)


def test_num_runs_must_be_positive():
    with pytest.raises(ValueError):
        run_benchmark([10], num_runs=0)


def test_format_results_table():
    rows = [
        {'size': 10, 'target': 42, 'index': 4, 'probes': 2, 'microseconds': 1, 'nanoseconds': 1500},
        {'size': 100, 'target': None, 'index': None, 'probes': 1.5, 'microseconds': 0, 'nanoseconds': 900},
    ]
    table = format_results(rows)
    for header in HEADERS:
        assert header in table
    assert "1500" in table
    assert "1.50" in table
    assert "-" in table.splitlines()[-2]


def test_format_example():
    text = format_example(EXAMPLE_ARRAY, EXAMPLE_TARGET, 3)
    assert text.splitlines() == [
        "Array = [10, 20, 30, 40, 50]",
        "Target = 40",
        "Element found at index: 3",
    ]


def test_time_call_returns_result_and_duration():
    result, elapsed = time_call(sum, [1, 2, 3])
    assert result == 6
    assert isinstance(elapsed, int)
    assert elapsed >= 0


def test_ns_to_us_truncates():
    assert ns_to_us(999) == 0
    assert ns_to_us(1000) == 1
    assert ns_to_us(2999.9) == 2
