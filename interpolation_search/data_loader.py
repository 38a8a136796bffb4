import numbers

import numpy as np


def _resolve_rng(rng: np.random.Generator | None) -> np.random.Generator:
    # Seeded from OS entropy when the caller does not supply a generator
    return rng if rng is not None else np.random.default_rng()


def generate_sorted_array(size: int, rng: np.random.Generator | None = None) -> list[int]:
    """
    Generates `size` random integers drawn uniformly from [1, size * 10], sorted ascending.
    Returns:
        A list of plain Python ints of length `size`.
    """
    if isinstance(size, bool) or not isinstance(size, numbers.Integral):
        raise TypeError(f"size must be an integer, got {type(size).__name__}")
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    if size == 0:
        return []

    rng = _resolve_rng(rng)
    # integers() excludes the upper bound
    values = rng.integers(1, size * 10 + 1, size=size)
    return np.sort(values).tolist()


def pick_target(data: list[int], rng: np.random.Generator | None = None) -> int:
    """Picks a value that is present in data, uniformly by position."""
    if len(data) == 0:
        raise ValueError("cannot pick a target from an empty sequence")
    rng = _resolve_rng(rng)
    return data[int(rng.integers(len(data)))]
