import time
from typing import Callable

# --- Timing Helpers ---

def time_call(func: Callable, *args) -> tuple[object, int]:
    """
    Calls func(*args) once and measures it with the nanosecond performance counter.
    Returns the call's result and the elapsed time in nanoseconds.
    """
    start = time.perf_counter_ns()
    result = func(*args)
    end = time.perf_counter_ns()
    return result, end - start


def ns_to_us(nanoseconds: float) -> int:
    """Whole microseconds in a nanosecond duration, truncated."""
    return int(nanoseconds // 1000)
