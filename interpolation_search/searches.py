from collections.abc import Sequence

NOT_FOUND = -1


def search_interpolation(data: Sequence[int], query: int) -> tuple[int, int]:
    """
    Interpolation search over a sorted (non-decreasing) sequence.
    Estimates the position of the query from the values at the current bounds
    instead of always probing the midpoint.
    Returns the index of the element (or -1 if not found) and the number of probes.

    The input must be sorted. This is not checked; unsorted input gives unspecified results.
    With duplicates, the returned index is whichever matching position the probes land on.
    """
    low, high = 0, len(data) - 1
    probes = 0
    while low <= high and data[low] <= query <= data[high]:
        probes += 1
        # Python ints, so numpy inputs cannot wrap around in the estimate below
        low_value, high_value = int(data[low]), int(data[high])
        if high_value == low_value:
            # Every remaining candidate is equal; the estimate would divide by zero
            if low_value == query:
                return low, probes
            return NOT_FOUND, probes

        # Exact integer arithmetic, the numerator never exceeds the denominator here
        pos = low + (high - low) * (int(query) - low_value) // (high_value - low_value)
        pos = max(low, min(pos, high))

        if data[pos] == query:
            return pos, probes
        elif data[pos] < query:
            low = pos + 1
        else:
            high = pos - 1
    return NOT_FOUND, probes


def interpolation_search(data: Sequence[int], query: int) -> int:
    """Returns the index of query in the sorted data, or -1 if it is absent."""
    index, _ = search_interpolation(data, query)
    return index
