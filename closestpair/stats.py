"""Summary statistics for timing samples."""

from __future__ import annotations

import statistics
from typing import Sequence


def _check_size(n: int) -> None:
    if n < 4:
        raise ValueError("quartiles needs at least 4 data points.")


def quartiles(data: Sequence[float]) -> tuple[float, float, float, float, float]:
    """Minimum, lower quartile, median, upper quartile and maximum, by sorting."""
    values = sorted(data)
    n = len(values)
    _check_size(n)

    if n % 2 == 1:
        median = values[n // 2]
    else:
        p = n // 2
        median = (values[p - 1] + values[p]) / 2.0

    if n % 4 >= 2:
        lower = values[n // 4]
        upper = values[(3 * n) // 4]
    else:
        p = n // 4
        lower = 0.25 * values[p - 1] + 0.75 * values[p]
        p = (3 * n) // 4
        upper = 0.75 * values[p - 1] + 0.25 * values[p]

    return values[0], lower, median, upper, values[-1]


def _select(data: Sequence[float], k: int) -> float:
    """The value that would sit at index ``k`` if ``data`` were sorted."""
    values = list(data)
    while True:
        pivot = values[len(values) // 2]
        lows = [v for v in values if v < pivot]
        if k < len(lows):
            values = lows
            continue
        equal = sum(1 for v in values if v == pivot)
        if k < len(lows) + equal:
            return pivot
        k -= len(lows) + equal
        values = [v for v in values if v > pivot]


def quartiles_nth(data: Sequence[float]) -> tuple[float, float, float, float, float]:
    """The same five statistics as :func:`quartiles`, found by selection instead of sorting."""
    n = len(data)
    _check_size(n)

    q0 = _select(data, 0)
    q4 = _select(data, n - 1)

    half = n // 2
    if n % 2 == 1:
        median = _select(data, half)
    else:
        median = (_select(data, half - 1) + _select(data, half)) / 2.0

    i1 = n // 4
    i3 = (3 * n) // 4
    if n % 4 in (2, 3):
        lower = _select(data, i1)
        upper = _select(data, i3)
    else:
        lower = 0.25 * _select(data, i1 - 1) + 0.75 * _select(data, i1)
        upper = 0.75 * _select(data, i3 - 1) + 0.25 * _select(data, i3)

    return q0, lower, median, upper, q4


def mean_and_stdev(values: Sequence[float]) -> tuple[float, float]:
    """Mean and sample standard deviation (divided by n - 1)."""
    if len(values) < 2:
        raise ValueError("at least 2 values are needed for a standard deviation")
    mean = statistics.fmean(values)
    return mean, statistics.stdev(values, mean)