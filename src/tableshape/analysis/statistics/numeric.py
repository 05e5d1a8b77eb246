"""Numeric column statistics.

Computes min/max, mean, sample standard deviation, quartiles and the 10th/90th
percentiles. Percentiles interpolate linearly between order statistics at
rank p/100 * (n - 1), so the median of an even-sized column is the midpoint
of the two central values.
"""

from collections.abc import Sequence
from numbers import Real

import numpy as np

from tableshape.analysis.statistics.models import NumericStats

_PERCENTILES = (10, 25, 50, 75, 90)


def percentile(sorted_values: np.ndarray, p: float) -> float:
    """Linearly interpolated percentile of an ascending array.

    Args:
        sorted_values: Values sorted ascending (non-empty)
        p: Percentile in [0, 100]

    Returns:
        lower + (upper - lower) * frac at rank p/100 * (n - 1)
    """
    if p <= 0:
        return float(sorted_values[0])
    if p >= 100:
        return float(sorted_values[-1])
    rank = p / 100 * (len(sorted_values) - 1)
    lower = int(np.floor(rank))
    upper = lower + 1
    if upper >= len(sorted_values):
        return float(sorted_values[lower])
    frac = rank - lower
    return float(sorted_values[lower] + (sorted_values[upper] - sorted_values[lower]) * frac)


def compute_numeric_stats(values: Sequence[Real]) -> NumericStats | None:
    """Compute descriptive statistics for a numeric column.

    Args:
        values: Present (finite) numeric values, in record order

    Returns:
        NumericStats, or None when there are no values
    """
    if len(values) == 0:
        return None

    arr = np.asarray(values, dtype=float)
    ordered = np.sort(arr)

    p10, q1, median, q3, p90 = (percentile(ordered, p) for p in _PERCENTILES)
    stddev = float(np.std(arr, ddof=1)) if len(arr) > 1 else 0.0

    return NumericStats(
        min_value=float(ordered[0]),
        max_value=float(ordered[-1]),
        mean=float(np.mean(arr)),
        median=median,
        quartiles=(q1, median, q3),
        stddev=stddev,
        percentiles={"p10": p10, "p90": p90},
    )
