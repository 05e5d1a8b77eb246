"""Pure numeric-categorical association algorithm (eta-squared).

Eta-squared is the share of a numeric variable's variance explained by a
grouping variable: SS_between / SS_total.
No records, no models - just math.
"""

from collections.abc import Sequence

import numpy as np


def compute_eta_squared(values: Sequence[float], groups: Sequence[str]) -> float | None:
    """Compute eta-squared of numeric values grouped by category.

    Args:
        values: Numeric observations
        groups: Category label for each observation

    Returns:
        eta^2 in [0, 1], or None with fewer than 2 observations, fewer than
        2 groups, or no variance
    """
    if len(values) < 2:
        return None

    labels, inverse = np.unique(np.asarray(groups, dtype=object), return_inverse=True)
    if len(labels) < 2:
        return None

    arr = np.asarray(values, dtype=float)
    grand_mean = arr.mean()

    ss_total = float(((arr - grand_mean) ** 2).sum())
    if ss_total == 0:
        return None

    group_sizes = np.bincount(inverse)
    group_means = np.bincount(inverse, weights=arr) / group_sizes
    ss_between = float((group_sizes * (group_means - grand_mean) ** 2).sum())

    return ss_between / ss_total
