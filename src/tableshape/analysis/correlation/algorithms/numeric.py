"""Pure numeric correlation algorithm.

Computes Pearson correlation on paired numpy arrays.
No records, no models - just math.
"""

import numpy as np
from scipy import stats


def compute_pearson(x: np.ndarray, y: np.ndarray) -> float | None:
    """Compute Pearson correlation between two paired arrays.

    Args:
        x: Values of the first column
        y: Values of the second column, paired by position with x

    Returns:
        r in [-1, 1], or None if fewer than 2 pairs or either side is constant
    """
    if len(x) < 2:
        return None

    # Zero variance makes r undefined
    if np.ptp(x) == 0 or np.ptp(y) == 0:
        return None

    result = stats.pearsonr(x, y)
    return float(np.asarray(result.statistic).item())
