"""Pure categorical association algorithm (Cramér's V).

Computes Cramér's V from contingency tables.
No records, no models - just math.
"""

from collections.abc import Sequence

import numpy as np
from scipy import stats


def compute_cramers_v(contingency_table: np.ndarray) -> float | None:
    """Compute Cramér's V from a contingency table.

    Chi-square is taken against expected counts row_total * col_total / n,
    without continuity correction.

    Args:
        contingency_table: 2D array of counts

    Returns:
        V in [0, 1], or None with fewer than 2 observations or a table with a
        single row or column
    """
    n = contingency_table.sum()
    if n < 2:
        return None

    min_dim = min(contingency_table.shape) - 1
    if min_dim <= 0:
        return None

    chi2 = stats.chi2_contingency(contingency_table, correction=False).statistic
    return float(np.sqrt(chi2 / (n * min_dim)))


def build_contingency_table(
    col1_values: Sequence[str],
    col2_values: Sequence[str],
) -> np.ndarray:
    """Build contingency table from two columns of values.

    Args:
        col1_values: Values from first column
        col2_values: Values from second column, paired by position

    Returns:
        2D numpy array contingency table
    """
    # Get unique values
    unique1 = sorted(set(col1_values))
    unique2 = sorted(set(col2_values))

    # Build index maps
    idx1 = {v: i for i, v in enumerate(unique1)}
    idx2 = {v: i for i, v in enumerate(unique2)}

    # Count occurrences
    table = np.zeros((len(unique1), len(unique2)))
    for v1, v2 in zip(col1_values, col2_values, strict=True):
        table[idx1[v1], idx2[v2]] += 1

    return table
