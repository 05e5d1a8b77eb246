"""Outlier detection for numeric columns.

Two counts per column, both computed from the column's NumericStats:
- Tukey fences: values outside [Q1 - k * IQR, Q3 + k * IQR] (k = 1.5)
- Z-score: values with |x - mean| / stddev above a threshold (3.0)

A constant column (stddev 0) never has z-score outliers.
"""

from collections.abc import Mapping, Sequence
from numbers import Real

import numpy as np

from tableshape.analysis.scanning import ColumnScan
from tableshape.analysis.statistics.models import ColumnStats, NumericStats, OutlierCounts
from tableshape.core.logging import get_logger

logger = get_logger(__name__)


def count_outliers(
    values: Sequence[Real],
    numeric_stats: NumericStats,
    tukey_multiplier: float = 1.5,
    zscore_threshold: float = 3.0,
) -> OutlierCounts:
    """Count Tukey and z-score outliers in one column.

    Args:
        values: Present numeric values of the column
        numeric_stats: Statistics already computed for the same values
        tukey_multiplier: IQR multiplier for the fences
        zscore_threshold: Absolute z-score above which a value is an outlier

    Returns:
        OutlierCounts
    """
    arr = np.asarray(values, dtype=float)
    q1, _, q3 = numeric_stats.quartiles
    iqr = numeric_stats.iqr
    lower_fence = q1 - tukey_multiplier * iqr
    upper_fence = q3 + tukey_multiplier * iqr

    tukey_count = int(np.count_nonzero((arr < lower_fence) | (arr > upper_fence)))

    zscore_count = 0
    if numeric_stats.stddev > 0:
        z_scores = np.abs(arr - numeric_stats.mean) / numeric_stats.stddev
        zscore_count = int(np.count_nonzero(z_scores > zscore_threshold))

    return OutlierCounts(tukey_count=tukey_count, zscore_count=zscore_count)


def detect_outliers(
    column_stats: Mapping[str, ColumnStats],
    scans: Mapping[str, ColumnScan],
    tukey_multiplier: float = 1.5,
    zscore_threshold: float = 3.0,
) -> dict[str, OutlierCounts]:
    """Count outliers for every numeric column.

    Args:
        column_stats: Per-column statistics from the scanner
        scans: Per-column scans holding the present values
        tukey_multiplier: IQR multiplier for the fences
        zscore_threshold: Absolute z-score threshold

    Returns:
        OutlierCounts keyed by column, numeric columns only
    """
    outliers: dict[str, OutlierCounts] = {}
    for column, stats in column_stats.items():
        if stats.numeric_stats is None:
            continue
        outliers[column] = count_outliers(
            scans[column].values,
            stats.numeric_stats,
            tukey_multiplier=tukey_multiplier,
            zscore_threshold=zscore_threshold,
        )

    logger.debug(
        "outliers_detected",
        columns=len(outliers),
        tukey_total=sum(o.tukey_count for o in outliers.values()),
        zscore_total=sum(o.zscore_count for o in outliers.values()),
    )
    return outliers
