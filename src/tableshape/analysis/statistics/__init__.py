"""Statistical profiling module.

Computes column-level statistics from scanned columns:
- Presence counts and value kinds
- Numeric stats (min, max, mean, median, quartiles, stddev, p10/p90)
- Categorical stats (unique count, top values, HHI concentration)
- Outlier counts (Tukey fences, z-score)
- Categorical entropy (Shannon entropy, tail share outside the top values)
"""

from tableshape.analysis.statistics.categorical import compute_categorical_stats
from tableshape.analysis.statistics.column import build_column_stats
from tableshape.analysis.statistics.entropy import compute_categorical_entropy, compute_entropy
from tableshape.analysis.statistics.models import (
    CategoricalStats,
    ColumnStats,
    EntropyStats,
    NumericStats,
    OutlierCounts,
    ValueCount,
)
from tableshape.analysis.statistics.numeric import compute_numeric_stats, percentile
from tableshape.analysis.statistics.outliers import count_outliers, detect_outliers

__all__ = [
    # Main entry point
    "build_column_stats",
    # Engines
    "compute_categorical_entropy",
    "compute_categorical_stats",
    "compute_entropy",
    "compute_numeric_stats",
    "count_outliers",
    "detect_outliers",
    "percentile",
    # Pydantic Models
    "CategoricalStats",
    "ColumnStats",
    "EntropyStats",
    "NumericStats",
    "OutlierCounts",
    "ValueCount",
]
