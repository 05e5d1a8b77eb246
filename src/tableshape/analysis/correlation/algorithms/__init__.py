"""Pure association algorithms.

These functions operate on numpy arrays and plain sequences and return floats,
or None when the statistic is undefined.
No records, no Pydantic models - just math.
"""

from tableshape.analysis.correlation.algorithms.categorical import (
    build_contingency_table,
    compute_cramers_v,
)
from tableshape.analysis.correlation.algorithms.mixed import compute_eta_squared
from tableshape.analysis.correlation.algorithms.numeric import compute_pearson

__all__ = [
    # Numeric
    "compute_pearson",
    # Categorical
    "build_contingency_table",
    "compute_cramers_v",
    # Mixed
    "compute_eta_squared",
]
