"""Type and presence scanning.

Classifies every cell as missing or as a number, string, boolean or object
value, and collects per-column presence counts and kind sets.
"""

from tableshape.analysis.scanning.scanner import (
    ColumnScan,
    collect_columns,
    scan_column,
    scan_columns,
)
from tableshape.analysis.scanning.values import (
    canonical_serialization,
    cell,
    identity_key,
    is_missing,
    stringify,
    value_kind,
)

__all__ = [
    # Scanning
    "ColumnScan",
    "collect_columns",
    "scan_column",
    "scan_columns",
    # Value helpers
    "canonical_serialization",
    "cell",
    "identity_key",
    "is_missing",
    "stringify",
    "value_kind",
]
