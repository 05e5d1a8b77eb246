"""Core models: ONLY truly shared base types.

Domain models live in their respective packages:
- analysis/statistics/models.py → Column statistics models
- profiling/models.py           → Options and the profile summary

Import domain models directly from their packages:
    from tableshape.analysis.statistics.models import ColumnStats, NumericStats
    from tableshape.profiling.models import ProfileSummary
"""

from tableshape.core.models.base import (
    ColumnType,
    Result,
    ValueKind,
)

__all__ = [
    "ColumnType",
    "Result",
    "ValueKind",
]
