"""Column statistics assembly.

Turns a ColumnScan into ColumnStats. Statistics are only computed for
single-kind columns: number-only columns get NumericStats, string-only or
boolean-only columns get CategoricalStats. Mixed or object-valued columns
keep their counts and kinds and nothing else; values are never coerced
across kinds.
"""

from tableshape.analysis.scanning import ColumnScan, stringify
from tableshape.analysis.statistics.categorical import compute_categorical_stats
from tableshape.analysis.statistics.models import ColumnStats
from tableshape.analysis.statistics.numeric import compute_numeric_stats
from tableshape.core.models.base import ValueKind

_CATEGORICAL_KINDS = frozenset({ValueKind.STRING, ValueKind.BOOLEAN})


def build_column_stats(scan: ColumnScan, top_k: int = 10) -> ColumnStats:
    """Build the statistics for one scanned column.

    Args:
        scan: Result of scanning the column
        top_k: Number of most frequent values kept for categorical columns

    Returns:
        ColumnStats
    """
    stats = ColumnStats(present=scan.present, missing=scan.missing, types=list(scan.kinds))

    kind = scan.single_kind
    if kind is ValueKind.NUMBER:
        stats.numeric_stats = compute_numeric_stats(scan.values)
    elif kind in _CATEGORICAL_KINDS:
        stats.categorical_stats = compute_categorical_stats(
            [stringify(value) for value in scan.values], top_k=top_k
        )

    return stats
