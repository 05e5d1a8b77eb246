"""Categorical entropy.

Shannon entropy (bits) of each categorical column's full value distribution,
plus the share of occurrences falling outside the column's top-10 list.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from scipy import stats

from tableshape.analysis.scanning import cell, stringify
from tableshape.analysis.statistics.categorical import compute_frequencies
from tableshape.analysis.statistics.models import CategoricalStats, ColumnStats, EntropyStats


def compute_entropy(values: Sequence[str], categorical_stats: CategoricalStats) -> EntropyStats:
    """Compute entropy and tail share for one categorical column.

    Args:
        values: Stringified present values of the column
        categorical_stats: The column's stats; its top10 defines the head

    Returns:
        EntropyStats
    """
    frequencies = compute_frequencies(values)
    total = len(values)

    entropy = float(stats.entropy(list(frequencies.values()), base=2))

    head = {vc.value for vc in categorical_stats.top10}
    tail_count = sum(count for value, count in frequencies.items() if value not in head)

    return EntropyStats(entropy=entropy, tail_share_outside_top10=tail_count / total)


def compute_categorical_entropy(
    records: Sequence[Mapping[str, Any]],
    column_stats: Mapping[str, ColumnStats],
) -> dict[str, EntropyStats]:
    """Compute entropy for every categorical column.

    Re-reads values from the records so the full distribution is used
    rather than the truncated top-k list.
    """
    entropies: dict[str, EntropyStats] = {}
    for column, col_stats in column_stats.items():
        if col_stats.categorical_stats is None:
            continue
        values = [
            stringify(value) for record in records if (value := cell(record, column)) is not None
        ]
        entropies[column] = compute_entropy(values, col_stats.categorical_stats)
    return entropies
