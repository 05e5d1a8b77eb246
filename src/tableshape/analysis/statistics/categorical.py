"""Categorical column statistics.

Frequencies are accumulated in first-encounter order, so values with equal
counts keep that order in the top-k list.
"""

from collections import Counter
from collections.abc import Sequence

from tableshape.analysis.statistics.models import CategoricalStats, ValueCount


def compute_frequencies(values: Sequence[str]) -> Counter[str]:
    """Count stringified values, preserving first-encounter order."""
    return Counter(values)


def herfindahl_index(frequencies: Counter[str], total: int) -> float:
    """Herfindahl-Hirschman index over percentage shares.

    A single-valued column scores 10,000; many equally frequent values
    approach 0.
    """
    return sum((100 * count / total) ** 2 for count in frequencies.values())


def compute_categorical_stats(values: Sequence[str], top_k: int = 10) -> CategoricalStats | None:
    """Compute frequency statistics for a categorical column.

    Args:
        values: Present values, already stringified
        top_k: Number of most frequent values to keep

    Returns:
        CategoricalStats, or None when there are no values
    """
    if len(values) == 0:
        return None

    frequencies = compute_frequencies(values)
    top_values = [
        ValueCount(value=value, count=count) for value, count in frequencies.most_common(top_k)
    ]

    return CategoricalStats(
        unique=len(frequencies),
        top10=top_values,
        hhi=herfindahl_index(frequencies, len(values)),
    )
