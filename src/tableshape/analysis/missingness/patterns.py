"""Missingness pattern analysis.

Reports the missing fraction of every column and the column pairs most often
missing together in the same row.
"""

from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np

from tableshape.analysis.missingness.models import CoMissingPair, MissingnessPatterns
from tableshape.analysis.scanning import is_missing
from tableshape.core.logging import get_logger, record_capped_component

logger = get_logger(__name__)


def build_missing_mask(
    records: Sequence[Mapping[str, Any]],
    columns: Sequence[str],
) -> np.ndarray:
    """Boolean matrix (rows x columns), True where the cell is missing."""
    mask = np.zeros((len(records), len(columns)), dtype=bool)
    for i, record in enumerate(records):
        for j, column in enumerate(columns):
            mask[i, j] = is_missing(record.get(column))
    return mask


def top_co_missing_pairs(
    mask: np.ndarray,
    columns: Sequence[str],
    top_n: int = 10,
) -> list[CoMissingPair]:
    """Rank column pairs by how many rows miss both.

    Args:
        mask: Missing mask from build_missing_mask
        columns: Column names matching the mask's columns
        top_n: Number of pairs to keep

    Returns:
        Pairs with a positive count, most frequent first; ties keep
        column order
    """
    # co_missing[i, j] = rows where columns i and j are both missing
    as_int = mask.astype(np.int64)
    co_missing = as_int.T @ as_int

    pairs: list[CoMissingPair] = []
    for i in range(len(columns)):
        for j in range(i + 1, len(columns)):
            count = int(co_missing[i, j])
            if count > 0:
                pairs.append(CoMissingPair(pair=(columns[i], columns[j]), count=count))

    pairs.sort(key=lambda p: p.count, reverse=True)
    return pairs[:top_n]


def analyze_missingness(
    records: Sequence[Mapping[str, Any]],
    columns: Sequence[str],
    max_columns: int = 50,
    top_n: int = 10,
) -> MissingnessPatterns:
    """Analyze missing values across columns.

    Args:
        records: Input records
        columns: Column names in output order
        max_columns: Above this many columns the co-missing pair list is empty
        top_n: Number of co-missing pairs to report

    Returns:
        MissingnessPatterns
    """
    row_count = len(records)
    mask = build_missing_mask(records, columns)
    missing_counts = mask.sum(axis=0)

    per_column_rates = {
        column: int(missing_counts[j]) / row_count for j, column in enumerate(columns)
    }

    if len(columns) > max_columns:
        logger.info(
            "component_capped",
            component="co_missing_pairs",
            columns=len(columns),
            limit=max_columns,
        )
        record_capped_component("co_missing_pairs")
        return MissingnessPatterns(per_column_rates=per_column_rates)

    return MissingnessPatterns(
        per_column_rates=per_column_rates,
        top_co_missing_pairs=top_co_missing_pairs(mask, columns, top_n=top_n),
    )
