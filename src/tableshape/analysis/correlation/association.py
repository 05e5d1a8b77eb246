"""Pairwise association matrix.

Picks an estimator per column pair from the columns' coarse types:
- numeric / numeric → Pearson correlation
- categorical / categorical → Cramér's V
- numeric / categorical → eta-squared
Pairs involving any other column are skipped.

Each pair re-reads the records so only rows where both cells are present
contribute.
"""

from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np

from tableshape.analysis.correlation.algorithms import (
    build_contingency_table,
    compute_cramers_v,
    compute_eta_squared,
    compute_pearson,
)
from tableshape.analysis.correlation.models import AssociationMatrix
from tableshape.analysis.scanning import cell, stringify
from tableshape.analysis.statistics.models import ColumnStats
from tableshape.core.logging import get_logger, record_capped_component
from tableshape.core.models.base import ColumnType

logger = get_logger(__name__)


def _paired_cells(
    records: Sequence[Mapping[str, Any]], col1: str, col2: str
) -> tuple[list[Any], list[Any]]:
    """Values of two columns from rows where both are present."""
    left: list[Any] = []
    right: list[Any] = []
    for record in records:
        v1 = cell(record, col1)
        v2 = cell(record, col2)
        if v1 is not None and v2 is not None:
            left.append(v1)
            right.append(v2)
    return left, right


def pearson_from_records(
    records: Sequence[Mapping[str, Any]], col1: str, col2: str
) -> float | None:
    """Pearson correlation over rows where both columns hold numbers."""
    x, y = _paired_cells(records, col1, col2)
    return compute_pearson(np.asarray(x, dtype=float), np.asarray(y, dtype=float))


def cramers_v_from_records(
    records: Sequence[Mapping[str, Any]], col1: str, col2: str
) -> float | None:
    """Cramér's V over rows where both categorical columns are present."""
    left, right = _paired_cells(records, col1, col2)
    if len(left) < 2:
        return None
    table = build_contingency_table(
        [stringify(v) for v in left],
        [stringify(v) for v in right],
    )
    return compute_cramers_v(table)


def eta_squared_from_records(
    records: Sequence[Mapping[str, Any]], numeric_col: str, categorical_col: str
) -> float | None:
    """Eta-squared of a numeric column grouped by a categorical column."""
    values, groups = _paired_cells(records, numeric_col, categorical_col)
    return compute_eta_squared([float(v) for v in values], [stringify(g) for g in groups])


def compute_association(
    records: Sequence[Mapping[str, Any]],
    col1: str,
    type1: ColumnType,
    col2: str,
    type2: ColumnType,
) -> float | None:
    """Compute the association for one column pair, None if undefined or not applicable."""
    if type1 is ColumnType.NUMERIC and type2 is ColumnType.NUMERIC:
        return pearson_from_records(records, col1, col2)
    if type1 is ColumnType.CATEGORICAL and type2 is ColumnType.CATEGORICAL:
        return cramers_v_from_records(records, col1, col2)
    if type1 is ColumnType.NUMERIC and type2 is ColumnType.CATEGORICAL:
        return eta_squared_from_records(records, col1, col2)
    if type1 is ColumnType.CATEGORICAL and type2 is ColumnType.NUMERIC:
        return eta_squared_from_records(records, col2, col1)
    return None


def compute_association_matrix(
    records: Sequence[Mapping[str, Any]],
    columns: Sequence[str],
    column_stats: Mapping[str, ColumnStats],
    max_columns: int = 50,
) -> AssociationMatrix:
    """Compute the symmetric association matrix.

    Args:
        records: Input records
        columns: Column names in output order
        column_stats: Per-column statistics (decide the estimator)
        max_columns: Above this many columns the matrix is empty

    Returns:
        Mapping column -> column -> strength. Every column has an entry; cells
        for undefined pairs are absent.
    """
    if len(columns) > max_columns:
        logger.info(
            "component_capped",
            component="association_matrix",
            columns=len(columns),
            limit=max_columns,
        )
        record_capped_component("association_matrix")
        return {}

    matrix: AssociationMatrix = {column: {} for column in columns}
    types = {column: column_stats[column].column_type for column in columns}

    for i, col1 in enumerate(columns):
        for col2 in columns[i + 1 :]:
            value = compute_association(records, col1, types[col1], col2, types[col2])
            if value is None:
                continue
            matrix[col1][col2] = value
            matrix[col2][col1] = value

    return matrix
