"""Candidate key and functional dependency detection.

A candidate key is a column with no missing values and no duplicates.

A functional dependency A → B means that for each value of the determinant A
there is at most one value of the dependent B. Only single-column, non-key
determinants are tested, and a dependency needs at least two distinct
determinant values so that constant or near-empty columns do not qualify.
Values are grouped by their string form; object values by a canonical
serialization.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from tableshape.analysis.correlation.models import FunctionalDependency, KeysAndDependencies
from tableshape.analysis.scanning import cell, identity_key, stringify
from tableshape.core.logging import get_logger, record_capped_component

logger = get_logger(__name__)


def find_candidate_keys(
    cells: Mapping[str, list[Any]],
    row_count: int,
) -> list[str]:
    """Find columns that are fully populated and unique.

    Args:
        cells: Per-column cell values in row order (None for missing)
        row_count: Number of records

    Returns:
        Key column names, in column order
    """
    keys = []
    for column, values in cells.items():
        present = [v for v in values if v is not None]
        if len(present) != row_count:
            continue
        if len({identity_key(v) for v in present}) == row_count:
            keys.append(column)
    return keys


def holds_dependency(determinant: Sequence[Any], dependent: Sequence[Any]) -> bool:
    """Check whether determinant → dependent holds.

    Args:
        determinant: Determinant cells in row order (None for missing)
        dependent: Dependent cells in row order (None for missing)

    Returns:
        True when every determinant group maps to at most one dependent value
        and there are at least two groups
    """
    groups: dict[str, set[str]] = {}
    for a, b in zip(determinant, dependent, strict=True):
        if a is None:
            continue
        targets = groups.setdefault(stringify(a), set())
        if b is not None:
            targets.add(stringify(b))
            if len(targets) > 1:
                return False
    return len(groups) > 1


def detect_keys_and_dependencies(
    records: Sequence[Mapping[str, Any]],
    columns: Sequence[str],
    max_columns: int = 20,
) -> KeysAndDependencies:
    """Detect candidate primary keys and functional dependencies.

    Args:
        records: Input records
        columns: Column names in output order
        max_columns: Above this many columns both lists are empty

    Returns:
        KeysAndDependencies
    """
    if len(columns) > max_columns:
        logger.info(
            "component_capped",
            component="keys_dependencies",
            columns=len(columns),
            limit=max_columns,
        )
        record_capped_component("keys_dependencies")
        return KeysAndDependencies()

    cells = {column: [cell(record, column) for record in records] for column in columns}
    keys = find_candidate_keys(cells, len(records))

    dependencies: list[FunctionalDependency] = []
    for col_a in columns:
        if col_a in keys:
            continue
        if sum(v is not None for v in cells[col_a]) < 2:
            continue
        for col_b in columns:
            if col_a == col_b:
                continue
            if holds_dependency(cells[col_a], cells[col_b]):
                dependencies.append(
                    FunctionalDependency(determinant_columns=[col_a], dependent_column=col_b)
                )

    logger.debug(
        "keys_dependencies_detected",
        candidate_keys=len(keys),
        functional_dependencies=len(dependencies),
    )

    return KeysAndDependencies(
        candidate_primary_keys=[[key] for key in keys],
        functional_dependencies=dependencies,
    )
