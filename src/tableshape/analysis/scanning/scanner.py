"""Type and presence scanning.

First pass over the records. For each column this:
1. Collects the present (non-missing) values
2. Counts present and missing cells
3. Records the sorted set of value kinds seen

The retained value lists are reused by the statistics engines and the
outlier detector so they do not filter the records again.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from tableshape.analysis.scanning.values import value_kind
from tableshape.core.models.base import ValueKind


@dataclass
class ColumnScan:
    """Presence counts, kinds and present values for one column."""

    column: str
    present: int = 0
    missing: int = 0
    kinds: list[ValueKind] = field(default_factory=list)
    values: list[Any] = field(default_factory=list)

    @property
    def single_kind(self) -> ValueKind | None:
        """The only kind in the column, or None if the column is mixed or empty."""
        if len(self.kinds) == 1:
            return self.kinds[0]
        return None


def collect_columns(records: Sequence[Mapping[str, Any]]) -> list[str]:
    """Get the sorted union of keys across all records."""
    keys: set[str] = set()
    for record in records:
        keys.update(record.keys())
    return sorted(keys)


def scan_column(records: Sequence[Mapping[str, Any]], column: str) -> ColumnScan:
    """Scan one column across all records."""
    scan = ColumnScan(column=column)
    seen: set[ValueKind] = set()

    for record in records:
        value = record.get(column)
        kind = value_kind(value)
        if kind is None:
            scan.missing += 1
            continue
        seen.add(kind)
        scan.values.append(value)
        scan.present += 1

    scan.kinds = sorted(seen, key=lambda k: k.value)
    return scan


def scan_columns(
    records: Sequence[Mapping[str, Any]],
    columns: Sequence[str],
) -> dict[str, ColumnScan]:
    """Scan every column.

    Args:
        records: Input records
        columns: Column names, in output order

    Returns:
        ColumnScan per column, keyed by column name
    """
    return {column: scan_column(records, column) for column in columns}
