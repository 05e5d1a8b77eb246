"""Statistical Profile Models.

Pydantic models for column-level statistics:
- ColumnStats: Presence counts, value kinds and optional numeric/categorical stats
- NumericStats: Statistics for numeric-only columns
- CategoricalStats: Statistics for string-only or boolean-only columns
- ValueCount: Frequency count for top values
- OutlierCounts: Tukey and z-score outlier counts (numeric columns)
- EntropyStats: Shannon entropy and tail share (categorical columns)
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from tableshape.core.models.base import ColumnType, ValueKind


class NumericStats(BaseModel):
    """Statistics for numeric columns."""

    min_value: float
    max_value: float
    mean: float
    median: float
    quartiles: tuple[float, float, float]  # (Q1, median, Q3)
    stddev: float  # Sample standard deviation (n - 1)
    percentiles: dict[str, float] = Field(default_factory=dict)  # "p10", "p90"

    @property
    def iqr(self) -> float:
        """Interquartile range Q3 - Q1."""
        return self.quartiles[2] - self.quartiles[0]


class ValueCount(BaseModel):
    """A value with its count."""

    value: str
    count: int


class CategoricalStats(BaseModel):
    """Statistics for categorical columns."""

    unique: int
    top10: list[ValueCount] = Field(default_factory=list)
    hhi: float  # Herfindahl-Hirschman index on a 0-10,000 scale


class ColumnStats(BaseModel):
    """Statistical profile of a column.

    At most one of numeric_stats / categorical_stats is set, and only when
    every present value has the same kind.
    """

    present: int
    missing: int
    types: list[ValueKind] = Field(default_factory=list)

    numeric_stats: NumericStats | None = None
    categorical_stats: CategoricalStats | None = None

    @property
    def column_type(self) -> ColumnType:
        """Coarse type used to choose an association estimator."""
        if self.numeric_stats is not None:
            return ColumnType.NUMERIC
        if self.categorical_stats is not None:
            return ColumnType.CATEGORICAL
        return ColumnType.OTHER


class OutlierCounts(BaseModel):
    """Outlier counts for a numeric column."""

    tukey_count: int
    zscore_count: int


class EntropyStats(BaseModel):
    """Distribution spread of a categorical column."""

    entropy: float  # Shannon entropy in bits
    tail_share_outside_top10: float
