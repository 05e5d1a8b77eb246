"""Profiling Models.

- ProfileOptions: Switches for the optional components
- ProfileSummary: Complete profile of a record collection
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from tableshape.analysis.correlation.models import AssociationMatrix, KeysAndDependencies
from tableshape.analysis.missingness.models import MissingnessPatterns
from tableshape.analysis.statistics.models import ColumnStats, EntropyStats, OutlierCounts


class ProfileOptions(BaseModel):
    """Optional components to compute. Everything is off by default."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    association_matrix: bool = False
    keys_dependencies: bool = False
    missingness_patterns: bool = False
    outliers: bool = False
    categorical_entropy: bool = False

    @classmethod
    def all(cls) -> ProfileOptions:
        """Options with every component enabled."""
        return cls(
            association_matrix=True,
            keys_dependencies=True,
            missingness_patterns=True,
            outliers=True,
            categorical_entropy=True,
        )


class ProfileSummary(BaseModel):
    """Statistical summary of a record collection.

    Optional components are None when they were not requested. A requested
    component that hit a column cap is present but empty.
    """

    row_count: int
    columns: list[str] = Field(default_factory=list)
    column_stats: dict[str, ColumnStats] = Field(default_factory=dict)
    sample_rows: list[dict[str, Any]] = Field(default_factory=list)

    association_matrix: AssociationMatrix | None = None
    keys_and_dependencies: KeysAndDependencies | None = None
    missingness_patterns: MissingnessPatterns | None = None
    outliers: dict[str, OutlierCounts] | None = None
    categorical_entropy: dict[str, EntropyStats] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict, dropping components that were not requested.

        Sample row values are passed through untouched.
        """
        skipped = {name for name in OPTIONAL_COMPONENTS if getattr(self, name) is None}
        return self.model_dump(exclude=skipped)

    def to_json(self, indent: int | None = None) -> str:
        """Serialize to JSON. Values JSON cannot encode (dates, patterns) become strings."""
        return json.dumps(self.to_dict(), indent=indent, default=str)


OPTIONAL_COMPONENTS = (
    "association_matrix",
    "keys_and_dependencies",
    "missingness_patterns",
    "outliers",
    "categorical_entropy",
)
