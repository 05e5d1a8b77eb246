"""Correlation Analysis Pydantic Models.

Data structures for cross-column analysis:
- AssociationMatrix: Symmetric column -> column -> strength mapping
- FunctionalDependency: A → B dependencies
- KeysAndDependencies: Candidate keys plus dependencies
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# Pearson r for numeric pairs, Cramér's V for categorical pairs, eta^2 for mixed pairs.
# Undefined cells are absent; there are no diagonal cells.
AssociationMatrix = dict[str, dict[str, float]]


class FunctionalDependency(BaseModel):
    """A functional dependency: determinant → dependent.

    Every distinct determinant value maps to at most one dependent value.
    """

    determinant_columns: list[str]
    dependent_column: str

    def __str__(self) -> str:
        return f"{', '.join(self.determinant_columns)} → {self.dependent_column}"


class KeysAndDependencies(BaseModel):
    """Candidate primary keys and single-column functional dependencies."""

    candidate_primary_keys: list[list[str]] = Field(default_factory=list)
    functional_dependencies: list[FunctionalDependency] = Field(default_factory=list)
