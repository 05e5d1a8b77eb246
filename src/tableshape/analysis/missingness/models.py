"""Missingness pattern models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CoMissingPair(BaseModel):
    """Two columns and the number of rows where both are missing."""

    pair: tuple[str, str]
    count: int


class MissingnessPatterns(BaseModel):
    """Per-column missing rates and the most frequent co-missing pairs."""

    per_column_rates: dict[str, float] = Field(default_factory=dict)
    top_co_missing_pairs: list[CoMissingPair] = Field(default_factory=list)
