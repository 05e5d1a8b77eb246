"""Base models and types used across all modules.

This module contains the fundamental types that don't belong to any specific
analysis module (scanning, statistics, correlation, etc.).
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class Result[T](BaseModel):
    """Result type for operations that can fail.

    Use this instead of exceptions for expected failures.
    Exceptions are reserved for unexpected/programming errors.
    """

    success: bool
    value: T | None = None
    error: str | None = None
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def ok(cls, value: T, warnings: list[str] | None = None) -> Result[T]:
        """Create a successful result."""
        return cls(success=True, value=value, warnings=warnings or [])

    @classmethod
    def fail(cls, error: str) -> Result[T]:
        """Create a failed result."""
        return cls(success=False, error=error)

    def unwrap(self) -> T:
        """Get the value or raise if failed."""
        if not self.success:
            raise ValueError(f"Result failed: {self.error}")
        assert self.value is not None
        return self.value

    def map(self, fn: Callable[[T], Any]) -> Result[Any]:
        """Transform the value if successful."""
        if self.success and self.value is not None:
            return Result.ok(fn(self.value), self.warnings)
        return self


# === Enums ===


class ValueKind(str, Enum):
    """Runtime kind of a present cell value."""

    NUMBER = "number"  # Finite real number (never bool)
    STRING = "string"
    BOOLEAN = "boolean"
    OBJECT = "object"  # Anything else: lists, mappings, dates, patterns


class ColumnType(str, Enum):
    """Coarse statistical type of a column, used to pick an association estimator."""

    NUMERIC = "numeric"  # Has numeric stats
    CATEGORICAL = "categorical"  # Has categorical stats
    OTHER = "other"  # Mixed, object-valued or empty
