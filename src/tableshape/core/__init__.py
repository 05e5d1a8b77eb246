"""Core module - configuration, logging, errors and shared models."""

from tableshape.core.config import Settings, get_settings
from tableshape.core.exceptions import ProfileInputError, TableShapeError
from tableshape.core.models.base import (
    ColumnType,
    Result,
    ValueKind,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "ProfileInputError",
    "TableShapeError",
    # Models - enums
    "ColumnType",
    "ValueKind",
    # Models - base data structures
    "Result",
]
