"""Exception hierarchy.

Statistical degeneracy (too few rows, zero variance, capped column counts) is
never an error; estimators return None instead. Exceptions are reserved for
callers breaking the input contract.
"""


class TableShapeError(ValueError):
    """Base class for all tableshape errors."""


class ProfileInputError(TableShapeError):
    """Raised when the records handed to the profiler are malformed."""

    def __init__(self, message: str, row_index: int | None = None):
        self.row_index = row_index
        if row_index is not None:
            message = f"row {row_index}: {message}"
        super().__init__(message)
