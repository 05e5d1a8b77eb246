"""tableshape.

Structured statistical summaries of schemaless record collections, sized for
language models and analysts.
"""

__version__ = "0.1.0"

from tableshape.core.exceptions import ProfileInputError, TableShapeError
from tableshape.core.models.base import Result
from tableshape.profiling import ProfileOptions, ProfileSummary, profile, profile_table

__all__ = [
    "ProfileInputError",
    "ProfileOptions",
    "ProfileSummary",
    "Result",
    "TableShapeError",
    "__version__",
    "profile",
    "profile_table",
]
