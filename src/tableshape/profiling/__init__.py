"""Profiling module - the main entry point.

Usage:
    from tableshape.profiling import ProfileOptions, profile

    summary = profile(records, ProfileOptions(association_matrix=True))
"""

from tableshape.profiling.models import ProfileOptions, ProfileSummary
from tableshape.profiling.profiler import profile, profile_table

__all__ = [
    "ProfileOptions",
    "ProfileSummary",
    "profile",
    "profile_table",
]
