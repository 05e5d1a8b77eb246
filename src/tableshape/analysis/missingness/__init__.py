"""Missingness pattern analysis."""

from tableshape.analysis.missingness.models import CoMissingPair, MissingnessPatterns
from tableshape.analysis.missingness.patterns import (
    analyze_missingness,
    build_missing_mask,
    top_co_missing_pairs,
)

__all__ = [
    "CoMissingPair",
    "MissingnessPatterns",
    "analyze_missingness",
    "build_missing_mask",
    "top_co_missing_pairs",
]
