"""Within-table relationship analysis.

Computes:
- Association matrix (Pearson, Cramér's V, eta-squared)
- Candidate primary keys
- Functional dependencies (A → B)

Structure:
- algorithms/: Pure computation functions (numpy/scipy)
- association.py: Association matrix over records
- functional_dependency.py: Key and dependency detection
- models.py: Pydantic models
"""

from tableshape.analysis.correlation.association import (
    compute_association,
    compute_association_matrix,
)
from tableshape.analysis.correlation.functional_dependency import (
    detect_keys_and_dependencies,
    find_candidate_keys,
    holds_dependency,
)
from tableshape.analysis.correlation.models import (
    AssociationMatrix,
    FunctionalDependency,
    KeysAndDependencies,
)

__all__ = [
    # Entry points
    "compute_association",
    "compute_association_matrix",
    "detect_keys_and_dependencies",
    "find_candidate_keys",
    "holds_dependency",
    # Models
    "AssociationMatrix",
    "FunctionalDependency",
    "KeysAndDependencies",
]
