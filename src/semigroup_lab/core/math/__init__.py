"""
Core math modules for semigroup_lab

Combinatorial primitives and boundary validation of raw integer inputs.
"""

# Validation
from semigroup_lab.core.math.validation import (
    validate_coprime,
    validate_generators,
    validate_integer,
    validate_non_increasing,
    validate_non_negative,
    validate_poset_axioms,
    validate_positive,
    validate_positive_integers,
    validate_relation_pairs,
)

# Helpers
from semigroup_lab.core.math.helpers import (
    boxes_above,
    compute_conjugate_partition,
    compute_hook_lengths_matrix,
    flatten,
    is_sorted_descending,
    remove_sum_of_two_elements,
)

__all__ = [
    # Validation
    "validate_coprime",
    "validate_generators",
    "validate_integer",
    "validate_non_increasing",
    "validate_non_negative",
    "validate_poset_axioms",
    "validate_positive",
    "validate_positive_integers",
    "validate_relation_pairs",
    # Helpers
    "boxes_above",
    "compute_conjugate_partition",
    "compute_hook_lengths_matrix",
    "flatten",
    "is_sorted_descending",
    "remove_sum_of_two_elements",
]
