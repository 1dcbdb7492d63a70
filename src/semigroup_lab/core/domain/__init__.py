"""
Domain models and value objects.

Numerical sets, numerical semigroups, integer partitions and posets, all
immutable Pydantic models.
"""

from semigroup_lab.core.domain.integer_partition import (
    Partition,
    atom_partition,
    conjugate,
    hook_lengths,
    is_semigroup,
    profile,
)
from semigroup_lab.core.domain.numerical_set import (
    AbstractNumericalSet,
    NumericalSet,
    atom_monoid_gaps,
    frobenius_number,
    gaps,
    multiplicity,
    partition,
    small_elements,
)
from semigroup_lab.core.domain.poset import Poset
from semigroup_lab.core.domain.semigroup import (
    NumericalSemigroup,
    conductor,
    elements_up_to,
    embedding_dimension,
    generators,
    genus,
    membership,
)

__all__ = [
    # Numerical set
    "AbstractNumericalSet",
    "NumericalSet",
    "atom_monoid_gaps",
    "frobenius_number",
    "gaps",
    "multiplicity",
    "partition",
    "small_elements",
    # Partition
    "Partition",
    "atom_partition",
    "conjugate",
    "hook_lengths",
    "is_semigroup",
    "profile",
    # Poset
    "Poset",
    # Numerical semigroup
    "NumericalSemigroup",
    "conductor",
    "elements_up_to",
    "embedding_dimension",
    "generators",
    "genus",
    "membership",
]
