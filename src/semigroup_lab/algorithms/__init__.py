"""
Core algorithms: gaps from generators, minimal generators, semigroup
factories and Apéry sets.
"""

from semigroup_lab.algorithms.apery import apery_set
from semigroup_lab.algorithms.constructors import semigroup_from_gaps, semigroup_from_generators
from semigroup_lab.algorithms.gaps import compute_gaps_from_generators
from semigroup_lab.algorithms.minimal_generators import (
    is_minimal_generator,
    minimal_generating_set,
    minimal_generating_set_from_gaps,
    minimal_generating_set_from_generators,
)

__all__ = [
    "apery_set",
    "compute_gaps_from_generators",
    "is_minimal_generator",
    "minimal_generating_set",
    "minimal_generating_set_from_gaps",
    "minimal_generating_set_from_generators",
    "semigroup_from_gaps",
    "semigroup_from_generators",
]
