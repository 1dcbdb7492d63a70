"""
semigroup_lab: numerical semigroups, numerical sets and integer partitions

Exact computation of structural invariants (gaps, Frobenius number, genus,
minimal generators, Apéry sets, Kunz coordinates, pseudo-Frobenius numbers)
and navigation of the genus tree.

Typical use:

    >>> from semigroup_lab import semigroup_from_generators, apery_set
    >>> S = semigroup_from_generators([3, 5])
    >>> S.frobenius, S.genus, apery_set(S)
    (7, 4, [0, 10, 5])
"""

__version__ = "0.3.0"

# Errors & configuration
from semigroup_lab.core.errors import (
    ComputationFailure,
    ErrorKind,
    InvalidArgumentError,
    PreconditionError,
    SemigroupLabError,
)
from semigroup_lab.core.config import DEFAULT_SEARCH_LIMITS, SearchLimits

# Caching
from semigroup_lab.core.cache import (
    CacheStats,
    ComputationCache,
    cache_stats,
    clear_all_caches,
    clear_apery_cache,
    default_cache,
)

# Value types
from semigroup_lab.core.domain import (
    AbstractNumericalSet,
    NumericalSemigroup,
    NumericalSet,
    Partition,
    Poset,
    atom_monoid_gaps,
    atom_partition,
    conductor,
    conjugate,
    elements_up_to,
    embedding_dimension,
    frobenius_number,
    gaps,
    generators,
    genus,
    hook_lengths,
    is_semigroup,
    membership,
    multiplicity,
    partition,
    profile,
    small_elements,
)

# Algorithms
from semigroup_lab.algorithms import (
    apery_set,
    compute_gaps_from_generators,
    is_minimal_generator,
    minimal_generating_set,
    minimal_generating_set_from_gaps,
    minimal_generating_set_from_generators,
    semigroup_from_gaps,
    semigroup_from_generators,
)

# Derived structures
from semigroup_lab.advanced import (
    add_specialgap,
    ancestors,
    apery_weight,
    can_be_new_frobenius,
    catenary_degree,
    delta_set,
    depth,
    descendants,
    effective_generators,
    effective_weight,
    effective_weights,
    forced_gaps,
    fundamental_gaps,
    gap_poset,
    generator_effective_weight,
    genus_path,
    get_children,
    get_frobchildren,
    get_parent,
    is_almost_symmetric,
    is_pseudo_symmetric,
    is_symmetric,
    kunz_coordinates,
    left_primitive,
    pseudofrobenius_numbers,
    remove_minimal_generator,
    right_primitive,
    special_gaps,
    total_effective_weight,
    type_semigroup,
    void,
    void_poset,
)

__all__ = [
    "__version__",
    # Errors & configuration
    "ComputationFailure",
    "ErrorKind",
    "InvalidArgumentError",
    "PreconditionError",
    "SemigroupLabError",
    "DEFAULT_SEARCH_LIMITS",
    "SearchLimits",
    # Caching
    "CacheStats",
    "ComputationCache",
    "cache_stats",
    "clear_all_caches",
    "clear_apery_cache",
    "default_cache",
    # Value types
    "AbstractNumericalSet",
    "NumericalSemigroup",
    "NumericalSet",
    "Partition",
    "Poset",
    "atom_monoid_gaps",
    "atom_partition",
    "conductor",
    "conjugate",
    "elements_up_to",
    "embedding_dimension",
    "frobenius_number",
    "gaps",
    "generators",
    "genus",
    "hook_lengths",
    "is_semigroup",
    "membership",
    "multiplicity",
    "partition",
    "profile",
    "small_elements",
    # Algorithms
    "apery_set",
    "compute_gaps_from_generators",
    "is_minimal_generator",
    "minimal_generating_set",
    "minimal_generating_set_from_gaps",
    "minimal_generating_set_from_generators",
    "semigroup_from_gaps",
    "semigroup_from_generators",
    # Derived structures
    "add_specialgap",
    "ancestors",
    "apery_weight",
    "can_be_new_frobenius",
    "catenary_degree",
    "delta_set",
    "depth",
    "descendants",
    "effective_generators",
    "effective_weight",
    "effective_weights",
    "forced_gaps",
    "fundamental_gaps",
    "gap_poset",
    "generator_effective_weight",
    "genus_path",
    "get_children",
    "get_frobchildren",
    "get_parent",
    "is_almost_symmetric",
    "is_pseudo_symmetric",
    "is_symmetric",
    "kunz_coordinates",
    "left_primitive",
    "pseudofrobenius_numbers",
    "remove_minimal_generator",
    "right_primitive",
    "special_gaps",
    "total_effective_weight",
    "type_semigroup",
    "void",
    "void_poset",
]
