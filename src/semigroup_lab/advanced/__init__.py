"""
Derived structures on numerical semigroups: gap posets, weights, the genus
tree and special gaps.
"""

from semigroup_lab.advanced.posets import (
    gap_poset,
    pseudofrobenius_numbers,
    type_semigroup,
    void,
    void_poset,
)
from semigroup_lab.advanced.special_gaps import (
    add_specialgap,
    forced_gaps,
    fundamental_gaps,
    get_frobchildren,
    is_almost_symmetric,
    is_pseudo_symmetric,
    is_symmetric,
    left_primitive,
    right_primitive,
    special_gaps,
)
from semigroup_lab.advanced.tree_navigation import (
    ancestors,
    can_be_new_frobenius,
    descendants,
    effective_generators,
    genus_path,
    get_children,
    get_parent,
    remove_minimal_generator,
)
from semigroup_lab.advanced.weights import (
    apery_weight,
    catenary_degree,
    delta_set,
    depth,
    effective_weight,
    effective_weights,
    generator_effective_weight,
    kunz_coordinates,
    total_effective_weight,
)

__all__ = [
    # Posets
    "gap_poset",
    "pseudofrobenius_numbers",
    "type_semigroup",
    "void",
    "void_poset",
    # Special gaps
    "add_specialgap",
    "forced_gaps",
    "fundamental_gaps",
    "get_frobchildren",
    "is_almost_symmetric",
    "is_pseudo_symmetric",
    "is_symmetric",
    "left_primitive",
    "right_primitive",
    "special_gaps",
    # Tree navigation
    "ancestors",
    "can_be_new_frobenius",
    "descendants",
    "effective_generators",
    "genus_path",
    "get_children",
    "get_parent",
    "remove_minimal_generator",
    # Weights
    "apery_weight",
    "catenary_degree",
    "delta_set",
    "depth",
    "effective_weight",
    "effective_weights",
    "generator_effective_weight",
    "kunz_coordinates",
    "total_effective_weight",
]
