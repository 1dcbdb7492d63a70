"""
Gap Poset: Order on the gaps induced by the semigroup

For gaps g1, g2 of S: g1 <= g2 iff g2 - g1 is an element of S. The maximal
elements are the pseudo-Frobenius numbers (voids); their count is the type.
"""

from semigroup_lab.core.domain.poset import Poset
from semigroup_lab.core.domain.semigroup import NumericalSemigroup


def _semigroup_order(S: NumericalSemigroup, elements: list[int]) -> set[tuple[int, int]]:
    return {(a, b) for a in elements for b in elements if b - a in S}


def gap_poset(S: NumericalSemigroup) -> Poset:
    """
    Poset on gaps(S) ordered by differences in S.

    Examples:
        >>> from semigroup_lab.algorithms.constructors import semigroup_from_generators
        >>> P = gap_poset(semigroup_from_generators([3, 5]))
        >>> P.maximal_elements()
        [7]
    """
    elements = S.sorted_gaps()
    return Poset.from_relations(elements, _semigroup_order(S, elements))


def void(S: NumericalSemigroup) -> list[int]:
    """
    Pseudo-Frobenius numbers of S, ascending.

    A gap g is a void iff g + s is not a gap for every positive element s
    of S with s <= frobenius - g. The Frobenius number is always a void;
    the trivial semigroup has none.

    Examples:
        >>> from semigroup_lab.algorithms.constructors import semigroup_from_generators
        >>> void(semigroup_from_generators([3, 4, 5]))
        [1, 2]
    """
    frobenius = S.frobenius
    return [
        g
        for g in S.sorted_gaps()
        if not any(s in S and g + s in S.gaps for s in range(1, frobenius - g + 1))
    ]


def pseudofrobenius_numbers(S: NumericalSemigroup) -> list[int]:
    """Alias of void()."""
    return void(S)


def void_poset(S: NumericalSemigroup) -> Poset:
    """Gap poset restricted to the voids."""
    elements = void(S)
    return Poset.from_relations(elements, _semigroup_order(S, elements))


def type_semigroup(S: NumericalSemigroup) -> int:
    """Number of pseudo-Frobenius numbers; 1 exactly for symmetric semigroups."""
    return len(void(S))
