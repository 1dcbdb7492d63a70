"""
Special Gaps: Pseudo-Frobenius numbers, symmetry and gap-structure moves

Symmetry classes (by type t, genus g, Frobenius number F):
- symmetric:         t == 1 (equivalently 2g == F + 1)
- pseudo-symmetric:  pseudo-Frobenius numbers are exactly {F/2, F}
- almost symmetric:  2g == F + t

Structural moves (add_specialgap, get_frobchildren) go through
semigroup_from_gaps, so every result satisfies the semigroup invariants.
"""

from semigroup_lab.advanced.posets import type_semigroup, void
from semigroup_lab.algorithms.constructors import semigroup_from_gaps
from semigroup_lab.algorithms.minimal_generators import is_minimal_generator
from semigroup_lab.core.cache import ComputationCache
from semigroup_lab.core.domain.semigroup import NumericalSemigroup
from semigroup_lab.core.errors import InvalidArgumentError, PreconditionError
from semigroup_lab.core.math.validation import validate_integer


# =============================================================================
# PSEUDO-FROBENIUS NUMBERS AND SYMMETRY
# =============================================================================


def special_gaps(S: NumericalSemigroup) -> list[int]:
    """Pseudo-Frobenius numbers of S; same as void()."""
    return void(S)


def is_symmetric(S: NumericalSemigroup) -> bool:
    """
    True if S has type 1.

    Every semigroup with two generators is symmetric. The trivial semigroup
    has type 0 and is not reported as symmetric.
    """
    return type_semigroup(S) == 1


def is_pseudo_symmetric(S: NumericalSemigroup) -> bool:
    """
    True if the pseudo-Frobenius numbers are exactly F/2 and F.

    Examples:
        >>> from semigroup_lab.algorithms.constructors import semigroup_from_generators
        >>> is_pseudo_symmetric(semigroup_from_generators([3, 4, 5]))
        True
    """
    frobenius = S.frobenius
    if frobenius <= 0 or frobenius % 2:
        return False
    return void(S) == [frobenius // 2, frobenius]


def is_almost_symmetric(S: NumericalSemigroup) -> bool:
    """True if 2 * genus == frobenius + type. Symmetric and pseudo-symmetric
    semigroups are almost symmetric."""
    if S.genus == 0:
        return False
    return 2 * S.genus == S.frobenius + type_semigroup(S)


# =============================================================================
# GAP CLASSES
# =============================================================================


def fundamental_gaps(S: NumericalSemigroup) -> list[int]:
    """
    Gaps h with 2h and 3h in S, ascending. Then every multiple kh, k >= 2,
    lies in S.

    Examples:
        >>> from semigroup_lab.algorithms.constructors import semigroup_from_generators
        >>> fundamental_gaps(semigroup_from_generators([3, 5]))
        [4, 7]
    """
    return [h for h in S.sorted_gaps() if 2 * h in S and 3 * h in S]


def forced_gaps(S: NumericalSemigroup, g: int) -> list[int]:
    """
    Gaps h > g with h - g in S, ascending: the gaps strictly above g in the
    gap poset.

    Raises:
        InvalidArgumentError: If g is not an integer or not a gap of S
    """
    g = validate_integer(g, "g")
    if g not in S.gaps:
        raise InvalidArgumentError(f"{g} is not a gap of {S}")
    return [h for h in S.sorted_gaps() if h > g and (h - g) in S]


# =============================================================================
# PRIMITIVE GENERATORS
# =============================================================================


def left_primitive(S: NumericalSemigroup) -> list[int]:
    """Minimal generators below the conductor."""
    conductor = S.conductor()
    return [a for a in S.generators if a < conductor]


def right_primitive(S: NumericalSemigroup) -> list[int]:
    """Minimal generators at or above the conductor."""
    conductor = S.conductor()
    return [a for a in S.generators if a >= conductor]


# =============================================================================
# MOVES
# =============================================================================


def add_specialgap(
    S: NumericalSemigroup, x: int, cache: ComputationCache | None = None
) -> NumericalSemigroup:
    """
    S with the minimal generator x removed, so x becomes a gap.

    The result has genus genus(S) + 1.

    Raises:
        InvalidArgumentError: If x is not an integer
        PreconditionError: If x is not a minimal generator of S

    Examples:
        >>> from semigroup_lab.algorithms.constructors import semigroup_from_generators
        >>> add_specialgap(semigroup_from_generators([3, 5]), 5).sorted_gaps()
        [1, 2, 4, 5, 7]
    """
    x = validate_integer(x, "x")
    if not is_minimal_generator(S, x):
        raise PreconditionError(f"{x} is not a minimal generator of {S}")
    return semigroup_from_gaps(S.gaps | {x}, cache)


def get_frobchildren(
    S: NumericalSemigroup, cache: ComputationCache | None = None
) -> list[NumericalSemigroup]:
    """
    Semigroups S \\ {x} for the minimal generators x below the Frobenius
    number. All of them keep the Frobenius number of S.
    """
    return [
        semigroup_from_gaps(S.gaps | {x}, cache)
        for x in S.generators
        if x < S.frobenius
    ]
