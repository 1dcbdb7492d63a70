"""
Weights: Numeric invariants derived from gaps and Apéry sets

- effective weights (pair counting, and the generator-based variant)
- Apéry weights and Kunz coordinates
- depth, delta set, catenary degree bound

Two conventions for the effective weight coexist in the literature:
1. effective_weight(S, g): number of unordered pairs s1 <= s2 of positive
   elements with s1 + s2 = g. Total over all integers.
2. generator_effective_weight(S, a): number of gaps above a minimal
   generator a. Summed over the generators this is the effective weight of
   the semigroup (total_effective_weight).
"""

from semigroup_lab.algorithms.apery import apery_set
from semigroup_lab.algorithms.minimal_generators import is_minimal_generator
from semigroup_lab.core.cache import ComputationCache
from semigroup_lab.core.domain.semigroup import NumericalSemigroup, elements_up_to
from semigroup_lab.core.math.helpers import boxes_above
from semigroup_lab.core.math.validation import validate_integer


# =============================================================================
# EFFECTIVE WEIGHTS
# =============================================================================


def effective_weight(S: NumericalSemigroup, g: int) -> int:
    """
    Number of unordered pairs (s1, s2), s1 <= s2, of positive elements of S
    with s1 + s2 = g.

    Zero for g <= 0. For a gap g the count is always zero, since the
    elements are closed under addition.

    Examples:
        >>> from semigroup_lab.algorithms.constructors import semigroup_from_generators
        >>> S = semigroup_from_generators([3, 5])
        >>> effective_weight(S, 6), effective_weight(S, 10), effective_weight(S, 7)
        (1, 1, 0)
    """
    g = validate_integer(g, "g")
    return sum(1 for s1 in range(1, g // 2 + 1) if s1 in S and (g - s1) in S)


def effective_weights(S: NumericalSemigroup) -> dict[int, int]:
    """effective_weight of every gap, keyed by gap."""
    return {g: effective_weight(S, g) for g in S.sorted_gaps()}


def generator_effective_weight(S: NumericalSemigroup, a: int) -> int:
    """
    Gaps greater than the minimal generator a; 0 if a is not one.

    Raises:
        InvalidArgumentError: If a is not an integer

    Examples:
        >>> from semigroup_lab.algorithms.constructors import semigroup_from_generators
        >>> S = semigroup_from_generators([3, 5])
        >>> generator_effective_weight(S, 3), generator_effective_weight(S, 5)
        (2, 1)
    """
    a = validate_integer(a, "a")
    if not is_minimal_generator(S, a):
        return 0
    return boxes_above(S.gaps, a)


def total_effective_weight(S: NumericalSemigroup) -> int:
    """Sum of generator_effective_weight over the minimal generators."""
    return sum(boxes_above(S.gaps, a) for a in S.generators)


# =============================================================================
# APÉRY-BASED INVARIANTS
# =============================================================================


def apery_weight(
    S: NumericalSemigroup, n: int | None = None, cache: ComputationCache | None = None
) -> list[int]:
    """
    floor(w / n) for every w in the Apéry set of S with respect to n.

    n defaults to the multiplicity.

    Raises:
        InvalidArgumentError: If n is not a positive element of S
    """
    if n is None:
        n = S.multiplicity
    return [w // n for w in apery_set(S, n, cache)]


def kunz_coordinates(S: NumericalSemigroup, cache: ComputationCache | None = None) -> list[int]:
    """
    Kunz coordinates (w_i - i) / m for i in 1..m-1, where m is the
    multiplicity and w_i the Apéry element with residue i.

    Empty for the trivial semigroup.

    Examples:
        >>> from semigroup_lab.algorithms.constructors import semigroup_from_generators
        >>> kunz_coordinates(semigroup_from_generators([3, 5]))
        [3, 1]
    """
    m = S.multiplicity
    if m == 1:
        return []
    apery = apery_set(S, m, cache)
    return [(apery[i] - i) // m for i in range(1, m)]


def depth(S: NumericalSemigroup, cache: ComputationCache | None = None) -> int:
    """Largest Kunz coordinate, 0 for the trivial semigroup."""
    return max(kunz_coordinates(S, cache), default=0)


def delta_set(S: NumericalSemigroup) -> list[int]:
    """
    Distinct differences between consecutive elements up to
    frobenius + multiplicity + 1, ascending.

    Examples:
        >>> from semigroup_lab.algorithms.constructors import semigroup_from_generators
        >>> delta_set(semigroup_from_generators([3, 5]))
        [1, 2, 3]
    """
    elements = elements_up_to(S, S.frobenius + S.multiplicity + 1)
    return sorted({b - a for a, b in zip(elements, elements[1:])})


def catenary_degree(S: NumericalSemigroup, cache: ComputationCache | None = None) -> int:
    """
    Upper bound for the catenary degree: depth(S) + 1.

    Not the exact combinatorial catenary degree.
    """
    return depth(S, cache) + 1
