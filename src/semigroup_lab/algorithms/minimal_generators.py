"""
Minimal Generators: Detection and extraction of minimal generating sets

An element n of a numerical semigroup S is a minimal generator if n > 0,
n is in S and n cannot be written as a + b with a, b positive elements of S.
Every numerical semigroup has a unique minimal generating set; its size is
the embedding dimension.
"""

from typing import Iterable

from semigroup_lab.core.cache import ComputationCache, resolve_cache
from semigroup_lab.core.domain.semigroup import NumericalSemigroup
from semigroup_lab.core.math.helpers import remove_sum_of_two_elements
from semigroup_lab.core.math.validation import (
    validate_generators,
    validate_integer,
    validate_positive_integers,
)


# =============================================================================
# FROM GAPS
# =============================================================================


def _compute_minimal_generators(gap_set: frozenset[int]) -> tuple[int, ...]:
    if not gap_set:
        return (1,)

    frobenius = max(gap_set)
    multiplicity = 1
    while multiplicity in gap_set:
        multiplicity += 1

    # Minimal generators are at most frobenius + multiplicity.
    candidates = range(multiplicity, frobenius + multiplicity + 1)
    non_gaps = {n for n in candidates if n not in gap_set}
    return tuple(sorted(remove_sum_of_two_elements(non_gaps)))


def minimal_generating_set_from_gaps(
    gaps: Iterable[int], cache: ComputationCache | None = None
) -> list[int]:
    """
    Minimal generators of the numerical semigroup with the given gaps.

    A non-gap n is kept iff it is not a + b with a, b >= 1 both non-gaps.
    Candidates run from the multiplicity up to frobenius + multiplicity;
    no minimal generator exceeds that bound.

    Args:
        gaps: Gap set (positive integers)
        cache: Memoization store (default: process cache)

    Returns:
        Ascending minimal generators; [1] for an empty gap set

    Raises:
        InvalidArgumentError: If some gap is not a positive integer

    Examples:
        >>> minimal_generating_set_from_gaps([1, 2, 4, 7])
        [3, 5]
        >>> minimal_generating_set_from_gaps([1, 2])
        [3, 4, 5]
    """
    gap_set = frozenset(validate_positive_integers(gaps, "gaps"))
    store = resolve_cache(cache).min_gens
    generators = ComputationCache.lookup(
        store, gap_set, lambda: _compute_minimal_generators(gap_set)
    )
    return list(generators)


# =============================================================================
# FROM GENERATORS
# =============================================================================


def minimal_generating_set_from_generators(generators: Iterable[int]) -> list[int]:
    """
    Drop redundant generators from a generator list.

    Generators are processed in increasing order; g survives iff it is not
    a non-negative combination of the generators accepted before it.

    Args:
        generators: Positive coprime integers, duplicates allowed

    Returns:
        Ascending minimal generating set

    Raises:
        InvalidArgumentError: On empty, non-positive or non-coprime input

    Examples:
        >>> minimal_generating_set_from_generators([3, 5, 8, 6])
        [3, 5]
    """
    gens = validate_generators(generators)
    if gens[0] == 1:
        return [1]

    largest = gens[-1]
    accepted: list[int] = []
    # representable[k]: k is a non-negative combination of accepted generators
    representable = [False] * (largest + 1)
    representable[0] = True

    for g in gens:
        if representable[g]:
            continue
        accepted.append(g)
        for k in range(g, largest + 1):
            if representable[k - g]:
                representable[k] = True

    return accepted


# =============================================================================
# QUERIES
# =============================================================================


def minimal_generating_set(S: NumericalSemigroup) -> list[int]:
    """Minimal generators of S, as stored on the semigroup."""
    return list(S.generators)


def is_minimal_generator(S: NumericalSemigroup, n: int) -> bool:
    """
    True if n is a minimal generator of S.

    Raises:
        InvalidArgumentError: If n is not an integer

    Examples:
        >>> from semigroup_lab.algorithms.constructors import semigroup_from_generators
        >>> S = semigroup_from_generators([3, 5])
        >>> [is_minimal_generator(S, n) for n in (2, 3, 5, 6)]
        [False, True, True, False]
    """
    n = validate_integer(n, "n")
    if n <= 0 or n not in S:
        return False
    for a in range(1, n):
        if a in S and (n - a) in S:
            return False
    return True
