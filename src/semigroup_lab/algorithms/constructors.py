"""
Constructors: Factories for NumericalSemigroup

The only supported way to build a NumericalSemigroup:
- semigroup_from_generators: any coprime generator list, redundant entries
  dropped
- semigroup_from_gaps: a gap set closed under the semigroup property

Both derive every field (frobenius, genus, multiplicity, minimal
generators, embedding dimension) so that the model invariants hold by
construction. A failed call returns nothing.
"""

import logging
from typing import Iterable

from pydantic import ValidationError

from semigroup_lab.algorithms.gaps import compute_gaps_from_generators
from semigroup_lab.algorithms.minimal_generators import minimal_generating_set_from_gaps
from semigroup_lab.core.cache import ComputationCache
from semigroup_lab.core.domain.semigroup import NumericalSemigroup
from semigroup_lab.core.errors import InvalidArgumentError, invalid_argument_from
from semigroup_lab.core.math.validation import validate_positive_integers

logger = logging.getLogger(__name__)


# =============================================================================
# INTERNAL
# =============================================================================


def _find_closure_violation(gap_set: frozenset[int]) -> tuple[int, int] | None:
    # Non-gaps a <= b with a + b a gap; None when the complement is closed.
    for gap in sorted(gap_set):
        for a in range(1, gap // 2 + 1):
            if a not in gap_set and (gap - a) not in gap_set:
                return a, gap - a
    return None


def _build(gap_set: frozenset[int], generators: list[int]) -> NumericalSemigroup:
    try:
        return NumericalSemigroup(
            gaps=gap_set,
            frobenius=max(gap_set, default=-1),
            generators=tuple(generators),
            genus=len(gap_set),
            multiplicity=generators[0],
            embedding_dimension=len(generators),
        )
    except ValidationError as exc:
        raise invalid_argument_from(exc, "numerical semigroup") from exc


# =============================================================================
# FACTORIES
# =============================================================================


def semigroup_from_generators(
    generators: Iterable[int], cache: ComputationCache | None = None
) -> NumericalSemigroup:
    """
    Semigroup generated by the given integers.

    Args:
        generators: Positive coprime integers, any order, duplicates allowed
        cache: Memoization store for the minimal-generator lookup

    Returns:
        NumericalSemigroup whose generators are the minimal generating set

    Raises:
        InvalidArgumentError: On empty, non-positive or non-coprime input

    Examples:
        >>> S = semigroup_from_generators([3, 5, 8])
        >>> S.generators, S.frobenius, S.genus
        ((3, 5), 7, 4)
    """
    gap_list = compute_gaps_from_generators(generators)
    gap_set = frozenset(gap_list)
    minimal = minimal_generating_set_from_gaps(gap_set, cache)

    semigroup = _build(gap_set, minimal)
    logger.debug("Built semigroup %s from generators (genus %d)", semigroup, semigroup.genus)
    return semigroup


def semigroup_from_gaps(
    gaps: Iterable[int], cache: ComputationCache | None = None
) -> NumericalSemigroup:
    """
    Semigroup with the given gap set.

    An empty gap set yields the trivial semigroup (all non-negative
    integers, generated by 1).

    Args:
        gaps: Positive integers, any order, duplicates allowed
        cache: Memoization store for the minimal-generator lookup

    Returns:
        NumericalSemigroup with exactly these gaps

    Raises:
        InvalidArgumentError: If some gap is not positive, or the non-gaps
            are not closed under addition

    Examples:
        >>> semigroup_from_gaps([1, 2, 4, 7]).generators
        (3, 5)
        >>> semigroup_from_gaps([]).generators
        (1,)
    """
    gap_set = frozenset(validate_positive_integers(gaps, "gaps"))

    violation = _find_closure_violation(gap_set)
    if violation is not None:
        a, b = violation
        raise InvalidArgumentError(
            f"Invalid gaps: non-gaps {a} and {b} sum to the gap {a + b}, "
            f"so the complement is not closed under addition"
        )

    minimal = minimal_generating_set_from_gaps(gap_set, cache)
    if not minimal:
        raise InvalidArgumentError(
            f"Invalid gaps: cannot determine generators for {sorted(gap_set)}"
        )

    semigroup = _build(gap_set, minimal)
    logger.debug("Built semigroup %s from %d gaps", semigroup, semigroup.genus)
    return semigroup
