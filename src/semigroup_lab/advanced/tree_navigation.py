"""
Tree Navigation: The genus tree of numerical semigroups

Every semigroup S of genus g > 0 has a unique parent of genus g - 1,
obtained by adding back its Frobenius number. Its children have genus g + 1
and are obtained by removing one effective generator (a minimal generator
greater than the Frobenius number). The root is the trivial semigroup.

STATES:
    ROOT (genus 0)  --get_children-->  genus 1  --get_children-->  ...
    genus g         --get_parent---->  genus g - 1, ..., ROOT
"""

import logging
from collections import deque

from semigroup_lab.algorithms.constructors import semigroup_from_gaps, semigroup_from_generators
from semigroup_lab.algorithms.minimal_generators import is_minimal_generator
from semigroup_lab.core.cache import ComputationCache
from semigroup_lab.core.domain.semigroup import NumericalSemigroup
from semigroup_lab.core.errors import InvalidArgumentError, PreconditionError
from semigroup_lab.core.math.validation import (
    validate_coprime,
    validate_integer,
    validate_non_negative,
)

logger = logging.getLogger(__name__)


# =============================================================================
# PARENT / CHILDREN
# =============================================================================


def get_parent(
    S: NumericalSemigroup, cache: ComputationCache | None = None
) -> NumericalSemigroup | None:
    """
    Parent of S in the genus tree: S with its Frobenius number added.

    Returns:
        Semigroup of genus genus(S) - 1, or None for the trivial semigroup
    """
    if S.genus == 0:
        return None
    return semigroup_from_gaps(S.gaps - {S.frobenius}, cache)


def can_be_new_frobenius(S: NumericalSemigroup, n: int) -> bool:
    """
    True if n > frobenius(S) can be removed from S, becoming the new
    Frobenius number.

    That is the case iff n is in S and is not a + b with a, b positive
    elements of S.
    """
    n = validate_integer(n, "n")
    if n <= S.frobenius:
        return False
    return is_minimal_generator(S, n)


def effective_generators(S: NumericalSemigroup) -> list[int]:
    """
    Minimal generators greater than the Frobenius number.

    They all lie in [frobenius + 1, frobenius + multiplicity]. The trivial
    semigroup has the single effective generator 1.

    Examples:
        >>> from semigroup_lab.algorithms.constructors import semigroup_from_generators
        >>> effective_generators(semigroup_from_generators([3, 4, 5]))
        [3, 4, 5]
        >>> effective_generators(semigroup_from_generators([3, 5]))
        []
    """
    if S.genus == 0:
        return [1]
    frobenius = S.frobenius
    return [
        n
        for n in range(frobenius + 1, frobenius + S.multiplicity + 1)
        if can_be_new_frobenius(S, n)
    ]


def get_children(
    S: NumericalSemigroup, cache: ComputationCache | None = None
) -> list[NumericalSemigroup]:
    """
    Children of S in the genus tree, one per effective generator, in
    increasing order of the removed generator.

    Candidates that do not yield a valid semigroup are discarded.
    """
    children = []
    for c in effective_generators(S):
        try:
            children.append(semigroup_from_gaps(S.gaps | {c}, cache))
        except InvalidArgumentError as exc:
            logger.debug("Discarded child of %s obtained by removing %d: %s", S, c, exc)
    return children


def remove_minimal_generator(
    S: NumericalSemigroup, g: int, cache: ComputationCache | None = None
) -> NumericalSemigroup:
    """
    Semigroup generated by the minimal generators of S other than g.

    Args:
        S: Numerical semigroup
        g: Minimal generator to drop

    Returns:
        New semigroup generated by the remaining generators

    Raises:
        PreconditionError: If g is not a minimal generator, or the only one
        InvalidArgumentError: If g is not an integer, or the remaining generators
            are not coprime

    Examples:
        >>> from semigroup_lab.algorithms.constructors import semigroup_from_generators
        >>> remove_minimal_generator(semigroup_from_generators([3, 5, 7]), 7).generators
        (3, 5)
    """
    g = validate_integer(g, "g")
    if not is_minimal_generator(S, g):
        raise PreconditionError(f"{g} is not a minimal generator of {S}")
    if S.embedding_dimension == 1:
        raise PreconditionError(f"Cannot remove the only generator of {S}")

    remaining = [x for x in S.generators if x != g]
    validate_coprime(remaining, "remaining generators")
    return semigroup_from_generators(remaining, cache)


# =============================================================================
# PATHS
# =============================================================================


def genus_path(
    S: NumericalSemigroup, cache: ComputationCache | None = None
) -> list[NumericalSemigroup]:
    """
    [S, parent(S), parent(parent(S)), ...] down to the trivial semigroup
    inclusive. Length genus(S) + 1.
    """
    path = [S]
    current = get_parent(S, cache)
    while current is not None:
        path.append(current)
        current = get_parent(current, cache)
    return path


def ancestors(
    S: NumericalSemigroup, n: int, cache: ComputationCache | None = None
) -> list[NumericalSemigroup]:
    """
    Up to n successive parents of S, stopping early at the trivial semigroup.

    Raises:
        InvalidArgumentError: If n is negative
    """
    n = validate_non_negative(n, "n")
    result = []
    current = S
    for _ in range(n):
        current = get_parent(current, cache)
        if current is None:
            break
        result.append(current)
    return result


def descendants(
    S: NumericalSemigroup, depth: int, cache: ComputationCache | None = None
) -> list[NumericalSemigroup]:
    """
    All semigroups within depth child-steps of S, breadth first, S excluded.

    Every level is included, not only the last one. Empty for depth <= 0.

    Raises:
        InvalidArgumentError: If depth is not an integer
    """
    depth = validate_integer(depth, "depth")
    if depth <= 0:
        return []

    result = []
    queue: deque[tuple[NumericalSemigroup, int]] = deque([(S, 0)])
    while queue:
        current, level = queue.popleft()
        if level > 0:
            result.append(current)
        if level < depth:
            queue.extend((child, level + 1) for child in get_children(current, cache))

    logger.debug("Enumerated %d descendants of %s up to depth %d", len(result), S, depth)
    return result
