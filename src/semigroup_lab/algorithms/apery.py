"""
Apéry Sets: Smallest semigroup element in each residue class

Ap(S, n) = {s in S : s - n not in S} for a positive element n of S. It has
exactly n elements, one per residue class mod n, and determines S.

Results are memoized in ComputationCache.apery keyed by (gaps, n).
"""

import logging

from semigroup_lab.core.cache import ComputationCache, resolve_cache
from semigroup_lab.core.config import DEFAULT_SEARCH_LIMITS, SearchLimits
from semigroup_lab.core.domain.semigroup import NumericalSemigroup
from semigroup_lab.core.errors import ComputationFailure, InvalidArgumentError
from semigroup_lab.core.math.validation import validate_positive

logger = logging.getLogger(__name__)


def _compute_apery_set(S: NumericalSemigroup, n: int, sweep_factor: int) -> tuple[int, ...]:
    slots = [-1] * n
    slots[0] = 0
    remaining = n - 1

    # Every class representative is at most frobenius + n.
    upper = max(2 * S.frobenius + n, sweep_factor * n)
    for k in range(1, upper + 1):
        if remaining == 0:
            break
        if k in S and slots[k % n] == -1:
            slots[k % n] = k
            remaining -= 1

    if remaining:
        missing = [i for i, value in enumerate(slots) if value == -1]
        logger.error(
            "Apéry sweep of %s mod %d left residues %s unfilled up to %d", S, n, missing, upper
        )
        raise ComputationFailure(
            f"Failed to compute Apéry set of {S} with respect to {n}: "
            f"residues {missing} not found up to {upper}"
        )

    return tuple(slots)


def apery_set(
    S: NumericalSemigroup,
    n: int | None = None,
    cache: ComputationCache | None = None,
    limits: SearchLimits | None = None,
) -> list[int]:
    """
    Apéry set of S with respect to n.

    Args:
        S: Numerical semigroup
        n: Positive element of S (default: the multiplicity)
        cache: Memoization store (default: process cache)
        limits: Sweep bound configuration (default: DEFAULT_SEARCH_LIMITS)

    Returns:
        List of length n; index i holds the smallest element of S congruent
        to i mod n

    Raises:
        InvalidArgumentError: If n is not positive or not an element of S
        ComputationFailure: If the sweep leaves a residue class unfilled

    Examples:
        >>> from semigroup_lab.algorithms.constructors import semigroup_from_generators
        >>> apery_set(semigroup_from_generators([3, 5]))
        [0, 10, 5]
    """
    if n is None:
        n = S.multiplicity
    n = validate_positive(n, "n")
    if n not in S:
        raise InvalidArgumentError(f"n = {n} is not an element of the semigroup {S}")

    sweep_factor = (limits or DEFAULT_SEARCH_LIMITS).apery_sweep_factor
    store = resolve_cache(cache).apery
    result = ComputationCache.lookup(
        store, (S.gaps, n), lambda: _compute_apery_set(S, n, sweep_factor)
    )
    return list(result)
