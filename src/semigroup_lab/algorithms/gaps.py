"""
Gap computation from a generator list.

Two generators use the closed form of the coin problem; three or more use a
reachability sweep up to a bound that is guaranteed to exceed the Frobenius
number.
"""

from typing import Iterable

from semigroup_lab.core.math.validation import validate_generators


def _gaps_two_generators(a: int, b: int) -> list[int]:
    # Non-representable n in [1, ab - a - b]: n = ab - ia - jb with i, j >= 1.
    product = a * b
    gaps = {
        product - i * a - j * b
        for i in range(1, b)
        for j in range(1, a)
        if product - i * a - j * b > 0
    }
    return sorted(gaps)


def _gaps_by_sweep(gens: tuple[int, ...]) -> list[int]:
    bound = 2 * gens[0] * gens[-1]
    reachable = [False] * (bound + 1)
    reachable[0] = True
    for n in range(1, bound + 1):
        reachable[n] = any(g <= n and reachable[n - g] for g in gens)

    frobenius = max((n for n in range(bound + 1) if not reachable[n]), default=-1)
    return [n for n in range(1, frobenius + 1) if not reachable[n]]


def compute_gaps_from_generators(generators: Iterable[int]) -> list[int]:
    """
    Gaps of the semigroup generated by the given integers.

    Args:
        generators: Positive coprime integers, any order, duplicates allowed

    Returns:
        Ascending list of gaps (empty when 1 is a generator)

    Raises:
        InvalidArgumentError: On empty, non-positive or non-coprime input

    Examples:
        >>> compute_gaps_from_generators([3, 5])
        [1, 2, 4, 7]
        >>> compute_gaps_from_generators([3, 4, 5])
        [1, 2]
    """
    gens = validate_generators(generators)
    if gens[0] == 1:
        return []
    if len(gens) == 2:
        return _gaps_two_generators(*gens)
    return _gaps_by_sweep(gens)
