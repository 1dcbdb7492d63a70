"""
NumericalSet: Cofinite subsets of the non-negative integers

Immutable Pydantic models for a numerical set described by its gaps, plus the
free functions that work on anything carrying a gap set (numerical sets and
numerical semigroups alike):
- gaps / frobenius_number accessors
- multiplicity, small elements
- atom monoid gaps
- partition (the gap -> partition boundary-walk bijection)

INVARIANTS:
1. Gaps are positive integers (0 belongs to every numerical set)
2. frobenius == max(gaps), or -1 when there are no gaps
3. Models are frozen; every change builds a new instance
"""

from functools import singledispatch
from typing import Any, Iterable

from pydantic import BaseModel, Field, StrictInt, ValidationError, field_validator, model_validator

from semigroup_lab.core.config import DEFAULT_SEARCH_LIMITS, SearchLimits
from semigroup_lab.core.errors import ComputationFailure, invalid_argument_from


# =============================================================================
# GAP-SET CAPABILITY
# =============================================================================


class AbstractNumericalSet(BaseModel):
    """
    Shared base for every model described by a gap set.

    Subclasses: NumericalSet, NumericalSemigroup. Free functions in this
    module are written once against this base.
    """

    gaps: frozenset[StrictInt] = Field(
        default_factory=frozenset, description="Positive integers not in the set"
    )
    frobenius: int = Field(-1, ge=-1, description="Largest gap, -1 if there are none")

    model_config = {"frozen": True}

    @field_validator("gaps")
    @classmethod
    def validate_gaps_positive(cls, v: frozenset[int]) -> frozenset[int]:
        """0 is always an element, negative integers never are."""
        bad = sorted(g for g in v if g <= 0)
        if bad:
            raise ValueError(f"gaps must be positive integers, got {bad}")
        return v

    @model_validator(mode="after")
    def validate_frobenius_is_max_gap(self) -> "AbstractNumericalSet":
        expected = max(self.gaps, default=-1)
        if self.frobenius != expected:
            raise ValueError(
                f"frobenius must equal the largest gap ({expected}), got {self.frobenius}"
            )
        return self

    def __contains__(self, n: object) -> bool:
        if isinstance(n, bool) or not isinstance(n, int):
            return False
        return n >= 0 and n not in self.gaps

    def sorted_gaps(self) -> list[int]:
        return sorted(self.gaps)


# =============================================================================
# NUMERICAL SET MODEL
# =============================================================================


class NumericalSet(AbstractNumericalSet):
    """
    Numerical set given by its gaps.

    The Frobenius number is derived from the gaps when not supplied.

    Examples:
        >>> ns = NumericalSet.from_gaps([5, 2, 1, 4, 2])
        >>> ns.frobenius
        5
    """

    @model_validator(mode="before")
    @classmethod
    def derive_frobenius(cls, data: Any) -> Any:
        if isinstance(data, dict) and "frobenius" not in data:
            gap_set = frozenset(data.get("gaps", ()))
            data = {**data, "gaps": gap_set}
            if all(isinstance(g, int) and not isinstance(g, bool) for g in gap_set):
                data["frobenius"] = max(gap_set, default=-1)
        return data

    @classmethod
    def from_gaps(cls, gaps: Iterable[int]) -> "NumericalSet":
        """
        Build a numerical set from any iterable of gaps.

        Duplicates collapse; input order is irrelevant.

        Raises:
            InvalidArgumentError: If some gap is not a positive integer
        """
        try:
            return cls(gaps=frozenset(gaps))
        except ValidationError as exc:
            raise invalid_argument_from(exc, "numerical set") from exc

    def __str__(self) -> str:
        return f"NumericalSet(gaps={self.sorted_gaps()}, frobenius={self.frobenius})"


# =============================================================================
# ACCESSORS
# =============================================================================


@singledispatch
def gaps(obj: Any) -> Any:
    """Gaps of a numerical set, semigroup or partition."""
    raise TypeError(f"gaps() is not defined for {type(obj).__name__}")


@gaps.register
def _(ns: AbstractNumericalSet) -> frozenset[int]:
    return ns.gaps


def frobenius_number(ns: AbstractNumericalSet) -> int:
    return ns.frobenius


# =============================================================================
# DERIVED QUANTITIES
# =============================================================================


def multiplicity(ns: AbstractNumericalSet, limits: SearchLimits | None = None) -> int:
    """
    Smallest positive integer that is not a gap.

    Args:
        ns: Numerical set or semigroup
        limits: Scan bound (default: DEFAULT_SEARCH_LIMITS)

    Returns:
        Multiplicity (1 when there are no gaps)

    Raises:
        ComputationFailure: If no non-gap is found within the scan limit
    """
    limit = (limits or DEFAULT_SEARCH_LIMITS).multiplicity_scan_limit
    m = 1
    while m in ns.gaps:
        m += 1
        if m > limit:
            raise ComputationFailure(
                f"No non-gap found in [1, {limit}]; increase multiplicity_scan_limit "
                f"or check the gap set"
            )
    return m


def small_elements(ns: AbstractNumericalSet) -> list[int]:
    """
    Non-gaps in [0, frobenius), ascending.

    Examples:
        >>> small_elements(NumericalSet.from_gaps([1, 2, 4, 5, 7]))
        [0, 3, 6]
    """
    return [s for s in range(ns.frobenius) if s not in ns.gaps]


@singledispatch
def atom_monoid_gaps(obj: Any) -> Any:
    """Gaps of the atom monoid of a numerical set or partition."""
    raise TypeError(f"atom_monoid_gaps() is not defined for {type(obj).__name__}")


@atom_monoid_gaps.register
def _(ns: AbstractNumericalSet) -> set[int]:
    # x is an atom gap iff x + t is a gap for some non-gap t <= F. O(F^2).
    gap_set = ns.gaps
    if not gap_set:
        return set()

    frobenius = ns.frobenius
    non_gaps = [t for t in range(frobenius + 1) if t not in gap_set]
    return {
        x
        for x in range(2 * frobenius + 1)
        if any(x + t in gap_set for t in non_gaps)
    }


def partition(ns: AbstractNumericalSet) -> list[int]:
    """
    Boundary-walk bijection from a gap set to a partition.

    Walk i from 0 to the Frobenius number keeping x, the number of non-gaps
    seen so far. Every gap i with x > 0 closes a row of length x. The rows
    sorted descending form the partition. Exactly undone by
    gaps(Partition.from_parts(...)).

    Examples:
        >>> partition(NumericalSet.from_gaps([1, 2, 4, 7]))
        [4, 2, 1, 1]
    """
    rows = []
    non_gaps_seen = 0
    for i in range(ns.frobenius + 1):
        if i in ns.gaps:
            if non_gaps_seen > 0:
                rows.append(non_gaps_seen)
        else:
            non_gaps_seen += 1

    rows.sort(reverse=True)
    return rows
