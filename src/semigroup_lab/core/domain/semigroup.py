"""
NumericalSemigroup: Cofinite additive submonoids of the non-negative integers

Immutable Pydantic model layering minimal generators and semigroup-specific
derived fields (genus, multiplicity, embedding dimension) on top of the gap
set. Instances are produced by the factories in
semigroup_lab.algorithms.constructors; direct construction is validated but
does not check closure under addition.

INVARIANTS (checked at construction):
1. genus == |gaps|
2. frobenius == max(gaps), or -1 without gaps
3. multiplicity == min(generators) == smallest positive non-gap
4. embedding_dimension == |generators|, generators distinct and sorted
5. gcd(generators) == 1

Two semigroups are equal iff their gap sets are equal.
"""

from functools import reduce
from math import gcd

from pydantic import Field, StrictInt, model_validator

from semigroup_lab.core.domain.numerical_set import AbstractNumericalSet
from semigroup_lab.core.math.validation import validate_integer


# =============================================================================
# MODEL
# =============================================================================


class NumericalSemigroup(AbstractNumericalSet):
    """
    Numerical semigroup with its minimal generating set.

    Membership uses the `in` operator:

        >>> from semigroup_lab.algorithms.constructors import semigroup_from_generators
        >>> S = semigroup_from_generators([3, 5])
        >>> 8 in S, 7 in S
        (True, False)
    """

    generators: tuple[StrictInt, ...] = Field(
        ..., min_length=1, description="Minimal generators, ascending"
    )
    genus: int = Field(..., ge=0, description="Number of gaps")
    multiplicity: int = Field(..., ge=1, description="Smallest positive element")
    embedding_dimension: int = Field(..., ge=1, description="Number of minimal generators")

    @model_validator(mode="after")
    def validate_semigroup_invariants(self) -> "NumericalSemigroup":
        gens = self.generators

        if self.genus != len(self.gaps):
            raise ValueError(f"genus {self.genus} must equal the number of gaps {len(self.gaps)}")

        if any(g <= 0 for g in gens):
            raise ValueError(f"generators must be positive, got {list(gens)}")
        if any(gens[i] >= gens[i + 1] for i in range(len(gens) - 1)):
            raise ValueError(f"generators must be distinct and ascending, got {list(gens)}")

        if self.embedding_dimension != len(gens):
            raise ValueError(
                f"embedding_dimension {self.embedding_dimension} must equal "
                f"the number of generators {len(gens)}"
            )

        if reduce(gcd, gens, 0) != 1:
            raise ValueError(f"generators must be coprime, got {list(gens)}")

        smallest_element = 1
        while smallest_element in self.gaps:
            smallest_element += 1
        if not (self.multiplicity == gens[0] == smallest_element):
            raise ValueError(
                f"multiplicity {self.multiplicity} must equal the smallest generator "
                f"{gens[0]} and the smallest positive non-gap {smallest_element}"
            )

        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumericalSemigroup):
            return NotImplemented
        return self.gaps == other.gaps

    def __hash__(self) -> int:
        return hash(self.gaps)

    def conductor(self) -> int:
        """Frobenius number + 1: every integer from here on is an element."""
        return self.frobenius + 1

    def __str__(self) -> str:
        return "<" + ", ".join(str(g) for g in self.generators) + ">"


# =============================================================================
# ACCESSORS
# =============================================================================


def genus(S: NumericalSemigroup) -> int:
    return S.genus


def generators(S: NumericalSemigroup) -> list[int]:
    return list(S.generators)


def embedding_dimension(S: NumericalSemigroup) -> int:
    return S.embedding_dimension


def conductor(S: NumericalSemigroup) -> int:
    return S.conductor()


# =============================================================================
# MEMBERSHIP
# =============================================================================


def membership(S: NumericalSemigroup, n: int) -> bool:
    """
    True if n is an element of S.

    Negative integers are never elements; every integer beyond the Frobenius
    number is.
    """
    return n in S


def elements_up_to(S: NumericalSemigroup, n: int) -> list[int]:
    """
    All elements in [0, n], ascending. Empty if n < 0.

    Raises:
        InvalidArgumentError: If n is not an integer

    Examples:
        >>> from semigroup_lab.algorithms.constructors import semigroup_from_generators
        >>> elements_up_to(semigroup_from_generators([3, 5]), 5)
        [0, 3, 5]
    """
    n = validate_integer(n, "n")
    return [k for k in range(n + 1) if k not in S.gaps]
