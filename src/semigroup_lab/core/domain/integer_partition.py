"""
Partition: Integer partitions and their Ferrers diagrams

Immutable Pydantic model for a partition (non-increasing positive parts) and
the operations tying partitions to numerical sets:
- gaps (inverse of the gap -> partition bijection)
- conjugate (transpose of the diagram)
- hook lengths, profile
- atom partition, atom monoid gaps, semigroup self-test

Conjugates and hook tables are memoized in a ComputationCache keyed by the
parts tuple.
"""

from typing import Iterable

from pydantic import BaseModel, Field, StrictInt, ValidationError, field_validator

from semigroup_lab.core.cache import ComputationCache, resolve_cache
from semigroup_lab.core.domain.numerical_set import NumericalSet, atom_monoid_gaps, gaps, partition
from semigroup_lab.core.errors import invalid_argument_from
from semigroup_lab.core.math.helpers import (
    compute_conjugate_partition,
    compute_hook_lengths_matrix,
    flatten,
    is_sorted_descending,
)


# =============================================================================
# PARTITION MODEL
# =============================================================================


class Partition(BaseModel):
    """
    Integer partition.

    Parts are re-sorted into non-increasing order on construction. Equality
    and hashing are defined by the parts.

    Examples:
        >>> Partition.from_parts([1, 3, 5, 4]).parts
        (5, 4, 3, 1)
    """

    parts: tuple[StrictInt, ...] = Field(default=(), description="Non-increasing positive parts")

    model_config = {"frozen": True}

    @field_validator("parts")
    @classmethod
    def validate_and_sort_parts(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        bad = [p for p in v if p <= 0]
        if bad:
            raise ValueError(f"All partition parts must be positive integers, got {bad}")
        if not is_sorted_descending(v):
            v = tuple(sorted(v, reverse=True))
        return v

    @classmethod
    def from_parts(cls, parts: Iterable[int]) -> "Partition":
        """
        Build a partition from parts in any order.

        Raises:
            InvalidArgumentError: If some part is not a positive integer
        """
        try:
            return cls(parts=tuple(parts))
        except ValidationError as exc:
            raise invalid_argument_from(exc, "partition") from exc

    def size(self) -> int:
        """Sum of the parts."""
        return sum(self.parts)

    def __len__(self) -> int:
        return len(self.parts)

    def __str__(self) -> str:
        return f"Partition({list(self.parts)})"


# =============================================================================
# BIJECTION WITH NUMERICAL SETS
# =============================================================================


@gaps.register
def _(p: Partition) -> list[int]:
    # The i-th smallest part x (1-indexed) is the gap x + (i - 1).
    return [x + i for i, x in enumerate(sorted(p.parts))]


# =============================================================================
# DIAGRAM OPERATIONS
# =============================================================================


def conjugate(p: Partition, cache: ComputationCache | None = None) -> Partition:
    """
    Transpose of the Ferrers diagram.

    conjugate[j] = #{i : parts[i] >= j} for j in 1..max(parts). Involution:
    conjugate(conjugate(p)) == p.

    Examples:
        >>> conjugate(Partition.from_parts([4, 3, 1])).parts
        (3, 2, 2, 1)
    """
    store = resolve_cache(cache).conjugate
    conj_parts = ComputationCache.lookup(
        store, p.parts, lambda: tuple(compute_conjugate_partition(p.parts))
    )
    return Partition(parts=conj_parts)


def hook_lengths(p: Partition, cache: ComputationCache | None = None) -> list[list[int]]:
    """
    Hook length of every cell, as a ragged table (row i has parts[i] cells).

    hook[i][j] = parts[i] - j + conjugate[j] - i + 1, 1-indexed.

    Examples:
        >>> hook_lengths(Partition.from_parts([3, 2, 1]))
        [[5, 3, 1], [3, 1], [1]]
    """
    store = resolve_cache(cache).hooks

    def compute() -> tuple[tuple[int, ...], ...]:
        conj = compute_conjugate_partition(p.parts)
        return tuple(tuple(row) for row in compute_hook_lengths_matrix(p.parts, conj))

    table = ComputationCache.lookup(store, p.parts, compute)
    return [list(row) for row in table]


def profile(p: Partition) -> list[tuple[int, int]]:
    """
    Boundary of the Ferrers diagram as unit steps.

    Starts at the bottom-left corner and ends at the top-right one; (1, 0) is
    a step right, (0, 1) a step up. The walk has max(parts) + len(parts)
    steps, the length of the whole outline. This is not sum(parts), which
    counts cells rather than boundary edges.

    Examples:
        >>> profile(Partition.from_parts([2, 1]))
        [(1, 0), (0, 1), (1, 0), (0, 1)]
    """
    parts = p.parts
    if not parts:
        return []

    moves: list[tuple[int, int]] = []
    row = len(parts)
    col = 0
    width = parts[0]

    while row >= 1 or col < width:
        while row >= 1 and col < parts[row - 1]:
            moves.append((1, 0))
            col += 1
        while row >= 1 and col >= parts[row - 1]:
            moves.append((0, 1))
            row -= 1

    return moves


# =============================================================================
# ATOM PARTITION
# =============================================================================


@atom_monoid_gaps.register
def _(p: Partition) -> list[int]:
    # Flattened hook lengths, duplicates kept.
    return flatten(hook_lengths(p))


def atom_partition(p: Partition, cache: ComputationCache | None = None) -> list[int]:
    """
    Partition whose gap set is the set of hook lengths of p.

    Same boundary walk as partition() applied to the hook set.
    """
    hook_set = set(flatten(hook_lengths(p, cache)))
    return partition(NumericalSet(gaps=frozenset(hook_set)))


def is_semigroup(p: Partition, cache: ComputationCache | None = None) -> bool:
    """
    True if p is its own atom partition, i.e. p comes from a numerical
    semigroup.

    Examples:
        >>> is_semigroup(Partition.from_parts([4, 2, 1, 1]))
        True
        >>> is_semigroup(Partition.from_parts([2]))
        False
    """
    return atom_partition(p, cache) == list(p.parts)
