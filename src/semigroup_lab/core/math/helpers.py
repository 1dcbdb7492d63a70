"""
Helpers: Pure combinatorial primitives

Low-level functions with no dependency on the value types:
- Conjugate (transpose) of a partition given as parts
- Hook-length table of a Ferrers diagram
- Flattening of ragged tables
- Removal of sums of two elements (minimal generating sets)
- Counting gaps above a value (effective weights)
"""

from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")


def flatten(nested: Iterable[Iterable[T]]) -> list[T]:
    """
    Flatten a sequence of sequences, preserving order and duplicates.

    Examples:
        >>> flatten([[1, 2], [3, 4, 5]])
        [1, 2, 3, 4, 5]
    """
    result: list[T] = []
    for row in nested:
        result.extend(row)
    return result


def remove_sum_of_two_elements(values: Iterable[int]) -> set[int]:
    """
    Drop every element that is the sum of two (not necessarily distinct)
    elements of the same set. O(n^2).

    Examples:
        >>> sorted(remove_sum_of_two_elements({2, 3, 4, 5, 6}))
        [2, 3]
    """
    pool = set(values)
    sums = {x + y for x in pool for y in pool if x + y in pool}
    return pool - sums


def compute_conjugate_partition(parts: Sequence[int]) -> list[int]:
    """
    Transpose of the Ferrers diagram.

    conjugate[j-1] = #{i : parts[i] >= j} for j in 1..max(parts).

    Examples:
        >>> compute_conjugate_partition([4, 3, 1])
        [3, 2, 2, 1]
    """
    if not parts:
        return []

    max_part = max(parts)
    return [sum(1 for part in parts if part >= j) for j in range(1, max_part + 1)]


def compute_hook_lengths_matrix(parts: Sequence[int], conjugate: Sequence[int]) -> list[list[int]]:
    """
    Hook length of every cell of the diagram, row by row.

    With 1-indexed row i and column j:
        hook[i][j] = parts[i] - j + conjugate[j] - i + 1

    Args:
        parts: Non-increasing partition parts
        conjugate: Conjugate parts of the same partition

    Returns:
        Ragged table; row i has parts[i] entries

    Examples:
        >>> compute_hook_lengths_matrix([3, 2, 1], [3, 2, 1])
        [[5, 3, 1], [3, 1], [1]]
    """
    table = []
    for i, row_length in enumerate(parts, start=1):
        table.append(
            [row_length - j + conjugate[j - 1] - i + 1 for j in range(1, row_length + 1)]
        )
    return table


def boxes_above(gaps: Iterable[int], value: int) -> int:
    """Number of gaps strictly greater than value."""
    return sum(1 for gap in gaps if gap > value)


def is_sorted_descending(values: Sequence[int]) -> bool:
    """True if values are in non-increasing order."""
    return all(values[i] >= values[i + 1] for i in range(len(values) - 1))
