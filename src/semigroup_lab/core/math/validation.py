"""
Validation: Boundary checks for raw integer inputs

All public operations validate their raw arguments here before computing.
Once a value object exists its invariants are trusted and not re-checked on
every accessor call.

Every check raises InvalidArgumentError (a ValueError) with the offending
value and the expected constraint in the message.
"""

from math import gcd
from functools import reduce
from typing import Any, Hashable, Iterable, Sequence

from semigroup_lab.core.errors import InvalidArgumentError


# =============================================================================
# SCALARS
# =============================================================================


def validate_integer(value: Any, name: str) -> int:
    """
    Validation that value is a plain integer (bool excluded).

    Args:
        value: Value to check
        name: Parameter name for the error message

    Returns:
        The value as int

    Raises:
        InvalidArgumentError: If value is not an integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    return int(value)


def validate_positive(value: Any, name: str) -> int:
    """
    Validation that value is a positive integer.

    Raises:
        InvalidArgumentError: If value is not an integer or value <= 0
    """
    value = validate_integer(value, name)
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be positive, got {value}")
    return value


def validate_non_negative(value: Any, name: str) -> int:
    """
    Validation that value is a non-negative integer.

    Raises:
        InvalidArgumentError: If value is not an integer or value < 0
    """
    value = validate_integer(value, name)
    if value < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {value}")
    return value


# =============================================================================
# SEQUENCES
# =============================================================================


def validate_positive_integers(values: Iterable[Any], name: str) -> list[int]:
    """
    Validation that every element is a positive integer.

    Args:
        values: Iterable of candidate integers
        name: Collection name for the error message

    Returns:
        The elements as a list, input order preserved

    Raises:
        InvalidArgumentError: On the first non-positive or non-integer element
    """
    result = []
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(f"All {name} must be integers, got {value!r}")
        if value <= 0:
            raise InvalidArgumentError(f"All {name} must be positive integers, got {value}")
        result.append(int(value))
    return result


def validate_non_increasing(values: Sequence[int], name: str = "sequence") -> None:
    """
    Validation that a sequence is in non-increasing order.

    Raises:
        InvalidArgumentError: If some element is smaller than its successor
    """
    for i in range(len(values) - 1):
        if values[i] < values[i + 1]:
            raise InvalidArgumentError(
                f"{name} must be non-increasing: position {i} has {values[i]} < {values[i + 1]}"
            )


def validate_coprime(values: Sequence[int], name: str = "generators") -> None:
    """
    Validation that gcd(values) == 1.

    Raises:
        InvalidArgumentError: If the greatest common divisor exceeds 1
    """
    divisor = reduce(gcd, values, 0)
    if divisor != 1:
        raise InvalidArgumentError(
            f"{name} must be coprime (gcd = 1), got gcd={divisor} for {list(values)}"
        )


def validate_generators(generators: Iterable[Any]) -> tuple[int, ...]:
    """
    Full validation of a generator list.

    Generators must be non-empty, positive and coprime. Duplicates are
    collapsed and the result is sorted ascending.

    Args:
        generators: Candidate generators in any order

    Returns:
        Sorted tuple of distinct generators

    Raises:
        InvalidArgumentError: On empty, non-positive or non-coprime input

    Examples:
        >>> validate_generators([5, 3, 5])
        (3, 5)
    """
    values = validate_positive_integers(generators, "generators")
    if not values:
        raise InvalidArgumentError("Generator set cannot be empty")
    distinct = tuple(sorted(set(values)))
    validate_coprime(distinct)
    return distinct


# =============================================================================
# POSETS
# =============================================================================


def validate_relation_pairs(relations: Iterable[Any]) -> list[tuple[Hashable, Hashable]]:
    """
    Validation that every relation is a pair of hashable elements.

    Args:
        relations: Iterable of candidate (a, b) pairs (tuples or lists)

    Returns:
        The relations as a list of 2-tuples

    Raises:
        InvalidArgumentError: Naming the first relation that is not a pair
    """
    pairs = []
    for relation in relations:
        if not isinstance(relation, (tuple, list)) or len(relation) != 2:
            raise InvalidArgumentError(f"Relation must be a pair (a, b), got {relation!r}")
        a, b = relation
        if not isinstance(a, Hashable) or not isinstance(b, Hashable):
            raise InvalidArgumentError(f"Relation elements must be hashable, got {relation!r}")
        pairs.append((a, b))
    return pairs


def validate_poset_axioms(
    elements: frozenset[Hashable],
    relations: frozenset[tuple[Hashable, Hashable]],
) -> None:
    """
    Validation that relations define a partial order on elements.

    - Reflexive: (a, a) present for every element
    - Antisymmetric: (a, b) and (b, a) both present only if a == b
    - Transitive: (a, b) and (b, c) present implies (a, c) present

    Transitivity is O(|relations|^2), fine for posets over gap sets.

    Raises:
        InvalidArgumentError: Naming the missing or offending pair
    """
    for a, b in relations:
        if a not in elements or b not in elements:
            raise InvalidArgumentError(
                f"Relation ({a!r}, {b!r}) refers to an element outside the poset"
            )

    for element in elements:
        if (element, element) not in relations:
            raise InvalidArgumentError(
                f"Poset must be reflexive: missing ({element!r}, {element!r})"
            )

    for a, b in relations:
        if a != b and (b, a) in relations:
            raise InvalidArgumentError(
                f"Poset must be antisymmetric: both ({a!r}, {b!r}) and ({b!r}, {a!r}) present"
            )

    successors: dict[Hashable, set[Hashable]] = {}
    for a, b in relations:
        successors.setdefault(a, set()).add(b)

    for a, b in relations:
        for c in successors.get(b, ()):
            if (a, c) not in relations:
                raise InvalidArgumentError(
                    f"Poset must be transitive: have ({a!r}, {b!r}) and ({b!r}, {c!r}) "
                    f"but missing ({a!r}, {c!r})"
                )
