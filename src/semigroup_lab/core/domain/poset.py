"""
Poset: Finite partially ordered sets

Immutable Pydantic model holding elements and the order relation as a set of
pairs (a, b) meaning a <= b. The partial-order axioms are validated eagerly
on construction; add_element / add_relation return new posets.
"""

from typing import Any, Hashable, Iterable

from pydantic import BaseModel, Field, ValidationError, model_validator

from semigroup_lab.core.errors import InvalidArgumentError, invalid_argument_from
from semigroup_lab.core.math.validation import validate_poset_axioms, validate_relation_pairs


def _ordered(items: Iterable[Any]) -> list[Any]:
    # Deterministic output when elements are comparable.
    items = list(items)
    try:
        return sorted(items)
    except TypeError:
        return items


# =============================================================================
# POSET MODEL
# =============================================================================


class Poset(BaseModel):
    """
    Partially ordered set.

    Examples:
        >>> elements = [1, 2, 3, 6]
        >>> relations = [(a, b) for a in elements for b in elements if b % a == 0]
        >>> p = Poset.from_relations(elements, relations)
        >>> p.minimal_elements(), p.maximal_elements()
        ([1], [6])
    """

    elements: frozenset[Any] = Field(default_factory=frozenset, description="Ground set")
    relations: frozenset[tuple[Any, Any]] = Field(
        default_factory=frozenset, description="Pairs (a, b) with a <= b"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_partial_order(self) -> "Poset":
        validate_poset_axioms(self.elements, self.relations)
        return self

    @classmethod
    def from_relations(
        cls, elements: Iterable[Hashable], relations: Iterable[tuple[Hashable, Hashable]]
    ) -> "Poset":
        """
        Build a poset, validating reflexivity, antisymmetry and transitivity.

        Raises:
            InvalidArgumentError: Naming the missing or offending pair, or a
                relation that is not a pair
        """
        pairs = validate_relation_pairs(relations)
        try:
            ground_set = frozenset(elements)
        except TypeError as exc:
            raise InvalidArgumentError(f"Poset elements must be hashable: {exc}") from exc

        try:
            return cls(elements=ground_set, relations=frozenset(pairs))
        except ValidationError as exc:
            raise invalid_argument_from(exc, "poset") from exc

    def less_or_equal(self, a: Hashable, b: Hashable) -> bool:
        return (a, b) in self.relations

    def __len__(self) -> int:
        return len(self.elements)

    # -------------------------------------------------------------------------
    # Structure
    # -------------------------------------------------------------------------

    def cover_relations(self) -> list[tuple[Any, Any]]:
        """
        Hasse diagram edges: pairs a < b with no c strictly between them.
        O(|elements| * |relations|).
        """
        covers = []
        for a, b in self.relations:
            if a == b:
                continue
            between = any(
                c != a and c != b and (a, c) in self.relations and (c, b) in self.relations
                for c in self.elements
            )
            if not between:
                covers.append((a, b))
        return _ordered(covers)

    def minimal_elements(self) -> list[Any]:
        """Elements with no strictly smaller element."""
        return _ordered(
            x
            for x in self.elements
            if not any(y != x and (y, x) in self.relations for y in self.elements)
        )

    def maximal_elements(self) -> list[Any]:
        """Elements with no strictly larger element."""
        return _ordered(
            x
            for x in self.elements
            if not any(y != x and (x, y) in self.relations for y in self.elements)
        )

    # -------------------------------------------------------------------------
    # Construction of new posets
    # -------------------------------------------------------------------------

    def add_element(self, element: Hashable) -> "Poset":
        """New poset with element added, related only to itself."""
        if element in self.elements:
            return self
        return Poset.from_relations(
            self.elements | {element}, self.relations | {(element, element)}
        )

    def add_relation(self, a: Hashable, b: Hashable) -> "Poset":
        """
        New poset with a <= b added and the transitive closure recomputed.

        Raises:
            InvalidArgumentError: If a or b is not an element, or the new
                relation breaks antisymmetry
        """
        if a not in self.elements or b not in self.elements:
            raise InvalidArgumentError(
                f"Both elements must be in the poset, got ({a!r}, {b!r})"
            )
        if (a, b) in self.relations:
            return self

        closure = set(self.relations)
        closure.add((a, b))
        changed = True
        while changed:
            changed = False
            for x, y in list(closure):
                for y2, z in list(closure):
                    if y == y2 and (x, z) not in closure:
                        closure.add((x, z))
                        changed = True

        return Poset.from_relations(self.elements, closure)
