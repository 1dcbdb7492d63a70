"""
Tests for Poset and the gap poset of a semigroup

Checks:
1. Construction with axiom validation
2. Cover relations, minimal / maximal elements
3. add_element / add_relation return new posets
4. gap_poset, void, void_poset, type
"""

import pytest
from pydantic import ValidationError

from semigroup_lab.advanced.posets import (
    gap_poset,
    pseudofrobenius_numbers,
    type_semigroup,
    void,
    void_poset,
)
from semigroup_lab.algorithms.constructors import semigroup_from_generators
from semigroup_lab.core.domain.poset import Poset
from semigroup_lab.core.errors import InvalidArgumentError


@pytest.fixture
def divisors_of_six():
    """{1, 2, 3, 6} ordered by divisibility."""
    elements = [1, 2, 3, 6]
    return Poset.from_relations(
        elements, [(a, b) for a in elements for b in elements if b % a == 0]
    )


def chain(n: int) -> Poset:
    return Poset.from_relations(range(n), [(a, b) for a in range(n) for b in range(n) if a <= b])


# =============================================================================
# CONSTRUCTION
# =============================================================================


class TestPosetConstruction:
    """Tests for Poset.from_relations"""

    def test_valid(self, divisors_of_six) -> None:
        assert len(divisors_of_six) == 4
        assert divisors_of_six.less_or_equal(2, 6)
        assert not divisors_of_six.less_or_equal(2, 3)

    def test_empty(self) -> None:
        P = Poset.from_relations([], [])
        assert P.minimal_elements() == []
        assert P.maximal_elements() == []
        assert P.cover_relations() == []

    def test_not_reflexive(self) -> None:
        with pytest.raises(InvalidArgumentError, match="reflexive"):
            Poset.from_relations([1, 2], [(1, 1), (1, 2)])

    def test_not_antisymmetric(self) -> None:
        with pytest.raises(InvalidArgumentError, match="antisymmetric"):
            Poset.from_relations([1, 2], [(1, 1), (2, 2), (1, 2), (2, 1)])

    def test_not_transitive(self) -> None:
        relations = [(1, 1), (2, 2), (3, 3), (1, 2), (2, 3)]
        with pytest.raises(InvalidArgumentError, match=r"missing \(1, 3\)"):
            Poset.from_relations([1, 2, 3], relations)

    def test_direct_construction_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            Poset(elements=frozenset({1}), relations=frozenset())

    @pytest.mark.parametrize("relation", [(1, 1, 1), (1,), 1, "ab"])
    def test_relation_not_a_pair(self, relation) -> None:
        with pytest.raises(InvalidArgumentError, match="must be a pair"):
            Poset.from_relations([1, 2], [(2, 2), relation])

    def test_unhashable_relation_element(self) -> None:
        with pytest.raises(InvalidArgumentError, match="hashable"):
            Poset.from_relations([1], [([1], 1)])

    def test_unhashable_element(self) -> None:
        with pytest.raises(InvalidArgumentError, match="hashable"):
            Poset.from_relations([[1]], [])

    def test_string_elements(self) -> None:
        P = Poset.from_relations(["a", "b"], [("a", "a"), ("b", "b"), ("a", "b")])
        assert P.cover_relations() == [("a", "b")]
        assert P.minimal_elements() == ["a"]


# =============================================================================
# STRUCTURE
# =============================================================================


class TestPosetStructure:
    """Tests for cover relations and extremal elements"""

    def test_cover_relations(self, divisors_of_six) -> None:
        assert divisors_of_six.cover_relations() == [(1, 2), (1, 3), (2, 6), (3, 6)]

    def test_extremal_elements(self, divisors_of_six) -> None:
        assert divisors_of_six.minimal_elements() == [1]
        assert divisors_of_six.maximal_elements() == [6]

    def test_chain(self) -> None:
        P = chain(4)
        assert P.cover_relations() == [(0, 1), (1, 2), (2, 3)]
        assert P.minimal_elements() == [0]
        assert P.maximal_elements() == [3]

    def test_antichain(self) -> None:
        P = Poset.from_relations([3, 1, 2], [(1, 1), (2, 2), (3, 3)])
        assert P.minimal_elements() == [1, 2, 3]
        assert P.maximal_elements() == [1, 2, 3]
        assert P.cover_relations() == []


# =============================================================================
# NEW POSETS
# =============================================================================


class TestPosetUpdates:
    """Tests for add_element / add_relation"""

    def test_add_element(self, divisors_of_six) -> None:
        Q = divisors_of_six.add_element(4)
        assert 4 in Q.elements
        assert Q.minimal_elements() == [1, 4]
        assert Q.maximal_elements() == [4, 6]
        assert 4 not in divisors_of_six.elements

    def test_add_existing_element_is_noop(self, divisors_of_six) -> None:
        assert divisors_of_six.add_element(2) == divisors_of_six

    def test_add_relation_computes_transitive_closure(self, divisors_of_six) -> None:
        Q = divisors_of_six.add_element(4).add_relation(6, 4)
        for a in (1, 2, 3, 6):
            assert Q.less_or_equal(a, 4)
        assert Q.maximal_elements() == [4]
        assert (6, 4) not in divisors_of_six.relations

    def test_add_relation_unknown_element(self, divisors_of_six) -> None:
        with pytest.raises(InvalidArgumentError, match="must be in the poset"):
            divisors_of_six.add_relation(1, 5)

    def test_add_relation_creating_cycle(self) -> None:
        with pytest.raises(InvalidArgumentError, match="antisymmetric"):
            chain(3).add_relation(2, 0)


# =============================================================================
# GAP POSET
# =============================================================================


class TestGapPoset:
    """Tests for gap_poset / void / void_poset / type"""

    def test_gap_poset_3_5(self, s35) -> None:
        P = gap_poset(s35)
        assert P.elements == frozenset({1, 2, 4, 7})
        assert P.cover_relations() == [(1, 4), (2, 7), (4, 7)]
        assert P.minimal_elements() == [1, 2]
        assert P.maximal_elements() == [7]

    def test_gap_poset_of_trivial(self, trivial) -> None:
        assert len(gap_poset(trivial)) == 0

    def test_void(self, s35, s345, trivial) -> None:
        assert void(s35) == [7]
        assert void(s345) == [1, 2]
        assert void(trivial) == []
        assert void(semigroup_from_generators([3, 7, 8])) == [4, 5]

    def test_pseudofrobenius_alias(self, s35) -> None:
        assert pseudofrobenius_numbers(s35) == void(s35)

    @pytest.mark.parametrize(
        "gens",
        [[3, 5], [3, 4, 5], [4, 5, 6], [3, 7, 8], [5, 7, 9], [6, 9, 20], [4, 6, 9]],
    )
    def test_void_equals_maximal_gap_poset_elements(self, gens: list[int]) -> None:
        S = semigroup_from_generators(gens)
        assert set(void(S)) == set(gap_poset(S).maximal_elements())
        assert S.frobenius in void(S)

    def test_void_poset_is_antichain(self, s345) -> None:
        P = void_poset(s345)
        assert P.elements == frozenset({1, 2})
        assert P.cover_relations() == []

    def test_type(self, s35, s345, trivial) -> None:
        assert type_semigroup(s35) == 1
        assert type_semigroup(s345) == 2
        assert type_semigroup(trivial) == 0

    @pytest.mark.parametrize("a, b", [(2, 3), (3, 5), (4, 9), (5, 7), (7, 11)])
    def test_two_generators_have_single_void(self, a: int, b: int) -> None:
        S = semigroup_from_generators([a, b])
        assert void(S) == [S.frobenius]
        assert type_semigroup(S) == 1
