"""
Tests for navigation of the genus tree

Checks:
1. Parent: genus drops by one, the trivial semigroup is the root
2. Effective generators and children
3. Parent/children consistency
4. remove_minimal_generator preconditions
5. genus_path / ancestors / descendants
"""

import pytest

from semigroup_lab.advanced.tree_navigation import (
    ancestors,
    can_be_new_frobenius,
    descendants,
    effective_generators,
    genus_path,
    get_children,
    get_parent,
    remove_minimal_generator,
)
from semigroup_lab.algorithms.constructors import semigroup_from_gaps, semigroup_from_generators
from semigroup_lab.core.errors import InvalidArgumentError, PreconditionError


# =============================================================================
# PARENT
# =============================================================================


class TestParent:
    """Tests for get_parent"""

    def test_root_has_no_parent(self, trivial) -> None:
        assert get_parent(trivial) is None

    def test_parent_of_3_5(self, s35, cache) -> None:
        P = get_parent(s35, cache)
        assert P.gaps == frozenset({1, 2, 4})
        assert P.generators == (3, 5, 7)
        assert P.frobenius == 4

    def test_parent_of_genus_one_is_root(self, trivial) -> None:
        assert get_parent(semigroup_from_generators([2, 3])) == trivial


# =============================================================================
# CHILDREN
# =============================================================================


class TestChildren:
    """Tests for effective_generators / can_be_new_frobenius / get_children"""

    def test_can_be_new_frobenius(self, s35, s345) -> None:
        assert not can_be_new_frobenius(s35, 8)
        assert can_be_new_frobenius(s345, 5)
        assert not can_be_new_frobenius(s345, 2)
        assert not can_be_new_frobenius(s345, 6)

    def test_can_be_new_frobenius_non_integer(self, s345) -> None:
        with pytest.raises(InvalidArgumentError, match="n must be an integer"):
            can_be_new_frobenius(s345, "5")

    def test_effective_generators(self, trivial, s35, s345) -> None:
        assert effective_generators(trivial) == [1]
        assert effective_generators(semigroup_from_generators([2, 3])) == [2, 3]
        assert effective_generators(s345) == [3, 4, 5]
        assert effective_generators(s35) == []

    def test_children_of_root(self, trivial, cache) -> None:
        children = get_children(trivial, cache)
        assert children == [semigroup_from_generators([2, 3])]

    def test_children_of_3_4_5(self, s345, cache) -> None:
        children = get_children(s345, cache)
        assert [c.generators for c in children] == [(4, 5, 6, 7), (3, 5, 7), (3, 4)]
        assert all(c.genus == s345.genus + 1 for c in children)

    def test_leaf(self, s35, cache) -> None:
        assert get_children(s35, cache) == []

    @pytest.mark.parametrize(
        "gens",
        [[2, 3], [3, 5], [3, 4, 5], [4, 5, 6], [3, 7, 8], [5, 7, 9], [7, 11]],
    )
    def test_semigroup_is_child_of_its_parent(self, gens: list[int], cache) -> None:
        S = semigroup_from_generators(gens)
        parent = get_parent(S, cache)
        assert parent.genus == S.genus - 1
        assert S in get_children(parent, cache)


# =============================================================================
# REMOVING GENERATORS
# =============================================================================


class TestRemoveMinimalGenerator:
    """Tests for remove_minimal_generator"""

    def test_remove(self, s35) -> None:
        S = semigroup_from_generators([3, 5, 7])
        assert remove_minimal_generator(S, 7) == s35

    def test_remove_from_three_generators(self, s345) -> None:
        assert remove_minimal_generator(s345, 5).generators == (3, 4)

    def test_not_a_minimal_generator(self, s35) -> None:
        with pytest.raises(PreconditionError, match="not a minimal generator"):
            remove_minimal_generator(s35, 6)

    def test_only_generator(self, trivial) -> None:
        with pytest.raises(PreconditionError, match="only generator"):
            remove_minimal_generator(trivial, 1)

    def test_remaining_not_coprime(self) -> None:
        with pytest.raises(InvalidArgumentError, match="coprime"):
            remove_minimal_generator(semigroup_from_generators([2, 3]), 3)

    def test_non_integer_generator_rejected(self, s35) -> None:
        with pytest.raises(InvalidArgumentError, match="g must be an integer"):
            remove_minimal_generator(s35, "3")


# =============================================================================
# PATHS
# =============================================================================


class TestPaths:
    """Tests for genus_path / ancestors / descendants"""

    def test_genus_path(self, s35, trivial, cache) -> None:
        path = genus_path(s35, cache)
        assert [S.genus for S in path] == [4, 3, 2, 1, 0]
        assert path[0] == s35
        assert path[-1] == trivial

    def test_genus_path_of_root(self, trivial) -> None:
        assert genus_path(trivial) == [trivial]

    def test_ancestors(self, s35, cache) -> None:
        assert [S.genus for S in ancestors(s35, 2, cache)] == [3, 2]
        assert len(ancestors(s35, 10, cache)) == 4
        assert ancestors(s35, 0, cache) == []

    def test_ancestors_negative(self, s35) -> None:
        with pytest.raises(InvalidArgumentError):
            ancestors(s35, -1)

    def test_descendants_of_root(self, trivial, cache) -> None:
        level_two = descendants(trivial, 2, cache)
        assert level_two == [
            semigroup_from_generators([2, 3]),
            semigroup_from_gaps([1, 2]),
            semigroup_from_gaps([1, 3]),
        ]

    def test_descendants_counts_by_genus(self, trivial, cache) -> None:
        # Number of numerical semigroups of genus 1, 2, 3, 4: 1, 2, 4, 7
        result = descendants(trivial, 4, cache)
        counts = [sum(1 for S in result if S.genus == g) for g in range(1, 5)]
        assert counts == [1, 2, 4, 7]

    def test_descendants_depth_zero(self, s345) -> None:
        assert descendants(s345, 0) == []

    def test_descendants_non_integer_depth(self, s345) -> None:
        with pytest.raises(InvalidArgumentError, match="depth must be an integer"):
            descendants(s345, 1.5)
