"""
Tests for Apéry sets
"""

import pytest

from semigroup_lab.algorithms.apery import apery_set
from semigroup_lab.algorithms.constructors import semigroup_from_generators
from semigroup_lab.core.config import SearchLimits
from semigroup_lab.core.errors import InvalidArgumentError


class TestAperySet:
    """Tests for apery_set"""

    def test_semigroup_3_5(self, s35, cache) -> None:
        assert apery_set(s35, 3, cache) == [0, 10, 5]

    def test_default_modulus_is_multiplicity(self, s35, cache) -> None:
        assert apery_set(s35, cache=cache) == apery_set(s35, 3, cache)

    def test_other_modulus(self, s35, cache) -> None:
        # smallest elements = 0, 6, 12, 3, 9 mod 5
        assert apery_set(s35, 5, cache) == [0, 6, 12, 3, 9]

    def test_three_generators(self, s456, cache) -> None:
        assert apery_set(s456, 4, cache) == [0, 5, 6, 11]

    def test_trivial(self, trivial, cache) -> None:
        assert apery_set(trivial, cache=cache) == [0]
        assert apery_set(trivial, 3, cache) == [0, 1, 2]

    @pytest.mark.parametrize(
        "gens, n",
        [([3, 5], 8), ([7, 11], 7), ([6, 9, 20], 20), ([4, 5, 6], 9)],
    )
    def test_structure(self, gens: list[int], n: int, cache) -> None:
        S = semigroup_from_generators(gens)
        ap = apery_set(S, n, cache)
        assert len(ap) == n
        assert ap[0] == 0
        for i, w in enumerate(ap):
            assert w in S
            assert w % n == i
            assert (w - n) not in S

    def test_frobenius_from_apery(self, cache) -> None:
        S = semigroup_from_generators([7, 11])
        assert max(apery_set(S, 7, cache)) - 7 == S.frobenius

    def test_modulus_not_in_semigroup(self, s35, cache) -> None:
        with pytest.raises(InvalidArgumentError, match="not an element"):
            apery_set(s35, 4, cache)

    @pytest.mark.parametrize("n", [0, -3])
    def test_non_positive_modulus(self, s35, n: int, cache) -> None:
        with pytest.raises(InvalidArgumentError, match="positive"):
            apery_set(s35, n, cache)

    def test_custom_sweep_factor(self, s35, cache) -> None:
        limits = SearchLimits(apery_sweep_factor=1)
        assert apery_set(s35, 3, cache, limits) == [0, 10, 5]
