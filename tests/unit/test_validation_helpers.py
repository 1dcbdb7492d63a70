"""
Tests for validation, helpers, configuration and the error taxonomy

Checks:
1. Boundary validation of integers and generator lists
2. Poset axiom validation with descriptive messages
3. Partition primitives (conjugate, hook lengths)
4. SearchLimits configuration
5. ErrorKind discriminators
"""

import pytest

from semigroup_lab.core.config import (
    APERY_SWEEP_FACTOR_DEFAULT,
    DEFAULT_SEARCH_LIMITS,
    MULTIPLICITY_SCAN_LIMIT_DEFAULT,
    SearchLimits,
)
from semigroup_lab.core.errors import (
    ComputationFailure,
    ErrorKind,
    InvalidArgumentError,
    PreconditionError,
    SemigroupLabError,
)
from semigroup_lab.core.math.helpers import (
    boxes_above,
    compute_conjugate_partition,
    compute_hook_lengths_matrix,
    flatten,
    is_sorted_descending,
    remove_sum_of_two_elements,
)
from semigroup_lab.core.math.validation import (
    validate_coprime,
    validate_generators,
    validate_integer,
    validate_non_increasing,
    validate_non_negative,
    validate_poset_axioms,
    validate_positive,
    validate_positive_integers,
)


# =============================================================================
# SCALAR VALIDATION
# =============================================================================


class TestScalarValidation:
    """Tests for validate_integer / validate_positive / validate_non_negative"""

    def test_valid_values_returned(self) -> None:
        assert validate_integer(-3, "x") == -3
        assert validate_positive(5, "x") == 5
        assert validate_non_negative(0, "x") == 0

    def test_bool_is_not_an_integer(self) -> None:
        with pytest.raises(InvalidArgumentError, match="must be an integer"):
            validate_integer(True, "flag")

    def test_float_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            validate_positive(2.0, "n")

    def test_zero_not_positive(self) -> None:
        with pytest.raises(InvalidArgumentError, match="n must be positive, got 0"):
            validate_positive(0, "n")

    def test_negative_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="non-negative"):
            validate_non_negative(-1, "depth")


# =============================================================================
# GENERATOR VALIDATION
# =============================================================================


class TestGeneratorValidation:
    """Tests for validate_generators and friends"""

    def test_sorted_and_deduplicated(self) -> None:
        assert validate_generators([5, 3, 5, 3]) == (3, 5)

    def test_empty_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="cannot be empty"):
            validate_generators([])

    def test_non_positive_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="positive"):
            validate_generators([3, 0, 5])

    def test_non_coprime_rejected_with_gcd(self) -> None:
        with pytest.raises(InvalidArgumentError, match="gcd=2"):
            validate_generators([4, 6])

    def test_coprime_accepts_pairwise_non_coprime(self) -> None:
        # gcd(6, 10, 15) == 1 although no pair is coprime
        validate_coprime([6, 10, 15])

    def test_positive_integers_preserve_order(self) -> None:
        assert validate_positive_integers([3, 1, 2], "gaps") == [3, 1, 2]

    def test_non_increasing(self) -> None:
        validate_non_increasing([4, 2, 2, 1])
        with pytest.raises(InvalidArgumentError, match="position 1"):
            validate_non_increasing([4, 2, 3])


# =============================================================================
# POSET AXIOMS
# =============================================================================


class TestPosetAxioms:
    """Tests for validate_poset_axioms"""

    def test_chain_is_valid(self) -> None:
        elements = frozenset({1, 2, 3})
        relations = frozenset({(1, 1), (2, 2), (3, 3), (1, 2), (2, 3), (1, 3)})
        validate_poset_axioms(elements, relations)

    def test_missing_reflexive_pair_named(self) -> None:
        with pytest.raises(InvalidArgumentError, match=r"missing \(2, 2\)"):
            validate_poset_axioms(frozenset({1, 2}), frozenset({(1, 1)}))

    def test_antisymmetry_violation(self) -> None:
        relations = frozenset({(1, 1), (2, 2), (1, 2), (2, 1)})
        with pytest.raises(InvalidArgumentError, match="antisymmetric"):
            validate_poset_axioms(frozenset({1, 2}), relations)

    def test_transitivity_violation(self) -> None:
        relations = frozenset({(1, 1), (2, 2), (3, 3), (1, 2), (2, 3)})
        with pytest.raises(InvalidArgumentError, match="transitive"):
            validate_poset_axioms(frozenset({1, 2, 3}), relations)

    def test_relation_outside_elements(self) -> None:
        with pytest.raises(InvalidArgumentError, match="outside the poset"):
            validate_poset_axioms(frozenset({1}), frozenset({(1, 1), (1, 9)}))


# =============================================================================
# HELPERS
# =============================================================================


class TestHelpers:
    """Tests for the combinatorial primitives"""

    def test_flatten_keeps_duplicates(self) -> None:
        assert flatten([[2, 1], [1], []]) == [2, 1, 1]

    def test_remove_sum_of_two_elements(self) -> None:
        assert remove_sum_of_two_elements({3, 5, 6, 8, 9, 10}) == {3, 5}

    def test_conjugate_of_staircase(self) -> None:
        assert compute_conjugate_partition([3, 2, 1]) == [3, 2, 1]

    def test_conjugate_of_empty(self) -> None:
        assert compute_conjugate_partition([]) == []

    def test_hook_lengths_matrix(self) -> None:
        parts = [4, 2, 1, 1]
        conj = compute_conjugate_partition(parts)
        assert compute_hook_lengths_matrix(parts, conj) == [[7, 4, 2, 1], [4, 1], [2], [1]]

    def test_boxes_above(self) -> None:
        assert boxes_above([1, 2, 4, 7], 3) == 2
        assert boxes_above([1, 2, 4, 7], 7) == 0

    def test_is_sorted_descending(self) -> None:
        assert is_sorted_descending([5, 5, 1])
        assert not is_sorted_descending([1, 2])


# =============================================================================
# CONFIG & ERRORS
# =============================================================================


class TestSearchLimits:
    """Tests for SearchLimits"""

    def test_defaults(self) -> None:
        assert DEFAULT_SEARCH_LIMITS.multiplicity_scan_limit == MULTIPLICITY_SCAN_LIMIT_DEFAULT
        assert DEFAULT_SEARCH_LIMITS.apery_sweep_factor == APERY_SWEEP_FACTOR_DEFAULT

    def test_non_positive_limits_rejected(self) -> None:
        with pytest.raises(ValueError, match="multiplicity_scan_limit"):
            SearchLimits(multiplicity_scan_limit=0)
        with pytest.raises(ValueError, match="apery_sweep_factor"):
            SearchLimits(apery_sweep_factor=0)

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_SEARCH_LIMITS.apery_sweep_factor = 3  # type: ignore[misc]


class TestErrorTaxonomy:
    """Tests for the exception hierarchy"""

    def test_kinds(self) -> None:
        assert InvalidArgumentError("x").kind is ErrorKind.INVALID_ARGUMENT
        assert PreconditionError("x").kind is ErrorKind.PRECONDITION
        assert ComputationFailure("x").kind is ErrorKind.COMPUTATION_FAILURE

    def test_builtin_bases(self) -> None:
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(PreconditionError, ValueError)
        assert issubclass(ComputationFailure, RuntimeError)
        for cls in (InvalidArgumentError, PreconditionError, ComputationFailure):
            assert issubclass(cls, SemigroupLabError)
