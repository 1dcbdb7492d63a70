"""
Shared fixtures for the unit tests.
"""

import pytest

from semigroup_lab.algorithms.constructors import semigroup_from_gaps, semigroup_from_generators
from semigroup_lab.core.cache import ComputationCache


@pytest.fixture
def cache():
    """Fresh ComputationCache isolated from the process default."""
    return ComputationCache()


@pytest.fixture
def trivial():
    """The trivial semigroup: all non-negative integers."""
    return semigroup_from_gaps([])


@pytest.fixture
def s35():
    """<3, 5>: gaps {1, 2, 4, 7}."""
    return semigroup_from_generators([3, 5])


@pytest.fixture
def s345():
    """<3, 4, 5>: gaps {1, 2}, pseudo-symmetric."""
    return semigroup_from_generators([3, 4, 5])


@pytest.fixture
def s456():
    """<4, 5, 6>: gaps {1, 2, 3, 7}."""
    return semigroup_from_generators([4, 5, 6])
