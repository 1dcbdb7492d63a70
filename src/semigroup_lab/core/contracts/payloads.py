"""
Payloads: Marshalling of value objects to and from plain dicts

*_to_payload produces a dict that satisfies the matching JSON Schema
contract. *_from_payload validates a dict against its contract and rebuilds
the value through the regular factories, so every invariant is
re-established rather than trusted.
"""

from typing import Any, Dict

from semigroup_lab.algorithms.constructors import semigroup_from_gaps
from semigroup_lab.core.contracts.validators import get_validator
from semigroup_lab.core.domain.integer_partition import Partition
from semigroup_lab.core.domain.numerical_set import NumericalSet
from semigroup_lab.core.domain.poset import Poset
from semigroup_lab.core.domain.semigroup import NumericalSemigroup
from semigroup_lab.core.errors import InvalidArgumentError
from semigroup_lab.core.math.validation import validate_non_increasing


# =============================================================================
# NUMERICAL SET
# =============================================================================


def numerical_set_to_payload(ns: NumericalSet) -> Dict[str, Any]:
    return {"gaps": ns.sorted_gaps(), "frobenius": ns.frobenius}


def numerical_set_from_payload(data: Dict[str, Any]) -> NumericalSet:
    """
    Rebuild a NumericalSet.

    Raises:
        InvalidArgumentError: If the payload breaks the contract or its
            frobenius field disagrees with the gaps
    """
    get_validator("numerical_set").check(data, "numerical set")
    ns = NumericalSet.from_gaps(data["gaps"])
    if ns.frobenius != data["frobenius"]:
        raise InvalidArgumentError(
            f"Invalid numerical set payload: frobenius {data['frobenius']} "
            f"does not match the largest gap {ns.frobenius}"
        )
    return ns


# =============================================================================
# PARTITION
# =============================================================================


def partition_to_payload(p: Partition) -> Dict[str, Any]:
    return {"parts": list(p.parts)}


def partition_from_payload(data: Dict[str, Any]) -> Partition:
    """
    Rebuild a Partition.

    Raises:
        InvalidArgumentError: If the payload breaks the contract or the
            parts are not non-increasing
    """
    get_validator("partition").check(data, "partition")
    validate_non_increasing(data["parts"], "partition parts")
    return Partition.from_parts(data["parts"])


# =============================================================================
# NUMERICAL SEMIGROUP
# =============================================================================


def numerical_semigroup_to_payload(S: NumericalSemigroup) -> Dict[str, Any]:
    return {
        "gaps": S.sorted_gaps(),
        "generators": list(S.generators),
        "frobenius": S.frobenius,
        "genus": S.genus,
        "multiplicity": S.multiplicity,
        "embedding_dimension": S.embedding_dimension,
    }


def numerical_semigroup_from_payload(data: Dict[str, Any]) -> NumericalSemigroup:
    """
    Rebuild a NumericalSemigroup from its gaps and check every other field
    against the rebuilt value.

    Raises:
        InvalidArgumentError: If the payload breaks the contract, the gaps
            are not closed, or a derived field (generators included)
            disagrees with the gaps
    """
    get_validator("numerical_semigroup").check(data, "numerical semigroup")
    S = semigroup_from_gaps(data["gaps"])

    rebuilt = numerical_semigroup_to_payload(S)
    for field in ("generators", "frobenius", "genus", "multiplicity", "embedding_dimension"):
        if data[field] != rebuilt[field]:
            raise InvalidArgumentError(
                f"Invalid numerical semigroup payload: {field} {data[field]} "
                f"does not match the gaps (expected {rebuilt[field]})"
            )
    return S


# =============================================================================
# POSET
# =============================================================================


def poset_to_payload(P: Poset) -> Dict[str, Any]:
    try:
        elements = sorted(P.elements)
        relations = sorted(P.relations)
    except TypeError:
        elements = list(P.elements)
        relations = list(P.relations)
    return {"elements": elements, "relations": [[a, b] for a, b in relations]}


def poset_from_payload(data: Dict[str, Any]) -> Poset:
    """
    Rebuild a Poset.

    Raises:
        InvalidArgumentError: If the payload breaks the contract or the
            relations are not a partial order
    """
    get_validator("poset").check(data, "poset")
    return Poset.from_relations(data["elements"], data["relations"])
