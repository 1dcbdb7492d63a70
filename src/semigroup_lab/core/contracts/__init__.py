"""
JSON Schema contracts and payload marshalling for the binding layer.
"""

from semigroup_lab.core.contracts.payloads import (
    numerical_semigroup_from_payload,
    numerical_semigroup_to_payload,
    numerical_set_from_payload,
    numerical_set_to_payload,
    partition_from_payload,
    partition_to_payload,
    poset_from_payload,
    poset_to_payload,
)
from semigroup_lab.core.contracts.validators import (
    CONTRACT_NAMES,
    ContractValidator,
    SchemaLoader,
    get_validator,
    validate_contract,
)

__all__ = [
    # Validators
    "CONTRACT_NAMES",
    "ContractValidator",
    "SchemaLoader",
    "get_validator",
    "validate_contract",
    # Payloads
    "numerical_semigroup_from_payload",
    "numerical_semigroup_to_payload",
    "numerical_set_from_payload",
    "numerical_set_to_payload",
    "partition_from_payload",
    "partition_to_payload",
    "poset_from_payload",
    "poset_to_payload",
]
