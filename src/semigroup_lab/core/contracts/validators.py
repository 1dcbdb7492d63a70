"""
Contract Validators: JSON Schema checks for binding-layer payloads

Every value type that crosses the binding layer has one Draft 2020-12 schema
in the schema/ directory of this package:
- numerical_set.json
- partition.json
- numerical_semigroup.json
- poset.json

One ContractValidator per schema is built on first use and shared through
get_validator(). Payload checks collect every violation rather than stopping
at the first one.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from semigroup_lab.core.errors import InvalidArgumentError


CONTRACT_NAMES: Final[tuple[str, ...]] = (
    "numerical_set",
    "partition",
    "numerical_semigroup",
    "poset",
)

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADING
# =============================================================================


class SchemaLoader:
    """
    Reads and meta-validates schema files from one directory.

    Each schema is checked against the Draft 2020-12 metaschema once and then
    kept in memory.
    """

    def __init__(self, schema_dir: Path | None = None):
        self.schema_dir = schema_dir or SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def available(self) -> list[str]:
        """Names of the schema files present, without extension."""
        return sorted(path.stem for path in self.schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Parsed schema for schema_name.

        Raises:
            FileNotFoundError: If schema_name.json does not exist
            ValueError: If the file is not a valid Draft 2020-12 schema
        """
        if schema_name not in self._schemas:
            schema_path = self.schema_dir / f"{schema_name}.json"
            if not schema_path.exists():
                raise FileNotFoundError(f"Schema not found: {schema_path}")

            schema = json.loads(schema_path.read_text(encoding="utf-8"))
            try:
                Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e
            self._schemas[schema_name] = schema

        return self._schemas[schema_name]


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


def _pointer(error: ValidationError) -> str:
    return "/".join(str(part) for part in error.absolute_path)


class ContractValidator:
    """
    Draft 2020-12 validator bound to one named contract.

    Examples:
        >>> validator = get_validator("partition")
        >>> validator.is_valid({"parts": [3, 1]})
        True
        >>> validator.violations({"parts": [2, 0]})
        ["at 'parts/1': 0 is less than the minimum of 1"]
    """

    def __init__(self, contract: str, loader: SchemaLoader | None = None):
        self.contract = contract
        self.schema = (loader or SchemaLoader()).load_schema(contract)
        self._validator = Draft202012Validator(self.schema)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """Every schema violation in data, ordered by location."""
        return iter(sorted(self._validator.iter_errors(data), key=_pointer))

    def is_valid(self, data: Any) -> bool:
        return self._validator.is_valid(data)

    def validate(self, data: Any) -> None:
        """
        Raise the most relevant schema violation, if any.

        Raises:
            jsonschema.ValidationError: If data breaks the contract
        """
        self._validator.validate(data)

    def violations(self, data: Any) -> list[str]:
        """Human-readable description of every violation, empty if valid."""
        messages = []
        for error in self.iter_errors(data):
            pointer = _pointer(error)
            where = f"at '{pointer}': " if pointer else ""
            messages.append(f"{where}{error.message}")
        return messages

    def check(self, data: Any, what: str) -> None:
        """
        Validate a payload at the library boundary.

        Args:
            data: Payload to check
            what: Name of the value for the error message

        Raises:
            InvalidArgumentError: Listing every violation
        """
        messages = self.violations(data)
        if messages:
            raise InvalidArgumentError(f"Invalid {what} payload: " + "; ".join(messages))


# =============================================================================
# REGISTRY
# =============================================================================


_VALIDATORS: Dict[str, ContractValidator] = {}


def get_validator(contract: str) -> ContractValidator:
    """
    Shared validator for one of CONTRACT_NAMES, built on first use.

    Raises:
        KeyError: If contract is not a known contract name
    """
    if contract not in CONTRACT_NAMES:
        raise KeyError(f"Unknown contract {contract!r}; expected one of {list(CONTRACT_NAMES)}")
    if contract not in _VALIDATORS:
        _VALIDATORS[contract] = ContractValidator(contract)
    return _VALIDATORS[contract]


def validate_contract(contract: str, data: Any) -> None:
    """
    Validate data against a named contract.

    Raises:
        jsonschema.ValidationError: If data breaks the contract
    """
    get_validator(contract).validate(data)
