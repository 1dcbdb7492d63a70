"""
Errors: Taxonomy of failures raised by semigroup_lab

Every public operation validates its raw inputs at the boundary and raises one
of the exceptions below. Each exception carries an ErrorKind discriminator so
that a binding layer can map failures to its own result type without
inspecting class names.

KINDS:
1. INVALID_ARGUMENT: bad input (non-positive values, empty or non-coprime
   generator sets, malformed partitions, invalid poset relations)
2. PRECONDITION: the operation needs a property the input lacks
   (e.g. removing something that is not a minimal generator)
3. COMPUTATION_FAILURE: internal consistency violation; never expected
   with valid inputs
"""

from enum import Enum

from pydantic import ValidationError


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Discriminator for the failure taxonomy"""

    INVALID_ARGUMENT = "invalid_argument"
    PRECONDITION = "precondition"
    COMPUTATION_FAILURE = "computation_failure"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SemigroupLabError(Exception):
    """Base class for all semigroup_lab errors."""

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT


class InvalidArgumentError(SemigroupLabError, ValueError):
    """
    Input violates a documented constraint.

    Raised for non-positive values where a positive integer is required,
    empty generator lists, non-coprime generators, moduli outside the
    semigroup, malformed partition parts and invalid poset relations.
    """

    kind = ErrorKind.INVALID_ARGUMENT


class PreconditionError(SemigroupLabError, ValueError):
    """
    Operation requires a property the argument does not have.

    Example: remove_minimal_generator() on an element that is not a minimal
    generator, or on the only generator.
    """

    kind = ErrorKind.PRECONDITION


class ComputationFailure(SemigroupLabError, RuntimeError):
    """
    Internal consistency violation.

    Indicates a bug or a pathological input that slipped past validation.
    Never returned silently as a partial result.
    """

    kind = ErrorKind.COMPUTATION_FAILURE


# =============================================================================
# CONVERSION
# =============================================================================


def invalid_argument_from(exc: ValidationError, what: str) -> InvalidArgumentError:
    """
    Convert a pydantic ValidationError into InvalidArgumentError.

    Args:
        exc: Error raised by a model constructor
        what: Name of the value being built (e.g. 'partition')

    Returns:
        InvalidArgumentError with the first validator message
    """
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = first.get("msg", str(exc))
        if location:
            message = f"{location}: {message}"
    else:
        message = str(exc)
    return InvalidArgumentError(f"Invalid {what}: {message}")
