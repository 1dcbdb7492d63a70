"""
Search limits for bounded scans.

Several computations walk the integers upward until a condition is met. The
bounds below guard those walks against malformed inputs; they are
configurable because pathological but legal inputs exist.
"""

from dataclasses import dataclass
from typing import Final


# =============================================================================
# DEFAULTS
# =============================================================================

# Maximum value tried when scanning upward for the smallest positive non-gap
MULTIPLICITY_SCAN_LIMIT_DEFAULT: Final[int] = 100_000

# Apéry sweep runs up to max(2 * frobenius + n, APERY_SWEEP_FACTOR * n)
APERY_SWEEP_FACTOR_DEFAULT: Final[int] = 10


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SearchLimits:
    """Bounds for upward integer scans.

    - multiplicity_scan_limit: last candidate tried by multiplicity()
    - apery_sweep_factor: the n-multiple lower bound of the Apéry sweep
    """

    multiplicity_scan_limit: int = MULTIPLICITY_SCAN_LIMIT_DEFAULT
    apery_sweep_factor: int = APERY_SWEEP_FACTOR_DEFAULT

    def __post_init__(self) -> None:
        if self.multiplicity_scan_limit < 1:
            raise ValueError(
                f"multiplicity_scan_limit must be positive, got {self.multiplicity_scan_limit}"
            )
        if self.apery_sweep_factor < 1:
            raise ValueError(
                f"apery_sweep_factor must be positive, got {self.apery_sweep_factor}"
            )


DEFAULT_SEARCH_LIMITS: Final[SearchLimits] = SearchLimits()
