"""
Computation Cache: Memoization of expensive derived quantities

Four maps, each keyed by immutable values:
- apery:      (gap frozenset, modulus) -> Apéry set
- min_gens:   gap frozenset            -> minimal generators
- hooks:      partition parts tuple    -> hook-length table
- conjugate:  partition parts tuple    -> conjugate parts

Policy: read-if-present, else compute-and-insert. No eviction beyond the
explicit clear operations. Values are pure functions of their keys, so a
concurrent recomputation simply overwrites an equal value (last writer wins).

A ComputationCache can be passed explicitly to every memoized function; when
none is given the process default from default_cache() is used.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Hashable, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V")


# =============================================================================
# STATS
# =============================================================================


@dataclass(frozen=True)
class CacheStats:
    """Number of entries held by each map."""

    apery_size: int
    min_gen_size: int
    hooks_size: int
    conjugate_size: int

    def as_dict(self) -> dict[str, int]:
        return {
            "apery_size": self.apery_size,
            "min_gen_size": self.min_gen_size,
            "hooks_size": self.hooks_size,
            "conjugate_size": self.conjugate_size,
        }


# =============================================================================
# CACHE
# =============================================================================


class ComputationCache:
    """
    Explicit memoization store.

    Create one per batch (or per test) to keep results isolated; use
    default_cache() for the shared process-wide instance.
    """

    def __init__(self) -> None:
        self.apery: dict[tuple[frozenset[int], int], tuple[int, ...]] = {}
        self.min_gens: dict[frozenset[int], tuple[int, ...]] = {}
        self.hooks: dict[tuple[int, ...], tuple[tuple[int, ...], ...]] = {}
        self.conjugate: dict[tuple[int, ...], tuple[int, ...]] = {}

    @staticmethod
    def lookup(store: dict, key: Hashable, compute: Callable[[], V]) -> V:
        """
        Return store[key], computing and inserting it on a miss.

        Args:
            store: One of the cache maps
            key: Immutable key
            compute: Zero-argument function producing the value

        Returns:
            Cached or freshly computed value
        """
        if key in store:
            return store[key]
        logger.debug("Cache miss, computing entry %d", len(store) + 1)
        value = compute()
        store[key] = value
        return value

    def clear(self) -> None:
        """Empty all four maps."""
        self.apery.clear()
        self.min_gens.clear()
        self.hooks.clear()
        self.conjugate.clear()
        logger.debug("Cleared all computation caches")

    def clear_apery(self) -> None:
        """Empty the Apéry map only."""
        self.apery.clear()

    def stats(self) -> CacheStats:
        return CacheStats(
            apery_size=len(self.apery),
            min_gen_size=len(self.min_gens),
            hooks_size=len(self.hooks),
            conjugate_size=len(self.conjugate),
        )


_DEFAULT_CACHE = ComputationCache()


def default_cache() -> ComputationCache:
    """Process-wide cache used when no cache is passed."""
    return _DEFAULT_CACHE


def resolve_cache(cache: ComputationCache | None) -> ComputationCache:
    return _DEFAULT_CACHE if cache is None else cache


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def clear_all_caches() -> None:
    """Empty every map of the default cache."""
    _DEFAULT_CACHE.clear()


def clear_apery_cache() -> None:
    """Empty the Apéry map of the default cache."""
    _DEFAULT_CACHE.clear_apery()


def cache_stats() -> CacheStats:
    """Entry counts of the default cache."""
    return _DEFAULT_CACHE.stats()
