"""
catdomain/pipeline/vocabulary.py

Count -> trim -> reload protocol for building a reduced vocabulary.

The source is read twice: once to count every value, then again after the
trim to build observations against the new dense index space. Values pruned
by the trim are skipped on the second pass, not re-interned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Hashable, Iterable, List, Optional

import numpy as np

from catdomain.core.counting import CountingDomainRegistry
from catdomain.core.scope import DomainScope
from catdomain.variables.handles import CategoricalObservation

logger = logging.getLogger(__name__)


@dataclass
class VocabularyResult:
    """
    Outcome of build_vocabulary.

    Attributes:
        registry: The trimmed counting registry
        observations: One observation per retained occurrence, in source order
        dropped: Number of occurrences whose value was trimmed away
    """
    registry: CountingDomainRegistry
    observations: List[CategoricalObservation]
    dropped: int

    @property
    def indices(self) -> np.ndarray:
        return np.fromiter((o.index for o in self.observations), dtype=np.int64, count=len(self.observations))


def build_vocabulary(
    source: Callable[[], Iterable[Hashable]],
    *,
    scope: Optional[DomainScope] = None,
    kind: Hashable = "token",
    min_count: Optional[int] = None,
    max_size: Optional[int] = None,
) -> VocabularyResult:
    """
    Build a trimmed vocabulary from a re-readable source.

    Args:
        source: Zero-argument callable returning a fresh iterable of values
        scope: Scope holding the registry (a private scope if None)
        kind: Kind label of the registry inside `scope`
        min_count: Drop values seen fewer times than this
        max_size: Keep at most this many values (applied after min_count)

    Returns:
        VocabularyResult over the second pass of the source

    Raises:
        ValueError: If neither min_count nor max_size is given
        EmptyDomain: If trimming leaves no values
    """
    if min_count is None and max_size is None:
        raise ValueError("build_vocabulary needs min_count, max_size, or both")
    if scope is None:
        scope = DomainScope()
    registry = scope.domain(kind, counting=True)

    registry.index_all(source())
    if min_count is not None:
        registry.trim_below_count(min_count)
    if max_size is not None:
        registry.trim_below_size(max_size)

    observations: List[CategoricalObservation] = []
    dropped = 0
    for value in source():
        if value in registry:
            observations.append(CategoricalObservation(registry, value))
        else:
            dropped += 1

    logger.info(
        "vocabulary %r: %d values, %d occurrences kept, %d dropped",
        kind, registry.alloc_size(), len(observations), dropped,
    )
    return VocabularyResult(registry=registry, observations=observations, dropped=dropped)
