"""
catdomain/core/counting.py

Domain registry that counts how often each index is produced.

Typical usage is a three-step protocol driven by the caller:
  1. read the data once, interning every value (counts accumulate)
  2. trim the registry with trim_below_count or trim_below_size
  3. re-read the data, rebuilding handles against the new, smaller index space

Trimming invalidates every previously issued index. Handles detect this via
the registry generation and raise StaleHandle when read.
"""

from __future__ import annotations

import logging
from typing import Hashable, List, Optional

import numpy as np

from catdomain.core.errors import EmptyDomain
from catdomain.core.registry import DomainRegistry, T

logger = logging.getLogger(__name__)


class CountingDomainRegistry(DomainRegistry[T]):
    """DomainRegistry with a per-index occurrence counter."""

    def __init__(self, kind: Optional[Hashable] = None, *, identity: bool = False):
        super().__init__(kind, identity=identity)
        self._counts: List[int] = []

    def _intern(self, value: T) -> int:
        i = super()._intern(value)
        if i == len(self._counts):
            self._counts.append(0)
        self._counts[i] += 1
        return i

    def count(self, value: T) -> int:
        """Number of index() calls for `value` since the last trim (0 if absent)."""
        with self._lock:
            i = self._backward.get(self._key(value))
            return 0 if i is None else self._counts[i]

    def counts(self) -> np.ndarray:
        """Copy of the counts, parallel to index order."""
        with self._lock:
            return np.asarray(self._counts, dtype=np.int64)

    def _ranking(self) -> np.ndarray:
        """Indices ordered by descending count, ties by ascending index."""
        # stable sort on negated counts keeps original index order within ties
        return np.argsort(-self.counts(), kind="stable")

    def _remap(self, keep: np.ndarray) -> None:
        """Rebuild storage from the old indices in `keep`, in that order."""
        old_size = len(self._forward)
        forward = [self._forward[int(i)] for i in keep]
        self._rebuild(forward)
        self._counts = [0] * len(forward)
        logger.info(
            "trimmed domain %r: kept %d of %d values (generation %d)",
            self.kind, len(forward), old_size, self._generation,
        )

    def trim_below_count(self, threshold: int) -> None:
        """
        Keep only values counted at least `threshold` times, densely re-indexed
        by descending count.

        Raises:
            EmptyDomain: If no value reaches the threshold (registry unchanged)
        """
        with self._lock:
            order = self._ranking()
            counts = np.asarray(self._counts, dtype=np.int64)
            keep = order[counts[order] >= threshold]
            if keep.size == 0:
                raise EmptyDomain(f"no value in domain {self.kind!r} has count >= {threshold}")
            self._remap(keep)

    def trim_below_size(self, max_size: int) -> None:
        """
        Keep only the `max_size` most frequent values, densely re-indexed by
        descending count.

        Raises:
            EmptyDomain: If `max_size` <= 0 or the registry is empty (registry unchanged)
        """
        with self._lock:
            if max_size <= 0 or not self._forward:
                raise EmptyDomain(
                    f"trimming domain {self.kind!r} of size {len(self._forward)} "
                    f"to {max_size} leaves no values"
                )
            self._remap(self._ranking()[:max_size])
