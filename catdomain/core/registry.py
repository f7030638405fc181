"""
catdomain/core/registry.py

Bidirectional value <-> index map for one categorical kind.

A DomainRegistry interns values into densely-packed integers 0..N-1 in order
of first appearance:
  - forward:  index -> value (list, append-only except on remap)
  - backward: value -> index (dict keyed by equality, or by identity)

Invariants:
  - backward[key(forward[i])] == i for every valid i
  - len(forward) == len(backward)
  - an index never changes meaning except through an explicit remap, which
    bumps `generation`

All operations run under one re-entrant lock, so two concurrent first-time
interns of the same value always agree on its index.
"""

from __future__ import annotations

import operator
import threading
from typing import Any, Dict, Generic, Hashable, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

from catdomain.core.errors import IndexOutOfRange

T = TypeVar("T")


class DomainRegistry(Generic[T]):
    """
    Interning table for one categorical kind.

    Attributes:
        kind: Label of the categorical kind this registry serves (informational)
        identity: If True, values are keyed by object identity instead of equality
    """

    def __init__(self, kind: Optional[Hashable] = None, *, identity: bool = False):
        self.kind = kind
        self.identity = identity
        self._forward: List[T] = []
        self._backward: Dict[Any, int] = {}
        self._generation: int = 0
        self._lock = threading.RLock()

    def _key(self, value: T) -> Any:
        # forward holds a strong reference, so id() cannot be recycled while registered
        return id(value) if self.identity else value

    def _intern(self, value: T) -> int:
        """Look up or insert `value`. Caller holds the lock."""
        key = self._key(value)
        i = self._backward.get(key)
        if i is None:
            i = len(self._forward)
            self._forward.append(value)
            self._backward[key] = i
        return i

    def _rebuild(self, forward: List[T]) -> None:
        """Replace storage with a new dense assignment. Caller holds the lock."""
        self._backward = {self._key(v): i for i, v in enumerate(forward)}
        self._forward = forward
        self._generation += 1

    @property
    def generation(self) -> int:
        """Number of remaps applied so far."""
        return self._generation

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def index(self, value: T) -> int:
        """
        Return the index of `value`, interning it first if unseen.

        Never fails for hashable values; grows the registry by at most one.
        """
        with self._lock:
            return self._intern(value)

    def index_all(self, values: Iterable[T]) -> np.ndarray:
        """Intern every value in order, returning their indices as an int64 array."""
        with self._lock:
            return np.fromiter((self._intern(v) for v in values), dtype=np.int64)

    def lookup(self, value: T) -> Optional[int]:
        """Return the index of `value` without interning, or None if absent."""
        with self._lock:
            return self._backward.get(self._key(value))

    def validate(self, i: int) -> int:
        """Return `i` as an int if it is a valid index, else raise IndexOutOfRange."""
        try:
            idx = operator.index(i)
        except TypeError:
            raise IndexOutOfRange(i, self.alloc_size()) from None
        with self._lock:
            n = len(self._forward)
        if not 0 <= idx < n:
            raise IndexOutOfRange(i, n)
        return idx

    def get(self, i: int) -> T:
        """Return the value stored at index `i`."""
        with self._lock:
            return self._forward[self.validate(i)]

    def get_all(self, indices: Sequence[int]) -> List[T]:
        """Return the values stored at each of `indices`."""
        with self._lock:
            return [self._forward[self.validate(i)] for i in indices]

    def alloc_size(self) -> int:
        """Number of distinct values interned."""
        with self._lock:
            return len(self._forward)

    def size(self) -> int:
        """Logical size; equal to alloc_size since remaps rebuild densely."""
        return self.alloc_size()

    def values(self) -> Tuple[T, ...]:
        """Snapshot of all values in index order."""
        with self._lock:
            return tuple(self._forward)

    def __len__(self) -> int:
        return self.alloc_size()

    def __contains__(self, value: object) -> bool:
        return self.lookup(value) is not None

    def __iter__(self) -> Iterator[T]:
        return iter(self.values())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!r}, size={len(self)}, generation={self._generation})"
