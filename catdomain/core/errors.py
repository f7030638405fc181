"""
catdomain/core/errors.py

Error taxonomy for categorical domains.

All errors are raised synchronously at the call site that detects them and
are never retried internally. They signal contract violations (e.g. reading a
handle whose index was invalidated by a trim), not expected runtime states.
"""

from __future__ import annotations


class CategoricalError(Exception):
    """Base class for categorical domain errors."""


class IndexOutOfRange(CategoricalError, IndexError):
    """An index outside [0, alloc_size) was used for lookup or assignment."""

    def __init__(self, index: object, alloc_size: int):
        self.index = index
        self.alloc_size = alloc_size
        super().__init__(f"index {index!r} out of range for domain of size {alloc_size}")


class UnsetValue(CategoricalError, ValueError):
    """A variable handle was read before its first assignment."""


class EmptyDomain(CategoricalError, ValueError):
    """A trim would leave the domain with no entries."""


class StaleHandle(CategoricalError, RuntimeError):
    """A handle's index was issued before the registry was remapped."""

    def __init__(self, handle_generation: int, registry_generation: int):
        self.handle_generation = handle_generation
        self.registry_generation = registry_generation
        super().__init__(
            f"handle index issued at generation {handle_generation}, "
            f"registry is at generation {registry_generation}; rebuild the handle"
        )
