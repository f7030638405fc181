"""
catdomain/variables/handles.py

Lightweight handles holding one index into a DomainRegistry.

Variants are composed from two orthogonal capabilities rather than a class
chain:
  - mutability: CategoricalObservation (fixed) vs CategoricalVariable (settable)
  - coordination: a CategoricalVariable built with coordinated=False never
    records changes or notifies subscribers, for algorithms such as belief
    propagation that manage their own consistency

Handles reference their registry but do not own it. Each handle remembers the
registry generation its index was issued under and raises StaleHandle when
read after a trim.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, List, Optional

from catdomain.core.difflist import ChangeLog, IndexChange
from catdomain.core.errors import StaleHandle, UnsetValue
from catdomain.core.registry import DomainRegistry, T

UNSET: Any = object()

Subscriber = Callable[["CategoricalVariable", Optional[int], int], None]


class CategoricalHandle(Generic[T]):
    """Shared state of every handle: registry reference, index, generation."""

    def __init__(self, registry: DomainRegistry[T]):
        self._registry = registry
        self._index: Optional[int] = None
        self._generation: int = registry.generation

    def _intern(self, value: T) -> None:
        # generation is read before interning; a remap during index() leaves the handle stale
        with self._registry.lock:
            generation = self._registry.generation
            self._index = self._registry.index(value)
            self._generation = generation

    @property
    def registry(self) -> DomainRegistry[T]:
        return self._registry

    @property
    def is_set(self) -> bool:
        return self._index is not None

    @property
    def is_stale(self) -> bool:
        return self._index is not None and self._generation != self._registry.generation

    @property
    def index(self) -> int:
        """The handle's index into its registry."""
        if self._index is None:
            raise UnsetValue(f"{type(self).__name__} has no value yet")
        if self._generation != self._registry.generation:
            raise StaleHandle(self._generation, self._registry.generation)
        return self._index

    def value(self) -> T:
        with self._registry.lock:
            return self._registry.get(self.index)

    def __repr__(self) -> str:
        if self._index is None:
            return f"{type(self).__name__}(<unset>)"
        if self.is_stale:
            return f"{type(self).__name__}(<stale>={self._index})"
        return f"{type(self).__name__}({self.value()!r}={self._index})"


class CategoricalObservation(CategoricalHandle[T]):
    """A handle whose index is fixed at construction."""

    def __init__(self, registry: DomainRegistry[T], value: T):
        super().__init__(registry)
        self._intern(value)


class CategoricalVariable(CategoricalHandle[T]):
    """
    A handle whose value can be reassigned.

    Args:
        registry: Registry the index refers to
        initial: Optional initial value; the handle stays unset without one
        coordinated: If False, set() never records changes or notifies subscribers
    """

    def __init__(self, registry: DomainRegistry[T], initial: Any = UNSET, *, coordinated: bool = True):
        super().__init__(registry)
        self.coordinated = coordinated
        self._subscribers: List[Subscriber] = []
        if initial is not UNSET:
            self._intern(initial)

    def subscribe(self, callback: Subscriber) -> None:
        """
        Call `callback(variable, old_index, new_index)` after each change.

        Callbacks must not mutate the registry.
        """
        if not self.coordinated:
            raise ValueError("uncoordinated variables do not notify subscribers")
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        self._subscribers.remove(callback)

    def set(self, value: T, diff: Optional[ChangeLog] = None) -> None:
        """Assign `value`, interning it if needed."""
        with self._registry.lock:
            generation = self._registry.generation
            change = self._transition(self._registry.index(value), generation)
        self._record(change, diff)

    def set_by_index(self, i: int, diff: Optional[ChangeLog] = None) -> None:
        """
        Assign the value already stored at index `i`.

        Raises:
            IndexOutOfRange: If `i` is not in [0, registry.alloc_size())
        """
        with self._registry.lock:
            generation = self._registry.generation
            change = self._transition(self._registry.validate(i), generation)
        self._record(change, diff)

    def _transition(self, new: int, generation: int) -> Optional[IndexChange]:
        old, old_generation = self._index, self._generation
        if new == old and old_generation == generation:
            return None
        self._index = new
        self._generation = generation
        return IndexChange(self, old, new, old_generation, generation)

    def _record(self, change: Optional[IndexChange], diff: Optional[ChangeLog]) -> None:
        if change is None or not self.coordinated:
            return
        if diff is not None:
            diff.append(change)
        for callback in list(self._subscribers):
            callback(self, change.old_index, change.new_index)

    def _restore(self, i: Optional[int], generation: int) -> None:
        # Used by IndexChange.undo/redo; bypasses recording and subscribers.
        self._index = i
        self._generation = generation
