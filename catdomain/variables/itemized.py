"""
catdomain/variables/itemized.py

Entities whose interned value is the entity itself.

Creating ten Person(ItemizedEntity) objects through Person.create(registry)
maps them to indices 0..9 in creation order; p.value() is p. Registration is
a second step after construction, so the registry never sees a half-built
object, and the registry must key by identity so that structurally equal
entities stay distinct.
"""

from __future__ import annotations

from typing import Optional, Type, TypeVar

from catdomain.core.errors import StaleHandle, UnsetValue
from catdomain.core.registry import DomainRegistry

E = TypeVar("E", bound="ItemizedEntity")


class ItemizedEntity:
    """
    Mixin for objects indexed by their own identity.

    The binding lives in slots declared here, so subclasses may declare their
    own `__slots__` without repeating these names.
    """

    __slots__ = ("_registry", "_index", "_generation")

    @classmethod
    def create(cls: Type[E], registry: DomainRegistry, *args, **kwargs) -> E:
        """Construct an entity, then register it in `registry`."""
        entity = cls(*args, **kwargs)
        entity.bind(registry)
        return entity

    def bind(self: E, registry: DomainRegistry) -> E:
        """
        Register this entity in `registry`. Allowed exactly once.

        Raises:
            ValueError: If the registry is not identity-keyed or the entity is already bound
        """
        if not registry.identity:
            raise ValueError(f"{type(self).__name__} requires an identity-keyed registry")
        if self.registry is not None:
            raise ValueError(f"{type(self).__name__} is already registered at index {self._index}")
        with registry.lock:
            generation = registry.generation
            index = registry.index(self)
        # object.__setattr__ so frozen dataclass subclasses can be bound too
        object.__setattr__(self, "_index", index)
        object.__setattr__(self, "_generation", generation)
        object.__setattr__(self, "_registry", registry)
        return self

    @property
    def registry(self) -> Optional[DomainRegistry]:
        return getattr(self, "_registry", None)

    @property
    def index(self) -> int:
        registry = self.registry
        if registry is None:
            raise UnsetValue(f"{type(self).__name__} was never registered")
        if self._generation != registry.generation:
            raise StaleHandle(self._generation, registry.generation)
        return self._index

    def value(self: E) -> E:
        return self
