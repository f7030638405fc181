"""
Core module: registries, scopes, change logs, and errors.
"""

from catdomain.core.errors import CategoricalError, IndexOutOfRange, UnsetValue, EmptyDomain, StaleHandle
from catdomain.core.registry import DomainRegistry
from catdomain.core.counting import CountingDomainRegistry
from catdomain.core.scope import DomainScope
from catdomain.core.difflist import ChangeLog, IndexChange, DiffList

__all__ = [
    "CategoricalError",
    "IndexOutOfRange",
    "UnsetValue",
    "EmptyDomain",
    "StaleHandle",
    "DomainRegistry",
    "CountingDomainRegistry",
    "DomainScope",
    "ChangeLog",
    "IndexChange",
    "DiffList",
]
