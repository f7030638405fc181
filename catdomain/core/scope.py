"""
catdomain/core/scope.py

Explicit container of registries, one per categorical kind.

A DomainScope replaces implicit per-type singletons: whoever owns the scope
owns the lifetime of every registry in it. Registries are created lazily on
first request and returned unchanged afterwards.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Hashable, Tuple

from catdomain.core.counting import CountingDomainRegistry
from catdomain.core.registry import DomainRegistry

logger = logging.getLogger(__name__)


class DomainScope:
    """Lazily-populated map from categorical kind to its DomainRegistry."""

    def __init__(self):
        self._domains: Dict[Hashable, DomainRegistry] = {}
        self._lock = threading.Lock()

    def domain(self, kind: Hashable, *, counting: bool = False, identity: bool = False) -> DomainRegistry:
        """
        Get the registry for `kind`, creating it on first request.

        Args:
            kind: Any hashable label; typically the class of the values
            counting: Whether the registry tracks occurrence counts
            identity: Whether values are keyed by object identity

        Raises:
            ValueError: If `kind` already exists with different flags
        """
        with self._lock:
            reg = self._domains.get(kind)
            if reg is None:
                cls = CountingDomainRegistry if counting else DomainRegistry
                reg = cls(kind, identity=identity)
                self._domains[kind] = reg
                logger.debug("created %s for kind %r", cls.__name__, kind)
                return reg

        if isinstance(reg, CountingDomainRegistry) != counting or reg.identity != identity:
            raise ValueError(
                f"domain {kind!r} already exists as {type(reg).__name__}"
                f"(identity={reg.identity}); requested counting={counting}, identity={identity}"
            )
        return reg

    def drop(self, kind: Hashable) -> None:
        """Forget the registry for `kind`; handles still referencing it keep working."""
        with self._lock:
            self._domains.pop(kind, None)

    def kinds(self) -> Tuple[Hashable, ...]:
        with self._lock:
            return tuple(self._domains)

    def __contains__(self, kind: Hashable) -> bool:
        with self._lock:
            return kind in self._domains

    def __len__(self) -> int:
        with self._lock:
            return len(self._domains)
