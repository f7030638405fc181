"""
catdomain/core/difflist.py

Change log for coordinated variable mutation.

A coordinated CategoricalVariable appends an IndexChange to whatever
ChangeLog the caller passes to set()/set_by_index(). DiffList is a minimal
in-memory ChangeLog that can undo and redo the recorded changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from catdomain.variables.handles import CategoricalVariable


class ChangeLog(Protocol):
    """Anything that accepts IndexChange records."""

    def append(self, change: "IndexChange") -> None: ...


@dataclass(frozen=True)
class IndexChange:
    """
    One reversible index transition of a variable.

    Indices are only meaningful under the registry generation they were
    issued in, so each side carries its generation. Undoing across a trim
    leaves the variable stale rather than pointing at a remapped value.

    Attributes:
        variable: The handle that changed
        old_index: Index before the change (None if the handle was unset)
        new_index: Index after the change
        old_generation: Registry generation of old_index
        new_generation: Registry generation of new_index
    """
    variable: "CategoricalVariable"
    old_index: Optional[int]
    new_index: int
    old_generation: int
    new_generation: int

    def undo(self) -> None:
        self.variable._restore(self.old_index, self.old_generation)

    def redo(self) -> None:
        self.variable._restore(self.new_index, self.new_generation)


class DiffList(list):
    """List of IndexChange records that can be replayed in either direction."""

    def undo(self) -> None:
        """Revert every change, most recent first."""
        for change in reversed(self):
            change.undo()

    def redo(self) -> None:
        """Re-apply every change in recording order."""
        for change in self:
            change.redo()
