"""Single-level undo for deletions.

Holds at most one deleted item plus the full-sequence index it came from.
A new deletion overwrites the slot; consuming it empties the slot. The index
is only clamped when consumed, since the list may have changed in between.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tada.model import Item


@dataclass(frozen=True)
class Deletion:
    item: Item
    index: int


class UndoSlot:
    """Remembers the most recent deletion only."""

    def __init__(self) -> None:
        self._slot: Optional[Deletion] = None

    @property
    def active(self) -> bool:
        return self._slot is not None

    def peek(self) -> Optional[Deletion]:
        return self._slot

    def record(self, item: Item, index: int) -> None:
        self._slot = Deletion(item=item.copy(), index=index)

    def consume(self, length: int) -> Optional[Deletion]:
        """Take the deletion back out, index clamped to [0, length]."""
        if self._slot is None:
            return None
        deletion = self._slot
        self._slot = None
        index = max(0, min(deletion.index, length))
        return Deletion(item=deletion.item.copy(), index=index)

    def clear(self) -> None:
        self._slot = None
