"""Navigable, filterable view over the session's item list.

The cursor indexes the *visible* subsequence (items whose title matches the
filter), while insert/remove/replace take positions in the full sequence.
current_index() translates between the two.
"""

from __future__ import annotations

from typing import Iterable, Optional

from tada.model import Item


class SelectionList:
    def __init__(self, items: Iterable[Item] = ()) -> None:
        self.items: list[Item] = [item.copy() for item in items]
        self.cursor = 0
        self.filter_text = ""

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def _matches(self, item: Item) -> bool:
        if not self.filter_text:
            return True
        return self.filter_text.casefold() in item.title.casefold()

    def visible(self) -> list[tuple[int, Item]]:
        """(full index, item) pairs passing the filter, in original order."""
        return [(i, item) for i, item in enumerate(self.items) if self._matches(item)]

    def visible_count(self) -> int:
        return len(self.visible())

    def current_index(self) -> Optional[int]:
        """Full-sequence index of the item under the cursor, or None."""
        visible = self.visible()
        if not visible:
            return None
        return visible[self.cursor][0]

    def current(self) -> Optional[Item]:
        idx = self.current_index()
        return None if idx is None else self.items[idx]

    def snapshot(self) -> list[Item]:
        return [item.copy() for item in self.items]

    def __len__(self) -> int:
        return len(self.items)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def _clamp_cursor(self) -> None:
        count = self.visible_count()
        self.cursor = max(0, min(self.cursor, count - 1))

    def move(self, delta: int) -> None:
        """Move the cursor; stops at either end, no wraparound."""
        self.cursor += delta
        self._clamp_cursor()

    def move_to_start(self) -> None:
        self.cursor = 0

    def move_to_end(self) -> None:
        self.cursor = max(0, self.visible_count() - 1)

    def set_filter(self, text: str) -> None:
        self.filter_text = text
        self._clamp_cursor()

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def insert_at(self, position: int, item: Item) -> int:
        """Insert into the full sequence; position is clamped to [0, len]."""
        position = max(0, min(position, len(self.items)))
        self.items.insert(position, item)
        self._clamp_cursor()
        return position

    def remove_at(self, position: int) -> Optional[Item]:
        if not 0 <= position < len(self.items):
            return None
        removed = self.items.pop(position)
        self._clamp_cursor()
        return removed

    def replace_at(self, position: int, item: Item) -> bool:
        if not 0 <= position < len(self.items):
            return False
        self.items[position] = item
        self._clamp_cursor()
        return True
