"""Single-line text entry used for inline add and edit.

LineBuffer is the editing primitive (insert, delete, cursor movement).
TextEntry wraps it with the add/edit mode and the commit/cancel protocol.
Enter and escape are not handled here: the session reducer owns those.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

EMPTY_TITLE_ERROR = "Title cannot be empty"
CHAR_LIMIT = 200


@dataclass
class LineBuffer:
    text: str = ""
    position: int = 0
    limit: int = CHAR_LIMIT

    def set(self, text: str) -> None:
        self.text = text[: self.limit]
        self.position = len(self.text)

    def clear(self) -> None:
        self.text = ""
        self.position = 0

    def insert(self, chars: str) -> None:
        room = self.limit - len(self.text)
        if room <= 0:
            return
        chars = chars[:room]
        self.text = self.text[: self.position] + chars + self.text[self.position :]
        self.position += len(chars)

    def on_key(self, key: str, character: Optional[str] = None) -> bool:
        """Apply one key press. Returns False if the key means nothing here."""
        match key:
            case "backspace" | "ctrl+h":
                if self.position > 0:
                    self.text = self.text[: self.position - 1] + self.text[self.position :]
                    self.position -= 1
            case "delete" | "ctrl+d":
                self.text = self.text[: self.position] + self.text[self.position + 1 :]
            case "left" | "ctrl+b":
                self.position = max(0, self.position - 1)
            case "right" | "ctrl+f":
                self.position = min(len(self.text), self.position + 1)
            case "home" | "ctrl+a":
                self.position = 0
            case "end" | "ctrl+e":
                self.position = len(self.text)
            case "ctrl+u":
                self.text = self.text[self.position :]
                self.position = 0
            case "ctrl+k":
                self.text = self.text[: self.position]
            case _:
                if character is None or not character.isprintable():
                    return False
                self.insert(character)
        return True


class EntryMode(str, Enum):
    NONE = "none"
    ADDING = "adding"
    EDITING = "editing"


@dataclass
class TextEntry:
    mode: EntryMode = EntryMode.NONE
    buffer: LineBuffer = field(default_factory=LineBuffer)
    target_index: Optional[int] = None
    error: Optional[str] = None

    @property
    def active(self) -> bool:
        return self.mode is not EntryMode.NONE

    @property
    def text(self) -> str:
        return self.buffer.text

    def begin(self, mode: EntryMode, initial: str = "", target_index: Optional[int] = None) -> None:
        self.mode = mode
        self.buffer.set(initial)
        self.target_index = target_index
        self.error = None

    def on_key(self, key: str, character: Optional[str] = None) -> bool:
        self.error = None
        return self.buffer.on_key(key, character)

    def commit(self) -> Optional[str]:
        """Return the trimmed title, or None (with error set) if it is empty.

        The mode is left alone either way; the caller deactivates on success.
        """
        title = self.buffer.text.strip()
        if not title:
            self.error = EMPTY_TITLE_ERROR
            return None
        return title

    def cancel(self) -> None:
        self.mode = EntryMode.NONE
        self.buffer.clear()
        self.target_index = None
        self.error = None
