"""Data model for todo items."""

from dataclasses import dataclass
from typing import Any

from tada.errors import StorageError


@dataclass
class Item:
    """A single todo entry. Items have no id; position is identity."""

    title: str
    done: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "done": self.done}

    @classmethod
    def from_dict(cls, raw: Any) -> "Item":
        if not isinstance(raw, dict):
            raise StorageError(f"malformed item: expected object, got {type(raw).__name__}")
        title = raw.get("title")
        if not isinstance(title, str):
            raise StorageError("malformed item: missing string 'title'")
        done = raw.get("done", False)
        if not isinstance(done, bool):
            raise StorageError(f"malformed item {title!r}: 'done' must be a boolean")
        return cls(title=title, done=done)

    def copy(self) -> "Item":
        return Item(title=self.title, done=self.done)
