"""
Session state and actions for the interactive list.

Architecture:
- Actions are frozen dataclasses representing state transitions
- reduce(state, action) applies one action to SessionState in place
- SessionState.handle_key(key) routes a key press by mode *first*, then maps
  it to an action; while a text entry is open, shortcut letters are text
- The dirty flag is set only by actions that change the item sequence
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Union

from tada.model import Item
from tada.tui.selection import SelectionList
from tada.tui.text_entry import EntryMode, LineBuffer, TextEntry
from tada.tui.undo import UndoSlot


# =============================================================================
# Data Types
# =============================================================================

class Mode(str, Enum):
    BROWSING = "browsing"
    ADDING = "adding"
    EDITING = "editing"
    FILTERING = "filtering"


# =============================================================================
# Actions
# =============================================================================

@dataclass(frozen=True)
class Quit:
    """End the session."""
    pass


@dataclass(frozen=True)
class ToggleDone:
    """Flip done on the item under the cursor."""
    pass


@dataclass(frozen=True)
class DeleteItem:
    """Remove the item under the cursor, remembering it for undo."""
    pass


@dataclass(frozen=True)
class StartAdd:
    """Open the text entry for a new item."""
    pass


@dataclass(frozen=True)
class StartEdit:
    """Open the text entry on the title under the cursor."""
    pass


@dataclass(frozen=True)
class Undo:
    """Restore the last deleted item."""
    pass


@dataclass(frozen=True)
class MoveCursor:
    delta: int


@dataclass(frozen=True)
class MoveToStart:
    pass


@dataclass(frozen=True)
class MoveToEnd:
    pass


@dataclass(frozen=True)
class StartFilter:
    """Open the filter line."""
    pass


@dataclass(frozen=True)
class FilterKey:
    """A key typed into the filter line."""
    key: str
    character: Optional[str] = None


@dataclass(frozen=True)
class ApplyFilter:
    """Close the filter line, keeping the filter."""
    pass


@dataclass(frozen=True)
class ClearFilter:
    """Close the filter line and show every item again."""
    pass


@dataclass(frozen=True)
class CommitEntry:
    """Validate and apply the add/edit text."""
    pass


@dataclass(frozen=True)
class CancelEntry:
    """Discard the add/edit text."""
    pass


@dataclass(frozen=True)
class EntryKey:
    """A key typed into the add/edit line."""
    key: str
    character: Optional[str] = None


Action = Union[
    Quit,
    ToggleDone,
    DeleteItem,
    StartAdd,
    StartEdit,
    Undo,
    MoveCursor,
    MoveToStart,
    MoveToEnd,
    StartFilter,
    FilterKey,
    ApplyFilter,
    ClearFilter,
    CommitEntry,
    CancelEntry,
    EntryKey,
]


# =============================================================================
# Keymaps
# =============================================================================

BROWSE_KEYS: dict[str, Action] = {
    "q": Quit(),
    "ctrl+c": Quit(),
    "space": ToggleDone(),
    "d": DeleteItem(),
    "a": StartAdd(),
    "e": StartEdit(),
    "u": Undo(),
    "up": MoveCursor(-1),
    "k": MoveCursor(-1),
    "down": MoveCursor(1),
    "j": MoveCursor(1),
    "home": MoveToStart(),
    "g": MoveToStart(),
    "end": MoveToEnd(),
    "G": MoveToEnd(),
    "slash": StartFilter(),
    "/": StartFilter(),
}

HINTS = {
    Mode.BROWSING: "↑/k ↓/j move  space toggle  a add  e edit  d delete  u undo  / filter  q quit",
    Mode.ADDING: "enter save  esc cancel",
    Mode.EDITING: "enter save  esc cancel",
    Mode.FILTERING: "type to filter  enter keep  esc clear",
}


# =============================================================================
# Reducer
# =============================================================================

def reduce(state: "SessionState", action: Action) -> None:
    """
    Apply an action to mutate state.

    Every command on "the item under the cursor" is a no-op when the visible
    set is empty; nothing here raises.
    """
    sel = state.selection

    match action:
        case Quit():
            state.quit = True

        case ToggleDone():
            idx = sel.current_index()
            if idx is None:
                return
            item = sel.items[idx]
            sel.replace_at(idx, Item(title=item.title, done=not item.done))
            state.dirty = True

        case DeleteItem():
            idx = sel.current_index()
            if idx is None:
                return
            state.undo.record(sel.items[idx], idx)
            sel.remove_at(idx)
            state.dirty = True

        case StartAdd():
            state.entry.begin(EntryMode.ADDING, "")

        case StartEdit():
            idx = sel.current_index()
            if idx is None:
                return
            state.entry.begin(EntryMode.EDITING, sel.items[idx].title, target_index=idx)

        case Undo():
            deletion = state.undo.consume(len(sel))
            if deletion is None:
                return
            sel.insert_at(deletion.index, deletion.item)
            state.dirty = True

        case MoveCursor(delta=delta):
            sel.move(delta)

        case MoveToStart():
            sel.move_to_start()

        case MoveToEnd():
            sel.move_to_end()

        case StartFilter():
            state.filtering = True
            state.filter_entry.set(sel.filter_text)

        case FilterKey(key=key, character=character):
            state.filter_entry.on_key(key, character)
            sel.set_filter(state.filter_entry.text)

        case ApplyFilter():
            state.filtering = False

        case ClearFilter():
            state.filtering = False
            state.filter_entry.clear()
            sel.set_filter("")

        case CommitEntry():
            _commit_entry(state)

        case CancelEntry():
            state.entry.cancel()

        case EntryKey(key=key, character=character):
            state.entry.on_key(key, character)


def _commit_entry(state: "SessionState") -> None:
    entry = state.entry
    if not entry.active:
        return

    title = entry.commit()
    if title is None:
        # Validation failure: stay in the same mode with the error shown.
        return

    sel = state.selection
    if entry.mode is EntryMode.ADDING:
        idx = sel.current_index()
        position = len(sel) if idx is None else idx + 1
        sel.insert_at(position, Item(title=title))
        state.dirty = True
    elif entry.mode is EntryMode.EDITING:
        target = entry.target_index
        if target is not None and 0 <= target < len(sel):
            old = sel.items[target]
            sel.replace_at(target, Item(title=title, done=old.done))
            state.dirty = True

    entry.cancel()


# =============================================================================
# Session State
# =============================================================================

@dataclass
class SessionState:
    """
    Everything the interactive session owns.

    Mutated only through dispatch(action); rendering reads it and never
    writes to it.
    """

    selection: SelectionList = field(default_factory=SelectionList)
    entry: TextEntry = field(default_factory=TextEntry)
    undo: UndoSlot = field(default_factory=UndoSlot)
    filter_entry: LineBuffer = field(default_factory=LineBuffer)
    filtering: bool = False
    dirty: bool = False
    quit: bool = False

    @classmethod
    def from_items(cls, items: Iterable[Item]) -> "SessionState":
        return cls(selection=SelectionList(items))

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def dispatch(self, action: Action) -> None:
        """Apply an action to update state."""
        reduce(self, action)

    def handle_key(self, key: str, character: Optional[str] = None) -> Optional[Action]:
        """Translate a key press for the current mode and apply it.

        Returns the dispatched action, or None when the key is unbound.
        """
        action = self.action_for_key(key, character)
        if action is not None:
            self.dispatch(action)
        return action

    def action_for_key(self, key: str, character: Optional[str] = None) -> Optional[Action]:
        match self.mode:
            case Mode.ADDING | Mode.EDITING:
                if key == "ctrl+c":
                    return Quit()
                if key == "enter":
                    return CommitEntry()
                if key == "escape":
                    return CancelEntry()
                return EntryKey(key, character)

            case Mode.FILTERING:
                if key == "ctrl+c":
                    return Quit()
                if key == "enter":
                    return ApplyFilter()
                if key == "escape":
                    return ClearFilter()
                return FilterKey(key, character)

            case _:
                if key == "escape":
                    return ClearFilter() if self.selection.filter_text else Quit()
                action = BROWSE_KEYS.get(key)
                if action is None and character:
                    action = BROWSE_KEYS.get(character)
                return action

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def mode(self) -> Mode:
        if self.entry.mode is EntryMode.ADDING:
            return Mode.ADDING
        if self.entry.mode is EntryMode.EDITING:
            return Mode.EDITING
        if self.filtering:
            return Mode.FILTERING
        return Mode.BROWSING

    @property
    def items(self) -> list[Item]:
        """Live view of the working sequence (do not mutate)."""
        return self.selection.items

    @property
    def hint(self) -> str:
        return HINTS[self.mode]
