"""
Tests for the session reducer and modal key routing.

Covers the example scenarios (toggle, delete/undo, blank add, edit,
single-level undo, quit without changes) plus modal isolation and the
dirty flag.
"""

import random

from tada.model import Item
from tada.tui.state import (
    CommitEntry,
    DeleteItem,
    Mode,
    MoveCursor,
    SessionState,
    StartAdd,
    ToggleDone,
    Undo,
)
from tada.tui.text_entry import EMPTY_TITLE_ERROR

from helpers import make_items, titles, type_text


def pairs(state: SessionState) -> list[tuple[str, bool]]:
    return [(item.title, item.done) for item in state.items]


class TestScenarios:
    def test_toggle_first_item(self):
        state = SessionState.from_items(
            [Item("Buy milk", False), Item("Call Ann", True)]
        )
        state.handle_key("space", " ")

        assert pairs(state) == [("Buy milk", True), ("Call Ann", True)]
        assert state.dirty

    def test_delete_then_undo_restores_item(self):
        state = SessionState.from_items(make_items("A"))
        state.handle_key("d", "d")
        assert state.items == []

        state.handle_key("u", "u")
        assert pairs(state) == [("A", False)]
        assert state.dirty

    def test_blank_add_is_rejected_and_stays_in_adding(self):
        state = SessionState.from_items([])
        state.handle_key("a", "a")
        type_text(state, "  ")
        state.handle_key("enter")

        assert state.items == []
        assert state.mode is Mode.ADDING
        assert state.entry.error == EMPTY_TITLE_ERROR
        assert not state.dirty

    def test_edit_second_item(self):
        state = SessionState.from_items(make_items("A", "B"))
        state.handle_key("down")
        state.handle_key("e", "e")
        assert state.mode is Mode.EDITING
        assert state.entry.text == "B"

        type_text(state, "2")
        state.handle_key("enter")

        assert pairs(state) == [("A", False), ("B2", False)]
        assert state.mode is Mode.BROWSING

    def test_only_latest_deletion_can_be_undone(self):
        state = SessionState.from_items(make_items("A", "B", "C"))

        state.handle_key("d", "d")
        assert state.undo.peek().item.title == "A"
        assert state.undo.peek().index == 0

        state.handle_key("d", "d")
        assert state.undo.peek().item.title == "B"
        assert state.undo.peek().index == 0

        state.handle_key("u", "u")
        assert titles(state.items) == ["B", "C"]

        state.handle_key("u", "u")
        assert titles(state.items) == ["B", "C"]

    def test_quit_immediately_leaves_session_clean(self):
        state = SessionState.from_items(make_items("A"))
        state.handle_key("q", "q")
        assert state.quit
        assert not state.dirty


class TestModalIsolation:
    def test_shortcut_letters_are_text_while_adding(self):
        state = SessionState.from_items(make_items("keep me"))
        state.handle_key("a", "a")
        type_text(state, "delete the old one, quickly")

        assert state.entry.text == "delete the old one, quickly"
        assert titles(state.items) == ["keep me"]
        assert state.mode is Mode.ADDING
        assert not state.quit
        assert not state.undo.active

    def test_shortcut_letters_are_text_while_editing(self):
        state = SessionState.from_items(make_items("x", done=(0,)))
        state.handle_key("e", "e")
        type_text(state, " uqd")
        state.handle_key("enter")

        assert pairs(state) == [("x uqd", True)]

    def test_shortcut_letters_are_text_while_filtering(self):
        state = SessionState.from_items(make_items("dog", "cat"))
        state.handle_key("slash", "/")
        type_text(state, "d")

        assert state.mode is Mode.FILTERING
        assert titles(state.items) == ["dog", "cat"]
        assert state.selection.visible_count() == 1

    def test_escape_cancels_entry_without_changes(self):
        state = SessionState.from_items(make_items("A"))
        state.handle_key("a", "a")
        type_text(state, "draft")
        state.handle_key("escape")

        assert state.mode is Mode.BROWSING
        assert titles(state.items) == ["A"]
        assert not state.quit
        assert not state.dirty

    def test_ctrl_c_quits_from_entry(self):
        state = SessionState.from_items([])
        state.handle_key("a", "a")
        state.handle_key("ctrl+c")
        assert state.quit


class TestValidationGate:
    def test_blank_edit_keeps_title_and_mode(self):
        state = SessionState.from_items(make_items("A"))
        state.handle_key("e", "e")
        state.handle_key("ctrl+u")
        type_text(state, "   ")
        state.handle_key("enter")

        assert titles(state.items) == ["A"]
        assert state.mode is Mode.EDITING
        assert state.entry.error == EMPTY_TITLE_ERROR
        assert not state.dirty

    def test_retry_after_error_succeeds(self):
        state = SessionState.from_items([])
        state.handle_key("a", "a")
        state.handle_key("enter")
        type_text(state, "real title")
        assert state.entry.error is None
        state.handle_key("enter")

        assert titles(state.items) == ["real title"]
        assert state.mode is Mode.BROWSING


class TestCommands:
    def test_add_inserts_after_cursor(self):
        state = SessionState.from_items(make_items("A", "B"))
        state.handle_key("a", "a")
        type_text(state, "X")
        state.handle_key("enter")
        assert titles(state.items) == ["A", "X", "B"]
        assert state.items[1].done is False

    def test_add_into_empty_filtered_view_appends(self):
        state = SessionState.from_items(make_items("A", "B"))
        state.handle_key("slash", "/")
        type_text(state, "zzz")
        state.handle_key("enter")
        state.handle_key("a", "a")
        type_text(state, "C")
        state.handle_key("enter")
        assert titles(state.items) == ["A", "B", "C"]

    def test_commands_on_empty_list_are_noops(self):
        state = SessionState.from_items([])
        for key in ("space", "d", "e", "u", "down", "up"):
            state.handle_key(key)
        assert state.mode is Mode.BROWSING
        assert state.items == []
        assert not state.dirty

    def test_undo_with_nothing_recorded_is_silent(self):
        state = SessionState.from_items(make_items("A"))
        state.dispatch(Undo())
        assert titles(state.items) == ["A"]
        assert not state.dirty

    def test_delete_while_filtered_removes_the_visible_item(self):
        state = SessionState.from_items(make_items("apple", "banana", "blueberry"))
        state.handle_key("slash", "/")
        type_text(state, "b")
        state.handle_key("enter")
        state.handle_key("down")
        state.handle_key("d", "d")

        assert titles(state.items) == ["apple", "banana"]
        assert state.undo.peek().index == 2

        state.handle_key("u", "u")
        assert titles(state.items) == ["apple", "banana", "blueberry"]

    def test_escape_clears_filter_before_quitting(self):
        state = SessionState.from_items(make_items("A", "B"))
        state.handle_key("slash", "/")
        type_text(state, "a")
        state.handle_key("enter")
        assert state.selection.filter_text == "a"

        state.handle_key("escape")
        assert state.selection.filter_text == ""
        assert not state.quit

        state.handle_key("escape")
        assert state.quit

    def test_unbound_key_returns_none(self):
        state = SessionState.from_items(make_items("A"))
        assert state.handle_key("x", "x") is None
        assert state.handle_key("f5") is None

    def test_uppercase_g_jumps_to_end(self):
        state = SessionState.from_items(make_items("A", "B", "C"))
        state.handle_key("G", "G")
        assert state.selection.current().title == "C"
        state.handle_key("g", "g")
        assert state.selection.current().title == "A"

    def test_commit_outside_entry_does_nothing(self):
        state = SessionState.from_items(make_items("A"))
        state.dispatch(CommitEntry())
        assert titles(state.items) == ["A"]
        assert not state.dirty


class TestDirtyFlag:
    def test_navigation_and_filtering_never_dirty(self):
        state = SessionState.from_items(make_items("one", "two", "three"))
        for key, ch in [("down", None), ("j", "j"), ("up", None), ("G", "G"), ("g", "g")]:
            state.handle_key(key, ch)
        state.handle_key("slash", "/")
        type_text(state, "t")
        state.handle_key("enter")
        state.handle_key("escape")
        state.handle_key("a", "a")
        state.handle_key("escape")

        assert not state.dirty

    def test_each_mutation_sets_dirty(self):
        for action in (ToggleDone(), DeleteItem()):
            state = SessionState.from_items(make_items("A"))
            state.dispatch(action)
            assert state.dirty, action


def test_delete_undo_round_trip_at_every_position():
    original = make_items("A", "B", "C", "D", done=(1, 3))
    for position in range(len(original)):
        state = SessionState.from_items(original)
        state.dispatch(MoveCursor(position))
        state.dispatch(DeleteItem())
        state.dispatch(Undo())
        assert state.items == original


def test_cursor_bounds_hold_for_random_key_streams():
    rng = random.Random(42)
    keys = ["up", "down", "d", "u", "space", "G", "g", "slash", "escape", "enter", "a", "e", "x", "backspace"]

    for _ in range(20):
        state = SessionState.from_items(make_items(*(f"t{n}" for n in range(6))))
        for _ in range(200):
            key = rng.choice(keys)
            state.handle_key(key, key if len(key) == 1 else None)
            if state.quit:
                break
            visible = state.selection.visible_count()
            assert 0 <= state.selection.cursor < max(1, visible)


def test_start_add_opens_entry_even_on_empty_list():
    state = SessionState.from_items([])
    state.dispatch(StartAdd())
    assert state.mode is Mode.ADDING
    assert state.hint.startswith("enter")
