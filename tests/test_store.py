"""Tests for the JSON item store."""

import json
import os
import stat

import pytest

from tada.errors import StorageError
from tada.model import Item
from tada.store import DATA_FILE_NAME, JsonStore, default_path


def test_missing_file_loads_empty(tmp_path):
    store = JsonStore(tmp_path / "todos.json")
    assert store.load() == []
    assert not (tmp_path / "todos.json").exists()


def test_save_then_load_preserves_order_and_flags(tmp_path):
    store = JsonStore(tmp_path / "todos.json")
    items = [Item("Buy milk"), Item("Call Ann", done=True), Item("Buy milk")]
    store.save(items)
    assert store.load() == items


def test_save_writes_indented_json_without_leftovers(tmp_path):
    path = tmp_path / "todos.json"
    JsonStore(path).save([Item("Café", done=True)])

    text = path.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert '  {\n    "title": "Café",\n    "done": true\n  }' in text
    assert [p.name for p in tmp_path.iterdir()] == ["todos.json"]


def test_save_overwrites_previous_contents(tmp_path):
    store = JsonStore(tmp_path / "todos.json")
    store.save([Item("A"), Item("B")])
    store.save([Item("C")])
    assert store.load() == [Item("C")]


def test_done_defaults_to_false(tmp_path):
    path = tmp_path / "todos.json"
    path.write_text(json.dumps([{"title": "A"}]))
    assert JsonStore(path).load() == [Item("A", done=False)]


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        '{"title": "A"}',
        '[{"done": true}]',
        '[{"title": "A", "done": "yes"}]',
        '["A"]',
    ],
)
def test_malformed_file_raises_storage_error(tmp_path, content):
    path = tmp_path / "todos.json"
    path.write_text(content)
    with pytest.raises(StorageError):
        JsonStore(path).load()


def test_unreadable_path_raises_storage_error(tmp_path):
    path = tmp_path / "todos.json"
    path.mkdir()
    with pytest.raises(StorageError):
        JsonStore(path).load()


def test_save_into_missing_directory_raises_storage_error(tmp_path):
    store = JsonStore(tmp_path / "nope" / "todos.json")
    with pytest.raises(StorageError):
        store.save([Item("A")])


def test_default_path_is_in_working_directory(workdir):
    assert default_path() == workdir / DATA_FILE_NAME
    assert JsonStore().path == workdir / DATA_FILE_NAME


def test_save_keeps_existing_file_mode(tmp_path):
    path = tmp_path / "todos.json"
    path.write_text("[]")
    os.chmod(path, 0o644)

    JsonStore(path).save([Item("A")])
    assert stat.S_IMODE(path.stat().st_mode) == 0o644


def test_new_file_mode_follows_umask(tmp_path):
    path = tmp_path / "todos.json"
    old = os.umask(0o022)
    try:
        JsonStore(path).save([Item("A")])
    finally:
        os.umask(old)
    assert stat.S_IMODE(path.stat().st_mode) == 0o644
