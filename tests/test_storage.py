"""Tests for the key-value stores."""

import pytest

from wordfall.storage import JsonFileStore, KeyValueStore, MemoryStore


def test_stores_match_protocol():
    assert isinstance(MemoryStore(), KeyValueStore)


def test_json_store_round_trip(tmp_path):
    path = tmp_path / "sub" / "storage.json"
    store = JsonFileStore(path)
    assert store.get("best") is None
    store.set("best", "9")
    assert JsonFileStore(path).get("best") == "9"


def test_json_store_keeps_other_keys(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text('{"other": "x"}')
    store = JsonFileStore(path)
    store.set("best", "3")
    assert store.get("other") == "x"


def test_json_store_unreadable_file_reads_empty(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("{not json")
    store = JsonFileStore(path)
    assert store.get("best") is None
    store.set("best", "1")
    assert store.get("best") == "1"


def test_json_store_failed_write_keeps_old_file(tmp_path, monkeypatch):
    path = tmp_path / "storage.json"
    store = JsonFileStore(path)
    store.set("best", "3")

    def broken_write(self, *args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(type(path), "write_text", broken_write)
    with pytest.raises(OSError):
        store.set("best", "4")
    monkeypatch.undo()

    assert store.get("best") == "3"


def test_json_store_leaves_no_temp_file(tmp_path):
    path = tmp_path / "storage.json"
    JsonFileStore(path).set("best", "5")
    assert sorted(p.name for p in tmp_path.iterdir()) == ["storage.json"]
