from __future__ import annotations

import json

import pytest

from errors import StorageUnavailable, WallErrorKind
from repositories import FileStore, MemoryStore, StoreProtocol
from wall_service import WallService


def test_read_missing_key_returns_none(tmp_path):
    assert FileStore(tmp_path).read("users") is None


def test_write_then_read_uses_one_json_file_per_key(tmp_path):
    store = FileStore(tmp_path)
    store.write("users", [{"id": "1", "username": "ana"}])

    assert store.read("users") == [{"id": "1", "username": "ana"}]
    on_disk = json.loads((tmp_path / "users.json").read_text(encoding="utf-8"))
    assert on_disk == [{"id": "1", "username": "ana"}]
    assert not (tmp_path / "users.tmp").exists()


def test_write_replaces_previous_value(tmp_path):
    store = FileStore(tmp_path)
    store.write("currentSession", {"id": "1"})
    store.write("currentSession", {"id": "2"})
    assert store.read("currentSession") == {"id": "2"}


def test_clear_removes_record_and_is_idempotent(tmp_path):
    store = FileStore(tmp_path)
    store.write("currentSession", {"id": "1"})
    store.clear("currentSession")
    store.clear("currentSession")
    assert store.read("currentSession") is None


def test_corrupt_file_is_moved_aside(tmp_path):
    (tmp_path / "posts.json").write_text("{not json", encoding="utf-8")

    assert FileStore(tmp_path).read("posts") is None
    assert not (tmp_path / "posts.json").exists()
    [moved] = tmp_path.glob("posts.corrupt-*.json")
    assert moved.read_text(encoding="utf-8") == "{not json"


def test_truncated_ledger_survives_next_post(tmp_path):
    service = WallService(FileStore(tmp_path))
    service.register("ana", "Ana", "Gomez", "secret1")
    service.sign_in("ana", "secret1")
    for text in ("one", "two", "three"):
        service.create_post(text)
    ledger = tmp_path / "posts.json"
    original = ledger.read_text(encoding="utf-8")
    ledger.write_text(original[: len(original) // 2], encoding="utf-8")

    reloaded = WallService(FileStore(tmp_path))
    assert reloaded.create_post("new").ok

    [moved] = tmp_path.glob("posts.corrupt-*.json")
    assert moved.read_text(encoding="utf-8") == original[: len(original) // 2]
    assert [p["content"] for p in json.loads(ledger.read_text(encoding="utf-8"))] == ["new"]


def test_unserializable_value_is_storage_error(tmp_path):
    with pytest.raises(StorageUnavailable) as exc:
        FileStore(tmp_path).write("posts", {"when": object()})
    assert exc.value.kind is WallErrorKind.STORAGE_UNAVAILABLE


def test_write_to_missing_directory_is_storage_error(tmp_path):
    store = FileStore(tmp_path / "data")
    (tmp_path / "data").rmdir()
    with pytest.raises(StorageUnavailable):
        store.write("users", [])


@pytest.mark.parametrize("key", ["", "../users", "a/b", "users.json"])
def test_invalid_keys_rejected(tmp_path, key):
    with pytest.raises(ValueError):
        FileStore(tmp_path).read(key)


def test_memory_store_failing_mode():
    store = MemoryStore()
    store.write("users", [1, 2])
    store.fail_writes = True

    with pytest.raises(StorageUnavailable):
        store.write("users", [])
    with pytest.raises(StorageUnavailable):
        store.clear("users")
    assert store.read("users") == [1, 2]


def test_both_stores_satisfy_protocol(tmp_path):
    assert isinstance(FileStore(tmp_path), StoreProtocol)
    assert isinstance(MemoryStore(), StoreProtocol)
