"""Tests for core.storage."""

from pathlib import Path

from core.storage import FileStore, KeyValueStore, MemoryStore


def test_memory_store_set_get_delete() -> None:
    store = MemoryStore({"a": "1"})
    assert store.get("a") == "1"
    store.set("b", "2")
    store.set("a", None)
    assert store.get("a") is None
    assert store.snapshot() == {"b": "2"}


def test_stores_satisfy_protocol(tmp_path: Path) -> None:
    assert isinstance(MemoryStore(), KeyValueStore)
    assert isinstance(FileStore(tmp_path / "s.json"), KeyValueStore)


def test_file_store_persists_across_instances(tmp_path: Path) -> None:
    """A value written by one FileStore is read back by a fresh one on the same file."""
    path = tmp_path / "data" / "storage.json"
    FileStore(path).set("hexon_role", "educator")
    assert path.exists()
    assert FileStore(path).get("hexon_role") == "educator"
    assert not (tmp_path / "data" / "storage.json.tmp").exists()


def test_file_store_missing_file_reads_none(tmp_path: Path) -> None:
    assert FileStore(tmp_path / "nope.json").get("anything") is None


def test_file_store_ignores_corrupt_file(tmp_path: Path) -> None:
    """Corrupt JSON is treated as empty and replaced on the next write."""
    path = tmp_path / "storage.json"
    path.write_text("{not json", encoding="utf-8")
    store = FileStore(path)
    assert store.get("hexon_role") is None
    store.set("hexon_role", "student")
    assert FileStore(path).get("hexon_role") == "student"


def test_file_store_non_object_json_is_empty(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert FileStore(path).get("0") is None


def test_file_store_delete(tmp_path: Path) -> None:
    store = FileStore(tmp_path / "storage.json")
    store.set("k", "v")
    store.set("k", None)
    assert store.get("k") is None


def test_file_store_namespace_isolates_keys(tmp_path: Path) -> None:
    """Namespaced stores on one file do not see each other's keys."""
    path = tmp_path / "storage.json"
    alice = FileStore(path, namespace="alice")
    bob = FileStore(path, namespace="bob")
    alice.set("hexon_role", "educator")
    bob.set("hexon_role", "student")
    assert alice.get("hexon_role") == "educator"
    assert bob.get("hexon_role") == "student"
    assert FileStore(path).get("hexon_role") is None
