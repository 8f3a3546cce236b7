"""Tests for the store backends and storage initialization."""

import pytest

from navportal import storage
from navportal.errors import UpstreamError
from navportal.models import Role


# ── FileStore ────────────────────────────────────────────────


async def test_file_store_missing_key(tmp_path):
    store = storage.FileStore(tmp_path)
    assert await store.get("nothing") is None


async def test_file_store_roundtrip(tmp_path):
    store = storage.FileStore(tmp_path)
    await store.put("site_config", {"title": "我的导航", "backgroundImages": []})
    assert await store.get("site_config") == {"title": "我的导航", "backgroundImages": []}
    assert (tmp_path / "site_config.json").is_file()
    assert not (tmp_path / "site_config.json.tmp").exists()


async def test_file_store_overwrite(tmp_path):
    store = storage.FileStore(tmp_path)
    await store.put("categories", [1, 2, 3])
    await store.put("categories", [4])
    assert await store.get("categories") == [4]


async def test_file_store_creates_directory(tmp_path):
    base = tmp_path / "nested" / "data"
    storage.FileStore(base)
    assert base.is_dir()


async def test_file_store_corrupt_file_raises_upstream(tmp_path):
    (tmp_path / "categories.json").write_text("{not json")
    store = storage.FileStore(tmp_path)
    with pytest.raises(UpstreamError):
        await store.get("categories")


async def test_file_store_unserializable_raises_upstream(tmp_path):
    store = storage.FileStore(tmp_path)
    with pytest.raises(UpstreamError):
        await store.put("categories", {"bad": object()})


# ── MemoryStore ──────────────────────────────────────────────


async def test_memory_store_copies_values():
    store = storage.MemoryStore()
    value = {"links": []}
    await store.put("k", value)
    value["links"].append("mutated")
    loaded = await store.get("k")
    assert loaded == {"links": []}
    loaded["links"].append("again")
    assert await store.get("k") == {"links": []}


async def test_memory_store_missing_key():
    assert await storage.MemoryStore().get("k") is None


# ── init_storage ─────────────────────────────────────────────


def test_init_storage_with_data_dir(tmp_path):
    store = storage.init_storage(tmp_path)
    assert isinstance(store, storage.FileStore)
    assert storage.get_store() is store


def test_init_storage_with_explicit_store(tmp_path):
    mem = storage.MemoryStore()
    assert storage.init_storage(tmp_path, store=mem) is mem
    assert storage.get_store() is mem


async def test_storage_on_disk_end_to_end(tmp_path):
    """Defaults land on disk on first read."""
    storage.init_storage(tmp_path)
    await storage.get_config()
    await storage.get_tree(Role.ADMIN)
    assert (tmp_path / "site_config.json").is_file()
    assert (tmp_path / "categories.json").is_file()
